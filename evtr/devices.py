"""The list of discovered devices shown in the selector, with their labels."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, TypeVar

from evtr.discovery import DiscoveryResult

T = TypeVar("T")


@dataclass
class DeviceInfo:
    """An opened device together with its name and node path."""

    device: Any
    name: str
    path: Path


class SortOrder(Enum):
    """How the device list is ordered."""

    PATH = "path"
    NAME = "name"


def format_device_label(name: str, path: str | Path) -> str:
    return f"{name} ({path})"


def device_label(device: DeviceInfo) -> str:
    """Label shown for a device in the selector."""
    return format_device_label(device.name, device.path)


def catalog_parts_from_discovery(
    discovery: DiscoveryResult[T], label_for: Callable[[T], str]
) -> tuple[list[T], list[str], str | None]:
    """Devices, their labels and the discovery error message, if any."""
    error_message = discovery.error_message()
    devices = list(discovery.devices)
    labels = [label_for(device) for device in devices]
    return devices, labels, error_message


def take_selected_item(items: list[T], labels: list[str], index: int | None) -> T | None:
    """Remove and return the item at ``index``; the last item takes its place."""
    if index is None or index < 0 or index >= len(items):
        return None
    labels[index], labels[-1] = labels[-1], labels[index]
    labels.pop()
    items[index], items[-1] = items[-1], items[index]
    return items.pop()


def sort_entries(
    entries: list[tuple[T, str]], key: Callable[[T], Any]
) -> tuple[list[T], list[str]]:
    """Sort (item, label) pairs by the item's key and split them apart."""
    ordered = sorted(entries, key=lambda entry: key(entry[0]))
    return [item for item, _ in ordered], [label for _, label in ordered]


def _sort_key(sort: SortOrder) -> Callable[[DeviceInfo], tuple[Any, Any]]:
    if sort is SortOrder.NAME:
        return lambda device: (device.name, Path(device.path))
    return lambda device: (Path(device.path), device.name)


@dataclass
class DeviceCatalog:
    """Opened devices and their labels, kept in the same order."""

    devices: list[DeviceInfo] = field(default_factory=list)
    labels: list[str] = field(default_factory=list)

    @classmethod
    def from_discovery(
        cls, discovery: DiscoveryResult[DeviceInfo], sort: SortOrder
    ) -> tuple[DeviceCatalog, str | None]:
        """Build a sorted catalog and return it with the discovery error message."""
        devices, labels, error_message = catalog_parts_from_discovery(discovery, device_label)
        devices, labels = sort_entries(list(zip(devices, labels)), _sort_key(sort))
        return cls(devices, labels), error_message

    def label(self, index: int) -> str | None:
        if 0 <= index < len(self.labels):
            return self.labels[index]
        return None

    def take_selected(self, index: int | None) -> DeviceInfo | None:
        """Remove and return the selected device."""
        return take_selected_item(self.devices, self.labels, index)