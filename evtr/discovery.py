"""Scanning of the input device directory and classification of what went wrong."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Generic, TypeVar, Union

T = TypeVar("T")

INPUT_DIR = "/dev/input"
INPUT_EVENT_PREFIX = "event"
NO_DEVICES_MESSAGE = "no input devices found"


class IssueKind(Enum):
    """Category of a discovery problem."""

    READ_DIR = "read_dir"
    PERMISSION_DENIED = "permission_denied"
    OPEN_FAILED = "open_failed"
    NO_DEVICES_FOUND = "no_devices_found"


@dataclass(frozen=True)
class DiscoveryIssue:
    """Why discovery produced no usable devices."""

    kind: IssueKind
    path: Path | None = None
    detail: str = ""
    skipped: int = 0

    def message(self) -> str:
        """Text shown to the user for this issue."""
        if self.kind is IssueKind.READ_DIR:
            return f"unable to read {self.path}: {self.detail}"
        if self.kind is IssueKind.PERMISSION_DENIED:
            return (
                f"found {self.skipped} input device node(s), but none were readable; "
                "check permissions for /dev/input/event*"
            )
        if self.kind is IssueKind.OPEN_FAILED:
            return (
                f"found {self.skipped} input device node(s), but none could be opened; "
                f"first error: {self.path}: {self.detail}"
            )
        return NO_DEVICES_MESSAGE


def _error_text(error: OSError) -> str:
    return error.strerror if error.strerror else str(error)


@dataclass
class _SampledFailures:
    count: int = 0
    first: tuple[Path, str] | None = None

    def record(self, path: str | os.PathLike[str], error: OSError) -> None:
        self.count += 1
        if self.first is None:
            self.first = (Path(path), _error_text(error))

    def first_read_dir_issue(self) -> DiscoveryIssue | None:
        if self.first is None:
            return None
        path, detail = self.first
        return DiscoveryIssue(IssueKind.READ_DIR, path=path, detail=detail)

    def first_open_failed_issue(self, skipped: int) -> DiscoveryIssue | None:
        if self.first is None:
            return None
        path, detail = self.first
        return DiscoveryIssue(IssueKind.OPEN_FAILED, path=path, detail=detail, skipped=skipped)


@dataclass
class _OpenFailures:
    permission_denied: int = 0
    other: _SampledFailures = field(default_factory=_SampledFailures)

    def record(self, path: str | os.PathLike[str], error: OSError) -> None:
        if isinstance(error, PermissionError):
            self.permission_denied += 1
        else:
            self.other.record(path, error)

    def total(self) -> int:
        return self.permission_denied + self.other.count

    def issue(self) -> DiscoveryIssue | None:
        skipped = self.total()
        if skipped == 0:
            return None
        if self.other.count == 0:
            return DiscoveryIssue(IssueKind.PERMISSION_DENIED, skipped=skipped)
        return self.other.first_open_failed_issue(skipped) or DiscoveryIssue(
            IssueKind.NO_DEVICES_FOUND
        )


@dataclass
class DiscoveryResult(Generic[T]):
    """Devices found during a scan, with counts of what could not be read or opened."""

    devices: list[T] = field(default_factory=list)
    _event_nodes: int = 0
    _read_dir_failures: _SampledFailures = field(default_factory=_SampledFailures)
    _open_failures: _OpenFailures = field(default_factory=_OpenFailures)

    @classmethod
    def read_dir_failed(cls, path: str | os.PathLike[str], error: OSError) -> DiscoveryResult[T]:
        """A result for a directory that could not be listed at all."""
        result: DiscoveryResult[T] = cls()
        result.record_read_dir_error(path, error)
        return result

    def record_event_node(self) -> None:
        self._event_nodes += 1

    def record_read_dir_error(self, path: str | os.PathLike[str], error: OSError) -> None:
        self._read_dir_failures.record(path, error)

    def record_open_error(self, path: str | os.PathLike[str], error: OSError) -> None:
        self._open_failures.record(path, error)

    def push_device(self, device: T) -> None:
        self.devices.append(device)

    def issue(self) -> DiscoveryIssue | None:
        """The problem to report, or None when any device was found."""
        if self.devices:
            return None
        if self._event_nodes == 0:
            return self._read_dir_failures.first_read_dir_issue() or DiscoveryIssue(
                IssueKind.NO_DEVICES_FOUND
            )
        open_issue = self._open_failures.issue()
        if open_issue is not None:
            return open_issue
        return self._read_dir_failures.first_read_dir_issue()

    def error_message(self) -> str | None:
        issue = self.issue()
        return issue.message() if issue is not None else None

    def event_nodes(self) -> int:
        return self._event_nodes

    def total_open_failures(self) -> int:
        return self._open_failures.total()

    def read_dir_failures(self) -> int:
        return self._read_dir_failures.count


Entry = Union[Path, OSError]


def is_event_node(path: str | os.PathLike[str]) -> bool:
    """Whether the file name marks an event device node."""
    name = Path(path).name
    return bool(name) and name.startswith(INPUT_EVENT_PREFIX)


def _discover(
    entries: Iterable[Entry],
    open_device: Callable[[Path], T],
    input_dir: str | os.PathLike[str],
) -> DiscoveryResult[T]:
    result: DiscoveryResult[T] = DiscoveryResult()
    for entry in entries:
        if isinstance(entry, OSError):
            result.record_read_dir_error(input_dir, entry)
            continue
        path = Path(entry)
        if not is_event_node(path):
            continue
        result.record_event_node()
        try:
            device = open_device(path)
        except OSError as error:
            result.record_open_error(path, error)
        else:
            result.push_device(device)
    return result


def discover_from_entries(
    entries: Iterable[Entry], open_device: Callable[[Path], T]
) -> DiscoveryResult[T]:
    """Open every event node among ``entries``; OSError entries count as listing failures."""
    return _discover(entries, open_device, INPUT_DIR)


def _listing(iterator: Iterator[os.DirEntry[str]]) -> Iterator[Entry]:
    with iterator:  # type: ignore[attr-defined]
        try:
            for entry in iterator:
                yield Path(entry.path)
        except OSError as error:
            yield error


def discover_devices(
    open_device: Callable[[Path], T], input_dir: str | os.PathLike[str] = INPUT_DIR
) -> DiscoveryResult[T]:
    """Scan ``input_dir`` and open each event node with ``open_device``."""
    try:
        iterator = os.scandir(input_dir)
    except OSError as error:
        return DiscoveryResult.read_dir_failed(input_dir, error)
    return _discover(_listing(iterator), open_device, input_dir)