"""Device identity and the info lines shown in the device info popup."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum


class BusType(IntEnum):
    """Bus types a device can be attached through."""

    BUS_PCI = 0x01
    BUS_ISAPNP = 0x02
    BUS_USB = 0x03
    BUS_HIL = 0x04
    BUS_BLUETOOTH = 0x05
    BUS_VIRTUAL = 0x06
    BUS_ISA = 0x10
    BUS_I8042 = 0x11
    BUS_XTKBD = 0x12
    BUS_RS232 = 0x13
    BUS_GAMEPORT = 0x14
    BUS_PARPORT = 0x15
    BUS_AMIGA = 0x16
    BUS_ADB = 0x17
    BUS_I2C = 0x18
    BUS_HOST = 0x19
    BUS_GSC = 0x1A
    BUS_ATARI = 0x1B
    BUS_SPI = 0x1C
    BUS_RMI = 0x1D
    BUS_CEC = 0x1E
    BUS_INTEL_ISHTP = 0x1F


@dataclass(frozen=True)
class InputId:
    """Bus, vendor, product and version identifying an input device."""

    bus_type: int
    vendor: int
    product: int
    version: int


def device_info_lines(
    driver_version: tuple[int, int, int],
    input_id: InputId,
    phys: str | None,
    startup_warnings: Iterable[str],
) -> list[str]:
    """Driver version, device id and physical path lines, then any startup warnings."""
    major, minor, patch = driver_version
    bus = int(input_id.bus_type)
    lines = [
        f"Input driver version: {major}.{minor}.{patch}",
        f"Input device ID: bus {bus:#x}, vendor {input_id.vendor:#x}, "
        f"product {input_id.product:#x}, version {input_id.version:#x}",
        f"Input device phys: {phys if phys is not None else 'n/a'}",
    ]
    lines.extend(f"Startup warning: {warning}" for warning in startup_warnings)
    return lines