"""Access to Razer devices through their sysfs attribute files."""

from __future__ import annotations

import contextlib
import enum
import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from razertool.devices import (
    RAZER_VENDOR_ID,
    DeviceCapabilities,
    DeviceType,
    get_device_capabilities,
)

HID_DEVICES_ROOT = "/sys/bus/hid/devices"
_U16_MAX = 0xFFFF

PathLike = Union[str, "os.PathLike[str]"]


def _parse_u16(text: str, base: int = 10) -> int:
    value = int(text, base)
    if not 0 <= value <= _U16_MAX:
        raise ValueError(f"value out of range for 16 bits: {text!r}")
    return value


def _read_attribute(syspath: Path, attr: str) -> Optional[str]:
    try:
        data = (syspath / attr).read_bytes()
    except OSError:
        return None
    return data.decode().rstrip("\r\n")


@dataclass(frozen=True)
class Dpi:
    """A DPI setting, either a single value or separate X and Y values."""

    x: int
    y: Optional[int] = None

    def __str__(self) -> str:
        if self.y is None:
            return str(self.x)
        return f"({self.x}, {self.y})"


class Region(enum.Enum):
    BLANK = enum.auto()
    SCROLL = enum.auto()
    LOGO = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    BACKLIGHT = enum.auto()


class Effect(enum.Enum):
    NONE = enum.auto()
    CUSTOM = enum.auto()
    STATIC = enum.auto()
    WAVE = enum.auto()
    SPECTRUM = enum.auto()
    REACTIVE = enum.auto()
    BREATH = enum.auto()


@dataclass
class RazerDevice:
    """A Razer device found under the HID subsystem."""

    name: str
    syspath: Path
    capabilities: Optional[DeviceCapabilities] = None

    def __post_init__(self) -> None:
        self.syspath = Path(self.syspath)

    def _lacks(self, feature: str) -> bool:
        return self.capabilities is not None and not getattr(self.capabilities, feature)

    def read_attribute(self, attr: str) -> Optional[str]:
        """Return an attribute's text without its trailing newline, or None."""
        return _read_attribute(self.syspath, attr)

    def read_raw_attribute(self, attr: str) -> Optional[bytes]:
        """Return an attribute's raw bytes, or None if it cannot be read."""
        try:
            return (self.syspath / attr).read_bytes()
        except OSError:
            return None

    def write_attribute(self, attr: str, value: str) -> None:
        """Write text to an existing attribute; raises OSError on failure."""
        fd = os.open(self.syspath / attr, os.O_WRONLY)
        with os.fdopen(fd, "wb") as handle:
            handle.write(value.encode())

    def write_raw_attribute(self, attr: str, value: bytes) -> None:
        """Write raw bytes to an existing attribute, reporting the outcome."""
        path = self.syspath / attr
        try:
            fd = os.open(path, os.O_WRONLY)
        except OSError:
            print("Failed to write raw value for attribute")
            return
        print(f'Writing {list(value)} to "{path}"')
        with os.fdopen(fd, "wb") as handle:
            handle.write(value)

    @property
    def device_type(self) -> DeviceType:
        if self.capabilities is None:
            return DeviceType.UNKNOWN
        return self.capabilities.device_type

    @property
    def max_dpi(self) -> Optional[int]:
        if self.capabilities is None:
            return None
        return self.capabilities.max_dpi

    def read_dpi(self) -> Optional[Dpi]:
        if self._lacks("dpi"):
            return None
        value = self.read_attribute("dpi")
        if value is None:
            return None
        if self.capabilities is not None and self.capabilities.dpi_use_xy:
            xy = split_xy(value)
            return None if xy is None else Dpi(*xy)
        return Dpi(_parse_u16(value))

    def set_dpi(self, dpi: int) -> None:
        if self._lacks("dpi"):
            return
        self.write_raw_attribute("dpi", dpi.to_bytes(2, "big"))

    def set_dpi_xy(self, dpi_x: int, dpi_y: int) -> None:
        self.write_raw_attribute("dpi", dpi_x.to_bytes(2, "big") + dpi_y.to_bytes(2, "big"))

    def read_dpi_stages(self) -> Optional[tuple[int, list[tuple[int, int]]]]:
        """Return the active stage and the (x, y) DPI of every stage."""
        if self._lacks("dpi_stages"):
            return None
        data = self.read_raw_attribute("dpi_stages")
        if data is None:
            return None
        if not data:
            raise ValueError("dpi_stages attribute is empty")
        body = data[1:]
        stages = [
            (
                int.from_bytes(body[i : i + 2], "big"),
                int.from_bytes(body[i + 2 : i + 4], "big"),
            )
            for i in range(0, len(body) - len(body) % 4, 4)
        ]
        return data[0], stages

    def read_poll_rate(self) -> Optional[int]:
        if self._lacks("poll_rate"):
            return None
        value = self.read_attribute("poll_rate")
        return None if value is None else _parse_u16(value)

    def set_poll_rate(self, rate: int) -> None:
        if self._lacks("poll_rate"):
            return
        with contextlib.suppress(OSError):
            self.write_attribute("poll_rate", str(rate))

    def read_charge_level(self) -> Optional[int]:
        value = self.read_attribute("charge_level")
        return None if value is None else str_to_percent(value)

    def read_charge_status(self) -> Optional[bool]:
        value = self.read_attribute("charge_status")
        return None if value is None else value == "1"

    def read_low_battery_threshold(self) -> Optional[int]:
        value = self.read_attribute("charge_low_threshold")
        return None if value is None else str_to_percent(value)

    def set_low_battery_threshold(self, threshold: int) -> None:
        with contextlib.suppress(OSError):
            self.write_attribute("charge_low_threshold", percent_to_str(threshold))

    def read_idle_time(self) -> Optional[int]:
        value = self.read_attribute("device_idle_time")
        return None if value is None else _parse_u16(value)

    def set_idle_time(self, idle_time: int) -> None:
        with contextlib.suppress(OSError):
            self.write_attribute("device_idle_time", str(idle_time))


def get_devices(root: PathLike = HID_DEVICES_ROOT) -> list[RazerDevice]:
    """Find every Razer device under a HID devices directory."""
    result = []
    for entry in sorted(Path(root).iterdir()):
        vendor_id, device_id = parse_sysname(entry.name)
        if vendor_id != RAZER_VENDOR_ID:
            continue
        syspath = entry.resolve()
        name = _read_attribute(syspath, "device_type")
        if name is None:
            continue
        capabilities = get_device_capabilities(device_id)
        if capabilities is None:
            capabilities = guess_capabilities(syspath)
        elif capabilities.name != name:
            raise ValueError(
                f"device {entry.name} reports {name!r}, expected {capabilities.name!r}"
            )
        result.append(RazerDevice(name=name, syspath=syspath, capabilities=capabilities))
    return result


def guess_capabilities(syspath: PathLike) -> DeviceCapabilities:
    """Infer capabilities from which attribute files a device exposes."""
    path = Path(syspath)
    dpi_value = _read_attribute(path, "dpi")
    return DeviceCapabilities(
        name="UNKNOWN",
        device_type=DeviceType.MOUSE,
        dpi=dpi_value is not None,
        dpi_use_xy=dpi_value is not None and ":" in dpi_value,
        max_dpi=None,
        dpi_stages=_read_attribute(path, "dpi_stages") is not None,
        poll_rate=_read_attribute(path, "poll_rate") is not None,
        battery=_read_attribute(path, "charge_level") is not None,
    )


def parse_sysname(sysname: str) -> tuple[int, int]:
    """Split a HID sysname such as 'BUS:VENDOR:PRODUCT.N' into vendor and product ids."""
    parts = sysname.split(":")
    if len(parts) < 3:
        raise ValueError(f"malformed HID sysname: {sysname!r}")
    vendor_id = _parse_u16(parts[1], 16)
    device_id = _parse_u16(parts[2].split(".")[0], 16)
    return vendor_id, device_id


def str_to_percent(value: str) -> int:
    """Convert a 0-255 attribute value to a rounded percentage."""
    percent = math.floor(float(value) * 100.0 / 255.0 + 0.5)
    return max(0, min(percent, _U16_MAX))


def percent_to_str(value: int) -> str:
    """Convert a percentage to the 0-255 scale used by the driver."""
    return str(max(0, min(value * 255 // 100, _U16_MAX)))


def split_xy(value: str) -> Optional[tuple[int, int]]:
    """Parse an 'X:Y' pair, or return None if there is no separator."""
    parts = value.split(":")
    if len(parts) < 2:
        return None
    return _parse_u16(parts[0]), _parse_u16(parts[1])