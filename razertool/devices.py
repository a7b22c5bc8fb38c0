"""Known Razer devices and the capabilities they expose."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

RAZER_VENDOR_ID = 0x1532


class DeviceType(enum.Enum):
    """Broad category of a peripheral."""

    UNKNOWN = "unknown"
    MOUSE = "mouse"
    KEYBOARD = "keyboard"
    HEADPHONES = "headphones"
    MOUSEPAD = "mousepad"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class DeviceCapabilities:
    """What a device supports, as far as this tool is concerned."""

    name: str
    device_type: DeviceType = DeviceType.UNKNOWN
    dpi: bool = False
    dpi_use_xy: bool = False
    max_dpi: Optional[int] = None
    dpi_stages: bool = False
    poll_rate: bool = False
    battery: bool = False


def _mouse(name: str, max_dpi: int) -> DeviceCapabilities:
    return DeviceCapabilities(
        name=name,
        device_type=DeviceType.MOUSE,
        dpi=True,
        dpi_use_xy=True,
        max_dpi=max_dpi,
        dpi_stages=True,
        poll_rate=True,
        battery=True,
    )


_DEVICE_CAPABILITIES: dict[int, DeviceCapabilities] = {
    0x007A: _mouse("Razer Viper Ultimate (Wired)", 20000),
    0x007B: _mouse("Razer Viper Ultimate (Wireless)", 20000),
    0x00B6: _mouse("Razer DeathAdder V3 Pro (Wired)", 35000),
    0x00B7: _mouse("Razer DeathAdder V3 Pro (Wireless)", 35000),
}


def get_device_capabilities(device_id: int) -> Optional[DeviceCapabilities]:
    """Return the known capabilities for a product id, or None if unknown."""
    return _DEVICE_CAPABILITIES.get(device_id)