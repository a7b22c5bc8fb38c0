import dataclasses

import pytest

from razertool.devices import (
    DeviceCapabilities,
    DeviceType,
    get_device_capabilities,
)


def test_known_wireless_viper():
    caps = get_device_capabilities(0x007B)
    assert caps.name == "Razer Viper Ultimate (Wireless)"
    assert caps.max_dpi == 20000
    assert caps.device_type is DeviceType.MOUSE


def test_known_deathadder_wired():
    caps = get_device_capabilities(0x00B6)
    assert caps.name == "Razer DeathAdder V3 Pro (Wired)"
    assert caps.max_dpi == 35000


@pytest.mark.parametrize("device_id", [0x007A, 0x007B, 0x00B6, 0x00B7])
def test_known_devices_support_everything(device_id):
    caps = get_device_capabilities(device_id)
    assert caps.dpi and caps.dpi_use_xy and caps.dpi_stages
    assert caps.poll_rate and caps.battery


@pytest.mark.parametrize("device_id", [0x0000, 0x1532, 0xFFFF])
def test_unknown_device_returns_none(device_id):
    assert get_device_capabilities(device_id) is None


def test_device_type_display():
    assert str(get_device_capabilities(0x007A).device_type) == "mouse"
    assert str(DeviceCapabilities(name="x").device_type) == "unknown"
    assert [str(t) for t in DeviceType] == [
        "unknown",
        "mouse",
        "keyboard",
        "headphones",
        "mousepad",
    ]


def test_capabilities_defaults_are_unknown_type():
    caps = DeviceCapabilities(name="x")
    assert caps.device_type is DeviceType.UNKNOWN
    assert caps.max_dpi is None


def test_capabilities_are_immutable():
    caps = get_device_capabilities(0x007A)
    with pytest.raises(dataclasses.FrozenInstanceError):
        caps.max_dpi = 1
    assert caps.max_dpi == 20000
    assert get_device_capabilities(0x007A).max_dpi == 20000