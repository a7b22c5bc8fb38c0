"""Command line interface for inspecting and configuring Razer devices."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Optional, Sequence

from razertool.device import RazerDevice, get_devices
from razertool.devices import DeviceType

_VERSION = "0.2.0"
_U16_MAX = 0xFFFF


def _u16(text: str) -> int:
    try:
        value = int(text, 10)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid digit found in string: {text!r}") from None
    if not 0 <= value <= _U16_MAX:
        raise argparse.ArgumentTypeError(f"{value} is not in 0..={_U16_MAX}")
    return value


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


@dataclass(frozen=True)
class Args:
    """Parsed command line options."""

    device: Optional[str] = None
    battery: bool = False
    low_battery_threshold: Optional[int] = None
    idle_delay: Optional[int] = None
    dpi: Optional[int] = None
    poll: Optional[int] = None
    list: bool = False
    syspath: bool = False

    def device_match(self, device_name: str) -> bool:
        """True when no device was specified or the name matches it exactly."""
        return self.device is None or self.device == device_name


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="razertool",
        description="A simple CLI tool to interact with Razer device peripherals",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {_VERSION}")
    parser.add_argument("-d", "--device", help="Specify device")
    parser.add_argument("-b", "--battery", action="store_true", help="Print battery info")
    parser.add_argument(
        "--low-battery-threshold", type=_u16, help="Set low battery blink threshold"
    )
    parser.add_argument("-i", "--idle-delay", type=_u16, help="Set idle delay")
    parser.add_argument("--dpi", type=_u16, help="Change dpi")
    parser.add_argument("--poll", type=_u16, help="Change polling rate")
    parser.add_argument(
        "-l", "--list", action="store_true", help="List all devices and their settings"
    )
    parser.add_argument("-s", "--syspath", action="store_true", help="Print syspath")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> Args:
    """Parse command line arguments; exits with status 2 on invalid input."""
    namespace = _build_parser().parse_args(argv)
    return Args(
        device=namespace.device,
        battery=namespace.battery,
        low_battery_threshold=namespace.low_battery_threshold,
        idle_delay=namespace.idle_delay,
        dpi=namespace.dpi,
        poll=namespace.poll,
        list=namespace.list,
        syspath=namespace.syspath,
    )


def print_battery(device: RazerDevice) -> None:
    """Print the charge level and charging state, if the device reports them."""
    charge_level = device.read_charge_level()
    charge_status = device.read_charge_status()
    if charge_level is None and charge_status is None:
        return
    print(f"{device.name} Battery:")
    if charge_level is not None:
        print(f"    charge: {charge_level}")
    if charge_status is not None:
        print(f"    charging: {_format_bool(charge_status)}")


def print_everything(device: RazerDevice) -> None:
    """Print every known setting of a device."""
    device_type = device.device_type
    print(f"{device.name}: ")
    print(f"    type: {device_type}")

    if device_type is not DeviceType.MOUSE:
        raise ValueError(f"unsupported device type: {device_type}")

    print("    Mouse settings")
    dpi = device.read_dpi()
    if dpi is not None:
        print(f"        DPI: {dpi}")
    max_dpi = device.max_dpi
    if max_dpi is not None:
        print(f"        max DPI: {max_dpi}")
    stages = device.read_dpi_stages()
    if stages is not None:
        print(f"        DPI stages: {stages!r}")
    poll_rate = device.read_poll_rate()
    if poll_rate is not None:
        print(f"        polling rate: {poll_rate}")

    charge_level = device.read_charge_level()
    charge_status = device.read_charge_status()
    if charge_level is None and charge_status is None:
        return
    print("    Battery:")
    if charge_level is not None:
        print(f"        charge: {charge_level}")
    if charge_status is not None:
        print(f"        charging: {_format_bool(charge_status)}")
    threshold = device.read_low_battery_threshold()
    if threshold is not None:
        print(f"        low battery threshold: {threshold}")
    idle_time = device.read_idle_time()
    if idle_time is not None:
        print(f"        idle time: {idle_time}")


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Run the command line tool."""
    print("Rusty Razer tool!")
    args = parse_args(argv)
    devices = get_devices()

    for device in devices:
        if not args.device_match(device.name):
            continue
        if args.battery:
            print_battery(device)
        if args.low_battery_threshold is not None:
            device.set_low_battery_threshold(args.low_battery_threshold)
        if args.idle_delay is not None:
            device.set_idle_time(args.idle_delay)
        if args.dpi is not None:
            device.set_dpi(args.dpi)
        if args.poll is not None:
            device.set_poll_rate(args.poll)
        if args.syspath:
            print(device.syspath)

    if args.list:
        for device in devices:
            if device.device_type is not DeviceType.UNKNOWN:
                print_everything(device)


if __name__ == "__main__":
    main()