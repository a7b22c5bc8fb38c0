# razertool

A small command-line tool for reading and changing the settings of Razer
peripherals on Linux. It works through the sysfs attribute files that the
Razer kernel driver exposes for each device under `/sys/bus/hid/devices`.
That driver must be loaded, and the attribute files must be writable by
your user for settings to be changed.

## Installation

```
pip install .
```

No third-party libraries are needed.

## Usage

List every detected device with its settings:

```
razertool --list
```

Show battery information:

```
razertool --battery
```

Change settings, either for all devices or for one device named exactly as
the driver reports it:

```
razertool --device "Razer Viper Ultimate (Wireless)" --dpi 1600
razertool --poll 1000
razertool --idle-delay 300
razertool --low-battery-threshold 10
```

Print the sysfs path of each device:

```
razertool --syspath
```

Options:

| Option | Meaning |
| --- | --- |
| `-d`, `--device NAME` | Only act on the device with this name |
| `-b`, `--battery` | Print battery charge (percent) and charging state |
| `--low-battery-threshold N` | Set the low-battery threshold, given in percent |
| `-i`, `--idle-delay N` | Set the device idle time |
| `--dpi N` | Set the DPI |
| `--poll N` | Set the polling rate |
| `-l`, `--list` | List all devices and their settings |
| `-s`, `--syspath` | Print each device's sysfs path |
| `-V`, `--version` | Print the version and exit |

Numeric values must lie between 0 and 65535. The tool prints a short banner
line first; when it writes the DPI it also reports the bytes written and the
file, or that the write failed. Setting the DPI or polling rate is skipped
for devices known not to support it.

## Library use

```python
from razertool.device import get_devices

for device in get_devices():
    print(device.name, device.read_dpi(), device.read_charge_level())
```

`get_devices` scans `/sys/bus/hid/devices` by default; another directory can
be passed as its argument. Each `RazerDevice` offers `read_dpi`,
`read_dpi_stages`, `read_poll_rate`, `read_charge_level`,
`read_charge_status`, `read_low_battery_threshold` and `read_idle_time`, the
matching setters `set_dpi`, `set_dpi_xy`, `set_poll_rate`,
`set_low_battery_threshold` and `set_idle_time`, and the `device_type` and
`max_dpi` properties.

Known models and their capabilities can be looked up with
`razertool.devices.get_device_capabilities`. For models not in that table,
`razertool.device.guess_capabilities` infers them from the attribute files
the device offers; such devices are treated as mice.

## What it does not do

- Lighting is not supported: the `Region` and `Effect` enums name lighting
  regions and effects, but nothing reads or changes them.
- `--list` only knows how to show mice; any other device type stops it
  with an error.
- Only four models (Viper Ultimate and DeathAdder V3 Pro, wired and
  wireless) have a known maximum DPI.