"""Inspect and configure Razer peripherals through their Linux sysfs attributes."""

__version__ = "0.2.0"
__all__ = ["__version__"]