"""Device capabilities, family factories and the family registry."""

from .base_device import (
    DeviceFactory,
    DeviceFamily,
    Fan,
    FanSpeed,
    LightBulb,
)
from .samsung import SamsungDeviceFactory, SamsungFan, SamsungLightBulb
from .philips import PhilipsDeviceFactory, PhilipsFan, PhilipsLightBulb
from .family_factory import DeviceFamilyFactory

__all__ = [
    # Capabilities
    'LightBulb',
    'Fan',
    'FanSpeed',
    'DeviceFactory',
    'DeviceFamily',

    # Families
    'SamsungDeviceFactory',
    'SamsungLightBulb',
    'SamsungFan',
    'PhilipsDeviceFactory',
    'PhilipsLightBulb',
    'PhilipsFan',

    # Factory
    'DeviceFamilyFactory'
]
