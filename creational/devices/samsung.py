from creational.devices.base_device import (
    DeviceFactory,
    DeviceFamily,
    SimulatedFan,
    SimulatedLightBulb,
)


class SamsungLightBulb(SimulatedLightBulb):
    """Samsung light bulb."""


class SamsungFan(SimulatedFan):
    """Samsung fan."""


class SamsungDeviceFactory(DeviceFactory):
    """Creates Samsung devices sharing one Samsung configuration."""

    family = DeviceFamily.SAMSUNG

    def create_light_bulb(self) -> SamsungLightBulb:
        self.logger.debug("Creating light bulb for %s", self.config.endpoint())
        return SamsungLightBulb(self.config)

    def create_fan(self) -> SamsungFan:
        self.logger.debug("Creating fan for %s", self.config.endpoint())
        return SamsungFan(self.config)
