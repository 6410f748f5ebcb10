from creational.devices.base_device import (
    DeviceFactory,
    DeviceFamily,
    SimulatedFan,
    SimulatedLightBulb,
)


class PhilipsLightBulb(SimulatedLightBulb):
    """Philips light bulb."""


class PhilipsFan(SimulatedFan):
    """Philips fan."""


class PhilipsDeviceFactory(DeviceFactory):
    """Creates Philips devices sharing one Philips configuration."""

    family = DeviceFamily.PHILIPS

    def create_light_bulb(self) -> PhilipsLightBulb:
        self.logger.debug("Creating light bulb for %s", self.config.endpoint())
        return PhilipsLightBulb(self.config)

    def create_fan(self) -> PhilipsFan:
        self.logger.debug("Creating fan for %s", self.config.endpoint())
        return PhilipsFan(self.config)
