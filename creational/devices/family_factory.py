from typing import Any, Dict, List, Type, Union
import logging

from creational.core.exceptions import ConfigurationError
from creational.devices.base_device import DeviceFactory, DeviceFamily
from creational.devices.philips import PhilipsDeviceFactory
from creational.devices.samsung import SamsungDeviceFactory
from creational.models import DeviceFamilyConfig

logger = logging.getLogger(__name__)


class DeviceFamilyFactory:
    """Selects the abstract factory implementation for a device family."""

    _registry: Dict[DeviceFamily, Type[DeviceFactory]] = {
        factory_class.family: factory_class
        for factory_class in (SamsungDeviceFactory, PhilipsDeviceFactory)
    }

    @classmethod
    def register_family(cls, factory_class: Type[DeviceFactory]):
        """Register (or replace) the factory for the family it declares"""
        cls._registry[factory_class.family] = factory_class

    @classmethod
    def create(cls, family: Union[DeviceFamily, str], address: Any, port: Any) -> DeviceFactory:
        """
        Create the device factory for a family.

        Args:
            family: DeviceFamily member or its name ('Samsung', 'Philips')
            address: IP address (string or ipaddress object), metadata only
            port: TCP port, metadata only

        Returns:
            DeviceFactory: factory whose devices share one DeviceFamilyConfig

        Raises:
            ConfigurationError: unknown family or invalid address/port
        """
        try:
            member = DeviceFamily.parse(family)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e

        handler = cls._registry.get(member)
        if not handler:
            raise ConfigurationError(f"No factory registered for device family: {member.value}")

        config = DeviceFamilyConfig.from_row({"brand": member.name.title(), "address": address, "port": port})
        logger.debug("Creating %s for %s", handler.__name__, config.endpoint())
        return handler(config)

    @classmethod
    def get_available_families(cls) -> List[str]:
        """Get list of registered family names"""
        return [family.value for family in cls._registry]
