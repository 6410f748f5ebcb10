"""
Abstract Factory demo: IoT light bulbs and fans bought from different
manufacturers, controlled through one family-agnostic API.
"""

from typing import Any, Dict, Iterable, List, Optional, Tuple
import logging

from creational.config.app_config import settings
from creational.devices import DeviceFamilyFactory, FanSpeed

logger = logging.getLogger(__name__)

FamilyEntry = Tuple[str, Any, Any]


def run(families: Optional[Iterable[FamilyEntry]] = None) -> List[Dict[str, Any]]:
    """Drive a light bulb and a fan for every (family, address, port) entry.

    State transitions go to the module loggers at INFO; call
    ``creational.config.logging_config.configure()`` first to see them.
    """
    results = []
    for family, address, port in families if families is not None else settings.device_families():
        factory = DeviceFamilyFactory.create(family, address, port)
        logger.info("Using %r", factory)

        light_bulb = factory.create_light_bulb()
        light_bulb.is_switched_on()
        light_bulb.switch(True)
        light_bulb_on = light_bulb.is_switched_on()

        fan = factory.create_fan()
        fan.is_switched_on()
        fan.switch(FanSpeed.SPEED_4)
        fan_on = fan.is_switched_on()

        results.append({
            "family": factory.config.brand,
            "light_bulb_on": light_bulb_on,
            "fan_on": fan_on,
        })
    return results
