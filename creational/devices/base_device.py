"""
Device Abstraction Layer
Capability interfaces for switchable IoT devices and the abstract factory
that produces a family-consistent set of them.
"""

from abc import ABC, abstractmethod
from enum import Enum, IntEnum
from typing import Union
import logging

from creational.core.exceptions import DeviceCommandError
from creational.models import DeviceFamilyConfig


class DeviceFamily(Enum):
    """Enumeration of supported device families."""
    SAMSUNG = "samsung"
    PHILIPS = "philips"

    @classmethod
    def parse(cls, value: Union["DeviceFamily", str]) -> "DeviceFamily":
        """Resolve an enum member from itself or a case-insensitive name."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown device family: {value!r}") from None


class FanSpeed(IntEnum):
    """Discrete fan speed levels; level 0 means the fan is off."""
    SPEED_0 = 0
    SPEED_1 = 1
    SPEED_2 = 2
    SPEED_3 = 3
    SPEED_4 = 4
    SPEED_5 = 5


class LightBulb(ABC):
    """Capability of a light bulb: query and switch on/off."""

    @abstractmethod
    def is_switched_on(self) -> bool:
        pass

    @abstractmethod
    def switch(self, command: bool) -> bool:
        """Set the bulb state; returns True once the command is applied."""
        pass


class Fan(ABC):
    """Capability of a fan: query and set a discrete speed."""

    @abstractmethod
    def is_switched_on(self) -> bool:
        pass

    @abstractmethod
    def switch(self, command: FanSpeed) -> bool:
        """Set the fan speed; returns True once the command is applied."""
        pass


class DeviceFactory(ABC):
    """
    Abstract factory for one device family.

    Every device it creates shares the family's immutable configuration.
    """

    family: DeviceFamily

    def __init__(self, config: DeviceFamilyConfig):
        self.config = config
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def create_light_bulb(self) -> LightBulb:
        pass

    @abstractmethod
    def create_fan(self) -> Fan:
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.config.brand} @ {self.config.endpoint()})"


# Shared state handling for the concrete families

class SimulatedLightBulb(LightBulb):
    """In-memory light bulb; switching is a plain state assignment."""

    def __init__(self, config: DeviceFamilyConfig):
        self.config = config
        self.state = False
        self.logger = logging.getLogger(self.__class__.__name__)

    def is_switched_on(self) -> bool:
        self.logger.info("state :: %s", repr(self))
        return self.state

    def switch(self, command: bool) -> bool:
        if not isinstance(command, bool):
            raise DeviceCommandError(f"Invalid light bulb command: {command!r}; expected True or False")
        self.logger.info("prev state :: %s", repr(self))
        self.state = command
        self.logger.info("new state :: %s", repr(self))
        return True

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(brand={self.config.brand!r}, "
                f"endpoint={self.config.endpoint()!r}, state={self.state})")


class SimulatedFan(Fan):
    """In-memory fan; "on" is derived from the speed, never stored."""

    def __init__(self, config: DeviceFamilyConfig):
        self.config = config
        self.state = FanSpeed.SPEED_0
        self.logger = logging.getLogger(self.__class__.__name__)

    def is_switched_on(self) -> bool:
        self.logger.info("state :: %s", repr(self))
        return self.state > FanSpeed.SPEED_0

    def switch(self, command: Union[FanSpeed, int]) -> bool:
        speed = self._coerce_speed(command)
        self.logger.info("prev state :: %s", repr(self))
        self.state = speed
        self.logger.info("new state :: %s", repr(self))
        return True

    @staticmethod
    def _coerce_speed(command: Union[FanSpeed, int]) -> FanSpeed:
        # bool is an int subclass but not a speed level
        if isinstance(command, bool) or not isinstance(command, int):
            raise DeviceCommandError(f"Invalid fan speed: {command!r}")
        try:
            return FanSpeed(command)
        except ValueError as e:
            raise DeviceCommandError(
                f"Invalid fan speed {command!r}; expected {FanSpeed.SPEED_0.value}-{FanSpeed.SPEED_5.value}"
            ) from e

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(brand={self.config.brand!r}, "
                f"endpoint={self.config.endpoint()!r}, state={self.state.name})")
