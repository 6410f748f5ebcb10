# creational/core/__init__.py
"""Core infrastructure shared by both factory demos."""

from .exceptions import (
    CreationalDemoError,
    ConfigurationError,
    DeviceError,
    DeviceCommandError,
    DocumentError,
    DocumentReadError,
    DocumentParseError,
    RecordNotFoundError,
)


__all__ = [
    "CreationalDemoError",       # make available at package root
    "ConfigurationError",
    "DeviceError",
    "DeviceCommandError",
    "DocumentError",
    "DocumentReadError",
    "DocumentParseError",
    "RecordNotFoundError",
]
