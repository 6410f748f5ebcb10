"""Creational design-pattern demos - Main Package"""

__version__ = '1.0.0'
__description__ = 'Abstract Factory and Factory Method demos for IoT devices and documents'

# Core - exceptions shared by every demo
from .core import CreationalDemoError, ConfigurationError

# Models - domain objects
from .models import DeviceFamilyConfig, DocumentRecord

# Devices (abstract factory)
from .devices import DeviceFamilyFactory, DeviceFamily, FanSpeed

# Documents (factory method)
from .documents import DocumentEditorFactory, DocumentType

__all__ = [
    # Core
    'CreationalDemoError',
    'ConfigurationError',

    # Models
    'DeviceFamilyConfig',
    'DocumentRecord',

    # Factories
    'DeviceFamilyFactory',
    'DeviceFamily',
    'FanSpeed',
    'DocumentEditorFactory',
    'DocumentType',
]
