"""
Centralised exception definitions for the creational factory demos.
All custom exceptions should inherit from CreationalDemoError.
"""

class CreationalDemoError(Exception):
    """Base class for every custom exception thrown by this project."""

class ConfigurationError(CreationalDemoError):
    """Raised when settings, a device family or a document type are invalid."""

class DeviceError(CreationalDemoError):
    """Generic failure inside a simulated device."""

class DeviceCommandError(DeviceError):
    """Raised when a device receives a command it cannot represent."""

class DocumentError(CreationalDemoError):
    """Generic failure inside a document reader."""

class DocumentReadError(DocumentError):
    """Raised when a document source cannot be opened or read."""

class DocumentParseError(DocumentError):
    """Raised when a document does not hold a well-formed record."""

class RecordNotFoundError(DocumentError):
    """Raised when a document source holds no data record."""
