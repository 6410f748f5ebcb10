"""Data models and domain objects."""

from .domain_models import (
    DeviceFamilyConfig,
    DocumentRecord,
)

__all__ = [
    'DeviceFamilyConfig',
    'DocumentRecord',
]
