"""Runnable drivers for the factory demos."""

from . import device_demo, document_demo

__all__ = ['device_demo', 'document_demo']
