"""
Document Abstraction Layer
Reader capability and the closed set of supported document types.
"""

from abc import ABC, abstractmethod
from enum import Enum
from os import PathLike
from typing import Union
import logging

from creational.models import DocumentRecord

Source = Union[str, PathLike]


class DocumentType(Enum):
    """Enumeration of supported document types."""
    CSV = "csv"
    JSON = "json"


class DocumentReader(ABC):
    """Stateless reader that extracts one record from a named source."""

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def read_record(self, source: Source) -> DocumentRecord:
        """Read the single record held by ``source``.

        Raises:
            DocumentReadError: the source cannot be opened or read
            DocumentParseError: the content does not match {name, age}
            RecordNotFoundError: the source holds no record
        """
        pass
