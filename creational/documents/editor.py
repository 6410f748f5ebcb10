from dataclasses import dataclass
from typing import Dict, List, Type
import logging

from creational.core.exceptions import ConfigurationError
from creational.documents.base_reader import DocumentReader, DocumentType, Source
from creational.documents.csv_reader import CsvDocumentReader
from creational.documents.json_reader import JsonDocumentReader
from creational.models import DocumentRecord

logger = logging.getLogger(__name__)


@dataclass
class DocumentEditor:
    """A named source bound to the reader that understands its format."""
    source: Source
    reader: DocumentReader

    def read_record(self) -> DocumentRecord:
        return self.reader.read_record(self.source)


class DocumentEditorFactory:
    """Factory method for document readers and editors"""

    _reader_registry: Dict[DocumentType, Type[DocumentReader]] = {
        DocumentType.CSV: CsvDocumentReader,
        DocumentType.JSON: JsonDocumentReader,
    }

    @classmethod
    def register_reader(cls, doc_type: DocumentType, reader_class: Type[DocumentReader]):
        """Register new reader for a document type"""
        cls._reader_registry[doc_type] = reader_class

    @classmethod
    def create_reader(cls, doc_type: DocumentType) -> DocumentReader:
        if not isinstance(doc_type, DocumentType):
            raise ConfigurationError(f"Unknown document type: {doc_type!r}")
        reader_class = cls._reader_registry.get(doc_type)
        if reader_class is None:
            raise ConfigurationError(f"No reader registered for document type: {doc_type.value}")
        return reader_class()

    @classmethod
    def create_editor(cls, source: Source, doc_type: DocumentType) -> DocumentEditor:
        """Create an editor reading ``source`` with the reader for ``doc_type``"""
        reader = cls.create_reader(doc_type)
        logger.debug("Editor for %s uses %s", source, reader.__class__.__name__)
        return DocumentEditor(source=source, reader=reader)

    @classmethod
    def get_available_types(cls) -> List[str]:
        """Get list of supported document types"""
        return [doc_type.value for doc_type in cls._reader_registry]
