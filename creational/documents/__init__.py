"""Document readers and the editor factory."""

from .base_reader import DocumentReader, DocumentType
from .csv_reader import CsvDocumentReader
from .json_reader import JsonDocumentReader
from .editor import DocumentEditor, DocumentEditorFactory

__all__ = [
    'DocumentReader',
    'DocumentType',
    'CsvDocumentReader',
    'JsonDocumentReader',
    'DocumentEditor',
    'DocumentEditorFactory'
]
