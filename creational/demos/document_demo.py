"""
Factory Method demo: read one record from CSV and JSON documents and print
it as JSON.
"""

from pathlib import Path
from typing import Iterable, List, Optional, Tuple
import logging

from creational.config.app_config import settings
from creational.documents import DocumentEditorFactory, DocumentType
from creational.models import DocumentRecord

logger = logging.getLogger(__name__)

DEFAULT_FILES: List[Tuple[str, DocumentType]] = [
    ("data.json", DocumentType.JSON),
    ("data.csv", DocumentType.CSV),
]


def run(files: Optional[Iterable[Tuple[str, DocumentType]]] = None,
        data_dir: Optional[Path] = None) -> List[DocumentRecord]:
    """Read every (file name, type) entry relative to ``data_dir``.

    Reader errors propagate; a failing file ends the demo. Records are
    logged at INFO, so nothing shows unless logging is configured.
    """
    data_dir = Path(data_dir or settings.DATA_DIR)
    records = []
    for file_name, doc_type in files if files is not None else DEFAULT_FILES:
        editor = DocumentEditorFactory.create_editor(data_dir / file_name, doc_type)
        record = editor.read_record()
        logger.info("file :: %s, record :: %s", file_name, record.to_json())
        records.append(record)
    return records
