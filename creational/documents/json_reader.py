import json

from creational.core.exceptions import DocumentParseError, DocumentReadError
from creational.documents.base_reader import DocumentReader, Source
from creational.models import DocumentRecord


class JsonDocumentReader(DocumentReader):
    """Reads the whole source as exactly one record object."""

    def read_record(self, source: Source) -> DocumentRecord:
        try:
            with open(source, encoding="utf-8") as f:
                file_data = f.read()
        except OSError as e:
            raise DocumentReadError(f"Cannot read {source}: {e}") from e
        except UnicodeDecodeError as e:
            raise DocumentParseError(f"{source}: {e}") from e

        try:
            data = json.loads(file_data)
        except json.JSONDecodeError as e:
            raise DocumentParseError(f"{source}: {e}") from e

        if not isinstance(data, dict):
            raise DocumentParseError(f"{source}: expected a JSON object, got {type(data).__name__}")

        self.logger.debug("Parsed %s: %s", source, data)
        return DocumentRecord.from_row(data)
