import csv

from creational.core.exceptions import DocumentParseError, DocumentReadError, RecordNotFoundError
from creational.documents.base_reader import DocumentReader, Source
from creational.models import DocumentRecord


class CsvDocumentReader(DocumentReader):
    """Header-mapped CSV reader; only the first data row is used."""

    def read_record(self, source: Source) -> DocumentRecord:
        try:
            with open(source, newline="", encoding="utf-8-sig") as f:
                reader = csv.DictReader(f)
                try:
                    row = next(reader, None)
                except (csv.Error, UnicodeDecodeError) as e:
                    raise DocumentParseError(f"{source}: {e}") from e
        except OSError as e:
            raise DocumentReadError(f"Cannot read {source}: {e}") from e

        if row is None:
            raise RecordNotFoundError("record not found")

        # short rows pad with None, extra columns are ignored
        if row.get("name") is None or row.get("age") is None:
            raise DocumentParseError(f"{source}: first row is missing name/age")

        self.logger.debug("First row of %s: %s", source, row)
        return DocumentRecord.from_row(row, coerce=True)
