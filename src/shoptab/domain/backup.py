"""Import and export of the customer collection as a JSON document."""

import logging
from pathlib import Path
from typing import Any

import simplejson

from shoptab.database.mappers import customer_from_record, customer_to_record
from shoptab.domain.errors import ImportFormatError
from shoptab.domain.ledger import LedgerService

logger = logging.getLogger(__name__)

DEFAULT_BACKUP_FILENAME = "credit-customers-backup.json"


class BackupService:
    """Service for exporting and restoring every customer at once."""

    def __init__(self, ledger: LedgerService):
        """Initialize backup service.

        Args:
            ledger: LedgerService owning the collection
        """
        self.ledger = ledger

    def export_document(self) -> list[dict[str, Any]]:
        """Return the full collection as a list of JSON records."""
        return [customer_to_record(c) for c in self.ledger.list_customers()]

    def export_json(self) -> str:
        """Return the full collection serialized as a JSON array."""
        return simplejson.dumps(self.export_document(), use_decimal=True, ensure_ascii=False)

    def write_backup(self, path: str | Path) -> int:
        """Write the collection to a UTF-8 JSON file.

        Args:
            path: Destination file

        Returns:
            Number of customers written
        """
        document = self.export_document()
        text = simplejson.dumps(document, use_decimal=True, ensure_ascii=False)
        Path(path).write_text(text, encoding="utf-8")
        logger.info(f"Exported {len(document)} customers to {path}")
        return len(document)

    def parse_document(self, text: str) -> list[Any]:
        """Parse backup text into a list of records.

        Raises:
            ImportFormatError: If text is not valid JSON or not a JSON array
        """
        try:
            document = simplejson.loads(text, use_decimal=True)
        except simplejson.JSONDecodeError as e:
            raise ImportFormatError(f"Error importing data: {e}")
        if not isinstance(document, list):
            raise ImportFormatError("Invalid data format: expected a JSON array of customers")
        return document

    def read_backup(self, path: str | Path) -> list[Any]:
        """Read and parse a backup file.

        Raises:
            ImportFormatError: If the file content is not a JSON array
        """
        return self.parse_document(Path(path).read_text(encoding="utf-8"))

    def import_document(self, document: Any) -> int:
        """Replace the collection with the records in document.

        Records are mapped as-is; phone numbers are not checked for
        duplicates. Nothing changes if any record cannot be mapped.

        Args:
            document: Parsed JSON value, must be a list

        Returns:
            Number of customers imported

        Raises:
            ImportFormatError: If document is not a list or a record is unusable
        """
        if not isinstance(document, list):
            raise ImportFormatError("Invalid data format: expected a JSON array of customers")

        customers = [customer_from_record(record) for record in document]
        self.ledger.replace_all(customers)
        logger.info(f"Imported {len(customers)} customers")
        return len(customers)
