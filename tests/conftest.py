"""Shared pytest fixtures for shoptab tests."""

import tempfile
import os
from pathlib import Path
import pytest

from shoptab.database.factories import create_sqlite_store
from shoptab.domain.backup import BackupService
from shoptab.domain.ledger import LedgerService
from shoptab.domain.template import TemplateService


@pytest.fixture
def temp_db():
    """Create a temporary store for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_store(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def ledger(temp_db):
    """Create a LedgerService with a temporary store."""
    return LedgerService(temp_db)


@pytest.fixture
def template_service(temp_db):
    """Create a TemplateService with a temporary store."""
    return TemplateService(temp_db)


@pytest.fixture
def backup_service(ledger):
    """Create a BackupService over the temporary ledger."""
    return BackupService(ledger)


@pytest.fixture
def sample_customer(ledger):
    """Create a sample customer owing 100."""
    return ledger.add_customer(name="John Doe", phone="5551234", outstanding_amount="100")


@pytest.fixture
def sample_customers(ledger):
    """Create a few customers for search tests."""
    return [
        ledger.add_customer(name="John Doe", phone="5551234", outstanding_amount="100"),
        ledger.add_customer(name="Mary Jones", phone="5559876", outstanding_amount="25.50"),
        ledger.add_customer(name="Ahmed Ali", phone="0712345678", outstanding_amount="0"),
    ]


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"
