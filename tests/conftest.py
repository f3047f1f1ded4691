import os
from pathlib import Path

import pytest

from src.adapters.sqlite.migrator import apply_migrations
from src.adapters.sqlite.repos import SQLiteInvoiceRepo

PROJECT_ROOT = Path(__file__).parent.parent
MIGRATIONS_DIR = PROJECT_ROOT / "migrations"


@pytest.fixture
def test_data_dir(tmp_path):
    return str(tmp_path)


@pytest.fixture
def db_path(test_data_dir):
    """Migrated SQLite database in a temporary directory."""
    path = os.path.join(test_data_dir, "invoices.db")
    apply_migrations(path, MIGRATIONS_DIR)
    return path


@pytest.fixture
def invoice_repo(db_path):
    return SQLiteInvoiceRepo(db_path)
