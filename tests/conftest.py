"""
Test fixtures and shared setup.

The engine is pure: no database, no network. Fixtures hand out the
process-wide catalog, a fresh ledger per test, and an API client.
"""

import os

import pytest
from fastapi.testclient import TestClient

# ── Override settings BEFORE importing app modules ────────────────────────────
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from feeledger.catalog.registry import ServiceCatalog, get_catalog
from feeledger.main import app
from feeledger.services.ledger.selection_ledger import SelectionLedger


@pytest.fixture(scope="session")
def catalog() -> ServiceCatalog:
    return get_catalog()


@pytest.fixture
def ledger(catalog) -> SelectionLedger:
    return SelectionLedger(catalog)


@pytest.fixture
def client() -> TestClient:
    with TestClient(app) as c:
        yield c


# ── Data builder fixtures ──────────────────────────────────────────────────────


@pytest.fixture
def tax_and_bank_ledger(ledger) -> SelectionLedger:
    """Two tax items (one priced) and one bank item, checked out of catalog order."""
    ledger.set_checked("tax_invoice_issue", True)
    ledger.set_checked("tax_filing", True)
    ledger.set_amount("tax_filing", "300")
    ledger.set_checked("bank_basic_account", True)
    ledger.set_amount("bank_basic_account", "1,200.5")
    return ledger
