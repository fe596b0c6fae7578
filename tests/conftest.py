"""
Pytest Configuration and Shared Fixtures
"""
import pytest
from unittest.mock import Mock
import sys
import os

# Add repository root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from courier_compliance.regional_config import RegionalConfigStore


# ============================================================
# MOCK FIRESTORE
# ============================================================

@pytest.fixture
def mock_db():
    """Create a mock Firestore database"""
    db = Mock()
    return db


@pytest.fixture
def mock_firestore_doc():
    """Create a mock Firestore document"""
    def _create(doc_id, data):
        doc = Mock()
        doc.id = doc_id
        doc.to_dict.return_value = data
        return doc
    return _create


# ============================================================
# ENGINE FIXTURES
# ============================================================

@pytest.fixture
def regional_store():
    """Fresh jurisdiction table (PA / CR / GT)"""
    return RegionalConfigStore()


@pytest.fixture
def sample_invoice_text():
    """Panamanian commercial invoice with consistent figures"""
    return (
        "COMMERCIAL INVOICE\n"
        "Invoice No: INV-2024-0042\n"
        "Invoice Date: 15/03/2024\n"
        "Shipper: Global Electronics Trading LLC\n"
        "Consignee: Importadora del Istmo S.A.\n"
        "Incoterm: FOB\n"
        "Currency: USD\n"
        "Country of Origin: CN\n"
        "Wireless bluetooth headphones   10   $25.00   $250.00\n"
        "Leather wallet for men classic   5   $50.00   $250.00\n"
        "FOB: $500.00\n"
        "Freight: $40.00\n"
        "Insurance: $7.50\n"
        "CIF: $547.50\n"
        "Destino: Tocumen, Panamá\n"
    )


def pytest_configure(config):
    """Configure pytest"""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
