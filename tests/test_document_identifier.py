"""
Tests for document type and region detection
"""
import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from courier_compliance.document_identifier import DocumentTypeClassifier
from courier_compliance.document_patterns import DocumentType, patterns_for, INVOICE_FIELDS
from courier_compliance.regional_config import Region


@pytest.fixture
def classifier():
    return DocumentTypeClassifier()


class TestDocumentType:

    def test_invoice(self, classifier, sample_invoice_text):
        detection = classifier.detect(sample_invoice_text)
        assert detection.document_type == DocumentType.INVOICE
        assert detection.confidence == 99
        assert detection.scores["INVOICE"] == 40

    def test_bill_of_lading(self, classifier):
        detection = classifier.detect("BILL OF LADING\nB/L No: MSCU1234567\nVessel: MSC Aurora")
        assert detection.document_type == DocumentType.BL
        assert detection.region == Region.PA

    def test_confidence_is_share_of_total(self, classifier):
        detection = classifier.detect("COMMERCIAL INVOICE\nPACKING LIST")
        assert detection.document_type == DocumentType.INVOICE
        assert detection.confidence == 55.56

    def test_case_insensitive(self, classifier):
        assert classifier.detect("air waybill 123").document_type == DocumentType.CP

    def test_empty_text(self, classifier):
        detection = classifier.detect("")
        assert detection.document_type == DocumentType.UNKNOWN
        assert detection.confidence == 0
        assert detection.region == Region.PA


class TestRegionalTypes:

    DUA_TEXT = "DUA: 005-2024-123456\nSistema TICA\nCosta Rica"

    def test_dua_in_costa_rica(self, classifier):
        detection = classifier.detect(self.DUA_TEXT)
        assert detection.document_type == DocumentType.DUA
        assert detection.region == Region.CR

    def test_regional_type_gated_by_region(self, classifier):
        detection = classifier.detect(self.DUA_TEXT, region="PA")
        assert detection.document_type == DocumentType.UNKNOWN
        assert detection.scores["DUA"] == 0
        assert detection.region == Region.PA

    def test_fel_in_guatemala(self, classifier):
        detection = classifier.detect("FACTURA ELECTRÓNICA EN LÍNEA\nCertificador FEL\nGuatemala")
        assert detection.document_type == DocumentType.FEL
        assert detection.region == Region.GT

    def test_region_from_single_region_type(self, classifier):
        detection = classifier.detect("FACTURA ELECTRONICA EN LINEA 0042")
        assert detection.document_type == DocumentType.FEL
        assert detection.region == Region.GT

    def test_to_dict(self, classifier):
        data = classifier.detect(self.DUA_TEXT).to_dict()
        assert data["document_type"] == "DUA"
        assert data["region"] == "CR"


class TestPatternTables:

    def test_unknown_type_uses_invoice_table(self):
        assert patterns_for(DocumentType.UNKNOWN) is INVOICE_FIELDS

    def test_regional_tables_add_fiscal_id(self):
        fields = patterns_for("FEL")
        assert "fiscal_id" in fields
        assert "fob" in fields
