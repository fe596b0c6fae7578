"""
Tests for field / line-item extraction and the correction memory
"""
import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from courier_compliance.document_patterns import DocumentType
from courier_compliance.field_extractor import (
    ExtractionResult,
    FieldExtractor,
    _base36,
    parse_numeric_value,
)
from courier_compliance.memory_store import InMemoryMemoryStore, MemoryEntry
from courier_compliance.regional_config import Region


@pytest.fixture
def extractor():
    return FieldExtractor()


class TestHelpers:

    def test_parse_numeric_value(self):
        assert parse_numeric_value("$ 1,234.50") == 1234.5
        assert parse_numeric_value("abc") == 0.0

    def test_base36(self):
        assert _base36(0) == "0"
        assert _base36(35) == "Z"
        assert _base36(36) == "10"


class TestExtractFields:

    def test_invoice_fields(self, extractor, sample_invoice_text):
        result = extractor.extract_fields(sample_invoice_text, DocumentType.INVOICE)
        assert result.value("supplier") == "Global Electronics Trading LLC"
        assert result.value("client") == "Importadora del Istmo S.A."
        assert result.value("invoice_number") == "INV-2024-0042"
        assert result.value("invoice_date") == "15/03/2024"
        assert result.value("incoterm") == "FOB"
        assert result.value("currency") == "USD"
        assert result.value("origin") == "CN"
        assert result.value("fob") == 500.0
        assert result.value("freight") == 40.0
        assert result.value("insurance") == 7.5
        assert result.value("cif") == 547.5
        assert result.fields["fob"].target_column == "valor_fob"

    def test_overall_confidence(self, extractor, sample_invoice_text):
        result = extractor.extract_fields(sample_invoice_text, "INVOICE")
        assert result.overall_confidence == 87
        assert not result.review_required

    def test_missing_fields_default(self):
        result = ExtractionResult(document_type=DocumentType.INVOICE)
        assert result.value("fob") == 0
        assert result.value("currency") == "USD"
        assert result.value("supplier") is None
        assert result.numeric("fob") is None

    def test_nothing_extracted_needs_review(self, extractor):
        result = extractor.extract_fields("lorem ipsum", DocumentType.INVOICE)
        assert result.fields == {}
        assert result.overall_confidence == 0
        assert result.review_required


class TestLineItems:

    def test_items(self, extractor, sample_invoice_text):
        items = extractor.extract_line_items(sample_invoice_text)
        assert [i.description for i in items] == [
            "Wireless bluetooth headphones",
            "Leather wallet for men classic",
        ]
        assert items[0].quantity == 10
        assert items[0].unit_value == 25.0
        assert items[0].total_value == 250.0
        assert items[0].confidence == 95

    def test_inconsistent_item_has_lower_confidence(self, extractor):
        items = extractor.extract_line_items("Cotton t-shirts assorted sizes   3   $10.00   $35.00")
        assert len(items) == 1
        assert items[0].confidence == 70

    def test_thousands_separator(self, extractor):
        items = extractor.extract_line_items("Industrial sewing machine   2   $1,250.00   $2,500.00")
        assert items[0].unit_value == 1250.0
        assert items[0].total_value == 2500.0


class TestMemory:

    def test_correction_applied(self, extractor, sample_invoice_text):
        extractor.record_correction("Importadora del Istmo", "Importadora del Istmo, S.A.")
        result = extractor.process_document(sample_invoice_text)
        client = result.fields["client"]
        assert client.value == "Importadora del Istmo, S.A."
        assert client.provenance == "inference"
        assert client.confidence == 95
        assert extractor.memory_stats()["total_applications"] == 1

    def test_confidence_boost_is_capped(self, extractor, sample_invoice_text):
        extractor.record_correction("INV-2024", "INV-2024-0042")
        result = extractor.process_document(sample_invoice_text)
        assert result.fields["invoice_number"].confidence == 98

    def test_memory_cap(self):
        store = InMemoryMemoryStore()
        extractor = FieldExtractor(store, memory_cap=2)
        for i in range(3):
            extractor.record_correction(f"p{i}", f"c{i}")
        assert [e.pattern for e in extractor.memory] == ["p1", "p2"]
        assert len(store.load()) == 2

    def test_memory_loaded_from_store(self, sample_invoice_text):
        store = InMemoryMemoryStore([MemoryEntry("Global Electronics", "Global Electronics Trading LLC",
                                                 "zod", "INVOICE")])
        extractor = FieldExtractor(store)
        result = extractor.process_document(sample_invoice_text)
        assert result.value("supplier") == "Global Electronics Trading LLC"
        assert result.fields["supplier"].provenance == "inference"


class TestFinancialPrevalidation:

    def test_consistent_invoice(self, extractor, sample_invoice_text):
        result = extractor.process_document(sample_invoice_text)
        assert result.warnings == []
        assert not result.review_required

    def test_cif_discrepancy(self, extractor):
        text = "COMMERCIAL INVOICE\nFOB: $500.00\nFreight: $40.00\nInsurance: $7.50\nCIF: $600.00\n"
        result = extractor.process_document(text)
        assert len(result.warnings) == 1
        assert result.warnings[0].startswith("⚠️ Discrepancia CIF")
        assert result.review_required

    def test_item_sum_mismatch(self, extractor, sample_invoice_text):
        text = sample_invoice_text.replace("FOB: $500.00", "FOB: $400.00")
        result = extractor.process_document(text)
        assert any("Suma de ítems" in w for w in result.warnings)


class TestProcessDocument:

    def test_metadata(self, extractor, sample_invoice_text):
        result = extractor.process_document(sample_invoice_text)
        assert result.document_type == DocumentType.INVOICE
        assert result.region == Region.PA
        assert result.type_confidence == 99
        assert result.document_id.startswith("LEXIS-")
        assert result.document_id.endswith("-1")
        assert result.timestamp

    def test_counter_increments(self, extractor, sample_invoice_text):
        extractor.process_document(sample_invoice_text)
        second = extractor.process_document(sample_invoice_text)
        assert second.document_id.endswith("-2")

    def test_validation_input(self, extractor, sample_invoice_text):
        data = extractor.process_document(sample_invoice_text).to_validation_input()
        assert data["fob"] == 500.0
        assert data["declared_cif"] == 547.5
        assert data["region"] == "PA"
        assert len(data["items"]) == 2

    def test_validation_input_without_financials(self, extractor):
        data = extractor.process_document("BILL OF LADING\nShipper: Acme Trading Co").to_validation_input()
        assert "fob" not in data

    def test_validation_input_needs_fob_and_cif(self, extractor):
        fob_only = extractor.process_document("COMMERCIAL INVOICE\nFOB: $500.00\nFreight: $40.00\n")
        cif_only = extractor.process_document("COMMERCIAL INVOICE\nCIF: $547.50\n")
        for data in (fob_only.to_validation_input(), cif_only.to_validation_input()):
            assert "fob" not in data
            assert "declared_cif" not in data
