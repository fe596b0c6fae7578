"""
Tests for the CIF identity and tax cascade rules
"""
import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from courier_compliance.financial_validator import FinancialValidator
from courier_compliance.findings import (
    AutoCorrection,
    FindingFactory,
    Severity,
    calculate_score,
    count_by_severity,
)


@pytest.fixture
def validator():
    return FinancialValidator()


class TestFindings:
    """Finding ids and scoring"""

    def test_sequential_ids(self):
        factory = FindingFactory()
        a = factory.create("R-1", "info", "m", "d", "PA")
        b = factory.create("R-2", Severity.WARNING, "m", "d", "PA")
        assert (a.id, b.id) == ("ZOD-1", "ZOD-2")
        assert b.severity == Severity.WARNING

    def test_region_enum_is_stored_as_code(self, regional_store):
        finding = FindingFactory().create("R", "info", "m", "d", regional_store.get("CR").region)
        assert finding.region == "CR"

    def test_score_penalties(self):
        factory = FindingFactory()
        findings = [
            factory.create("R", "critical", "m", "d", "PA"),
            factory.create("R", "warning", "m", "d", "PA"),
            factory.create("R", "info", "m", "d", "PA"),
        ]
        assert calculate_score(findings) == 74
        assert calculate_score([]) == 100

    def test_blocking_plus_critical(self):
        factory = FindingFactory()
        blocking = factory.create("R", "blocking", "m", "d", "PA")
        assert calculate_score([blocking]) == 50
        assert calculate_score([blocking, factory.create("R", "critical", "m", "d", "PA")]) == 30

    def test_score_never_negative(self):
        factory = FindingFactory()
        findings = [factory.create("R", "blocking", "m", "d", "PA") for _ in range(3)]
        assert calculate_score(findings) == 0

    def test_count_by_severity(self):
        factory = FindingFactory()
        counts = count_by_severity([factory.create("R", "critical", "m", "d", "PA")])
        assert counts == {"info": 0, "warning": 0, "critical": 1, "blocking": 0}


class TestCIFValidation:
    """CIF = FOB + Freight + Insurance"""

    def test_consistent_declaration_has_no_findings(self, validator):
        assert validator.validate_cif(500, 40, 7.5, 547.5) == []

    def test_within_tolerance(self, validator):
        assert validator.validate_cif(500, 40, 7.5, 547.51) == []

    def test_theoretical_insurance(self, validator):
        findings = validator.validate_cif(1000, 100, None, 1115)
        assert len(findings) == 1
        info = findings[0]
        assert info.rule == "ZOD-CIF-001"
        assert info.severity == Severity.INFO
        assert info.expected == pytest.approx(15.0)
        assert info.actual == 0
        assert info.auto_correction.field == "insurance"
        assert info.legal_basis.startswith("Decreto Ley 1 de 2008")

    def test_zero_insurance_also_gets_theoretical(self, validator):
        findings = validator.validate_cif(1000, 100, 0, 1115)
        assert [f.rule for f in findings] == ["ZOD-CIF-001"]

    def test_cif_mismatch(self, validator):
        findings = validator.validate_cif(1000, 100, None, 1000)
        rules = [f.rule for f in findings]
        assert rules == ["ZOD-CIF-001", "ZOD-CIF-002"]
        mismatch = findings[1]
        assert mismatch.severity == Severity.CRITICAL
        assert mismatch.expected == pytest.approx(1115)
        assert mismatch.actual == 1000
        assert mismatch.auto_correction == AutoCorrection("cif", mismatch.expected)

    def test_negative_component_blocks(self, validator):
        findings = validator.validate_cif(-5, 10, 1, 6)
        assert [f.rule for f in findings] == ["ZOD-CIF-003"]
        assert findings[0].is_blocking
        assert calculate_score(findings) == 50

    def test_undervaluation_warning(self, validator):
        findings = validator.validate_cif(0.5, 10, 1, 11.5)
        assert [f.rule for f in findings] == ["ZOD-CIF-004"]
        assert findings[0].severity == Severity.WARNING
        assert findings[0].field == "fob"

    def test_costa_rica_citation(self, validator):
        findings = validator.validate_cif(1000, 100, None, 1115, region="CR")
        assert findings[0].region == "CR"
        assert "7557" in findings[0].legal_basis


class TestTaxCascade:
    """DAI -> ISC -> VAT -> total"""

    def test_panama_cascade(self, validator):
        breakdown = validator.compute_tax_cascade(1000, 10, region="PA")
        assert breakdown.dai == pytest.approx(100)
        assert breakdown.isc == 0
        assert breakdown.vat == pytest.approx(77)
        assert breakdown.system_fee == 3.00
        assert breakdown.total == pytest.approx(1180)

    def test_isc_compounds_on_dai(self, validator):
        breakdown = validator.compute_tax_cascade(1000, 10, isc_percent=5, region="PA")
        assert breakdown.isc == pytest.approx(55)
        assert breakdown.vat == pytest.approx(80.85)
        assert breakdown.total == pytest.approx(1238.85)

    def test_costa_rica_has_no_system_fee(self, validator):
        breakdown = validator.compute_tax_cascade(1000, 10, region="CR")
        assert breakdown.vat == pytest.approx(143)
        assert breakdown.total == pytest.approx(1243)

    def test_vat_override(self, validator):
        breakdown = validator.compute_tax_cascade(1000, 0, region="PA", vat_percent=10)
        assert breakdown.vat == pytest.approx(100)

    def test_correct_declaration(self, validator):
        findings = validator.validate_tax_cascade(
            1000, 10, region="PA", declared_dai=100, declared_vat=77, declared_total=1180)
        assert findings == []

    @pytest.mark.parametrize("region", ["PA", "CR", "GT"])
    def test_exact_dai_has_no_finding(self, validator, region):
        assert validator.validate_tax_cascade(1000, 10, region=region, declared_dai=100) == []

    @pytest.mark.parametrize("declared", [100.03, 99.97])
    def test_dai_off_by_three_cents(self, validator, declared):
        findings = validator.validate_tax_cascade(1000, 10, region="PA", declared_dai=declared)
        assert [(f.rule, f.severity) for f in findings] == [("ZOD-TAX-001", Severity.CRITICAL)]
        assert findings[0].expected == pytest.approx(100)

    def test_rule_order_and_fields(self, validator):
        findings = validator.validate_tax_cascade(
            1000, 10, isc_percent=5, region="PA",
            declared_dai=90, declared_isc=50, declared_vat=70, declared_total=1000)
        assert [f.rule for f in findings] == [
            "ZOD-TAX-001", "ZOD-TAX-004", "ZOD-TAX-002", "ZOD-TAX-003"]
        assert findings[2].field == "itbms"
        assert findings[2].auto_correction.field == "itbms"
        assert findings[3].severity == Severity.WARNING
        assert findings[3].auto_correction is None

    def test_missing_system_fee_flags_total(self, validator):
        findings = validator.validate_tax_cascade(1000, 10, region="PA", declared_total=1177)
        assert [f.rule for f in findings] == ["ZOD-TAX-003"]
        assert findings[0].expected == pytest.approx(1180)

    def test_guatemala_vat_field(self, validator):
        findings = validator.validate_tax_cascade(1000, 0, region="GT", declared_vat=100)
        assert findings[0].field == "iva"
        assert findings[0].expected == pytest.approx(120)
