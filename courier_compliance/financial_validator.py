"""
Financial Cascade Validator
===========================
Enforces the customs value identity and the regional tax cascade.

    CIF   = FOB + Freight + Insurance
    DAI   = CIF x dai%
    ISC   = (CIF + DAI) x isc%
    VAT   = (CIF + DAI + ISC) x region VAT rate      (ITBMS / IVA)
    TOTAL = CIF + DAI + ISC + VAT + region system fee

Amounts are USD. The 0.02 tolerance absorbs rounding only. Each rule
emits a Finding; nothing here raises for bad figures.

Rule codes:
    ZOD-CIF-001  info      theoretical insurance applied
    ZOD-CIF-002  critical  declared CIF != FOB + freight + insurance
    ZOD-CIF-003  blocking  negative CIF component
    ZOD-CIF-004  warning   0 < FOB < 1 (possible undervaluation)
    ZOD-TAX-001  critical  DAI mismatch
    ZOD-TAX-002  critical  VAT mismatch
    ZOD-TAX-003  warning   total mismatch (system fee is fixed, no correction)
    ZOD-TAX-004  critical  ISC mismatch
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from .config import MONETARY_TOLERANCE
from .findings import AutoCorrection, Finding, FindingFactory, Severity
from .regional_config import DEFAULT_REGIONAL_CONFIG, RegionalConfigStore

logger = logging.getLogger("courier.financial_validator")


@dataclass(frozen=True)
class TaxBreakdown:
    cif: float
    dai: float
    isc: float
    vat: float
    system_fee: float
    total: float

    def to_dict(self) -> Dict:
        return {
            "cif": round(self.cif, 2),
            "dai": round(self.dai, 2),
            "isc": round(self.isc, 2),
            "vat": round(self.vat, 2),
            "system_fee": round(self.system_fee, 2),
            "total": round(self.total, 2),
        }


class FinancialValidator:
    """CIF and tax-cascade rules, parameterised by region."""

    def __init__(self, config_store: RegionalConfigStore = None,
                 finding_factory: FindingFactory = None,
                 tolerance: float = MONETARY_TOLERANCE):
        self.config_store = config_store or DEFAULT_REGIONAL_CONFIG
        self.findings = finding_factory or FindingFactory()
        self.tolerance = tolerance

    # ═══════════════════════════════════════════
    #  CIF
    # ═══════════════════════════════════════════

    def validate_cif(self, fob, freight, insurance, declared_cif, region="PA",
                     currency="USD", incoterm=None) -> List[Finding]:
        cfg = self.config_store.get(region)
        code = cfg.region.value
        findings = []

        # Rule 1: undeclared insurance -> theoretical rate on FOB
        applied_insurance = insurance
        if insurance is None or insurance == 0:
            applied_insurance = fob * cfg.insurance_rate
            findings.append(self.findings.create(
                rule="ZOD-CIF-001",
                severity=Severity.INFO,
                message=f"Seguro teórico aplicado ({cfg.insurance_rate * 100:g}% FOB)",
                detail=(
                    f"Seguro no declarado. Se aplica seguro teórico de ${applied_insurance:.2f} "
                    f"({cfg.insurance_rate * 100:g}% sobre FOB ${fob:.2f}) conforme a "
                    f"{cfg.citation('valuation')}."
                ),
                region=code,
                field="insurance",
                expected=applied_insurance,
                actual=insurance if insurance is not None else 0,
                legal_basis=cfg.citation("valuation"),
                auto_correction=AutoCorrection("insurance", applied_insurance),
            ))

        # Rule 2: CIF identity
        calculated_cif = fob + freight + applied_insurance
        diff = abs(calculated_cif - declared_cif)
        if diff > self.tolerance:
            findings.append(self.findings.create(
                rule="ZOD-CIF-002",
                severity=Severity.CRITICAL,
                message=f"Discrepancia CIF: Δ ${diff:.2f}",
                detail=(
                    f"CIF declarado (${declared_cif:.2f}) ≠ FOB (${fob:.2f}) + Flete (${freight:.2f}) "
                    f"+ Seguro (${applied_insurance:.2f}) = ${calculated_cif:.2f}"
                ),
                region=code,
                field="cif",
                expected=calculated_cif,
                actual=declared_cif,
                legal_basis=cfg.citation("cif"),
                auto_correction=AutoCorrection("cif", calculated_cif),
            ))

        # Rule 3: negative components
        if fob < 0 or freight < 0 or applied_insurance < 0:
            findings.append(self.findings.create(
                rule="ZOD-CIF-003",
                severity=Severity.BLOCKING,
                message="Valores negativos detectados en componentes CIF",
                detail="FOB, Flete y Seguro deben ser valores positivos. Documento bloqueado.",
                region=code,
                legal_basis=cfg.citation("declaration"),
            ))

        # Rule 4: undervaluation
        if 0 < fob < 1:
            findings.append(self.findings.create(
                rule="ZOD-CIF-004",
                severity=Severity.WARNING,
                message="Posible subvaluación detectada",
                detail=f"FOB declarado (${fob:.2f}) es sospechosamente bajo. Requiere verificación manual.",
                region=code,
                field="fob",
                legal_basis=cfg.citation("valuation_methods"),
            ))

        if findings:
            logger.debug(f"CIF check [{code}] {incoterm or '-'} {currency}: "
                         f"{[f.rule for f in findings]}")
        return findings

    # ═══════════════════════════════════════════
    #  TAX CASCADE
    # ═══════════════════════════════════════════

    def compute_tax_cascade(self, cif, dai_percent, isc_percent=0, region="PA",
                            vat_percent=None) -> TaxBreakdown:
        cfg = self.config_store.get(region)
        vat_rate = cfg.vat_rate if vat_percent is None else vat_percent / 100
        dai = cif * dai_percent / 100
        isc = (cif + dai) * (isc_percent or 0) / 100
        vat = (cif + dai + isc) * vat_rate
        total = cif + dai + isc + vat + cfg.system_fee
        return TaxBreakdown(cif, dai, isc, vat, cfg.system_fee, total)

    def validate_tax_cascade(self, cif, dai_percent, isc_percent=0, region="PA",
                             declared_dai=None, declared_isc=None, declared_vat=None,
                             declared_total=None, vat_percent=None) -> List[Finding]:
        cfg = self.config_store.get(region)
        code = cfg.region.value
        expected = self.compute_tax_cascade(cif, dai_percent, isc_percent, region, vat_percent)
        findings = []

        if declared_dai is not None:
            diff = abs(expected.dai - declared_dai)
            if diff > self.tolerance:
                findings.append(self.findings.create(
                    rule="ZOD-TAX-001",
                    severity=Severity.CRITICAL,
                    message=f"DAI: Δ ${diff:.2f}",
                    detail=f"DAI declarado (${declared_dai:.2f}) ≠ esperado (${expected.dai:.2f})",
                    region=code,
                    field="dai",
                    expected=expected.dai,
                    actual=declared_dai,
                    legal_basis=cfg.citation("tariff"),
                    auto_correction=AutoCorrection("dai", expected.dai),
                ))

        if declared_isc is not None:
            diff = abs(expected.isc - declared_isc)
            if diff > self.tolerance:
                findings.append(self.findings.create(
                    rule="ZOD-TAX-004",
                    severity=Severity.CRITICAL,
                    message=f"ISC: Δ ${diff:.2f}",
                    detail=(
                        f"ISC declarado (${declared_isc:.2f}) ≠ esperado (${expected.isc:.2f}). "
                        f"Base: CIF + DAI."
                    ),
                    region=code,
                    field="isc",
                    expected=expected.isc,
                    actual=declared_isc,
                    legal_basis=cfg.citation("tariff"),
                    auto_correction=AutoCorrection("isc", expected.isc),
                ))

        if declared_vat is not None:
            diff = abs(expected.vat - declared_vat)
            if diff > self.tolerance:
                vat_field = cfg.vat_name.lower()
                findings.append(self.findings.create(
                    rule="ZOD-TAX-002",
                    severity=Severity.CRITICAL,
                    message=f"{cfg.vat_name}: Δ ${diff:.2f}",
                    detail=(
                        f"{cfg.vat_name} declarado (${declared_vat:.2f}) ≠ esperado "
                        f"(${expected.vat:.2f}). Base: CIF + DAI + ISC."
                    ),
                    region=code,
                    field=vat_field,
                    expected=expected.vat,
                    actual=declared_vat,
                    legal_basis=cfg.citation("vat"),
                    auto_correction=AutoCorrection(vat_field, expected.vat),
                ))

        if declared_total is not None:
            diff = abs(expected.total - declared_total)
            if diff > self.tolerance:
                findings.append(self.findings.create(
                    rule="ZOD-TAX-003",
                    severity=Severity.WARNING,
                    message=f"Total liquidación: Δ ${diff:.2f}",
                    detail=(
                        f"Total declarado (${declared_total:.2f}) ≠ esperado (${expected.total:.2f}). "
                        f"Incluye Tasa de Sistema ${cfg.system_fee:.2f}."
                    ),
                    region=code,
                    field="total",
                    expected=expected.total,
                    actual=declared_total,
                ))

        return findings
