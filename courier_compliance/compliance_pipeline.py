"""
Compliance Pipeline
===================
Integration layer that runs a courier document through every engine and
produces one report per document.

Workflow:
1. Detect type/region and extract fields + line items (FieldExtractor)
2. Hash + validate the financial record (IntegrityLedger -> FinancialValidator)
3. Validate the consignee fiscal id when the document carries one
4. Classify every line item (ProductClassifier)
5. Check declared HS codes against rulings / GRI (PrecedentEngine)
6. Derive status: approved | needs_review | blocked

Engines are injected, so one pipeline per worker keeps their learned
state (correction memory, hash chain) single-writer.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from .document_identifier import DocumentTypeClassifier
from .field_extractor import ExtractionResult, FieldExtractor, parse_numeric_value
from .financial_validator import FinancialValidator
from .findings import FindingFactory, Severity, count_by_severity
from .fiscal_id_validator import ConsigneeDirectory, ConsigneeMatch, FiscalIdValidation, FiscalIdValidator
from .integrity_ledger import IntegrityLedger, ValidationResult
from .memory_store import FirestoreMemoryStore, InMemoryMemoryStore, MemoryStore
from .precedent_engine import PrecedentEngine, PrecedentValidation
from .precedent_store import FirestorePrecedentStore, NullPrecedentStore, PrecedentStore
from .product_classifier import ClassificationResult, ProductClassifier
from .regional_config import DEFAULT_REGIONAL_CONFIG, Region, RegionalConfigStore

logger = logging.getLogger("courier.pipeline")


class PipelineStatus(Enum):
    """Outcome of a document run"""
    APPROVED = "approved"
    NEEDS_REVIEW = "needs_review"
    BLOCKED = "blocked"


STATUS_NAMES_ES = {
    PipelineStatus.APPROVED: "✅ Aprobado",
    PipelineStatus.NEEDS_REVIEW: "🔍 Requiere revisión",
    PipelineStatus.BLOCKED: "⛔ Bloqueado",
}


# ═══════════════════════════════════════════
#  REPORTS
# ═══════════════════════════════════════════

@dataclass
class DocumentReport:
    """Everything the engines concluded about one document"""
    extraction: ExtractionResult
    validation: ValidationResult
    status: PipelineStatus = PipelineStatus.APPROVED
    classifications: List[ClassificationResult] = field(default_factory=list)
    precedent_validations: Dict[int, PrecedentValidation] = field(default_factory=dict)
    fiscal_validation: Optional[FiscalIdValidation] = None
    advisories: List[str] = field(default_factory=list)

    @property
    def document_id(self) -> str:
        return self.extraction.document_id

    def summary_es(self) -> str:
        """Spanish status summary for operators"""
        lines = [f"Documento: {self.document_id}"]
        lines.append(f"Tipo: {self.extraction.document_type.value} ({self.extraction.region.value})")
        lines.append(f"Estado: {STATUS_NAMES_ES[self.status]}")
        lines.append(f"Puntaje ZOD: {self.validation.score}/100")
        lines.append(f"Confianza de extracción: {self.extraction.overall_confidence}%")

        if self.validation.findings:
            counts = count_by_severity(self.validation.findings)
            lines.append("Hallazgos: " + ", ".join(f"{k}={v}" for k, v in counts.items() if v))

        if self.fiscal_validation:
            state = "válido" if self.fiscal_validation.is_valid else "inválido"
            lines.append(f"RUC/Cédula: {self.fiscal_validation.raw_id or '—'} ({state})")

        if self.classifications:
            permits = sum(1 for c in self.classifications if c.requires_permit)
            lines.append(f"Ítems clasificados: {len(self.classifications)} ({permits} con permiso)")

        for warning in self.extraction.warnings:
            lines.append(warning)
        return "\n".join(lines)

    def to_dict(self) -> Dict:
        return {
            "document_id": self.document_id,
            "status": self.status.value,
            "extraction": self.extraction.to_dict(),
            "validation": self.validation.to_dict(),
            "classifications": [c.to_dict() for c in self.classifications],
            "precedent_validations": {str(i): v.to_dict() for i, v in self.precedent_validations.items()},
            "fiscal_validation": self.fiscal_validation.to_dict() if self.fiscal_validation else None,
            "advisories": list(self.advisories),
        }


@dataclass
class ManifestRowResult:
    """One parsed manifest row after classification and fiscal-id checks"""
    row_index: int
    description: str
    value: float
    recipient: str
    classification: ClassificationResult
    weight: Optional[float] = None
    fiscal_validation: Optional[FiscalIdValidation] = None
    consignee_match: Optional[ConsigneeMatch] = None

    @property
    def needs_review(self) -> bool:
        if self.classification.requires_permit or self.classification.is_prohibited:
            return True
        return self.fiscal_validation is not None and not self.fiscal_validation.is_valid

    def to_dict(self) -> Dict:
        return {
            "row_index": self.row_index,
            "description": self.description,
            "value": self.value,
            "weight": self.weight,
            "recipient": self.recipient,
            "classification": self.classification.to_dict(),
            "fiscal_validation": self.fiscal_validation.to_dict() if self.fiscal_validation else None,
            "consignee_fiscal_id": self.consignee_match.fiscal_id if self.consignee_match else None,
            "needs_review": self.needs_review,
        }


# ═══════════════════════════════════════════
#  PIPELINE
# ═══════════════════════════════════════════

class CompliancePipeline:

    def __init__(self, config_store: RegionalConfigStore = None,
                 extractor: FieldExtractor = None,
                 classifier: ProductClassifier = None,
                 financial_validator: FinancialValidator = None,
                 fiscal_validator: FiscalIdValidator = None,
                 precedent_engine: PrecedentEngine = None,
                 ledger: IntegrityLedger = None,
                 consignee_directory: ConsigneeDirectory = None):
        self.config_store = config_store or DEFAULT_REGIONAL_CONFIG
        findings = FindingFactory()
        self.extractor = extractor or FieldExtractor(classifier=DocumentTypeClassifier(self.config_store))
        self.classifier = classifier or ProductClassifier()
        self.financial_validator = financial_validator or FinancialValidator(self.config_store, findings)
        self.fiscal_validator = fiscal_validator or FiscalIdValidator(self.config_store, findings)
        self.precedent_engine = precedent_engine or PrecedentEngine(self.config_store)
        self.ledger = ledger or IntegrityLedger(self.financial_validator)
        self.consignee_directory = consignee_directory

    def process_document(self, text: str, region=None, hs_codes: Sequence[Optional[str]] = None) -> DocumentReport:
        """
        Run one document end to end.

        hs_codes, when given, is aligned with the extracted line items;
        items with a code are checked against rulings / GRI.
        """
        extraction = self.extractor.process_document(text, region)
        code = extraction.region.value
        validation = self.ledger.validate(extraction.document_id, extraction.to_validation_input(), code)
        report = DocumentReport(extraction=extraction, validation=validation)

        fiscal_id = extraction.fields.get("fiscal_id")
        if fiscal_id is not None:
            report.fiscal_validation = self.fiscal_validator.validate(fiscal_id.value, code)

        for index, item in enumerate(extraction.items):
            if hs_codes and index < len(hs_codes) and hs_codes[index]:
                item.hs_code = hs_codes[index]
            classification = self.classifier.classify(item.description, item.total_value)
            report.classifications.append(classification)

            if item.hs_code:
                check = self.precedent_engine.validate_by_precedent(item.hs_code, item.description, code)
                report.precedent_validations[index] = check
                report.advisories.append(self.precedent_engine.format_advisory(check))

        report.status = self._status(report)
        logger.info(f"{report.document_id}: {report.status.value} "
                    f"(score {validation.score}, {len(report.classifications)} item(s))")
        return report

    def validate_manifest_rows(self, rows: List[Dict[str, Any]], region=None) -> List[ManifestRowResult]:
        """
        Classify parsed manifest rows (description, weight, value,
        recipient, optional fiscal_id). Rows without a fiscal id are
        resolved through the consignee directory when one is configured.
        """
        code = self.config_store.get(region or Region.PA).region.value
        results = []
        for index, row in enumerate(rows):
            description = str(row.get("description") or "")
            value = parse_numeric_value(row.get("value") or 0)
            recipient = str(row.get("recipient") or "")
            result = ManifestRowResult(
                row_index=index,
                description=description,
                value=value,
                weight=row.get("weight"),
                recipient=recipient,
                classification=self.classifier.classify(description, value),
            )

            fiscal_id = row.get("fiscal_id")
            if not fiscal_id and recipient and self.consignee_directory is not None:
                result.consignee_match = self.consignee_directory.lookup(recipient)
                if result.consignee_match.found:
                    fiscal_id = result.consignee_match.fiscal_id
            if fiscal_id is not None:
                result.fiscal_validation = self.fiscal_validator.validate(fiscal_id, code)

            results.append(result)

        flagged = sum(1 for r in results if r.needs_review)
        logger.info(f"Manifest: {len(results)} row(s), {flagged} flagged for review ({code})")
        return results

    @staticmethod
    def _status(report: DocumentReport) -> PipelineStatus:
        fiscal_findings = report.fiscal_validation.findings if report.fiscal_validation else []
        if not report.validation.is_valid or any(f.is_blocking for f in fiscal_findings):
            return PipelineStatus.BLOCKED

        findings = list(report.validation.findings) + list(fiscal_findings)
        if (
            report.extraction.review_required
            or any(f.severity == Severity.CRITICAL for f in findings)
            or any(c.requires_permit or c.is_prohibited for c in report.classifications)
            or any(v.needs_broker_review for v in report.precedent_validations.values())
        ):
            return PipelineStatus.NEEDS_REVIEW
        return PipelineStatus.APPROVED


def create_pipeline(db=None, memory_store: MemoryStore = None,
                    precedent_store: PrecedentStore = None,
                    config_store: RegionalConfigStore = None) -> CompliancePipeline:
    """
    Factory wiring the default engines. With a Firestore client the
    correction memory, precedents and consignee directory live there.
    """
    config_store = config_store or DEFAULT_REGIONAL_CONFIG
    if memory_store is None:
        memory_store = FirestoreMemoryStore(db) if db is not None else InMemoryMemoryStore()
    if precedent_store is None:
        precedent_store = FirestorePrecedentStore(db) if db is not None else NullPrecedentStore()

    return CompliancePipeline(
        config_store=config_store,
        extractor=FieldExtractor(memory_store, DocumentTypeClassifier(config_store)),
        precedent_engine=PrecedentEngine(config_store, precedent_store),
        consignee_directory=ConsigneeDirectory(db) if db is not None else None,
    )
