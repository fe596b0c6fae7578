"""
Field Extractor
===============
Pulls header fields, financial figures and line items out of raw
document text, then folds in corrections learned from earlier reviews.

Flow:
1. Detect document type + region (DocumentTypeClassifier)
2. For each field of that type, try its regexes in order; first match wins
3. Extract line items: "description  qty  unit price  total"
4. Apply learned corrections (substring -> correction, +10 confidence, cap 98)
5. Pre-validate CIF / item totals; flag for review when confidence < 80
   or any financial warning exists
"""

import logging
import re
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional, Union

from .config import (
    CIF_WARNING_TOLERANCE,
    EXTRACTION_REVIEW_THRESHOLD,
    ITEM_SUM_TOLERANCE,
    MEMORY_CAP,
    MEMORY_CONFIDENCE_BOOST,
    MEMORY_CONFIDENCE_CAP,
)
from .document_identifier import DocumentTypeClassifier
from .document_patterns import FINANCIAL_FIELDS, DocumentType, patterns_for
from .memory_store import InMemoryMemoryStore, MemoryEntry, MemoryStore
from .regional_config import Region

logger = logging.getLogger("courier.field_extractor")

LINE_ITEM_RE = re.compile(
    r"^(.{10,60})\s+(\d+(?:\.\d+)?)\s+\$?\s*(\d+(?:,\d{3})*(?:\.\d{2})?)\s+\$?\s*(\d+(?:,\d{3})*(?:\.\d{2})?)$"
)
LINE_ITEM_TOLERANCE = 0.02


# ═══════════════════════════════════════════
#  DATA CLASSES
# ═══════════════════════════════════════════

@dataclass
class ExtractionField:
    field: str
    value: Union[str, float, None]
    confidence: int
    provenance: str = "pattern"  # ocr | pattern | inference | manual
    target_column: Optional[str] = None

    def to_dict(self) -> Dict:
        return {
            "field": self.field,
            "value": self.value,
            "confidence": self.confidence,
            "provenance": self.provenance,
            "target_column": self.target_column,
        }


@dataclass
class LineItem:
    description: str
    quantity: float
    unit_value: float
    total_value: float
    confidence: int
    hs_code: Optional[str] = None

    def to_dict(self) -> Dict:
        return {
            "description": self.description,
            "quantity": self.quantity,
            "unit_value": self.unit_value,
            "total_value": self.total_value,
            "confidence": self.confidence,
            "hs_code": self.hs_code,
        }


@dataclass
class ExtractionResult:
    document_type: DocumentType
    fields: Dict[str, ExtractionField] = field(default_factory=dict)
    items: List[LineItem] = field(default_factory=list)
    overall_confidence: int = 0
    review_required: bool = True
    warnings: List[str] = field(default_factory=list)
    document_id: str = ""
    region: Region = Region.PA
    type_confidence: float = 0
    timestamp: str = ""

    def field(self, name) -> ExtractionField:
        """Extracted field, or an empty one (financials default to 0, currency to USD)."""
        if name in self.fields:
            return self.fields[name]
        default = None
        if name in FINANCIAL_FIELDS:
            default = 0
        elif name == "currency":
            default = "USD"
        return ExtractionField(name, default, 0)

    def value(self, name):
        return self.field(name).value

    def numeric(self, name) -> Optional[float]:
        """Numeric value of an extracted field, None when absent or unparsable."""
        f = self.fields.get(name)
        if f is None or f.value is None:
            return None
        if isinstance(f.value, (int, float)):
            return float(f.value)
        try:
            return float(f.value) or None
        except ValueError:
            return None

    def to_validation_input(self) -> Dict:
        """Record handed to IntegrityLedger.validate()."""
        data = {
            "document_type": self.document_type.value,
            "region": self.region.value,
            "currency": self.value("currency"),
            "incoterm": self.value("incoterm"),
            "invoice_number": self.value("invoice_number"),
        }
        # CIF is only cross-checked when the document declares both FOB and CIF
        if "fob" in self.fields and "cif" in self.fields:
            data.update({
                "fob": self.numeric("fob") or 0,
                "freight": self.numeric("freight") or 0,
                "insurance": self.numeric("insurance"),
                "declared_cif": self.numeric("cif") or 0,
            })
        data["items"] = [i.to_dict() for i in self.items]
        return data

    def to_dict(self) -> Dict:
        return {
            "document_id": self.document_id,
            "document_type": self.document_type.value,
            "region": self.region.value,
            "timestamp": self.timestamp,
            "overall_confidence": self.overall_confidence,
            "type_confidence": self.type_confidence,
            "fields": {k: v.to_dict() for k, v in self.fields.items()},
            "items": [i.to_dict() for i in self.items],
            "warnings": list(self.warnings),
            "review_required": self.review_required,
        }


def parse_numeric_value(value) -> float:
    """'$ 1,234.50' -> 1234.5; anything unparsable -> 0"""
    cleaned = re.sub(r"[,$\s]", "", str(value))
    try:
        return float(cleaned)
    except ValueError:
        return 0.0


def _base36(number: int) -> str:
    digits = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    out = ""
    while True:
        number, rem = divmod(number, 36)
        out = digits[rem] + out
        if number == 0:
            return out


# ═══════════════════════════════════════════
#  EXTRACTOR
# ═══════════════════════════════════════════

class FieldExtractor:
    """
    Regex field extraction with a learned-correction memory.

    Not thread-safe: the memory and processed counter are per instance,
    so give each concurrent worker its own extractor.
    """

    def __init__(self, memory_store: MemoryStore = None,
                 classifier: DocumentTypeClassifier = None,
                 memory_cap: int = MEMORY_CAP,
                 review_threshold: float = EXTRACTION_REVIEW_THRESHOLD):
        self.memory_store = memory_store or InMemoryMemoryStore()
        self.classifier = classifier or DocumentTypeClassifier()
        self.memory_cap = memory_cap
        self.review_threshold = review_threshold
        self.memory: List[MemoryEntry] = self.memory_store.load()[-memory_cap:]
        self.processed_count = 0

    # ── Fields ──

    def extract_fields(self, text: str, document_type) -> ExtractionResult:
        document_type = DocumentType(document_type)
        result = ExtractionResult(document_type=document_type)

        for name, patterns in patterns_for(document_type).items():
            for p in patterns:
                match = re.search(p.regex, text, re.IGNORECASE | re.MULTILINE)
                if match and match.group(1):
                    raw = match.group(1).strip()
                    value = parse_numeric_value(raw) if p.value_type == "number" else raw
                    result.fields[name] = ExtractionField(name, value, p.confidence, "pattern", p.target_column)
                    logger.debug(f"{document_type.value}.{name} = {value!r} ({p.confidence})")
                    break

        result.items = self.extract_line_items(text)
        self.apply_memory_corrections(result.fields)

        confidences = [f.confidence for f in result.fields.values()]
        result.overall_confidence = round(sum(confidences) / len(confidences)) if confidences else 0
        result.review_required = result.overall_confidence < self.review_threshold
        return result

    def extract_line_items(self, text: str) -> List[LineItem]:
        items = []
        for line in (text or "").split("\n"):
            match = LINE_ITEM_RE.match(line.strip())
            if not match:
                continue
            qty = float(match.group(2))
            unit = parse_numeric_value(match.group(3))
            total = parse_numeric_value(match.group(4))
            items.append(LineItem(
                description=match.group(1).strip(),
                quantity=qty,
                unit_value=unit,
                total_value=total,
                confidence=95 if abs(qty * unit - total) < LINE_ITEM_TOLERANCE else 70,
            ))
        return items

    # ── Memory layer ──

    def apply_memory_corrections(self, fields: Dict[str, ExtractionField]):
        for entry in self.memory:
            if not entry.pattern:
                continue
            for f in fields.values():
                if isinstance(f.value, str) and entry.pattern in f.value:
                    f.value = entry.correction
                    f.provenance = "inference"
                    f.confidence = min(f.confidence + MEMORY_CONFIDENCE_BOOST, MEMORY_CONFIDENCE_CAP)
                    entry.applied += 1

    def record_correction(self, pattern, correction, corrected_by="operator",
                          document_type=DocumentType.UNKNOWN) -> MemoryEntry:
        entry = MemoryEntry(
            pattern=pattern,
            correction=correction,
            corrected_by=corrected_by,
            document_type=getattr(document_type, "value", document_type),
        )
        self.memory.append(entry)
        if len(self.memory) > self.memory_cap:
            self.memory = self.memory[-self.memory_cap:]
        self.memory_store.save(self.memory)
        logger.info(f"Recorded correction {pattern!r} -> {correction!r} ({corrected_by})")
        return entry

    def memory_stats(self) -> Dict:
        return {
            "total_entries": len(self.memory),
            "total_applications": sum(e.applied for e in self.memory),
            "top_patterns": sorted(self.memory, key=lambda e: e.applied, reverse=True)[:10],
        }

    # ── Financial pre-validation ──

    def validate_financials(self, result: ExtractionResult) -> List[str]:
        warnings = []
        fob = result.numeric("fob")
        freight = result.numeric("freight")
        insurance = result.numeric("insurance")
        cif = result.numeric("cif")

        if fob and freight is not None and insurance is not None and cif:
            calculated = fob + freight + insurance
            diff = abs(calculated - cif)
            if diff > CIF_WARNING_TOLERANCE:
                warnings.append(
                    f"⚠️ Discrepancia CIF: Declarado ${cif:.2f} vs Calculado ${calculated:.2f} (Δ ${diff:.2f})"
                )

        if result.items:
            items_total = sum(i.total_value for i in result.items)
            if fob and abs(items_total - fob) > ITEM_SUM_TOLERANCE:
                warnings.append(
                    f"⚠️ Suma de ítems (${items_total:.2f}) no cuadra con FOB (${fob:.2f})"
                )
        return warnings

    # ── Full pipeline ──

    def process_document(self, text: str, region=None) -> ExtractionResult:
        self.processed_count += 1
        detection = self.classifier.detect(text, region)
        result = self.extract_fields(text, detection.document_type)
        financial_warnings = self.validate_financials(result)

        result.document_id = f"LEXIS-{_base36(int(time.time() * 1000))}-{self.processed_count}"
        result.region = detection.region
        result.type_confidence = detection.confidence
        result.timestamp = datetime.now(timezone.utc).isoformat()
        result.warnings.extend(financial_warnings)
        result.review_required = result.overall_confidence < self.review_threshold or bool(financial_warnings)

        logger.info(f"{result.document_id}: {detection.document_type.value} "
                    f"{len(result.fields)} fields, {len(result.items)} items, "
                    f"confidence {result.overall_confidence}")
        return result
