"""
Integrity Ledger
================
Canonicalizes each validated record, hashes it (SHA-256 over key-sorted
JSON) and chains it to the previous validation's hash. History is kept
in memory, capped, oldest first out.

Not thread-safe: one in-flight validation per ledger instance.
"""

import hashlib
import json
import logging
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional

from .config import LEDGER_HISTORY_CAP
from .findings import Finding, Severity, calculate_score
from .financial_validator import FinancialValidator

logger = logging.getLogger("courier.integrity_ledger")


@dataclass
class ValidationResult:
    document_id: str
    timestamp: str
    hash: str
    previous_hash: Optional[str]
    is_valid: bool
    score: int
    findings: List[Finding] = field(default_factory=list)
    corrections_made: int = 0
    blocking_issues: int = 0
    region: str = "PA"

    def findings_of(self, *severities) -> List[Finding]:
        wanted = {Severity(s) for s in severities}
        return [f for f in self.findings if f.severity in wanted]

    def to_dict(self) -> Dict:
        return {
            "document_id": self.document_id,
            "timestamp": self.timestamp,
            "hash": self.hash,
            "previous_hash": self.previous_hash,
            "is_valid": self.is_valid,
            "score": self.score,
            "findings": [f.to_dict() for f in self.findings],
            "corrections_made": self.corrections_made,
            "blocking_issues": self.blocking_issues,
            "region": self.region,
        }


def _pick(data, *keys, default=None):
    for k in keys:
        if k in data:
            return data[k]
    return default


def _has(data, *keys):
    return any(k in data for k in keys)


class IntegrityLedger:

    def __init__(self, financial_validator: FinancialValidator = None,
                 history_cap: int = LEDGER_HISTORY_CAP):
        self.financial_validator = financial_validator or FinancialValidator()
        self._history = deque(maxlen=history_cap)
        self._last_hash = None

    @property
    def last_hash(self) -> Optional[str]:
        return self._last_hash

    @staticmethod
    def generate_hash(data: Dict) -> str:
        """SHA-256 of the key-sorted JSON form; key order never changes the hash."""
        canonical = json.dumps(data, sort_keys=True, separators=(",", ":"),
                               ensure_ascii=False, default=str)
        return hashlib.sha256(canonical.encode("utf-8")).hexdigest()

    def validate(self, document_id: str, data: Dict, region=None) -> ValidationResult:
        """
        Run every applicable financial rule over a record and append the
        result to the chain.

        CIF rules run when fob, freight and declared_cif are present;
        tax rules run when cif and dai_percent are present.
        """
        region = region or data.get("region") or "PA"
        validator = self.financial_validator
        digest = self.generate_hash(data)
        findings: List[Finding] = []

        if _has(data, "fob") and _has(data, "freight") and _has(data, "declared_cif", "declaredCIF"):
            findings.extend(validator.validate_cif(
                fob=data["fob"],
                freight=data["freight"],
                insurance=data.get("insurance"),
                declared_cif=_pick(data, "declared_cif", "declaredCIF"),
                region=region,
                currency=data.get("currency") or "USD",
                incoterm=data.get("incoterm"),
            ))

        if _has(data, "cif") and _has(data, "dai_percent", "daiPercent"):
            findings.extend(validator.validate_tax_cascade(
                cif=data["cif"],
                dai_percent=_pick(data, "dai_percent", "daiPercent"),
                isc_percent=_pick(data, "isc_percent", "iscPercent", default=0),
                region=region,
                declared_dai=_pick(data, "declared_dai", "declaredDAI"),
                declared_isc=_pick(data, "declared_isc", "declaredISC"),
                declared_vat=_pick(data, "declared_vat", "declaredVAT", "declaredITBMS"),
                declared_total=_pick(data, "declared_total", "declaredTotal"),
                vat_percent=_pick(data, "vat_percent", "vatPercent", "itbmsPercent"),
            ))

        blocking = sum(1 for f in findings if f.severity == Severity.BLOCKING)
        result = ValidationResult(
            document_id=document_id,
            timestamp=datetime.now(timezone.utc).isoformat(),
            hash=digest,
            previous_hash=self._last_hash,
            is_valid=blocking == 0,
            score=calculate_score(findings),
            findings=findings,
            corrections_made=sum(1 for f in findings if f.auto_correction),
            blocking_issues=blocking,
            region=str(getattr(region, "value", region)),
        )

        self._last_hash = digest
        self._history.append(result)
        logger.info(f"Ledger: {document_id} score={result.score} valid={result.is_valid} "
                    f"hash={digest[:12]}")
        return result

    def history(self) -> List[ValidationResult]:
        return list(self._history)

    def stats(self) -> Dict:
        total = len(self._history)
        if total == 0:
            return {"total_validations": 0, "avg_score": 100, "blocking_rate": 0}
        avg = sum(r.score for r in self._history) / total
        blocked = sum(1 for r in self._history if r.blocking_issues > 0)
        return {
            "total_validations": total,
            "avg_score": round(avg),
            "blocking_rate": blocked / total * 100,
        }

    def reset(self):
        self._history.clear()
        self._last_hash = None
