"""
Fiscal ID Validator
===================
Validates taxpayer / identity strings against the region's ordered
format list (first match wins), and resolves consignee names to a
known fiscal id from the historic consignee collection.

    ZOD-FIS-001  blocking  empty id
    ZOD-FIS-002  critical  id matches none of the region's formats
"""

import logging
import re
import unicodedata
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .config import CONSIGNEE_COLLECTION
from .findings import Finding, FindingFactory, Severity
from .regional_config import DEFAULT_REGIONAL_CONFIG, RegionalConfigStore

logger = logging.getLogger("courier.fiscal_id")

UNKNOWN_ID_TYPE = "desconocido"


@dataclass
class FiscalIdValidation:
    raw_id: str
    region: str
    is_valid: bool
    id_type: str = UNKNOWN_ID_TYPE
    findings: List[Finding] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            "raw_id": self.raw_id,
            "region": self.region,
            "is_valid": self.is_valid,
            "id_type": self.id_type,
            "findings": [f.to_dict() for f in self.findings],
        }


class FiscalIdValidator:

    def __init__(self, config_store: RegionalConfigStore = None,
                 finding_factory: FindingFactory = None):
        self.config_store = config_store or DEFAULT_REGIONAL_CONFIG
        self.findings = finding_factory or FindingFactory()

    def detect_id_type(self, raw_id, region="PA") -> str:
        """Name of the first matching format, or 'desconocido'."""
        value = (raw_id or "").strip()
        if not value:
            return UNKNOWN_ID_TYPE
        for fmt in self.config_store.get(region).fiscal_id_formats:
            if re.match(fmt.pattern, value, re.IGNORECASE):
                return fmt.name
        return UNKNOWN_ID_TYPE

    def validate(self, raw_id, region="PA") -> FiscalIdValidation:
        cfg = self.config_store.get(region)
        code = cfg.region.value
        value = (raw_id or "").strip()

        if not value:
            finding = self.findings.create(
                rule="ZOD-FIS-001",
                severity=Severity.BLOCKING,
                message="Identificación fiscal vacía",
                detail=f"El consignatario no tiene RUC/Cédula. Registro manual requerido ante {cfg.customs_authority}.",
                region=code,
                field="fiscal_id",
                legal_basis=cfg.citation("declaration"),
            )
            return FiscalIdValidation(raw_id or "", code, False, findings=[finding])

        id_type = self.detect_id_type(value, code)
        if id_type != UNKNOWN_ID_TYPE:
            return FiscalIdValidation(value, code, True, id_type=id_type)

        accepted = ", ".join(f"{f.name} ({f.example})" for f in cfg.fiscal_id_formats)
        finding = self.findings.create(
            rule="ZOD-FIS-002",
            severity=Severity.CRITICAL,
            message=f"Formato de identificación fiscal inválido para {cfg.country_name}",
            detail=f"'{value}' no coincide con ningún formato aceptado. Formatos aceptados: {accepted}",
            region=code,
            field="fiscal_id",
            expected=accepted,
            actual=value,
        )
        logger.debug(f"Fiscal id {value!r} rejected for {code}")
        return FiscalIdValidation(value, code, False, findings=[finding])


# ═══════════════════════════════════════════
#  CONSIGNEE NAME RESOLUTION
# ═══════════════════════════════════════════

def normalize_name(name):
    """Lowercase, strip accents and punctuation, collapse spaces."""
    text = unicodedata.normalize("NFD", str(name or "").lower())
    text = "".join(c for c in text if not unicodedata.combining(c))
    text = re.sub(r"[^a-z0-9\s]", "", text)
    return re.sub(r"\s+", " ", text).strip()


def _levenshtein(a, b):
    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a, 1):
        cur = [i]
        for j, cb in enumerate(b, 1):
            if ca == cb:
                cur.append(prev[j - 1])
            else:
                cur.append(1 + min(prev[j], cur[j - 1], prev[j - 1]))
        prev = cur
    return prev[-1]


def name_similarity(a, b):
    """Similarity percentage (0-100) from edit distance over the longer string."""
    longer, shorter = (a, b) if len(a) > len(b) else (b, a)
    if not longer:
        return 100
    return round((len(longer) - _levenshtein(longer, shorter)) / len(longer) * 100)


@dataclass
class ConsigneeMatch:
    original_name: str
    normalized_name: str
    fiscal_id: Optional[str] = None
    id_type: Optional[str] = None
    found: bool = False
    confidence: int = 0
    suggestions: List[Dict] = field(default_factory=list)
    review_required: bool = True
    message: str = ""


class ConsigneeDirectory:
    """
    Looks up a consignee's RUC/Cédula by name.

    Exact normalized-name hits come from an in-process cache first, then
    from Firestore; partial hits at >= 85% similarity are returned with
    review required below 95%.
    """

    def __init__(self, db=None, collection=CONSIGNEE_COLLECTION, limit=5):
        self.db = db
        self.collection = collection
        self.limit = limit
        self._cache: Dict[str, Dict] = {}

    def remember(self, record: Dict):
        key = record.get("nombre_normalizado") or normalize_name(record.get("nombre_consignatario", ""))
        self._cache[key] = record

    def lookup(self, name) -> ConsigneeMatch:
        normalized = normalize_name(name)
        cached = self._cache.get(normalized)
        if cached:
            return self._found(name, normalized, cached, 100, [cached])

        candidates = self._query(normalized)
        if candidates:
            for c in candidates:
                if c.get("nombre_normalizado") == normalized:
                    self.remember(c)
                    return self._found(name, normalized, c, 100, [c])

            best = max(candidates, key=lambda c: name_similarity(normalized, c.get("nombre_normalizado", "")))
            score = name_similarity(normalized, best.get("nombre_normalizado", ""))
            if score >= 85:
                match = self._found(name, normalized, best, score, candidates)
                match.review_required = score < 95
                match.message = f"Posible coincidencia: {best.get('nombre_consignatario', '')} ({score}% similitud)"
                return match
            return ConsigneeMatch(
                original_name=name, normalized_name=normalized, confidence=score,
                suggestions=candidates,
                message=f"Sin RUC/Cédula. {len(candidates)} sugerencias disponibles.",
            )

        return ConsigneeMatch(
            original_name=name, normalized_name=normalized,
            message="⚠️ SIN RUC/CÉDULA - Requiere registro manual",
        )

    @staticmethod
    def _found(name, normalized, record, confidence, suggestions):
        return ConsigneeMatch(
            original_name=name,
            normalized_name=normalized,
            fiscal_id=record.get("ruc_cedula"),
            id_type=record.get("tipo_documento"),
            found=True,
            confidence=confidence,
            suggestions=suggestions,
            review_required=False,
            message=f"RUC/Cédula encontrado: {record.get('ruc_cedula')}",
        )

    def _query(self, normalized) -> List[Dict]:
        if self.db is None or not normalized:
            return []
        # Firestore has no substring match; pull by first token and filter
        first = normalized.split(" ")[0]
        try:
            docs = (
                self.db.collection(self.collection)
                .where("activo", "==", True)
                .where("tokens", "array_contains", first)
                .limit(self.limit * 4)
                .stream()
            )
            rows = [d.to_dict() for d in docs]
        except Exception as e:
            logger.warning(f"Consignee lookup failed for {normalized!r}: {e}")
            return []
        rows = [
            r for r in rows
            if r.get("nombre_normalizado")
            and (normalized in r["nombre_normalizado"] or r["nombre_normalizado"] in normalized)
        ]
        rows.sort(key=lambda r: r.get("usos_exitosos", 0), reverse=True)
        return rows[:self.limit]
