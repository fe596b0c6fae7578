"""
Precedent Store
===============
Read-only sources of advance customs rulings (Resoluciones Anticipadas)
for the precedent engine.

A lookup never raises: every store returns a PrecedentLookup that
carries either the precedents or a PrecedentLookupError, so callers can
tell "nothing on file" apart from "store unreachable, used cache".

    FirestorePrecedentStore  customs_precedents collection, one attempt
    HttpPrecedentStore       REST endpoint, timeout + exponential backoff
    NullPrecedentStore       no remote source (seed cache only)
"""

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import requests

from .config import (
    PRECEDENT_BACKOFF,
    PRECEDENT_COLLECTION,
    PRECEDENT_MAX_ATTEMPTS,
    PRECEDENT_TIMEOUT,
)

logger = logging.getLogger("courier.precedent_store")


# ═══════════════════════════════════════════
#  DATA CLASSES
# ═══════════════════════════════════════════

@dataclass
class Precedent:
    id: str
    region: str
    ruling_id: str
    ruling_type: str  # clasificacion | valoracion | origen
    authority: str
    hs_code: str
    keywords: List[str] = field(default_factory=list)
    legal_rationale: str = ""
    product_description: Optional[str] = None
    gri_applied: Optional[str] = None
    effective_date: str = ""
    expiration_date: Optional[str] = None
    source_document: Optional[str] = None
    active: bool = True

    @classmethod
    def from_record(cls, row: Dict, doc_id: str = "") -> "Precedent":
        """Build from a store row (snake_case columns of customs_precedents)."""
        return cls(
            id=str(row.get("id") or doc_id),
            region=row.get("country_code", ""),
            ruling_id=row.get("ruling_id", ""),
            ruling_type=row.get("ruling_type", "clasificacion"),
            authority=row.get("authority", ""),
            hs_code=row.get("hs_code", ""),
            keywords=list(row.get("description_keywords") or []),
            legal_rationale=row.get("legal_rationale", ""),
            product_description=row.get("product_description") or None,
            gri_applied=row.get("gri_applied") or None,
            effective_date=str(row.get("effective_date") or ""),
            expiration_date=row.get("expiration_date") or None,
            source_document=row.get("source_document") or None,
            active=bool(row.get("activo", True)),
        )

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "country_code": self.region,
            "ruling_id": self.ruling_id,
            "ruling_type": self.ruling_type,
            "authority": self.authority,
            "hs_code": self.hs_code,
            "description_keywords": list(self.keywords),
            "product_description": self.product_description,
            "legal_rationale": self.legal_rationale,
            "gri_applied": self.gri_applied,
            "effective_date": self.effective_date,
            "expiration_date": self.expiration_date,
            "source_document": self.source_document,
            "activo": self.active,
        }


@dataclass(frozen=True)
class PrecedentLookupError:
    kind: str  # timeout | connection | http | invalid_response | store
    message: str

    def to_dict(self) -> Dict:
        return {"kind": self.kind, "message": self.message}


@dataclass
class PrecedentLookup:
    precedents: List[Precedent] = field(default_factory=list)
    error: Optional[PrecedentLookupError] = None
    source: str = "remote"  # remote | cache | none

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict:
        return {
            "precedents": len(self.precedents),
            "error": self.error.to_dict() if self.error else None,
            "source": self.source,
        }


# ═══════════════════════════════════════════
#  STORES
# ═══════════════════════════════════════════

class PrecedentStore(ABC):

    @abstractmethod
    def fetch(self, region: str) -> PrecedentLookup:
        """Active precedents for one region."""


class NullPrecedentStore(PrecedentStore):

    def fetch(self, region: str) -> PrecedentLookup:
        return PrecedentLookup(source="none")


class FirestorePrecedentStore(PrecedentStore):

    def __init__(self, db, collection: str = PRECEDENT_COLLECTION):
        self.db = db
        self.collection = collection

    def fetch(self, region: str) -> PrecedentLookup:
        try:
            docs = (
                self.db.collection(self.collection)
                .where("country_code", "==", region)
                .where("activo", "==", True)
                .stream()
            )
            precedents = [Precedent.from_record(doc.to_dict() or {}, doc.id) for doc in docs]
        except Exception as e:
            logger.warning(f"Precedent lookup failed for {region}: {e}")
            return PrecedentLookup(error=PrecedentLookupError("store", str(e)), source="cache")
        logger.debug(f"Fetched {len(precedents)} precedent(s) for {region} from {self.collection}")
        return PrecedentLookup(precedents=precedents)


class HttpPrecedentStore(PrecedentStore):
    """
    GET <base_url>?country_code=<region>&activo=true

    The endpoint returns a JSON list of customs_precedents rows (or an
    object with a "data" list). Timeouts, connection errors and 5xx are
    retried, sleeping backoff * 2**(n-1) before the n-th retry; 4xx and
    bad payloads are not.
    """

    def __init__(self, base_url: str, session: requests.Session = None,
                 timeout: float = PRECEDENT_TIMEOUT,
                 max_attempts: int = PRECEDENT_MAX_ATTEMPTS,
                 backoff: float = PRECEDENT_BACKOFF):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self.max_attempts = max(1, int(max_attempts))
        self.backoff = backoff

    def fetch(self, region: str) -> PrecedentLookup:
        error = None
        for attempt in range(self.max_attempts):
            if attempt:
                time.sleep(self.backoff * 2 ** (attempt - 1))
            try:
                resp = self.session.get(
                    self.base_url,
                    params={"country_code": region, "activo": "true"},
                    timeout=self.timeout,
                )
            except requests.exceptions.Timeout:
                error = PrecedentLookupError("timeout", f"No response within {self.timeout}s")
                logger.warning(f"Precedent lookup timed out ({attempt + 1}/{self.max_attempts})")
                continue
            except requests.exceptions.RequestException as e:
                error = PrecedentLookupError("connection", str(e))
                logger.warning(f"Precedent lookup error ({attempt + 1}/{self.max_attempts}): {e}")
                continue

            if resp.status_code >= 500:
                error = PrecedentLookupError("http", f"HTTP {resp.status_code}")
                logger.warning(f"Precedent lookup HTTP {resp.status_code} ({attempt + 1}/{self.max_attempts})")
                continue
            if resp.status_code != 200:
                logger.warning(f"Precedent lookup rejected: {resp.status_code} - {resp.text[:200]}")
                return PrecedentLookup(
                    error=PrecedentLookupError("http", f"HTTP {resp.status_code}"), source="cache")

            try:
                payload = resp.json()
            except ValueError as e:
                return PrecedentLookup(
                    error=PrecedentLookupError("invalid_response", str(e)), source="cache")
            rows = payload.get("data") if isinstance(payload, dict) else payload
            if not isinstance(rows, list):
                return PrecedentLookup(
                    error=PrecedentLookupError("invalid_response", "Expected a list of precedents"),
                    source="cache")
            return PrecedentLookup(precedents=[Precedent.from_record(r) for r in rows if isinstance(r, dict)])

        return PrecedentLookup(error=error, source="cache")


def get_firestore_client():
    """Firestore client from the default firebase_admin app."""
    import firebase_admin
    from firebase_admin import firestore

    if not firebase_admin._apps:
        firebase_admin.initialize_app()
    return firestore.client()
