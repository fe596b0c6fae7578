"""
Correction Memory Store
=======================
Persistence port for the extractor's learned corrections. The extractor
keeps its memory in process and calls load() once and save() after each
recorded correction; hosts choose where it lives.

    InMemoryMemoryStore   tests, single-process hosts
    FirestoreMemoryStore  one document per correction in a collection
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Dict, List

from .config import MEMORY_CAP, MEMORY_COLLECTION

logger = logging.getLogger("courier.memory_store")

BATCH_LIMIT = 400


@dataclass
class MemoryEntry:
    pattern: str
    correction: str
    corrected_by: str  # zod | operator
    document_type: str
    timestamp: str = ""
    applied: int = 0

    def __post_init__(self):
        if not self.timestamp:
            self.timestamp = datetime.now(timezone.utc).isoformat()

    @property
    def doc_id(self) -> str:
        return f"{self.document_type}:{self.pattern}"[:1500].replace("/", "_")

    def to_dict(self) -> Dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict) -> "MemoryEntry":
        return cls(
            pattern=data.get("pattern", ""),
            correction=data.get("correction", ""),
            corrected_by=data.get("corrected_by", "operator"),
            document_type=data.get("document_type", "UNKNOWN"),
            timestamp=str(data.get("timestamp") or ""),
            applied=int(data.get("applied", 0) or 0),
        )


class MemoryStore(ABC):

    @abstractmethod
    def load(self) -> List[MemoryEntry]:
        """Entries oldest first."""

    @abstractmethod
    def save(self, entries: List[MemoryEntry]) -> None:
        """Persist the full (already capped) entry list."""


class InMemoryMemoryStore(MemoryStore):

    def __init__(self, entries=None):
        self._entries = [MemoryEntry.from_dict(e.to_dict()) for e in (entries or [])]

    def load(self) -> List[MemoryEntry]:
        return [MemoryEntry.from_dict(e.to_dict()) for e in self._entries]

    def save(self, entries: List[MemoryEntry]) -> None:
        self._entries = [MemoryEntry.from_dict(e.to_dict()) for e in entries]


class FirestoreMemoryStore(MemoryStore):
    """
    Stores corrections in a Firestore collection keyed by
    "<document_type>:<pattern>". Entries evicted by the cap are deleted.
    """

    def __init__(self, db, collection=MEMORY_COLLECTION, cap=MEMORY_CAP):
        self.db = db
        self.collection = collection
        self.cap = cap
        self._known_ids = set()

    def load(self) -> List[MemoryEntry]:
        try:
            docs = (
                self.db.collection(self.collection)
                .order_by("timestamp")
                .limit_to_last(self.cap)
                .get()
            )
        except Exception as e:
            logger.warning(f"Could not load correction memory: {e}")
            return []
        entries = [MemoryEntry.from_dict(d.to_dict()) for d in docs]
        self._known_ids = {e.doc_id for e in entries}
        logger.info(f"Loaded {len(entries)} correction(s) from {self.collection}")
        return entries

    def save(self, entries: List[MemoryEntry]) -> None:
        col = self.db.collection(self.collection)
        current = {e.doc_id for e in entries}
        ops = [("set", e.doc_id, e.to_dict()) for e in entries]
        ops += [("delete", stale, None) for stale in self._known_ids - current]
        try:
            # Firestore batches are limited to 500 writes
            for start in range(0, len(ops), BATCH_LIMIT):
                batch = self.db.batch()
                for op, doc_id, data in ops[start:start + BATCH_LIMIT]:
                    if op == "set":
                        batch.set(col.document(doc_id), data)
                    else:
                        batch.delete(col.document(doc_id))
                batch.commit()
            self._known_ids = current
        except Exception as e:
            logger.error(f"Failed to persist correction memory: {e}")
