"""
Document Type Classifier
========================
Scores raw document text against weighted keyword sets and picks the
document type (INVOICE, BL, CP, MANIFEST, PACKING_LIST, DUCA-F, DUCA-T,
DUA, FEL) and the jurisdiction it belongs to.

Score per type = weight x number of its keywords found (case-insensitive
substring). Confidence = top / sum of all scores x 100, capped at 99.
Pure: no state is kept between calls.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

from .document_patterns import DOCUMENT_IDENTIFIERS, DocumentType
from .regional_config import DEFAULT_REGIONAL_CONFIG, Region, RegionalConfigStore

logger = logging.getLogger("courier.document_identifier")

DEFAULT_REGION = Region.PA


@dataclass
class DocumentDetection:
    document_type: DocumentType
    confidence: float
    region: Region
    scores: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict:
        return {
            "document_type": self.document_type.value,
            "confidence": self.confidence,
            "region": self.region.value,
            "scores": dict(self.scores),
        }


class DocumentTypeClassifier:

    def __init__(self, config_store: RegionalConfigStore = None, identifiers=DOCUMENT_IDENTIFIERS):
        self.config_store = config_store or DEFAULT_REGIONAL_CONFIG
        self.identifiers = identifiers

    def detect(self, text: str, region=None) -> DocumentDetection:
        upper = (text or "").upper()
        known_region = self.config_store.get(region).region if region else self.config_store.infer_region(text)

        scores = {ident.document_type.value: 0 for ident in self.identifiers}
        for ident in self.identifiers:
            if known_region and ident.regions and known_region.value not in ident.regions:
                continue
            for keyword in ident.keywords:
                if keyword.upper() in upper:
                    scores[ident.document_type.value] += ident.weight

        top_type, top_score = None, 0
        for doc_type, score in scores.items():
            if score > top_score:
                top_type, top_score = doc_type, score
        total = sum(scores.values())

        document_type = DocumentType(top_type) if top_score > 0 else DocumentType.UNKNOWN
        confidence = round(min(top_score / total * 100, 99), 2) if total > 0 else 0

        detection = DocumentDetection(
            document_type=document_type,
            confidence=confidence,
            region=known_region or self._region_from_type(document_type),
            scores=scores,
        )
        logger.info(f"Detected {detection.document_type.value} ({detection.confidence}%) "
                    f"region={detection.region.value}")
        return detection

    def _region_from_type(self, document_type: DocumentType) -> Region:
        for ident in self.identifiers:
            if ident.document_type == document_type and len(ident.regions) == 1:
                return Region(ident.regions[0])
        return DEFAULT_REGION
