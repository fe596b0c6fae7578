"""
Product Classifier
==================
Classifies a free-text product description into category/subcategory,
the authorities whose permit it needs, and a customs value bracket.

Scoring:
    normalize -> lowercase, strip accents, non-alphanumerics to spaces
    score(pattern) = sum of lengths of its keywords found in the text
    best pattern = strictly greater score wins (table order breaks ties)
    confidence = min(100, round(score / divisor * 100))

Brackets:
    A  documents
    B  <= de minimis
    C  de minimis .. broker threshold
    D  >= broker threshold
"""

import logging
import re
import unicodedata
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .config import CONFIDENCE_DIVISOR, DEFAULT_THRESHOLDS, ValueBracketThresholds, classify_by_value
from .product_patterns import (
    BRACKET_NAMES,
    CATEGORY_NAMES,
    DOCUMENT_KEYWORDS,
    PRODUCT_PATTERNS,
    PROHIBITED_KEYWORDS,
    ProductPattern,
)

logger = logging.getLogger("courier.product_classifier")

PROHIBITED_ADVISORY = "⚠️ PRODUCTO POSIBLEMENTE PROHIBIDO - Requiere revisión manual"
BROKER_ADVISORY = "Valor alto - Requiere corredor de aduanas"
NO_DESCRIPTION_ADVISORY = "Sin descripción - Clasificación manual requerida"


class CustomsBracket(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"


def normalize_text(text: str) -> str:
    """'Pañal Bebé L-size' -> 'panal bebe l size'"""
    decomposed = unicodedata.normalize("NFD", (text or "").lower())
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    stripped = re.sub(r"[^a-z0-9\s]", " ", stripped)
    return re.sub(r"\s+", " ", stripped).strip()


@dataclass
class ClassificationResult:
    product_category: str
    subcategory: str
    customs_bracket: CustomsBracket
    confidence: int
    requires_permit: bool = False
    authorities: List[str] = field(default_factory=list)
    restrictions: List[str] = field(default_factory=list)
    advisories: List[str] = field(default_factory=list)
    is_document: bool = False
    is_prohibited: bool = False
    matched_keywords: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            "product_category": self.product_category,
            "subcategory": self.subcategory,
            "customs_bracket": self.customs_bracket.value,
            "confidence": self.confidence,
            "requires_permit": self.requires_permit,
            "authorities": list(self.authorities),
            "restrictions": list(self.restrictions),
            "advisories": list(self.advisories),
            "is_document": self.is_document,
            "is_prohibited": self.is_prohibited,
            "matched_keywords": list(self.matched_keywords),
        }


class ProductClassifier:
    """Stateless apart from the pre-normalized pattern table."""

    def __init__(self, thresholds: ValueBracketThresholds = None,
                 confidence_divisor: float = CONFIDENCE_DIVISOR,
                 patterns: Tuple[ProductPattern, ...] = PRODUCT_PATTERNS):
        self.thresholds = thresholds or DEFAULT_THRESHOLDS
        self.confidence_divisor = confidence_divisor
        self.patterns = patterns
        # (pattern, [(original keyword, normalized keyword)])
        self._index = [
            (p, [(kw, normalize_text(kw)) for kw in p.keywords]) for p in patterns
        ]
        self._prohibited = [normalize_text(kw) for kw in PROHIBITED_KEYWORDS]
        self._document = [normalize_text(kw) for kw in DOCUMENT_KEYWORDS]

    def classify(self, description: str, value: float = 0) -> ClassificationResult:
        if not description or not description.strip():
            return ClassificationResult(
                product_category="general",
                subcategory="sin_clasificar",
                customs_bracket=self._bracket(value, False),
                confidence=0,
                advisories=[NO_DESCRIPTION_ADVISORY],
            )

        text = normalize_text(description)
        is_prohibited = any(kw and kw in text for kw in self._prohibited)
        is_document = any(kw in text for kw in self._document)
        pattern, confidence, matched = self._best_match(text)

        result = ClassificationResult(
            product_category=pattern.category if pattern else "general",
            subcategory=pattern.subcategory if pattern else "sin_clasificar",
            customs_bracket=self._bracket(value, is_document),
            confidence=confidence,
            requires_permit=pattern.requires_permit if pattern else False,
            authorities=list(pattern.authorities) if pattern else [],
            restrictions=list(pattern.restrictions) if pattern else [],
            advisories=self._advisories(pattern, value, is_prohibited),
            is_document=is_document,
            is_prohibited=is_prohibited,
            matched_keywords=matched,
        )
        logger.debug(f"{description!r} -> {result.product_category}/{result.subcategory} "
                     f"({result.confidence}%) bracket {result.customs_bracket.value}")
        return result

    def _best_match(self, text: str) -> Tuple[Optional[ProductPattern], int, List[str]]:
        best, best_score, best_keywords = None, 0, []
        for pattern, keywords in self._index:
            found = [original for original, norm in keywords if norm and norm in text]
            if not found:
                continue
            score = sum(len(kw) for kw in found)
            if score > best_score:
                best, best_score, best_keywords = pattern, score, found

        if best is None:
            return None, 0, []
        confidence = min(100, round(best_score / self.confidence_divisor * 100))
        return best, confidence, best_keywords

    def _bracket(self, value, is_document: bool) -> CustomsBracket:
        if is_document:
            return CustomsBracket.A
        return CustomsBracket(classify_by_value(value or 0, self.thresholds))

    def _advisories(self, pattern: Optional[ProductPattern], value, is_prohibited: bool) -> List[str]:
        advisories = []
        if is_prohibited:
            advisories.append(PROHIBITED_ADVISORY)
        if pattern and pattern.requires_permit:
            advisories.append(f"Requiere permiso de: {', '.join(pattern.authorities)}")
        if (value or 0) >= self.thresholds.broker:
            advisories.append(BROKER_ADVISORY)
        if pattern:
            advisories.extend(pattern.restrictions)
        return advisories

    # ── Display helpers ──

    @staticmethod
    def category_name(category: str) -> str:
        return CATEGORY_NAMES.get(category, "Sin Clasificar")

    @staticmethod
    def bracket_name(bracket) -> str:
        return BRACKET_NAMES[CustomsBracket(bracket).value]

    def pattern_stats(self) -> Dict:
        keywords = set()
        for p in self.patterns:
            keywords.update(p.keywords)
        return {
            "total_patterns": len(self.patterns),
            "total_keywords": len(keywords),
            "categories": len({p.category for p in self.patterns}),
            "categories_with_permit": sum(1 for p in self.patterns if p.requires_permit),
        }
