"""
Engine Configuration
====================
Thresholds, tolerances and store settings shared by every engine.

Every value can be overridden from the environment (COURIER_* vars);
the defaults are the customs figures used across PA/CR/GT.
"""

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger("courier.config")


def _env_float(name, default):
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Ignoring non-numeric {name}={raw!r}, using {default}")
        return default


def _env_int(name, default):
    return int(_env_float(name, default))


# ═══════════════════════════════════════════
#  MONETARY TOLERANCES (USD)
# ═══════════════════════════════════════════

MONETARY_TOLERANCE = _env_float("COURIER_MONETARY_TOLERANCE", 0.02)
CIF_WARNING_TOLERANCE = _env_float("COURIER_CIF_WARNING_TOLERANCE", 0.01)
ITEM_SUM_TOLERANCE = _env_float("COURIER_ITEM_SUM_TOLERANCE", 1.0)

# ═══════════════════════════════════════════
#  CLASSIFICATION
# ═══════════════════════════════════════════

# Uncalibrated: keyword-length score that maps to 100% confidence
CONFIDENCE_DIVISOR = _env_float("COURIER_CONFIDENCE_DIVISOR", 20)
DE_MINIMIS_THRESHOLD = _env_float("COURIER_DE_MINIMIS_THRESHOLD", 100)
BROKER_THRESHOLD = _env_float("COURIER_BROKER_THRESHOLD", 2000)

# ═══════════════════════════════════════════
#  EXTRACTION / LEDGER
# ═══════════════════════════════════════════

EXTRACTION_REVIEW_THRESHOLD = _env_float("COURIER_EXTRACTION_REVIEW_THRESHOLD", 80)
MEMORY_CAP = _env_int("COURIER_MEMORY_CAP", 500)
MEMORY_CONFIDENCE_BOOST = 10
MEMORY_CONFIDENCE_CAP = 98
LEDGER_HISTORY_CAP = _env_int("COURIER_LEDGER_HISTORY_CAP", 200)

# ═══════════════════════════════════════════
#  PRECEDENT STORE
# ═══════════════════════════════════════════

PRECEDENT_RESULT_LIMIT = 5
PRECEDENT_TIMEOUT = _env_float("COURIER_PRECEDENT_TIMEOUT", 5)  # seconds
PRECEDENT_BACKOFF = _env_float("COURIER_PRECEDENT_BACKOFF", 0.5)  # seconds
PRECEDENT_MAX_ATTEMPTS = _env_int("COURIER_PRECEDENT_MAX_ATTEMPTS", 2)

PRECEDENT_COLLECTION = os.environ.get("COURIER_PRECEDENT_COLLECTION", "customs_precedents")
MEMORY_COLLECTION = os.environ.get("COURIER_MEMORY_COLLECTION", "extraction_corrections")
CONSIGNEE_COLLECTION = os.environ.get("COURIER_CONSIGNEE_COLLECTION", "consignatarios_fiscales")

LOG_LEVEL = os.environ.get("COURIER_LOG_LEVEL", "INFO")


@dataclass(frozen=True)
class ValueBracketThresholds:
    """Declared-value cut-offs for customs brackets B/C/D."""
    de_minimis: float = DE_MINIMIS_THRESHOLD
    broker: float = BROKER_THRESHOLD


DEFAULT_THRESHOLDS = ValueBracketThresholds()


def classify_by_value(value, thresholds=DEFAULT_THRESHOLDS):
    """
    Bracket a declared value.

    B: value <= de-minimis threshold
    D: value >= mandatory-broker threshold
    C: everything in between
    """
    if value <= thresholds.de_minimis:
        return "B"
    if value >= thresholds.broker:
        return "D"
    return "C"


def configure_logging(level=None):
    """Basic logging setup for scripts and hosts that have none."""
    level = level or LOG_LEVEL
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
