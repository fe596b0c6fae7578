"""
Courier Compliance Engine
=========================

Compliance validation and classification for courier shipments in
Panamá, Costa Rica and Guatemala.

Modules:
- regional_config: per-jurisdiction tax rates, fiscal-id formats, citations
- document_identifier: document type + region detection
- field_extractor: regex field / line-item extraction with correction memory
- financial_validator: CIF identity and DAI -> ISC -> VAT cascade
- fiscal_id_validator: RUC / Cédula / NIT checks, consignee lookup
- product_classifier: keyword pattern classification, permits, brackets
- precedent_engine: advance rulings and GRI rationale
- integrity_ledger: chained SHA-256 validation records
- compliance_pipeline: integration layer connecting all engines

Usage:
    from courier_compliance import create_pipeline
    report = create_pipeline().process_document(text)
"""

from .compliance_pipeline import (
    CompliancePipeline,
    DocumentReport,
    ManifestRowResult,
    PipelineStatus,
    create_pipeline,
)
from .config import configure_logging
from .document_identifier import DocumentDetection, DocumentTypeClassifier
from .document_patterns import DocumentType
from .field_extractor import ExtractionField, ExtractionResult, FieldExtractor, LineItem
from .financial_validator import FinancialValidator, TaxBreakdown
from .findings import Finding, FindingFactory, Severity, calculate_score
from .fiscal_id_validator import ConsigneeDirectory, FiscalIdValidation, FiscalIdValidator
from .integrity_ledger import IntegrityLedger, ValidationResult
from .memory_store import FirestoreMemoryStore, InMemoryMemoryStore, MemoryEntry, MemoryStore
from .precedent_engine import (
    GRIAnalysis,
    GRIContext,
    PrecedentEngine,
    PrecedentSearch,
    PrecedentValidation,
    get_gri_rule,
    get_gri_rules,
)
from .precedent_store import (
    FirestorePrecedentStore,
    HttpPrecedentStore,
    NullPrecedentStore,
    Precedent,
    PrecedentLookup,
    PrecedentLookupError,
)
from .product_classifier import ClassificationResult, CustomsBracket, ProductClassifier
from .regional_config import (
    DEFAULT_REGIONAL_CONFIG,
    Region,
    RegionalConfigStore,
    RegionalTaxConfig,
    UnknownRegionError,
)

__version__ = "1.0.0"
