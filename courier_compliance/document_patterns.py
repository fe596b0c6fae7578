"""
Document Patterns
=================
Keyword sets for document-type identification and the per-type regex
tables used by field extraction. Pure data; see document_identifier
and field_extractor for the engines that read it.

Regional types (DUCA-F, DUCA-T, DUA, FEL) only score when the document
region is one of their declared regions.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple


class DocumentType(str, Enum):
    INVOICE = "INVOICE"
    BL = "BL"
    CP = "CP"
    MANIFEST = "MANIFEST"
    PACKING_LIST = "PACKING_LIST"
    DUCA_F = "DUCA-F"
    DUCA_T = "DUCA-T"
    DUA = "DUA"
    FEL = "FEL"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class DocumentIdentifier:
    document_type: DocumentType
    keywords: Tuple[str, ...]
    weight: int
    regions: Tuple[str, ...] = ()


@dataclass(frozen=True)
class FieldPattern:
    regex: str
    confidence: int
    value_type: str = "string"  # string | number | date
    target_column: str = None


# ═══════════════════════════════════════════
#  DOCUMENT TYPE IDENTIFIERS
# ═══════════════════════════════════════════

DOCUMENT_IDENTIFIERS: Tuple[DocumentIdentifier, ...] = (
    DocumentIdentifier(
        DocumentType.INVOICE,
        ("COMMERCIAL INVOICE", "FACTURA COMERCIAL", "INVOICE NO", "INVOICE DATE",
         "PROFORMA", "INV-", "BILL TO", "SOLD TO"),
        10,
    ),
    DocumentIdentifier(
        DocumentType.BL,
        ("BILL OF LADING", "B/L", "CONOCIMIENTO DE EMBARQUE", "OCEAN BILL",
         "SEA WAYBILL", "MASTER B/L", "HOUSE B/L"),
        10,
    ),
    DocumentIdentifier(
        DocumentType.CP,
        ("AIR WAYBILL", "AWB", "AIRWAY BILL", "CARTA PORTE", "MAWB", "HAWB",
         "HOUSE AIR WAYBILL"),
        10,
    ),
    DocumentIdentifier(
        DocumentType.MANIFEST,
        ("MANIFEST", "MANIFIESTO", "CARGO MANIFEST", "FLIGHT MANIFEST",
         "VESSEL MANIFEST", "INWARD MANIFEST"),
        10,
    ),
    DocumentIdentifier(
        DocumentType.PACKING_LIST,
        ("PACKING LIST", "LISTA DE EMPAQUE", "PACK LIST", "P/L"),
        8,
    ),
    DocumentIdentifier(
        DocumentType.DUCA_F,
        ("DUCA-F", "DUCA F", "DUCA FACTURA", "DECLARACIÓN ÚNICA CENTROAMERICANA",
         "DECLARACION UNICA CENTROAMERICANA"),
        12,
        ("CR", "GT"),
    ),
    DocumentIdentifier(
        DocumentType.DUCA_T,
        ("DUCA-T", "DUCA T", "DUCA TRÁNSITO", "DUCA TRANSITO",
         "TRÁNSITO INTERNACIONAL", "TRANSITO INTERNACIONAL"),
        12,
        ("CR", "GT"),
    ),
    DocumentIdentifier(
        DocumentType.DUA,
        ("DUA N", "DUA:", "DECLARACIÓN ÚNICA ADUANERA", "DECLARACION UNICA ADUANERA",
         "SISTEMA TICA"),
        12,
        ("CR",),
    ),
    DocumentIdentifier(
        DocumentType.FEL,
        ("FACTURA ELECTRÓNICA EN LÍNEA", "FACTURA ELECTRONICA EN LINEA", "FACTURA FEL",
         "CERTIFICADOR FEL", "NÚMERO DE AUTORIZACIÓN", "NUMERO DE AUTORIZACION", "DTE SAT"),
        12,
        ("GT",),
    ),
)


# ═══════════════════════════════════════════
#  FIELD PATTERNS
# ═══════════════════════════════════════════

_MONEY = r"[:\s]*\$?\s*([\d,]+\.?\d*)"

INVOICE_FIELDS: Dict[str, List[FieldPattern]] = {
    "supplier": [
        FieldPattern(r"(?:SHIPPER|EXPORTER|SELLER|FROM|REMITENTE)[:\s]*([^\n]{5,80})", 85, "string", "shipper"),
        FieldPattern(r"(?:EXPORTED BY|VENDOR)[:\s]*([^\n]{5,80})", 75, "string", "shipper"),
    ],
    "client": [
        FieldPattern(r"(?:CONSIGNEE|BUYER|BILL TO|SOLD TO|CONSIGNATARIO|IMPORTADOR)[:\s]*([^\n]{5,80})",
                     85, "string", "consignatario"),
        FieldPattern(r"(?:SHIP TO|DELIVER TO|DESTINATARIO)[:\s]*([^\n]{5,80})", 75, "string", "consignatario"),
    ],
    "invoice_number": [
        FieldPattern(r"(?:INVOICE\s*(?:NO|NUM|NUMBER|#))[.:\s]*([A-Z0-9\-/]{3,30})", 90, "string", "referencia"),
        FieldPattern(r"(?:FACTURA\s*(?:NO|NUM|NÚMERO))[.:\s]*([A-Z0-9\-/]{3,30})", 85, "string", "referencia"),
    ],
    "invoice_date": [
        FieldPattern(r"(?:INVOICE\s*DATE|DATE|FECHA)[:\s]*(\d{1,2}[/\-.]\d{1,2}[/\-.]\d{2,4})", 85, "date"),
        FieldPattern(r"(?:DATE)[:\s]*(\w+\s+\d{1,2},?\s+\d{4})", 80, "date"),
    ],
    "incoterm": [
        FieldPattern(r"(?:INCOTERM|TERMS|CONDICIÓN)[:\s]*(EXW|FOB|FCA|CIF|CIP|CFR|CPT|DAP|DPU|DDP)", 95),
    ],
    "currency": [
        FieldPattern(r"(?:CURRENCY|MONEDA)[:\s]*(USD|EUR|GBP|JPY|CNY|PAB|CRC|GTQ)", 90, "string", "moneda"),
    ],
    "origin": [
        FieldPattern(r"(?:COUNTRY\s*OF\s*ORIGIN|ORIGIN|ORIGEN|PAÍS\s*DE\s*ORIGEN)[:\s]*([A-Z]{2,3}|[A-Za-z\s]{3,30})",
                     80, "string", "origin_country"),
    ],
    "fob": [
        FieldPattern(r"(?:FOB|TOTAL\s*FOB)" + _MONEY, 85, "number", "valor_fob"),
    ],
    "freight": [
        FieldPattern(r"(?:FREIGHT|FLETE|FLETE\s*INTERNACIONAL)" + _MONEY, 85, "number", "valor_flete"),
    ],
    "insurance": [
        FieldPattern(r"(?:INSURANCE|SEGURO)" + _MONEY, 85, "number", "valor_seguro"),
    ],
    "cif": [
        FieldPattern(r"(?:CIF|TOTAL\s*CIF|VALOR\s*CIF)" + _MONEY, 90, "number", "valor_cif"),
    ],
    "subtotal": [
        FieldPattern(r"(?:SUBTOTAL|SUB-?TOTAL)" + _MONEY, 85, "number"),
        FieldPattern(r"(?:TOTAL)" + _MONEY, 70, "number"),
    ],
}

BL_FIELDS: Dict[str, List[FieldPattern]] = {
    "supplier": [
        FieldPattern(r"(?:SHIPPER|EXPORTER)[:\s]*([^\n]{5,80})", 85, "string", "shipper"),
    ],
    "client": [
        FieldPattern(r"(?:CONSIGNEE)[:\s]*([^\n]{5,80})", 90, "string", "consignatario"),
    ],
    "invoice_number": [
        FieldPattern(r"(?:B/?L\s*(?:NO|NUMBER))[.:\s]*([A-Z0-9\-/]{3,30})", 90, "string", "referencia"),
    ],
    "vessel": [
        FieldPattern(r"(?:VESSEL|BUQUE|OCEAN VESSEL)[:\s]*([^\n]{3,50})", 85, "string", "buque_vuelo"),
    ],
    "port_of_loading": [
        FieldPattern(r"(?:PORT\s*OF\s*LOADING|POL|PUERTO\s*DE\s*EMBARQUE)[:\s]*([^\n]{3,50})", 85),
    ],
    "port_of_discharge": [
        FieldPattern(r"(?:PORT\s*OF\s*DISCHARGE|POD|PUERTO\s*DE\s*DESTINO)[:\s]*([^\n]{3,50})",
                     85, "string", "recinto_destino"),
    ],
}

CP_FIELDS: Dict[str, List[FieldPattern]] = {
    "supplier": [
        FieldPattern(r"(?:SHIPPER|REMITENTE)[:\s]*([^\n]{5,80})", 85, "string", "shipper"),
    ],
    "client": [
        FieldPattern(r"(?:CONSIGNEE|DESTINATARIO)[:\s]*([^\n]{5,80})", 90, "string", "consignatario"),
    ],
    "mawb": [
        FieldPattern(r"(?:MAWB|MASTER\s*AWB|AWB\s*(?:NO|NUMBER))[.:\s]*(\d{3}[\-\s]?\d{8})", 95, "string", "referencia"),
    ],
    "hawb": [
        FieldPattern(r"(?:HAWB|HOUSE\s*AWB)[.:\s]*([A-Z0-9\-]{5,20})", 90),
    ],
}

REGIONAL_FIELDS: Dict[str, List[FieldPattern]] = {
    "declaration_number": [
        FieldPattern(r"(?:DUCA-?[FT]?|DUA)\s*(?:NO|N°|NUM(?:ERO)?|#)[.:\s]*([A-Z0-9][A-Z0-9\-]{5,29})",
                     90, "string", "numero_declaracion"),
        FieldPattern(r"(?:DECLARACI[OÓ]N)\s*(?:NO|N°|NUM(?:ERO)?|#)[.:\s]*([A-Z0-9][A-Z0-9\-]{5,29})",
                     80, "string", "numero_declaracion"),
    ],
    "authorization_number": [
        FieldPattern(r"(?:N[UÚ]MERO\s*DE\s*AUTORIZACI[OÓ]N|AUTORIZACI[OÓ]N)[.:\s]*([A-F0-9][A-F0-9\-]{7,39})", 90),
    ],
    "fiscal_id": [
        FieldPattern(r"\b(?:NIT|RUC|C[EÉ]DULA|DIMEX)\b[.:#\s]*([0-9][0-9A-Z\-]{3,20})", 85, "string", "ruc_cedula"),
    ],
}

FIELD_PATTERNS: Dict[DocumentType, Dict[str, List[FieldPattern]]] = {
    DocumentType.INVOICE: INVOICE_FIELDS,
    DocumentType.BL: BL_FIELDS,
    DocumentType.CP: CP_FIELDS,
    DocumentType.DUCA_F: {**INVOICE_FIELDS, **REGIONAL_FIELDS},
    DocumentType.DUCA_T: {**INVOICE_FIELDS, **REGIONAL_FIELDS},
    DocumentType.DUA: {**INVOICE_FIELDS, **REGIONAL_FIELDS},
    DocumentType.FEL: {**INVOICE_FIELDS, **REGIONAL_FIELDS},
}

# Fields that default to 0 / "USD" when absent from the document
FINANCIAL_FIELDS = ("subtotal", "freight", "insurance", "fob", "cif")
HEADER_FIELDS = ("supplier", "client", "invoice_number", "invoice_date", "incoterm", "currency", "origin")


def patterns_for(document_type) -> Dict[str, List[FieldPattern]]:
    """Field table for a document type; types without one use the invoice table."""
    return FIELD_PATTERNS.get(DocumentType(document_type), INVOICE_FIELDS)
