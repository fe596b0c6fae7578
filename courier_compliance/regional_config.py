"""
Regional Tax Configuration
==========================
Static per-jurisdiction table read by every engine: VAT name and rate,
theoretical insurance, system fee, fiscal-ID formats, customs authority
and the legal citations quoted in findings.

Jurisdictions:
- PA  Panamá      ITBMS 7%   Autoridad Nacional de Aduanas
- CR  Costa Rica  IVA 13%    Dirección General de Aduanas
- GT  Guatemala   IVA 12%    Intendencia de Aduanas (SAT)
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Optional, Tuple

logger = logging.getLogger("courier.regional_config")


class Region(str, Enum):
    PA = "PA"
    CR = "CR"
    GT = "GT"


class UnknownRegionError(KeyError):
    """Region code not present in the configuration table"""
    pass


@dataclass(frozen=True)
class FiscalIdFormat:
    name: str
    pattern: str
    example: str


@dataclass(frozen=True)
class RegionalAuthority:
    name: str
    ruling_prefix: str
    legal_framework: str


@dataclass(frozen=True)
class RegionalTaxConfig:
    region: Region
    country_name: str
    vat_name: str
    vat_rate: float
    insurance_rate: float
    system_fee: float
    customs_authority: str
    ruling_prefix: str
    legal_framework: str
    fiscal_id_formats: Tuple[FiscalIdFormat, ...]
    legal_citations: MappingProxyType = field(default_factory=lambda: MappingProxyType({}))
    detection_keywords: Tuple[str, ...] = ()

    @property
    def authority(self) -> RegionalAuthority:
        return RegionalAuthority(self.customs_authority, self.ruling_prefix, self.legal_framework)

    def citation(self, key: str) -> str:
        return self.legal_citations.get(key, self.legal_framework)

    def to_dict(self) -> Dict:
        return {
            "region": self.region.value,
            "country_name": self.country_name,
            "vat_name": self.vat_name,
            "vat_rate": self.vat_rate,
            "insurance_rate": self.insurance_rate,
            "system_fee": self.system_fee,
            "customs_authority": self.customs_authority,
            "ruling_prefix": self.ruling_prefix,
            "legal_framework": self.legal_framework,
            "fiscal_id_formats": [
                {"name": f.name, "pattern": f.pattern, "example": f.example}
                for f in self.fiscal_id_formats
            ],
            "legal_citations": dict(self.legal_citations),
        }


_PASSPORT = FiscalIdFormat("Pasaporte", r"^[A-Z]{1,2}\d{6,9}$", "PA1234567")


# ═══════════════════════════════════════════
#  JURISDICTION TABLE
# ═══════════════════════════════════════════

REGIONAL_CONFIGS: Dict[Region, RegionalTaxConfig] = {
    Region.PA: RegionalTaxConfig(
        region=Region.PA,
        country_name="Panamá",
        vat_name="ITBMS",
        vat_rate=0.07,
        insurance_rate=0.015,
        system_fee=3.00,
        customs_authority="Autoridad Nacional de Aduanas (ANA)",
        ruling_prefix="RES-ANA",
        legal_framework="Decreto Ley 1 de 2008, CAUCA IV Art. 45",
        fiscal_id_formats=(
            FiscalIdFormat("Cédula", r"^\d{1,2}-\d{2,4}-\d{1,6}$", "8-814-52"),
            FiscalIdFormat("RUC", r"^\d{5,10}-\d{1}-\d{3,6}$", "155596713-2-2015"),
            FiscalIdFormat("RUC con DV", r"^\d{1,2}-\d{2,4}-\d{1,6}\s*DV\s*\d{1,2}$", "8-814-52 DV 45"),
            _PASSPORT,
        ),
        legal_citations=MappingProxyType({
            "valuation": "Decreto Ley 1 de 2008, Art. 60 — Valor en Aduana",
            "cif": "CAUCA IV Art. 45 — Determinación del Valor en Aduana",
            "declaration": "RECAUCA Art. 323 — Declaración de Valor",
            "valuation_methods": "Decreto Ley 1/2008 Art. 63 — Métodos de Valoración",
            "tariff": "Arancel Nacional de Importación de Panamá",
            "vat": "Código Fiscal de Panamá, Art. 1057-V (ITBMS 7%)",
        }),
        detection_keywords=(
            "panama", "panamá", "itbms", "autoridad nacional de aduanas",
            "tocumen", "zona libre de colon", "zona libre de colón", "balboas",
        ),
    ),
    Region.CR: RegionalTaxConfig(
        region=Region.CR,
        country_name="Costa Rica",
        vat_name="IVA",
        vat_rate=0.13,
        insurance_rate=0.015,
        system_fee=0.00,
        customs_authority="Dirección General de Aduanas (DGA)",
        ruling_prefix="MH-DGA-RES",
        legal_framework="Ley General de Aduanas 7557, CAUCA IV / RECAUCA",
        fiscal_id_formats=(
            FiscalIdFormat("Cédula física", r"^(?:\d{9}|\d-\d{4}-\d{4})$", "1-0234-0567"),
            FiscalIdFormat("Cédula jurídica", r"^3-\d{3}-\d{6}$", "3-101-123456"),
            FiscalIdFormat("DIMEX", r"^\d{11,12}$", "155812345678"),
            _PASSPORT,
        ),
        legal_citations=MappingProxyType({
            "valuation": "Ley General de Aduanas 7557 — Valor en Aduana",
            "cif": "CAUCA IV Art. 45 — Determinación del Valor en Aduana",
            "declaration": "RECAUCA Art. 323 — Declaración de Valor",
            "valuation_methods": "Acuerdo OMC sobre Valoración, Arts. 1-7 — Métodos de Valoración",
            "tariff": "Arancel Centroamericano de Importación (SAC) — Costa Rica",
            "vat": "Ley del Impuesto al Valor Agregado 9635 (IVA 13%)",
        }),
        detection_keywords=(
            "costa rica", "dirección general de aduanas", "direccion general de aduanas",
            "tica", "dimex", "juan santamaria", "colones", "san jose",
        ),
    ),
    Region.GT: RegionalTaxConfig(
        region=Region.GT,
        country_name="Guatemala",
        vat_name="IVA",
        vat_rate=0.12,
        insurance_rate=0.015,
        system_fee=0.00,
        customs_authority="Intendencia de Aduanas — SAT",
        ruling_prefix="SAT-IAD",
        legal_framework="Ley Aduanera Nacional, CAUCA IV / RECAUCA",
        fiscal_id_formats=(
            FiscalIdFormat("NIT", r"^\d{6,11}-?[0-9K]$", "1234567-8"),
            FiscalIdFormat("CUI/DPI", r"^\d{4}\s?\d{5}\s?\d{4}$", "2456 78901 0101"),
            _PASSPORT,
        ),
        legal_citations=MappingProxyType({
            "valuation": "Ley Aduanera Nacional, Decreto 14-2013 — Valor en Aduana",
            "cif": "CAUCA IV Art. 45 — Determinación del Valor en Aduana",
            "declaration": "RECAUCA Art. 323 — Declaración de Valor",
            "valuation_methods": "Acuerdo OMC sobre Valoración, Arts. 1-7 — Métodos de Valoración",
            "tariff": "Arancel Centroamericano de Importación (SAC) — Guatemala",
            "vat": "Ley del Impuesto al Valor Agregado, Decreto 27-92 (IVA 12%)",
        }),
        detection_keywords=(
            "guatemala", "superintendencia de administracion tributaria", "sat",
            "fel", "nit", "quetzales", "la aurora",
        ),
    ),
}


# ═══════════════════════════════════════════
#  STORE
# ═══════════════════════════════════════════

class RegionalConfigStore:
    """
    Read-only lookup over the jurisdiction table.

    Engines take a store in their constructor so tests and hosts can
    inject a different table.
    """

    def __init__(self, configs: Optional[Dict[Region, RegionalTaxConfig]] = None):
        self._configs = dict(configs or REGIONAL_CONFIGS)
        self._keyword_res = {
            region: [
                re.compile(r"(?<![\w/])" + re.escape(kw.lower()) + r"(?![\w/])")
                for kw in cfg.detection_keywords
            ]
            for region, cfg in self._configs.items()
        }

    @staticmethod
    def _coerce(region) -> Region:
        if isinstance(region, Region):
            return region
        try:
            return Region(str(region).strip().upper())
        except ValueError:
            raise UnknownRegionError(region)

    def get(self, region) -> RegionalTaxConfig:
        code = self._coerce(region)
        if code not in self._configs:
            raise UnknownRegionError(region)
        return self._configs[code]

    def regions(self) -> List[Region]:
        return list(self._configs)

    def authority(self, region) -> RegionalAuthority:
        return self.get(region).authority

    def infer_region(self, text: str) -> Optional[Region]:
        """
        Guess the jurisdiction of a document from country markers.
        Ties keep table order; no marker at all returns None.
        """
        if not text:
            return None
        lowered = text.lower()
        best, best_hits = None, 0
        for region, patterns in self._keyword_res.items():
            hits = sum(1 for p in patterns if p.search(lowered))
            if hits > best_hits:
                best, best_hits = region, hits
        if best:
            logger.debug(f"Inferred region {best.value} ({best_hits} markers)")
        return best


DEFAULT_REGIONAL_CONFIG = RegionalConfigStore()
