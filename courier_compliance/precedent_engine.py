"""
Precedent Engine
================
Justifies (or contests) a declared HS code with advance customs rulings
and the six General Rules of Interpretation (GRI) of the SAC/HS.

Flow for validate_by_precedent():
1. search_precedents(): remote store + seed cache, dedup by ruling id,
   keyword/HS scoring, top 5
2. Precedent with the declared HS code and score >= 30 -> endorsement
3. Otherwise best match with score >= 40 -> broker review
4. Otherwise GRI-only rationale, no ruling cited

Scoring per precedent:
    +50  HS code shares the first 4 digits with the declared code
    +30  HS code identical (on top of the +50)
    +15  keyword fully contained in the normalized description
     +5  otherwise, any keyword token overlapping a description token
    cap 100
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from .config import PRECEDENT_RESULT_LIMIT
from .product_classifier import normalize_text
from .precedent_store import (
    NullPrecedentStore,
    Precedent,
    PrecedentLookup,
    PrecedentLookupError,
    PrecedentStore,
)
from .regional_config import DEFAULT_REGIONAL_CONFIG, Region, RegionalAuthority, RegionalConfigStore

logger = logging.getLogger("courier.precedent_engine")

HS_PREFIX_SCORE = 50
HS_EXACT_SCORE = 30
KEYWORD_SCORE = 15
PARTIAL_TOKEN_SCORE = 5
MAX_RELEVANCE = 100
ENDORSEMENT_MIN_SCORE = 30
RELATED_MIN_SCORE = 40

ESSENTIAL_CHARACTER_MARKERS = ("esencial", "principal", "predominante")


# ═══════════════════════════════════════════
#  GRI: REGLAS GENERALES DE INTERPRETACIÓN
# ═══════════════════════════════════════════

@dataclass(frozen=True)
class GRISubRule:
    id: str
    text: str


@dataclass(frozen=True)
class GRIRule:
    number: str
    title: str
    description: str
    sub_rules: Tuple[GRISubRule, ...] = ()
    application_criteria: str = ""

    def to_dict(self) -> Dict:
        return {
            "number": self.number,
            "title": self.title,
            "description": self.description,
            "sub_rules": [{"id": s.id, "text": s.text} for s in self.sub_rules],
            "application_criteria": self.application_criteria,
        }


GRI_RULES: Tuple[GRIRule, ...] = (
    GRIRule(
        number="1",
        title="Textos de Partidas y Notas de Sección/Capítulo",
        description="La clasificación se determina por los textos de las partidas y las Notas de Sección "
                    "o Capítulo. Solo cuando las partidas o notas no exigen otra cosa, se aplican las demás GRI.",
        application_criteria="Se aplica cuando el producto se describe de manera clara y específica en el "
                             "texto de una partida arancelaria.",
    ),
    GRIRule(
        number="2",
        title="Artículos Incompletos o sin Montar",
        description="Cualquier referencia a un artículo comprende también los artículos incompletos o sin "
                    "terminar, siempre que presenten las características esenciales del artículo completo.",
        sub_rules=(
            GRISubRule("2(a)", "Artículos incompletos o sin terminar que presenten características esenciales "
                               "del artículo completo o terminado."),
            GRISubRule("2(b)", "Cualquier referencia a una materia comprende la referencia a dicha materia "
                               "incluso mezclada o asociada con otras materias."),
        ),
        application_criteria="Se aplica cuando el producto está incompleto, desmontado, o es una mezcla de materias.",
    ),
    GRIRule(
        number="3",
        title="Clasificación en la Partida más Específica",
        description="Cuando un producto pueda clasificarse en dos o más partidas, se aplican las siguientes "
                    "reglas de prioridad.",
        sub_rules=(
            GRISubRule("3(a)", "La partida con descripción más específica tendrá prioridad sobre las partidas "
                               "de alcance más genérico."),
            GRISubRule("3(b)", "Los productos mezclados, compuestos o en surtidos se clasifican según la materia "
                               "o artículo que les confiera su CARÁCTER ESENCIAL."),
            GRISubRule("3(c)", "Cuando las reglas 3(a) y 3(b) no permiten la clasificación, el producto se "
                               "clasifica en la última partida por orden de numeración entre las susceptibles."),
        ),
        application_criteria="Se aplica cuando el producto puede clasificarse en dos o más partidas arancelarias.",
    ),
    GRIRule(
        number="4",
        title="Clasificación por Analogía",
        description="Las mercancías que no puedan clasificarse por las reglas anteriores se clasifican en la "
                    "partida que comprenda artículos con los que tengan mayor analogía.",
        application_criteria="Se aplica como regla residual cuando las GRI 1-3 no permiten clasificación.",
    ),
    GRIRule(
        number="5",
        title="Estuches y Envases",
        description="Los estuches y continentes similares se clasifican con su contenido cuando sean del tipo "
                    "normalmente utilizado para dicho contenido.",
        sub_rules=(
            GRISubRule("5(a)", "Estuches especialmente concebidos para contener un artículo determinado se "
                               "clasifican con dicho artículo."),
            GRISubRule("5(b)", "Los envases que confieran al conjunto su carácter esencial se clasifican por separado."),
        ),
        application_criteria="Se aplica cuando el producto se presenta con un estuche, envase o continente especial.",
    ),
    GRIRule(
        number="6",
        title="Clasificación en Subpartidas",
        description="La clasificación en las subpartidas de una misma partida se determina por los textos de "
                    "las subpartidas y las notas de subpartida, aplicando mutatis mutandis las GRI anteriores.",
        application_criteria="Se aplica para determinar el nivel más específico de subpartida dentro de una "
                             "partida ya identificada.",
    ),
)


def get_gri_rules() -> List[GRIRule]:
    return list(GRI_RULES)


def get_gri_rule(number) -> Optional[GRIRule]:
    for rule in GRI_RULES:
        if rule.number == str(number):
            return rule
    return None


# ═══════════════════════════════════════════
#  SEED RULINGS
# ═══════════════════════════════════════════

_SEED_ROWS = (
    # PANAMÁ
    {
        "country_code": "PA",
        "ruling_id": "RES-ANA-466-2014",
        "ruling_type": "clasificacion",
        "authority": "Autoridad Nacional de Aduanas (ANA)",
        "hs_code": "8471.30.00",
        "description_keywords": ["laptop", "computadora portátil", "notebook",
                                 "máquina automática de procesamiento de datos"],
        "product_description": "Computadoras portátiles de peso inferior a 10kg",
        "legal_rationale": "Clasificación bajo partida 8471 por tratarse de máquinas automáticas para "
                           "tratamiento de información, con características de portabilidad (peso < 10kg). "
                           "Aplicación de GRI 1 — texto literal de la partida.",
        "gri_applied": "GRI 1",
        "effective_date": "2014-06-15",
        "source_document": "Resolución 466/2014 — Dictamen de Técnica Aduanera",
    },
    {
        "country_code": "PA",
        "ruling_id": "RES-ANA-312-2019",
        "ruling_type": "clasificacion",
        "authority": "Autoridad Nacional de Aduanas (ANA)",
        "hs_code": "3004.90.29",
        "description_keywords": ["suplemento", "vitamina", "cápsula", "complemento alimenticio", "tableta"],
        "product_description": "Suplementos alimenticios en cápsulas con dosificación terapéutica",
        "legal_rationale": "Clasificación como medicamento por presentar dosificación terapéutica y forma "
                           "farmacéutica (cápsulas). Requiere permiso MINSA. Aplicación de GRI 1 y Nota "
                           "Legal Capítulo 30.",
        "gri_applied": "GRI 1",
        "effective_date": "2019-03-01",
        "source_document": "Resolución 312/2019 — Técnica Aduanera ANA",
    },
    {
        "country_code": "PA",
        "ruling_id": "RES-ANA-088-2022",
        "ruling_type": "valoracion",
        "authority": "Autoridad Nacional de Aduanas (ANA)",
        "hs_code": "6204.62.00",
        "description_keywords": ["ropa", "vestimenta", "textil", "courier", "paquetería", "valor mínimo"],
        "product_description": "Envíos de paquetería courier con textiles — criterio de valoración",
        "legal_rationale": "Los envíos courier de textiles deben declarar valor de transacción real. No "
                           "aplica valor mínimo arbitrario. CAUCA IV Art. 45, Acuerdo OMC sobre Valoración.",
        "effective_date": "2022-01-15",
        "source_document": "Dictamen ANA-088-2022",
    },
    # COSTA RICA
    {
        "country_code": "CR",
        "ruling_id": "MH-DGA-RES-2023-045",
        "ruling_type": "clasificacion",
        "authority": "Dirección General de Aduanas (DGA)",
        "hs_code": "8517.62.00",
        "description_keywords": ["router", "access point", "wifi", "enrutador", "red inalámbrica"],
        "product_description": "Equipos de enrutamiento WiFi para redes domésticas y empresariales",
        "legal_rationale": "Clasificación bajo 8517 por ser aparatos de telecomunicación para recepción, "
                           "conversión y transmisión de datos. GRI 1 por texto de partida. Sistema TICA "
                           "requiere declaración como equipo de telecomunicaciones.",
        "gri_applied": "GRI 1",
        "effective_date": "2023-07-01",
        "source_document": "Boletín MH-DGA-RES-2023-045",
    },
    {
        "country_code": "CR",
        "ruling_id": "MH-DGA-RES-2024-012",
        "ruling_type": "clasificacion",
        "authority": "Dirección General de Aduanas (DGA)",
        "hs_code": "2106.90.90",
        "description_keywords": ["proteína", "whey", "suplemento deportivo", "preparación alimenticia"],
        "product_description": "Proteínas de suero para consumo deportivo",
        "legal_rationale": "Clasificación como preparación alimenticia (no medicamento) por no tener "
                           "dosificación terapéutica. GRI 1 y Nota Legal 4 del Capítulo 21. No requiere "
                           "registro sanitario MINSA-CR sino notificación sanitaria.",
        "gri_applied": "GRI 1",
        "effective_date": "2024-02-15",
        "source_document": "Circular MH-DGA-2024-012",
    },
    # GUATEMALA
    {
        "country_code": "GT",
        "ruling_id": "SAT-IAD-2023-089",
        "ruling_type": "clasificacion",
        "authority": "Intendencia de Aduanas — SAT",
        "hs_code": "8528.72.00",
        "description_keywords": ["televisor", "pantalla", "smart tv", "monitor", "display lcd"],
        "product_description": "Televisores LCD/LED con receptor de televisión incorporado",
        "legal_rationale": "Clasificación bajo 8528.72 por ser aparatos receptores de televisión a color "
                           "con pantalla LCD/LED. GRI 1. Requiere FEL para importaciones > Q10,000.",
        "gri_applied": "GRI 1",
        "effective_date": "2023-09-01",
        "source_document": "Resolución SAT-IAD-2023-089",
    },
    {
        "country_code": "GT",
        "ruling_id": "SAT-IAD-2024-033",
        "ruling_type": "clasificacion",
        "authority": "Intendencia de Aduanas — SAT",
        "hs_code": "8473.30.00",
        "description_keywords": ["cargador", "fuente de poder", "adaptador", "accesorio computadora"],
        "product_description": "Cargadores y adaptadores de corriente para equipos informáticos",
        "legal_rationale": "Clasificación como accesorio de máquinas del 8471 por GRI 2(b) — partes y "
                           "accesorios destinados exclusiva o principalmente a las máquinas de la partida "
                           "8471. No se clasifican como transformadores (8504).",
        "gri_applied": "GRI 2(b)",
        "effective_date": "2024-05-01",
        "source_document": "Resolución SAT-IAD-2024-033",
    },
)


def seed_precedents() -> List[Precedent]:
    """Fresh copies of the built-in rulings, ids seed-0 .. seed-6."""
    return [Precedent.from_record(row, f"seed-{i}") for i, row in enumerate(_SEED_ROWS)]


# ═══════════════════════════════════════════
#  RESULT TYPES
# ═══════════════════════════════════════════

@dataclass
class GRIContext:
    is_incomplete: bool = False
    is_mixture: bool = False
    has_container: bool = False
    multiple_headings: bool = False


@dataclass
class GRIAnalysis:
    applied_rule: str
    rule_title: str
    justification: str
    confidence: float

    def to_dict(self) -> Dict:
        return {
            "applied_rule": self.applied_rule,
            "rule_title": self.rule_title,
            "justification": self.justification,
            "confidence": self.confidence,
        }


@dataclass
class PrecedentMatch:
    precedent: Precedent
    relevance_score: int
    matched_keywords: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            "ruling_id": self.precedent.ruling_id,
            "hs_code": self.precedent.hs_code,
            "relevance_score": self.relevance_score,
            "matched_keywords": list(self.matched_keywords),
        }


@dataclass
class PrecedentSearch:
    """Ranked matches plus how the remote lookup went. Iterates like a list."""
    results: List[PrecedentMatch] = field(default_factory=list)
    lookup: PrecedentLookup = field(default_factory=PrecedentLookup)

    def __iter__(self) -> Iterator[PrecedentMatch]:
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)

    def __getitem__(self, index):
        return self.results[index]

    @property
    def used_cache_only(self) -> bool:
        return self.lookup.error is not None


@dataclass
class PrecedentValidation:
    found: bool
    recommendation: str
    legal_citation: str
    precedent: Optional[Precedent] = None
    gri_analysis: Optional[GRIAnalysis] = None
    lookup_error: Optional[PrecedentLookupError] = None

    @property
    def needs_broker_review(self) -> bool:
        return "Requiere revisión por Corredor" in self.recommendation

    def to_dict(self) -> Dict:
        return {
            "found": self.found,
            "precedent": self.precedent.to_dict() if self.precedent else None,
            "gri_analysis": self.gri_analysis.to_dict() if self.gri_analysis else None,
            "recommendation": self.recommendation,
            "legal_citation": self.legal_citation,
            "lookup_error": self.lookup_error.to_dict() if self.lookup_error else None,
        }


# ═══════════════════════════════════════════
#  ENGINE
# ═══════════════════════════════════════════

class PrecedentEngine:
    """
    One instance per tenant/worker. Holds the current region and the
    local precedent cache (seeds plus anything added at runtime).
    """

    def __init__(self, config_store: RegionalConfigStore = None,
                 store: PrecedentStore = None, region=Region.PA):
        self.config_store = config_store or DEFAULT_REGIONAL_CONFIG
        self.store = store or NullPrecedentStore()
        self._region = self.config_store.get(region).region
        self.local_cache: List[Precedent] = seed_precedents()

    # ── Region ──

    def set_region(self, region):
        self._region = self.config_store.get(region).region

    @property
    def current_region(self) -> Region:
        return self._region

    def regional_authority(self, region=None) -> RegionalAuthority:
        return self.config_store.authority(region or self._region)

    def add_precedent(self, precedent: Precedent):
        self.local_cache = [p for p in self.local_cache if p.ruling_id != precedent.ruling_id]
        self.local_cache.append(precedent)

    # ── GRI ──

    def analyze_gri(self, description: str, hs_code: str, context: GRIContext = None) -> GRIAnalysis:
        context = context or GRIContext()
        desc = (description or "").lower()

        if context.has_container:
            return GRIAnalysis(
                "GRI 5(a)", GRI_RULES[4].title,
                f"El producto se presenta con un estuche o envase especial. Conforme a la GRI 5(a), "
                f"se clasifica junto con su contenido bajo la partida {hs_code}.",
                0.80,
            )
        if context.is_incomplete:
            return GRIAnalysis(
                "GRI 2(a)", GRI_RULES[1].title,
                f"El artículo se presenta incompleto o sin montar, pero presenta las características "
                f"esenciales del producto terminado. Clasificación bajo {hs_code} por GRI 2(a).",
                0.75,
            )
        if context.is_mixture:
            return GRIAnalysis(
                "GRI 2(b)", GRI_RULES[1].title,
                f"El producto es una mezcla o combinación de materias. Clasificación bajo {hs_code} "
                f"por GRI 2(b) — referencia a materia mezclada o asociada.",
                0.75,
            )
        if context.multiple_headings:
            if any(marker in desc for marker in ESSENTIAL_CHARACTER_MARKERS):
                return GRIAnalysis(
                    "GRI 3(b)", GRI_RULES[2].title,
                    f"El producto puede clasificarse en múltiples partidas. Se aplica GRI 3(b) por carácter "
                    f"esencial — la materia o componente que confiere el carácter esencial determina la "
                    f"clasificación bajo {hs_code}.",
                    0.70,
                )
            return GRIAnalysis(
                "GRI 3(a)", GRI_RULES[2].title,
                f"El producto puede clasificarse en múltiples partidas. Se aplica GRI 3(a) — la partida "
                f"con descripción más específica ({hs_code}) prevalece sobre las de alcance genérico.",
                0.72,
            )
        return GRIAnalysis(
            "GRI 1", GRI_RULES[0].title,
            f"Clasificación bajo partida {hs_code} determinada por el texto literal de la partida y las "
            f"Notas de Sección/Capítulo correspondientes, conforme a la GRI 1 del Sistema Arancelario "
            f"Centroamericano.",
            0.85,
        )

    # ── Search ──

    def search_precedents(self, description: str, region=None, hs_code: str = None) -> PrecedentSearch:
        target = self.config_store.get(region or self._region).region
        normalized = normalize_text(description)
        desc_tokens = [t for t in normalized.split() if len(t) > 2]

        lookup = self.store.fetch(target.value)
        if lookup.error:
            logger.warning(f"Precedent store unavailable ({lookup.error.kind}), using local cache")

        candidates = [p for p in lookup.precedents if p.region == target.value and p.active]
        remote_ids = {p.ruling_id for p in candidates}
        candidates += [
            p for p in self.local_cache
            if p.region == target.value and p.active and p.ruling_id not in remote_ids
        ]

        results = []
        for precedent in candidates:
            score, matched = self._score(precedent, normalized, desc_tokens, hs_code)
            if score > 0:
                results.append(PrecedentMatch(precedent, min(score, MAX_RELEVANCE), matched))

        results.sort(key=lambda m: m.relevance_score, reverse=True)
        return PrecedentSearch(results[:PRECEDENT_RESULT_LIMIT], lookup)

    @staticmethod
    def _score(precedent: Precedent, normalized: str, desc_tokens: List[str],
               hs_code: Optional[str]) -> Tuple[int, List[str]]:
        score = 0
        matched = []
        if hs_code and precedent.hs_code.startswith(hs_code[:4]):
            score += HS_PREFIX_SCORE
            if precedent.hs_code == hs_code:
                score += HS_EXACT_SCORE

        for keyword in precedent.keywords:
            kw = normalize_text(keyword)
            if kw in normalized:
                score += KEYWORD_SCORE
                matched.append(keyword)
                continue
            for kw_token in kw.split():
                if any(kw_token in dt or dt in kw_token for dt in desc_tokens):
                    score += PARTIAL_TOKEN_SCORE
                    matched.append(keyword)
                    break

        return score, list(dict.fromkeys(matched))

    # ── Validation ──

    def validate_by_precedent(self, declared_hs_code: str, description: str, region=None) -> PrecedentValidation:
        target = self.config_store.get(region or self._region).region
        authority = self.regional_authority(target)
        search = self.search_precedents(description, target, declared_hs_code)
        lookup_error = search.lookup.error

        direct = next(
            (m for m in search if m.precedent.hs_code == declared_hs_code
             and m.relevance_score >= ENDORSEMENT_MIN_SCORE),
            None,
        )
        if direct:
            p = direct.precedent
            return PrecedentValidation(
                found=True,
                precedent=p,
                gri_analysis=self.analyze_gri(description, declared_hs_code) if p.gri_applied else None,
                recommendation=f"Clasificación avalada por precedente. Resolución {p.ruling_id} de "
                               f"{p.authority} respalda la partida {declared_hs_code}.",
                legal_citation=f"Basado en la Resolución Anticipada {p.ruling_id} de la {p.authority}, este "
                               f"producto se clasifica bajo la partida {p.hs_code} debido a: "
                               f"{p.legal_rationale[:200]}",
                lookup_error=lookup_error,
            )

        related = search[0] if len(search) else None
        if related and related.relevance_score >= RELATED_MIN_SCORE:
            p = related.precedent
            logger.info(f"Declared {declared_hs_code} differs from related ruling {p.ruling_id} ({p.hs_code})")
            return PrecedentValidation(
                found=True,
                precedent=p,
                recommendation=f"Precedente relacionado encontrado. La Resolución {p.ruling_id} clasifica "
                               f"productos similares bajo {p.hs_code} (declarado: {declared_hs_code}). "
                               f"Requiere revisión por Corredor.",
                legal_citation=f"Resolución {p.ruling_id} — {p.authority}: \"{p.legal_rationale[:150]}...\" "
                               f"Marco legal: {authority.legal_framework}.",
                lookup_error=lookup_error,
            )

        gri = self.analyze_gri(description, declared_hs_code)
        return PrecedentValidation(
            found=False,
            gri_analysis=gri,
            recommendation=f"Sin precedente registrado para la partida {declared_hs_code} en {authority.name}. "
                           f"Clasificación sustentada por {gri.applied_rule}: {gri.justification[:150]}",
            legal_citation=f"Aplicación de {gri.applied_rule} del SAC — {authority.legal_framework}. "
                           f"Sin resolución anticipada disponible.",
            lookup_error=lookup_error,
        )

    # ── Advisory text ──

    @staticmethod
    def format_advisory(validation: PrecedentValidation) -> str:
        if validation.found and validation.precedent:
            p = validation.precedent
            rule = f"Regla aplicada: {p.gri_applied}." if p.gri_applied else ""
            return (f"📋 Basado en la Resolución Anticipada **{p.ruling_id}** de la **{p.authority}**, "
                    f"este producto se clasifica bajo la partida **{p.hs_code}**. {rule} "
                    f"Fundamento: {p.legal_rationale[:200]}.")
        if validation.gri_analysis:
            g = validation.gri_analysis
            return (f"📐 Sin resolución anticipada disponible. Clasificación sustentada por "
                    f"**{g.applied_rule}** ({g.rule_title}): {g.justification[:200]}.")
        return ("⚠️ Sin precedente ni regla GRI aplicable. Se recomienda solicitar una Resolución "
                "Anticipada ante la autoridad aduanera competente.")
