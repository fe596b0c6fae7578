"""
Tests for precedent search, GRI analysis and HS code validation
"""
import pytest
from unittest.mock import Mock
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from courier_compliance.precedent_engine import (
    GRIContext,
    PrecedentEngine,
    PrecedentValidation,
    get_gri_rule,
    get_gri_rules,
    seed_precedents,
)
from courier_compliance.precedent_store import (
    Precedent,
    PrecedentLookup,
    PrecedentLookupError,
)
from courier_compliance.regional_config import Region, UnknownRegionError


@pytest.fixture
def engine():
    return PrecedentEngine()


def _remote(*precedents, error=None):
    store = Mock()
    store.fetch.return_value = PrecedentLookup(list(precedents), error, "cache" if error else "remote")
    return store


class TestGRIRules:

    def test_six_rules(self):
        rules = get_gri_rules()
        assert [r.number for r in rules] == ["1", "2", "3", "4", "5", "6"]

    def test_rule_lookup(self):
        assert get_gri_rule(3).sub_rules[1].id == "3(b)"
        assert get_gri_rule("9") is None


class TestAnalyzeGRI:

    def test_default_is_gri_1(self, engine):
        analysis = engine.analyze_gri("Laptop", "8471.30.00")
        assert analysis.applied_rule == "GRI 1"
        assert analysis.confidence == 0.85
        assert "8471.30.00" in analysis.justification

    def test_container_takes_precedence(self, engine):
        context = GRIContext(has_container=True, is_incomplete=True)
        assert engine.analyze_gri("Guitar with case", "9202.90.00", context).applied_rule == "GRI 5(a)"

    def test_incomplete(self, engine):
        analysis = engine.analyze_gri("Bicycle frame", "8714.91.00", GRIContext(is_incomplete=True))
        assert analysis.applied_rule == "GRI 2(a)"
        assert analysis.confidence == 0.75

    def test_mixture(self, engine):
        assert engine.analyze_gri("Blend", "2106.90.90", GRIContext(is_mixture=True)).applied_rule == "GRI 2(b)"

    def test_multiple_headings_specific(self, engine):
        analysis = engine.analyze_gri("Smart watch", "8517.62.00", GRIContext(multiple_headings=True))
        assert analysis.applied_rule == "GRI 3(a)"
        assert analysis.confidence == 0.72

    def test_multiple_headings_essential_character(self, engine):
        analysis = engine.analyze_gri("Set con componente principal de cuero", "4202.21.00",
                                      GRIContext(multiple_headings=True))
        assert analysis.applied_rule == "GRI 3(b)"
        assert analysis.confidence == 0.70


class TestRegion:

    def test_default_region(self, engine):
        assert engine.current_region == Region.PA
        assert engine.regional_authority().ruling_prefix == "RES-ANA"

    def test_set_region(self, engine):
        engine.set_region("GT")
        assert engine.current_region == Region.GT
        assert "SAT" in engine.regional_authority().name

    def test_unknown_region(self, engine):
        with pytest.raises(UnknownRegionError):
            engine.set_region("XX")


class TestSearch:

    def test_seed_cache(self):
        seeds = seed_precedents()
        assert len(seeds) == 7
        assert seeds[0].id == "seed-0"

    def test_keyword_search(self, engine):
        results = engine.search_precedents("Router WiFi doble banda", "CR")
        assert results[0].precedent.ruling_id == "MH-DGA-RES-2023-045"
        assert results[0].relevance_score == 30
        assert results[0].matched_keywords == ["router", "wifi"]

    def test_results_stay_in_region(self, engine):
        results = engine.search_precedents("Router WiFi", "PA")
        assert all(m.precedent.region == "PA" for m in results)

    def test_hs_prefix_and_exact_score(self, engine):
        results = engine.search_precedents("Laptop Dell 15 pulgadas", "PA", "8471.30.00")
        assert results[0].precedent.ruling_id == "RES-ANA-466-2014"
        assert results[0].relevance_score == 100

    def test_limit_and_order(self, engine):
        for i in range(8):
            engine.add_precedent(Precedent(
                id=f"x{i}", region="PA", ruling_id=f"RES-ANA-900-{i}", ruling_type="clasificacion",
                authority="ANA", hs_code="9503.00.00", keywords=["juguete"] * (i % 3 + 1),
            ))
        results = engine.search_precedents("juguete de madera", "PA")
        scores = [m.relevance_score for m in results]
        assert len(results) == 5
        assert scores == sorted(scores, reverse=True)

    def test_remote_precedent_wins_over_cache(self):
        remote = Precedent.from_record({
            "country_code": "CR", "ruling_id": "MH-DGA-RES-2023-045", "hs_code": "8517.62.00",
            "authority": "DGA", "description_keywords": ["router"], "legal_rationale": "Actualizada",
        })
        engine = PrecedentEngine(store=_remote(remote))
        results = engine.search_precedents("router", "CR")
        assert len(results) == 1
        assert results[0].precedent.legal_rationale == "Actualizada"

    def test_remote_other_region_and_inactive_filtered(self):
        other = Precedent.from_record({"country_code": "GT", "ruling_id": "R-1", "description_keywords": ["router"]})
        inactive = Precedent.from_record({"country_code": "CR", "ruling_id": "R-2",
                                          "description_keywords": ["router"], "activo": False})
        engine = PrecedentEngine(store=_remote(other, inactive))
        ids = [m.precedent.ruling_id for m in engine.search_precedents("router", "CR")]
        assert ids == ["MH-DGA-RES-2023-045"]

    def test_store_failure_uses_cache(self):
        engine = PrecedentEngine(store=_remote(error=PrecedentLookupError("timeout", "slow")))
        search = engine.search_precedents("Router WiFi", "CR")
        assert search.used_cache_only
        assert len(search) == 1


class TestValidateByPrecedent:

    def test_endorsed(self, engine):
        result = engine.validate_by_precedent("8471.30.00", "Laptop Dell 15 pulgadas", "PA")
        assert result.found
        assert result.precedent.ruling_id == "RES-ANA-466-2014"
        assert result.gri_analysis.applied_rule == "GRI 1"
        assert result.recommendation.startswith("Clasificación avalada por precedente")
        assert "Resolución Anticipada RES-ANA-466-2014" in result.legal_citation
        assert not result.needs_broker_review

    def test_related_ruling_needs_broker(self, engine):
        result = engine.validate_by_precedent("8473.30.00", "laptop notebook computadora portatil", "PA")
        assert result.found
        assert result.precedent.hs_code == "8471.30.00"
        assert result.gri_analysis is None
        assert result.needs_broker_review
        assert "(declarado: 8473.30.00)" in result.recommendation

    def test_no_precedent(self, engine):
        result = engine.validate_by_precedent("9999.99.99", "widget zzz", "PA")
        assert not result.found
        assert result.precedent is None
        assert result.gri_analysis.applied_rule == "GRI 1"
        assert "Sin precedente registrado" in result.recommendation
        assert "Sin resolución anticipada disponible" in result.legal_citation

    def test_lookup_error_is_reported(self):
        engine = PrecedentEngine(store=_remote(error=PrecedentLookupError("connection", "refused")))
        result = engine.validate_by_precedent("8517.62.00", "Router WiFi", "CR")
        assert result.found
        assert result.lookup_error.kind == "connection"
        assert result.to_dict()["lookup_error"]["kind"] == "connection"

    def test_uses_current_region(self, engine):
        engine.set_region("CR")
        result = engine.validate_by_precedent("8517.62.00", "Router WiFi")
        assert result.precedent.region == "CR"


class TestFormatAdvisory:

    def test_precedent_advisory(self, engine):
        text = engine.format_advisory(engine.validate_by_precedent("8471.30.00", "Laptop Dell", "PA"))
        assert text.startswith("📋 Basado en la Resolución Anticipada **RES-ANA-466-2014**")
        assert "Regla aplicada: GRI 1." in text

    def test_gri_advisory(self, engine):
        text = engine.format_advisory(engine.validate_by_precedent("9999.99.99", "widget zzz", "PA"))
        assert text.startswith("📐 Sin resolución anticipada disponible")
        assert "**GRI 1**" in text

    def test_fallback_advisory(self, engine):
        text = engine.format_advisory(PrecedentValidation(found=False, recommendation="", legal_citation=""))
        assert text.startswith("⚠️")
