# backend/swasth_khet/services/farmer/carbon_service.py

"""
Farm Carbon Footprint Scoring Engine (pure)

Given one UsageRecord it computes:
 - baseline footprint (business as usual: synthetic inputs, diesel, irrigation)
 - eco-friendly footprint (organic inputs, drip irrigation)
 - % reduction between the two
 - sustainability score 0-100
 - priority-sorted practice recommendations
 - carbon credit potential of the reduction

Rounding: every footprint is summed at full precision and rounded once at the
end to 2 decimals, half-up (see core.rounding). Savings and credit figures use
the same helper.

Nothing here does I/O or keeps state; every function takes the factor table
as an argument (defaulting to DEFAULT_EMISSION_FACTORS).
"""

from typing import Callable, List, NamedTuple, Optional, Tuple

from swasth_khet.core.rounding import round_half_up, round_to_int
from swasth_khet.schemas.farmer.carbon import (
    CreditPotential,
    FootprintBreakdown,
    Priority,
    Recommendation,
    ScoreResult,
    UsageRecord,
    priority_rank,
)
from swasth_khet.services.farmer.emission_factors import (
    DEFAULT_EMISSION_FACTORS,
    FERTILIZER,
    FUEL,
    PESTICIDE,
    EmissionFactorTable,
)

DRIP = "drip"
DRIP_CANDIDATES = ("flood", "sprinkler")

BASE_SCORE = 50
ORGANIC_THRESHOLD = 50   # kg of organic fertilizer / litres of organic pesticide


def _irrigation_area_hours(record: UsageRecord) -> float:
    return record.irrigation_hours * record.area_hectares


# -------------------------------------------------------------
# FOOTPRINTS
# -------------------------------------------------------------
def compute_breakdown(
    record: UsageRecord,
    factors: EmissionFactorTable = DEFAULT_EMISSION_FACTORS,
) -> FootprintBreakdown:
    """Per-channel baseline emissions (kg CO2e), each rounded to 2 decimals."""
    return FootprintBreakdown(
        fertilizer=round_half_up(record.fertilizer_usage.synthetic * factors.get(FERTILIZER, "synthetic")),
        pesticide=round_half_up(record.pesticide_usage.chemical * factors.get(PESTICIDE, "chemical")),
        fuel=round_half_up(record.fuel_usage.diesel * factors.get(FUEL, "diesel")),
        irrigation=round_half_up(
            _irrigation_area_hours(record) * factors.irrigation_factor(record.irrigation_type)
        ),
    )


def compute_baseline_footprint(
    record: UsageRecord,
    factors: EmissionFactorTable = DEFAULT_EMISSION_FACTORS,
) -> float:
    total = (
        record.fertilizer_usage.synthetic * factors.get(FERTILIZER, "synthetic")
        + record.pesticide_usage.chemical * factors.get(PESTICIDE, "chemical")
        + record.fuel_usage.diesel * factors.get(FUEL, "diesel")
        + _irrigation_area_hours(record) * factors.irrigation_factor(record.irrigation_type)
    )
    return round_half_up(total)


def compute_ecofriendly_footprint(
    record: UsageRecord,
    factors: EmissionFactorTable = DEFAULT_EMISSION_FACTORS,
) -> float:
    total = (
        record.fertilizer_usage.organic * factors.get(FERTILIZER, "organic")
        + record.pesticide_usage.organic * factors.get(PESTICIDE, "organic")
    )
    if record.irrigation_type == DRIP:
        total += _irrigation_area_hours(record) * factors.irrigation_factor(DRIP)
    # manual transport adds nothing; other transport modes are not part of this footprint
    return round_half_up(total)


def compute_reduction(baseline: float, eco: float) -> int:
    if baseline == 0:
        return 0
    return round_to_int((baseline - eco) / baseline * 100)


# -------------------------------------------------------------
# RECOMMENDATIONS
# -------------------------------------------------------------
class _Rule(NamedTuple):
    applies: Callable[[UsageRecord], bool]
    build: Callable[[UsageRecord, EmissionFactorTable], Recommendation]


def _organic_fertilizer(record, factors):
    per_kg = factors.get(FERTILIZER, "synthetic") - factors.get(FERTILIZER, "organic")
    return Recommendation(
        practice="Switch to organic fertilizer",
        impact="Reduce emissions by 82% for fertilizer",
        savings=round_half_up(record.fertilizer_usage.synthetic * per_kg),
        priority=Priority.HIGH,
        implementation="Start using compost, vermicompost, or FYM",
    )


def _organic_pest_control(record, factors):
    per_litre = factors.get(PESTICIDE, "chemical") - factors.get(PESTICIDE, "organic")
    return Recommendation(
        practice="Use organic pest control",
        impact="Reduce emissions by 84% for pesticide",
        savings=round_half_up(record.pesticide_usage.chemical * per_litre),
        priority=Priority.HIGH,
        implementation="Use neem oil, manual picking, beneficial insects",
    )


def _drip_irrigation(record, factors):
    per_hour_ha = factors.irrigation_factor(record.irrigation_type) - factors.irrigation_factor(DRIP)
    return Recommendation(
        practice="Install drip irrigation",
        impact="Reduce irrigation emissions by 70%",
        savings=round_half_up(_irrigation_area_hours(record) * per_hour_ha),
        priority=Priority.HIGH,
        implementation="Investment required, but saves water and reduces labor",
    )


def _crop_rotation(record, factors):
    return Recommendation(
        practice="Practice crop rotation",
        impact="Improve soil health, reduce disease, 10-15% yield improvement",
        priority=Priority.MEDIUM,
        implementation="Rotate with legumes to fix nitrogen naturally",
    )


def _conservation_agriculture(record, factors):
    return Recommendation(
        practice="Adopt conservation agriculture",
        impact="Reduce fuel emissions, improve soil carbon",
        priority=Priority.MEDIUM,
        implementation="Reduce/zero tilling, mulching, crop residue management",
    )


def _mulching(record, factors):
    return Recommendation(
        practice="Mulch crop beds",
        impact="Retain soil moisture, cut irrigation hours and weeding",
        priority=Priority.LOW,
        implementation="Cover beds with crop residue, straw or dry leaves",
    )


def _crop_diversity(record, factors):
    return Recommendation(
        practice="Diversify crops",
        impact="Spread market risk and break pest cycles",
        priority=Priority.LOW,
        implementation="Grow at least three crops, e.g. intercrop pulses with cereals",
    )


# declaration order decides ties after the priority sort
RECOMMENDATION_RULES: Tuple[_Rule, ...] = (
    _Rule(lambda r: r.fertilizer_usage.synthetic > 0, _organic_fertilizer),
    _Rule(lambda r: r.pesticide_usage.chemical > 0, _organic_pest_control),
    _Rule(lambda r: r.irrigation_type in DRIP_CANDIDATES, _drip_irrigation),
    _Rule(lambda r: True, _crop_rotation),
    _Rule(lambda r: True, _conservation_agriculture),
    _Rule(lambda r: not r.mulching, _mulching),
    _Rule(lambda r: r.crop_diversity < 3, _crop_diversity),
)


def generate_recommendations(
    record: UsageRecord,
    factors: EmissionFactorTable = DEFAULT_EMISSION_FACTORS,
) -> List[Recommendation]:
    fired = [rule.build(record, factors) for rule in RECOMMENDATION_RULES if rule.applies(record)]
    # sorted() is stable
    return sorted(fired, key=lambda rec: priority_rank(rec.priority))


# -------------------------------------------------------------
# SUSTAINABILITY SCORE (0-100)
# -------------------------------------------------------------
def compute_sustainability_score(record: UsageRecord) -> int:
    score = BASE_SCORE

    # Fertilizer practices
    if record.fertilizer_usage.organic >= ORGANIC_THRESHOLD:
        score += 10
    if record.fertilizer_usage.synthetic == 0:
        score += 5

    # Pesticide practices
    if record.pesticide_usage.organic >= ORGANIC_THRESHOLD:
        score += 10
    if record.pesticide_usage.chemical == 0:
        score += 5

    # Irrigation efficiency
    if record.irrigation_type == DRIP:
        score += 15

    if record.crop_diversity >= 3:
        score += 10

    # Conservation practices
    if record.conservation_agriculture:
        score += 10
    if record.mulching:
        score += 5

    return max(0, min(100, score))


# -------------------------------------------------------------
# CARBON CREDITS
# -------------------------------------------------------------
def compute_carbon_credit_potential(
    reduction_kg: float,
    factors: EmissionFactorTable = DEFAULT_EMISSION_FACTORS,
) -> CreditPotential:
    tons = reduction_kg / 1000.0
    return CreditPotential(
        reduction_tons=round_half_up(tons),
        value_estimate=round_half_up(tons * factors.credit_price_per_ton),
        currency=factors.credit_currency,
    )


# -------------------------------------------------------------
# FULL ASSESSMENT
# -------------------------------------------------------------
def assess_footprint(
    record: UsageRecord,
    factors: Optional[EmissionFactorTable] = None,
) -> ScoreResult:
    factors = factors or DEFAULT_EMISSION_FACTORS

    baseline = compute_baseline_footprint(record, factors)
    eco = compute_ecofriendly_footprint(record, factors)

    return ScoreResult(
        baseline_footprint=baseline,
        ecofriendly_footprint=eco,
        reduction_percent=compute_reduction(baseline, eco),
        sustainability_score=compute_sustainability_score(record),
        recommendations=generate_recommendations(record, factors),
        # eco practices emitting more than baseline earn no credits
        credit_potential=compute_carbon_credit_potential(max(baseline - eco, 0.0), factors),
        breakdown=compute_breakdown(record, factors),
    )
