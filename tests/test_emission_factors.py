import dataclasses

import pytest

from swasth_khet.services.farmer.emission_factors import (
    CATEGORIES,
    DEFAULT_EMISSION_FACTORS,
    EmissionFactorTable,
)


def test_default_values():
    t = DEFAULT_EMISSION_FACTORS
    assert t.get("fertilizer", "synthetic") == 4.5
    assert t.get("pesticide", "chemical") == 2.5
    assert t.get("fuel", "diesel") == 2.68
    assert t.get("transport", "manual") == 0.0
    assert t.credit_price_per_ton == 400.0


def test_irrigation_factor_defaults():
    t = DEFAULT_EMISSION_FACTORS
    assert t.irrigation_factor("flood") == 0.5
    assert t.irrigation_factor("drip") == 0.15
    assert t.irrigation_factor("rainfed") == 0.0
    assert t.irrigation_factor(None) == 0.5
    assert t.irrigation_factor("canal") == 0.5


def test_missing_factor_uses_default():
    assert DEFAULT_EMISSION_FACTORS.get("fuel", "hydrogen") == 0.0
    assert DEFAULT_EMISSION_FACTORS.get("fuel", "hydrogen", 9.9) == 9.9


def test_factors_are_read_only():
    with pytest.raises(TypeError):
        DEFAULT_EMISSION_FACTORS.factors[("fertilizer", "synthetic")] = 1.0


def test_table_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_EMISSION_FACTORS.credit_price_per_ton = 1.0


def test_source_mapping_is_copied():
    source = {("fertilizer", "synthetic"): 1.0}
    table = EmissionFactorTable(factors=source)
    source[("fertilizer", "synthetic")] = 99.0
    assert table.get("fertilizer", "synthetic") == 1.0


def test_overrides_leave_original_alone():
    custom = DEFAULT_EMISSION_FACTORS.with_overrides({("fuel", "diesel"): 3.0}, default_irrigation_factor=0.7)
    assert custom.get("fuel", "diesel") == 3.0
    assert custom.irrigation_factor(None) == 0.7
    assert custom.get("fertilizer", "synthetic") == 4.5
    assert DEFAULT_EMISSION_FACTORS.get("fuel", "diesel") == 2.68
    assert DEFAULT_EMISSION_FACTORS.default_irrigation_factor == 0.5


def test_unknown_category_rejected():
    with pytest.raises(ValueError):
        EmissionFactorTable(factors={("livestock", "cattle"): 60.0})


def test_as_dict_groups_by_category():
    grouped = DEFAULT_EMISSION_FACTORS.as_dict()
    assert list(grouped) == list(CATEGORIES)
    assert grouped["irrigation"] == {"flood": 0.5, "sprinkler": 0.25, "drip": 0.15, "rainfed": 0.0}
