# backend/swasth_khet/services/farmer/emission_factors.py

"""
Emission factor table used by the footprint scoring engine.

Factors are kg CO2e per unit of resource:
  fertilizer  -> per kg applied
  pesticide   -> per litre sprayed
  fuel        -> per litre (diesel/petrol) or per kWh (electricity, India grid avg)
  irrigation  -> per irrigation hour per hectare
  transport   -> per km

Irrigation is keyed by the irrigation type itself. `rainfed` is listed with
0.0 since nothing is pumped; only a missing or unlisted type falls back to
`default_irrigation_factor` (0.5).

The table is frozen once built. Callers wanting different numbers (tests,
regional factor sets) build their own with `with_overrides()` and pass it
into the engine instead of patching module state.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

FERTILIZER = "fertilizer"
PESTICIDE = "pesticide"
FUEL = "fuel"
IRRIGATION = "irrigation"
TRANSPORT = "transport"

CATEGORIES = (FERTILIZER, PESTICIDE, FUEL, IRRIGATION, TRANSPORT)

FactorKey = Tuple[str, str]

_DEFAULT_FACTORS: Dict[FactorKey, float] = {
    # Fertilizers
    (FERTILIZER, "synthetic"): 4.5,
    (FERTILIZER, "organic"): 0.8,   # compost / FYM / vermicompost
    (FERTILIZER, "urea"): 3.2,
    (FERTILIZER, "dap"): 2.8,
    (FERTILIZER, "potash"): 1.2,

    # Pesticides
    (PESTICIDE, "chemical"): 2.5,
    (PESTICIDE, "organic"): 0.4,
    (PESTICIDE, "neem_oil"): 0.3,

    # Fuel
    (FUEL, "diesel"): 2.68,
    (FUEL, "petrol"): 2.31,
    (FUEL, "electricity"): 0.95,

    # Irrigation
    (IRRIGATION, "flood"): 0.5,
    (IRRIGATION, "sprinkler"): 0.25,
    (IRRIGATION, "drip"): 0.15,
    (IRRIGATION, "rainfed"): 0.0,

    # Transportation
    (TRANSPORT, "manual"): 0.0,
    (TRANSPORT, "bullock_cart"): 0.1,
    (TRANSPORT, "tractor"): 0.8,
    (TRANSPORT, "truck"): 0.6,
}


def _freeze(factors: Mapping[FactorKey, float]) -> Mapping[FactorKey, float]:
    return MappingProxyType({(c, s): float(v) for (c, s), v in factors.items()})


@dataclass(frozen=True)
class EmissionFactorTable:
    factors: Mapping[FactorKey, float] = field(default_factory=lambda: _DEFAULT_FACTORS)
    # used when irrigation type is missing or not in the table
    default_irrigation_factor: float = 0.5
    credit_price_per_ton: float = 400.0
    credit_currency: str = "INR"

    def __post_init__(self):
        unknown = {c for c, _ in self.factors} - set(CATEGORIES)
        if unknown:
            raise ValueError(f"Unknown emission factor categories: {sorted(unknown)}")
        # frozen dataclass: bypass __setattr__ to swap in the read-only view
        object.__setattr__(self, "factors", _freeze(self.factors))

    def get(self, category: str, subtype: Optional[str], default: float = 0.0) -> float:
        if subtype is None:
            return default
        return self.factors.get((category, subtype), default)

    def irrigation_factor(self, irrigation_type: Optional[str]) -> float:
        return self.get(IRRIGATION, irrigation_type, self.default_irrigation_factor)

    def category(self, category: str) -> Dict[str, float]:
        return {s: v for (c, s), v in self.factors.items() if c == category}

    def with_overrides(self, overrides: Mapping[FactorKey, float], **kwargs) -> "EmissionFactorTable":
        merged = dict(self.factors)
        merged.update(overrides)
        params = {
            "default_irrigation_factor": self.default_irrigation_factor,
            "credit_price_per_ton": self.credit_price_per_ton,
            "credit_currency": self.credit_currency,
        }
        params.update(kwargs)
        return EmissionFactorTable(factors=merged, **params)

    def as_dict(self) -> Dict[str, Dict[str, float]]:
        return {c: self.category(c) for c in CATEGORIES}


DEFAULT_EMISSION_FACTORS = EmissionFactorTable()
