"""Curve pillars and curve-set lookup services."""

from fincore.services.market import CurveSet, curve_set_from_long_df
from fincore.services.pillars import enrich_with_year_fractions, pillar_table

__all__ = [
    "CurveSet",
    "curve_set_from_long_df",
    "enrich_with_year_fractions",
    "pillar_table",
]
