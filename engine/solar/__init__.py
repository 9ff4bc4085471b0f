"""
Solar PV engine module.

Provides the area-based annual production estimate used when no
irradiance-derived figure is available for a roof.
"""

from .production import (
    estimate_production_from_area,
    estimated_yield,
    system_size_kw,
)

__all__ = [
    "estimate_production_from_area",
    "estimated_yield",
    "system_size_kw",
]
