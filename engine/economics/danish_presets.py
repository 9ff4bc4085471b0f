"""Danish residential solar presets and utility functions.

Constants specific to Danish homeowners: VAT (moms), the grid emission
factor, the feed-in price ratio, projection defaults and the panel
degradation assumptions used by the 25-year projection.
"""

from __future__ import annotations

from decimal import Decimal

# ======================================================================
# Danish presets
# ======================================================================

DANISH_VAT_RATE = Decimal("0.25")
DANISH_GRID_CO2_KG_PER_KWH = Decimal("0.5")  # grid average
DEFAULT_GRID_FEED_IN_RATIO = Decimal("0.8")  # of the retail rate

# Projection defaults for optional request fields
DEFAULT_INFLATION_RATE = Decimal("0.02")
DEFAULT_ELECTRICITY_INFLATION_RATE = Decimal("0.03")
DEFAULT_MAINTENANCE_COST_YEAR1 = Decimal("1000")

# Panel degradation (not caller-configurable)
DEGRADATION_RATE_FIRST_YEAR = Decimal("0.03")  # LID
DEGRADATION_RATE_ANNUAL = Decimal("0.005")

SYSTEM_LIFETIME_YEARS: int = 25


# ======================================================================
# Utility functions
# ======================================================================


def default_grid_feed_in_rate(
    electricity_rate: Decimal,
    ratio: Decimal | None = None,
) -> Decimal:
    """Derive the export price from the retail electricity rate.

    Parameters
    ----------
    electricity_rate : Decimal
        Retail price in DKK/kWh.
    ratio : Decimal or None
        Export price as a fraction of retail.  Defaults to
        ``DEFAULT_GRID_FEED_IN_RATIO`` (80 %).

    Returns
    -------
    Decimal
        Feed-in price in DKK/kWh.
    """
    if ratio is None:
        ratio = DEFAULT_GRID_FEED_IN_RATIO
    return electricity_rate * ratio
