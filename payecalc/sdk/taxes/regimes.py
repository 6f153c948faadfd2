"""PAYE bracket tables for the legacy and reform regimes.

Thresholds are annual and cumulative. The top bracket of each table has no
limit (unbounded). These tables are fixed configuration: they are built once
at import and are read-only.
"""

from .schemas import TaxBracket, TaxRegime


LEGACY_REGIME = TaxRegime(
    key="legacy",
    label="Legacy PAYE",
    is_reform=False,
    brackets=(
        TaxBracket(limit=300_000, rate=0.07),
        TaxBracket(limit=600_000, rate=0.11),
        TaxBracket(limit=1_100_000, rate=0.15),
        TaxBracket(limit=1_600_000, rate=0.19),
        TaxBracket(limit=3_200_000, rate=0.21),
        TaxBracket(rate=0.24),
    ),
)

# First ₦800,000 of taxable income is tax-free under the reform
REFORM_REGIME = TaxRegime(
    key="reform",
    label="Reform PAYE",
    is_reform=True,
    brackets=(
        TaxBracket(limit=800_000, rate=0.0),
        TaxBracket(limit=3_000_000, rate=0.15),
        TaxBracket(limit=12_000_000, rate=0.18),
        TaxBracket(limit=25_000_000, rate=0.21),
        TaxBracket(limit=50_000_000, rate=0.23),
        TaxBracket(rate=0.25),
    ),
)

LEGACY_BRACKETS = LEGACY_REGIME.brackets
REFORM_BRACKETS = REFORM_REGIME.brackets

REGIMES = {
    LEGACY_REGIME.key: LEGACY_REGIME,
    REFORM_REGIME.key: REFORM_REGIME,
}


def get_regime(key: str) -> TaxRegime:
    """Look up a regime by key ('legacy' or 'reform')."""
    try:
        return REGIMES[key]
    except KeyError:
        raise KeyError(f"Unknown regime '{key}'. Must be one of: {', '.join(REGIMES)}") from None
