"""Synthetic daily price history.

The series is a random walk seeded from half the symbol's current price.
It is not reproducible between calls unless the generator is given a
seeded random source.
"""
import random
from datetime import date, timedelta

from finance_dashboard.db import Timeframe
from finance_dashboard.providers.core import QuoteProviderABC, round2
from finance_dashboard.schemas import HistoryPoint

TIMEFRAME_DAYS: dict[Timeframe, int] = {
    Timeframe.ONE_DAY: 1,
    Timeframe.ONE_WEEK: 7,
    Timeframe.ONE_MONTH: 30,
    Timeframe.SIX_MONTHS: 180,
    Timeframe.ONE_YEAR: 365,
}
DEFAULT_DAYS = 30


def days_for_timeframe(timeframe: str | None) -> int:
    """Map a timeframe code ("1D", "1W", ...) to a day count; unknown codes give 30."""
    try:
        return TIMEFRAME_DAYS[Timeframe(timeframe)]
    except ValueError:
        return DEFAULT_DAYS


class HistoryGenerator:
    """Generates a daily price series ending today."""

    FALLBACK_BASELINE = 100.0
    # Mean step is (0.5 - DRIFT) * STEP_SIZE, slightly positive.
    DRIFT = 0.48
    STEP_SIZE = 5.0
    PRICE_FLOOR = 1.0

    def __init__(
        self, quotes: QuoteProviderABC, rng: random.Random | None = None
    ) -> None:
        """Initialize the generator.

        Args:
            quotes: Provider used to look up the baseline price.
            rng: Random source; a fresh, OS-seeded one when omitted.
        """
        self._quotes = quotes
        self._rng = rng or random.Random()

    def generate(
        self, symbol: str, days: int, *, end: date | None = None
    ) -> list[HistoryPoint]:
        """Return days + 1 points, one per calendar day, ascending and ending at end.

        Args:
            symbol: Ticker; unknown symbols start from a baseline of 100.
            days: Span in days (>= 0).
            end: Last date of the series; defaults to today.

        Raises:
            ValueError: If days is negative.
        """
        if days < 0:
            raise ValueError(f"days must be >= 0, got {days}")
        quote = self._quotes.get_quote(symbol)
        price = quote.price / 2 if quote is not None else self.FALLBACK_BASELINE
        last = end or date.today()

        points: list[HistoryPoint] = []
        for offset in range(days, -1, -1):
            step = (self._rng.random() - self.DRIFT) * self.STEP_SIZE
            price = max(price + step, self.PRICE_FLOOR)
            points.append(
                HistoryPoint(date=last - timedelta(days=offset), value=round2(price))
            )
        return points

    def for_timeframe(
        self, symbol: str, timeframe: str | None, *, end: date | None = None
    ) -> list[HistoryPoint]:
        """Generate the series for a timeframe code (see days_for_timeframe)."""
        return self.generate(symbol, days_for_timeframe(timeframe), end=end)
