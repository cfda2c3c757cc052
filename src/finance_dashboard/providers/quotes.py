"""Static quote provider backed by a fixed point-in-time market snapshot."""
from finance_dashboard.providers.core import QuoteProviderABC, normalize_stock_symbol
from finance_dashboard.schemas import MarketIndex, SearchResult, StockQuote

# symbol -> (name, price, change %, market cap, P/E, dividend yield %)
STOCK_DATA: dict[str, tuple[str, float, float, str, float, float]] = {
    "AAPL": ("Apple Inc.", 173.42, 2.74, "2.84T", 28.64, 0.51),
    "MSFT": ("Microsoft Corporation", 328.79, 1.34, "2.45T", 31.22, 0.82),
    "GOOGL": ("Alphabet Inc.", 2728.36, 1.57, "1.72T", 25.78, 0.0),
    "AMZN": ("Amazon.com, Inc.", 3445.09, -0.87, "1.75T", 60.21, 0.0),
    "TSLA": ("Tesla, Inc.", 864.27, 3.21, "868B", 186.43, 0.0),
    "META": ("Meta Platforms, Inc.", 325.45, 0.95, "885B", 27.12, 0.0),
    "NFLX": ("Netflix, Inc.", 518.73, 1.13, "230B", 45.67, 0.0),
    "NVDA": ("NVIDIA Corporation", 716.99, 4.32, "1.77T", 75.39, 0.04),
    "JPM": ("JPMorgan Chase & Co.", 142.61, -0.42, "415B", 11.32, 2.80),
    "BAC": ("Bank of America Corporation", 38.28, -0.65, "300B", 10.85, 2.61),
    "WMT": ("Walmart Inc.", 142.63, -0.42, "383B", 29.76, 1.54),
    "PG": ("The Procter & Gamble Company", 159.37, 0.77, "376B", 28.35, 2.44),
}

# name -> (value, change %, change amount)
MARKET_INDICES: dict[str, tuple[float, float, float]] = {
    "S&P 500": (4587.64, 1.23, 56.09),
    "NASDAQ": (14346.02, 1.64, 232.56),
    "DOW JONES": (35208.51, 0.78, 272.68),
    "10-YR TREASURY": (1.63, -0.05, -0.05),
}


class StaticQuoteProvider(QuoteProviderABC):
    """Quote provider over an in-memory table; no network I/O.

    The default tables describe a single fixed market state. Tests may pass
    their own tables.
    """

    def __init__(
        self,
        stock_data: dict[str, tuple[str, float, float, str, float, float]] | None = None,
        market_indices: dict[str, tuple[float, float, float]] | None = None,
    ) -> None:
        self._stocks = STOCK_DATA if stock_data is None else stock_data
        self._indices = MARKET_INDICES if market_indices is None else market_indices

    def get_quote(self, symbol: str) -> StockQuote | None:
        sym = normalize_stock_symbol(symbol)
        row = self._stocks.get(sym)
        if row is None:
            return None
        name, price, change, market_cap, pe_ratio, dividend_yield = row
        return StockQuote(
            symbol=sym,
            name=name,
            price=price,
            change=change,
            market_cap=market_cap,
            pe_ratio=pe_ratio,
            dividend_yield=dividend_yield,
        )

    def get_market_overview(self) -> dict[str, MarketIndex]:
        return {
            name: MarketIndex(value=value, change=change, change_amount=amount)
            for name, (value, change, amount) in self._indices.items()
        }

    def search(self, query: str) -> list[SearchResult]:
        needle = query.strip().lower()
        return [
            SearchResult(symbol=sym, name=row[0], price=row[1], change=row[2])
            for sym, row in self._stocks.items()
            if needle in sym.lower() or needle in row[0].lower()
        ]
