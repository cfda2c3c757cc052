"""Core provider abstractions."""
from finance_dashboard.providers.core.quote_provider_abc import QuoteProviderABC
from finance_dashboard.providers.core.utils import normalize_stock_symbol, round2

__all__ = [
    "QuoteProviderABC",
    "normalize_stock_symbol",
    "round2",
]
