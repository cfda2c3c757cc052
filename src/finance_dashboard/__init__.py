"""Personal finance dashboard API: portfolio, watchlist, preferences and mocked market data."""
