"""CLI to exercise a running finance dashboard API.

Usage:
  dashboard-cli health
  dashboard-cli search apple
  dashboard-cli quote AAPL
  dashboard-cli history AAPL --timeframe 1W --head 5
  dashboard-cli portfolio add NVDA "NVIDIA Corporation" 4 650.10 2024-02-01
  dashboard-cli watchlist add META
  dashboard-cli preferences set --theme dark
"""
import argparse
import json
import os
import sys

import httpx

DEFAULT_BASE_URL = os.getenv("DASHBOARD_API_URL", "http://127.0.0.1:8001")


def print_json(data: object) -> None:
    print(json.dumps(data, indent=2, default=str))


def _get(client: httpx.Client, path: str, **params: object) -> int:
    r = client.get(path, params=params or None)
    r.raise_for_status()
    print_json(r.json())
    return 0


def cmd_health(client: httpx.Client, _: argparse.Namespace) -> int:
    return _get(client, "/")


def cmd_search(client: httpx.Client, args: argparse.Namespace) -> int:
    return _get(client, "/api/search", q=args.query)


def cmd_quote(client: httpx.Client, args: argparse.Namespace) -> int:
    return _get(client, f"/api/stocks/{args.symbol}")


def cmd_history(client: httpx.Client, args: argparse.Namespace) -> int:
    r = client.get(
        f"/api/stocks/{args.symbol}/history", params={"timeframe": args.timeframe}
    )
    r.raise_for_status()
    data = r.json()
    print(f"Found {len(data)} history points for {args.symbol}")
    print_json(data[: args.head] if args.head else data)
    return 0


def cmd_overview(client: httpx.Client, _: argparse.Namespace) -> int:
    return _get(client, "/api/market/overview")


def cmd_portfolio_list(client: httpx.Client, _: argparse.Namespace) -> int:
    return _get(client, "/api/portfolio")


def cmd_portfolio_summary(client: httpx.Client, _: argparse.Namespace) -> int:
    return _get(client, "/api/portfolio/summary")


def cmd_portfolio_add(client: httpx.Client, args: argparse.Namespace) -> int:
    r = client.post(
        "/api/portfolio",
        json={
            "symbol": args.symbol,
            "companyName": args.company_name,
            "shares": args.shares,
            "purchasePrice": args.purchase_price,
            "purchaseDate": args.purchase_date,
        },
    )
    r.raise_for_status()
    print_json(r.json())
    return 0


def cmd_portfolio_remove(client: httpx.Client, args: argparse.Namespace) -> int:
    r = client.delete(f"/api/portfolio/{args.item_id}")
    r.raise_for_status()
    print(f"Removed portfolio item {args.item_id}")
    return 0


def cmd_watchlist_list(client: httpx.Client, _: argparse.Namespace) -> int:
    return _get(client, "/api/watchlist")


def cmd_watchlist_add(client: httpx.Client, args: argparse.Namespace) -> int:
    r = client.post("/api/watchlist", json={"symbol": args.symbol})
    r.raise_for_status()
    print_json(r.json())
    return 0


def cmd_watchlist_remove(client: httpx.Client, args: argparse.Namespace) -> int:
    r = client.delete(f"/api/watchlist/{args.item_id}")
    r.raise_for_status()
    print(f"Removed watchlist item {args.item_id}")
    return 0


def cmd_preferences_get(client: httpx.Client, _: argparse.Namespace) -> int:
    return _get(client, "/api/preferences")


def cmd_preferences_set(client: httpx.Client, args: argparse.Namespace) -> int:
    body: dict[str, object] = {}
    if args.timeframe:
        body["defaultTimeframe"] = args.timeframe
    if args.theme:
        body["theme"] = args.theme
    if args.indicators is not None:
        body["favoriteIndicators"] = args.indicators
    r = client.put("/api/preferences", json=body)
    r.raise_for_status()
    print_json(r.json())
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Exercise the finance dashboard API.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--base-url",
        default=DEFAULT_BASE_URL,
        help=f"API base URL (default: {DEFAULT_BASE_URL})",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=10.0,
        help="Request timeout in seconds (default: 10)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True, help="Command")

    p = subparsers.add_parser("health", help="GET / health check")
    p.set_defaults(handler=cmd_health)

    p = subparsers.add_parser("search", help="GET /api/search?q=")
    p.add_argument("query", help="Symbol or company name fragment")
    p.set_defaults(handler=cmd_search)

    p = subparsers.add_parser("quote", help="GET /api/stocks/{symbol}")
    p.add_argument("symbol", help="Ticker (e.g. AAPL)")
    p.set_defaults(handler=cmd_quote)

    p = subparsers.add_parser("history", help="GET /api/stocks/{symbol}/history")
    p.add_argument("symbol", help="Ticker")
    p.add_argument("--timeframe", default="1M", help="1D, 1W, 1M, 6M or 1Y (default: 1M)")
    p.add_argument("--head", type=int, default=0, help="Show only first N points (0 = all)")
    p.set_defaults(handler=cmd_history)

    p = subparsers.add_parser("overview", help="GET /api/market/overview")
    p.set_defaults(handler=cmd_overview)

    portfolio = subparsers.add_parser("portfolio", help="Portfolio routes (/api/portfolio)")
    portfolio_sub = portfolio.add_subparsers(dest="portfolio_cmd", required=True)
    p = portfolio_sub.add_parser("list", help="GET /api/portfolio")
    p.set_defaults(handler=cmd_portfolio_list)
    p = portfolio_sub.add_parser("summary", help="GET /api/portfolio/summary")
    p.set_defaults(handler=cmd_portfolio_summary)
    p = portfolio_sub.add_parser("add", help="POST /api/portfolio")
    p.add_argument("symbol")
    p.add_argument("company_name")
    p.add_argument("shares", type=float)
    p.add_argument("purchase_price", type=float)
    p.add_argument("purchase_date", help="YYYY-MM-DD")
    p.set_defaults(handler=cmd_portfolio_add)
    p = portfolio_sub.add_parser("remove", help="DELETE /api/portfolio/{id}")
    p.add_argument("item_id", type=int)
    p.set_defaults(handler=cmd_portfolio_remove)

    watchlist = subparsers.add_parser("watchlist", help="Watchlist routes (/api/watchlist)")
    watchlist_sub = watchlist.add_subparsers(dest="watchlist_cmd", required=True)
    p = watchlist_sub.add_parser("list", help="GET /api/watchlist")
    p.set_defaults(handler=cmd_watchlist_list)
    p = watchlist_sub.add_parser("add", help="POST /api/watchlist")
    p.add_argument("symbol")
    p.set_defaults(handler=cmd_watchlist_add)
    p = watchlist_sub.add_parser("remove", help="DELETE /api/watchlist/{id}")
    p.add_argument("item_id", type=int)
    p.set_defaults(handler=cmd_watchlist_remove)

    prefs = subparsers.add_parser("preferences", help="Preference routes (/api/preferences)")
    prefs_sub = prefs.add_subparsers(dest="preferences_cmd", required=True)
    p = prefs_sub.add_parser("get", help="GET /api/preferences")
    p.set_defaults(handler=cmd_preferences_get)
    p = prefs_sub.add_parser("set", help="PUT /api/preferences")
    p.add_argument("--timeframe", default=None, help="Default chart timeframe")
    p.add_argument("--theme", default=None, help="UI theme (e.g. light, dark)")
    p.add_argument("--indicators", nargs="*", default=None, help="Favorite indicators")
    p.set_defaults(handler=cmd_preferences_set)

    return parser


def main(argv: list[str] | None = None, client: httpx.Client | None = None) -> int:
    """Parse argv and run one command. Returns a process exit code.

    Args:
        argv: Arguments (default: sys.argv[1:]).
        client: Preconfigured client; when omitted one is opened against --base-url.
    """
    args = build_parser().parse_args(argv)
    try:
        if client is not None:
            return args.handler(client, args)
        base_url = args.base_url.rstrip("/")
        with httpx.Client(base_url=base_url, timeout=args.timeout) as owned:
            return args.handler(owned, args)
    except httpx.HTTPStatusError as e:
        print(f"HTTP error: {e.response.status_code}", file=sys.stderr)
        if e.response.content:
            try:
                print(e.response.json(), file=sys.stderr)
            except ValueError:
                print(e.response.text, file=sys.stderr)
        return 1
    except httpx.RequestError as e:
        print(f"Request error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
