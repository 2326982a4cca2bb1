#!/usr/bin/env python
"""Quick helper script to inspect what pricing a requester would see.

Usage:
  python check_pricing.py --ip 8.8.8.8
  python check_pricing.py --country IN --compatible
  python check_pricing.py --country TH --json

Exits with code 0 after printing the resolved pricing.
"""
from __future__ import annotations
import sys
import argparse
import json

from geoprice import create_app
from geoprice.service import RequestContext


def build_context(ip: str | None, country: str | None, language: str | None) -> RequestContext:
    headers = {}
    if ip:
        headers['X-Forwarded-For'] = ip
    if country:
        headers['CF-IPCountry'] = country.upper()
    if language:
        headers['Accept-Language'] = language
    return RequestContext(headers=headers)


def summarize(ctx: RequestContext, compatible: bool = False, as_json: bool = False) -> int:
    app = create_app('config.ProdConfig')
    orchestrator = app.extensions['pricing']
    if compatible:
        result = orchestrator.resolve_compatible_pricing(ctx)
    else:
        result = orchestrator.resolve_pricing(ctx)

    if as_json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return 0

    loc = result.location
    pricing = result.pricing
    print("=== Pricing ===")
    print(f"Location: {loc.country} ({loc.country_code}) region={loc.region} city={loc.city} tz={loc.timezone}")
    print(f"Currency: {pricing.currency}")
    print(f"Monthly: {pricing.monthly.formatted}")
    print(f"Yearly: {pricing.yearly.formatted}")
    enabled = [name for name, on in result.payment_methods.to_dict().items() if on]
    print(f"Payment methods: {', '.join(enabled)}")
    if result.fallback_used:
        print(f"Gateway fallback: {result.original_currency} -> {pricing.currency}")
    return 0


def main(argv: list[str]) -> int:
    parser = argparse.ArgumentParser(description="Show the pricing resolved for a client IP or headers")
    parser.add_argument('--ip', help='Client IP address (sent as X-Forwarded-For)')
    parser.add_argument('--country', help='Two-letter country code (sent as CF-IPCountry)')
    parser.add_argument('--language', help='Accept-Language header value')
    parser.add_argument('--compatible', action='store_true', help='Apply the gateway currency fallback')
    parser.add_argument('--json', action='store_true', help='Print the raw JSON result')
    args = parser.parse_args(argv)
    ctx = build_context(args.ip, args.country, args.language)
    return summarize(ctx, compatible=args.compatible, as_json=args.json)


if __name__ == '__main__':
    sys.exit(main(sys.argv[1:]))
