#!/usr/bin/env python3
"""Command-line access to the Best Buy APIs, printing JSON responses."""

import argparse
import json
import logging
import sys

from bestbuy import (
    BestBuyError,
    Client,
    ClientConfig,
    ResponseParameters,
    load_settings,
)

RESOURCES = (
    "availability",
    "categories",
    "open_box",
    "products",
    "recommendations",
    "reviews",
    "stores",
    "warranties",
)


def parse_selector(raw: str | None):
    """Turn CLI text into an id, a list of ids or a filter query."""
    if raw is None:
        return None
    if raw.isdigit():
        return int(raw)
    parts = [p.strip() for p in raw.split(",")]
    if len(parts) > 1 and all(p.isdigit() for p in parts):
        return [int(p) for p in parts]
    return raw


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("resource", choices=RESOURCES)
    parser.add_argument(
        "selector",
        nargs="?",
        help="id, comma-separated ids, or a filter query such as 'name=Star*'",
    )
    parser.add_argument("--store", help="store selector for availability")
    parser.add_argument(
        "--kind",
        default="MOST_VIEWED",
        help="recommendation kind (MOST_VIEWED, TRENDING, ALSO_VIEWED)",
    )
    parser.add_argument("--category", help="category id for recommendations")
    parser.add_argument("--show")
    parser.add_argument("--sort")
    parser.add_argument("--facets")
    parser.add_argument("--page", type=int, default=0)
    parser.add_argument("--page-size", type=int, default=0)
    parser.add_argument("--debug", action="store_true")
    return parser


def run(args: argparse.Namespace, client: Client) -> dict:
    params = ResponseParameters(
        facets=args.facets,
        page=args.page,
        page_size=args.page_size,
        show=args.show,
        sort=args.sort,
    )
    selector = parse_selector(args.selector)

    if args.resource == "availability":
        return client.availability(selector, parse_selector(args.store), params)
    if args.resource == "categories":
        return client.categories(args.selector, params)
    if args.resource == "recommendations":
        return client.recommendations(
            args.kind, sku=selector, category_id=args.category, params=params
        )
    return getattr(client, args.resource)(selector, params)


def main():
    args = build_parser().parse_args()

    settings = load_settings()
    debug = args.debug or settings.debug
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    client = Client(ClientConfig.from_settings(settings, debug=debug))
    try:
        result = run(args, client)
    except BestBuyError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    print(json.dumps(result, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
