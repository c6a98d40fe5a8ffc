"""Entry point for the storefront Textual app."""

from __future__ import annotations

import argparse

from storefront.data import load_catalog
from storefront.logging_config import setup_logging
from storefront.order_client import OrderClient
from storefront.storefront_app import StorefrontApp


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="storefront", description="Browse the menu and place an order.")
    parser.add_argument("--catalog", help="JSON product list to load instead of the bundled menu")
    parser.add_argument("--order-url", help="Order-intake endpoint for checkout")
    parser.add_argument("--log-file", help="Where to write the debug log")
    parser.add_argument("--debug", action="store_true", help="Log at DEBUG level")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Run the Textual application."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_file, enable_debug=args.debug)
    products = load_catalog(args.catalog) if args.catalog else None
    StorefrontApp(products=products, order_client=OrderClient(endpoint_url=args.order_url)).run()


if __name__ == "__main__":
    main()
