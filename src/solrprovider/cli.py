"""CLI entry point — Fetch one page of Solr results as JSON."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="solrprovider",
        description="SolrProvider — Paginated, sorted Solr results as JSON",
    )
    parser.add_argument("query", help="Solr main query, e.g. 'title:solar'")
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--collection",
        type=str,
        default=None,
        help="Solr collection (overrides config)",
    )
    parser.add_argument(
        "--filter",
        "-f",
        action="append",
        default=[],
        help="Filter query (fq); may be repeated",
    )
    parser.add_argument(
        "--page",
        "-p",
        type=int,
        default=1,
        help="One-based page number",
    )
    parser.add_argument(
        "--page-size",
        type=int,
        default=None,
        help="Results per page (overrides config)",
    )
    parser.add_argument(
        "--sort",
        "-s",
        type=str,
        default=None,
        help="Sort spec, e.g. '-score,title'",
    )
    parser.add_argument(
        "--key",
        type=str,
        default=None,
        help="Field used as each result's key (default: id)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["debug", "info", "warning", "error"],
        default=None,
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"SolrProvider {_get_version()}",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    from solrprovider.config.settings import Settings

    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: Config file not found: {config_path}", file=sys.stderr)
            sys.exit(1)
        settings = Settings.from_yaml(config_path)
    else:
        settings = Settings()

    if args.collection:
        settings.solr.collection = args.collection
    if args.page_size is not None:
        settings.provider.page_size = args.page_size
    if args.log_level:
        settings.observability.log_level = args.log_level

    from solrprovider.observability.logging import setup_logging

    setup_logging(settings.observability)

    from solrprovider.exceptions import SolrProviderError

    try:
        payload = run(settings, args)
    except SolrProviderError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(json.dumps(payload, indent=2, ensure_ascii=False, default=str))


def run(settings: Any, args: argparse.Namespace) -> dict[str, Any]:
    """Build a provider from settings and CLI args and collect one page."""
    from solrprovider.backends.base.registry import BackendRegistry
    from solrprovider.data.provider import SearchDataProvider
    from solrprovider.models.base import SearchResult
    from solrprovider.models.query import SelectQuery

    query = SelectQuery(query=args.query, filters=list(args.filter))
    sort: dict[str, Any] | bool = False
    if args.sort:
        requested = [part.strip().lstrip("-") for part in args.sort.split(",") if part.strip()]
        sort = {
            "attributes": requested,
            "params": {settings.provider.sort_param: args.sort},
            **settings.provider.sort_options(),
        }

    registry = BackendRegistry.with_builtins()
    backend = registry.initialize_backend(settings.backend, **settings.solr.model_dump())
    try:
        provider = SearchDataProvider(
            query,
            backend,
            SearchResult,
            key=args.key,
            sort=sort,
            pagination={
                **settings.provider.pagination_options(),
                "params": {settings.provider.page_param: args.page},
            },
        )
        models = provider.get_models()
        return {
            "total_count": provider.get_total_count(),
            "page": provider.get_pagination().get_page() + 1,
            "keys": provider.get_keys(),
            "models": [model.model_dump() for model in models],
        }
    finally:
        registry.shutdown_all()


def _get_version() -> str:
    """Get the package version."""
    try:
        from solrprovider import __version__

        return __version__
    except ImportError:
        return "unknown"


if __name__ == "__main__":
    main()
