"""Domain Check CLI - check candidate project names across common TLDs."""

import argparse
import asyncio
import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from domain_check.checker import check_names, default_lookup
from domain_check.report import (
    DEFAULT_THEME,
    Theme,
    render_banner,
    render_footer,
    render_name_header,
    render_result,
    summarize,
)
from domain_check.tld_list import normalize_names
from domain_check.types import CheckResult

console = Console()
err_console = Console(stderr=True)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="check-domains",
        description="Check domain availability for project names across common TLDs.",
    )
    parser.add_argument("names", nargs="*", metavar="NAME", help="Candidate project name (e.g., acme)")
    parser.add_argument(
        "--skip-whois",
        action="store_true",
        help="Use DNS lookups only (faster but less accurate)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log lookup fallbacks and DNS errors to stderr",
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def run_checks(
    names: list[str],
    *,
    skip_whois: bool = False,
    theme: Theme = DEFAULT_THEME,
    output_console: Console | None = None,
) -> None:
    """Check every name, streaming result lines, then print the summary.

    Args:
        names: Normalized candidate names, in reporting order.
        skip_whois: Use DNS lookups only.
        theme: Labels and styles for the report.
        output_console: Optional Console for output (used in testing).
    """
    out = output_console or console

    def on_name(name: str) -> None:
        out.print(render_name_header(name, theme))

    def on_result(domain: str, result: CheckResult) -> None:
        out.print(render_result(domain, result, theme))

    out.print(render_banner(theme))
    all_results = asyncio.run(
        check_names(names, default_lookup(skip_whois=skip_whois), on_name=on_name, on_result=on_result)
    )
    out.print(summarize(all_results, theme))
    out.print(render_footer(theme))


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    names = normalize_names(args.names)
    if not names:
        err_console.print(Text("Error: Please provide at least one name to check", style="red"))
        console.print(Text(f"\n{parser.format_usage().strip()}"))
        return 1

    try:
        run_checks(names, skip_whois=args.skip_whois)
    except Exception as exc:
        err_console.print(Text(f"Error: {exc}", style="red"))
        return 1

    return 0
