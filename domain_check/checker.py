"""Sequential availability checks with whois-then-DNS fallback."""

import logging
from collections.abc import Callable
from typing import Protocol

from domain_check.dns_checker import DnsLookup
from domain_check.errors import LookupFailed
from domain_check.tld_list import TLDS, domains_for
from domain_check.types import AllResults, CheckResult, NameResults
from domain_check.whois_checker import WhoisLookup

logger = logging.getLogger(__name__)


class Lookup(Protocol):
    async def lookup(self, domain: str) -> CheckResult: ...


class FallbackLookup:
    """Ask the primary lookup, and the fallback when the primary fails."""

    def __init__(self, primary: Lookup, fallback: Lookup):
        self.primary = primary
        self.fallback = fallback

    async def lookup(self, domain: str) -> CheckResult:
        try:
            return await self.primary.lookup(domain)
        except LookupFailed as exc:
            logger.debug("%s; falling back", exc)
            return await self.fallback.lookup(domain)


def default_lookup(*, skip_whois: bool = False) -> Lookup:
    """Build the standard whois-then-DNS lookup, or DNS only."""
    if skip_whois:
        return DnsLookup()
    return FallbackLookup(WhoisLookup(), DnsLookup())


async def check_domain(domain: str, lookup: Lookup) -> CheckResult:
    """Check a single domain."""
    return await lookup.lookup(domain)


async def check_name(
    name: str,
    lookup: Lookup,
    tlds: tuple[str, ...] = TLDS,
    on_result: Callable[[str, CheckResult], None] | None = None,
) -> NameResults:
    """Check every TLD for one name, one at a time, in TLD order."""
    results: NameResults = {}
    for tld, domain in domains_for(name, tlds):
        result = await check_domain(domain, lookup)
        results[tld] = result
        if on_result is not None:
            on_result(domain, result)
    return results


async def check_names(
    names: list[str],
    lookup: Lookup,
    tlds: tuple[str, ...] = TLDS,
    on_name: Callable[[str], None] | None = None,
    on_result: Callable[[str, CheckResult], None] | None = None,
) -> AllResults:
    """Check all names sequentially, keeping input order.

    Args:
        names: Normalized candidate names (e.g. ["acme", "widget"]).
        lookup: The lookup used for each domain.
        tlds: TLD suffixes to check, in reporting order.
        on_name: Optional callback invoked before a name's checks start.
        on_result: Optional callback invoked after each domain is checked.

    Returns:
        A mapping of name -> {tld: CheckResult}, in input order.
    """
    all_results: AllResults = {}
    for name in names:
        if on_name is not None:
            on_name(name)
        all_results[name] = await check_name(name, lookup, tlds, on_result)
    return all_results
