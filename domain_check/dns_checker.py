"""Async DNS fallback check for domain names."""

import logging

import dns.asyncresolver
import dns.exception
import dns.resolver

from domain_check.types import CheckMethod, CheckResult, DomainStatus

logger = logging.getLogger(__name__)

DNS_TIMEOUT = 5.0


def _error_code(exc: Exception) -> str:
    """Short diagnostic code for a resolution failure."""
    if isinstance(exc, dns.resolver.NoAnswer):
        return "NODATA"
    if isinstance(exc, dns.resolver.NoNameservers):
        return "SERVFAIL"
    if isinstance(exc, dns.exception.Timeout):
        return "TIMEOUT"
    return type(exc).__name__


class DnsLookup:
    """Resolve a domain's A record and map the outcome to a status.

    A domain is classified as:
    - "registered" if the A lookup returns an answer
    - "available" if NXDOMAIN is returned
    - "unknown" for any other error, with the error code kept

    This lookup never raises.
    """

    def __init__(self, resolver: dns.asyncresolver.Resolver | None = None):
        if resolver is None:
            resolver = dns.asyncresolver.Resolver()
            resolver.timeout = DNS_TIMEOUT
            resolver.lifetime = DNS_TIMEOUT
        self.resolver = resolver

    async def lookup(self, domain: str) -> CheckResult:
        try:
            await self.resolver.resolve(domain, "A")
        except dns.resolver.NXDOMAIN:
            return CheckResult(status=DomainStatus.AVAILABLE, method=CheckMethod.DNS)
        except Exception as exc:
            code = _error_code(exc)
            logger.debug("DNS lookup for %s failed: %s", domain, code)
            return CheckResult(status=DomainStatus.UNKNOWN, method=CheckMethod.DNS, error_code=code)
        return CheckResult(status=DomainStatus.REGISTERED, method=CheckMethod.DNS)
