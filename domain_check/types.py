"""Shared result types for domain availability checks."""

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias


class DomainStatus(Enum):
    AVAILABLE = "available"
    REGISTERED = "registered"
    PREMIUM = "premium"
    UNKNOWN = "unknown"


class CheckMethod(Enum):
    WHOIS = "whois"
    DNS = "dns"


@dataclass(frozen=True)
class CheckResult:
    status: DomainStatus
    method: CheckMethod
    error_code: str | None = None


NameResults: TypeAlias = dict[str, CheckResult]
AllResults: TypeAlias = dict[str, NameResults]
