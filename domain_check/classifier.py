"""Classify raw whois text into a domain status."""

import re
from dataclasses import dataclass

from domain_check.types import DomainStatus


@dataclass(frozen=True)
class ClassificationRule:
    pattern: re.Pattern[str]
    status: DomainStatus


def _rule(pattern: str, status: DomainStatus) -> ClassificationRule:
    return ClassificationRule(re.compile(pattern, re.IGNORECASE), status)


PREMIUM_RULES: tuple[ClassificationRule, ...] = (
    _rule(r"premium", DomainStatus.PREMIUM),
    _rule(r"for sale", DomainStatus.PREMIUM),
    _rule(r"available for purchase", DomainStatus.PREMIUM),
)

REGISTERED_RULES: tuple[ClassificationRule, ...] = (
    _rule(r"registrar:", DomainStatus.REGISTERED),
    _rule(r"creation date:", DomainStatus.REGISTERED),
    _rule(r"registry expiry date:", DomainStatus.REGISTERED),
    _rule(r"domain name:", DomainStatus.REGISTERED),
    _rule(r"status: active", DomainStatus.REGISTERED),
)

# Premium rules come first so a for-sale listing with registrar details
# still reads as premium.
DEFAULT_RULES: tuple[ClassificationRule, ...] = PREMIUM_RULES + REGISTERED_RULES


def classify(
    text: str,
    rules: tuple[ClassificationRule, ...] = DEFAULT_RULES,
) -> DomainStatus:
    """Classify whois output using the first matching rule.

    Args:
        text: Raw whois output.
        rules: Ordered rules; earlier rules take priority.

    Returns:
        The status of the first rule whose pattern matches, or
        DomainStatus.AVAILABLE when nothing matches.
    """
    for rule in rules:
        if rule.pattern.search(text):
            return rule.status
    return DomainStatus.AVAILABLE
