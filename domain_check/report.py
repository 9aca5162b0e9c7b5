"""Line rendering and the per-name summary for check results."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from rich.text import Text

from domain_check.types import AllResults, CheckResult, DomainStatus, NameResults

DOMAIN_COLUMN_WIDTH = 25
BANNER_RULE = "═" * 39
RECOMMENDED_REGISTRARS = ("Namecheap", "Cloudflare", "Porkbun")


def _default_labels() -> dict[DomainStatus, tuple[str, str]]:
    return {
        DomainStatus.AVAILABLE: ("✅ Available", "green"),
        DomainStatus.REGISTERED: ("❌ Registered", "red"),
        DomainStatus.PREMIUM: ("⚠️ Premium", "yellow"),
        DomainStatus.UNKNOWN: ("🔍 Unknown", "blue"),
    }


@dataclass(frozen=True)
class Theme:
    """Labels and rich styles used by the report."""

    labels: Mapping[DomainStatus, tuple[str, str]] = field(default_factory=_default_labels)
    heading: str = "blue"
    muted: str = "bright_black"

    def __post_init__(self):
        object.__setattr__(self, "labels", MappingProxyType(dict(self.labels)))

    def label_for(self, status: object) -> tuple[str, str]:
        """Return (label, style) for a status, using Unknown for anything unrecognized."""
        # Equality scan, so unhashable values fall through to Unknown too.
        for known, label in self.labels.items():
            if known == status:
                return label
        return self.labels[DomainStatus.UNKNOWN]

    def style_for(self, status: DomainStatus) -> str:
        return self.label_for(status)[1]


DEFAULT_THEME = Theme()


def render_banner(theme: Theme = DEFAULT_THEME) -> Text:
    banner = Text()
    banner.append(BANNER_RULE + "\n", style=theme.heading)
    banner.append("Domain Availability Checker\n", style=theme.heading)
    banner.append(BANNER_RULE, style=theme.heading)
    return banner


def render_name_header(name: str, theme: Theme = DEFAULT_THEME) -> Text:
    return Text(f"\nChecking: {name}", style=theme.heading)


def render_result(domain: str, result: CheckResult, theme: Theme = DEFAULT_THEME) -> Text:
    """Render one result line: padded domain, status icon, check method."""
    label, style = theme.label_for(result.status)
    method = getattr(result.method, "value", result.method)

    line = Text(f"  {domain.ljust(DOMAIN_COLUMN_WIDTH)} ")
    line.append(label, style=style)
    line.append(f" [{method}]", style=theme.muted)
    if result.status == DomainStatus.UNKNOWN and result.error_code:
        line.append(f" ({result.error_code})", style=theme.muted)
    return line


def group_results(name_results: NameResults) -> tuple[list[str], list[str]]:
    """Split one name's results into available and premium TLD lists.

    Both lists keep the order of ``name_results``.
    """
    available = [tld for tld, r in name_results.items() if r.status == DomainStatus.AVAILABLE]
    premium = [tld for tld, r in name_results.items() if r.status == DomainStatus.PREMIUM]
    return available, premium


def summarize(all_results: AllResults, theme: Theme = DEFAULT_THEME) -> Text:
    """Build the summary section, one block per name in insertion order."""
    summary = Text()
    summary.append(f"\n{BANNER_RULE}\n", style=theme.heading)
    summary.append("Summary\n\n", style=theme.heading)

    for name, name_results in all_results.items():
        available, premium = group_results(name_results)
        summary.append(name, style=theme.heading)
        summary.append(":\n")

        if available:
            summary.append("  ")
            summary.append("Available:", style=theme.style_for(DomainStatus.AVAILABLE))
            summary.append(f" {', '.join(available)}\n")

        if premium:
            summary.append("  ")
            summary.append("Premium:", style=theme.style_for(DomainStatus.PREMIUM))
            summary.append(f" {', '.join(premium)}\n")

        if not available and not premium:
            summary.append("  ")
            summary.append("All checked domains registered\n", style=theme.style_for(DomainStatus.REGISTERED))

        summary.append("\n")

    return summary


def render_footer(theme: Theme = DEFAULT_THEME) -> Text:
    footer = Text()
    footer.append(
        "Note: DNS checks may have false positives. Verify on registrar websites.\n",
        style=theme.muted,
    )
    footer.append(
        f"Recommended registrars: {', '.join(RECOMMENDED_REGISTRARS)}",
        style=theme.muted,
    )
    return footer
