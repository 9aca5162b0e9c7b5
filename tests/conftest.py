import io

from rich.console import Console

from domain_check.types import CheckResult


def _capture_console() -> tuple[Console, io.StringIO]:
    """Create a Console that writes to a StringIO for test capturing."""
    buf = io.StringIO()
    return Console(file=buf, force_terminal=True, width=120), buf


class FakeLookup:
    """Lookup that answers from a fixed mapping and records each domain asked for."""

    def __init__(self, results: dict[str, CheckResult] | None = None, default: CheckResult | None = None):
        self.results = results or {}
        self.default = default
        self.calls: list[str] = []

    async def lookup(self, domain: str) -> CheckResult:
        self.calls.append(domain)
        if domain in self.results:
            return self.results[domain]
        return self.default
