"""Authoritative availability lookup via the system ``whois`` command."""

import asyncio
import contextlib
import logging

from domain_check.classifier import DEFAULT_RULES, ClassificationRule, classify
from domain_check.errors import LookupFailed
from domain_check.types import CheckMethod, CheckResult

logger = logging.getLogger(__name__)

WHOIS_COMMAND = "whois"
WHOIS_TIMEOUT = 5.0


class WhoisLookup:
    """Run ``whois <domain>`` and classify its output.

    Raises LookupFailed if the command cannot be started or does not exit
    cleanly within the timeout.
    """

    def __init__(
        self,
        command: str = WHOIS_COMMAND,
        timeout: float = WHOIS_TIMEOUT,
        rules: tuple[ClassificationRule, ...] = DEFAULT_RULES,
    ):
        self.command = command
        self.timeout = timeout
        self.rules = rules

    async def _run(self, domain: str) -> str:
        try:
            proc = await asyncio.create_subprocess_exec(
                self.command,
                domain,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except (OSError, ValueError) as exc:
            raise LookupFailed(domain, f"cannot run {self.command}: {exc}") from exc

        try:
            stdout, _ = await asyncio.wait_for(proc.communicate(), timeout=self.timeout)
        except TimeoutError as exc:
            # The process may exit on its own right at the deadline.
            with contextlib.suppress(ProcessLookupError):
                proc.kill()
            await proc.wait()
            raise LookupFailed(domain, f"timed out after {self.timeout:g}s") from exc

        if proc.returncode != 0:
            raise LookupFailed(domain, f"{self.command} exited with status {proc.returncode}")

        return stdout.decode("utf-8", errors="replace")

    async def lookup(self, domain: str) -> CheckResult:
        text = await self._run(domain)
        status = classify(text, self.rules)
        logger.debug("whois classified %s as %s", domain, status.value)
        return CheckResult(status=status, method=CheckMethod.WHOIS)
