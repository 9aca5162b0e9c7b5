"""Tests for the whois lookup."""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from domain_check.errors import LookupFailed
from domain_check.whois_checker import WHOIS_TIMEOUT, WhoisLookup
from domain_check.types import CheckMethod, CheckResult, DomainStatus


def _process(stdout: bytes = b"", returncode: int = 0) -> MagicMock:
    proc = MagicMock()
    proc.communicate = AsyncMock(return_value=(stdout, b""))
    proc.returncode = returncode
    proc.wait = AsyncMock(return_value=returncode)
    return proc


@pytest.mark.asyncio
async def test_registered_output():
    proc = _process(b"Domain Name: ACME.COM\nRegistrar: Example Registrar\n")
    with patch("domain_check.whois_checker.asyncio.create_subprocess_exec", AsyncMock(return_value=proc)) as spawn:
        result = await WhoisLookup().lookup("acme.com")

    assert result == CheckResult(status=DomainStatus.REGISTERED, method=CheckMethod.WHOIS)
    assert spawn.call_args.args[:2] == ("whois", "acme.com")


@pytest.mark.asyncio
async def test_no_match_output_is_available():
    proc = _process(b'No match for "ZQXWV.COM".\n')
    with patch("domain_check.whois_checker.asyncio.create_subprocess_exec", AsyncMock(return_value=proc)):
        result = await WhoisLookup().lookup("zqxwv.com")

    assert result.status == DomainStatus.AVAILABLE
    assert result.method == CheckMethod.WHOIS
    assert result.error_code is None


@pytest.mark.asyncio
async def test_premium_output():
    proc = _process(b"Registrar: Foo\nThis premium domain is for sale\n")
    with patch("domain_check.whois_checker.asyncio.create_subprocess_exec", AsyncMock(return_value=proc)):
        result = await WhoisLookup().lookup("shop.ai")

    assert result.status == DomainStatus.PREMIUM


@pytest.mark.asyncio
async def test_undecodable_output_does_not_fail():
    proc = _process(b"Registrar: \xff\xfe Foo\n")
    with patch("domain_check.whois_checker.asyncio.create_subprocess_exec", AsyncMock(return_value=proc)):
        result = await WhoisLookup().lookup("acme.io")

    assert result.status == DomainStatus.REGISTERED


@pytest.mark.asyncio
async def test_missing_command_raises_lookup_failed():
    spawn = AsyncMock(side_effect=FileNotFoundError(2, "No such file or directory", "whois"))
    with patch("domain_check.whois_checker.asyncio.create_subprocess_exec", spawn):
        with pytest.raises(LookupFailed) as excinfo:
            await WhoisLookup().lookup("acme.com")

    assert excinfo.value.domain == "acme.com"


@pytest.mark.asyncio
async def test_non_zero_exit_raises_lookup_failed():
    proc = _process(b"Registrar: Foo\n", returncode=1)
    with patch("domain_check.whois_checker.asyncio.create_subprocess_exec", AsyncMock(return_value=proc)):
        with pytest.raises(LookupFailed, match="status 1"):
            await WhoisLookup().lookup("acme.com")


@pytest.mark.asyncio
async def test_timeout_kills_process_and_raises():
    """A slow whois should be killed and reported as a failed lookup."""

    async def slow_communicate():
        await asyncio.sleep(1)
        return b"Registrar: Foo\n", b""

    proc = _process()
    proc.communicate = slow_communicate
    with patch("domain_check.whois_checker.asyncio.create_subprocess_exec", AsyncMock(return_value=proc)):
        with pytest.raises(LookupFailed, match="timed out"):
            await WhoisLookup(timeout=0.01).lookup("slow.dev")

    proc.kill.assert_called_once()
    proc.wait.assert_awaited_once()


@pytest.mark.asyncio
async def test_custom_command():
    proc = _process(b"")
    with patch("domain_check.whois_checker.asyncio.create_subprocess_exec", AsyncMock(return_value=proc)) as spawn:
        await WhoisLookup(command="/usr/local/bin/whois").lookup("acme.app")

    assert spawn.call_args.args[0] == "/usr/local/bin/whois"


def test_default_timeout():
    """The whois lookup should give up after 5 seconds by default."""
    assert WHOIS_TIMEOUT == 5.0
    assert WhoisLookup().timeout == 5.0


@pytest.mark.asyncio
async def test_unrunnable_argument_raises_lookup_failed():
    spawn = AsyncMock(side_effect=ValueError("embedded null byte"))
    with patch("domain_check.whois_checker.asyncio.create_subprocess_exec", spawn):
        with pytest.raises(LookupFailed, match="cannot run whois"):
            await WhoisLookup().lookup("bad\x00.com")


@pytest.mark.asyncio
async def test_timeout_when_process_already_exited():
    """If whois exits right at the deadline, killing it must not escape the lookup."""

    async def slow_communicate():
        await asyncio.sleep(1)
        return b"", b""

    proc = _process()
    proc.communicate = slow_communicate
    proc.kill = MagicMock(side_effect=ProcessLookupError())
    with patch("domain_check.whois_checker.asyncio.create_subprocess_exec", AsyncMock(return_value=proc)):
        with pytest.raises(LookupFailed, match="timed out"):
            await WhoisLookup(timeout=0.01).lookup("acme.com")

    proc.wait.assert_awaited_once()
