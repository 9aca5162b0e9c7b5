"""Exceptions raised while checking domains."""


class DomainCheckError(Exception):
    """Base class for domain check errors."""


class LookupFailed(DomainCheckError):
    """An authoritative lookup could not produce an answer.

    Raised when ``whois`` cannot be started or does not exit cleanly in time.
    The fallback lookup handles it; it never reaches the user.
    """

    def __init__(self, domain: str, reason: str):
        super().__init__(f"lookup for {domain} failed: {reason}")
        self.domain = domain
        self.reason = reason
