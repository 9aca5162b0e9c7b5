"""The fixed TLD list and candidate name normalization."""

import logging

logger = logging.getLogger(__name__)

TLDS: tuple[str, ...] = (".com", ".app", ".io", ".ai", ".dev", ".tech", ".xyz", ".net", ".org")


def normalize_names(raw_names: list[str]) -> list[str]:
    """Strip and case-fold candidate names, dropping blanks and repeats.

    Names starting with "-" are skipped: no domain label can start with a
    hyphen, and ``whois`` would read them as options. The first occurrence
    of a name keeps its position.
    """
    names: list[str] = []
    for raw in raw_names:
        name = raw.strip().casefold()
        if name.startswith("-"):
            logger.warning("Skipping %r: names cannot start with '-'", raw)
            continue
        if not name or name in names:
            continue
        names.append(name)
    return names


def domains_for(name: str, tlds: tuple[str, ...] = TLDS) -> list[tuple[str, str]]:
    """Return ``(tld, domain)`` pairs for a name, in TLD list order."""
    return [(tld, f"{name}{tld}") for tld in tlds]
