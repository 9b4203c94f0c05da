"""Domain validation backed by the public suffix list.

A candidate is accepted when it parses as the host of an ``http://`` URL
with no empty labels and has a registrable label under a public suffix.
A last label the suffix list does not know counts as a one-label suffix,
so ``host.internal`` is registrable as ``host.internal``.
Only the suffix list snapshot bundled with tldextract is used; nothing is
fetched over the network.
"""

from __future__ import annotations

import ipaddress
from typing import Any
from urllib.parse import urlsplit

import tldextract


class DomainValidator:
    """Syntactic domain check with a preloaded suffix list.

    Args:
        include_psl_private_domains: Treat private suffixes (``github.io``,
            ``blogspot.com``) as public suffixes.
        cache_dir: Where tldextract keeps its parsed suffix cache. ``None``
            keeps the library default location.
    """

    def __init__(
        self,
        *,
        include_psl_private_domains: bool = False,
        cache_dir: str | None = None,
    ) -> None:
        options: dict[str, Any] = {
            "suffix_list_urls": (),
            "fallback_to_snapshot": True,
            "include_psl_private_domains": include_psl_private_domains,
        }
        if cache_dir:
            options["cache_dir"] = cache_dir
        self._extract = tldextract.TLDExtract(**options)

    def registrable_domain(self, candidate: str) -> str:
        """Return ``domain.suffix`` for *candidate*, or ``""`` if there is none."""
        host = _parse_host(candidate)
        if not host:
            return ""
        ext = self._extract(host)
        if ext.suffix:
            return f"{ext.domain}.{ext.suffix}" if ext.domain else ""
        # Unlisted TLD: the last label is the suffix, as the PSL "*" rule does.
        labels = host.split(".")
        if len(labels) < 2 or _is_ip_address(host):
            return ""
        return ".".join(labels[-2:])

    def is_valid(self, candidate: str) -> bool:
        return bool(self.registrable_domain(candidate))


def _parse_host(candidate: str) -> str:
    """Extract the hostname of ``http://<candidate>``; ``""`` on parse failure."""
    try:
        host = urlsplit(f"http://{candidate}").hostname
    except ValueError:
        return ""
    if not host or any(ch.isspace() or not ch.isprintable() for ch in host):
        return ""
    if "" in host.split("."):
        return ""
    return host


def _is_ip_address(host: str) -> bool:
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return False
    return True


_default_validator: DomainValidator | None = None


def is_valid_domain(candidate: str) -> bool:
    """Check *candidate* with a shared default :class:`DomainValidator`."""
    global _default_validator
    if _default_validator is None:
        _default_validator = DomainValidator()
    return _default_validator.is_valid(candidate)
