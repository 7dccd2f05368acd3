"""Parsing of domain, IPv4 and IPv6 lists."""

from __future__ import annotations

import ipaddress
import re
from collections.abc import Iterable

_DOMAIN = r"(\*\.)?([a-zA-Z0-9]([a-zA-Z0-9\-]{0,61}[a-zA-Z0-9])?\.)+[a-zA-Z]{2,}"
_IPV4 = (
    r"((25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\.){3}"
    r"(25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)"
)
_IPV4_TAIL = (
    r"((25[0-5]|(2[0-4]|1{0,1}[0-9]){0,1}[0-9])\.){3,3}"
    r"(25[0-5]|(2[0-4]|1{0,1}[0-9]){0,1}[0-9])"
)
_HEX = r"[0-9a-fA-F]{1,4}"
_IPV6 = "|".join(
    [
        rf"({_HEX}:){{7,7}}{_HEX}",
        rf"({_HEX}:){{1,7}}:",
        rf"({_HEX}:){{1,6}}:{_HEX}",
        rf"({_HEX}:){{1,5}}(:{_HEX}){{1,2}}",
        rf"({_HEX}:){{1,4}}(:{_HEX}){{1,3}}",
        rf"({_HEX}:){{1,3}}(:{_HEX}){{1,4}}",
        rf"({_HEX}:){{1,2}}(:{_HEX}){{1,5}}",
        rf"{_HEX}:((:{_HEX}){{1,6}})",
        rf":((:{_HEX}){{1,7}}|:)",
        r"fe80:(:[0-9a-fA-F]{0,4}){0,4}%[0-9a-zA-Z]{1,}",
        rf"::(ffff(:0{{1,4}}){{0,1}}:){{0,1}}{_IPV4_TAIL}",
        rf"({_HEX}:){{1,4}}:{_IPV4_TAIL}",
    ]
)
_ADDRESS = re.compile(rf"(?:{_DOMAIN}|{_IPV4}|(?:{_IPV6}))", re.ASCII)
_DOMAIN_TAIL = re.compile(r"([.\w\-]+){1,2}\Z", re.ASCII)


def unique(items: Iterable[str]) -> list[str]:
    """Drop repeated items, keeping the first occurrence of each."""
    return list(dict.fromkeys(items))


def _is_ip(text: str) -> bool:
    try:
        ipaddress.ip_address(text)
    except ValueError:
        return False
    return True


def parse_domains(text: str) -> list[str]:
    """Split a comma-separated list into valid, distinct hosts and addresses.

    Domain names are lower-cased; IP addresses are kept as written.
    Entries that are neither are dropped.
    """
    result = []
    for entry in (part.strip() for part in text.split(",")):
        if not entry or not _ADDRESS.fullmatch(entry):
            continue
        if ":" in entry or _is_ip(entry):
            result.append(entry)
        else:
            result.append(entry.lower())
    return unique(result)


def domain_name(text: str) -> str:
    """Return the trailing host name of text, without leading dots."""
    match = _DOMAIN_TAIL.search(text)
    return match.group(0).lstrip(".") if match else ""