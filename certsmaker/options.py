"""Resolving option values from command-line arguments, environment and defaults."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping

from certsmaker.checks import is_bool_string, is_not_empty_and_not_default, is_valid_country
from certsmaker.domains import parse_domains

ENV_KEY_COUNTRY = "CERT_C"
ENV_KEY_STATE = "CERT_ST"
ENV_KEY_LOCALITY = "CERT_L"
ENV_KEY_ORGANIZATION = "CERT_O"
ENV_KEY_ORGANIZATION_UNIT = "CERT_OU"
ENV_KEY_COMMON_NAME = "CERT_CN"
ENV_KEY_DOMAINS = "CERT_DNS"

ENV_KEY_FOR_K8S = "FOR_K8S"
ENV_KEY_FOR_FIREFOX = "FOR_FIREFOX"

ENV_KEY_USER = "USER"
ENV_KEY_UID = "UID"
ENV_KEY_GID = "GID"
ENV_KEY_OUTPUT_DIR = "DIR"
ENV_KEY_CUSTOM_FILE_NAME = "CUSTOM_FILE_NAME"

ENV_KEY_EXPIRE_DAYS = "EXPIRE_DAYS"

_UNSAFE_PATH_CHARS = re.compile(r"[^0-9A-Za-z~\-./]")


def _env(key: str, environ: Mapping[str, str] | None) -> str:
    source = os.environ if environ is None else environ
    return source.get(key, "")


def update_string_option(
    key: str, value: str, default: str, environ: Mapping[str, str] | None = None
) -> str:
    """Pick the argument, else the environment variable, else the default.

    Values equal to the default or empty are ignored; the result is stripped.
    """
    result = default
    from_env = _env(key, environ)
    if is_not_empty_and_not_default(from_env, default):
        result = from_env
    if is_not_empty_and_not_default(value, default):
        result = value
    return result.strip()


def update_bool_option(
    key: str, value: str, default: str, environ: Mapping[str, str] | None = None
) -> bool:
    """Resolve a boolean option; an argument differing from the default wins."""
    default_flag = is_bool_string(default)
    result = default_flag
    from_env = _env(key, environ)
    if from_env != "":
        result = is_bool_string(from_env)
    if is_bool_string(value) != default_flag:
        result = is_bool_string(value)
    return result


def update_country_option(
    key: str, value: str, default: str, environ: Mapping[str, str] | None = None
) -> str:
    """Resolve a two-letter country code, upper-cased; invalid codes give the default."""
    resolved = update_string_option(key, value, default, environ)
    if is_valid_country(resolved):
        return resolved.upper()
    return default


def update_domain_option(
    key: str, value: str, default: str, environ: Mapping[str, str] | None = None
) -> list[str]:
    """Resolve a comma-separated domain list into distinct valid entries."""
    return parse_domains(update_string_option(key, value, default, environ))


def _clean(path: str) -> str:
    """Lexically normalise a slash-separated path."""
    if path == "":
        return "."
    rooted = path.startswith("/")
    parts: list[str] = []
    for part in path.split("/"):
        if part in ("", "."):
            continue
        if part == "..":
            if parts and parts[-1] != "..":
                parts.pop()
            elif not rooted:
                parts.append("..")
            continue
        parts.append(part)
    joined = "/".join(parts)
    if rooted:
        return "/" + joined
    return joined or "."


def sanitize_dir_path(
    key: str, value: str, default: str, environ: Mapping[str, str] | None = None
) -> str:
    """Resolve the output directory and reduce it to a safe relative path."""
    resolved = update_string_option(key, value, default, environ)
    if resolved == default:
        return default
    text = resolved.lower().replace("..", "").replace("./", "")
    text = _UNSAFE_PATH_CHARS.sub("", text)
    return _clean(_clean(text)).strip("/")