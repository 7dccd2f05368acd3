"""Command-line flags and their resolution into a configuration."""

from __future__ import annotations

import argparse
import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from certsmaker import config as defaults
from certsmaker.config import Config
from certsmaker.options import (
    ENV_KEY_COMMON_NAME,
    ENV_KEY_COUNTRY,
    ENV_KEY_CUSTOM_FILE_NAME,
    ENV_KEY_DOMAINS,
    ENV_KEY_EXPIRE_DAYS,
    ENV_KEY_FOR_FIREFOX,
    ENV_KEY_FOR_K8S,
    ENV_KEY_GID,
    ENV_KEY_LOCALITY,
    ENV_KEY_ORGANIZATION,
    ENV_KEY_ORGANIZATION_UNIT,
    ENV_KEY_OUTPUT_DIR,
    ENV_KEY_STATE,
    ENV_KEY_UID,
    ENV_KEY_USER,
    sanitize_dir_path,
    update_bool_option,
    update_country_option,
    update_domain_option,
    update_string_option,
)


@dataclass
class AppFlags:
    """Raw flag values as given on the command line."""

    country: str = defaults.DEFAULT_COUNTRY
    state: str = defaults.DEFAULT_STATE
    locality: str = defaults.DEFAULT_LOCALITY
    organization: str = defaults.DEFAULT_ORGANIZATION
    organizational_unit: str = defaults.DEFAULT_ORGANIZATIONAL_UNIT
    common_name: str = defaults.DEFAULT_COMMON_NAME
    domains: str = defaults.DEFAULT_DOMAINS

    for_k8s: str = defaults.DEFAULT_FOR_K8S
    for_firefox: str = defaults.DEFAULT_FOR_FIREFOX

    user: str = defaults.DEFAULT_USER
    uid: str = defaults.DEFAULT_UID
    gid: str = ""
    output_dir: str = ""
    custom_file_name: str = defaults.DEFAULT_CUSTOM_FILE_NAME

    expire_days: str = defaults.DEFAULT_EXPIRE_DAYS


# (flag name, AppFlags field, flag default, label, documented default)
_FLAGS = [
    (ENV_KEY_COUNTRY, "country", defaults.DEFAULT_COUNTRY, "Country Name", defaults.DEFAULT_COUNTRY),
    (ENV_KEY_STATE, "state", defaults.DEFAULT_STATE, "State Or Province Name", defaults.DEFAULT_STATE),
    (ENV_KEY_LOCALITY, "locality", defaults.DEFAULT_LOCALITY, "Locality Name", defaults.DEFAULT_LOCALITY),
    (
        ENV_KEY_ORGANIZATION,
        "organization",
        defaults.DEFAULT_ORGANIZATION,
        "Organization Name",
        defaults.DEFAULT_ORGANIZATION,
    ),
    (
        ENV_KEY_ORGANIZATION_UNIT,
        "organizational_unit",
        defaults.DEFAULT_ORGANIZATIONAL_UNIT,
        "Organizational Unit Name",
        defaults.DEFAULT_ORGANIZATIONAL_UNIT,
    ),
    (ENV_KEY_COMMON_NAME, "common_name", defaults.DEFAULT_COMMON_NAME, "Common Name", defaults.DEFAULT_COMMON_NAME),
    (ENV_KEY_DOMAINS, "domains", defaults.DEFAULT_DOMAINS, "Domains", defaults.DEFAULT_DOMAINS),
    (ENV_KEY_FOR_K8S, "for_k8s", defaults.DEFAULT_FOR_K8S, "Issue for K8s", defaults.DEFAULT_FOR_K8S),
    (
        ENV_KEY_FOR_FIREFOX,
        "for_firefox",
        defaults.DEFAULT_FOR_FIREFOX,
        "Issue for Firefox",
        defaults.DEFAULT_FOR_FIREFOX,
    ),
    (ENV_KEY_USER, "user", defaults.DEFAULT_USER, "File Owner User", defaults.DEFAULT_USER),
    (ENV_KEY_UID, "uid", defaults.DEFAULT_UID, "File Owner UID", defaults.DEFAULT_UID),
    (ENV_KEY_GID, "gid", "", "File Owner GID", defaults.DEFAULT_GID),
    (ENV_KEY_OUTPUT_DIR, "output_dir", "", "Certs Dir", defaults.DEFAULT_DIR),
    (ENV_KEY_EXPIRE_DAYS, "expire_days", defaults.DEFAULT_EXPIRE_DAYS, "Expire Days", defaults.DEFAULT_EXPIRE_DAYS),
    (
        ENV_KEY_CUSTOM_FILE_NAME,
        "custom_file_name",
        defaults.DEFAULT_CUSTOM_FILE_NAME,
        "Custom File Name",
        defaults.DEFAULT_CUSTOM_FILE_NAME,
    ),
]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="certs-maker", allow_abbrev=False)
    for name, dest, flag_default, label, shown_default in _FLAGS:
        parser.add_argument(
            f"-{name}",
            f"--{name}",
            dest=dest,
            default=flag_default,
            metavar="value",
            help=f"{label}, env: `{name}`, default: `{shown_default}`",
        )
    return parser


def parse_flags(argv: Sequence[str] | None = None) -> AppFlags:
    """Parse command-line flags; unknown flags end the program with status 2."""
    namespace = _build_parser().parse_args(argv)
    return AppFlags(**vars(namespace))


def _format(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return "[" + " ".join(value) + "]"
    return str(value)


def _show(name: str, value: object) -> None:
    print(f"  - {name}=", _format(value))


def apply_flags(
    argv: Sequence[str] | None = None, environ: Mapping[str, str] | None = None
) -> Config:
    """Combine flags, environment and defaults into a Config and report it.

    The output directory is created if it does not exist.
    """
    env = os.environ if environ is None else environ
    args = parse_flags(argv)
    cfg = Config()
    print("Flags:")

    cfg.country = update_country_option(ENV_KEY_COUNTRY, args.country, defaults.DEFAULT_COUNTRY, env)
    _show("CERT_COUNTRY", cfg.country)

    cfg.state = update_string_option(ENV_KEY_STATE, args.state, defaults.DEFAULT_STATE, env)
    _show("CERT_STATE", cfg.state)

    cfg.locality = update_string_option(
        ENV_KEY_LOCALITY, args.locality, defaults.DEFAULT_LOCALITY, env
    ).upper()
    _show("CERT_LOCALITY", cfg.locality)

    cfg.organization = update_string_option(
        ENV_KEY_ORGANIZATION, args.organization, defaults.DEFAULT_ORGANIZATION, env
    )
    _show("CERT_ORGANIZATION", cfg.organization)

    cfg.organizational_unit = update_string_option(
        ENV_KEY_ORGANIZATION_UNIT, args.organizational_unit, defaults.DEFAULT_ORGANIZATIONAL_UNIT, env
    )
    _show("CERT_ORGANIZATIONAL_UNIT", cfg.organizational_unit)

    cfg.common_name = update_string_option(
        ENV_KEY_COMMON_NAME, args.common_name, defaults.DEFAULT_COMMON_NAME, env
    )
    _show("CERT_COMMON_NAME", cfg.common_name)

    cfg.domains = update_domain_option(ENV_KEY_DOMAINS, args.domains, defaults.DEFAULT_DOMAINS, env)
    _show("CERT_DOMAINS", cfg.domains)

    cfg.for_k8s = update_bool_option(ENV_KEY_FOR_K8S, args.for_k8s, defaults.DEFAULT_FOR_K8S, env)
    _show("APP_FOR_K8S", cfg.for_k8s)

    cfg.for_firefox = update_bool_option(
        ENV_KEY_FOR_FIREFOX, args.for_firefox, defaults.DEFAULT_FOR_FIREFOX, env
    )
    _show("APP_FOR_FIREFOX", cfg.for_firefox)

    cfg.output_dir = sanitize_dir_path(ENV_KEY_OUTPUT_DIR, args.output_dir, defaults.DEFAULT_DIR, env)
    os.makedirs(cfg.output_dir, exist_ok=True)
    _show("APP_OUTPUT_DIR", cfg.output_dir)

    cfg.custom_file_name = update_string_option(
        ENV_KEY_CUSTOM_FILE_NAME, args.custom_file_name, defaults.DEFAULT_CUSTOM_FILE_NAME, env
    )
    _show("CUSTOM_FILE_NAME", cfg.custom_file_name)

    user = update_string_option(ENV_KEY_USER, args.user, defaults.DEFAULT_USER, env)
    uid = update_string_option(ENV_KEY_UID, args.uid, defaults.DEFAULT_UID, env)
    gid = update_string_option(ENV_KEY_GID, args.gid, defaults.DEFAULT_GID, env)
    if user and uid and gid:
        cfg.user = user
        _show("APP_USER", cfg.user)
        cfg.uid = uid
        _show("APP_UID", cfg.uid)
        cfg.gid = gid
        _show("APP_GID", cfg.gid)

    cfg.expire_days = update_string_option(
        ENV_KEY_EXPIRE_DAYS, args.expire_days, defaults.DEFAULT_EXPIRE_DAYS, env
    )
    _show("CERT_EXPIRE_DAYS", cfg.expire_days)
    return cfg