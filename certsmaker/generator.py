"""Issuing certificates and handing them over to their owner."""

from __future__ import annotations

from pathlib import Path

from certsmaker.certs import make_certs
from certsmaker.config import Config
from certsmaker.permissions import fix_permissions
from certsmaker.shell import CommandError


def generate(config: Config) -> Path:
    """Issue the certificates, then fix their ownership if an owner is set.

    A failing ownership change is reported, not raised.
    Returns the path of the configuration file written.
    """
    conf_path = make_certs(config)
    try:
        fix_permissions(config)
    except CommandError as exc:
        print(exc)
    return conf_path