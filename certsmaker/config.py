"""Runtime configuration for certificate generation and its defaults."""

from __future__ import annotations

from dataclasses import dataclass, field

from certsmaker.domains import parse_domains

VERSION = "dev"

DEFAULT_COUNTRY = "CN"
DEFAULT_STATE = "BJ"
DEFAULT_LOCALITY = "HD"
DEFAULT_ORGANIZATION = "Lab"
DEFAULT_ORGANIZATIONAL_UNIT = "Dev"
DEFAULT_COMMON_NAME = "Hello World"
DEFAULT_DOMAINS = "lab.com,*.lab.com,*.data.lab.com"

DEFAULT_FOR_K8S = "off"
DEFAULT_FOR_FIREFOX = "off"

DEFAULT_USER = ""
DEFAULT_UID = ""
DEFAULT_GID = ""
DEFAULT_DIR = "./ssl"
DEFAULT_CUSTOM_FILE_NAME = ""

DEFAULT_EXPIRE_DAYS = "3650"

DEFAULT_MODE = 0o644


def _default_domains() -> list[str]:
    return parse_domains(DEFAULT_DOMAINS)


@dataclass
class Config:
    """Subject fields, alternative names and output settings for one run."""

    country: str = DEFAULT_COUNTRY
    state: str = DEFAULT_STATE
    locality: str = DEFAULT_LOCALITY
    organization: str = DEFAULT_ORGANIZATION
    organizational_unit: str = DEFAULT_ORGANIZATIONAL_UNIT
    common_name: str = DEFAULT_COMMON_NAME
    domains: list[str] = field(default_factory=_default_domains)

    for_k8s: bool = False
    for_firefox: bool = False

    user: str = DEFAULT_USER
    uid: str = DEFAULT_UID
    gid: str = DEFAULT_GID
    output_dir: str = DEFAULT_DIR
    custom_file_name: str = DEFAULT_CUSTOM_FILE_NAME

    expire_days: str = DEFAULT_EXPIRE_DAYS

    def has_owner(self) -> bool:
        """True when user, uid and gid are all set."""
        return bool(self.user and self.uid and self.gid)