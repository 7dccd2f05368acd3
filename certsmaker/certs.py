"""OpenSSL configuration files and the commands that issue certificates."""

from __future__ import annotations

import ipaddress
import os
from collections.abc import Iterable
from pathlib import Path

from certsmaker.config import DEFAULT_EXPIRE_DAYS, DEFAULT_MODE, Config
from certsmaker.domains import domain_name, unique
from certsmaker.shell import CommandError, execute

CERT_BASE_INFO = """
[req]
prompt                  = no
default_bits            = 4096
default_md              = sha256
encrypt_key             = no
string_mask             = utf8only

distinguished_name      = cert_distinguished_name
req_extensions          = req_x509v3_extensions
x509_extensions         = req_x509v3_extensions\t
"""

CERT_EXTENSIONS = """
[req_x509v3_extensions]
basicConstraints        = critical,CA:true
subjectKeyIdentifier    = hash
keyUsage                = critical,digitalSignature,keyCertSign,cRLSign
extendedKeyUsage        = critical,serverAuth
subjectAltName          = @alt_names
"""

CERT_EXTENSIONS_K8S = """
[req_x509v3_extensions]
basicConstraints = CA:FALSE
nsCertType = server
nsComment = "OpenSSL Generated Server Certificate"
subjectKeyIdentifier = hash
authorityKeyIdentifier = keyid,issuer:always
keyUsage = critical, digitalSignature, keyEncipherment
extendedKeyUsage = serverAuth
subjectAltName = @alt_names
"""

FILE_PLACEHOLDER = "${file}"
EXPIRE_DAYS_PLACEHOLDER = "${expire_days}"

GENERATE_CMD_TPL = (
    "openssl req -x509 -newkey rsa:2048 -keyout ${file}.pem.key -out ${file}.pem.crt "
    "-days ${expire_days} -nodes -config ${file}.conf"
)

FIREFOX_STEPS = (
    "openssl genrsa -out ${file}.rootCA.key 2048",
    "openssl req -utf8 -x509 -new -nodes -key ${file}.rootCA.key -sha256 "
    "-days ${expire_days} -out ${file}.rootCA.pem -config ${file}.conf",
    "openssl genrsa -out ${file}.pem.key 2048",
    "openssl req -utf8 -new -key ${file}.pem.key -out ${file}.pem.csr -config ${file}.conf",
    "openssl x509 -req -in ${file}.pem.csr -CA ${file}.rootCA.pem -CAkey ${file}.rootCA.key "
    "-CAcreateserial -out ${file}.pem.crt -days ${expire_days} -sha256",
)

CONVERT_CRT_TO_DER = "openssl x509 -in ${file}.pem.crt -outform DER -out ${file}.der.crt"
CONVERT_KEY_TO_DER = "openssl rsa -in ${file}.pem.key -outform DER -out ${file}.der.key"


def _is_ip(text: str) -> bool:
    try:
        ipaddress.ip_address(text)
    except ValueError:
        return False
    return True


def cert_base_info(config: Config) -> str:
    """Return the distinguished-name section for the configured subject."""
    return "\n".join(
        [
            "[cert_distinguished_name]",
            f"C  = {config.country}",
            f"ST = {config.state}",
            f"L  = {config.locality}",
            f"O  = {config.organization}",
            f"OU = {config.organizational_unit}",
            f"CN = {config.common_name}",
        ]
    )


def cert_domain_list(domains: Iterable[str], for_k8s: bool) -> str:
    """Return the alternative-names section; Kubernetes adds "*" and "localhost"."""
    names = list(domains)
    if for_k8s:
        names = unique([*names, "*", "localhost"])
    lines = ["[alt_names]"]
    for number, name in enumerate(names, start=1):
        kind = "IP" if _is_ip(name) else "DNS"
        lines.append(f"{kind}.{number} = {name}")
    return "\n".join(lines)


def cert_file_name(domain: str, for_k8s: bool) -> str:
    """Return the base file name for certificates issued for domain."""
    name = domain_name(domain)
    return f"{name}.k8s" if for_k8s else name


def cert_config(info: str, domains: str, for_k8s: bool) -> str:
    """Assemble a complete OpenSSL request configuration."""
    extensions = CERT_EXTENSIONS_K8S if for_k8s else CERT_EXTENSIONS
    return f"{CERT_BASE_INFO}\n{info}\n{extensions}\n{domains}\n"


def build_command(template: str, output_dir: str, name: str, expire_days: str) -> str:
    """Fill the file and expiry placeholders of a command template."""
    command = template.replace(FILE_PLACEHOLDER, f"{output_dir}/{name}")
    return command.replace(EXPIRE_DAYS_PLACEHOLDER, expire_days)


def _run(command: str) -> None:
    try:
        execute(command)
    except CommandError as exc:
        print(exc)


def _write(path: Path, content: str) -> None:
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, DEFAULT_MODE)
    with os.fdopen(fd, "w", encoding="utf-8") as handle:
        handle.write(content)


def make_certs(config: Config) -> Path:
    """Write the OpenSSL configuration and run the commands that issue certificates.

    Failing commands are reported and the remaining steps still run.
    Returns the path of the configuration file written.
    """
    if not config.domains:
        raise ValueError("no domains to issue a certificate for")

    info = cert_base_info(config)
    alt_names = cert_domain_list(config.domains, config.for_k8s)
    name = config.custom_file_name or cert_file_name(config.domains[0], config.for_k8s)

    conf_path = Path(config.output_dir) / f"{name}.conf"
    _write(conf_path, cert_config(info, alt_names, config.for_k8s))

    expire_days = DEFAULT_EXPIRE_DAYS
    if config.for_firefox and not config.for_k8s:
        templates: tuple[str, ...] = FIREFOX_STEPS
    else:
        templates = (GENERATE_CMD_TPL,)

    for template in (*templates, CONVERT_CRT_TO_DER, CONVERT_KEY_TO_DER):
        _run(build_command(template, config.output_dir, name, expire_days))
    return conf_path