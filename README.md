# certsmaker

A small command-line tool that writes an OpenSSL request configuration for a
list of domains and IP addresses and then runs `openssl` through `sh` to
produce a self-signed certificate and key. It can also produce certificates
shaped for Kubernetes, or for Firefox, which wants a separate root CA.

## Requirements

- Python 3.10 or later
- `openssl` on `PATH`
- a POSIX shell (`sh`)

## Installation

```
pip install .
```

## Usage

```
certs-maker --CERT_DNS=lab.com,*.lab.com,127.0.0.1
```

The tool prints its version and every resolved option, creates the output
directory if needed, and writes into it (default `./ssl`):

- `lab.com.conf` – the OpenSSL configuration
- `lab.com.pem.crt`, `lab.com.pem.key` – certificate and key in PEM
- `lab.com.der.crt`, `lab.com.der.key` – the same in DER

The base file name is taken from the first domain in the list, unless
`CUSTOM_FILE_NAME` is set. A failing `openssl` step is printed and the
remaining steps still run.

### Options

Every option can be given as a flag (`-NAME value`, `--NAME value` or
`--NAME=value`) or as an environment variable of the same name. Empty values
and values equal to the default are ignored; a flag wins over the environment.
Unknown flags end the program with status 2.

| Option               | Meaning                                  | Default                            |
|----------------------|------------------------------------------|------------------------------------|
| `CERT_C`             | Country code; any two word characters, upper-cased, otherwise the default | `CN` |
| `CERT_ST`            | State or province                        | `BJ`                               |
| `CERT_L`             | Locality (upper-cased)                   | `HD`                               |
| `CERT_O`             | Organization                             | `Lab`                              |
| `CERT_OU`            | Organizational unit                      | `Dev`                              |
| `CERT_CN`            | Common name                              | `Hello World`                      |
| `CERT_DNS`           | Comma-separated domains and IP addresses | `lab.com,*.lab.com,*.data.lab.com` |
| `FOR_K8S`            | Issue for Kubernetes (`on`, `true`, `1`) | `off`                              |
| `FOR_FIREFOX`        | Issue for Firefox (`on`, `true`, `1`)    | `off`                              |
| `DIR`                | Output directory                         | `./ssl`                            |
| `CUSTOM_FILE_NAME`   | Base name of the generated files         | derived from the first domain      |
| `USER`, `UID`, `GID` | Owner of the generated files             | unset                              |
| `EXPIRE_DAYS`        | Resolved and reported (see below)        | `3650`                             |

Notes on some options:

- `CERT_DNS`: entries that are neither a domain name (optionally with a
  leading `*.`), an IPv4 nor an IPv6 address are dropped; domain names are
  lower-cased and repeated entries removed. IP addresses become `IP.n`
  alternative names, everything else `DNS.n`.
- `DIR`: a value other than the default is lower-cased, stripped of `..`,
  `./` and any character outside letters, digits, `~`, `-`, `.` and `/`, and
  reduced to a relative path.
- `FOR_K8S`: uses server-certificate extensions instead of a CA, adds `*` and
  `localhost` to the alternative names and appends `.k8s` to the base file
  name.
- `FOR_FIREFOX`: ignored when `FOR_K8S` is on. Otherwise a root CA
  (`NAME.rootCA.key`, `NAME.rootCA.pem`) is created first and the server
  certificate is signed by it through a CSR (`NAME.pem.csr`).
- `EXPIRE_DAYS`: the value is read and printed, but certificates are always
  issued for 3650 days.
- `USER`, `UID`, `GID`: only when all three are set, the tool runs
  `addgroup`, `adduser` (as found in Alpine-based containers), then
  `chown -R` and `chmod -R a+r` on the output directory. A failure there is
  printed, not raised.

Examples:

```
CERT_DNS=example.com FOR_K8S=on certs-maker
certs-maker --CERT_DNS=example.com --FOR_FIREFOX=on --DIR=certs
```

## Library use

```python
import os

from certsmaker.config import Config
from certsmaker.generator import generate

os.makedirs("out", exist_ok=True)
conf_path = generate(Config(domains=["example.com", "127.0.0.1"], output_dir="out"))
```

The pieces are available separately:

- `certsmaker.flags.apply_flags(argv, environ)` resolves flags and
  environment into a `Config`, printing each value and creating the output
  directory; `parse_flags(argv)` returns the raw `AppFlags`.
- `certsmaker.options` holds the resolution rules
  (`update_string_option`, `update_bool_option`, `update_country_option`,
  `update_domain_option`, `sanitize_dir_path`).
- `certsmaker.domains.parse_domains(text)` filters a comma-separated list;
  `domain_name(text)` and `unique(items)` help with names.
- `certsmaker.certs` builds the configuration text (`cert_base_info`,
  `cert_domain_list`, `cert_config`), file names (`cert_file_name`) and
  commands (`build_command`); `make_certs(config)` writes the configuration,
  runs `openssl` and returns the configuration path. It raises `ValueError`
  when `config.domains` is empty; the output directory must already exist.
- `certsmaker.permissions.permission_fix_commands(config)` returns the
  ownership script; `fix_permissions(config)` runs it and returns `False`
  when no owner is set.
- `certsmaker.shell.execute(command)` runs a command with `sh -c` and returns
  its standard output, raising `CommandError` on failure.

## What it does not do

certsmaker creates no keys or certificates itself: all cryptographic work is
done by the `openssl` command, and without it only the `.conf` file is
written. It does not inspect, renew or install certificates into any trust
store.