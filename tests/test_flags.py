import os

import pytest

from certsmaker import config as defaults
from certsmaker.checks import is_bool_string
from certsmaker.domains import parse_domains
from certsmaker.flags import AppFlags, apply_flags, parse_flags

OWNER_ENV = {"USER": "soulteary", "UID": "1234", "GID": "4321"}


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_apply_flags_defaults_with_owner(workdir):
    cfg = apply_flags([], dict(OWNER_ENV))
    assert cfg.country == defaults.DEFAULT_COUNTRY
    assert cfg.state == defaults.DEFAULT_STATE
    assert cfg.locality == defaults.DEFAULT_LOCALITY
    assert cfg.organization == defaults.DEFAULT_ORGANIZATION
    assert cfg.organizational_unit == defaults.DEFAULT_ORGANIZATIONAL_UNIT
    assert cfg.common_name == defaults.DEFAULT_COMMON_NAME
    assert cfg.domains == parse_domains(defaults.DEFAULT_DOMAINS)
    assert cfg.for_k8s is is_bool_string(defaults.DEFAULT_FOR_K8S)
    assert cfg.user == "soulteary"
    assert cfg.uid == "1234"
    assert cfg.gid == "4321"
    assert cfg.output_dir == defaults.DEFAULT_DIR
    assert cfg.expire_days == defaults.DEFAULT_EXPIRE_DAYS
    assert cfg.custom_file_name == defaults.DEFAULT_CUSTOM_FILE_NAME


def test_apply_flags_creates_output_dir(workdir):
    cfg = apply_flags([], {})
    assert cfg.output_dir == defaults.DEFAULT_DIR
    assert (workdir / cfg.output_dir).is_dir()
    assert (workdir / "ssl").is_dir()


def test_apply_flags_without_full_owner_leaves_owner_unset(workdir):
    cfg = apply_flags([], {"USER": "soulteary", "UID": "1234"})
    assert (cfg.user, cfg.uid, cfg.gid) == ("", "", "")
    assert cfg.has_owner() is False


def test_apply_flags_arguments(workdir):
    cfg = apply_flags(
        [
            "-CERT_C", "us",
            "-CERT_L", "sf",
            "-CERT_DNS=A.com,b.com",
            "--FOR_K8S", "on",
            "-DIR", "/Out/Certs/",
            "-EXPIRE_DAYS", "30",
        ],
        {},
    )
    assert cfg.country == "US"
    assert cfg.locality == "SF"
    assert cfg.domains == ["a.com", "b.com"]
    assert cfg.for_k8s is True
    assert cfg.for_firefox is False
    assert cfg.output_dir == "out/certs"
    assert (workdir / "out" / "certs").is_dir()
    assert cfg.expire_days == "30"


def test_apply_flags_environment(workdir):
    cfg = apply_flags([], {"CERT_ST": "ZJ", "FOR_FIREFOX": "true", "CUSTOM_FILE_NAME": "custom"})
    assert cfg.state == "ZJ"
    assert cfg.for_firefox is True
    assert cfg.custom_file_name == "custom"


def test_apply_flags_report(workdir, capsys):
    apply_flags([], dict(OWNER_ENV))
    out = capsys.readouterr().out
    assert out.startswith("Flags:\n")
    assert "  - CERT_COUNTRY= CN\n" in out
    assert "  - CERT_DOMAINS= [lab.com *.lab.com *.data.lab.com]\n" in out
    assert "  - APP_FOR_K8S= false\n" in out
    assert "  - APP_USER= soulteary\n" in out


def test_parse_flags_defaults():
    flags = parse_flags([])
    assert flags == AppFlags()
    assert flags.output_dir == ""
    assert flags.domains == defaults.DEFAULT_DOMAINS


def test_parse_flags_values():
    flags = parse_flags(["-CERT_CN", "My Name", "--CERT_O=Org", "-UID", "7"])
    assert flags.common_name == "My Name"
    assert flags.organization == "Org"
    assert flags.uid == "7"


def test_parse_flags_unknown_flag():
    with pytest.raises(SystemExit) as info:
        parse_flags(["-NOPE", "x"])
    assert info.value.code == 2


def test_apply_flags_existing_dir_is_kept(workdir):
    os.makedirs("ssl")
    (workdir / "ssl" / "keep.txt").write_text("x")
    cfg = apply_flags([], {})
    assert (workdir / cfg.output_dir / "keep.txt").read_text() == "x"