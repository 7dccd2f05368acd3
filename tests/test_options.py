import pytest

from certsmaker.config import DEFAULT_COUNTRY, DEFAULT_DIR, DEFAULT_DOMAINS
from certsmaker.checks import domain_list_matches
from certsmaker.options import (
    ENV_KEY_COUNTRY,
    ENV_KEY_DOMAINS,
    ENV_KEY_OUTPUT_DIR,
    sanitize_dir_path,
    update_bool_option,
    update_country_option,
    update_domain_option,
    update_string_option,
)


@pytest.mark.parametrize(
    "env, value, default, expected",
    [
        ({}, "a", "d", "a"),
        ({}, "", "d", "d"),
        ({}, "a", "", "a"),
        ({}, "", "", ""),
        ({"TEST_KEY": "e"}, "a", "d", "a"),
        ({"TEST_KEY": "e"}, "", "d", "e"),
        ({"TEST_KEY": "e"}, "a", "", "a"),
        ({"TEST_KEY": "e"}, "", "", "e"),
    ],
)
def test_update_string_option(env, value, default, expected):
    assert update_string_option("TEST_KEY", value, default, env) == expected


def test_update_string_option_strips():
    assert update_string_option("TEST_KEY", "  a  ", "d", {}) == "a"


def test_update_string_option_reads_process_environment(monkeypatch):
    monkeypatch.setenv("TEST_KEY", "from-env")
    assert update_string_option("TEST_KEY", "", "d") == "from-env"


def test_update_country_option_default():
    assert update_country_option(ENV_KEY_COUNTRY, "", DEFAULT_COUNTRY, {}) == DEFAULT_COUNTRY


def test_update_country_option_upper_cases():
    assert update_country_option(ENV_KEY_COUNTRY, "xx", DEFAULT_COUNTRY, {}) == "XX"


@pytest.mark.parametrize("value", ["!x!x!", "x"])
def test_update_country_option_invalid(value):
    assert update_country_option(ENV_KEY_COUNTRY, value, DEFAULT_COUNTRY, {}) == DEFAULT_COUNTRY


def test_update_country_option_from_env():
    env = {ENV_KEY_COUNTRY: "xx"}
    assert update_country_option(ENV_KEY_COUNTRY, "", DEFAULT_COUNTRY, env) == "XX"


def test_update_domain_option_default():
    ret = update_domain_option(ENV_KEY_DOMAINS, "", DEFAULT_DOMAINS, {})
    assert domain_list_matches(ret, DEFAULT_DOMAINS)


def test_update_domain_option_args():
    ret = update_domain_option(ENV_KEY_DOMAINS, "a.com,b.com", DEFAULT_DOMAINS, {})
    assert not domain_list_matches(ret, DEFAULT_DOMAINS)
    assert "a.com" in ret
    assert "b.com" in ret


def test_update_domain_option_env():
    env = {ENV_KEY_DOMAINS: "c.com"}
    ret = update_domain_option(ENV_KEY_DOMAINS, "", DEFAULT_DOMAINS, env)
    assert not domain_list_matches(ret, DEFAULT_DOMAINS)
    assert "c.com" in ret


def test_update_domain_option_args_over_env():
    env = {ENV_KEY_DOMAINS: "c.com"}
    ret = update_domain_option(ENV_KEY_DOMAINS, "a.com", DEFAULT_DOMAINS, env)
    assert not domain_list_matches(ret, DEFAULT_DOMAINS)
    assert ret == ["a.com"]


@pytest.mark.parametrize(
    "value, expected",
    [
        ("", DEFAULT_DIR),
        ("/aa", "aa"),
        ("./aaa", "aaa"),
        ("../aaa", "aaa"),
        ("....//abc", "abc"),
        ("abcd/abc", "abcd/abc"),
        ("././././abcd", "abcd"),
        ("...../aaa/a././aa", "aaa/aaa"),
    ],
)
def test_sanitize_dir_path(value, expected):
    assert sanitize_dir_path(ENV_KEY_OUTPUT_DIR, value, DEFAULT_DIR, {}) == expected


def test_sanitize_dir_path_lower_cases_and_drops_unsafe_chars():
    assert sanitize_dir_path(ENV_KEY_OUTPUT_DIR, "Certs/Out$put!", DEFAULT_DIR, {}) == "certs/output"


def test_sanitize_dir_path_from_env():
    env = {ENV_KEY_OUTPUT_DIR: "/var/certs/"}
    assert sanitize_dir_path(ENV_KEY_OUTPUT_DIR, "", DEFAULT_DIR, env) == "var/certs"


@pytest.mark.parametrize(
    "env, value, default, expected",
    [
        ({}, "false", "false", False),
        ({}, "false", "true", False),
        ({}, "true", "true", True),
        ({"TEST_KEY": "on"}, "false", "false", True),
        ({"TEST_KEY": "on"}, "true", "false", True),
        ({"TEST_KEY": "on"}, "true", "true", True),
        ({"TEST_KEY": "off"}, "false", "false", False),
    ],
)
def test_update_bool_option(env, value, default, expected):
    assert update_bool_option("TEST_KEY", value, default, env) is expected


def test_update_bool_option_argument_beats_env():
    assert update_bool_option("TEST_KEY", "on", "off", {"TEST_KEY": "off"}) is True