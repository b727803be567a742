import pytest

from montonio_payments import (
    ConfigError,
    Environment,
    MontonioConfig,
    load_montonio_config,
)

BASE = {
    "MONTONIO_ACCESS_KEY": "base-access",
    "MONTONIO_SECRET_KEY": "base-secret",
}


def test_from_mapping_defaults_to_sandbox():
    config = MontonioConfig.from_mapping(BASE)

    assert config.access_key == "base-access"
    assert config.secret_key == "base-secret"
    assert config.environment is Environment.SANDBOX


def test_from_mapping_parses_environment_case_insensitively():
    config = MontonioConfig.from_mapping(dict(BASE, MONTONIO_ENVIRONMENT=" Production "))

    assert config.environment is Environment.PRODUCTION


def test_unknown_environment_is_a_config_error():
    with pytest.raises(ConfigError, match="MONTONIO_ENVIRONMENT"):
        MontonioConfig.from_mapping(dict(BASE, MONTONIO_ENVIRONMENT="staging"))


@pytest.mark.parametrize("key", ["MONTONIO_ACCESS_KEY", "MONTONIO_SECRET_KEY"])
def test_missing_credentials_are_rejected(key):
    values = dict(BASE)
    del values[key]

    with pytest.raises(ConfigError, match=key):
        MontonioConfig.from_mapping(values)


def test_blank_secret_is_rejected():
    with pytest.raises(ConfigError, match="must not be empty"):
        MontonioConfig.from_mapping(dict(BASE, MONTONIO_SECRET_KEY="   "))


def test_repr_hides_secret():
    assert "base-secret" not in repr(MontonioConfig.from_mapping(BASE))


def test_env_file_fills_gaps_without_overriding_existing_values(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "# credentials\n"
        "MONTONIO_ACCESS_KEY=file-access\n"
        "export MONTONIO_ENVIRONMENT=\"production\"\n"
        "not a pair\n",
        encoding="utf-8",
    )

    config = load_montonio_config(env_file=str(env_file), base=BASE)

    assert config.access_key == "base-access"
    assert config.environment is Environment.PRODUCTION


def test_env_file_supplies_missing_secret(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("MONTONIO_SECRET_KEY='file-secret'\n", encoding="utf-8")

    config = load_montonio_config(
        env_file=str(env_file),
        base={"MONTONIO_ACCESS_KEY": "base-access"},
    )

    assert config.secret_key == "file-secret"


def test_unrelated_variables_are_ignored():
    config = load_montonio_config(
        env_file=None,
        base=dict(BASE, MONTONIO_ENVIRONMENT="production", UNRELATED="x"),
    )

    assert config == MontonioConfig("base-access", "base-secret", Environment.PRODUCTION)


def test_keyword_arguments_win(tmp_path):
    config = load_montonio_config(
        env_file=str(tmp_path / "missing.env"),
        base=BASE,
        overrides={"MONTONIO_ACCESS_KEY": "override-access"},
        secret_key="kwarg-secret",
        environment=Environment.PRODUCTION,
    )

    assert config.access_key == "override-access"
    assert config.secret_key == "kwarg-secret"
    assert config.environment is Environment.PRODUCTION
