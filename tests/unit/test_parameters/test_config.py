"""Tests for dialect parameter configuration."""

import pytest

from ngqlspec.exceptions import ImproperConfigurationError
from ngqlspec.parameters import DEFAULT_DIALECT, ParameterStyleConfig


def test_default_config_is_ngql() -> None:
    config = ParameterStyleConfig()
    assert config.dialect == DEFAULT_DIALECT
    assert config.marker == "?"
    assert config.quote_char == '"'
    assert config.escape_char == "\\"
    assert config.is_native


def test_for_dialect_ngql_is_case_insensitive() -> None:
    assert ParameterStyleConfig.for_dialect("nGQL") == ParameterStyleConfig()


def test_for_sqlglot_dialect() -> None:
    config = ParameterStyleConfig.for_dialect("postgres")
    assert config.dialect == "postgres"
    assert config.quote_char == "'"
    assert not config.is_native


def test_mysql_accepts_backslash_escapes() -> None:
    assert ParameterStyleConfig.for_dialect("mysql").escape_char == "\\"


def test_unknown_dialect() -> None:
    with pytest.raises(ImproperConfigurationError, match="Unknown query dialect"):
        ParameterStyleConfig.for_dialect("not-a-dialect")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"marker": "??"},
        {"marker": ""},
        {"quote_char": "''"},
        {"marker": '"'},
        {"escape_char": '"'},
    ],
)
def test_invalid_characters(kwargs: dict) -> None:
    with pytest.raises(ImproperConfigurationError):
        ParameterStyleConfig(**kwargs)


def test_replace_and_hash() -> None:
    config = ParameterStyleConfig()
    replaced = config.replace(marker="$")
    assert replaced.marker == "$"
    assert config.marker == "?"
    assert replaced != config
    assert hash(config.replace()) == hash(config)


def test_constructor_rejects_unknown_dialect() -> None:
    with pytest.raises(ImproperConfigurationError, match="Unknown query dialect 'nosuch'"):
        ParameterStyleConfig(dialect="nosuch")


def test_constructor_derives_sql_literal_grammar() -> None:
    config = ParameterStyleConfig(dialect="Postgres")
    assert config == ParameterStyleConfig.for_dialect("postgres")
    assert config.dialect == "postgres"
    assert config.quote_char == "'"


def test_constructor_keeps_explicit_characters() -> None:
    config = ParameterStyleConfig(dialect="mysql", quote_char="`", escape_char=None)
    assert config.quote_char == "`"
    assert config.escape_char is None


def test_replace_dialect_resets_literal_grammar() -> None:
    replaced = ParameterStyleConfig(marker="$").replace(dialect="postgres")
    assert replaced.marker == "$"
    assert replaced.quote_char == "'"
    assert replaced == ParameterStyleConfig.for_dialect("postgres", marker="$")

    with pytest.raises(ImproperConfigurationError):
        ParameterStyleConfig().replace(dialect="nosuch")
