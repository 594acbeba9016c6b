"""Tests for configuration loading and client construction."""

from __future__ import annotations

from pathlib import Path

import pytest

from stripe_payments import (
    ClientConfig,
    ClientParameters,
    ConfigError,
    StripeClient,
    build_environment,
    create_client,
    load_client_config,
    load_env_file,
)
from stripe_payments.core.config import DEFAULT_API_BASE, DEFAULT_TIMEOUT

from .conftest import TEST_KEY, FakeSession


def _write_env(tmp_path: Path, text: str) -> str:
    path = tmp_path / ".env"
    path.write_text(text, encoding="utf-8")
    return str(path)


# ---------------------------------------------------------------------------
# Environment layering
# ---------------------------------------------------------------------------


class TestEnvironment:
    def test_env_file_is_parsed(self, tmp_path: Path) -> None:
        env_file = _write_env(
            tmp_path,
            "# comment\n"
            "STRIPE_SECRET_KEY=sk_test_file\n"
            "export STRIPE_API_VERSION='2015-10-16'\n"
            'STRIPE_TIMEOUT="30"\n'
            "not a setting\n",
        )
        environment = build_environment(env_file=env_file, base={})

        assert environment.get("STRIPE_SECRET_KEY") == "sk_test_file"
        assert environment.get("STRIPE_API_VERSION") == "2015-10-16"
        assert environment.get("STRIPE_TIMEOUT") == "30"
        assert environment.get("MISSING", "fallback") == "fallback"

    def test_base_wins_over_file_and_overrides_win_over_both(self, tmp_path: Path) -> None:
        env_file = _write_env(tmp_path, "STRIPE_SECRET_KEY=sk_file\nSTRIPE_TIMEOUT=10\n")
        environment = build_environment(
            env_file=env_file,
            base={"STRIPE_SECRET_KEY": "sk_base", "STRIPE_TIMEOUT": "20"},
            overrides={"STRIPE_TIMEOUT": "40"},
        )
        assert environment.get("STRIPE_SECRET_KEY") == "sk_base"
        assert environment.get("STRIPE_TIMEOUT") == "40"

    def test_missing_file_is_ignored(self, tmp_path: Path) -> None:
        environment = build_environment(env_file=str(tmp_path / "absent.env"), base={"A": "1"})
        assert dict(environment.variables) == {"A": "1"}

    def test_load_env_file_keeps_existing_keys(self, tmp_path: Path) -> None:
        env_file = _write_env(tmp_path, "STRIPE_SECRET_KEY=sk_file\nSTRIPE_API_BASE=http://localhost:12111\n")
        environ = {"STRIPE_SECRET_KEY": "sk_existing"}

        merged = load_env_file(env_file, environ=environ)

        assert environ["STRIPE_SECRET_KEY"] == "sk_existing"
        assert merged["STRIPE_API_BASE"] == "http://localhost:12111"


# ---------------------------------------------------------------------------
# ClientConfig
# ---------------------------------------------------------------------------


class TestClientConfig:
    def test_defaults(self) -> None:
        config = ClientConfig.from_mapping({"STRIPE_SECRET_KEY": TEST_KEY})
        assert config.api_key == TEST_KEY
        assert config.api_base == DEFAULT_API_BASE
        assert config.api_version is None
        assert config.timeout == DEFAULT_TIMEOUT

    def test_values_are_normalized(self) -> None:
        config = ClientConfig.from_mapping(
            {
                "STRIPE_SECRET_KEY": f"  {TEST_KEY}\n",
                "STRIPE_API_BASE": "http://localhost:12111/",
                "STRIPE_API_VERSION": "  ",
                "STRIPE_TIMEOUT": "2.5",
            }
        )
        assert config.api_key == TEST_KEY
        assert config.api_base == "http://localhost:12111"
        assert config.api_version is None
        assert config.timeout == 2.5
        assert config.url_for("/v1/account") == "http://localhost:12111/v1/account"

    @pytest.mark.parametrize(
        "values",
        [
            {},
            {"STRIPE_SECRET_KEY": "   "},
            {"STRIPE_SECRET_KEY": "sk test"},
            {"STRIPE_SECRET_KEY": TEST_KEY, "STRIPE_API_BASE": "api.stripe.com"},
            {"STRIPE_SECRET_KEY": TEST_KEY, "STRIPE_TIMEOUT": "soon"},
            {"STRIPE_SECRET_KEY": TEST_KEY, "STRIPE_TIMEOUT": "0"},
        ],
    )
    def test_invalid_values(self, values: dict) -> None:
        with pytest.raises(ConfigError):
            ClientConfig.from_mapping(values)

    def test_repr_masks_key(self) -> None:
        config = ClientConfig(api_key="sk_test_supersecret")
        assert "supersecret" not in repr(config)
        assert "sk_test_..." in repr(config)
        assert ClientConfig(api_key="short").masked_key == "***"

    def test_keyword_arguments_override_environment(self, tmp_path: Path) -> None:
        env_file = _write_env(tmp_path, "STRIPE_SECRET_KEY=sk_file\nSTRIPE_TIMEOUT=10\n")
        config = load_client_config(env_file=env_file, base={}, timeout=15, api_version="2015-10-16")
        assert config.api_key == "sk_file"
        assert config.timeout == 15.0
        assert config.api_version == "2015-10-16"

    def test_parameter_bundle(self) -> None:
        parameters = ClientParameters(api_key=TEST_KEY, api_base="https://proxy.example.test")
        assert parameters.as_overrides() == {
            "STRIPE_SECRET_KEY": TEST_KEY,
            "STRIPE_API_BASE": "https://proxy.example.test",
        }
        config = load_client_config(env_file=None, base={}, parameters=parameters)
        assert config.api_base == "https://proxy.example.test"


# ---------------------------------------------------------------------------
# create_client
# ---------------------------------------------------------------------------


class TestCreateClient:
    def test_with_config(self, config: ClientConfig, session: FakeSession) -> None:
        client = create_client(config=config, session=session)
        assert isinstance(client, StripeClient)
        assert client.config is config
        assert client.session is session

    def test_from_environment(self, session: FakeSession) -> None:
        client = create_client(env_file=None, base={"STRIPE_SECRET_KEY": TEST_KEY}, session=session)
        assert client.config.api_key == TEST_KEY

    def test_config_and_parameters_are_exclusive(self, config: ClientConfig) -> None:
        with pytest.raises(ValueError):
            create_client(config=config, api_key="sk_other")

    def test_missing_key(self) -> None:
        with pytest.raises(ConfigError):
            create_client(env_file=None, base={})

    def test_context_manager_closes_session(self, config: ClientConfig, session: FakeSession) -> None:
        with StripeClient(config, session=session) as client:
            assert "sk_test_..." in repr(client)
        assert session.closed
