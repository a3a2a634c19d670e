"""Testes das settings do gateway e do legado."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from config.settings import (
    DEFAULT_API_KEY,
    DEFAULT_ENCRYPTION_KEY,
    BaseSettings,
    GatewaySettings,
    LegacySettings,
    get_base_settings,
    get_gateway_settings,
    get_legacy_settings,
)


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Iterator[None]:
    get_base_settings.cache_clear()
    get_gateway_settings.cache_clear()
    get_legacy_settings.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_gateway_settings.cache_clear()
    get_legacy_settings.cache_clear()


class TestGatewaySettings:
    """Testes de GatewaySettings."""

    def test_defaults_are_valid_outside_strict_mode(self) -> None:
        settings = GatewaySettings()
        assert settings.validate() == []
        assert settings.port == 3000
        assert settings.legacy_system_url == "http://localhost:3001"

    def test_strict_mode_rejects_default_secrets(self) -> None:
        errors = GatewaySettings().validate(strict=True)
        assert any("API_KEY" in error for error in errors)
        assert any("ENCRYPTION_KEY" in error for error in errors)

    def test_non_ascii_encryption_key_rejected(self) -> None:
        errors = GatewaySettings(encryption_key="chave-ção").validate()
        assert errors == ["ENCRYPTION_KEY deve conter apenas caracteres ASCII"]

    def test_invalid_url_and_timeout(self) -> None:
        errors = GatewaySettings(
            legacy_system_url="localhost:3001",
            request_timeout_seconds=0,
        ).validate()
        assert len(errors) == 2

    def test_loads_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("API_KEY", "k-1")
        monkeypatch.setenv("ENCRYPTION_KEY", "segredo")
        monkeypatch.setenv("LEGACY_SYSTEM_URL", "http://legacy:9000")
        monkeypatch.setenv("LEGACY_REQUEST_TIMEOUT_SECONDS", "2.5")
        monkeypatch.setenv("PORT", "8081")

        settings = get_gateway_settings()

        assert settings.api_key == "k-1"
        assert settings.encryption_key == "segredo"
        assert settings.legacy_system_url == "http://legacy:9000"
        assert settings.request_timeout_seconds == 2.5
        assert settings.port == 8081

    def test_env_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("API_KEY", "ENCRYPTION_KEY", "LEGACY_SYSTEM_URL", "PORT"):
            monkeypatch.delenv(name, raising=False)

        settings = get_gateway_settings()

        assert settings.api_key == DEFAULT_API_KEY
        assert settings.encryption_key == DEFAULT_ENCRYPTION_KEY


class TestBaseSettings:
    """Testes de BaseSettings."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("prod", "production"), ("STAGING", "staging"), ("qualquer", "development")],
    )
    def test_environment_parsing(
        self,
        monkeypatch: pytest.MonkeyPatch,
        raw: str,
        expected: str,
    ) -> None:
        monkeypatch.setenv("ENVIRONMENT", raw)
        assert get_base_settings().environment == expected

    def test_is_strict(self) -> None:
        assert BaseSettings(environment="production").is_strict is True
        assert BaseSettings(environment="staging").is_strict is True
        assert BaseSettings().is_strict is False


class TestLegacySettings:
    """Testes de LegacySettings."""

    def test_port_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LEGACY_PORT", "4001")
        assert get_legacy_settings().port == 4001

    def test_port_out_of_range(self) -> None:
        assert LegacySettings(port=70000).validate() != []


class TestRuntimeValidation:
    """Testes de validate_runtime_settings no bootstrap."""

    def test_strict_environment_blocks_default_secrets(
        self,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        from app.bootstrap import validate_runtime_settings

        monkeypatch.setenv("ENVIRONMENT", "production")
        with pytest.raises(RuntimeError, match="Configuração inválida"):
            validate_runtime_settings(GatewaySettings())

    def test_development_only_warns(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from app.bootstrap import validate_runtime_settings

        monkeypatch.setenv("ENVIRONMENT", "development")
        validate_runtime_settings(GatewaySettings(legacy_system_url="sem-esquema"))

    def test_strict_environment_accepts_custom_secrets(
        self,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        from app.bootstrap import validate_runtime_settings

        monkeypatch.setenv("ENVIRONMENT", "staging")
        validate_runtime_settings(
            GatewaySettings(api_key="chave-forte", encryption_key="outro-segredo")
        )
