"""Tests for Settings validation and engine creation."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from signup_server.config import Settings, create_app_engine
from signup_server.constants import SignupSource


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "DATABASE_URL",
        "HOST",
        "PORT",
        "LOG_LEVEL",
        "DEBUG_MODE",
        "SIGNUP_SOURCE",
    ):
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    def test_defaults(self, clean_env: None) -> None:
        s = Settings(_env_file=None)  # type: ignore[call-arg]
        assert s.port == 7777
        assert s.host == "0.0.0.0"
        assert s.database_url == "sqlite:///signup_server.db"
        assert s.log_level == "INFO"
        assert s.signup_source == SignupSource.FIXED

    def test_environment_overrides(
        self, clean_env: None, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PORT", "9000")
        monkeypatch.setenv("SIGNUP_SOURCE", "body")
        s = Settings(_env_file=None)  # type: ignore[call-arg]
        assert s.port == 9000
        assert s.signup_source == SignupSource.BODY


class TestValidation:
    @pytest.mark.parametrize("port", [0, -1, 65536])
    def test_port_out_of_range(self, port: int) -> None:
        with pytest.raises(ValidationError, match="port must be"):
            Settings(port=port)

    def test_log_level_normalized(self) -> None:
        assert Settings(log_level=" debug ").log_level == "DEBUG"

    def test_unknown_log_level(self) -> None:
        with pytest.raises(ValidationError, match="log_level must be"):
            Settings(log_level="chatty")

    def test_unknown_signup_source(self) -> None:
        with pytest.raises(ValidationError):
            Settings(signup_source="form")  # type: ignore[arg-type]


class TestCreateAppEngine:
    async def test_wal_mode_set_on_connect(self, tmp_path: Path) -> None:
        """WAL journal mode is set automatically on connection."""
        from sqlalchemy import text

        engine = create_app_engine(f"sqlite:///{tmp_path / 'test.db'}")
        async with engine.connect() as conn:
            row = await conn.execute(text("PRAGMA journal_mode"))
            mode = row.scalar()

        await engine.dispose()
        assert mode == "wal"

    async def test_url_conversion(self) -> None:
        """sqlite:/// is converted to sqlite+aiosqlite:///."""
        engine = create_app_engine("sqlite:///data/test.db")
        assert "aiosqlite" in str(engine.url)
        await engine.dispose()

    async def test_already_converted_url_passthrough(self) -> None:
        engine = create_app_engine("sqlite+aiosqlite:///:memory:")
        assert engine.url.drivername == "sqlite+aiosqlite"
        assert engine.url.database == ":memory:"
        await engine.dispose()
