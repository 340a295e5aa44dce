"""Pytest configuration and fixtures for polyspeak tests."""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

API_KEY_VARS = ("OPENAI_API_KEY", "ELEVENLABS_API_KEY", "DEEPGRAM_API_KEY")


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch, tmp_path) -> None:
    """Keep real API keys and the user's config file out of every test."""
    for var in API_KEY_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.delenv("POLYSPEAK_PROVIDER", raising=False)
    monkeypatch.delenv("POLYSPEAK_TIMEOUT", raising=False)
    monkeypatch.setenv("POLYSPEAK_CONFIG", str(tmp_path / "missing-config.toml"))


@pytest.fixture
def no_pauses(monkeypatch) -> None:
    """Remove the pauses between demo-all utterances."""
    monkeypatch.setattr("polyspeak.core.ANNOUNCE_PAUSE", 0)
    monkeypatch.setattr("polyspeak.core.VOICE_PAUSE", 0)


@pytest.fixture
def mock_executor() -> MagicMock:
    """Executor whose execute() returns fake MP3 bytes."""
    executor = MagicMock()
    executor.execute = AsyncMock(return_value=b"ID3fake-mp3")
    return executor


@pytest.fixture
def mock_player() -> MagicMock:
    """Audio player that records playback and file writes."""
    player = MagicMock()
    player.play_bytes_async = AsyncMock()
    return player
