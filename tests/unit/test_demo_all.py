"""Unit tests for demo-all mode."""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from polyspeak.config import SpeakConfig
from polyspeak.core import speak_all_voices
from polyspeak.providers.openai import OPENAI_VOICES
from polyspeak.tts.errors import TTSAPIError, TTSConfigError, TTSPlaybackError
from polyspeak.tts.pipeline import SpeechPipeline

DEMO_CONFIG = SpeakConfig(text="Hello there", token="sk-test", all_voices=True)


@pytest.fixture
def pipeline(mock_executor: MagicMock, mock_player: MagicMock) -> SpeechPipeline:
    return SpeechPipeline(executor=mock_executor, audio_player=mock_player)


def _spoken(mock_executor: MagicMock) -> list[tuple[str, str]]:
    """Return (voice, input) for every request sent."""
    return [
        (call.args[0].body["voice"], call.args[0].body["input"])
        for call in mock_executor.execute.call_args_list
    ]


@pytest.mark.usefixtures("no_pauses")
class TestSpeakAllVoices:
    """Test the sequential voice demo."""

    @pytest.mark.asyncio
    async def test_announces_then_speaks_each_voice_in_order(
        self, pipeline: SpeechPipeline, mock_executor: MagicMock
    ) -> None:
        """Test two requests per voice, announcement first."""
        results = await speak_all_voices(DEMO_CONFIG, pipeline)

        expected = []
        for voice in OPENAI_VOICES:
            expected += [(voice, voice), (voice, "Hello there")]
        assert _spoken(mock_executor) == expected
        assert mock_executor.execute.await_count == 12
        assert [r.voice for r in results] == list(OPENAI_VOICES)
        assert all(r.ok for r in results)

    @pytest.mark.asyncio
    async def test_plays_every_utterance(
        self, pipeline: SpeechPipeline, mock_player: MagicMock
    ) -> None:
        await speak_all_voices(DEMO_CONFIG, pipeline)

        assert mock_player.play_bytes_async.await_count == 12

    @pytest.mark.asyncio
    async def test_prints_voice_banner_to_stderr(
        self, pipeline: SpeechPipeline, capsys: pytest.CaptureFixture
    ) -> None:
        await speak_all_voices(DEMO_CONFIG, pipeline)

        captured = capsys.readouterr()
        for voice in OPENAI_VOICES:
            assert f"Speaking with voice: {voice}" in captured.err
        assert captured.out == ""

    @pytest.mark.asyncio
    async def test_requested_voice_is_ignored(
        self, pipeline: SpeechPipeline, mock_executor: MagicMock
    ) -> None:
        """Test an explicit --voice does not narrow the demo."""
        config = SpeakConfig(
            text="Hi", voice="nova", token="sk-test", all_voices=True
        )

        await speak_all_voices(config, pipeline)

        voices = {voice for voice, _ in _spoken(mock_executor)}
        assert voices == set(OPENAI_VOICES)

    @pytest.mark.asyncio
    async def test_synthesis_failure_moves_on(
        self, pipeline: SpeechPipeline, mock_executor: MagicMock
    ) -> None:
        """Test a failed request is logged and the demo continues."""
        responses = [b"ID3audio"] * 12
        responses[2] = TTSAPIError("API error (500): boom", status_code=500)
        mock_executor.execute.side_effect = responses

        results = await speak_all_voices(DEMO_CONFIG, pipeline)

        assert mock_executor.execute.await_count == 12
        echo = results[1]
        assert echo.voice == "echo"
        assert echo.announced is False
        assert echo.spoken is True
        assert "boom" in echo.error
        assert [r.ok for r in results].count(False) == 1

    @pytest.mark.asyncio
    async def test_playback_failure_moves_on(
        self,
        pipeline: SpeechPipeline,
        mock_executor: MagicMock,
        mock_player: MagicMock,
    ) -> None:
        """Test a playback error does not stop the remaining voices."""
        mock_player.play_bytes_async.side_effect = [
            TTSPlaybackError("Failed to play audio: device busy"),
            *([None] * 11),
        ]

        results = await speak_all_voices(DEMO_CONFIG, pipeline)

        assert mock_executor.execute.await_count == 12
        assert results[0].announced is False
        assert results[0].spoken is True
        assert all(r.ok for r in results[1:])

    @pytest.mark.asyncio
    async def test_rejected_for_other_providers(
        self, pipeline: SpeechPipeline, mock_executor: MagicMock
    ) -> None:
        """Test non-OpenAI providers fail before any request."""
        config = SpeakConfig(
            text="Hi", provider="deepgram", token="dg", all_voices=True
        )

        with pytest.raises(TTSConfigError, match="only supported for OpenAI"):
            await speak_all_voices(config, pipeline)

        mock_executor.execute.assert_not_called()

    @pytest.mark.asyncio
    async def test_invalid_speed_rejected_before_requests(
        self, pipeline: SpeechPipeline, mock_executor: MagicMock
    ) -> None:
        config = SpeakConfig(text="Hi", token="sk", speed=0.1, all_voices=True)

        with pytest.raises(TTSConfigError, match="Speed must be between"):
            await speak_all_voices(config, pipeline)

        mock_executor.execute.assert_not_called()
