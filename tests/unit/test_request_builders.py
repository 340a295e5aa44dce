"""Unit tests for provider request builders."""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from polyspeak.providers.deepgram import DeepgramProvider
from polyspeak.providers.elevenlabs import ElevenLabsProvider
from polyspeak.providers.openai import OpenAIProvider
from polyspeak.tts.errors import TTSConfigError
from polyspeak.tts.models import SynthesisRequest


class TestOpenAIRequest:
    """Test OpenAI request shape."""

    def test_build_request(self) -> None:
        """Test JSON body, bearer auth and fixed endpoint."""
        provider = OpenAIProvider(api_key="sk-test")
        request = SynthesisRequest(
            provider="openai", voice="nova", model="tts-1", text="Hello", speed=1.5
        )

        descriptor = provider.build_request(request)

        assert descriptor.url == "https://api.openai.com/v1/audio/speech"
        assert descriptor.headers == {
            "Content-Type": "application/json",
            "Authorization": "Bearer sk-test",
        }
        assert descriptor.body == {
            "model": "tts-1",
            "input": "Hello",
            "voice": "nova",
            "response_format": "mp3",
            "speed": 1.5,
        }
        assert dict(descriptor.params) == {}


class TestElevenLabsRequest:
    """Test ElevenLabs request shape."""

    def test_build_request(self) -> None:
        """Test voice in URL path, xi-api-key header and voice settings body."""
        provider = ElevenLabsProvider(api_key="xi-test")
        request = SynthesisRequest(
            provider="elevenlabs",
            voice="21m00Tcm4TlvDq8ikWAM",
            model="eleven_multilingual_v2",
            text="Hello",
            speed=0.9,
            extra={"stability": 0.3, "similarity_boost": 0.8},
        )

        descriptor = provider.build_request(request)

        assert descriptor.url == (
            "https://api.elevenlabs.io/v1/text-to-speech/21m00Tcm4TlvDq8ikWAM"
        )
        assert descriptor.params == {"output_format": "mp3_44100_128"}
        assert descriptor.headers == {
            "Content-Type": "application/json",
            "xi-api-key": "xi-test",
        }
        assert descriptor.body == {
            "text": "Hello",
            "model_id": "eleven_multilingual_v2",
            "voice_settings": {
                "stability": 0.3,
                "similarity_boost": 0.8,
                "speed": 0.9,
            },
        }

    def test_default_voice_settings(self) -> None:
        """Test stability and similarity default when not supplied."""
        provider = ElevenLabsProvider(api_key="xi-test")
        request = SynthesisRequest(
            provider="elevenlabs", voice="abc", model="m", text="Hello"
        )

        settings = provider.build_request(request).body["voice_settings"]

        assert settings == {"stability": 0.5, "similarity_boost": 0.75, "speed": 1.0}

    @pytest.mark.parametrize(
        "extra", [{"stability": 1.5}, {"similarity_boost": -0.1}]
    )
    def test_out_of_range_settings_rejected(self, extra: dict) -> None:
        """Test voice settings outside 0.0-1.0 are rejected before sending."""
        provider = ElevenLabsProvider(api_key="xi-test")
        request = SynthesisRequest(
            provider="elevenlabs", voice="abc", model="m", text="Hi", extra=extra
        )

        with pytest.raises(TTSConfigError, match="must be between 0.0 and 1.0"):
            provider.build_request(request)


class TestDeepgramRequest:
    """Test Deepgram request shape."""

    def test_build_request(self) -> None:
        """Test text-only body, model/encoding query and token auth."""
        provider = DeepgramProvider(api_key="dg-test")
        request = SynthesisRequest(
            provider="deepgram",
            voice="aura-luna-en",
            model="",
            text="Hello",
            speed=None,
        )

        descriptor = provider.build_request(request)

        assert descriptor.url == "https://api.deepgram.com/v1/speak"
        assert descriptor.params == {"model": "aura-luna-en", "encoding": "mp3"}
        assert descriptor.headers == {
            "Content-Type": "application/json",
            "Authorization": "Token dg-test",
        }
        assert descriptor.body == {"text": "Hello"}

    def test_speed_never_reaches_request(self) -> None:
        """Test a speed value on the request has no influence on Deepgram."""
        provider = DeepgramProvider(api_key="dg-test")
        request = SynthesisRequest(
            provider="deepgram", voice="aura-luna-en", model="", text="Hi", speed=2.0
        )

        descriptor = provider.build_request(request)

        assert "speed" not in descriptor.body
        assert "speed" not in descriptor.params
