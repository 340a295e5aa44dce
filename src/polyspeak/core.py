"""Core functionality for polyspeak - orchestrates TTS and audio operations."""

import asyncio
import logging
import sys
from dataclasses import dataclass, replace
from typing import Any

from .config import SpeakConfig
from .providers import ProviderRegistry
from .providers.base import TTSProvider
from .tts.errors import TTSError
from .tts.executor import SynthesisExecutor
from .tts.models import SynthesisRequest
from .tts.pipeline import SpeechPipeline

logger = logging.getLogger(__name__)

# Seconds to wait after the voice announcement and after each voice
ANNOUNCE_PAUSE = 0.5
VOICE_PAUSE = 1.0


@dataclass
class DemoResult:
    """Outcome of one voice in demo-all mode."""

    voice: str
    announced: bool = False
    spoken: bool = False
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.announced and self.spoken


def list_available_voices(provider: str = "openai") -> None:
    """List the preset voices of a provider.

    Prints voices in "name: voice_id" format to stdout. No API key is
    needed since presets are static.

    Raises:
        TTSConfigError: If provider not found
    """
    provider_class = ProviderRegistry.get(provider)
    for voice in provider_class.list_voices():
        print(f"{voice['name']}: {voice['id']}")


async def speak_text(
    config: SpeakConfig, pipeline: SpeechPipeline | None = None
) -> dict[str, Any]:
    """Convert text to speech and play and/or save the audio.

    Args:
        config: Resolved invocation settings
        pipeline: Optional pre-built pipeline

    Returns:
        Output results: {"played": bool, "saved": str | None}

    Raises:
        TTSConfigError: If provider, voice, speed or text is invalid
        TTSAuthError: If API key is not configured
        TTSTransportError: If the request fails or times out
        TTSAPIError: If TTS conversion fails
        TTSPlaybackError: If audio playback fails
        OSError: If file save fails
    """
    pipeline = pipeline or SpeechPipeline(
        executor=SynthesisExecutor(timeout=config.timeout)
    )
    return await pipeline.process(config)


async def speak_all_voices(
    config: SpeakConfig, pipeline: SpeechPipeline | None = None
) -> list[DemoResult]:
    """Speak the text once with every preset voice of the provider.

    For each voice the voice name is spoken first, then the text. Voices
    are processed one after another in preset order. A synthesis or
    playback failure is logged and the loop moves on to the next voice.

    Args:
        config: Resolved invocation settings (config.voice is ignored)
        pipeline: Optional pre-built pipeline

    Returns:
        One DemoResult per preset voice, in order

    Raises:
        TTSConfigError: If the provider does not support demo-all mode or
            any setting is invalid
        TTSAuthError: If API key is not configured
    """
    pipeline = pipeline or SpeechPipeline(
        executor=SynthesisExecutor(timeout=config.timeout)
    )
    profile = pipeline.check_demo_supported(config)
    provider, request = pipeline.prepare(replace(config, voice=None))

    results = []
    for voice in profile.voice_presets:
        result = DemoResult(voice=voice)
        results.append(result)
        print(f"Speaking with voice: {voice}", file=sys.stderr)

        result.announced = await _speak_once(
            pipeline, provider, request, voice, voice, result, "voice announcement"
        )
        await asyncio.sleep(ANNOUNCE_PAUSE)

        result.spoken = await _speak_once(
            pipeline, provider, request, voice, config.text, result, "text"
        )
        await asyncio.sleep(VOICE_PAUSE)

    failed = [r.voice for r in results if not r.ok]
    if failed:
        logger.debug(f"Demo finished with failures for: {', '.join(failed)}")
    return results


async def _speak_once(
    pipeline: SpeechPipeline,
    provider: TTSProvider,
    request: SynthesisRequest,
    voice: str,
    text: str,
    result: DemoResult,
    label: str,
) -> bool:
    """Synthesize and play one utterance, recording any failure on result."""
    try:
        audio_data = await pipeline.synthesize_text(provider, request, voice, text)
    except TTSError as e:
        result.error = str(e)
        logger.error(f"Error synthesizing {label} for {voice}: {e}")
        return False

    try:
        await pipeline.play(audio_data)
    except TTSError as e:
        result.error = str(e)
        logger.error(f"Error playing audio for {voice}: {e}")
        return False
    return True
