"""High-level API for polyspeak library usage."""

from pathlib import Path

from .config import DEFAULT_SIMILARITY, DEFAULT_STABILITY, SpeakConfig
from .core import speak_text
from .providers import DEFAULT_PROVIDER
from .providers.base import DEFAULT_SPEED
from .tts.errors import TTSConfigError
from .tts.executor import DEFAULT_TIMEOUT


async def speak(
    text: str,
    provider: str = DEFAULT_PROVIDER,
    voice: str | None = None,
    model: str | None = None,
    output: str | Path | None = None,
    speed: float = DEFAULT_SPEED,
    play: bool | None = None,
    api_key: str | None = None,
    stability: float = DEFAULT_STABILITY,
    similarity: float = DEFAULT_SIMILARITY,
    timeout: float = DEFAULT_TIMEOUT,
) -> bytes | None:
    """Synthesize speech from text.

    Args:
        text: Text to speak
        provider: TTS provider name
        voice: Preset name or provider-native voice ID
        model: Model name (provider default if omitted)
        output: File path to save audio (if None, plays audio)
        speed: Speed multiplier (provider-specific range)
        play: Force playback on or off. Defaults to playing only when no
            output is given.
        api_key: API key, overriding the provider's environment variable
        stability: ElevenLabs voice stability
        similarity: ElevenLabs similarity boost
        timeout: Request timeout in seconds

    Returns:
        Audio bytes if output specified, None if only played

    Raises:
        TTSConfigError: If provider, voice, speed or text is invalid, or if
            play=False is given without an output path
        TTSAuthError: If API key is not configured
        TTSTransportError: If the request fails or times out
        TTSAPIError: If TTS conversion fails
        TTSPlaybackError: If audio playback fails
        OSError: If file save fails
    """
    output_path = Path(output) if output else None
    if play is False and output_path is None:
        raise TTSConfigError("Nothing to do: play=False requires an output path")

    config = SpeakConfig(
        text=text,
        provider=provider,
        voice=voice,
        model=model,
        output=output_path,
        speed=speed,
        speak=bool(play),
        token=api_key,
        stability=stability,
        similarity=similarity,
        timeout=timeout,
    )

    await speak_text(config)

    # If output was specified, read the file and return bytes
    if output_path and output_path.exists():
        return output_path.read_bytes()
    return None
