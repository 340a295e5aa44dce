"""TTS pipeline orchestrator for polyspeak.

Coordinates provider selection, request validation, synthesis and output
for a single invocation.

Example:
    pipeline = SpeechPipeline()

    result = await pipeline.process(
        SpeakConfig(text="Build finished", provider="deepgram", voice="luna")
    )
    # Returns: {"played": True, "saved": None}
"""

import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any

from ..audio.player import AudioPlayer
from ..config import SpeakConfig
from ..providers import ProviderRegistry
from ..providers.base import ProviderProfile, TTSProvider
from .errors import TTSConfigError
from .executor import SynthesisExecutor
from .models import SynthesisRequest

logger = logging.getLogger(__name__)


class SpeechPipeline:
    """Orchestrates the TTS workflow from resolved config to audio output.

    Validation happens in a fixed order and always before any network
    activity: provider name, voice/model defaults, API key, speed, voice.
    Any failure is terminal for the call and propagates to the caller.
    """

    def __init__(
        self,
        executor: SynthesisExecutor | None = None,
        audio_player: AudioPlayer | None = None,
    ) -> None:
        """Initialize TTS pipeline with optional pre-built components.

        Args:
            executor: Executor used for HTTP calls (created per timeout if omitted)
            audio_player: Player used for playback and saving
        """
        self.executor = executor
        self.audio_player = audio_player

    def prepare(self, config: SpeakConfig) -> tuple[TTSProvider, SynthesisRequest]:
        """Validate config and build the synthesis request.

        Args:
            config: Resolved invocation settings

        Returns:
            Provider instance and the request it should send

        Raises:
            TTSConfigError: If provider, speed or voice is invalid
            TTSAuthError: If no API key is available
        """
        provider_class = ProviderRegistry.get(config.provider)
        profile = provider_class.profile

        voice = config.voice or profile.default_voice
        model = config.model or profile.default_model

        provider = provider_class(api_key=config.token)
        speed = provider.validate_speed(config.speed)

        provider.validate_voice(voice)
        resolved_voice = provider.resolve_voice(voice)
        if resolved_voice != voice:
            logger.debug(
                f"Resolved {profile.display_name} voice '{voice}' "
                f"-> '{resolved_voice}'"
            )

        request = SynthesisRequest(
            provider=profile.name,
            voice=resolved_voice,
            model=model,
            text=config.text,
            speed=speed,
            extra={
                "stability": config.stability,
                "similarity_boost": config.similarity,
            },
        )
        return provider, request

    def check_demo_supported(self, config: SpeakConfig) -> ProviderProfile:
        """Ensure demo-all mode is allowed for the configured provider.

        Raises:
            TTSConfigError: If the provider does not support demo-all mode
        """
        profile = ProviderRegistry.profile(config.provider)
        if not profile.supports_batch_demo:
            eligible = [
                p.display_name
                for p in ProviderRegistry.profiles()
                if p.supports_batch_demo
            ]
            raise TTSConfigError(
                f"--all flag is only supported for {', '.join(eligible)} provider"
            )
        return profile

    async def synthesize(
        self, provider: TTSProvider, request: SynthesisRequest
    ) -> bytes:
        """Build the HTTP request for a provider and execute it.

        Raises:
            TTSConfigError: If provider-specific options are invalid
            TTSTransportError: If the request fails or times out
            TTSAPIError: If the provider rejects the request
        """
        descriptor = provider.build_request(request)
        executor = self.executor or SynthesisExecutor()
        logger.debug(
            f"Calling {request.provider} TTS API with voice '{request.voice}'"
        )
        return await executor.execute(descriptor)

    async def synthesize_text(
        self, provider: TTSProvider, request: SynthesisRequest, voice: str, text: str
    ) -> bytes:
        """Synthesize different text or voice with an already validated request."""
        return await self.synthesize(
            provider, replace(request, voice=provider.resolve_voice(voice), text=text)
        )

    async def play(self, audio_data: bytes) -> None:
        if self.audio_player is None:
            self.audio_player = AudioPlayer()
        await self.audio_player.play_bytes_async(audio_data)

    async def deliver(
        self, audio_data: bytes, output: Path | None, play: bool
    ) -> dict[str, Any]:
        """Send audio to its sinks.

        The file write and playback are independent reads of the same bytes.
        The save is confirmed on stderr before playback starts, so it is
        reported even if playback then fails.

        Args:
            audio_data: Encoded audio
            output: File to write, or None
            play: Whether to play through speakers

        Returns:
            Dictionary with output results:
                {
                    "played": bool,      # True if played through speakers
                    "saved": str | None, # File path if saved to disk
                }

        Raises:
            OSError: If the file cannot be written
            TTSPlaybackError: If playback fails
        """
        if self.audio_player is None:
            self.audio_player = AudioPlayer()

        saved = None
        if output is not None:
            self.audio_player.save_to_file(audio_data, output)
            saved = str(output)
            print(f"Saved to {saved}", file=sys.stderr)

        if play:
            await self.play(audio_data)

        return {"played": play, "saved": saved}

    async def process(self, config: SpeakConfig) -> dict[str, Any]:
        """Run the complete single-shot workflow.

        Args:
            config: Resolved invocation settings

        Returns:
            Output results from deliver()

        Raises:
            TTSConfigError: If validation fails
            TTSAuthError: If no API key is available
            TTSTransportError: If the request fails or times out
            TTSAPIError: If the provider rejects the request
            TTSPlaybackError: If playback fails
            OSError: If the output file cannot be written
        """
        if self.executor is None:
            self.executor = SynthesisExecutor(timeout=config.timeout)

        provider, request = self.prepare(config)
        audio_data = await self.synthesize(provider, request)
        return await self.deliver(audio_data, config.output, config.should_play)
