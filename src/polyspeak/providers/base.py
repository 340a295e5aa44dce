"""Abstract base class for text-to-speech providers.

This module defines the interface that all TTS providers must implement,
ensuring consistent behavior across different hosted TTS APIs. Each provider
pairs an immutable ProviderProfile (endpoint, credentials, defaults, voice
presets, speed policy) with a request builder that turns a resolved
SynthesisRequest into a transport-ready RequestDescriptor.
"""

import logging
import os
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import ClassVar

from ..tts.errors import TTSAuthError, TTSConfigError
from ..tts.models import RequestDescriptor, SynthesisRequest

logger = logging.getLogger(__name__)

DEFAULT_SPEED = 1.0


@dataclass(frozen=True)
class SpeedPolicy:
    """Legal speed range for a provider.

    A policy without bounds means the provider cannot adjust speed: any
    non-default value is reported with a warning and dropped.
    """

    minimum: float | None = None
    maximum: float | None = None
    default: float = DEFAULT_SPEED

    @property
    def adjustable(self) -> bool:
        return self.minimum is not None and self.maximum is not None

    def apply(self, speed: float, provider: str) -> float | None:
        """Validate speed and return the value to send.

        Args:
            speed: Requested speed multiplier
            provider: Human-readable provider name for messages

        Returns:
            The speed to put on the wire, or None if the provider ignores it

        Raises:
            TTSConfigError: If speed is outside the provider's legal range
        """
        if not self.adjustable:
            if speed != self.default:
                logger.warning(
                    f"Speed adjustment is not supported for {provider}, ignoring"
                )
            return None

        if not self.minimum <= speed <= self.maximum:
            raise TTSConfigError(
                f"Speed must be between {self.minimum} and {self.maximum} "
                f"for {provider}"
            )
        return speed


@dataclass(frozen=True)
class ProviderProfile:
    """Static description of a hosted TTS provider.

    Profiles are built once at import time and never mutated. voice_presets
    should be a read-only mapping; its iteration order is the order used by
    demo-all mode.
    """

    name: str
    display_name: str
    api_url: str
    env_var: str
    auth_header: str
    auth_scheme: str | None
    default_voice: str
    default_model: str
    speed_policy: SpeedPolicy
    voice_presets: Mapping[str, str]
    closed_presets: bool = False
    supports_batch_demo: bool = False
    models: tuple[str, ...] = ()

    def auth_value(self, api_key: str) -> str:
        if self.auth_scheme:
            return f"{self.auth_scheme} {api_key}"
        return api_key


class TTSProvider(ABC):
    """Abstract base class for text-to-speech providers.

    Subclasses set the ``profile`` class attribute and implement
    build_request(). Voice resolution, voice validation and speed handling
    are driven by the profile and shared by all providers.

    Voice Dictionary Structure:
        Each voice returned by list_voices() follows this structure:
        {
            "id": str,       # Provider-native identifier for the voice
            "name": str,     # Preset name
            "provider": str  # Name of the provider (e.g., "openai")
        }
    """

    profile: ClassVar[ProviderProfile]

    def __init__(self, api_key: str | None = None) -> None:
        """Initialize provider with a resolved API key.

        Args:
            api_key: Explicit API key. If not provided, reads from the
                    provider's environment variable.

        Raises:
            TTSAuthError: If no API key can be found.
        """
        self._api_key = api_key or os.getenv(self.profile.env_var)
        if not self._api_key:
            raise TTSAuthError(
                f"{self.profile.env_var} environment variable not set "
                "and --token not provided",
                env_var=self.profile.env_var,
            )

    def resolve_voice(self, voice: str) -> str:
        """Map a preset name to the provider-native voice identifier.

        Lookup is case-insensitive. Unknown names are returned unchanged so
        that raw voice IDs and full model names reach the provider as-is.
        """
        return self.profile.voice_presets.get(voice.lower(), voice)

    def validate_voice(self, voice: str) -> None:
        """Reject voices outside a closed preset list.

        Raises:
            TTSConfigError: If the provider only accepts its presets and
                    voice is not one of them.
        """
        if not self.profile.closed_presets:
            return
        if voice not in self.profile.voice_presets:
            valid = ", ".join(self.profile.voice_presets)
            raise TTSConfigError(
                f"Invalid {self.profile.display_name} voice '{voice}'. "
                f"Valid voices: {valid}"
            )

    def validate_speed(self, speed: float) -> float | None:
        return self.profile.speed_policy.apply(speed, self.profile.display_name)

    def headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            self.profile.auth_header: self.profile.auth_value(self._api_key),
        }

    @abstractmethod
    def build_request(self, request: SynthesisRequest) -> RequestDescriptor:
        """Build the HTTP request for a resolved synthesis request.

        Must not perform any network access.

        Args:
            request: Validated request with a resolved voice identifier

        Returns:
            RequestDescriptor ready for the synthesis executor
        """
        pass

    @classmethod
    def list_voices(cls) -> list[dict]:
        """Return the preset voices for this provider in declared order."""
        return [
            {"id": voice_id, "name": name, "provider": cls.profile.name}
            for name, voice_id in cls.profile.voice_presets.items()
        ]
