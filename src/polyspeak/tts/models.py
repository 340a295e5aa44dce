"""TTS data models with validation."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from .errors import TTSConfigError


@dataclass(frozen=True)
class SynthesisRequest:
    """One fully resolved synthesis attempt.

    Args:
        provider: Provider name (e.g., "openai")
        voice: Provider-native voice identifier, already resolved
        model: Model name, empty for providers without a model concept
        text: Text to synthesize
        speed: Speed multiplier, already validated. None when the provider
            does not support speed adjustment.
        extra: Provider-specific options (e.g., ElevenLabs voice settings)
    """

    provider: str
    voice: str
    model: str
    text: str
    speed: float | None = 1.0
    extra: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate request fields."""
        if not self.text or not self.text.strip():
            raise TTSConfigError("Text cannot be empty")
        if not self.voice:
            raise TTSConfigError("voice cannot be empty")
        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))


@dataclass(frozen=True)
class RequestDescriptor:
    """Transport-ready HTTP request produced by a provider.

    Args:
        url: Endpoint URL without query string
        headers: HTTP headers including authentication
        body: JSON body
        params: Query string parameters
    """

    url: str
    headers: Mapping[str, str]
    body: Mapping[str, Any]
    params: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class VoiceSettings:
    """ElevenLabs voice generation settings.

    Args:
        stability: Voice stability (0.0-1.0)
        similarity_boost: Voice similarity boost (0.0-1.0)
        speed: Speaking speed (0.7-1.2)
    """

    stability: float = 0.5
    similarity_boost: float = 0.75
    speed: float = 1.0

    def __post_init__(self) -> None:
        """Validate voice settings."""
        if not 0.0 <= self.stability <= 1.0:
            raise TTSConfigError("Stability must be between 0.0 and 1.0")
        if not 0.0 <= self.similarity_boost <= 1.0:
            raise TTSConfigError("Similarity boost must be between 0.0 and 1.0")

    def to_dict(self) -> dict[str, float]:
        return {
            "stability": self.stability,
            "similarity_boost": self.similarity_boost,
            "speed": self.speed,
        }
