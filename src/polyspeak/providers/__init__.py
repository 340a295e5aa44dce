"""Provider abstraction for text-to-speech services.

The set of providers is fixed: OpenAI, ElevenLabs and Deepgram. The registry
maps provider names to their implementations and guards against any name
outside that set.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from .base import ProviderProfile, TTSProvider

from ..tts.errors import TTSConfigError
from .deepgram import DeepgramProvider
from .elevenlabs import ElevenLabsProvider
from .openai import OpenAIProvider

__all__ = ["DEFAULT_PROVIDER", "ProviderRegistry"]

DEFAULT_PROVIDER = "openai"


class ProviderRegistry:
    """Registry of the supported TTS providers.

    The mapping is read-only and its order is the order providers are
    listed in help text and error messages.
    """

    _providers: ClassVar[Mapping[str, type["TTSProvider"]]] = MappingProxyType(
        {
            "openai": OpenAIProvider,
            "elevenlabs": ElevenLabsProvider,
            "deepgram": DeepgramProvider,
        }
    )

    @classmethod
    def names(cls) -> list[str]:
        return list(cls._providers)

    @classmethod
    def normalize(cls, name: str) -> str:
        """Lowercase and validate a provider name.

        Raises:
            TTSConfigError: If provider name is not supported
        """
        normalized = name.strip().lower()
        if normalized not in cls._providers:
            quoted = [f"'{n}'" for n in cls._providers]
            choices = ", ".join(quoted[:-1]) + f", or {quoted[-1]}"
            raise TTSConfigError(f"Invalid provider '{normalized}'. Use {choices}")
        return normalized

    @classmethod
    def get(cls, name: str) -> type["TTSProvider"]:
        """Get a provider class by name.

        Args:
            name: Name of the provider to retrieve (case-insensitive)

        Returns:
            Provider class

        Raises:
            TTSConfigError: If provider name not found
        """
        return cls._providers[cls.normalize(name)]

    @classmethod
    def profile(cls, name: str) -> "ProviderProfile":
        return cls.get(name).profile

    @classmethod
    def profiles(cls) -> list["ProviderProfile"]:
        return [provider.profile for provider in cls._providers.values()]

    @classmethod
    def create(cls, name: str, api_key: str | None = None) -> "TTSProvider":
        """Instantiate a provider with a resolved API key.

        Args:
            name: Name of the provider
            api_key: Explicit API key, overriding the provider's env var

        Returns:
            Provider instance

        Raises:
            TTSConfigError: If provider name not found
            TTSAuthError: If no API key is available
        """
        return cls.get(name)(api_key=api_key)
