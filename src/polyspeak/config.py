"""Configuration management for polyspeak.

Loads optional defaults from ~/.config/polyspeak/config.toml and resolves
the per-invocation SpeakConfig.
Priority chain: CLI flags > env vars > config file > provider defaults.
"""

import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from .providers import DEFAULT_PROVIDER, ProviderRegistry
from .providers.base import DEFAULT_SPEED
from .tts.errors import TTSConfigError
from .tts.executor import DEFAULT_TIMEOUT

CONFIG_DIR = Path.home() / ".config" / "polyspeak"
CONFIG_PATH = CONFIG_DIR / "config.toml"

DEFAULT_STABILITY = 0.5
DEFAULT_SIMILARITY = 0.75

DEFAULT_CONFIG = """\
# polyspeak configuration
# Every value here is optional; command-line flags always win.

[tts]
# Provider: "openai", "elevenlabs" or "deepgram"
provider = "openai"

# Request timeout in seconds
timeout = 60

[openai]
# Voices: alloy, echo, fable, onyx, nova, shimmer
voice = "alloy"
# Models: tts-1, tts-1-hd
model = "tts-1-hd"

[elevenlabs]
# Preset name (rachel, adam, ...) or a raw voice_id
voice = "rachel"
model = "eleven_multilingual_v2"

[deepgram]
# Preset name (asteria, luna, ...) or a full model name like aura-asteria-en
voice = "asteria"

# API keys are read from environment variables, not this file:
#   OPENAI_API_KEY      - OpenAI provider
#   ELEVENLABS_API_KEY  - ElevenLabs provider
#   DEEPGRAM_API_KEY    - Deepgram provider
"""


@dataclass(frozen=True)
class ProviderDefaults:
    """Per-provider defaults from the config file."""

    voice: str | None = None
    model: str | None = None


@dataclass(frozen=True)
class PolyspeakConfig:
    """Top-level polyspeak configuration."""

    provider: str = DEFAULT_PROVIDER
    timeout: float = DEFAULT_TIMEOUT
    providers: Mapping[str, ProviderDefaults] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def defaults_for(self, provider: str) -> ProviderDefaults:
        return self.providers.get(provider.strip().lower(), ProviderDefaults())


@dataclass(frozen=True)
class SpeakConfig:
    """Fully resolved options for one invocation.

    voice and model stay None when neither the command line nor the config
    file chose one; the provider's own defaults apply in that case.
    """

    text: str
    provider: str = DEFAULT_PROVIDER
    voice: str | None = None
    model: str | None = None
    output: Path | None = None
    speed: float = DEFAULT_SPEED
    speak: bool = False
    token: str | None = None
    all_voices: bool = False
    stability: float = DEFAULT_STABILITY
    similarity: float = DEFAULT_SIMILARITY
    timeout: float = DEFAULT_TIMEOUT

    @property
    def should_play(self) -> bool:
        """Play when nothing is saved, or when saving and --speak is set."""
        return self.output is None or self.speak


def config_path() -> Path:
    """Return the config file location, honouring POLYSPEAK_CONFIG."""
    override = os.getenv("POLYSPEAK_CONFIG")
    return Path(override).expanduser() if override else CONFIG_PATH


def generate_config(path: Path | None = None) -> Path:
    """Write the default config file and return its path."""
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(DEFAULT_CONFIG)
    return path


def load_config(path: Path | None = None) -> PolyspeakConfig:
    """Load configuration from the config file with env var overrides.

    A missing file is not an error: built-in defaults are used.

    Args:
        path: Config file to read. Defaults to config_path().

    Returns:
        Loaded PolyspeakConfig.

    Raises:
        TTSConfigError: If the file exists but cannot be parsed.
    """
    path = path or config_path()

    data: dict = {}
    if path.exists():
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (tomllib.TOMLDecodeError, OSError) as e:
            raise TTSConfigError(f"Invalid config file {path}: {e}", e) from e

    tts = data.get("tts", {})

    providers = {}
    for name in ("openai", "elevenlabs", "deepgram"):
        section = data.get(name, {})
        providers[name] = ProviderDefaults(
            voice=section.get("voice"),
            model=section.get("model"),
        )

    # Env vars override config file values
    timeout_str = os.getenv("POLYSPEAK_TIMEOUT", str(tts.get("timeout", "")))
    try:
        timeout = float(timeout_str) if timeout_str else DEFAULT_TIMEOUT
    except ValueError as e:
        raise TTSConfigError(f"Invalid timeout value: {timeout_str!r}", e) from e

    return PolyspeakConfig(
        provider=os.getenv("POLYSPEAK_PROVIDER", tts.get("provider", DEFAULT_PROVIDER)),
        timeout=timeout,
        providers=MappingProxyType(providers),
    )


def resolve_speak_config(
    text: str,
    config: PolyspeakConfig,
    provider: str | None = None,
    voice: str | None = None,
    model: str | None = None,
    output: Path | None = None,
    speed: float = DEFAULT_SPEED,
    speak: bool = False,
    token: str | None = None,
    all_voices: bool = False,
    stability: float = DEFAULT_STABILITY,
    similarity: float = DEFAULT_SIMILARITY,
    timeout: float | None = None,
) -> SpeakConfig:
    """Merge command-line values over the loaded configuration.

    The provider name is checked first so an unknown provider is reported
    even when no text was given.

    Raises:
        TTSConfigError: If the provider is unknown or text is empty.
    """
    provider = ProviderRegistry.normalize(provider or config.provider)

    if not text or not text.strip():
        raise TTSConfigError("No text provided")

    defaults = config.defaults_for(provider)

    return SpeakConfig(
        text=text,
        provider=provider,
        voice=voice or defaults.voice,
        model=model or defaults.model,
        output=output,
        speed=speed,
        speak=speak,
        token=token or None,
        all_voices=all_voices,
        stability=stability,
        similarity=similarity,
        timeout=timeout if timeout is not None else config.timeout,
    )
