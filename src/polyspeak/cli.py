"""Typer CLI definition for polyspeak."""

import asyncio
import logging
import sys
from pathlib import Path
from typing import NoReturn

import typer

from .config import (
    DEFAULT_SIMILARITY,
    DEFAULT_STABILITY,
    generate_config,
    load_config,
    resolve_speak_config,
)
from .core import list_available_voices, speak_all_voices, speak_text
from .providers import DEFAULT_PROVIDER, ProviderRegistry
from .providers.base import DEFAULT_SPEED, ProviderProfile
from .tts.errors import (
    TTSAPIError,
    TTSConfigError,
    TTSPlaybackError,
    TTSTransportError,
)


def _describe_profile(profile: ProviderProfile) -> str:
    """Render the help section for one provider."""
    lines = [f"{profile.display_name}:", f"  Env var: {profile.env_var}"]
    lines.append(f"  Voices:  {', '.join(profile.voice_presets)}")
    if not profile.closed_presets:
        lines.append("           (or use a provider voice ID directly)")
    if profile.models:
        lines.append(
            f"  Models:  {', '.join(profile.models)} "
            f"(default: {profile.default_model})"
        )
    policy = profile.speed_policy
    if policy.adjustable:
        lines.append(f"  Speed:   {policy.minimum} to {policy.maximum}")
    else:
        lines.append("  Note:    Speed adjustment not supported")
    return "\n".join(lines)


def provider_help() -> str:
    """Build the per-provider help epilog."""
    sections = [_describe_profile(p) for p in ProviderRegistry.profiles()]
    examples = "\n".join(
        [
            "Examples:",
            '  polyspeak "Hello, world!"',
            '  polyspeak -p elevenlabs -v rachel "Hello from ElevenLabs"',
            '  polyspeak -p deepgram -v asteria "Hello from Deepgram"',
            '  echo "Hello" | polyspeak -v nova',
            '  polyspeak -o output.mp3 "Save this to a file"',
        ]
    )
    # \b stops click from rewrapping each block
    return "\n\n".join(f"\b\n{block}" for block in [*sections, examples])


app = typer.Typer(add_completion=False, rich_markup_mode=None)


def process_text_input(words: list[str] | None) -> str:
    """Join positional words into the text to speak.

    Args:
        words: Positional arguments from the command line

    Returns:
        The text to speak, or an empty string if none was given
    """
    if not words:
        return ""
    return " ".join(words)


def _fail(message: str, error: Exception, debug: bool, label: str) -> NoReturn:
    """Print an error and exit with status 1."""
    if debug:
        typer.echo(f"Debug - {label}: {error!r}", err=True)
    else:
        typer.echo(message, err=True)
    raise typer.Exit(1) from None


@app.command(
    help="Text-to-speech using OpenAI, ElevenLabs, or Deepgram TTS API",
    epilog=provider_help(),
    context_settings={"help_option_names": ["-h", "--help"]},
)
def speak(
    ctx: typer.Context,
    text: list[str] | None = typer.Argument(None, help="Text to convert to speech"),
    provider: str | None = typer.Option(
        None,
        "-p",
        "--provider",
        help=f"TTS provider: {', '.join(ProviderRegistry.names())} "
        f"(default: {DEFAULT_PROVIDER})",
    ),
    voice: str | None = typer.Option(
        None, "-v", "--voice", help="Voice to use (see below for options)"
    ),
    model: str | None = typer.Option(None, "-m", "--model", help="Model to use"),
    output: Path | None = typer.Option(
        None, "-o", "--output", help="Save audio to this file"
    ),
    speed: float = typer.Option(
        DEFAULT_SPEED, "-x", "--speed", help="Speed of the voice"
    ),
    speak_flag: bool = typer.Option(
        False, "-s", "--speak", help="Speak the text even when saving to a file"
    ),
    token: str | None = typer.Option(
        None, "--token", help="API key (or set the provider's env var)"
    ),
    all_voices: bool = typer.Option(
        False, "--all", help="Speak with all voices (OpenAI only)"
    ),
    stability: float = typer.Option(
        DEFAULT_STABILITY,
        "--stability",
        help="Voice stability, 0.0-1.0 (ElevenLabs only)",
    ),
    similarity: float = typer.Option(
        DEFAULT_SIMILARITY,
        "--similarity",
        help="Similarity boost, 0.0-1.0 (ElevenLabs only)",
    ),
    timeout: float | None = typer.Option(
        None, "--timeout", help="Request timeout in seconds (default: 60)"
    ),
    list_voices: bool = typer.Option(
        False, "--list-voices", help="List preset voices for the provider and exit"
    ),
    init_config: bool = typer.Option(
        False, "--init-config", help="Write a default config file and exit"
    ),
    debug: bool = typer.Option(
        False, "--debug", help="Show verbose error messages and request details"
    ),
) -> None:
    """Convert text to speech and play it or save it to a file."""
    # Configure logging for debug mode
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    else:
        logging.basicConfig(
            level=logging.WARNING, format="%(levelname)s: %(message)s"
        )

    if init_config:
        try:
            path = generate_config()
        except OSError as e:
            _fail(
                f"Error: Failed to write config: {e}", e, debug, "Config write failed"
            )
        typer.echo(f"Wrote {path}")
        raise typer.Exit(0)

    try:
        config = load_config()
    except TTSConfigError as e:
        _fail(f"Error: {e}", e, debug, "Config error")

    if list_voices:
        try:
            list_available_voices(provider or config.provider)
        except TTSConfigError as e:
            _fail(f"Error: {e}", e, debug, "Failed to list voices")
        raise typer.Exit(0)

    # Get text from arguments or stdin
    output_text = process_text_input(text)
    if not output_text and not sys.stdin.isatty():
        try:
            output_text = sys.stdin.read().strip()
        except UnicodeDecodeError as e:
            _fail(
                f"Error: Could not read text from stdin: {e}", e, debug, "Stdin error"
            )

    try:
        speak_config = resolve_speak_config(
            output_text,
            config,
            provider=provider,
            voice=voice,
            model=model,
            output=output,
            speed=speed,
            speak=speak_flag,
            token=token,
            all_voices=all_voices,
            stability=stability,
            similarity=similarity,
            timeout=timeout,
        )
    except TTSConfigError as e:
        if debug:
            typer.echo(f"Debug - Text processing error: {e!r}", err=True)
        else:
            typer.echo(f"Error: {e}", err=True)
        typer.echo(ctx.get_help(), err=True)
        raise typer.Exit(1) from None

    if speak_config.all_voices:
        try:
            asyncio.run(speak_all_voices(speak_config))
        except TTSConfigError as e:
            _fail(f"Error: {e}", e, debug, "Configuration error")
        except Exception as e:
            _fail("Error: An unexpected error occurred", e, debug, "Unexpected error")
        return

    try:
        asyncio.run(speak_text(speak_config))
    except TTSConfigError as e:
        _fail(f"Error: {e}", e, debug, "Configuration error")
    except (TTSTransportError, TTSAPIError) as e:
        _fail(f"Error synthesizing speech: {e}", e, debug, "TTS API error")
    except TTSPlaybackError as e:
        _fail(f"Error playing audio: {e}", e, debug, "Audio playback error")
    except OSError as e:
        _fail(f"Error saving file: {e}", e, debug, "File system error")
    except Exception as e:
        _fail("Error: An unexpected error occurred", e, debug, "Unexpected error")
