"""TTS (Text-to-Speech) package for polyspeak.

This package provides the request models, HTTP execution and error types
shared by all providers.
"""

from .errors import (
    TTSAPIError,
    TTSAuthError,
    TTSConfigError,
    TTSError,
    TTSPlaybackError,
    TTSTransportError,
)
from .executor import SynthesisExecutor
from .models import RequestDescriptor, SynthesisRequest, VoiceSettings

__all__ = [
    "RequestDescriptor",
    "SynthesisExecutor",
    "SynthesisRequest",
    "TTSAPIError",
    "TTSAuthError",
    "TTSConfigError",
    "TTSError",
    "TTSPlaybackError",
    "TTSTransportError",
    "VoiceSettings",
]
