"""Deepgram Aura text-to-speech provider implementation."""

from types import MappingProxyType

from ..tts.models import RequestDescriptor, SynthesisRequest
from .base import ProviderProfile, SpeedPolicy, TTSProvider

AURA_VOICES = (
    "asteria",
    "luna",
    "stella",
    "athena",
    "hera",
    "orion",
    "arcas",
    "perseus",
    "angus",
    "orpheus",
    "helios",
    "zeus",
)
AURA_2_VOICES = ("thalia", "andromeda", "helena", "jason", "apollo", "ares")

# Short name -> full model name
DEEPGRAM_VOICES = MappingProxyType(
    {
        **{voice: f"aura-{voice}-en" for voice in AURA_VOICES},
        **{voice: f"aura-2-{voice}-en" for voice in AURA_2_VOICES},
    }
)

DEEPGRAM_PROFILE = ProviderProfile(
    name="deepgram",
    display_name="Deepgram",
    api_url="https://api.deepgram.com/v1/speak",
    env_var="DEEPGRAM_API_KEY",
    auth_header="Authorization",
    auth_scheme="Token",
    default_voice="aura-asteria-en",
    default_model="",
    speed_policy=SpeedPolicy(),
    voice_presets=DEEPGRAM_VOICES,
)


class DeepgramProvider(TTSProvider):
    """Deepgram TTS provider.

    The voice doubles as the model: it is sent as the ``model`` query
    parameter together with the encoding. There is no speed control.
    """

    profile = DEEPGRAM_PROFILE

    def build_request(self, request: SynthesisRequest) -> RequestDescriptor:
        return RequestDescriptor(
            url=self.profile.api_url,
            headers=self.headers(),
            body={"text": request.text},
            params={"model": request.voice, "encoding": "mp3"},
        )
