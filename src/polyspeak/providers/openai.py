"""OpenAI text-to-speech provider implementation."""

from types import MappingProxyType

from ..tts.models import RequestDescriptor, SynthesisRequest
from .base import ProviderProfile, SpeedPolicy, TTSProvider

OPENAI_VOICES = ("alloy", "echo", "fable", "onyx", "nova", "shimmer")

OPENAI_PROFILE = ProviderProfile(
    name="openai",
    display_name="OpenAI",
    api_url="https://api.openai.com/v1/audio/speech",
    env_var="OPENAI_API_KEY",
    auth_header="Authorization",
    auth_scheme="Bearer",
    default_voice="alloy",
    default_model="tts-1-hd",
    speed_policy=SpeedPolicy(minimum=0.25, maximum=4.0),
    voice_presets=MappingProxyType({voice: voice for voice in OPENAI_VOICES}),
    closed_presets=True,
    supports_batch_demo=True,
    models=("tts-1", "tts-1-hd"),
)


class OpenAIProvider(TTSProvider):
    """OpenAI TTS provider.

    Voices are a closed list and are sent by name. Speed is carried in the
    JSON body and authentication uses a bearer token.
    """

    profile = OPENAI_PROFILE

    def build_request(self, request: SynthesisRequest) -> RequestDescriptor:
        return RequestDescriptor(
            url=self.profile.api_url,
            headers=self.headers(),
            body={
                "model": request.model,
                "input": request.text,
                "voice": request.voice,
                "response_format": "mp3",
                "speed": request.speed,
            },
        )
