"""ElevenLabs text-to-speech provider implementation."""

from types import MappingProxyType

from ..tts.models import RequestDescriptor, SynthesisRequest, VoiceSettings
from .base import ProviderProfile, SpeedPolicy, TTSProvider

# Preset name -> voice_id
ELEVENLABS_VOICES = MappingProxyType(
    {
        "rachel": "21m00Tcm4TlvDq8ikWAM",
        "domi": "AZnzlk1XvdvUeBnXmlld",
        "bella": "EXAVITQu4vr4xnSDxMaL",
        "antoni": "ErXwobaYiN019PkySvjV",
        "elli": "MF3mGyEYCl7XYWbV9V6O",
        "josh": "TxGEqnHWrfWFTfGW9XjX",
        "arnold": "VR6AewLTigWG4xSOukaG",
        "adam": "pNInz6obpgDQGcFmaJgB",
        "sam": "yoZ06aMxZJJ28mfd3POQ",
        "george": "JBFqnCBsd6RMkjVDRZzb",
        "charlie": "IKne3meq5aSn9XLyUdCD",
        "emily": "LcfcDJNUP1GQjkzn1xUU",
        "lily": "pFZP5JQG7iQjIQuC4Bku",
        "michael": "flq6f7yk4E4fJM5XTYuZ",
    }
)

OUTPUT_FORMAT = "mp3_44100_128"

ELEVENLABS_PROFILE = ProviderProfile(
    name="elevenlabs",
    display_name="ElevenLabs",
    api_url="https://api.elevenlabs.io/v1/text-to-speech",
    env_var="ELEVENLABS_API_KEY",
    auth_header="xi-api-key",
    auth_scheme=None,
    default_voice="rachel",
    default_model="eleven_multilingual_v2",
    speed_policy=SpeedPolicy(minimum=0.7, maximum=1.2),
    voice_presets=ELEVENLABS_VOICES,
    models=(
        "eleven_multilingual_v2",
        "eleven_turbo_v2_5",
        "eleven_turbo_v2",
        "eleven_monolingual_v1",
    ),
)


class ElevenLabsProvider(TTSProvider):
    """ElevenLabs TTS provider.

    Accepts preset names or raw voice IDs. The voice ID is part of the URL
    path and speed travels inside voice_settings alongside stability and
    similarity boost.
    """

    profile = ELEVENLABS_PROFILE

    def build_request(self, request: SynthesisRequest) -> RequestDescriptor:
        settings = VoiceSettings(
            stability=request.extra.get("stability", VoiceSettings.stability),
            similarity_boost=request.extra.get(
                "similarity_boost", VoiceSettings.similarity_boost
            ),
            speed=request.speed,
        )

        return RequestDescriptor(
            url=f"{self.profile.api_url}/{request.voice}",
            headers=self.headers(),
            body={
                "text": request.text,
                "model_id": request.model,
                "voice_settings": settings.to_dict(),
            },
            params={"output_format": OUTPUT_FORMAT},
        )
