"""HTTP execution of provider requests."""

import logging

import httpx

from .errors import TTSAPIError, TTSTransportError
from .models import RequestDescriptor

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 60.0


class SynthesisExecutor:
    """Sends a single provider request and returns the audio bytes.

    One attempt per call with a fixed timeout. Nothing is retried.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize executor.

        Args:
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.timeout = timeout
        self._transport = transport

    async def execute(self, descriptor: RequestDescriptor) -> bytes:
        """POST the request and return the response body.

        Args:
            descriptor: Request built by a provider

        Returns:
            Encoded audio bytes

        Raises:
            TTSTransportError: If the request fails or times out
            TTSAPIError: If the provider returns a non-success status
        """
        logger.debug(f"POST {descriptor.url} params={dict(descriptor.params)}")

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    descriptor.url,
                    json=dict(descriptor.body),
                    headers=dict(descriptor.headers),
                    params=dict(descriptor.params),
                )
        except httpx.TimeoutException as e:
            raise TTSTransportError(
                f"Request timed out after {self.timeout:g}s: {e}", e
            ) from e
        except httpx.HTTPError as e:
            raise TTSTransportError(f"Failed to make request: {e}", e) from e

        if response.status_code != httpx.codes.OK:
            body = response.text
            raise TTSAPIError(
                f"API error ({response.status_code}): {body}",
                status_code=response.status_code,
                body=body,
            )

        audio_bytes = response.content
        if not audio_bytes:
            raise TTSAPIError(
                "No audio data received from API", status_code=response.status_code
            )

        logger.debug(f"Received {len(audio_bytes)} bytes of audio")
        return audio_bytes
