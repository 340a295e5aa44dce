"""Custom TTS exceptions."""


class TTSError(Exception):
    """Base exception for TTS-related errors."""

    def __init__(
        self, message: str, original_error: Exception | None = None
    ) -> None:
        super().__init__(message)
        self.original_error = original_error


class TTSConfigError(TTSError):
    """Exception raised for invalid invocation settings.

    Always raised before any network activity. This typically occurs when:
    - Provider name is not one of the supported providers
    - Voice is not valid for a provider with a closed preset list
    - Speed or voice settings are outside the provider's legal range
    - No text was provided
    - A flag is used with a provider that does not support it
    """

    pass


class TTSAuthError(TTSConfigError):
    """Exception raised when no API credential can be resolved.

    Carries the name of the environment variable that was consulted so the
    operator knows exactly what to set.
    """

    def __init__(
        self,
        message: str,
        env_var: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message, original_error)
        self.env_var = env_var


class TTSTransportError(TTSError):
    """Exception raised when the request never produced a response.

    This typically occurs when:
    - The provider host cannot be reached
    - The request exceeds the configured timeout
    - The connection is dropped mid-response
    """

    pass


class TTSAPIError(TTSError):
    """Exception raised for non-success provider responses.

    This typically occurs when:
    - API key is rejected (401/403)
    - Rate limits are exceeded (429 error)
    - Request format is invalid (4xx errors)
    - API server is unavailable (5xx errors)
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message, original_error)
        self.status_code = status_code
        self.body = body


class TTSPlaybackError(TTSError):
    """Exception raised when audio cannot be decoded or played."""

    pass
