class GeminiMCPError(Exception):
    """Base for every failure a tool call reports back as an error result."""


class ConfigurationError(GeminiMCPError):
    pass


class UnknownToolError(GeminiMCPError):
    pass


class ValidationError(GeminiMCPError):
    """Every constraint violated by a tool's arguments, as "path: message" strings."""

    def __init__(self, issues: list[str]):
        self.issues = issues
        super().__init__("; ".join(issues))


class UpstreamError(GeminiMCPError):
    """Gemini call failed.

    status_code and body hold the HTTP status and raw response text; both are
    None when the request never got a response (timeout, connection error).
    """

    def __init__(self, message: str, status_code: int | None = None, body: str | None = None):
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class EmptyResponseError(GeminiMCPError):
    """Gemini answered successfully but without any generated text."""
