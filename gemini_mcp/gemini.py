import logging
import os

import httpx

from .errors import ConfigurationError, EmptyResponseError, UpstreamError
from .models import GenerationRequest

GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta/models"
API_KEY_URL = "https://aistudio.google.com/apikey"

logger = logging.getLogger(__name__)


def get_api_key() -> str:
    """Read GEMINI_API_KEY from the environment on every call."""
    api_key = os.getenv("GEMINI_API_KEY")
    if not api_key:
        raise ConfigurationError(
            "GEMINI_API_KEY environment variable is required. "
            f"Get your API key from {API_KEY_URL}"
        )
    return api_key


def _extract_text(data: dict) -> str | None:
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    return text if isinstance(text, str) else None


async def generate_content(request: GenerationRequest) -> str:
    """POST one generateContent call and return the generated text.

    Raises ConfigurationError before any network traffic when no API key is
    configured, UpstreamError for HTTP or API-level failures, and
    EmptyResponseError when the response carries no text.
    """
    api_key = get_api_key()
    url = f"{GEMINI_API_BASE}/{request.model}:generateContent"
    headers = {
        "Content-Type": "application/json",
        "x-goog-api-key": api_key,
    }

    logger.info(
        "Calling Gemini: model=%s messages=%d temperature=%s",
        request.model,
        len(request.messages),
        request.temperature,
    )

    try:
        async with httpx.AsyncClient(timeout=None) as client:
            response = await client.post(url, json=request.to_payload(), headers=headers)
    except httpx.TimeoutException as exc:
        logger.error("Gemini request timed out: model=%s", request.model)
        raise UpstreamError("Gemini API request timed out") from exc
    except httpx.RequestError as exc:
        logger.error("Gemini unreachable: model=%s error=%s", request.model, exc)
        raise UpstreamError(f"Gemini API request failed: {exc}") from exc

    if not response.is_success:
        logger.error("Gemini HTTP error %s: model=%s", response.status_code, request.model)
        raise UpstreamError(
            f"Gemini API error ({response.status_code}): {response.text}",
            status_code=response.status_code,
            body=response.text,
        )

    try:
        data = response.json()
    except ValueError as exc:
        logger.error("Gemini returned invalid JSON: model=%s", request.model)
        raise UpstreamError(
            "Gemini API returned invalid JSON",
            status_code=response.status_code,
            body=response.text,
        ) from exc

    # The API can report failures inside a 2xx body
    if isinstance(data, dict) and data.get("error") is not None:
        error_info = data["error"]
        message = None
        if isinstance(error_info, dict):
            message = error_info.get("message")
        logger.error("Gemini API error: model=%s message=%s", request.model, message)
        raise UpstreamError(
            f"Gemini API error: {message or 'Unknown error'}",
            status_code=response.status_code,
            body=response.text,
        )

    text = _extract_text(data)
    if not text:
        logger.error("Gemini returned no content: model=%s", request.model)
        raise EmptyResponseError("No response content returned from Gemini")

    return text
