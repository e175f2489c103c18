from typing import Any, ClassVar, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

from .errors import UnknownToolError, ValidationError

DEFAULT_MODEL = "gemini-3-flash-preview"

VALID_MODELS = (
    # Gemini 3
    "gemini-3-flash-preview",
    "gemini-3-pro-preview",
    "gemini-3-pro-image-preview",
    # Gemini 2.5
    "gemini-2.5-flash-preview-05-20",
    "gemini-2.5-pro-preview-05-06",
    # Gemini 2.0
    "gemini-2.0-flash",
)

MAX_PROMPT_LENGTH = 500_000
MAX_CONTENT_LENGTH = 1_000_000
MAX_FOCUS_LENGTH = 1_000

Role = Literal["user", "model"]


# ── Tool requests ────────────────────────────────────────────────────────────

class ToolRequest(BaseModel):
    tool_name: ClassVar[str]

    model: Optional[str] = None

    @field_validator("model")
    @classmethod
    def _known_model(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and value not in VALID_MODELS:
            raise PydanticCustomError(
                "invalid_model",
                "Invalid model. Valid options: {options}",
                {"options": ", ".join(VALID_MODELS)},
            )
        return value

    @property
    def resolved_model(self) -> str:
        return self.model or DEFAULT_MODEL


class AnalyzeRequest(ToolRequest):
    tool_name: ClassVar[str] = "gemini_analyze"

    prompt: str = Field(..., min_length=1, max_length=MAX_PROMPT_LENGTH)
    context: Optional[str] = Field(None, max_length=MAX_CONTENT_LENGTH)


class ChatTurn(BaseModel):
    role: Role
    content: str = Field(..., min_length=1)


class ChatRequest(ToolRequest):
    tool_name: ClassVar[str] = "gemini_chat"

    messages: list[ChatTurn] = Field(..., min_length=1)


class SummarizeRequest(ToolRequest):
    tool_name: ClassVar[str] = "gemini_summarize"

    content: str = Field(..., min_length=1, max_length=MAX_CONTENT_LENGTH)
    focus: Optional[str] = Field(None, max_length=MAX_FOCUS_LENGTH)


AnyToolRequest = Union[AnalyzeRequest, ChatRequest, SummarizeRequest]

REQUEST_MODELS: dict[str, type[ToolRequest]] = {
    request_model.tool_name: request_model
    for request_model in (AnalyzeRequest, ChatRequest, SummarizeRequest)
}


# ── Upstream request ─────────────────────────────────────────────────────────

class GeminiMessage(BaseModel):
    role: Role
    text: str

    def to_payload(self) -> dict:
        return {"role": self.role, "parts": [{"text": self.text}]}


class GenerationRequest(BaseModel):
    messages: list[GeminiMessage]
    model: str = DEFAULT_MODEL
    temperature: float = 0.7
    max_output_tokens: int = 8192

    def to_payload(self) -> dict:
        return {
            "contents": [message.to_payload() for message in self.messages],
            "generationConfig": {
                "temperature": self.temperature,
                "maxOutputTokens": self.max_output_tokens,
            },
        }


# ── Tool responses ───────────────────────────────────────────────────────────

class ToolResponse(BaseModel):
    text: str
    is_error: bool = False


# ── Validation ───────────────────────────────────────────────────────────────

def _format_issue(error: dict) -> str:
    path = ".".join(str(part) for part in error["loc"]) or "arguments"
    return f"{path}: {error['msg']}"


def validate_arguments(tool_name: str, arguments: Any) -> AnyToolRequest:
    """Validate raw tool arguments, reporting every violated constraint at once."""
    request_model = REQUEST_MODELS.get(tool_name)
    if request_model is None:
        raise UnknownToolError(f"Unknown tool: {tool_name}")

    if arguments is None:
        arguments = {}

    try:
        return request_model.model_validate(arguments)
    except PydanticValidationError as exc:
        raise ValidationError([_format_issue(error) for error in exc.errors()]) from exc
