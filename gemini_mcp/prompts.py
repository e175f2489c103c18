from .models import (
    AnalyzeRequest,
    AnyToolRequest,
    ChatRequest,
    GeminiMessage,
    GenerationRequest,
    SummarizeRequest,
)

DEFAULT_TEMPERATURE = 0.7
SUMMARY_TEMPERATURE = 0.5
MAX_OUTPUT_TOKENS = 8192

CONTEXT_SEPARATOR = "\n\n--- Context ---\n"

SUMMARY_PREFIX = "Please provide a concise summary of the following content:\n\n"
FOCUSED_SUMMARY_PREFIX = (
    "Please summarize the following content, focusing specifically on: {focus}\n\n"
)


def build_analyze_request(request: AnalyzeRequest) -> GenerationRequest:
    text = request.prompt
    if request.context and request.context.strip():
        text = f"{request.prompt}{CONTEXT_SEPARATOR}{request.context}"

    return GenerationRequest(
        messages=[GeminiMessage(role="user", text=text)],
        model=request.resolved_model,
        temperature=DEFAULT_TEMPERATURE,
        max_output_tokens=MAX_OUTPUT_TOKENS,
    )


def build_chat_request(request: ChatRequest) -> GenerationRequest:
    return GenerationRequest(
        messages=[GeminiMessage(role=turn.role, text=turn.content) for turn in request.messages],
        model=request.resolved_model,
        temperature=DEFAULT_TEMPERATURE,
        max_output_tokens=MAX_OUTPUT_TOKENS,
    )


def build_summarize_request(request: SummarizeRequest) -> GenerationRequest:
    prefix = SUMMARY_PREFIX
    if request.focus and request.focus.strip():
        prefix = FOCUSED_SUMMARY_PREFIX.format(focus=request.focus)

    # Lower temperature keeps summaries close to the source text
    return GenerationRequest(
        messages=[GeminiMessage(role="user", text=prefix + request.content)],
        model=request.resolved_model,
        temperature=SUMMARY_TEMPERATURE,
        max_output_tokens=MAX_OUTPUT_TOKENS,
    )


_BUILDERS = {
    AnalyzeRequest: build_analyze_request,
    ChatRequest: build_chat_request,
    SummarizeRequest: build_summarize_request,
}


def build_generation_request(request: AnyToolRequest) -> GenerationRequest:
    """Translate a validated tool request into upstream messages and generation settings."""
    return _BUILDERS[type(request)](request)
