from .models import DEFAULT_MODEL, VALID_MODELS, AnalyzeRequest, ChatRequest, SummarizeRequest

MODEL_PROPERTY = {
    "type": "string",
    "description": f"Gemini model to use (default: {DEFAULT_MODEL})",
    "enum": list(VALID_MODELS),
    "default": DEFAULT_MODEL,
}

ANALYZE_TOOL = {
    "name": AnalyzeRequest.tool_name,
    "description": (
        "Send a prompt to Google Gemini for analysis. Use for code review, explanations, "
        "research questions, or any task benefiting from Gemini's 1M token context window."
    ),
    "inputSchema": {
        "type": "object",
        "properties": {
            "prompt": {"type": "string", "description": "The question or analysis request"},
            "context": {
                "type": "string",
                "description": "Optional additional context (e.g., file contents, code)",
            },
            "model": MODEL_PROPERTY,
        },
        "required": ["prompt"],
    },
}

CHAT_TOOL = {
    "name": ChatRequest.tool_name,
    "description": (
        "Multi-turn conversation with Gemini. Pass the full conversation history "
        "on every call for context-aware responses."
    ),
    "inputSchema": {
        "type": "object",
        "properties": {
            "messages": {
                "type": "array",
                "description": "Array of conversation messages, oldest first",
                "items": {
                    "type": "object",
                    "properties": {
                        "role": {
                            "type": "string",
                            "enum": ["user", "model"],
                            "description": "Role of the message sender",
                        },
                        "content": {"type": "string", "description": "Message content"},
                    },
                    "required": ["role", "content"],
                },
            },
            "model": MODEL_PROPERTY,
        },
        "required": ["messages"],
    },
}

SUMMARIZE_TOOL = {
    "name": SummarizeRequest.tool_name,
    "description": (
        "Summarize large text or code using Gemini's 1M token context window. "
        "Ideal for summarizing entire codebases, long documents, or extensive logs."
    ),
    "inputSchema": {
        "type": "object",
        "properties": {
            "content": {"type": "string", "description": "The text or code to summarize"},
            "focus": {
                "type": "string",
                "description": (
                    "Optional focus area (e.g., 'security issues', 'architecture', 'key functions')"
                ),
            },
            "model": MODEL_PROPERTY,
        },
        "required": ["content"],
    },
}

TOOL_LIST = [ANALYZE_TOOL, CHAT_TOOL, SUMMARIZE_TOOL]
