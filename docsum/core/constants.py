"""Application-wide constants."""

# ---------------------------------------------------------------------------
# Generative-text service
# ---------------------------------------------------------------------------
GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"
GEMINI_MODEL = "gemini-2.5-flash"

SUMMARY_PROMPT_TEMPLATE = (
    "Generate a {length} summary of the following document. "
    "Focus on key points and main ideas. "
    'Document content: "{text}"'
)

# ---------------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------------
OCR_LANGUAGE = "eng"
PDF_PAGE_SEPARATOR = "\n\n"

# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------
GREETING = "Hello! The server is running. 🚀"
SUCCESS_MESSAGE = "Summary generated successfully!"
GENERIC_FAILURE_MESSAGE = "Failed to generate summary."
