from docsum.core.constants import GENERIC_FAILURE_MESSAGE


class AppError(Exception):
    """Base class for all application errors.

    ``detail`` is the internal description that goes to the logs.
    ``public_message`` is the only text a client ever sees.
    """

    status_code = 500
    code = "internal_error"
    public_message = GENERIC_FAILURE_MESSAGE

    def __init__(self, detail: str | None = None) -> None:
        detail = detail or self.public_message
        super().__init__(detail)
        self.detail = detail


class InvalidRequestError(AppError):
    """Client sent a malformed or invalid request (400)."""

    status_code = 400
    code = "invalid_request"
    public_message = "Invalid request."


class MissingFileError(InvalidRequestError):
    """The multipart body has no ``document`` part (400)."""

    code = "missing_file"
    public_message = "No file uploaded."


class UnsupportedMediaTypeError(InvalidRequestError):
    """The uploaded file is not a PDF, PNG or JPEG (400)."""

    code = "unsupported_media_type"
    public_message = "Unsupported file type."


class InvalidSummaryLengthError(InvalidRequestError):
    """``summaryLength`` is not one of short, medium or long (400)."""

    code = "invalid_summary_length"
    public_message = "Invalid summary length."


class RequestTooLargeError(AppError):
    """Request body exceeds the configured upload cap (413)."""

    status_code = 413
    code = "request_too_large"
    public_message = "File too large."


class ConfigurationError(AppError):
    """Server misconfiguration (500)."""

    status_code = 500
    code = "configuration_error"
    public_message = "Server misconfigured."


class MissingCredentialError(ConfigurationError):
    """The generative service credential is not configured. Fatal at startup."""

    code = "missing_credential"


class ExtractionError(AppError):
    """PDF parsing or OCR failed (500)."""

    status_code = 500
    code = "extraction_failed"


class GenerationError(AppError):
    """The generative-text service failed or returned nothing usable (500)."""

    status_code = 500
    code = "generation_failed"
