from __future__ import annotations


class ReportAnalyzerError(Exception):
    """Base class for errors surfaced to the user as a banner."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidFileTypeError(ReportAnalyzerError):
    """Raised when a selected file is outside the MIME/extension allow-list."""

    def __init__(self, message: str = "Invalid file type. Please upload a PDF, CSV, or Excel file.") -> None:
        super().__init__(message)


class FileReadError(ReportAnalyzerError):
    def __init__(self, message: str = "Failed to read the selected file. Please try again.") -> None:
        super().__init__(message)


class ApiKeyMissingError(ReportAnalyzerError):
    """Raised before any remote call when no API credential is configured."""

    def __init__(
        self,
        message: str = (
            "API Key is not configured. Please set the API_KEY environment variable "
            "(or the API_KEY secret) in your deployment platform and restart the application."
        ),
    ) -> None:
        super().__init__(message)


class RemoteCallError(ReportAnalyzerError):
    """Network, auth or quota failure reported by the model provider."""


class ResponseParseError(ReportAnalyzerError):
    """Raised when the model response is not JSON of the expected shape.

    `message` is the user-facing text with a truncated preview of the raw
    response; `reason` names the specific violation.
    """

    PREVIEW_CHARS = 200

    def __init__(self, reason: str, raw_text: str) -> None:
        preview = raw_text[: self.PREVIEW_CHARS]
        super().__init__(f"Failed to parse analysis data. Raw response: {preview}...")
        self.reason = reason
        self.raw_text = raw_text
