class VueUIError(Exception):
    """Base class for errors raised by the vue_ui package."""


class DocumentNotFoundError(VueUIError):
    """Raised when a document could not be fetched from any mirror."""

    def __init__(self, path: str, attempts: int):
        super().__init__(f"Document '{path}' not found after {attempts} attempt(s)")
        self.path = path
        self.attempts = attempts


class AIProviderError(VueUIError):
    """Raised when the external LLM call fails or returns unusable output."""


class AINotConfiguredError(AIProviderError):
    """Raised when an LLM-backed tool is called without API credentials."""
