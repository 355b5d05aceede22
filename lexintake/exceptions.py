"""Exception hierarchy for configuration and programming errors.

Only defects in deployment or calling code raise. Anything that can come
from end-user input (malformed payload values, mode-gate contradictions,
bad ZIP codes) is reported inside the orchestrator result instead.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Machine-readable error codes."""

    UNKNOWN_MODE = "UNKNOWN_MODE"
    """The intake mode string is not one of the registered modes."""

    SCHEMA_DEFINITION = "SCHEMA_DEFINITION"
    """A schema, reveal table or mode descriptor is internally inconsistent."""

    PROMPT_COVERAGE = "PROMPT_COVERAGE"
    """A prompt library does not cover every askable field of its schema."""


class LexIntakeError(Exception):
    """Base exception for all lexintake configuration errors."""

    error_code: ErrorCode = ErrorCode.SCHEMA_DEFINITION

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UnknownModeError(LexIntakeError):
    """Raised when an unregistered intake mode string reaches the registry."""

    error_code = ErrorCode.UNKNOWN_MODE

    def __init__(self, mode: object) -> None:
        super().__init__(f"Unknown intake type: {mode!r}")
        self.mode = mode


class SchemaDefinitionError(LexIntakeError):
    """Raised when a schema or mode descriptor fails its structural checks."""

    error_code = ErrorCode.SCHEMA_DEFINITION


class PromptCoverageError(LexIntakeError):
    """Raised when generated prompts do not cover a schema."""

    error_code = ErrorCode.PROMPT_COVERAGE

    def __init__(self, missing: list[str]) -> None:
        super().__init__(f"Guided chat prompt coverage missing: {', '.join(missing)}")
        self.missing = missing
