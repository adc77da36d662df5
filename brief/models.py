"""Pydantic models, dataclass Config, and exceptions for the brief pipeline.

The scoring and ranking logic lives in ``extractive.py`` and ``keywords.py``.
This module only defines the *schema* of the data that flows between the pure
core and its adapters: the request, the result, runtime configuration and the
error taxonomy.
"""

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, Field, model_validator

# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------

SummaryLength = Literal["short", "medium", "long"]
"""How many sentences the summary keeps (see ``SENTENCE_COUNTS``)."""

SummaryFormat = Literal["paragraph", "bullets"]
"""How the selected sentences are rendered."""

SENTENCE_COUNTS: dict[str, int] = {
    "short": 2,
    "medium": 4,
    "long": 6,
}

#: Inputs shorter than this are rejected before any scoring happens.
MIN_CHARS = 100

#: Upper bound on the number of keywords returned per document.
KEYWORD_LIMIT = 10

# ---------------------------------------------------------------------------
# Core value types
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Sentence:
    """One terminal-punctuation-delimited sentence of a document.

    Attributes:
        index: Position of the sentence in the document (0-based).
        raw:   The exact matched substring, surrounding whitespace included.
        text:  ``raw`` stripped of surrounding whitespace.
    """

    index: int
    raw: str
    text: str


@dataclass(frozen=True)
class ScoredSentence:
    """A sentence with its average term frequency score."""

    index: int
    text: str
    score: float


# ---------------------------------------------------------------------------
# Request / response
# ---------------------------------------------------------------------------


class SummaryRequest(BaseModel):
    """One summarization request as handed over by an adapter (CLI, UI)."""

    text: str
    length: SummaryLength = "medium"
    format: SummaryFormat = "paragraph"


class SummaryResult(BaseModel):
    """Outcome of a single request: either outputs or an error, never both.

    ``sentences`` holds the selected sentences in document order; ``summary``
    is the same sentences rendered in the requested format.
    """

    summary: str | None = None
    sentences: list[str] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)
    error: str | None = None

    @model_validator(mode="after")
    def _validate_exclusive(self) -> "SummaryResult":
        if self.error is not None:
            if self.summary is not None or self.sentences or self.keywords:
                raise ValueError("an error result must not carry summary output")
            return self

        if self.summary is None:
            raise ValueError("summary is required when error is null")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, message: str) -> "SummaryResult":
        return cls(error=message)


# ---------------------------------------------------------------------------
# Runtime settings (plain dataclass)
# ---------------------------------------------------------------------------


@dataclass
class Config:
    """Runtime configuration for the brief pipeline.

    All fields correspond to CLI flags.

    Attributes:
        length:        Default summary length when a request does not say.
        format:        Default summary format when a request does not say.
        min_chars:     Minimum input length accepted by ``validate_text``.
        keyword_limit: Maximum number of keywords returned.
        delay_s:       Artificial processing delay in seconds before scoring.
                       Has no functional role; ``0`` disables it.
        verbose:       If True, the CLI logs at DEBUG level.
    """

    length: SummaryLength = "medium"
    format: SummaryFormat = "paragraph"
    min_chars: int = MIN_CHARS
    keyword_limit: int = KEYWORD_LIMIT
    delay_s: float = 0.0
    verbose: bool = False

    def __post_init__(self) -> None:
        if self.keyword_limit < 0:
            raise ValueError(f"keyword_limit must be >= 0, got {self.keyword_limit}")
        if self.min_chars < 1:
            raise ValueError(f"min_chars must be >= 1, got {self.min_chars}")
        if self.delay_s < 0:
            raise ValueError(f"delay_s must be >= 0, got {self.delay_s}")


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class SummarizerError(Exception):
    """Base class for every error surfaced to the user.

    ``str(exc)`` is always a short user-facing message, never a traceback.
    """


class ValidationFailure(SummarizerError):
    """Raised when the input text fails the request preconditions."""


class EmptyInputError(ValidationFailure):
    """Raised when the input is blank or whitespace-only."""

    def __init__(self, message: str = "Please enter some text to summarize") -> None:
        super().__init__(message)


class TooShortError(ValidationFailure):
    """Raised when the input is below the minimum character count."""

    def __init__(self, min_chars: int = MIN_CHARS) -> None:
        self.min_chars = min_chars
        super().__init__(
            f"Text is too short. Please enter at least {min_chars} characters "
            "for meaningful summarization."
        )


class UnsupportedFormatError(SummarizerError):
    """Raised when ingestion is asked to read a non-text file."""


class ProcessingError(SummarizerError):
    """Wraps any unexpected failure during scoring or formatting.

    Attributes:
        cause: The original exception that triggered the failure.
    """

    def __init__(self, cause: Exception) -> None:
        self.cause = cause
        super().__init__("An error occurred while summarizing. Please try again.")
