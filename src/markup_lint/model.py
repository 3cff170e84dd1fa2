from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class DiagnosticCode(str, Enum):
    """
    Every distinguishable violation kind the linter can report.
    The value doubles as the stable identifier shown by `--list-codes`.
    """
    MISSING_LAZY_LOADING = "MISSING_LAZY_LOADING"
    MISSING_MODULE_TYPE = "MISSING_MODULE_TYPE"
    MISSING_WIDTH = "MISSING_WIDTH"
    MISSING_HEIGHT = "MISSING_HEIGHT"
    MISSING_ALT = "MISSING_ALT"
    DEPRECATED_A_NAME = "DEPRECATED_A_NAME"
    IMG_NOT_IN_FIGURE = "IMG_NOT_IN_FIGURE"
    TIME_NEEDS_TEXT = "TIME_NEEDS_TEXT"
    TIME_BAD_FORMAT = "TIME_BAD_FORMAT"
    FIGURE_MISSING_FIGCAPTION = "FIGURE_MISSING_FIGCAPTION"
    STRAIGHT_QUOTES_TEXT = "STRAIGHT_QUOTES_TEXT"
    STRAIGHT_QUOTES_ATTRIBUTE = "STRAIGHT_QUOTES_ATTRIBUTE"

    # Nesting validator
    TAG_STACK_UNDERFLOW = "TAG_STACK_UNDERFLOW"
    UNMATCHED_PAIR = "UNMATCHED_PAIR"
    UNCLOSED_TAGS = "UNCLOSED_TAGS"

    # Input acquisition
    READ_ERROR = "READ_ERROR"
    PARSE_ERROR = "PARSE_ERROR"


class Diagnostic(BaseModel):
    """
    A single reported violation.

    `source` is the file name or stream label, `message` the human-readable
    description and `detail` the offending payload, if any (the bad date
    string, the leftover tag stack, ...).
    """
    model_config = ConfigDict(frozen=True)

    source: str
    code: DiagnosticCode
    message: str
    detail: Optional[str] = None

    def __str__(self) -> str:
        parts = [self.source, self.message]
        if self.detail is not None:
            parts.append(self.detail)
        return " ".join(parts)
