# src/markup_lint/report.py
import logging
import sys
from typing import List, Optional, TextIO

from .model import Diagnostic, DiagnosticCode

logger = logging.getLogger(__name__)


class Report:
    """
    Append-only diagnostic sink shared by every document in a run.

    Each recorded diagnostic is written to `stream` as soon as it is recorded,
    in call order. The running `count` is never reset and serves as the
    process exit status.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stderr
        self.diagnostics: List[Diagnostic] = []

    @property
    def count(self) -> int:
        return len(self.diagnostics)

    def record(
            self,
            source: str,
            code: DiagnosticCode,
            message: str,
            detail: Optional[str] = None
    ) -> Diagnostic:
        """
        Appends a diagnostic and writes it out immediately.

        Args:
            source (str): File name or stream label, e.g. '<stdin>'.
            code (DiagnosticCode): The violation kind.
            message (str): Human-readable description.
            detail (Optional[str]): The offending value, if any.

        Returns:
            Diagnostic: The recorded (immutable) diagnostic.
        """
        diagnostic = Diagnostic(source=source, code=code, message=message, detail=detail)
        self.diagnostics.append(diagnostic)
        print(diagnostic, file=self.stream)
        logger.debug("Recorded %s for %s", code.value, source)
        return diagnostic

    def for_source(self, source: str) -> List[Diagnostic]:
        """Returns the diagnostics recorded for one source, in discovery order."""
        return [d for d in self.diagnostics if d.source == source]
