import logging
from collections import Counter
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from bs4 import ParserRejectedMarkup
from tqdm.auto import tqdm

from markup_lint.dom.builder import DOMBuilder
from markup_lint.dom.nesting import lint_nesting
from markup_lint.dom.qngine import lint_tree
from markup_lint.dom.tokenizer import TokenStream
from markup_lint.model import DiagnosticCode
from markup_lint.report import Report

logger = logging.getLogger(__name__)


class LintController:
    """
    Orchestrates linting of one or more documents into a single Report.

    Documents are processed strictly one after another: the full tree walk,
    then the nesting scan over a fresh token stream of the same text.
    """

    def __init__(
            self,
            report: Report,
            builder: Optional[DOMBuilder] = None,
            encoding: str = "utf-8",
            progress: bool = True
    ):
        self.report = report
        self.builder = builder or DOMBuilder()
        self.encoding = encoding
        self.progress = progress

        self.documents_linted = 0
        self.documents_with_issues = 0

    def lint_source(self, html: str, source: str) -> int:
        """
        Lints one document that is already in memory.

        Both views of the document (tree and token stream) are produced
        before any rule runs. Markup the parser rejects is recorded as a
        PARSE_ERROR diagnostic and the document is skipped.

        Args:
            html (str): The raw document text.
            source (str): Label used in every diagnostic (file name, '<stdin>').

        Returns:
            int: The number of diagnostics this document added to the report.
        """
        before = self.report.count

        tokens = TokenStream(html)
        try:
            document = self.builder.parse_doc(html)
            # Consumes the stream once; lint_nesting re-reads it from the start
            for _ in tokens:
                pass
        except (ParserRejectedMarkup, AssertionError) as e:
            logger.error("Parser rejected %s: %s", source, e)
            self.report.record(source, DiagnosticCode.PARSE_ERROR, "could not parse document:", detail=str(e))
            return self.report.count - before

        lint_tree(self.report, document, source)
        lint_nesting(self.report, tokens, source)

        added = self.report.count - before
        self.documents_linted += 1
        if added:
            self.documents_with_issues += 1
        logger.debug("%s: %d diagnostics", source, added)
        return added

    def lint_bytes(self, data: bytes, source: str) -> int:
        """
        Decodes raw input with the configured encoding and lints it.
        Undecodable input is recorded as a READ_ERROR diagnostic and skipped.
        """
        try:
            html = data.decode(self.encoding)
        except (UnicodeDecodeError, LookupError) as e:
            logger.error("Could not decode %s: %s", source, e)
            self.report.record(source, DiagnosticCode.READ_ERROR, "could not read input:", detail=str(e))
            return 1
        return self.lint_source(html, source)

    def lint_path(self, path: Path) -> int:
        """
        Reads and lints a single file.
        An unreadable file is recorded as a READ_ERROR diagnostic and skipped.
        """
        source = str(path)
        try:
            data = Path(path).read_bytes()
        except OSError as e:
            logger.error("Could not read %s: %s", source, e)
            self.report.record(source, DiagnosticCode.READ_ERROR, "could not read file:", detail=str(e))
            return 1
        return self.lint_bytes(data, source)

    def lint_paths(self, paths: Iterable[Path]) -> Dict[str, Any]:
        """Lints every file in order and returns a run summary."""
        paths = list(paths)
        show_bar = self.progress and len(paths) > 1

        with tqdm(total=len(paths), desc="Linting", unit="file", disable=not show_bar, leave=False) as pbar:
            for path in paths:
                self.lint_path(path)
                pbar.update(1)

        summary = self.summary()
        logger.info(
            "Linted %d documents, %d with issues, %d diagnostics in total",
            summary["documents_linted"], summary["documents_with_issues"], summary["total_issues"]
        )
        return summary

    def summary(self) -> Dict[str, Any]:
        """Aggregated counters for the whole run so far."""
        breakdown = Counter(d.code.value for d in self.report.diagnostics)
        return {
            "documents_linted": self.documents_linted,
            "documents_with_issues": self.documents_with_issues,
            "total_issues": self.report.count,
            "breakdown": dict(breakdown),
        }
