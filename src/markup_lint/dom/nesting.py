# src/markup_lint/dom/nesting.py
import logging
from typing import Iterable, List

from ..model import DiagnosticCode
from ..report import Report
from .tokenizer import Token, TokenKind

logger = logging.getLogger(__name__)


def lint_nesting(report: Report, tokens: Iterable[Token], source: str) -> None:
    """
    Checks that every start tag is closed by a matching end tag.

    Scans the raw token stream (not the parsed tree, which the parser has
    already repaired) with an explicit stack of open tag names:

    - an end tag with nothing open is a stack underflow; nothing is popped;
    - an end tag that does not match the innermost open tag is an unmatched
      pair, and the innermost tag is popped anyway so the scan can recover;
    - tags still open at the end are reported once, in opening order.

    Self-closing tags, text and comments never touch the stack.
    """
    stack: List[str] = []

    for kind, tag in tokens:
        if kind == TokenKind.START_TAG:
            stack.append(tag)
        elif kind == TokenKind.END_TAG:
            if not stack:
                report.record(source, DiagnosticCode.TAG_STACK_UNDERFLOW, "tag stack underflow", detail=f"</{tag}>")
                continue
            previous = stack.pop()
            if tag != previous:
                report.record(source, DiagnosticCode.UNMATCHED_PAIR, "Unmatched pair", detail=f"</{tag}> <{previous}>")

    if stack:
        report.record(source, DiagnosticCode.UNCLOSED_TAGS, "Unclosed tags", detail=" ".join(f"<{t}>" for t in stack))

    logger.debug("Nesting scan of %s finished with %d open tags", source, len(stack))
