from ...model import DiagnosticCode
from ...report import Report
from ..core import lint_spec
from ..models import DocumentNode, NodeKind
from ..predicates import has_ancestor, is_element

STRAIGHT_QUOTES = ("'", '"')

# Text inside these elements is code or markup, not prose
VERBATIM_TAGS = ("pre", "code", "script", "style")

QUOTED_ATTRIBUTES = ("alt", "title")


def has_straight_quotes(value: str) -> bool:
    return any(q in value for q in STRAIGHT_QUOTES)


@lint_spec(codes=[DiagnosticCode.STRAIGHT_QUOTES_TEXT, DiagnosticCode.STRAIGHT_QUOTES_ATTRIBUTE])
def lint_curly_quotes(report: Report, node: DocumentNode, source: str) -> None:
    """
    Rule: prose uses typographic (curly) quotes.

    Checks text nodes outside of <pre>, <code>, <script> and <style>, plus the
    alt and title attributes of <img>. One diagnostic per offending text node
    or attribute.
    """
    if node.kind == NodeKind.TEXT and not any(has_ancestor(node, tag) for tag in VERBATIM_TAGS):
        if has_straight_quotes(node.text):
            report.record(
                source,
                DiagnosticCode.STRAIGHT_QUOTES_TEXT,
                "contains non-curly quotes text node",
                detail=repr(node.text)
            )

    if is_element(node, "img"):
        for key, value in node.attrs.items():
            if key in QUOTED_ATTRIBUTES and has_straight_quotes(value):
                report.record(
                    source,
                    DiagnosticCode.STRAIGHT_QUOTES_ATTRIBUTE,
                    "<img> alt or title contains non-curly quotes"
                )
