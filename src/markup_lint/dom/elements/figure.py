from ...model import DiagnosticCode
from ...report import Report
from ..core import lint_spec
from ..models import DocumentNode
from ..predicates import has_descendant, is_element


@lint_spec(codes=[DiagnosticCode.FIGURE_MISSING_FIGCAPTION])
def lint_figure_has_figcaption(report: Report, node: DocumentNode, source: str) -> None:
    """Rule: every <figure> contains a <figcaption> somewhere below it."""
    if is_element(node, "figure") and not has_descendant(node, "figcaption"):
        report.record(source, DiagnosticCode.FIGURE_MISSING_FIGCAPTION, "<figure> missing <figcaption> child")
