from ...model import DiagnosticCode
from ...report import Report
from ..core import lint_spec
from ..models import DocumentNode
from ..predicates import ANY_VALUE, has_attribute, is_element


@lint_spec(codes=[DiagnosticCode.DEPRECATED_A_NAME])
def lint_a_name(report: Report, node: DocumentNode, source: str) -> None:
    """
    Rule: <a> must not carry a name attribute.
    `name` on anchors is obsolete; fragment targets should use `id`.
    """
    if is_element(node, "a") and has_attribute(node.attrs, "name", ANY_VALUE):
        report.record(source, DiagnosticCode.DEPRECATED_A_NAME, "<a> has name; should use id")
