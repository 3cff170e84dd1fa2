from ...model import DiagnosticCode
from ...report import Report
from ..core import lint_spec
from ..models import DocumentNode
from ..predicates import ANY_VALUE, has_ancestor, has_attribute, is_element


# --- RULES ---

@lint_spec(codes=[DiagnosticCode.MISSING_LAZY_LOADING, DiagnosticCode.MISSING_MODULE_TYPE])
def lint_lazy_loading(report: Report, node: DocumentNode, source: str) -> None:
    """
    Rule: <img> and <iframe> need loading=lazy, <script> needs type=module.
    Both let the browser defer work until the resource is actually needed.
    """
    if is_element(node, "img") or is_element(node, "iframe"):
        if not has_attribute(node.attrs, "loading", "lazy"):
            report.record(source, DiagnosticCode.MISSING_LAZY_LOADING, "<img>/<iframe> missing loading=lazy")
    elif is_element(node, "script"):
        if not has_attribute(node.attrs, "type", "module"):
            report.record(source, DiagnosticCode.MISSING_MODULE_TYPE, "<script> missing type=module")


@lint_spec(codes=[DiagnosticCode.MISSING_WIDTH, DiagnosticCode.MISSING_HEIGHT])
def lint_width_and_height(report: Report, node: DocumentNode, source: str) -> None:
    """
    Rule: <img> declares both width and height so the layout does not reflow
    once the image arrives. Each missing dimension is reported on its own.
    """
    if not is_element(node, "img"):
        return
    if not has_attribute(node.attrs, "width", ANY_VALUE):
        report.record(source, DiagnosticCode.MISSING_WIDTH, "<img> missing width")
    if not has_attribute(node.attrs, "height", ANY_VALUE):
        report.record(source, DiagnosticCode.MISSING_HEIGHT, "<img> missing height")


@lint_spec(codes=[DiagnosticCode.MISSING_ALT])
def lint_alt_text(report: Report, node: DocumentNode, source: str) -> None:
    if is_element(node, "img") and not has_attribute(node.attrs, "alt", ANY_VALUE):
        report.record(source, DiagnosticCode.MISSING_ALT, "<img> missing alt")


@lint_spec(codes=[DiagnosticCode.IMG_NOT_IN_FIGURE])
def lint_img_nested_in_figure(report: Report, node: DocumentNode, source: str) -> None:
    # Any enclosing <figure> counts, not only the direct parent
    if is_element(node, "img") and not has_ancestor(node, "figure"):
        report.record(source, DiagnosticCode.IMG_NOT_IN_FIGURE, "<img> not inside <figure>")
