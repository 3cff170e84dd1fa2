from typing import Callable, List

from ..model import DiagnosticCode
from ..report import Report
from .models import DocumentNode

# Signature shared by every rule in the battery: (report, node, source) -> None
LintRule = Callable[[Report, DocumentNode, str], None]


def lint_spec(codes: List[DiagnosticCode]):
    """
    Decorator to declare which diagnostic codes a rule function can emit.
    Lets the registry list every possible code without running the rules.
    """
    def decorator(func):
        func.defined_codes = codes
        return func
    return decorator
