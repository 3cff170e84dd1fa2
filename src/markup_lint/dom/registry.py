# src/markup_lint/dom/registry.py
from typing import List, Set, Tuple

from ..model import DiagnosticCode
from .core import LintRule
from .elements.anchor import lint_a_name
from .elements.figure import lint_figure_has_figcaption
from .elements.image import (
    lint_alt_text,
    lint_img_nested_in_figure,
    lint_lazy_loading,
    lint_width_and_height,
)
from .elements.quotes import lint_curly_quotes
from .elements.timestamp import lint_time_formatting

# The complete, fixed rule battery in evaluation order.
# Rules are independent of each other; the walker applies all of them to every node.
RULE_BATTERY: Tuple[LintRule, ...] = (
    lint_lazy_loading,
    lint_width_and_height,
    lint_alt_text,
    lint_a_name,
    lint_img_nested_in_figure,
    lint_time_formatting,
    lint_figure_has_figcaption,
    lint_curly_quotes,
)

# Emitted by the nesting validator and the controller rather than by a tree rule
NON_RULE_CODES: Tuple[DiagnosticCode, ...] = (
    DiagnosticCode.TAG_STACK_UNDERFLOW,
    DiagnosticCode.UNMATCHED_PAIR,
    DiagnosticCode.UNCLOSED_TAGS,
    DiagnosticCode.READ_ERROR,
    DiagnosticCode.PARSE_ERROR,
)


def get_all_possible_codes() -> List[str]:
    """
    Returns every diagnostic code the linter can emit, sorted.
    Tree rule codes are collected from their @lint_spec declarations.
    """
    codes: Set[DiagnosticCode] = set(NON_RULE_CODES)
    for rule in RULE_BATTERY:
        codes.update(getattr(rule, "defined_codes", []))
    return sorted(code.value for code in codes)
