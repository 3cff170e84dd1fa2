# src/markup_lint/dom/qngine.py
import logging
from typing import List

from ..report import Report
from .models import DocumentNode
from .registry import RULE_BATTERY

logger = logging.getLogger(__name__)


def lint_tree(report: Report, node: DocumentNode, source: str) -> None:
    """
    Applies the full rule battery to `node` and to every node below it,
    depth-first in pre-order (a node before its children, children in
    document order).

    Every rule runs on every node; a node that produces diagnostics does not
    stop the walk. The tree is only read, so walking the same tree twice
    records the same diagnostics in the same order.

    Args:
        report (Report): Sink receiving the diagnostics.
        node (DocumentNode): Root of the (sub)tree to lint.
        source (str): File name or stream label used in every diagnostic.
    """
    # Explicit stack instead of recursion so deeply nested documents cannot
    # hit the interpreter's recursion limit.
    pending: List[DocumentNode] = [node]
    visited = 0

    while pending:
        current = pending.pop()
        visited += 1

        for rule in RULE_BATTERY:
            rule(report, current, source)

        pending.extend(reversed(current.children))

    logger.debug("Walked %d nodes of %s with %d rules", visited, source, len(RULE_BATTERY))
