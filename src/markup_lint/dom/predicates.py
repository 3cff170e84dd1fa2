# src/markup_lint/dom/predicates.py
from typing import Mapping, Optional

from .models import DocumentNode, NodeKind

# Matches any non-empty attribute value in has_attribute()
ANY_VALUE = "*"


def has_attribute(attrs: Mapping[str, str], key: str, value: str) -> bool:
    """
    Checks for an attribute by key.

    With `value` set to ANY_VALUE the attribute only counts when its value is
    non-empty; any other `value` must match exactly.
    """
    if key not in attrs:
        return False
    if value == ANY_VALUE:
        return attrs[key] != ""
    return attrs[key] == value


def is_element(node: DocumentNode, tag: str) -> bool:
    return node.kind == NodeKind.ELEMENT and node.tag == tag


def has_ancestor(node: DocumentNode, tag: str) -> bool:
    """True if any strict ancestor of `node` is a `tag` element."""
    parent = node.parent
    while parent is not None:
        if is_element(parent, tag):
            return True
        parent = parent.parent
    return False


def has_descendant(node: Optional[DocumentNode], tag: str) -> bool:
    """True if any descendant of `node` is a `tag` element (pre-order search)."""
    if node is None:
        return False
    pending = list(reversed(node.children))
    while pending:
        current = pending.pop()
        if is_element(current, tag):
            return True
        pending.extend(reversed(current.children))
    return False
