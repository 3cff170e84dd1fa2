# src/markup_lint/dom/models.py
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, PrivateAttr


class NodeKind(str, Enum):
    """Kinds of nodes the tree builder produces."""
    DOCUMENT = "document"
    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"
    DOCTYPE = "doctype"
    OTHER = "other"


class DocumentNode(BaseModel):
    """
    A node in the parsed document tree.

    Element nodes carry a tag name and an ordered attribute mapping, text nodes
    carry their character data. Children are owned by the node; the parent
    link is a non-owning back reference set by `adopt()` and kept out of
    serialization so the model never recurses into itself.
    """
    kind: NodeKind
    tag: Optional[str] = None
    attrs: Dict[str, str] = Field(default_factory=dict)
    text: str = ""
    children: List['DocumentNode'] = Field(default_factory=list)

    _parent: Optional['DocumentNode'] = PrivateAttr(default=None)

    @property
    def parent(self) -> Optional['DocumentNode']:
        return self._parent

    @property
    def first_child(self) -> Optional['DocumentNode']:
        return self.children[0] if self.children else None

    @property
    def next_sibling(self) -> Optional['DocumentNode']:
        if self._parent is None:
            return None
        siblings = self._parent.children
        for i, sibling in enumerate(siblings):
            if sibling is self:
                return siblings[i + 1] if i + 1 < len(siblings) else None
        return None

    def adopt(self, child: 'DocumentNode') -> 'DocumentNode':
        """Appends `child` and points its parent link at this node."""
        child._parent = self
        self.children.append(child)
        return child

    def __repr__(self) -> str:
        if self.kind == NodeKind.ELEMENT:
            return f"DocumentNode(<{self.tag}>, attrs={self.attrs!r}, children={len(self.children)})"
        return f"DocumentNode({self.kind.value}, text={self.text[:30]!r})"
