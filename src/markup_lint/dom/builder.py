# src/markup_lint/dom/builder.py
import logging
from typing import List, Tuple

from bs4 import BeautifulSoup, Comment, Doctype, NavigableString, Tag
from bs4.element import PageElement, PreformattedString

from .models import DocumentNode, NodeKind

logger = logging.getLogger(__name__)


class DOMBuilder:
    """
    Builder responsible for parsing raw HTML into a DocumentNode tree.

    BeautifulSoup (with the stdlib 'html.parser' backend) does the parsing;
    this class only converts its tree into the read-only node model the
    linter walks.
    """

    def parse_doc(self, html: str) -> DocumentNode:
        """
        Parses raw HTML into a tree rooted at a DOCUMENT node.

        Args:
            html (str): The raw HTML string.

        Returns:
            DocumentNode: The document root. Element children keep source order.
        """
        # Basic cleanup of potentially dirty HTML (e.g., BOM)
        clean_html = (html or "").replace('\ufeff', '')

        # multi_valued_attributes=None keeps e.g. class="a b" as one string
        soup = BeautifulSoup(clean_html, 'html.parser', multi_valued_attributes=None)

        root = DocumentNode(kind=NodeKind.DOCUMENT)
        pending: List[Tuple[PageElement, DocumentNode]] = [
            (child, root) for child in reversed(soup.contents)
        ]
        count = 0

        # Iterative pre-order copy; deep documents must not exhaust the stack
        while pending:
            element, parent = pending.pop()
            node = parent.adopt(self._convert(element))
            count += 1
            if isinstance(element, Tag):
                pending.extend((child, node) for child in reversed(element.contents))

        logger.debug("Built document tree with %d nodes", count)
        return root

    @staticmethod
    def _convert(element: PageElement) -> DocumentNode:
        """Maps a single BeautifulSoup element to a childless DocumentNode."""
        if isinstance(element, Tag):
            attrs = {key: (value if isinstance(value, str) else " ".join(value))
                     for key, value in element.attrs.items()}
            return DocumentNode(kind=NodeKind.ELEMENT, tag=element.name, attrs=attrs)

        # Order matters: Doctype and Comment are PreformattedString subclasses,
        # which in turn subclass NavigableString.
        if isinstance(element, Doctype):
            return DocumentNode(kind=NodeKind.DOCTYPE, text=str(element))
        if isinstance(element, Comment):
            return DocumentNode(kind=NodeKind.COMMENT, text=str(element))
        if isinstance(element, PreformattedString):
            return DocumentNode(kind=NodeKind.OTHER, text=str(element))
        if isinstance(element, NavigableString):
            return DocumentNode(kind=NodeKind.TEXT, text=str(element))

        return DocumentNode(kind=NodeKind.OTHER)
