from __future__ import annotations

from enum import Enum
from html.parser import HTMLParser
from typing import Iterator, List, NamedTuple, Optional, Tuple


class TokenKind(str, Enum):
    START_TAG = "start_tag"
    END_TAG = "end_tag"
    SELF_CLOSING_TAG = "self_closing_tag"
    OTHER = "other"


class Token(NamedTuple):
    kind: TokenKind
    tag: str = ""


class _TagTokenizer(HTMLParser):
    """
    Streaming SAX parser that flattens markup into tag tokens.
    Text, comments and declarations collapse into OTHER tokens.
    """

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.tokens: List[Token] = []

    def handle_starttag(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> None:
        self.tokens.append(Token(TokenKind.START_TAG, tag))

    def handle_endtag(self, tag: str) -> None:
        self.tokens.append(Token(TokenKind.END_TAG, tag))

    def handle_startendtag(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> None:
        # <img/> opens and closes itself; it never touches the open-tag stack
        self.tokens.append(Token(TokenKind.SELF_CLOSING_TAG, tag))

    def handle_data(self, data: str) -> None:
        self.tokens.append(Token(TokenKind.OTHER))

    def handle_comment(self, data: str) -> None:
        self.tokens.append(Token(TokenKind.OTHER))

    def handle_decl(self, decl: str) -> None:
        self.tokens.append(Token(TokenKind.OTHER))

    def handle_pi(self, data: str) -> None:
        self.tokens.append(Token(TokenKind.OTHER))

    def unknown_decl(self, data: str) -> None:
        self.tokens.append(Token(TokenKind.OTHER))


def tokenize(html: str) -> Iterator[Token]:
    """Yields the tag tokens of `html` in source order."""
    tokenizer = _TagTokenizer()
    tokenizer.feed(html or "")
    tokenizer.close()
    yield from tokenizer.tokens


class TokenStream:
    """
    Re-readable token view over a source text.
    Every iteration starts again from the beginning of the text.
    """

    def __init__(self, html: str):
        self.html = html

    def __iter__(self) -> Iterator[Token]:
        return tokenize(self.html)
