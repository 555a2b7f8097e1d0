"""Token highlight spans for single source lines.

Pygments lexes the line with a lexer picked from the buffer file name and
each token is mapped to an editor highlight group.
"""

from __future__ import annotations

import os
from functools import lru_cache

from pygments.lexer import Lexer
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.token import Comment, Keyword, Name, Number, Operator, String, Token
from pygments.util import ClassNotFound

from .host.protocol import HighlightSpan

_TOKEN_GROUPS: tuple[tuple[object, str], ...] = (
    (Comment, "Comment"),
    (String, "String"),
    (Number, "Number"),
    (Keyword, "Keyword"),
    (Name.Function, "Function"),
    (Name.Class, "Type"),
    (Name.Builtin, "Special"),
    (Operator, "Operator"),
)


def group_for_token(token_type) -> str | None:
    """Return the highlight group for a Pygments token type, if any."""
    for parent, group in _TOKEN_GROUPS:
        if token_type in parent:
            return group
    return None


@lru_cache(maxsize=64)
def _lexer_for_filename(filename: str) -> Lexer:
    try:
        return get_lexer_for_filename(filename, stripnl=False, ensurenl=False)
    except ClassNotFound:
        return TextLexer()


def _lexer_for_path(path: str) -> Lexer:
    return _lexer_for_filename(os.path.basename(path))


def source_line_spans(text: str, path: str, offset: int = 0) -> list[HighlightSpan]:
    """Return highlight spans for ``text``, shifted right by ``offset`` columns."""
    if not text or not path:
        return []
    spans: list[HighlightSpan] = []
    for start, token_type, value in _lexer_for_path(path).get_tokens_unprocessed(text):
        if not value or token_type in Token.Text:
            continue
        group = group_for_token(token_type)
        if group is None:
            continue
        end = min(start + len(value), len(text))
        if end > start:
            spans.append(HighlightSpan(group, offset + start, offset + end))
    return spans
