"""Tests for token highlight spans of single source lines."""

from __future__ import annotations

import unittest

from pygments.lexers import TextLexer
from pygments.token import Comment, Keyword, Name, Token

from vessel.host.protocol import HighlightSpan
from vessel.syntax import _lexer_for_path, group_for_token, source_line_spans


class SourceLineSpansTests(unittest.TestCase):
    def test_python_keywords_and_function_names(self) -> None:
        spans = source_line_spans("def load(): pass", "/src/app.py")

        self.assertIn(HighlightSpan("Keyword", 0, 3), spans)
        self.assertIn(HighlightSpan("Function", 4, 8), spans)

    def test_offset_shifts_spans(self) -> None:
        spans = source_line_spans("def load(): pass", "/src/app.py", offset=10)

        self.assertIn(HighlightSpan("Keyword", 10, 13), spans)

    def test_unknown_file_type_has_no_spans(self) -> None:
        self.assertEqual(source_line_spans("some words", "/tmp/notes.unknownext"), [])

    def test_empty_text_or_path_has_no_spans(self) -> None:
        self.assertEqual(source_line_spans("", "/src/app.py"), [])
        self.assertEqual(source_line_spans("x = 1", ""), [])

    def test_lexer_is_chosen_by_full_file_name(self) -> None:
        self.assertEqual(_lexer_for_path("/x/CMakeLists.txt").name, "CMake")
        self.assertIsInstance(_lexer_for_path("/y/notes.txt"), TextLexer)

    def test_group_for_token(self) -> None:
        self.assertEqual(group_for_token(Keyword.Namespace), "Keyword")
        self.assertEqual(group_for_token(Comment.Single), "Comment")
        self.assertEqual(group_for_token(Name.Function), "Function")
        self.assertIsNone(group_for_token(Name))
        self.assertIsNone(group_for_token(Token.Punctuation))


if __name__ == "__main__":
    unittest.main()
