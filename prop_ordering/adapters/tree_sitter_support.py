"""
Tree-sitter infrastructure for shape adapters.
Provides grammar selection, parsing and node text/position utilities.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Iterator, List, Optional, Tuple, Type

from tree_sitter import Language, Node, Parser, Tree


def _utf8_width(ch: str) -> int:
    cp = ord(ch)
    if cp < 0x80:
        return 1
    if cp < 0x800:
        return 2
    if cp < 0x10000:
        return 3
    return 4


class TreeSitterDocument(ABC):
    """
    Wrapper for a Tree-sitter parsed document.
    """

    def __init__(self, text: str, ext: str):
        self.text = text
        self.ext = ext
        self.tree: Optional[Tree] = None
        self._text_bytes = text.encode('utf-8')
        self._line_starts: Optional[List[int]] = None
        self._char_at_byte: Optional[List[int]] = None
        self._parse()

    @abstractmethod
    def get_language(self) -> Language:
        """
        Get Language instance for the parser.

        Returns:
            Language instance
        """
        pass

    def get_parser(self) -> Parser:
        return Parser(self.get_language())

    def _parse(self):
        """Parse the document with Tree-sitter."""
        parser = self.get_parser()
        self.tree = parser.parse(self._text_bytes)

    @property
    def root_node(self) -> Node:
        """Get the root node of the parsed tree."""
        if not self.tree:
            raise RuntimeError("Document not parsed")
        return self.tree.root_node

    def walk_tree(self, start_node: Optional[Node] = None) -> Iterator[Node]:
        """
        Walk the tree using TreeCursor for efficient traversal.

        Args:
            start_node: Node to start from (default: root)

        Yields:
            Node objects in depth-first order
        """
        if start_node is None:
            start_node = self.root_node

        cursor = start_node.walk()
        visited_children = False

        while True:
            if not visited_children:
                yield cursor.node

                if not cursor.goto_first_child():
                    visited_children = True
            elif cursor.goto_next_sibling():
                visited_children = False
            elif not cursor.goto_parent():
                break
            else:
                visited_children = True

    def get_node_text(self, node: Node) -> str:
        """Get text content for a node."""
        return self._text_bytes[node.start_byte:node.end_byte].decode('utf-8')

    def get_node_range(self, node: Node) -> Tuple[int, int]:
        """Get char range for a node."""
        start_char = self.byte_to_char_position(node.start_byte)
        end_char = self.byte_to_char_position(node.end_byte)
        return start_char, end_char

    @staticmethod
    def get_line_range(node: Node) -> Tuple[int, int]:
        """Get line range (0-based) for a node."""
        return node.start_point[0], node.end_point[0]

    def char_to_line_col(self, char_offset: int) -> Tuple[int, int]:
        """1-based (line, column) of a character offset."""
        if self._line_starts is None:
            starts = [0]
            for i, ch in enumerate(self.text):
                if ch == '\n':
                    starts.append(i + 1)
            self._line_starts = starts

        lo, hi = 0, len(self._line_starts) - 1
        while lo < hi:
            mid = (lo + hi + 1) // 2
            if self._line_starts[mid] <= char_offset:
                lo = mid
            else:
                hi = mid - 1
        return lo + 1, char_offset - self._line_starts[lo] + 1

    def has_error(self) -> bool:
        """Check if the tree has any syntax errors."""
        if not self.tree:
            return True
        return self.root_node.has_error

    def byte_to_char_position(self, byte_pos: int) -> int:
        """
        Correctly convert byte position to character position in Unicode text.
        Guarantees that if position points to the middle of a multi-byte character,
        returns position before that character.
        The byte-to-char table is built once per document.
        """
        if byte_pos <= 0:
            return 0
        if byte_pos >= len(self._text_bytes):
            return len(self.text)
        if len(self._text_bytes) == len(self.text):
            # ASCII only
            return byte_pos

        if self._char_at_byte is None:
            table: List[int] = []
            for i, ch in enumerate(self.text):
                table.extend([i] * _utf8_width(ch))
            self._char_at_byte = table
        return self._char_at_byte[byte_pos]


class TypeScriptDocument(TreeSitterDocument):

    def get_language(self) -> Language:
        import tree_sitter_typescript as tsts
        return Language(tsts.language_typescript())


class TsxDocument(TreeSitterDocument):

    def get_language(self) -> Language:
        import tree_sitter_typescript as tsts
        return Language(tsts.language_tsx())


class JavaScriptDocument(TreeSitterDocument):

    def get_language(self) -> Language:
        import tree_sitter_javascript as tsjs
        return Language(tsjs.language())


_DOCUMENT_BY_EXT: Dict[str, Type[TreeSitterDocument]] = {
    "ts": TypeScriptDocument,
    "mts": TypeScriptDocument,
    "cts": TypeScriptDocument,
    "tsx": TsxDocument,
    "js": JavaScriptDocument,
    "jsx": JavaScriptDocument,
    "mjs": JavaScriptDocument,
    "cjs": JavaScriptDocument,
}


def create_document(text: str, ext: str) -> TreeSitterDocument:
    """Parse ``text`` with the grammar matching ``ext`` (with or without dot); TSX otherwise."""
    ext = ext.lower().lstrip(".")
    return _DOCUMENT_BY_EXT.get(ext, TsxDocument)(text, ext)


__all__ = [
    "Node",
    "TreeSitterDocument",
    "TypeScriptDocument",
    "TsxDocument",
    "JavaScriptDocument",
    "create_document",
]
