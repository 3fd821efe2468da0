"""TreeSitter parser base."""

from pathlib import Path

import tree_sitter

from gostub.logger import get_logger
from gostub.utils.exceptions import ParsingError

logger = get_logger(__name__)


class TreeSitterParser:
    """Base TreeSitter parser."""

    language_name = "unknown"

    def __init__(self, language: tree_sitter.Language | None = None) -> None:
        self.language: tree_sitter.Language | None = language
        if language is not None:
            self.parser = tree_sitter.Parser(language)
        else:
            self.parser = tree_sitter.Parser()

    def parse_content(
        self, content: bytes, filename: str = "<string>"
    ) -> tree_sitter.Tree:
        """Parse content and return the syntax tree.

        Raises:
            ParsingError: If the content contains syntax errors.
        """
        if not self.language:
            msg = "Language not set for parser"
            raise ValueError(msg)

        tree = self.parser.parse(content)
        if tree.root_node.has_error:
            error_node = self.find_error_node(tree.root_node)
            line = error_node.start_point[0] + 1 if error_node else None
            msg = f"Syntax error in {filename}"
            if line:
                msg += f" at line {line}"
            raise ParsingError(
                msg,
                file_path=filename,
                line_number=line,
                language=self.language_name,
            )
        return tree

    def read_file(self, file_path: Path) -> bytes:
        try:
            return file_path.read_bytes()
        except OSError as e:
            msg = f"Cannot read {file_path}: {e}"
            raise ParsingError(
                msg, file_path=str(file_path), language=self.language_name
            ) from e

    def get_node_text(self, node: tree_sitter.Node, content: bytes) -> str:
        """Get text content of a node."""
        return content[node.start_byte : node.end_byte].decode("utf-8", errors="ignore")

    def get_node_line(self, node: tree_sitter.Node) -> int:
        """Get the 1-based start line of a node."""
        return node.start_point[0] + 1

    def find_nodes_by_type(
        self,
        node: tree_sitter.Node,
        node_type: str,
        max_depth: int | None = None,
    ) -> list[tree_sitter.Node]:
        """Find all nodes of a specific type in document order."""
        results = []

        def traverse(n: tree_sitter.Node, depth: int = 0) -> None:
            if max_depth is not None and depth > max_depth:
                return

            if n.type == node_type:
                results.append(n)

            for child in n.children:
                traverse(child, depth + 1)

        traverse(node)
        return results

    def find_error_node(self, node: tree_sitter.Node) -> tree_sitter.Node | None:
        """Return the first ERROR or missing node under ``node``."""
        if node.type == "ERROR" or node.is_missing:
            return node
        for child in node.children:
            if child.has_error or child.is_missing:
                found = self.find_error_node(child)
                if found is not None:
                    return found
        return None
