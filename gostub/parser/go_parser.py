"""Go front end: tree-sitter-go syntax trees to declaration trees."""

from pathlib import Path

import tree_sitter
import tree_sitter_go as tsgo

from gostub.config import settings
from gostub.logger import get_logger
from gostub.parser.nodes import (
    ArrayType,
    BadExpr,
    ChanDir,
    ChanType,
    Expr,
    Field,
    FuncType,
    Ident,
    InterfaceType,
    MapType,
    SelectorExpr,
    SourceFile,
    StarExpr,
    StructType,
    TypeSpec,
    VariadicType,
)
from gostub.parser.treesitter_parser import TreeSitterParser

logger = get_logger(__name__)

# Interface method elements across tree-sitter-go releases
METHOD_NODE_TYPES = ("method_elem", "method_spec")


class GoParser(TreeSitterParser):
    """Builds ``SourceFile`` declaration trees from Go source."""

    language_name = "go"

    def __init__(self) -> None:
        super().__init__(tree_sitter.Language(tsgo.language()))

    def parse_file(self, file_path: Path) -> SourceFile:
        """Parse a single Go file."""
        logger.info("Parsing file", path=str(file_path))
        content = self.read_file(file_path)
        return self._build_source(content, file_path)

    def parse_string(self, content: str, filename: str = "<string>") -> SourceFile:
        """Parse Go source held in memory."""
        return self._build_source(content.encode("utf-8"), Path(filename))

    def parse_package(
        self,
        file_path: Path,
        include_package_files: bool | None = None,
    ) -> list[SourceFile]:
        """Parse a file and the other non-test files of its package.

        The requested file comes first in the returned list. Siblings that
        declare a different package are ignored.
        """
        if include_package_files is None:
            include_package_files = settings.parser.include_package_files

        target = self.parse_file(file_path)
        files = [target]
        if not include_package_files:
            return files

        for sibling in sorted(file_path.parent.glob("*.go")):
            if sibling.resolve() == file_path.resolve():
                continue
            if sibling.name.endswith("_test.go"):
                continue
            parsed = self.parse_file(sibling)
            if parsed.package != target.package:
                logger.debug(
                    "Skipping file from other package",
                    path=str(sibling),
                    package=parsed.package,
                )
                continue
            files.append(parsed)

        logger.debug("Parsed package", package=target.package, files=len(files))
        return files

    def _build_source(self, content: bytes, path: Path) -> SourceFile:
        tree = self.parse_content(content, str(path))
        root = tree.root_node
        return SourceFile(
            package=self._extract_package(root, content),
            decls=tuple(self._extract_type_specs(root, content)),
            path=path,
            imports=self._extract_imports(root, content),
        )

    def _extract_package(self, root: tree_sitter.Node, content: bytes) -> str:
        for clause in self.find_nodes_by_type(root, "package_clause", max_depth=1):
            for child in clause.named_children:
                if child.type == "package_identifier":
                    return self.get_node_text(child, content)
        return ""

    def _extract_imports(
        self, root: tree_sitter.Node, content: bytes
    ) -> dict[str, str]:
        """Map each import's local name to its import path."""
        imports: dict[str, str] = {}
        for spec in self.find_nodes_by_type(root, "import_spec"):
            path_node = spec.child_by_field_name("path")
            if path_node is None:
                continue
            import_path = self.get_node_text(path_node, content).strip('"`')
            name_node = spec.child_by_field_name("name")
            if name_node is not None and name_node.type == "package_identifier":
                local = self.get_node_text(name_node, content)
            elif name_node is not None:
                # dot and blank imports introduce no qualifier
                continue
            else:
                local = import_path.rsplit("/", 1)[-1]
            imports[local] = import_path
        return imports

    def _extract_type_specs(
        self, root: tree_sitter.Node, content: bytes
    ) -> list[TypeSpec]:
        specs: list[TypeSpec] = []
        for decl in self.find_nodes_by_type(root, "type_declaration"):
            for child in decl.named_children:
                if child.type not in ("type_spec", "type_alias"):
                    continue
                name_node = child.child_by_field_name("name")
                type_node = child.child_by_field_name("type")
                if name_node is None or type_node is None:
                    continue
                name = self.get_node_text(name_node, content)
                if child.child_by_field_name("type_parameters") is not None:
                    logger.warning(
                        "Skipping generic type declaration",
                        name=name,
                        line=self.get_node_line(child),
                    )
                    continue
                specs.append(
                    TypeSpec(
                        name=name,
                        type=self.convert_type(type_node, content),
                        alias=child.type == "type_alias",
                        line=self.get_node_line(child),
                    )
                )
        return specs

    def convert_type(self, node: tree_sitter.Node, content: bytes) -> Expr:
        """Convert a tree-sitter type node to a type expression."""
        kind = node.type
        if kind == "type_identifier":
            return Ident(self.get_node_text(node, content))
        if kind == "qualified_type":
            package = self.get_node_text(node.child_by_field_name("package"), content)
            name = self.get_node_text(node.child_by_field_name("name"), content)
            return SelectorExpr(Ident(package), Ident(name, package=package))
        if kind == "pointer_type":
            return StarExpr(self._convert_first_named(node, content))
        if kind == "slice_type":
            element = node.child_by_field_name("element")
            return ArrayType(self.convert_type(element, content))
        if kind == "array_type":
            length = node.child_by_field_name("length")
            element = node.child_by_field_name("element")
            return ArrayType(
                self.convert_type(element, content),
                length=self.get_node_text(length, content) if length else None,
            )
        if kind == "map_type":
            return MapType(
                self.convert_type(node.child_by_field_name("key"), content),
                self.convert_type(node.child_by_field_name("value"), content),
            )
        if kind == "channel_type":
            return ChanType(
                self.convert_type(node.child_by_field_name("value"), content),
                direction=self._chan_direction(node),
            )
        if kind == "function_type":
            return self._convert_signature(node, content)
        if kind == "struct_type":
            return StructType()
        if kind == "interface_type":
            return InterfaceType(methods=self._convert_interface(node, content))
        if kind == "parenthesized_type":
            return self._convert_first_named(node, content)
        return BadExpr(kind, self.get_node_text(node, content))

    def _convert_first_named(self, node: tree_sitter.Node, content: bytes) -> Expr:
        for child in node.named_children:
            if child.type != "comment":
                return self.convert_type(child, content)
        return BadExpr(node.type, self.get_node_text(node, content))

    def _chan_direction(self, node: tree_sitter.Node) -> ChanDir:
        tokens = [child.type for child in node.children if not child.is_named]
        if tokens and tokens[0] == "<-":
            return ChanDir.RECV
        if "<-" in tokens:
            return ChanDir.SEND
        return ChanDir.BOTH

    def _convert_signature(self, node: tree_sitter.Node, content: bytes) -> FuncType:
        """Convert anything with ``parameters`` and ``result`` fields."""
        params = node.child_by_field_name("parameters")
        result = node.child_by_field_name("result")
        return FuncType(
            params=self._convert_fields(params, content) if params else (),
            results=self._convert_result(result, content),
        )

    def _convert_result(
        self, node: tree_sitter.Node | None, content: bytes
    ) -> tuple[Field, ...]:
        if node is None:
            return ()
        if node.type == "parameter_list":
            return self._convert_fields(node, content)
        line = self.get_node_line(node)
        return (Field((), self.convert_type(node, content), line),)

    def _convert_fields(
        self, node: tree_sitter.Node, content: bytes
    ) -> tuple[Field, ...]:
        fields: list[Field] = []
        for child in node.named_children:
            type_node = child.child_by_field_name("type")
            if type_node is None:
                continue
            names = tuple(
                self.get_node_text(n, content)
                for n in child.children_by_field_name("name")
            )
            expr = self.convert_type(type_node, content)
            if child.type == "variadic_parameter_declaration":
                expr = VariadicType(expr)
            elif child.type != "parameter_declaration":
                continue
            fields.append(Field(names, expr, self.get_node_line(child)))
        return tuple(fields)

    def _convert_interface(
        self, node: tree_sitter.Node, content: bytes
    ) -> tuple[Field, ...]:
        elements: list[Field] = []
        for child in node.named_children:
            if child.type == "comment":
                continue
            line = self.get_node_line(child)
            if child.type in METHOD_NODE_TYPES:
                name = self.get_node_text(child.child_by_field_name("name"), content)
                signature = self._convert_signature(child, content)
                elements.append(Field((name,), signature, line))
            else:
                # Embedded interfaces and type-set elements
                embedded = self._convert_embedded(child, content)
                elements.append(Field((), embedded, line))
        return tuple(elements)

    def _convert_embedded(self, node: tree_sitter.Node, content: bytes) -> Expr:
        if node.type in ("type_elem", "constraint_elem", "interface_type_name"):
            named = [c for c in node.named_children if c.type != "comment"]
            if len(named) == 1:
                return self.convert_type(named[0], content)
            return BadExpr(node.type, self.get_node_text(node, content))
        return self.convert_type(node, content)
