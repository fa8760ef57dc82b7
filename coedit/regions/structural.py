"""
Structural region extraction backed by tree-sitter.

Only the TypeScript/JavaScript family ships an adapter.  Other language
families can plug their own binding in behind ``StructuralAdapter`` and
register it through ``StructuralStrategy``.

Uses tree-sitter >= 0.22 API with individual language packages.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

import tree_sitter as ts

from ..errors import StructuralParseError
from .models import CodeRegion, RegionType, make_region

logger = logging.getLogger(__name__)


class StructuralAdapter(ABC):
    """Turns one file's content into regions by walking a syntax tree."""

    @abstractmethod
    def extract(self, file_path: str, content: str) -> list[CodeRegion]:
        """Return the file's regions; raise ``StructuralParseError`` on failure."""


# ---------------------------------------------------------------------------
# Grammar lookup
# ---------------------------------------------------------------------------

def _get_lang_func(grammar: str):
    """Return the tree-sitter language() function for *grammar*, or None."""
    if grammar == "typescript":
        import tree_sitter_typescript as m
        return m.language_typescript
    if grammar == "tsx":
        import tree_sitter_typescript as m
        return m.language_tsx
    if grammar == "javascript":
        import tree_sitter_javascript as m
        return m.language
    return None


# Node kinds emitted as regions
_FUNCTION_NODES = {
    "function_declaration",
    "generator_function_declaration",
    "function_signature",
}
_CLASS_NODES = {"class_declaration", "abstract_class_declaration"}
_VARIABLE_NODES = {"lexical_declaration", "variable_declaration"}
_SIMPLE_NODES = {
    "interface_declaration": RegionType.INTERFACE,
    "type_alias_declaration": RegionType.TYPE_DEFINITION,
    "enum_declaration": RegionType.ENUM,
}

# Leaf kinds counted as identifier tokens for dependency sets
_IDENTIFIER_NODES = {
    "identifier",
    "property_identifier",
    "type_identifier",
    "shorthand_property_identifier",
    "shorthand_property_identifier_pattern",
    "private_property_identifier",
}


def _text(node) -> str:
    """Decode a tree-sitter Node's text as UTF-8."""
    if node is None or not node.text:
        return ""
    return node.text.decode("utf-8", errors="replace")


def _lines(node) -> tuple[int, int]:
    """Return the 1-indexed (start, end) lines of *node*."""
    return node.start_point[0] + 1, node.end_point[0] + 1


def collect_identifiers(node) -> set[str]:
    """Every identifier-like token anywhere inside *node*."""
    found: set[str] = set()
    stack = [node]
    while stack:
        current = stack.pop()
        if current.type in _IDENTIFIER_NODES:
            name = _text(current)
            if name:
                found.add(name)
        stack.extend(current.children)
    return found


class TreeSitterAdapter(StructuralAdapter):
    """Top-level declaration extractor for TypeScript, TSX and JavaScript."""

    def __init__(self, grammar: str = "typescript") -> None:
        self.grammar = grammar
        self._parser: Optional[ts.Parser] = None

    def _get_parser(self) -> ts.Parser:
        """Return a cached tree-sitter Parser for this adapter's grammar."""
        if self._parser is not None:
            return self._parser
        try:
            func = _get_lang_func(self.grammar)
            if func is None:
                raise StructuralParseError(f"Unknown grammar: {self.grammar}")
            self._parser = ts.Parser(ts.Language(func()))
        except ImportError as exc:
            raise StructuralParseError(
                f"tree-sitter grammar {self.grammar} not installed: {exc}"
            ) from exc
        return self._parser

    def extract(self, file_path: str, content: str) -> list[CodeRegion]:
        parser = self._get_parser()
        try:
            tree = parser.parse(content.encode("utf-8"))
        except Exception as exc:
            raise StructuralParseError(f"Parse error: {exc}") from exc

        root = tree.root_node
        if root.has_error:
            logger.debug(
                "[Regions] %s has syntax errors, extracting what parsed", file_path
            )

        regions: list[CodeRegion] = []
        import_start: Optional[int] = None
        import_end: Optional[int] = None

        for statement in root.named_children:
            if statement.type == "import_statement":
                start, end = _lines(statement)
                if import_start is None:
                    import_start = start
                import_end = end
                continue
            regions.extend(self._declaration_regions(file_path, statement, statement))

        if import_start is not None and import_end is not None:
            regions.insert(0, make_region(
                file_path, RegionType.IMPORTS, "imports", import_start, import_end,
            ))

        regions.sort(key=lambda r: r.start_line)
        logger.debug("[Regions] %s: %d structural regions", file_path, len(regions))
        return regions

    def _declaration_regions(self, file_path: str, node, span_node) -> list[CodeRegion]:
        """Regions for one declaration *node*, spanning *span_node*'s lines."""
        start, end = _lines(span_node)
        kind = node.type

        if kind in _FUNCTION_NODES or kind in _CLASS_NODES:
            name_node = node.child_by_field_name("name")
            if name_node is None:
                return []
            region_type = RegionType.FUNCTION if kind in _FUNCTION_NODES else RegionType.CLASS
            return [make_region(
                file_path, region_type, _text(name_node), start, end,
                collect_identifiers(node),
            )]

        if kind in _SIMPLE_NODES:
            name_node = node.child_by_field_name("name")
            if name_node is None:
                return []
            return [make_region(
                file_path, _SIMPLE_NODES[kind], _text(name_node), start, end,
            )]

        if kind in _VARIABLE_NODES:
            regions = []
            for declarator in node.named_children:
                if declarator.type != "variable_declarator":
                    continue
                name_node = declarator.child_by_field_name("name")
                # destructuring patterns carry no single name
                if name_node is None or name_node.type != "identifier":
                    continue
                regions.append(make_region(
                    file_path, RegionType.VARIABLE, _text(name_node), start, end,
                    collect_identifiers(declarator),
                ))
            return regions

        if kind == "export_statement":
            declaration = node.child_by_field_name("declaration")
            if declaration is not None:
                inner = self._declaration_regions(file_path, declaration, node)
                if inner:
                    return inner
            is_default = any(child.type == "default" for child in node.children)
            return [make_region(
                file_path, RegionType.EXPORT, "default" if is_default else "export",
                start, end,
            )]

        if kind == "ambient_declaration":
            regions = []
            for child in node.named_children:
                regions.extend(self._declaration_regions(file_path, child, node))
            return regions

        return []
