"""
Language registry — maps file extensions to a region extraction strategy.

Structural (tree-sitter): TypeScript, TSX, JavaScript
Regex: Python, Rust, Go, Java, C#, Kotlin
Anything else falls back to fixed-size line windows.
"""

from __future__ import annotations

import os
import re
from typing import Optional

from .strategies import (
    DEFAULT_CHUNK_SIZE,
    BlockEnd,
    ExtractionStrategy,
    FallbackStrategy,
    RegexPatterns,
    RegexStrategy,
    StructuralStrategy,
)
from .structural import TreeSitterAdapter


# ---------------------------------------------------------------------------
# Per-language regex patterns
# ---------------------------------------------------------------------------

PYTHON_PATTERNS = RegexPatterns(
    import_=re.compile(r"^from\s+\S+\s+import|^import\s+\S+"),
    function=re.compile(r"^(?:async\s+)?def\s+(\w+)"),
    class_=re.compile(r"^class\s+(\w+)"),
    variable=re.compile(r"^([A-Za-z_]\w*)\s*(?::[^=]+)?=(?!=)"),
)

RUST_PATTERNS = RegexPatterns(
    import_=re.compile(r"^(?:pub\s+)?use\s+"),
    function=re.compile(r"^(?:pub(?:\([\w:]+\))?\s+)?(?:const\s+)?(?:async\s+)?(?:unsafe\s+)?fn\s+(\w+)"),
    class_=re.compile(r"^(?:pub(?:\([\w:]+\))?\s+)?struct\s+(\w+)"),
    interface=re.compile(r"^(?:pub(?:\([\w:]+\))?\s+)?trait\s+(\w+)"),
    type_=re.compile(r"^(?:pub(?:\([\w:]+\))?\s+)?(?:type|enum)\s+(\w+)"),
    variable=re.compile(r"^(?:pub(?:\([\w:]+\))?\s+)?(?:const|static)\s+(?:mut\s+)?(\w+)"),
)

GO_PATTERNS = RegexPatterns(
    import_=re.compile(r"^import\s+"),
    function=re.compile(r"^func\s+(?:\([^)]+\)\s+)?(\w+)"),
    class_=re.compile(r"^type\s+(\w+)\s+struct\b"),
    interface=re.compile(r"^type\s+(\w+)\s+interface\b"),
    type_=re.compile(r"^type\s+(\w+)\s"),
    variable=re.compile(r"^(?:var|const)\s+(\w+)"),
)

JAVA_PATTERNS = RegexPatterns(
    import_=re.compile(r"^import\s+"),
    function=re.compile(
        r"^\s*(?:(?:public|private|protected|static|final|abstract|synchronized|native)\s+)*"
        r"(?!return\b|new\b|else\b|throw\b)[\w<>\[\],.?]+\s+(\w+)\s*\("
    ),
    class_=re.compile(
        r"^\s*(?:(?:public|private|protected|static|abstract|final)\s+)*class\s+(\w+)"
    ),
    interface=re.compile(
        r"^\s*(?:(?:public|private|protected|static)\s+)*@?interface\s+(\w+)"
    ),
    type_=re.compile(
        r"^\s*(?:(?:public|private|protected|static)\s+)*(?:enum|record)\s+(\w+)"
    ),
)

CSHARP_PATTERNS = RegexPatterns(
    import_=re.compile(r"^using\s+[\w.]+\s*;"),
    function=re.compile(
        r"^\s*(?:(?:public|private|protected|internal|static|virtual|override|async|abstract|sealed)\s+)+"
        r"[\w<>\[\],.?]+\s+(\w+)\s*\("
    ),
    class_=re.compile(
        r"^\s*(?:(?:public|private|protected|internal|static|abstract|sealed|partial)\s+)*class\s+(\w+)"
    ),
    interface=re.compile(
        r"^\s*(?:(?:public|private|protected|internal|partial)\s+)*interface\s+(\w+)"
    ),
    type_=re.compile(
        r"^\s*(?:(?:public|private|protected|internal)\s+)*(?:enum|struct|record)\s+(\w+)"
    ),
)

KOTLIN_PATTERNS = RegexPatterns(
    import_=re.compile(r"^import\s+"),
    function=re.compile(
        r"^\s*(?:(?:public|private|protected|internal|override|suspend|inline|open)\s+)*fun\s+(?:<[^>]+>\s*)?(?:[\w.]+\.)?(\w+)"
    ),
    class_=re.compile(
        r"^\s*(?:(?:public|private|protected|internal|open|abstract|data|sealed)\s+)*(?:class|object)\s+(\w+)"
    ),
    interface=re.compile(r"^\s*(?:(?:public|private|internal)\s+)*interface\s+(\w+)"),
    type_=re.compile(r"^\s*(?:(?:public|private|internal)\s+)*(?:typealias|enum\s+class)\s+(\w+)"),
    variable=re.compile(r"^(?:(?:private|internal|const)\s+)*va[lr]\s+(\w+)"),
)


class LanguageRegistry:
    """Extension → (language, strategy) lookup with a fallback default."""

    def __init__(self, fallback: Optional[ExtractionStrategy] = None) -> None:
        self._fallback = fallback or FallbackStrategy()
        self._by_extension: dict[str, tuple[str, ExtractionStrategy]] = {}

    @property
    def fallback(self) -> ExtractionStrategy:
        return self._fallback

    def register(
        self,
        language: str,
        extensions: list[str],
        strategy: ExtractionStrategy,
    ) -> None:
        """Register *strategy* for every extension in *extensions*.

        Later registrations for the same extension replace earlier ones.
        """
        for ext in extensions:
            ext = ext.lower()
            if not ext.startswith("."):
                ext = "." + ext
            self._by_extension[ext] = (language, strategy)

    def _lookup(self, file_path: str) -> Optional[tuple[str, ExtractionStrategy]]:
        ext = os.path.splitext(file_path)[1].lower()
        return self._by_extension.get(ext)

    def strategy_for(self, file_path: str) -> ExtractionStrategy:
        """Return the strategy for *file_path*, or the fallback."""
        entry = self._lookup(file_path)
        return entry[1] if entry else self._fallback

    def language_for(self, file_path: str) -> Optional[str]:
        entry = self._lookup(file_path)
        return entry[0] if entry else None

    def is_supported(self, file_path: str) -> bool:
        return self._lookup(file_path) is not None

    def supported_extensions(self) -> list[str]:
        return sorted(self._by_extension)


def default_registry(chunk_size: int = DEFAULT_CHUNK_SIZE) -> LanguageRegistry:
    """Build the registry with every built-in language."""
    registry = LanguageRegistry(FallbackStrategy(chunk_size))

    registry.register(
        "typescript", [".ts", ".mts", ".cts"],
        StructuralStrategy(TreeSitterAdapter("typescript")),
    )
    registry.register("tsx", [".tsx"], StructuralStrategy(TreeSitterAdapter("tsx")))
    registry.register(
        "javascript", [".js", ".jsx", ".mjs", ".cjs"],
        StructuralStrategy(TreeSitterAdapter("javascript")),
    )

    registry.register("python", [".py"], RegexStrategy(PYTHON_PATTERNS, BlockEnd.INDENT))
    registry.register("rust", [".rs"], RegexStrategy(RUST_PATTERNS))
    registry.register("go", [".go"], RegexStrategy(GO_PATTERNS))
    registry.register("java", [".java"], RegexStrategy(JAVA_PATTERNS))
    registry.register("c_sharp", [".cs"], RegexStrategy(CSHARP_PATTERNS))
    registry.register("kotlin", [".kt", ".kts"], RegexStrategy(KOTLIN_PATTERNS))

    return registry
