"""Import collection for generated TypeScript modules.

This module provides utilities for collecting the type names a generated
client refers to and rendering them as import statements, deduplicated and
sorted for consistent output.
"""

from openapi2ts.codegen.schema import SchemaNode, iter_references
from openapi2ts.codegen.types import BUILTIN_TYPES


class ImportCollector:
    """Collects and manages type imports for generated TypeScript code.

    Built-in type names are never imported.

    Example:
        >>> collector = ImportCollector()
        >>> collector.add_imports({'./types.ts': {'Todo', 'string'}})
        >>> collector.add_import('./types.ts', 'TodoInput')
        >>> collector.to_lines()
        ['import type { Todo, TodoInput } from "./types.ts";']
    """

    def __init__(self):
        """Initialize an empty import collector."""
        self._imports: dict[str, set[str]] = {}
        self._aliases: dict[str, str] = {}

    def add_imports(self, imports: dict[str, set[str]]) -> None:
        """Add imports from a dictionary mapping modules to sets of names.

        Args:
            imports: Dictionary mapping module specifiers to sets of names.
                    Example: {'./types.ts': {'Todo', 'TodoInput'}}
        """
        for module, names in imports.items():
            for name in names:
                self.add_import(module, name)

    def add_import(self, module: str, name: str) -> None:
        """Add a single import.

        Args:
            module: The module specifier (e.g., './types.ts').
            name: The type name to import (e.g., 'Todo').
        """
        if not name or name in BUILTIN_TYPES:
            return
        self._imports.setdefault(module, set()).add(name)

    def add_alias(self, name: str, alias: str) -> None:
        """Import ``name`` under ``alias`` in every statement it appears in."""
        self._aliases[name] = alias

    def add_references(self, module: str, node: SchemaNode) -> None:
        """Add every schema name referenced inside a schema node."""
        for name in iter_references(node):
            self.add_import(module, name)

    def to_lines(self) -> list[str]:
        """Render the collected imports as ``import type`` statements.

        Returns:
            One statement per module, sorted by module specifier. Names
            within each statement are sorted alphabetically.
        """
        lines = []
        for module, names in sorted(self._imports.items()):
            specifiers = ', '.join(self._specifier(name) for name in sorted(names))
            lines.append(f'import type {{ {specifiers} }} from "{module}";')
        return lines

    def _specifier(self, name: str) -> str:
        alias = self._aliases.get(name)
        return f'{name} as {alias}' if alias else name

    def has_imports(self) -> bool:
        return bool(self._imports)

    def clear(self) -> None:
        """Clear all collected imports."""
        self._imports.clear()
        self._aliases.clear()

    def get_names(self, module: str) -> list[str]:
        return sorted(self._imports.get(module, ()))
