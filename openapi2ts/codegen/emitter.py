"""Code emitter interfaces and implementations for generated output.

This module provides the CodeEmitter interface and concrete implementations
for emitting generated TypeScript either to files or to in-memory strings.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from upath import UPath

from openapi2ts.exceptions import OutputError

logger = logging.getLogger(__name__)

__all__ = ['CodeEmitter', 'FileEmitter', 'StringEmitter']


class CodeEmitter(ABC):
    """Abstract base class for code emitters.

    A CodeEmitter takes generated source text and outputs it under a file
    name, returning a handle (a path or the text itself) for the caller.
    """

    @abstractmethod
    def emit(self, filename: str, content: str) -> str:
        """Emit one generated artifact.

        Args:
            filename: The artifact's file name (e.g. ``types.ts``).
            content: The generated source text.

        Returns:
            Where the artifact went: a file path, or the file name for
            in-memory emitters.
        """

    def emit_types(self, content: str, filename: str = 'types.ts') -> str:
        return self.emit(filename, content)

    def emit_client(self, content: str, filename: str = 'client.ts') -> str:
        return self.emit(filename, content)


class FileEmitter(CodeEmitter):
    """Emits generated code to files on disk.

    The output directory may be any location supported by universal-pathlib
    (local paths, ``memory://``, object stores with the matching fsspec
    backend installed).
    """

    def __init__(self, output_dir: str | Path | UPath):
        """Initialize the file emitter.

        Args:
            output_dir: Directory where files will be written. It is
                        created on first write.
        """
        self.output_dir = UPath(output_dir)
        self._written_files: list[str] = []

    def emit(self, filename: str, content: str) -> str:
        """Write content to a file in the output directory.

        Returns:
            The path to the written file.

        Raises:
            OutputError: If the directory or file cannot be written.
        """
        file_path = self.output_dir / filename
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            file_path.write_text(content, encoding='utf-8')
        except OSError as e:
            raise OutputError(str(file_path), cause=e) from e

        logger.debug(f'Wrote {len(content)} characters to {file_path}')
        self._written_files.append(str(file_path))
        return str(file_path)

    def get_written_files(self) -> list[str]:
        """Get list of all files written by this emitter."""
        return self._written_files.copy()


class StringEmitter(CodeEmitter):
    """Emits generated code as strings.

    This emitter is useful for testing or when the caller wants to process
    the generated code before writing it.
    """

    def __init__(self):
        self._modules: dict[str, str] = {}

    def emit(self, filename: str, content: str) -> str:
        self._modules[filename] = content
        return filename

    def get_module(self, filename: str) -> str | None:
        """Get a previously emitted artifact by file name."""
        return self._modules.get(filename)

    def get_all_modules(self) -> dict[str, str]:
        return self._modules.copy()
