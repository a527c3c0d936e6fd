# Copyright 2026 LUML Contributors
# SPDX-License-Identifier: Apache-2.0

"""End-to-end compilation of LUML sources into declaration models.

Reads the source, parses every expression, then builds every declaration.
The first error at any stage aborts the whole compilation; no partial
results are returned.
"""

from __future__ import annotations

import logging
from pathlib import Path

from luml.compiler.builder import ShapeError, build_declarations
from luml.model.entities import Declaration
from luml.parser.sexpr import ParseError, parse_expressions

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class CompilerError(Exception):
    """Raised when a source cannot be read, parsed, or built.

    The underlying :class:`ParseError`, :class:`ShapeError`, :class:`OSError`
    or :class:`UnicodeDecodeError` is chained as ``__cause__``.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)


def compile_source(source: str, *, source_label: str = "<string>") -> list[Declaration]:
    """Compile LUML source text into declarations.

    Args:
        source: The full text of a .luml file.
        source_label: Human-readable label used in error messages (e.g. the file path).

    Returns:
        The declarations in source order.

    Raises:
        CompilerError: On a syntax error or a malformed declaration.
    """
    try:
        exprs = parse_expressions(source)
    except ParseError as exc:
        raise CompilerError(f"Parse error in {source_label}: {exc}") from exc
    logger.debug("Parsed %d top-level expression(s) from %s", len(exprs), source_label)

    try:
        declarations = build_declarations(exprs)
    except ShapeError as exc:
        raise CompilerError(f"Invalid declaration in {source_label}: {exc}") from exc
    logger.debug("Built %d declaration(s) from %s", len(declarations), source_label)
    return declarations


def compile_file(path: Path) -> list[Declaration]:
    """Read and compile a .luml file.

    Raises:
        CompilerError: If the file cannot be read, is not valid UTF-8, or does
            not compile.
    """
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CompilerError(f"Cannot read source file '{path}': {exc}") from exc
    logger.info("Compiling %s", path)
    return compile_source(source, source_label=str(path))
