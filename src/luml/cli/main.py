# Copyright 2026 LUML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the LUML command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from luml.cli.logs import configure_logging
from luml.compiler.artifact import serialize
from luml.compiler.build import CompilerError, compile_file
from luml.views.config import (
    CONFIG_FILE_NAME,
    RenderConfig,
    RenderConfigError,
    find_render_config,
    load_render_config,
)
from luml.views.dot import render_declarations

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def main(argv: list[str] | None = None) -> None:
    """Run the LUML CLI."""
    parser = argparse.ArgumentParser(
        prog="luml",
        description="Render S-expression class declarations as a Graphviz UML class diagram.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Turn off message output",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (default: warnings and errors only; repeat for more detail)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Rendering configuration file (default: {CONFIG_FILE_NAME} next to the input file, if present)",
    )
    parser.add_argument(
        "--emit",
        choices=("dot", "json"),
        default="dot",
        help="Output format: a DOT graph or the declaration model as JSON (default: dot)",
    )
    parser.add_argument(
        "input_file",
        type=Path,
        help="The .luml file to render",
    )

    args = parser.parse_args(argv)
    configure_logging(quiet=args.quiet, verbosity=args.verbose)
    sys.exit(_run(args))


# ################
# Implementation
# ################


def _run(args: argparse.Namespace) -> int:
    """Compile the input file and print the requested output."""
    try:
        declarations = compile_file(args.input_file)
    except CompilerError as exc:
        logger.error("%s", exc)
        return 1

    if args.emit == "json":
        sys.stdout.write(serialize(declarations) + "\n")
        return 0

    try:
        config = _load_config(args)
    except RenderConfigError as exc:
        logger.error("%s", exc)
        return 1

    sys.stdout.write(render_declarations(declarations, config))
    return 0


def _load_config(args: argparse.Namespace) -> RenderConfig:
    """Load the explicit ``--config`` file, else a discovered one, else defaults."""
    path = args.config if args.config is not None else find_render_config(args.input_file)
    if path is None:
        return RenderConfig()
    logger.info("Using rendering configuration %s", path)
    return load_render_config(path)
