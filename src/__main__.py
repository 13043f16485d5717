#!/usr/bin/env python3
"""
mdhtml - Small-dialect markdown to HTML renderer

Reads a markdown document, renders it with the mdhtml pipeline and writes a
standalone HTML page.

As with other ChRIS-style apps, the CLI is a thin functional pipeline of
ProgramState stages around the library.

Usage:
    mdhtml inputdir/ outputdir/ --inputFile notes.md

Examples:
    # Basic rendering to outputdir/index.html
    mdhtml . output/ --inputFile notes.md

    # Relative links resolved against a base URL, styled tags
    mdhtml . output/ --inputFile notes.md --baseUrl https://example.org/ --style "color:green;"

    # Verbose output
    mdhtml . output/ --inputFile notes.md -vv
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter
from typing import Any, Dict

from chris_plugin import chris_plugin
from pydantic import ValidationError

from . import __version__
from .config import AppSettings
from .lib import render, page_wrap, LOG, verbosity_connect
from .models import ProgramState, pipeline


# Define CLI arguments
parser = ArgumentParser(
    description="mdhtml - render a small markdown dialect to a standalone HTML page",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--inputFile", required=True, type=str, help="Input markdown file (relative to inputdir)"
)

parser.add_argument(
    "--outputFile",
    default="index.html",
    type=str,
    help="Output HTML file (relative to outputdir)",
)

parser.add_argument(
    "--baseUrl",
    default=None,
    type=str,
    help="Prefix for relative link targets (overrides MDHTML_BASE_URL)",
)

parser.add_argument(
    "--style",
    default=None,
    type=str,
    help="Inline style applied to every generated tag (overrides MDHTML_STYLE)",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv, -vvv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def settings_make(state: ProgramState) -> AppSettings:
    """
    Build render settings from the environment plus CLI overrides.

    Exits:
        1 if the resulting settings are invalid
    """
    overrides: Dict[str, Any] = {}
    if state.baseUrl is not None:
        overrides["base_url"] = state.baseUrl
    if state.style is not None:
        overrides["style"] = state.style
    try:
        return AppSettings(**overrides)
    except ValidationError as e:
        print(f"Error: invalid settings: {e}", file=sys.stderr)
        sys.exit(1)


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate environment and resolve file paths.

    Returns:
        ProgramState with added fields:
            - inputSourceFile: Resolved path to the markdown file
            - htmlOutputFile: Resolved path to the output page
            - envOK: True if environment is valid

    Exits:
        1 if the input file is not found
    """
    state = inputstate.copy()

    LOG("Checking environment...", level=2)

    input_file = state.inputdir / state.inputFile
    if not input_file.is_file():
        print(f"Error: Input file not found: {input_file}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    state.inputSourceFile = input_file
    LOG(f"Input file: {input_file}", level=2)

    state.htmlOutputFile = state.outputdir / state.outputFile
    state.htmlOutputFile.parent.mkdir(parents=True, exist_ok=True)
    LOG(f"Output file: {state.htmlOutputFile}", level=2)

    state.envOK = True
    return state


def source_read(inputstate: ProgramState) -> ProgramState:
    """
    Read the markdown source.

    Returns:
        ProgramState with added field:
            - sourceText: Raw UTF-8 text of the input file

    Exits:
        1 if the file cannot be read
    """
    state = inputstate.copy()

    LOG("Reading source file...", level=1)
    try:
        state.sourceText = state.inputSourceFile.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading input file: {e}", file=sys.stderr)
        sys.exit(1)

    LOG(f"Read {len(state.sourceText)} characters from {state.inputSourceFile.name}", level=2)
    return state


def markup_render(inputstate: ProgramState) -> ProgramState:
    """
    Render the source text to an HTML fragment.

    Returns:
        ProgramState with added field:
            - renderedHtml: Rendered fragment
    """
    state = inputstate.copy()

    LOG("Rendering markup...", level=1)
    state.renderedHtml = render(state.sourceText or "", settings_make(state))
    LOG(f"Rendered {len(state.renderedHtml)} characters of HTML", level=2)
    return state


def page_write(inputstate: ProgramState) -> ProgramState:
    """
    Wrap the rendered fragment in a page and write it.

    Returns:
        ProgramState with added field:
            - pageWritten: True once the page is on disk

    Exits:
        1 if the page cannot be written
    """
    state = inputstate.copy()

    try:
        state.htmlOutputFile.write_text(page_wrap(state.renderedHtml or ""), encoding="utf-8")
    except OSError as e:
        print(f"Error writing output file: {e}", file=sys.stderr)
        sys.exit(1)

    state.pageWritten = True
    LOG(f"Wrote {state.htmlOutputFile}", level=2)
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Report the output location (terminal pipeline stage).

    Exits:
        1 if no page was written
    """
    state = inputstate.copy()
    if not state.pageWritten:
        print("Error: Rendering failed", file=sys.stderr)
        sys.exit(1)

    LOG("✓ Rendering successful!", level=1)
    LOG(f"  Output: {state.htmlOutputFile}", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="mdhtml - markdown to HTML renderer",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - render a markdown file to a standalone HTML page.

    Pipeline:
        1. env_check: Validate paths
        2. source_read: Read the markdown file
        3. markup_render: Render to an HTML fragment
        4. page_write: Wrap in a page and write it
        5. results_report: Report the output location

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """
    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    verbosity_connect(state)

    pipeline(state, env_check, source_read, markup_render, page_write, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
