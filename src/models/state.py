"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional CLI pipeline and the
pipeline() helper for composing its stages.
"""

from pathlib import Path
from argparse import Namespace
from typing import Optional, Type, TypeVar, Callable
from dataclasses import dataclass, field, fields
from functools import reduce


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the CLI pipeline (state bus pattern).

    Each stage receives a copy of the state and adds the fields it produces.

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, inputFile, outputFile,
                   baseUrl, style
        - env_check: inputSourceFile, htmlOutputFile, envOK
        - source_read: sourceText
        - markup_render: renderedHtml
        - page_write: pageWritten
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Directory containing the source document
        outputdir: Directory receiving the HTML page
        verbosity: Logging verbosity level (1-3)
        inputFile: Source filename (relative to inputdir)
        outputFile: Output filename (relative to outputdir)
        baseUrl: Prefix for relative link targets (None keeps the settings value)
        style: Inline style for generated tags (None keeps the settings value)
        envOK: Environment validation passed
        inputSourceFile: Resolved path to the source document
        htmlOutputFile: Resolved path to the output page
        sourceText: Raw text read from inputSourceFile
        renderedHtml: Rendered HTML fragment
        pageWritten: Output page written successfully
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    inputFile: str = field(default="")
    outputFile: str = field(default="index.html")
    baseUrl: Optional[str] = field(default=None)
    style: Optional[str] = field(default=None)

    # Pipeline state
    envOK: bool = field(default=False)
    inputSourceFile: Path = field(default=Path("/"))
    htmlOutputFile: Path = field(default=Path("/"))
    sourceText: Optional[str] = field(default=None)
    renderedHtml: Optional[str] = field(default=None)
    pageWritten: bool = field(default=False)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Options that are not ProgramState fields are ignored.

        Args:
            options: Parsed CLI arguments (inputFile, baseUrl, etc.)
            inputdir: Directory containing source files
            outputdir: Directory for rendered output

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        valid_fields = {f.name for f in fields(cls)}
        filtered_options = {k: v for k, v in vars(options).items() if k in valid_fields}
        return cls(**{**filtered_options, "inputdir": inputdir, "outputdir": outputdir})

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Example:
        final_state = pipeline(initial_state, env_check, source_read, markup_render)

    This is equivalent to:
        markup_render(source_read(env_check(initial_state)))
    """
    return reduce(lambda state, stage: stage(state), stages, initial_state)
