"""
CLI pipeline tests

Exercises the ProgramState stages without going through argument parsing.
"""

from argparse import Namespace

import pytest

from mdhtml.__main__ import (
    env_check,
    markup_render,
    page_write,
    results_report,
    source_read,
)
from mdhtml.models import ProgramState, pipeline

STAGES = (env_check, source_read, markup_render, page_write, results_report)


@pytest.fixture
def workspace(tmp_path, settings):
    inputdir = tmp_path / "in"
    inputdir.mkdir()
    (inputdir / "doc.md").write_text("# Head\n_x_ [l](p)\n", encoding="utf-8")
    return inputdir, tmp_path / "out"


class TestPipeline:
    """Complete runs"""

    def test_full_pipeline(self, workspace):
        """Source is rendered and written inside a page"""
        inputdir, outputdir = workspace
        state = ProgramState(inputdir=inputdir, outputdir=outputdir, inputFile="doc.md")

        final = pipeline(state, *STAGES)

        assert final.pageWritten is True
        page = (outputdir / "index.html").read_text(encoding="utf-8")
        assert "<meta charset='utf-8'>" in page
        assert "<p><h1> Head</h1>\n<em>x</em> <a href=\"p\">l</a></p>" in page

    def test_base_url_and_style_overrides(self, workspace):
        """CLI options override settings"""
        inputdir, outputdir = workspace
        state = ProgramState(
            inputdir=inputdir,
            outputdir=outputdir,
            inputFile="doc.md",
            outputFile="page.html",
            baseUrl="http://b/",
            style="color:red;",
        )

        pipeline(state, *STAGES)

        page = (outputdir / "page.html").read_text(encoding="utf-8")
        assert 'href="http://b/p"' in page
        assert '<em style="color:red;">x</em>' in page


class TestStageFailures:
    """Stages exit with status 1 on errors"""

    def test_missing_input(self, tmp_path):
        state = ProgramState(inputdir=tmp_path, outputdir=tmp_path, inputFile="absent.md")
        with pytest.raises(SystemExit) as excinfo:
            env_check(state)
        assert excinfo.value.code == 1

    def test_invalid_style(self, workspace):
        inputdir, outputdir = workspace
        state = ProgramState(
            inputdir=inputdir, outputdir=outputdir, inputFile="doc.md", style='a"b'
        )
        with pytest.raises(SystemExit):
            pipeline(state, env_check, source_read, markup_render)

    def test_report_without_page(self):
        with pytest.raises(SystemExit):
            results_report(ProgramState())


class TestProgramState:
    """State construction"""

    def test_createFromNamespace_filters_unknown(self, tmp_path):
        options = Namespace(inputFile="a.md", verbosity=3, unrelated=True)
        state = ProgramState.state_createFromNamespace(options, tmp_path, tmp_path / "o")
        assert state.inputFile == "a.md"
        assert state.verbosity == 3
        assert state.outputdir == tmp_path / "o"
        assert not hasattr(state, "unrelated")

    def test_copy_is_independent(self):
        state = ProgramState(inputFile="a.md")
        copied = state.copy()
        copied.inputFile = "b.md"
        assert state.inputFile == "a.md"
