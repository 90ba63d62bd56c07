"""
Shared pytest fixtures for the Tiny BASIC test suite.
"""

import io
from dataclasses import replace

import pytest

from tinybasic.config import InterpreterConfig
from tinybasic.interpreter import Interpreter
from tinybasic.program import Program


@pytest.fixture
def config() -> InterpreterConfig:
    """Default configuration with a fixed RND seed."""
    return InterpreterConfig(seed=1234)


@pytest.fixture
def make_interpreter(config):
    """
    Fixture: factory building an Interpreter over program text.

    The interpreter writes to a StringIO (available as ``.output``) and
    reads INPUT replies from ``input_text``.
    """
    def factory(source: str, input_text: str = "", **overrides) -> Interpreter:
        cfg = replace(config, **overrides)
        return Interpreter(
            Program(source, "test.bas"),
            config=cfg,
            output=io.StringIO(),
            input=io.StringIO(input_text),
        )
    return factory


@pytest.fixture
def run(make_interpreter):
    """Fixture: run program text to completion and return its output."""
    def runner(source: str, input_text: str = "", **overrides) -> str:
        interpreter = make_interpreter(source, input_text, **overrides)
        interpreter.run()
        return interpreter.output.getvalue()
    return runner
