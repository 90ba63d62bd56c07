"""
Interpreter Configuration
=========================

Runtime settings for the interpreter. Configuration can come from:
- Default values (defined here)
- Environment variables (``InterpreterConfig.from_env``)
- Command-line flags (see ``tinybasic.cli.tbasic``)

The defaults reproduce the behaviour of the classic terminal interpreter:
CRLF line breaks, XOFF/XON flow-control bytes around statement
separators and input prompts, and a 32-entry GOSUB stack.
"""

import os
from dataclasses import dataclass, replace
from typing import Optional


# Flow-control bytes written to the terminal
XOFF = "\x13"
XON = "\x11"

DEFAULT_CALL_STACK_DEPTH = 32


@dataclass(frozen=True)
class InterpreterConfig:
    """
    Configuration for an Interpreter instance.

    Attributes:
        call_stack_depth: Maximum number of pending GOSUBs (default: 32)
        line_ending: Text PRINT emits at the end of a line (default: CRLF)
        flow_control: Emit XOFF after ':' in PRINT and XON after the
                      INPUT prompt (default: True)
        input_prompt: Text written before reading an input line
        seed: Seed for RND; None seeds from the system clock
        trace: Echo every dispatched statement as ``TRACE: ...``

    Example:
        >>> config = InterpreterConfig(seed=42, flow_control=False)
    """
    call_stack_depth: int = DEFAULT_CALL_STACK_DEPTH
    line_ending: str = "\r\n"
    flow_control: bool = True
    input_prompt: str = "?"
    seed: Optional[int] = None
    trace: bool = False

    @classmethod
    def from_env(cls) -> "InterpreterConfig":
        """
        Create an InterpreterConfig from environment variables.

        Environment variables (all optional):
            TINYBASIC_SEED: RND seed (integer)
            TINYBASIC_TRACE: "1"/"true"/"yes" enables statement tracing
            TINYBASIC_FLOW_CONTROL: "0"/"false"/"no" disables XON/XOFF
            TINYBASIC_STACK_DEPTH: GOSUB stack capacity (positive integer)

        Returns:
            InterpreterConfig with values from environment variables
        """
        config = cls()

        if seed := os.environ.get("TINYBASIC_SEED"):
            try:
                config = replace(config, seed=int(seed))
            except ValueError:
                pass  # Ignore invalid values

        if trace := os.environ.get("TINYBASIC_TRACE"):
            config = replace(config, trace=_parse_flag(trace, config.trace))

        if flow := os.environ.get("TINYBASIC_FLOW_CONTROL"):
            config = replace(config, flow_control=_parse_flag(flow, config.flow_control))

        if depth := os.environ.get("TINYBASIC_STACK_DEPTH"):
            try:
                value = int(depth)
            except ValueError:
                value = 0
            if value > 0:
                config = replace(config, call_stack_depth=value)

        return config


def _parse_flag(value: str, default: bool) -> bool:
    """Interpret an environment flag, keeping the default when unrecognised."""
    lowered = value.strip().lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    return default
