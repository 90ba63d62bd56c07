"""
Tiny BASIC Command-Line Interface
=================================

- **tbasic**: run a Tiny BASIC program file

The tool is a Click application; see ``tinybasic.cli.tbasic``.
"""

__all__ = ["tbasic"]
