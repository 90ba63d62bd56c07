"""
GOSUB Call Stack
================

A bounded LIFO of saved cursor positions. GOSUB pushes the position just
after its line-number argument; RETURN pops it and execution resumes
there. Both overflow and underflow are fatal.
"""

import logging

from tinybasic.config import DEFAULT_CALL_STACK_DEPTH
from tinybasic.errors import CallStackOverflowError, ReturnWithoutGosubError


logger = logging.getLogger(__name__)


class CallStack:
    """
    Bounded stack of return positions.

    Attributes:
        capacity: Maximum number of pending GOSUBs
    """

    def __init__(self, capacity: int = DEFAULT_CALL_STACK_DEPTH):
        self.capacity = capacity
        self._frames: list[int] = []

    def __len__(self) -> int:
        return len(self._frames)

    @property
    def depth(self) -> int:
        """Number of pending GOSUBs."""
        return len(self._frames)

    @property
    def is_full(self) -> bool:
        return len(self._frames) >= self.capacity

    def push(self, position: int) -> None:
        """
        Save a return position.

        Raises:
            CallStackOverflowError: If every slot is already in use
        """
        if self.is_full:
            raise CallStackOverflowError(
                hint=f"at most {self.capacity} GOSUBs may be pending at once"
            )
        self._frames.append(position)
        logger.debug(f"GOSUB push: depth {len(self._frames)}")

    def pop(self) -> int:
        """
        Remove and return the most recent return position.

        Raises:
            ReturnWithoutGosubError: If the stack is empty
        """
        if not self._frames:
            raise ReturnWithoutGosubError()
        position = self._frames.pop()
        logger.debug(f"RETURN pop: depth {len(self._frames)}")
        return position

    def clear(self) -> None:
        self._frames.clear()
