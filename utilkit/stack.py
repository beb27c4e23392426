from __future__ import annotations

import logging
from typing import Any, List

from .errors import ErrorKind
from .models import Err, Ok, Result

logger = logging.getLogger(__name__)

EMPTY_STACK_MESSAGE = "Stack is empty"


class Stack:
    """Last-in-first-out container; only push, pop and clear change it."""

    def __init__(self) -> None:
        self._items: List[Any] = []

    @property
    def items(self) -> List[Any]:
        # bottom first; a copy so callers cannot reorder the stack
        return list(self._items)

    def push(self, item: Any) -> None:
        self._items.append(item)

    def pop(self) -> Result[Any]:
        if not self._items:
            logger.debug("pop() on empty stack")
            return Err(kind=ErrorKind.EMPTY_STACK, message=EMPTY_STACK_MESSAGE)
        return Ok(value=self._items.pop())

    def peek(self) -> Result[Any]:
        if not self._items:
            return Err(kind=ErrorKind.EMPTY_STACK, message=EMPTY_STACK_MESSAGE)
        return Ok(value=self._items[-1])

    def is_empty(self) -> bool:
        return not self._items

    def size(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"
