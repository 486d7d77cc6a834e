"""
Interactive Confirmation

Yes/no confirmation used before every move or delete.

Author: StemPrune Project
License: MIT
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional

from ..utils.logger import get_logger

logger = get_logger(__name__)

YES_ANSWERS = ("y", "yes")
NO_ANSWERS = ("n", "no")


class Prompter(ABC):
    """Base class for confirmation sources."""

    @abstractmethod
    def confirm(self, message: str, default: bool = False) -> bool:
        """Return True if the user agrees to the action described by message."""


class ConsolePrompter(Prompter):
    """
    Asks on the console until a valid answer is given.

    An empty answer selects the default. End of input raises EOFError,
    which callers treat as fatal.
    """

    def __init__(self, input_func: Optional[Callable[[str], str]] = None):
        self._input = input_func or input

    def confirm(self, message: str, default: bool = False) -> bool:
        hint = "[Y/n]" if default else "[y/N]"
        while True:
            answer = self._input(f"{message} {hint} ").strip().lower()
            if not answer:
                return default
            if answer in YES_ANSWERS:
                return True
            if answer in NO_ANSWERS:
                return False
            logger.debug(f"Unrecognised answer: {answer!r}")
            print("Please answer 'y' or 'n'.")
