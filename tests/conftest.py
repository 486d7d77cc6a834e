"""
Shared Test Fixtures

Author: StemPrune Project
License: MIT
"""

import logging

import pytest

from stemprune.core.prompt import Prompter


class ScriptedPrompter(Prompter):
    """Answers prompts from a fixed list and records what was asked."""

    def __init__(self, answers=None, default_answer=None):
        self.answers = list(answers or [])
        self.default_answer = default_answer
        self.asked = []

    def confirm(self, message, default=False):
        self.asked.append(message)
        if self.answers:
            return self.answers.pop(0)
        if self.default_answer is not None:
            return self.default_answer
        return default


@pytest.fixture
def decline_all():
    """Prompter that accepts every default, i.e. declines everything."""
    return ScriptedPrompter()


@pytest.fixture
def accept_all():
    """Prompter that answers yes to every prompt."""
    return ScriptedPrompter(default_answer=True)


@pytest.fixture(autouse=True)
def reset_stemprune_logger():
    """Drop handlers installed by setup_logging so streams don't leak between tests."""
    yield
    logger = logging.getLogger("stemprune")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's STEMPRUNE_* environment out of the tests."""
    for name in (
        "STEMPRUNE_CONFIG", "STEMPRUNE_LOG_LEVEL", "STEMPRUNE_LOG_FILE",
        "STEMPRUNE_LOG_JSON", "STEMPRUNE_KEEP", "STEMPRUNE_RECURSIVE",
        "STEMPRUNE_MOVE_TO",
    ):
        monkeypatch.delenv(name, raising=False)
