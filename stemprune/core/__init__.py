"""
Core Module

Stem grouping, keeper selection and interactive resolution.

Author: StemPrune Project
License: MIT
"""

from .deduplicator import Deduplicator, DedupSummary, FileEntry, select_keeper
from .prompt import ConsolePrompter, Prompter

__all__ = [
    'Deduplicator', 'DedupSummary', 'FileEntry', 'select_keeper',
    'ConsolePrompter', 'Prompter',
]
