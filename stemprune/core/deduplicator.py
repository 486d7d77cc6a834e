"""
Deduplicator

Groups the files of a directory by stem, keeps one file per group according
to an ordered list of preferred extensions, and offers to delete or move the
others after interactive confirmation.

Author: StemPrune Project
License: MIT
"""

import os
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence
from dataclasses import dataclass

from ..config.schema import DedupOptions
from ..utils.file_ops import (
    delete_file,
    ensure_directory,
    extensions_match,
    move_into,
    split_name,
)
from ..utils.logger import get_logger
from .prompt import ConsolePrompter, Prompter

logger = get_logger(__name__)


@dataclass(frozen=True)
class FileEntry:
    """A directory entry that has both a stem and an extension."""
    path: Path
    stem: str
    extension: str


@dataclass
class DedupSummary:
    """Counts accumulated over a run, subdirectories included."""
    directories_scanned: int = 0
    groups_kept: int = 0
    groups_unmatched: int = 0
    files_moved: int = 0
    files_deleted: int = 0
    files_declined: int = 0


def select_keeper(entries: Sequence[FileEntry], keep: Sequence[str]) -> Optional[FileEntry]:
    """
    Pick the file to keep from a group.

    Keep extensions are tried in priority order; the first group member whose
    extension matches (case-insensitively) wins. Among several members with
    the same extension the first one in listing order is returned.

    Args:
        entries: Members of one stem group
        keep: Extensions to keep, highest priority first

    Returns:
        The entry to keep, or None if no member has a keep extension
    """
    for keep_ext in keep:
        for entry in entries:
            if extensions_match(entry.extension, keep_ext):
                return entry
    return None


class Deduplicator:
    """
    Stem-based deduplication over a directory tree.

    Each directory is handled on its own: its groups are built, resolved and
    discarded before moving on. Any OSError or EOFError from the filesystem
    or the prompt propagates and ends the run.
    """

    def __init__(
        self,
        options: DedupOptions,
        prompter: Optional[Prompter] = None,
        output: Optional[Callable[[str], None]] = None
    ):
        """
        Initialize deduplicator.

        Args:
            options: Run options for the root directory
            prompter: Confirmation source (console by default)
            output: Line printer for user-facing messages (print by default)
        """
        self.options = options
        self.prompter = prompter or ConsolePrompter()
        self._output = output or print
        self.summary = DedupSummary()

    def process(self) -> DedupSummary:
        """
        Run over the root directory, and its subdirectories when recursive.

        Returns:
            DedupSummary for the whole run
        """
        self.summary = DedupSummary()
        mode = f"move to {self.options.move_to}" if self.options.move_to else "delete"
        logger.info(
            f"Processing {self.options.in_dir} (keep={self.options.keep}, "
            f"recursive={self.options.recursive}, mode={mode})"
        )
        self._process(self.options)
        logger.info(
            f"Done: {self.summary.directories_scanned} directories, "
            f"{self.summary.groups_kept} groups kept, "
            f"{self.summary.files_moved} moved, {self.summary.files_deleted} deleted, "
            f"{self.summary.files_declined} declined"
        )
        return self.summary

    def _process(self, options: DedupOptions) -> None:
        groups = self.scan(options)

        for stem, entries in groups.items():
            keeper = select_keeper(entries, options.keep)
            if keeper is None:
                logger.debug(f"No keep extension for stem {stem!r} in {options.in_dir}")
                self.summary.groups_unmatched += 1
                continue

            self.summary.groups_kept += 1
            self.resolve_group(entries, keeper, options.move_to)

    def scan(self, options: DedupOptions) -> Dict[str, List[FileEntry]]:
        """
        Group the immediate entries of options.in_dir by stem.

        With recursion enabled, each subdirectory is fully processed as soon
        as it is encountered, using options rewritten for that subdirectory.
        Directories are never grouped; names without an extension or without
        a stem are skipped.

        Args:
            options: Options for the directory to scan

        Returns:
            Mapping of stem to entries, in listing order

        Raises:
            OSError: If the directory cannot be listed or an entry's type
                cannot be determined
        """
        directory = options.in_dir
        logger.debug(f"Scanning {directory}")
        self.summary.directories_scanned += 1

        try:
            with os.scandir(directory) as it:
                dir_entries = list(it)
        except OSError as e:
            logger.debug(f"Error listing {directory}: {e}")
            raise

        groups: Dict[str, List[FileEntry]] = {}
        for entry in dir_entries:
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError as e:
                logger.debug(f"Error reading file type of {entry.path}: {e}")
                raise

            if is_dir:
                if options.recursive:
                    self._process(options.with_subdir(entry.name))
                continue

            parts = split_name(entry.name)
            if parts is None:
                logger.debug(f"Skipping {entry.name}: no stem or extension")
                continue

            stem, extension = parts
            groups.setdefault(stem, []).append(
                FileEntry(path=Path(entry.path), stem=stem, extension=extension)
            )

        return groups

    def resolve_group(
        self,
        entries: Sequence[FileEntry],
        keeper: FileEntry,
        move_to: Optional[Path] = None
    ) -> None:
        """
        Offer every non-keeper member of a group for removal.

        Nothing is printed if the keeper is alone. Otherwise the keeper is
        announced and each discard candidate is confirmed individually:
        moved into move_to when set, deleted otherwise. The destination
        directory is created on the first confirmed move only.

        Args:
            entries: Members of one stem group
            keeper: Entry selected by select_keeper
            move_to: Destination directory for this group, if moving
        """
        discarding = [entry for entry in entries if entry.path != keeper.path]
        if not discarding:
            return

        self._output(f"Keeping {keeper.path}.")

        created = False
        for discard in discarding:
            if move_to is not None:
                if not self.prompter.confirm(f"  Move {discard.path}?", default=False):
                    self.summary.files_declined += 1
                    continue
                if not created:
                    ensure_directory(move_to)
                    created = True
                dest = move_into(discard.path, move_to)
                logger.info(f"Moved {discard.path} -> {dest}")
                self.summary.files_moved += 1
                self._output(f"  * Moved to {dest}!")
            else:
                if not self.prompter.confirm(f"  Delete {discard.path}?", default=False):
                    self.summary.files_declined += 1
                    continue
                delete_file(discard.path)
                logger.info(f"Deleted {discard.path}")
                self.summary.files_deleted += 1
                self._output("  * Deleted!")
