"""
File Operation Utilities

Name splitting, directory creation, moving and deleting. Every failure is
logged and re-raised; callers decide whether an error is fatal.

Author: StemPrune Project
License: MIT
"""

import errno
import os
import shutil
from pathlib import Path
from typing import Optional, Tuple, Union

from .logger import get_logger

logger = get_logger(__name__)

PathLike = Union[str, os.PathLike]


def split_name(file_name: str) -> Optional[Tuple[str, str]]:
    """
    Split a file name into stem and extension at the final dot.

    Returns None when the name has no extension separator or when the stem
    would be empty (e.g. ".bashrc"). A trailing dot ("notes.") yields an
    empty extension.

    Args:
        file_name: Bare file name, without directory components

    Returns:
        Tuple of (stem, extension) or None
    """
    stem, dot, extension = file_name.rpartition('.')
    if not dot or not stem:
        return None
    return stem, extension


def normalize_extension(extension: str) -> str:
    """Strip whitespace and a single leading dot from a user-supplied extension."""
    extension = extension.strip()
    if extension.startswith('.'):
        extension = extension[1:]
    return extension


def extensions_match(extension: str, keep_extension: str) -> bool:
    """Case-insensitive extension comparison."""
    return extension.casefold() == keep_extension.casefold()


def ensure_directory(directory: PathLike) -> Path:
    """
    Ensure a directory exists, creating it and its parents if necessary.

    Safe to call repeatedly for the same directory.

    Args:
        directory: Directory path

    Returns:
        The directory as a Path

    Raises:
        OSError: If the directory cannot be created
    """
    path = Path(directory)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.debug(f"Failed to create directory {path}: {e}")
        raise
    return path


def move_into(source: PathLike, destination_dir: PathLike) -> Path:
    """
    Move a file into a directory, keeping its file name.

    An existing file of the same name at the destination is replaced; an
    existing directory of that name is an error.

    Args:
        source: Source file path
        destination_dir: Existing destination directory

    Returns:
        Destination file path

    Raises:
        OSError: If the move fails
    """
    source_path = Path(source)
    dest_path = Path(destination_dir) / source_path.name

    try:
        if dest_path.is_dir():
            raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), str(dest_path))
        shutil.move(str(source_path), str(dest_path))
    except OSError as e:
        logger.debug(f"Error moving {source_path} to {dest_path}: {e}")
        raise

    logger.debug(f"Moved: {source_path} -> {dest_path}")
    return dest_path


def delete_file(file_path: PathLike) -> None:
    """
    Delete a single file.

    Raises:
        OSError: If the file cannot be removed
    """
    path = Path(file_path)
    try:
        path.unlink()
    except OSError as e:
        logger.debug(f"Error deleting {path}: {e}")
        raise

    logger.debug(f"Deleted: {path}")
