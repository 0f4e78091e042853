"""Move command-line paths into the trash, ``rm``-style.

Every path is attempted independently; a failure on one path is reported
and processing moves on to the next.
"""
import logging
import os
import stat
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple

from trashrm.exceptions import PathNotFoundError, TrashError
from trashrm.trashbackend import TrashBackend
from trashrm.utils import display_path, print_error

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Invocation:
    paths: Tuple[Path, ...]
    recursive: bool = False
    force: bool = False
    verbose: bool = False


class Outcome(str, Enum):
    TRASHED = "trashed"
    SKIPPED_NOT_FOUND = "skipped_not_found"
    SKIPPED_IS_DIRECTORY = "skipped_is_directory"
    FAILED = "failed"


@dataclass(frozen=True)
class PathResult:
    path: Path
    outcome: Outcome
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.outcome in (Outcome.TRASHED, Outcome.SKIPPED_NOT_FOUND)


def _stat(path: Path) -> os.stat_result:
    try:
        return path.stat()
    except FileNotFoundError:
        # Dangling symlink; the link itself can still be trashed.
        if path.is_symlink():
            return path.lstat()
        raise


def _list_entries(path: Path, force: bool) -> List[Tuple[Path, str]]:
    """Immediate children of ``path`` labelled ``"file"`` or ``"directory"``.

    Unreadable entries are skipped when ``force``, otherwise the ``OSError`` propagates.
    """
    entries = []
    try:
        it = os.scandir(path)
    except OSError:
        if force:
            log.debug(f"Unable to list {str(path)!r}")
            return entries
        raise

    with it:
        while True:
            try:
                entry = next(it)
            except StopIteration:
                break
            except OSError:
                # The listing can't be resumed after a read error.
                if force:
                    break
                raise

            try:
                label = "directory" if entry.is_dir(follow_symlinks=False) else "file"
            except OSError:
                if force:
                    log.debug(f"Skipping unreadable entry {entry.path!r}")
                    continue
                raise
            entries.append((path / entry.name, label))

    entries.sort(key=lambda x: x[0].name)
    return entries


def remove_path(path: Path, invocation: Invocation, backend: TrashBackend) -> PathResult:
    """Trash a single path, reporting the outcome to stdout/stderr."""
    try:
        st = _stat(path)
    except FileNotFoundError:
        if invocation.force:
            log.debug(f"Ignoring missing path {str(path)!r}")
            return PathResult(path, Outcome.SKIPPED_NOT_FOUND)
        print_error(f"Path not found: '{display_path(path)}'")
        return PathResult(path, Outcome.FAILED, "not found")
    except OSError as e:
        print_error(f"Error: '{display_path(path)}': {e.strerror or e}")
        return PathResult(path, Outcome.FAILED, str(e.strerror or e))

    is_dir = stat.S_ISDIR(st.st_mode)

    if is_dir and not invocation.recursive:
        print_error(f"Cannot remove directory '{display_path(path)}' without -r flag")
        return PathResult(path, Outcome.SKIPPED_IS_DIRECTORY, "is a directory")

    entries = []
    if is_dir and invocation.verbose:
        try:
            entries = _list_entries(path, invocation.force)
        except OSError as e:
            print_error(f"Error reading directory: '{display_path(path)}': {e.strerror or e}")
            return PathResult(path, Outcome.FAILED, str(e.strerror or e))

    try:
        backend.move_to_trash(path)
    except PathNotFoundError as e:
        if invocation.force:
            log.debug(f"{str(path)!r} vanished before it could be trashed")
            return PathResult(path, Outcome.TRASHED)
        print_error(f"Error moving to trash: '{display_path(path)}': {e}")
        return PathResult(path, Outcome.FAILED, str(e))
    except TrashError as e:
        print_error(f"Error moving to trash: '{display_path(path)}': {e}")
        return PathResult(path, Outcome.FAILED, str(e))

    log.info(f"Trashed {str(path)!r}")

    if invocation.verbose:
        if is_dir:
            print(f"Moved directory to trash: '{display_path(path)}'")
            for entry_path, label in entries:
                print(f"  Trashed: '{display_path(entry_path)}' ({label})")
        else:
            print(f"Moved file to trash: '{display_path(path)}' (size: {st.st_size} bytes)")

    return PathResult(path, Outcome.TRASHED)


def remove_paths(invocation: Invocation, backend: TrashBackend) -> List[PathResult]:
    """Trash every path of ``invocation`` in order; never stops early."""
    return [remove_path(path, invocation, backend) for path in invocation.paths]
