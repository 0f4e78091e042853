import logging
import shutil
from pathlib import Path

import pytest

from trashrm.exceptions import PathNotFoundError, TrashError
from trashrm.trashbackend import TrashBackend


class RecordingBackend(TrashBackend):
    """Moves paths into a local directory instead of the real trash."""

    def __init__(self, trash_dir: Path):
        super().__init__()
        self.trash_dir = trash_dir
        self.trashed = []
        self.errors = {}

    def move_to_trash(self, path: Path):
        if path in self.errors:
            raise self.errors[path]
        if not path.exists() and not path.is_symlink():
            raise PathNotFoundError("No such file or directory")
        dst = self.trash_dir / f"{len(self.trashed)}-{path.name}"
        shutil.move(str(path), str(dst))
        self.trashed.append(path)

    def fail(self, path: Path, error: TrashError):
        self.errors[path] = error


@pytest.fixture
def trash_dir(tmp_path):
    trash_dir = tmp_path / "trash"
    trash_dir.mkdir()
    return trash_dir


@pytest.fixture
def backend(trash_dir):
    return RecordingBackend(trash_dir)


@pytest.fixture
def workdir(tmp_path):
    workdir = tmp_path / "work"
    workdir.mkdir()
    return workdir


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
