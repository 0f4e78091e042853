import logging
from pathlib import Path

from send2trash import send2trash
from send2trash.exceptions import TrashPermissionError

from trashrm.exceptions import DelegateError, PathNotFoundError, PermissionDeniedError
from trashrm.trashbackend.base import TrashBackend

log = logging.getLogger(__name__)


class Send2TrashBackend(TrashBackend):
    """Freedesktop trash, macOS Trash, or Windows Recycle Bin via ``send2trash``."""

    def move_to_trash(self, path: Path):
        log.debug(f"send2trash({str(path)!r})")
        try:
            send2trash(str(path))
        except FileNotFoundError as e:
            raise PathNotFoundError(e.strerror or str(e)) from e
        except TrashPermissionError as e:
            # Usually no trash directory could be created on the path's device.
            raise PermissionDeniedError(str(e) or "Unable to create trash directory") from e
        except PermissionError as e:
            raise PermissionDeniedError(e.strerror or str(e)) from e
        except OSError as e:
            raise DelegateError(e.strerror or str(e)) from e
