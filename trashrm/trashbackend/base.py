from abc import abstractmethod
from pathlib import Path

from autoregistry import Registry


class TrashBackend(Registry, suffix="Backend"):
    """Abstraction over the platform's reversible-delete facility."""

    def __init__(self):
        pass

    def __str__(self):
        return type(self).__registry__.name

    @abstractmethod
    def move_to_trash(self, path: Path):
        """Move ``path`` into the trash.

        Raises
        ------
        PathNotFoundError
            ``path`` no longer exists.
        PermissionDeniedError
            The platform refused to trash ``path``.
        DelegateError
            Any other failure.
        """
        raise NotImplementedError
