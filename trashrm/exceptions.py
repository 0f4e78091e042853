class TrashError(Exception):
    """Unable to move a path into the trash."""


class PathNotFoundError(TrashError):
    """Path does not exist."""


class PermissionDeniedError(TrashError):
    """Operation not permitted on path."""


class DelegateError(TrashError):
    """The trash backend failed for some other reason."""
