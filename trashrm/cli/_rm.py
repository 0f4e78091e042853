import logging
from pathlib import Path
from typing import List

from cyclopts import Parameter
from typing_extensions import Annotated

from trashrm.cli._parsers import BackendType
from trashrm.cli.main import app
from trashrm.remover import Invocation, remove_paths

log = logging.getLogger(__name__)


@app.default
def rm(
    paths: List[Path],
    /,
    *,
    recursive: Annotated[
        bool,
        Parameter(name=["--recursive", "-r", "-R"], negative=[]),
    ] = False,
    force: Annotated[
        bool,
        Parameter(name=["--force", "-f"], negative=[]),
    ] = False,
    verbose: Annotated[
        bool,
        Parameter(name=["--verbose", "-v"], negative=[]),
    ] = False,
    backend: BackendType,
) -> int:
    """Move files or directories to the trash.

    Parameters
    ----------
    paths: List[Path]
        Files or directories to trash.
    recursive: bool
        Allow trashing directories.
    force: bool
        Ignore nonexistent paths; skip unreadable directory entries when verbose.
    verbose: bool
        Enable verbose output.
    """
    invocation = Invocation(tuple(paths), recursive=recursive, force=force, verbose=verbose)
    log.debug(f"{invocation=} backend={backend}")

    results = remove_paths(invocation, backend)
    failures = [result for result in results if not result.ok]
    if failures:
        log.debug(f"{len(failures)} of {len(results)} paths not trashed.")
        return 1
    return 0
