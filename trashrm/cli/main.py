import logging
import sys
from typing import List, Literal, Optional, Sequence, Tuple

from cyclopts import App, Parameter
from typing_extensions import Annotated

from trashrm import __version__
from trashrm.cli._parsers import expand_short_flags
from trashrm.trashbackend import TrashBackend
from trashrm.utils import Color, colored, err_console

app = App(
    name="trashrm",
    version=__version__,
    help="Move files and directories to the trash instead of deleting them.",
)

app.meta["--help"].group = "Admin"
app.meta["--version"].group = "Admin"


class ColoredFormatter(logging.Formatter):
    LOG_COLORS = {
        "DEBUG": Color.BLUE,
        "INFO": Color.GREEN,
        "WARNING": Color.YELLOW,
        "ERROR": Color.RED,
        "CRITICAL": Color.MAGENTA,
    }

    def format(self, record):
        color = self.LOG_COLORS.get(record.levelname, Color.WHITE)
        record.msg = colored(color, str(record.msg))
        return super().format(record)


def _setup_logging(verbosity):
    formatter = ColoredFormatter("%(asctime)s - %(levelname)s: %(message)s")
    logging.getLogger().setLevel(verbosity.upper())
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    logger = logging.getLogger()
    logger.handlers.clear()
    logger.addHandler(handler)


@app.meta.default
def main(
    *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
    verbosity: Literal["debug", "info", "warning", "error"] = "warning",
    backend: Annotated[Optional[TrashBackend], Parameter(parse=False)] = None,
    trailing: Annotated[Sequence[str], Parameter(parse=False)] = (),
    exit_on_error: Annotated[bool, Parameter(parse=False)] = True,
):
    """Move files and directories to the trash instead of deleting them.

    Parameters
    ----------
    verbosity
        Diagnostic logging level.
    """
    _setup_logging(verbosity)

    # Everything after "--" is a path, even if it looks like a flag.
    if trailing:
        tokens = (*tokens, "--", *trailing)

    command, bound, ignored = app.parse_args(
        expand_short_flags(tokens),
        console=err_console,
        exit_on_error=exit_on_error,
    )

    additional_kwargs = {}
    if "backend" in ignored:
        if backend is None:
            backend = TrashBackend["send2trash"]()
        additional_kwargs["backend"] = backend

    return command(*bound.args, **bound.kwargs, **additional_kwargs)


def _split_trailing(tokens: List[str]) -> Tuple[List[str], List[str]]:
    if "--" not in tokens:
        return tokens, []
    idx = tokens.index("--")
    return tokens[:idx], tokens[idx + 1 :]


def run_app(tokens: Optional[List[str]] = None):
    if tokens is None:
        tokens = sys.argv[1:]

    # The meta-app swallows "--", so split off the trailing paths beforehand.
    tokens, trailing = _split_trailing(list(tokens))

    command, bound, ignored = app.meta.parse_args(tokens)
    additional_kwargs = {}
    if "trailing" in ignored:
        additional_kwargs["trailing"] = trailing

    sys.exit(command(*bound.args, **bound.kwargs, **additional_kwargs))
