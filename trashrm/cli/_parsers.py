import re
from typing import Iterable, List

from cyclopts import Parameter
from typing_extensions import Annotated

from trashrm.trashbackend import TrashBackend

BackendType = Annotated[TrashBackend, Parameter(parse=False)]

_bundled_flags_re = re.compile(r"^-([rRfv]{2,})$")


def expand_short_flags(tokens: Iterable[str]) -> List[str]:
    """Split bundled short flags like ``-rf`` into ``-r -f``.

    Tokens after a ``--`` delimiter are left untouched.
    """
    out = []
    tokens = iter(tokens)
    for token in tokens:
        if token == "--":
            out.append(token)
            out.extend(tokens)
            break

        match = _bundled_flags_re.match(token)
        if match:
            out.extend(f"-{c}" for c in match.group(1))
        else:
            out.append(token)
    return out
