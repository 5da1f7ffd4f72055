# adjgraph/_text.py

import re

_ANSI_RE = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
_CTRL_RE = re.compile(r"[\x00-\x1f\x7f]")  # non-printable/control chars


def safe_str(x: object, max_len: int = 120) -> str:
    """
    Render a key for logs and ``str(graph)``.

    ANSI escapes and control characters are removed; anything longer than
    ``max_len`` is cut and ends with an ellipsis.
    """
    s = _CTRL_RE.sub("", _ANSI_RE.sub("", str(x)))
    if len(s) > max_len:
        s = s[: max_len - 1] + "…"
    return s
