"""Appending hand histories to a JSON Lines style file."""

from __future__ import annotations

import json
import os
from pathlib import Path

from pokerhistory.models import HandHistory, OpenHandHistoryWrapper


def append_hand(path: str | os.PathLike[str], hand: HandHistory) -> None:
    """Append ``hand`` to ``path`` as one wrapped JSON document.

    The file is created if it does not exist. Each document is followed by
    a blank line to separate it from the next one.
    """
    wrapped = OpenHandHistoryWrapper(ohh=hand)
    text = json.dumps(wrapped.to_dict(), separators=(",", ":"))
    with Path(path).open("a", encoding="utf-8") as stream:
        stream.write(text)
        stream.write("\n\n")