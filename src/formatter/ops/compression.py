"""Run-length compression over ASCII word characters.

decompress is only a partial inverse: literal "<char><digits>" sequences
already present in the text are expanded as well.
"""

import re

_RUN = re.compile(r"(\w)\1+", re.ASCII)
_COUNTED = re.compile(r"(\w)(\d+)", re.ASCII)


def compress(text: str) -> str:
    """Replace each run of 2+ identical word characters with char + count."""
    return _RUN.sub(lambda m: f"{m.group(1)}{len(m.group(0))}", text)


def decompress(text: str) -> str:
    """Expand every char + count pair back into a run."""
    return _COUNTED.sub(lambda m: m.group(1) * int(m.group(2)), text)
