"""Persist the high score as a four-byte unsigned integer."""

from __future__ import annotations

import struct
from pathlib import Path

DEFAULT_SCORE_PATH = Path("score.dat")

_FORMAT = struct.Struct("<I")
_MAX_SCORE = 2**32 - 1


def create_score_file(path: str | Path = DEFAULT_SCORE_PATH) -> None:
    """Create (or overwrite) the score file holding a score of zero."""
    Path(path).write_bytes(_FORMAT.pack(0))


def read_high_score(path: str | Path = DEFAULT_SCORE_PATH) -> int:
    """Return the stored high score, creating the file if missing or short."""
    path = Path(path)
    if not path.exists():
        create_score_file(path)
    data = path.read_bytes()
    if len(data) < _FORMAT.size:
        create_score_file(path)
        return 0
    (score,) = _FORMAT.unpack(data[: _FORMAT.size])
    return score


def write_high_score(score: int, path: str | Path = DEFAULT_SCORE_PATH) -> None:
    """Store a new high score."""
    if not 0 <= score <= _MAX_SCORE:
        raise ValueError(f"score {score} does not fit in an unsigned 32-bit integer")
    Path(path).write_bytes(_FORMAT.pack(score))