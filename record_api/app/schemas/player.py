"""
Pydantic schema for players.

A player is identified by a zero-padded, numeric-looking string id
(``"000"`` to ``"999"``) and carries a display name and a score.  The
score is expected to stay within 0..100 but this is a convention of
callers and is not validated here.
"""

import random as _random
from typing import Optional

from pydantic import BaseModel, Field


class Player(BaseModel):
    """A read-only player record."""

    id: str = Field(..., examples=["007"])
    name: str = Field(..., examples=["Player-42"])
    score: int = Field(..., examples=[87])

    @classmethod
    def random(cls, id: Optional[str] = None, rng: Optional[_random.Random] = None) -> "Player":
        """Build a player with a random id, name and score.

        ``id`` may be given to pin the identity while keeping the other
        attributes random (used when seeding the mock store).
        """
        rng = rng or _random
        return cls(
            id=id if id is not None else "%03d" % rng.randint(0, 999),
            name="Player-%d" % rng.randint(0, 100),
            score=rng.randint(0, 100),
        )
