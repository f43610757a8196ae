"""Type hints used in Americano Pairing."""

from typing import List, Optional, Tuple

# A player is identified by name only
PlayerName = str

# Two teammates for one match
Team = Tuple[PlayerName, PlayerName]

# (score1, score2) as entered for one court
Scores = Tuple[int, int]

# Teammate pairs produced for one round, plus the resting player
FoldedRound = Tuple[List[Team], Optional[PlayerName]]

#  LocalWords:  FoldedRound
