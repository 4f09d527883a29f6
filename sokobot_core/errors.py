"""Errors raised while reading a level, before any search starts.

All of them derive from ValueError so callers that only know about
ValueError (as the level filters do) keep working.
"""


class SokobanError(ValueError):
    """Base class for malformed level input."""


class MalformedGridError(SokobanError):
    """Empty level or rows that disagree with the declared dimensions."""


class MissingPlayerError(SokobanError):
    """No player cell in the level."""


class MultiplePlayersError(SokobanError):
    """More than one player cell in the level."""


class BoxGoalCountMismatchError(SokobanError):
    def __init__(self, boxes: int, goals: int) -> None:
        super().__init__(f"level has {boxes} boxes but {goals} goals")
        self.boxes = boxes
        self.goals = goals


class UnenclosedBoardError(SokobanError):
    """The playable area is not fully surrounded by walls."""
