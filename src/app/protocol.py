from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Literal

Outcome = Literal["Win", "Lose", "Draw"]

MIN_MOVES = 3

OUTCOME_MESSAGES: dict[str, str] = {
    "Win": "You win!",
    "Lose": "You lose!",
    "Draw": "It's a draw!",
}


class MoveSetError(ValueError):
    """Move list cannot be played: raised before any game object exists."""


class InvalidMoveCount(MoveSetError):
    pass


class DuplicateMoves(MoveSetError):
    pass


def check_move_count(count: int) -> None:
    if count < MIN_MOVES or count % 2 != 1:
        raise InvalidMoveCount(
            f"need an odd number of moves, at least {MIN_MOVES} (got {count})"
        )


@dataclass(frozen=True)
class MoveSet:
    labels: tuple[str, ...]

    def __post_init__(self) -> None:
        check_move_count(len(self.labels))
        seen: set[str] = set()
        dupes: list[str] = []
        for label in self.labels:
            if label in seen and label not in dupes:
                dupes.append(label)
            seen.add(label)
        if dupes:
            raise DuplicateMoves("moves must be unique, repeated: " + ", ".join(dupes))

    @classmethod
    def from_args(cls, moves: Iterable[str]) -> "MoveSet":
        return cls(labels=tuple(moves))

    def __len__(self) -> int:
        return len(self.labels)

    def __getitem__(self, index: int) -> str:
        return self.labels[index]

    def __iter__(self):
        return iter(self.labels)


@dataclass(frozen=True)
class RoundOutcome:
    outcome: Outcome
    user_index: int
    computer_index: int
    user_move: str
    computer_move: str

    @property
    def message(self) -> str:
        return OUTCOME_MESSAGES[self.outcome]
