from __future__ import annotations

from typing import Sequence

from protocol import Outcome, check_move_count

Relation = tuple[tuple[Outcome, ...], ...]


def build_relation(moves: Sequence[str]) -> Relation:
    """Win/Lose/Draw table for moves arranged on a circle.

    Row i is move i's result against every column. Each move beats the
    (N-1)/2 moves after it on the circle and loses to the (N-1)/2 before it,
    so for rock, paper, scissors: rock beats paper and loses to scissors.
    """
    n = len(moves)
    check_move_count(n)
    half = (n - 1) // 2

    rows: list[list[Outcome]] = [["Draw"] * n for _ in range(n)]
    for i in range(n):
        for k in range(1, half + 1):
            rows[i][(i + k) % n] = "Win"
            rows[i][(i - k + n) % n] = "Lose"
    return tuple(tuple(row) for row in rows)


class GameRules:
    def __init__(self, moves: Sequence[str]) -> None:
        self.moves = tuple(moves)
        self.relation = build_relation(self.moves)

    def outcome(self, own: int, other: int) -> Outcome:
        return self.relation[own][other]
