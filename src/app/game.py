from __future__ import annotations

import secrets
from dataclasses import dataclass
from typing import Callable, Optional

from commit_reveal import Commitment
from protocol import MoveSet, RoundOutcome
from rules import GameRules

# Returns a 0-based move index, or None when the player chose to exit.
MoveSource = Callable[[], Optional[int]]
Emit = Callable[[str], None]


class CommitmentSealed(RuntimeError):
    pass


class RoundAlreadyPlayed(RuntimeError):
    pass


@dataclass
class RoundController:
    moves: MoveSet
    rules: GameRules
    request_move: MoveSource
    emit: Emit = print
    status: str = "start"
    computer_index: int | None = None
    commitment: Commitment | None = None
    result: RoundOutcome | None = None

    def commit(self) -> str:
        _, tag = self._issue_commitment()
        return tag

    def _issue_commitment(self) -> tuple[int, str]:
        if self.status != "start":
            raise RoundAlreadyPlayed(f"round is already {self.status}")
        computer_index = secrets.randbelow(len(self.moves))
        commitment = Commitment.issue(self.moves[computer_index])
        self.computer_index = computer_index
        self.commitment = commitment
        self.status = "commitment_issued"
        self.emit(f"HMAC: {commitment.tag}")
        return computer_index, commitment.tag

    def play(self) -> RoundOutcome | None:
        """Run one round. Returns None if the player exits at the prompt."""
        computer_index, _ = self._issue_commitment()
        self.status = "awaiting_user_move"

        user_index = self.request_move()
        if user_index is None:
            self.status = "aborted"
            return None
        if not 0 <= user_index < len(self.moves):
            raise IndexError(f"move index out of range: {user_index}")

        self.result = RoundOutcome(
            outcome=self.rules.outcome(user_index, computer_index),
            user_index=user_index,
            computer_index=computer_index,
            user_move=self.moves[user_index],
            computer_move=self.moves[computer_index],
        )
        self.status = "resolved"

        self.emit(f"Your move: {self.result.user_move}")
        self.emit(f"Computer move: {self.result.computer_move}")
        self.emit(self.result.message)
        self.emit(f"HMAC key: {self.reveal_key().hex()}")
        return self.result

    def reveal_key(self) -> bytes:
        if self.status != "resolved" or self.commitment is None:
            raise CommitmentSealed(f"key stays sealed while round is {self.status}")
        return self.commitment.reveal()
