from __future__ import annotations

import hashlib
import hmac
import secrets
from dataclasses import dataclass, field
from typing import Final, Iterable

KEY_BYTES: Final[int] = 32


class EntropyUnavailable(RuntimeError):
    """The OS random source failed; no fair commitment can be made."""


def generate_key(num_bytes: int = KEY_BYTES) -> bytes:
    try:
        return secrets.token_bytes(num_bytes)
    except (OSError, NotImplementedError) as exc:
        raise EntropyUnavailable(f"secure random source unavailable: {exc}") from exc


def compute_hmac(key: bytes, move: str) -> str:
    return hmac.new(key, move.encode("utf-8"), hashlib.sha256).hexdigest()


def verify_commitment(*, expected_hmac: str, key: bytes, move: str) -> bool:
    return secrets.compare_digest(expected_hmac.lower(), compute_hmac(key, move))


def find_committed_move(*, expected_hmac: str, key: bytes, moves: Iterable[str]) -> str | None:
    # A fair commitment matches exactly one label; zero or several is a failure.
    matches = [m for m in moves if verify_commitment(expected_hmac=expected_hmac, key=key, move=m)]
    return matches[0] if len(matches) == 1 else None


@dataclass(frozen=True)
class Commitment:
    move: str
    tag: str
    _key: bytes = field(repr=False)

    @classmethod
    def issue(cls, move: str) -> "Commitment":
        key = generate_key()
        return cls(move=move, tag=compute_hmac(key, move), _key=key)

    def reveal(self) -> bytes:
        return self._key

    def reveal_hex(self) -> str:
        return self._key.hex()
