from __future__ import annotations

import hashlib
import hmac
import re
import secrets
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
APP_DIR = ROOT / "src" / "app"
sys.path.insert(0, str(APP_DIR))

from commit_reveal import (  # type: ignore[import-not-found]  # noqa: E402
    KEY_BYTES,
    Commitment,
    EntropyUnavailable,
    compute_hmac,
    find_committed_move,
    generate_key,
    verify_commitment,
)

MOVES = ["rock", "paper", "scissors", "lizard", "spock"]


def test_generate_key_is_32_random_bytes() -> None:
    key = generate_key()
    assert isinstance(key, bytes)
    assert len(key) == KEY_BYTES == 32
    assert generate_key() != key


def test_hmac_is_sha256_over_utf8_label() -> None:
    key = bytes(range(32))
    expected = hmac.new(key, "café".encode("utf-8"), hashlib.sha256).hexdigest()
    assert compute_hmac(key, "café") == expected
    assert re.fullmatch(r"[0-9a-f]{64}", expected)


def test_commitment_roundtrip() -> None:
    commitment = Commitment.issue("lizard")
    key = commitment.reveal()

    assert len(key) == 32
    assert commitment.reveal_hex() == key.hex()
    assert verify_commitment(expected_hmac=commitment.tag, key=key, move="lizard")
    for other in MOVES:
        if other != "lizard":
            assert not verify_commitment(expected_hmac=commitment.tag, key=key, move=other)


def test_commitment_repr_hides_key() -> None:
    commitment = Commitment.issue("rock")
    assert commitment.reveal_hex() not in repr(commitment)


def test_find_committed_move_matches_exactly_one() -> None:
    commitment = Commitment.issue("spock")
    assert find_committed_move(expected_hmac=commitment.tag, key=commitment.reveal(), moves=MOVES) == "spock"
    assert find_committed_move(expected_hmac=commitment.tag.upper(), key=commitment.reveal(), moves=MOVES) == "spock"


def test_find_committed_move_rejects_wrong_key() -> None:
    commitment = Commitment.issue("spock")
    assert find_committed_move(expected_hmac=commitment.tag, key=generate_key(), moves=MOVES) is None


def test_entropy_failure_is_fatal(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken(num_bytes: int) -> bytes:
        raise OSError("no randomness")

    monkeypatch.setattr(secrets, "token_bytes", broken)
    with pytest.raises(EntropyUnavailable):
        Commitment.issue("rock")
