from __future__ import annotations

import argparse
from typing import Callable

from commit_reveal import EntropyUnavailable, find_committed_move
from game import Emit, MoveSource, RoundController
from protocol import MoveSet, MoveSetError
from rules import GameRules

USAGE_ERROR = "Invalid input. Please provide an odd number of unique moves"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="rps",
        description="Rock-paper-scissors for any odd number of unique moves, with a verifiable computer move.",
        epilog="Example: rps rock paper scissors lizard spock",
    )
    parser.add_argument("moves", nargs="*", metavar="MOVE", help="Move names in circle order")
    args = parser.parse_args(argv)

    try:
        moves = MoveSet.from_args(args.moves)
    except MoveSetError as exc:
        raise SystemExit(f"{USAGE_ERROR} ({exc}).")

    rules = GameRules(moves.labels)
    controller = RoundController(moves=moves, rules=rules, request_move=_console_prompt(moves, rules))
    try:
        controller.play()
    except EntropyUnavailable as exc:
        raise SystemExit(f"Cannot start a fair round: {exc}")
    return 0


def verify_main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="rps-verify",
        description="Check which move a revealed HMAC key was committed to.",
    )
    parser.add_argument("--key", required=True, help="HMAC key printed after the round (hex)")
    parser.add_argument("--hmac", required=True, help="HMAC printed before the round (hex)")
    parser.add_argument("moves", nargs="+", metavar="MOVE", help="Moves the round was played with")
    args = parser.parse_args(argv)

    try:
        key = bytes.fromhex(args.key)
    except ValueError:
        parser.error("--key must be hex")
    try:
        moves = MoveSet.from_args(args.moves)
    except MoveSetError as exc:
        parser.error(str(exc))

    move = find_committed_move(expected_hmac=args.hmac, key=key, moves=moves)
    if move is None:
        print("No move matches the HMAC.")
        return 1
    print(f"Verified: {move}")
    return 0


def _console_prompt(
    moves: MoveSet,
    rules: GameRules,
    read: Callable[[str], str] | None = None,
    emit: Emit = print,
) -> MoveSource:
    """Menu plus input loop; loops until a valid index or exit."""
    ask = read or input

    def request_move() -> int | None:
        _display_menu(moves, emit)
        while True:
            try:
                choice = ask("Enter your move: ").strip()
            except (EOFError, KeyboardInterrupt):
                emit("")
                choice = "0"

            if choice == "0":
                emit("Exiting the game.")
                return None
            if choice == "?":
                _display_help(rules, emit)
                continue
            try:
                number = int(choice)
            except ValueError:
                number = -1
            if 1 <= number <= len(moves):
                return number - 1
            emit("Invalid move. Please try again.")

    return request_move


def _display_menu(moves: MoveSet, emit: Emit) -> None:
    emit("Available moves:")
    for number, move in enumerate(moves, start=1):
        emit(f"{number} - {move}")
    emit("0 - exit")
    emit("? - help")


def _display_help(rules: GameRules, emit: Emit) -> None:
    emit("Help:")
    for line in format_help_table(rules):
        emit(line)


def format_help_table(rules: GameRules) -> list[str]:
    names = [_capitalize(m) for m in rules.moves]
    table = [[""] + names]
    for name, row in zip(names, rules.relation):
        table.append([name] + list(row))

    widths = [max(len(row[col]) for row in table) + 5 for col in range(len(table[0]))]
    return ["".join(cell.ljust(widths[col]) for col, cell in enumerate(row)) for row in table]


def _capitalize(move: str) -> str:
    # Only the first letter; "lizardMan" stays "LizardMan".
    return move[:1].upper() + move[1:]


if __name__ == "__main__":
    raise SystemExit(main())
