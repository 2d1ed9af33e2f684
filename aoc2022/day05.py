"""Supply stacks: rearrange crates and report the top of each stack.

The first section lists one stack per line, crates from bottom to top;
stacks are numbered from 1. A blank line separates it from the moves,
written as ``move N from A to B``.
"""

from __future__ import annotations

Move = tuple[int, int, int]


def _parse_move(line: str) -> Move:
    words = line.split(" ")
    try:
        amount, source, target = int(words[1]), int(words[3]), int(words[5])
    except (IndexError, ValueError) as exc:
        raise ValueError(f"invalid move: {line!r}") from exc
    if min(amount, source, target) < 0:
        raise ValueError(f"invalid move: {line!r}")
    return amount, source, target


def _parse(text: str) -> tuple[list[list[str]], list[Move]]:
    stacks_part, separator, moves_part = text.partition("\n\n")
    if not separator:
        raise ValueError("expected a blank line between stacks and moves")
    stacks: list[list[str]] = [[]]
    stacks.extend(list(line) for line in stacks_part.split("\n"))
    moves = [_parse_move(line) for line in moves_part.rstrip("\n").splitlines()]
    return stacks, moves


def _stack(stacks: list[list[str]], number: int) -> list[str]:
    if not 0 <= number < len(stacks):
        raise ValueError(f"there is no stack {number}")
    return stacks[number]


def _rearrange(text: str, keep_order: bool) -> str:
    stacks, moves = _parse(text)
    for amount, source, target in moves:
        src = _stack(stacks, source)
        dst = _stack(stacks, target)
        if amount > len(src):
            raise ValueError(f"stack {source} holds fewer than {amount} crates")
        if keep_order:
            crates = src[len(src) - amount :]
            del src[len(src) - amount :]
            dst.extend(crates)
        else:
            for _ in range(amount):
                dst.append(src.pop())
    return "".join(stack[-1] for stack in stacks if stack)


def part1(text: str) -> str:
    """Top crates when crates are moved one at a time."""
    return _rearrange(text, keep_order=False)


def part2(text: str) -> str:
    """Top crates when several crates are moved at once."""
    return _rearrange(text, keep_order=True)