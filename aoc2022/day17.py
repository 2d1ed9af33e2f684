"""Pyroclastic flow: stack falling rocks pushed around by jets of gas."""

from __future__ import annotations

Point = tuple[int, int]

_WIDTH = 7
_SHAPES: tuple[tuple[Point, ...], ...] = (
    ((0, 0), (1, 0), (2, 0), (3, 0)),
    ((1, 2), (2, 1), (1, 1), (0, 1), (1, 0)),
    ((0, 0), (1, 0), (2, 0), (2, 1), (2, 2)),
    ((0, 0), (0, 1), (0, 2), (0, 3)),
    ((0, 1), (1, 1), (0, 0), (1, 0)),
)
_HEIGHTS = (1, 3, 3, 4, 2)
_SHAPE_WIDTHS = (4, 3, 3, 1, 2)
_JETS = {"<": -1, ">": 1}


def _parse(text: str) -> list[int]:
    line = text.rstrip("\n")
    if not line:
        raise ValueError("no jets given")
    try:
        return [_JETS[c] for c in line]
    except KeyError as exc:
        raise ValueError(f"unexpected jet character: {exc.args[0]!r}") from None


def _tower_height(jets: list[int], rock_count: int, detect_cycles: bool) -> int:
    rocks: set[Point] = set()
    highest = 0
    extra = 0
    remaining = rock_count
    kind = 0
    step = 0
    period = 2 * len(jets)
    seen: list[tuple[int, int, int, int]] = []

    def free(x: int, y: int, shape: tuple[Point, ...]) -> bool:
        return all((x + px, y + py) not in rocks for px, py in shape)

    while remaining:
        shape_kind = kind
        shape = _SHAPES[shape_kind]
        kind = (kind + 1) % len(_SHAPES)
        remaining -= 1
        x, y = 2, highest + 4
        while True:
            jet_count = step
            step += 1
            if jet_count % 2:
                if y > 1 and free(x, y - 1, shape):
                    y -= 1
                    continue
                highest = max(highest, y + _HEIGHTS[shape_kind] - 1)
                rocks.update((x + px, y + py) for px, py in shape)
                break
            dx = jets[(jet_count // 2) % len(jets)]
            if dx < 0:
                if x > 0 and free(x - 1, y, shape):
                    x -= 1
            elif x + _SHAPE_WIDTHS[shape_kind] < _WIDTH and free(x + 1, y, shape):
                x += 1
        if detect_cycles and extra == 0 and shape_kind == 0:
            marker = (x, jet_count % period, remaining, highest)
            previous = next(
                (p for p in seen if p[0] == marker[0] and p[1] == marker[1]), None
            )
            if previous is not None:
                rocks_per_cycle = previous[2] - remaining
                growth = highest - previous[3]
                extra = (remaining // rocks_per_cycle) * growth
                remaining %= rocks_per_cycle
            seen.append(marker)
    return highest + extra


def part1(text: str) -> int:
    """Height of the tower after 2022 rocks."""
    return _tower_height(_parse(text), 2022, detect_cycles=False)


def part2(text: str) -> int:
    """Height of the tower after a trillion rocks."""
    return _tower_height(_parse(text), 1_000_000_000_000, detect_cycles=True)