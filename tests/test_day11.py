import pytest

from aoc2022.day11 import Monkey, Troop, part1, part2


def _monkey(index, items, operation, divisor, if_true, if_false):
    return "\n".join(
        [
            f"Monkey {index}:",
            f"  Starting items: {items}",
            f"  Operation: new = {operation}",
            f"  Test: divisible by {divisor}",
            f"    If true: throw to monkey {if_true}",
            f"    If false: throw to monkey {if_false}",
        ]
    )


EXAMPLE = "\n\n".join(
    [
        _monkey(0, "79, 98", "old * 19", 23, 2, 3),
        _monkey(1, "54, 65, 75, 74", "old + 6", 19, 2, 0),
        _monkey(2, "79, 60, 97", "old * old", 13, 1, 3),
        _monkey(3, "74", "old + 3", 17, 0, 1),
    ]
) + "\n"


def test_part1_example():
    assert part1(EXAMPLE) == 10605


def test_part2_example():
    assert part2(EXAMPLE) == 2713310158


def test_monkey_parse_fields():
    monkey = Monkey.parse(_monkey(0, "79, 98", "old * 19", 23, 2, 3))
    assert monkey.index == 0
    assert list(monkey.items) == [79, 98]
    assert monkey.operator == "*"
    assert monkey.operand == 19
    assert monkey.test_mod == 23
    assert (monkey.throw_true, monkey.throw_false) == (2, 3)
    assert monkey.inspections == 0


def test_monkey_parse_square():
    monkey = Monkey.parse(_monkey(2, "79, 60, 97", "old * old", 13, 1, 3))
    assert monkey.operand is None


def test_monkey_parse_rejects_bad_header():
    block = _monkey(0, "79", "old + 1", 3, 1, 2).replace("Monkey 0:", "Ape 0:")
    with pytest.raises(ValueError):
        Monkey.parse(block)


def test_inspect_empties_items_and_counts():
    monkey = Monkey.parse(_monkey(0, "79, 98", "old * 19", 23, 2, 3))
    throws = monkey.inspect(False, 23)
    assert len(throws) == 2
    assert not monkey.items
    assert monkey.inspections == 2
    assert {target for _, target in throws} <= {2, 3}


def test_worried_inspect_keeps_divisibility():
    block = _monkey(0, "46", "old + 0", 23, 1, 2)
    monkey = Monkey.parse(block)
    [(level, target)] = monkey.inspect(True, 23 * 7)
    assert level % 23 == 0
    assert target == 1


def test_round_conserves_items():
    troop = Troop.parse(EXAMPLE)
    before = sum(len(m.items) for m in troop.monkeys)
    for _ in range(5):
        troop.round(False)
    assert sum(len(m.items) for m in troop.monkeys) == before


def test_troop_mod_is_multiple_of_each_divisor():
    troop = Troop.parse(EXAMPLE)
    assert all(troop.troop_mod % m.test_mod == 0 for m in troop.monkeys)


def test_monkey_business_needs_two_monkeys():
    troop = Troop.parse(_monkey(0, "79", "old + 1", 3, 0, 0))
    with pytest.raises(ValueError):
        troop.monkey_business()


def test_throw_to_missing_monkey():
    text = _monkey(0, "5", "old + 1", 3, 7, 7) + "\n\n" + _monkey(1, "5", "old + 1", 3, 0, 0)
    troop = Troop.parse(text)
    with pytest.raises(ValueError):
        troop.round(False)