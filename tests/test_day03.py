import pytest

from aoc2025.day03 import main, part_one, part_two

BANKS = ["987654321111111", "811111111111119", "234234234234278", "818181911112111"]


def _is_subsequence(needle, haystack):
    remaining = iter(haystack)
    return all(char in remaining for char in needle)


@pytest.mark.parametrize("bank, expected", [("98", 98), ("12", 12)])
def test_part_one_two_digit_bank(bank, expected):
    assert part_one(bank) == expected


@pytest.mark.parametrize(
    "bank, expected",
    [("123456789012", 123456789012), ("9" * 15, int("9" * 12))],
)
def test_part_two_known_banks(bank, expected):
    assert part_two(bank) == expected


@pytest.mark.parametrize("solve, digits", [(part_one, 2), (part_two, 12)])
@pytest.mark.parametrize("bank", BANKS)
def test_digits_are_picked_in_order(solve, digits, bank):
    value = str(solve(bank))
    assert len(value) == digits
    assert _is_subsequence(value, bank)


@pytest.mark.parametrize("solve", [part_one, part_two])
def test_banks_are_summed(solve):
    text = "\n".join(BANKS) + "\n"
    assert solve(text) == sum(solve(bank) for bank in BANKS)


def test_part_two_rejects_short_bank():
    with pytest.raises(ValueError):
        part_two("12345")


@pytest.mark.parametrize("text", ["9x", "12 3"])
def test_non_digit_raises(text):
    with pytest.raises(ValueError):
        part_one(text)


def test_main_prints_answers(tmp_path, capsys):
    text = "\n".join(BANKS) + "\n"
    path = tmp_path / "banks.txt"
    path.write_text(text, encoding="utf-8")
    main([str(path)])
    printed = capsys.readouterr().out.splitlines()
    assert printed[0].startswith(f"The solution for the first part is : {part_one(text)} ")
    assert printed[-1].startswith(f"The solution for the second part is : {part_two(text)} ")