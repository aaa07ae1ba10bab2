import pytest

from aoc2025.day01 import main, part_one, part_two


def test_part_one_reaches_zero_from_start():
    assert part_one("R50") == 1
    assert part_one("R50") == part_one("L50")


def test_part_one_full_turn_does_not_land_on_zero():
    assert part_one("R100") == part_one("")


def test_part_one_ignores_blank_lines_and_whitespace():
    assert part_one("R50\n\n  L10  \n\nR10\n") == part_one("R50\nL10\nR10")


def test_unknown_direction_turns_left():
    assert part_one("X30\nL20") == part_one("L30\nL20")
    assert part_two("X30\nL20") == part_two("L30\nL20")


def test_invalid_line_is_skipped_with_warning(capsys):
    assert part_one("R50\nRabc\nL5") == part_one("R50\nL5")
    assert "Warning: Skipping invalid line format: Rabc" in capsys.readouterr().err


def test_part_two_counts_each_pass():
    assert part_two("R1000") == 10


@pytest.mark.parametrize(
    "whole, split",
    [
        ("R150", "R50\nR100"),
        ("L275", "L75\nL200"),
        ("R37", "R30\nR7"),
        ("L50\nR300", "L50\nR1\nR299"),
    ],
)
def test_part_two_splitting_rotations_keeps_count(whole, split):
    assert part_two(whole) == part_two(split)


@pytest.mark.parametrize("text", ["R50\nL100\nR250", "L68\nL30\nR48\nL5", "R1\nL2\nR3"])
def test_part_two_counts_at_least_part_one(text):
    assert part_two(text) >= part_one(text)


def test_negative_amount_moves_only_in_part_one():
    assert part_one("R-50") == part_one("L50")
    assert part_two("R-50") == part_two("")


def test_main_prints_answers(tmp_path, capsys):
    text = "L68\nL30\nR48\nL5\nR60\n"
    path = tmp_path / "dial.txt"
    path.write_text(text, encoding="utf-8")
    main([str(path)])
    out = capsys.readouterr().out
    assert f"The solution for the first part is : {part_one(text)} " in out
    assert f"The solution for the second part is : {part_two(text)} " in out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "Error:" in capsys.readouterr().err