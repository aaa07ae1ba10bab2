import pytest

from aoc2025.day05 import main, merge_ranges, part_one, part_two

RANGES = [(3, 5), (10, 14), (16, 20), (12, 18)]
IDS = [1, 5, 8, 11, 17, 32]
RANGE_LINES = "\n".join(f"{start}-{end}" for start, end in RANGES)
DATABASE = RANGE_LINES + "\n\n" + "\n".join(map(str, IDS))


@pytest.mark.parametrize(
    "ranges, expected",
    [
        (RANGES, [(3, 5), (10, 20)]),
        ([(3, 4), (1, 2)], [(1, 4)]),
        ([(1, 10), (2, 3)], [(1, 10)]),
    ],
)
def test_merge_ranges(ranges, expected):
    assert merge_ranges(ranges) == expected


def test_merge_result_is_sorted_and_separated():
    merged = merge_ranges([(40, 50), (1, 3), (7, 9), (2, 5), (45, 60), (20, 20)])
    assert all(end + 1 < start for (_, end), (start, _) in zip(merged, merged[1:]))


def test_merge_does_not_modify_input():
    ranges = list(RANGES)
    merge_ranges(ranges)
    assert ranges == RANGES


def test_part_one_counts_fresh_ids():
    fresh = [ingredient for ingredient in IDS if any(a <= ingredient <= b for a, b in RANGES)]
    assert part_one(DATABASE) == len(fresh)


def test_part_two_matches_union_size():
    covered = {value for start, end in RANGES for value in range(start, end + 1)}
    assert part_two(DATABASE) == len(covered)


def test_part_two_ignores_available_ids():
    assert part_two(DATABASE) == part_two(RANGE_LINES)


@pytest.mark.parametrize(
    "solve, text",
    [(part_two, "3-x\n\n4"), (part_two, "35\n\n4"), (part_one, "3-5\n\nabc")],
)
def test_invalid_database_is_rejected(solve, text):
    with pytest.raises(ValueError):
        solve(text)


def test_main_reads_file_and_prints(tmp_path, capsys):
    path = tmp_path / "database.txt"
    path.write_text(DATABASE, encoding="utf-8")
    assert main([str(path)]) == 0
    lines = [line for line in capsys.readouterr().out.splitlines() if line]
    assert lines[0].split(" : ")[1].startswith(f"{part_one(DATABASE)} ")
    assert lines[1].split(" : ")[1].startswith(f"{part_two(DATABASE)} ")


def test_main_reports_missing_file(tmp_path):
    assert main([str(tmp_path / "absent.txt")]) == 1