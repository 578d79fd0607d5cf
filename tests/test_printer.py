from axis_separation.model import CandidateLine
from axis_separation.printer import format_line, format_solution, write_solution


def test_format_line_uses_one_decimal():
    assert format_line(CandidateLine("v", 1.0, 0)) == "v 1.0"
    assert format_line(CandidateLine("h", -0.5, 3)) == "h -0.5"
    assert format_line(CandidateLine("h", 3.5, 3)) == "h 3.5"


def test_format_solution_starts_with_count():
    lines = [CandidateLine("v", 1.0, 0), CandidateLine("h", 0.0, 2)]

    assert format_solution(lines) == "2\nv 1.0\nh 0.0\n"


def test_format_empty_solution():
    assert format_solution([]) == "0\n"


def test_write_solution_creates_directories(tmp_path):
    path = tmp_path / "out" / "greedy_solution01.txt"

    written = write_solution(path, iter([CandidateLine("v", 1.0, 0)]))

    assert written == path
    assert path.read_text(encoding="utf-8") == "1\nv 1.0\n"
