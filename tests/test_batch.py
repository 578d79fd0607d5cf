from pathlib import Path

from axis_separation.batch import process_instance, run_batch
from axis_separation.config import BatchOptions, get_separator_options, set_separator_options
from axis_separation.model import SeparatorOptions


def _write(directory: Path, index: int, text: str) -> None:
    (directory / f"instance{index:02d}.txt").write_text(text, encoding="utf-8")


def _options(tmp_path: Path, **kwargs) -> BatchOptions:
    input_dir = tmp_path / "input"
    input_dir.mkdir(exist_ok=True)
    return BatchOptions(input_dir=input_dir, output_dir=tmp_path / "output_greedy", **kwargs)


def test_batch_continues_past_bad_instances(tmp_path):
    options = _options(tmp_path, first_index=1, last_index=6)
    _write(options.input_dir, 1, "2\n0 0\n2 2\n")
    _write(options.input_dir, 2, "")
    _write(options.input_dir, 3, "3\n0 0\n1 1\n")
    _write(options.input_dir, 5, "2\n1 1\n1 1\n")
    _write(options.input_dir, 6, "2\n0 x\n")

    report = run_batch(options)

    assert [outcome.status for outcome in report.outcomes] == [
        "solved",
        "empty",
        "mismatch",
        "missing",
        "aborted",
        "invalid",
    ]
    assert report.solved_count == 1
    assert (options.output_dir / "greedy_solution01.txt").read_text(encoding="utf-8") == "1\nv 1.0\n"
    assert sorted(p.name for p in options.output_dir.iterdir()) == ["greedy_solution01.txt"]


def test_instance_over_capacity_is_rejected(tmp_path):
    options = _options(tmp_path, separator=SeparatorOptions(capacity=2))
    _write(options.input_dir, 1, "3\n0 0\n1 1\n2 2\n")

    outcome = process_instance(1, options)

    assert outcome.status == "capacity"
    assert outcome.output_path is None


def test_empty_point_set_writes_zero_lines(tmp_path):
    options = _options(tmp_path)
    _write(options.input_dir, 9, "0\n")

    outcome = process_instance(9, options)

    assert outcome.solved
    assert outcome.line_count == 0
    assert outcome.output_path.read_text(encoding="utf-8") == "0\n"


def test_batch_options_build_numbered_paths():
    options = BatchOptions(input_dir=Path("in"), output_dir=Path("out"), first_index=3, last_index=4)

    assert list(options.indices()) == [3, 4]
    assert options.input_path(3) == Path("in") / "instance03.txt"
    assert options.output_path(12) == Path("out") / "greedy_solution12.txt"


def test_default_separator_options_are_copied():
    original = get_separator_options()
    try:
        set_separator_options(SeparatorOptions(capacity=7))
        options = get_separator_options()
        options.capacity = 1

        assert get_separator_options().capacity == 7
        assert BatchOptions().separator.capacity == 7
    finally:
        set_separator_options(original)


def test_undecodable_instance_does_not_stop_the_batch(tmp_path):
    options = _options(tmp_path, first_index=1, last_index=2)
    (options.input_dir / "instance01.txt").write_bytes(b"2\n0 0\n\xff\xfe 2\n")
    _write(options.input_dir, 2, "2\n0 0\n2 2\n")

    report = run_batch(options)

    assert [outcome.status for outcome in report.outcomes] == ["invalid", "solved"]
    assert (options.output_dir / "greedy_solution02.txt").read_text(encoding="utf-8") == "1\nv 1.0\n"


def test_unwritable_output_aborts_only_that_instance(tmp_path):
    options = _options(tmp_path)
    options.output_dir.write_text("not a directory", encoding="utf-8")
    _write(options.input_dir, 1, "2\n0 0\n2 2\n")

    outcome = process_instance(1, options)

    assert outcome.status == "aborted"
    assert outcome.output_path is None
    assert outcome.line_count == 1
