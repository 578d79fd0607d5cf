"""Example: separate the corners of a square and a small scattered set."""

from axis_separation import GreedySeparator, PointStore, format_solution, separate

SQUARE = [(0, 0), (0, 2), (2, 0), (2, 2)]

SCATTERED = [(1, 7), (2, 3), (4, 9), (5, 1), (6, 6), (8, 2), (9, 8)]


def main() -> None:
    result = separate(SQUARE)
    print(f"Square:\n{format_solution(result.lines)}")

    separator = GreedySeparator(PointStore(SCATTERED))
    print(f"Scattered: {separator.pool.total} candidate line(s)")
    while separator.graph.active_count() > 0:
        line, score = separator.select()
        separator.commit(line)
        print(f"  {line.axis} {line.coord:.1f} cuts {score} link(s)")
    separator.release()


if __name__ == "__main__":
    main()
