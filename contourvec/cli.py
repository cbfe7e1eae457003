"""Command that asks for a point and a segment and prints the distance between them."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence

from .geom2d import Point, Segment, distance_point_segment

_POINT_PROMPT = "Donnez les coordonnées du Point :"
_SEGMENT_PROMPT = "Donnez les coordonnées des points qui constituent le segment :"
_POINT_ERROR = "Erreur de saisie pour les coordonnées du point."
_SEGMENT_ERROR = "Erreur de saisie pour les coordonnées du segment."


class _InputError(Exception):
    """Raised when the input does not hold the expected numbers."""


def _tokens() -> Iterator[str]:
    """Whitespace separated words of standard input, read line by line."""
    for line in sys.stdin:
        yield from line.split()


def _read_numbers(tokens: Iterator[str], count: int) -> list[float]:
    numbers: list[float] = []
    for _ in range(count):
        try:
            numbers.append(float(next(tokens)))
        except (StopIteration, ValueError) as exc:
            raise _InputError from exc
    return numbers


def _parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="contourvec",
        description="Read a point and a segment from standard input and print their distance.",
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return the exit status."""
    _parser().parse_args(argv)
    tokens = _tokens()

    print(_POINT_PROMPT, flush=True)
    try:
        px, py = _read_numbers(tokens, 2)
    except _InputError:
        print(_POINT_ERROR)
        return 1

    print(_SEGMENT_PROMPT, flush=True)
    try:
        ax, ay, bx, by = _read_numbers(tokens, 4)
    except _InputError:
        print(_SEGMENT_ERROR)
        return 1

    point = Point(px, py)
    segment = Segment(Point(ax, ay), Point(bx, by))
    result = distance_point_segment(point, segment)

    print(
        f"Entre le Point ({px:.2f},{py:.2f}) et le segment "
        f"(({ax:.2f},{ay:.2f}),({bx:.2f},{by:.2f})) il y a une distance de :"
    )
    print(f"{result:f} ")
    return 0


if __name__ == "__main__":
    sys.exit(main())