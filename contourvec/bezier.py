"""Quadratic and cubic Bezier curves fitted to contours, and their EPS output."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .contours import PathLike
from .geom2d import Point

_ORIGIN = Point(0.0, 0.0)


@dataclass(frozen=True)
class Bezier2:
    """A quadratic Bezier curve given by its three control points."""

    c0: Point
    c1: Point
    c2: Point

    def evaluate(self, t: float) -> Point:
        """The point C(t) of the curve."""
        u = 1 - t
        return self.c0 * (u * u) + self.c1 * (2 * t * u) + self.c2 * (t * t)

    def elevate(self) -> Bezier3:
        """The same curve written as a cubic Bezier curve."""
        return Bezier3(
            self.c0,
            (self.c0 + self.c1 * 2.0) / 3.0,
            (self.c2 + self.c1 * 2.0) / 3.0,
            self.c2,
        )

    def distance(self, point: Point, t: float) -> float:
        """Distance from point to C(t)."""
        return point.distance(self.evaluate(t))


@dataclass(frozen=True)
class Bezier3:
    """A cubic Bezier curve given by its four control points."""

    c0: Point
    c1: Point
    c2: Point
    c3: Point

    def evaluate(self, t: float) -> Point:
        """The point C(t) of the curve."""
        u = 1 - t
        return (
            self.c0 * (u * u * u)
            + self.c1 * (3 * t * u * u)
            + self.c2 * (3 * t * t * u)
            + self.c3 * (t * t * t)
        )

    def distance(self, point: Point, t: float) -> float:
        """Distance from point to C(t)."""
        return point.distance(self.evaluate(t))


def elevate_all(curves: Iterable[Bezier2]) -> list[Bezier3]:
    """Degree elevation of every curve, in order."""
    return [curve.elevate() for curve in curves]


def approx_bezier2(points: Sequence[Point], first: int, last: int) -> Bezier2:
    """Least-squares quadratic Bezier fit of points[first..last]."""
    start, end = points[first], points[last]
    n = last - first
    if n == 1:
        return Bezier2(start, (start + end) / 2, end)
    n1 = float(n)
    alpha = 3 * n1 / (n1 * n1 - 1)
    beta = (1 - 2 * n1) / (2 * (n1 + 1))
    inner = sum((points[first + i] for i in range(1, n)), _ORIGIN)
    return Bezier2(start, inner * alpha + (start + end) * beta, end)


def gamma_weight(k: float, n: float) -> float:
    """Weight of an inner point in the cubic Bezier fit."""
    return 6 * k**4 - 8 * n * k**3 + 6 * k * k - 4 * n * k + n**4 - n * n


def approx_bezier3(points: Sequence[Point], first: int, last: int) -> Bezier3:
    """Least-squares cubic Bezier fit of points[first..last]."""
    n = last - first
    if n in (1, 2):
        return approx_bezier2(points, first, last).elevate()
    start, end = points[first], points[last]
    n1 = float(n)
    denominator = 3 * (n1 + 2) * (3 * n1 * n1 + 1)
    alpha = (-15 * n1**3 + 5 * n1 * n1 + 2 * n1 + 4) / denominator
    beta = (10 * n1**3 - 15 * n1 * n1 + n1 + 2) / denominator
    lam = 70 * n1 / (3 * (n1 * n1 - 1) * (n1 * n1 - 4) * (3 * n1 * n1 + 1))
    inner = [(i, points[first + i]) for i in range(1, n)]
    p1 = sum((p * gamma_weight(i, n1) for i, p in inner), _ORIGIN)
    p2 = sum((p * gamma_weight(n1 - i, n1) for i, p in inner), _ORIGIN)
    c1 = start * alpha + p1 * lam + end * beta
    c2 = start * beta + p2 * lam + end * alpha
    return Bezier3(start, c1, c2, end)


def _max_deviation(points, first, last, curve) -> tuple[float, int]:
    n = last - first
    dmax = 0.0
    split = first
    for j in range(first + 1, last + 1):
        d = curve.distance(points[j], (j - first) / n)
        if dmax < d:
            dmax = d
            split = j
    return dmax, split


def simplify_bezier2(
    points: Sequence[Point], first: int, last: int, threshold: float
) -> list[Bezier2]:
    """Douglas-Peucker simplification of points[first..last] into quadratic curves."""
    curve = approx_bezier2(points, first, last)
    dmax, split = _max_deviation(points, first, last, curve)
    if dmax <= threshold:
        return [curve]
    return simplify_bezier2(points, first, split, threshold) + simplify_bezier2(
        points, split, last, threshold
    )


def simplify_bezier3(
    points: Sequence[Point], first: int, last: int, threshold: float
) -> list[Bezier3]:
    """Douglas-Peucker simplification of points[first..last] into cubic curves."""
    curve = approx_bezier3(points, first, last)
    dmax, split = _max_deviation(points, first, last, curve)
    if dmax <= threshold:
        return [curve]
    return simplify_bezier3(points, first, split, threshold) + simplify_bezier3(
        points, split, last, threshold
    )


def _eps_curves(contours: Iterable[Sequence[Bezier3]], height: int) -> str:
    parts: list[str] = []
    for curves in contours:
        if not curves:
            continue
        head = curves[0].c0
        parts.append(f"{head.x:f} {height - head.y:f} moveto\n")
        for c in curves:
            parts.append(
                f"{c.c1.x:f} {height - c.c1.y:f} "
                f"{c.c2.x:f} {height - c.c2.y:f} "
                f"{c.c3.x:f} {height - c.c3.y:f} curveto\n"
            )
    return "".join(parts)


def _write_eps(contours: Iterable[Sequence[Bezier3]], path: PathLike, width: int, height: int) -> None:
    body = _eps_curves(contours, height)
    with open(path, "w", encoding="ascii") as out:
        out.write("%!PS-Adobe-3.0 EPSF-3.0\n")
        out.write(f"%%BoundingBox: -5 -5 {width + 5} {height + 5}\n")
        out.write(body)
        out.write("0 setlinewidth fill\n")
        out.write("showpage\n")


def write_eps_bezier2(
    contours: Iterable[Sequence[Bezier2]], path: PathLike, width: int, height: int
) -> None:
    """Write contours of quadratic curves as one filled EPS path."""
    _write_eps((elevate_all(curves) for curves in contours), path, width, height)


def write_eps_bezier3(
    contours: Iterable[Sequence[Bezier3]], path: PathLike, width: int, height: int
) -> None:
    """Write contours of cubic curves as one filled EPS path."""
    _write_eps(contours, path, width, height)