"""Contour tracing in black and white images, polyline simplification and EPS output."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Union

from .geom2d import Point, Segment, distance_point_segment

PathLike = Union[str, "os.PathLike[str]"]


class Orientation(Enum):
    """Direction of travel along a contour."""

    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"

    def turn_left(self) -> Orientation:
        """Rotate by 90 degrees counter-clockwise."""
        return _LEFT_OF[self]


_LEFT_OF = {
    Orientation.NORTH: Orientation.WEST,
    Orientation.WEST: Orientation.SOUTH,
    Orientation.SOUTH: Orientation.EAST,
    Orientation.EAST: Orientation.NORTH,
}


class BinaryImage:
    """A black and white image with 1-based pixel coordinates.

    Reading outside the image yields white.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("image dimensions must be non-negative")
        self.width = width
        self.height = height
        self._rows = [bytearray(width) for _ in range(height)]

    def _inside(self, x: int, y: int) -> bool:
        return 1 <= x <= self.width and 1 <= y <= self.height

    def get(self, x: float, y: float) -> bool:
        """True when the pixel at (x, y) is black."""
        x, y = int(x), int(y)
        if not self._inside(x, y):
            return False
        return bool(self._rows[y - 1][x - 1])

    def set(self, x: float, y: float, black: bool) -> None:
        """Paint the pixel at (x, y) black or white."""
        x, y = int(x), int(y)
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        self._rows[y - 1][x - 1] = 1 if black else 0

    def copy(self) -> BinaryImage:
        """An independent copy of the image."""
        other = BinaryImage(self.width, self.height)
        other._rows = [bytearray(row) for row in self._rows]
        return other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BinaryImage):
            return NotImplemented
        return (self.width, self.height, self._rows) == (other.width, other.height, other._rows)

    def __repr__(self) -> str:
        return f"BinaryImage(width={self.width}, height={self.height})"


def image_from_rows(rows: Iterable[str | Sequence[object]]) -> BinaryImage:
    """Build an image from rows, top to bottom.

    A row is either a string of '0' (white) and '1' (black) characters or a
    sequence of values whose truth gives the pixel colour.
    """
    parsed: list[list[bool]] = []
    for row in rows:
        if isinstance(row, str):
            if any(ch not in "01" for ch in row):
                raise ValueError(f"invalid pixel row {row!r}")
            parsed.append([ch == "1" for ch in row])
        else:
            parsed.append([bool(value) for value in row])
    width = len(parsed[0]) if parsed else 0
    if any(len(row) != width for row in parsed):
        raise ValueError("all rows must have the same length")
    image = BinaryImage(width, len(parsed))
    for y, row in enumerate(parsed, start=1):
        for x, black in enumerate(row, start=1):
            if black:
                image.set(x, y, True)
    return image


def advance(point: Point, orientation: Orientation) -> Point:
    """Move one pixel in the given direction."""
    if orientation is Orientation.EAST:
        return Point(point.x + 1, point.y)
    if orientation is Orientation.SOUTH:
        return Point(point.x, point.y + 1)
    if orientation is Orientation.WEST:
        return Point(point.x - 1, point.y)
    return Point(point.x, point.y - 1)


def _pixels(image: BinaryImage):
    for y in range(1, image.height + 1):
        for x in range(1, image.width + 1):
            yield x, y


def find_start_point(image: BinaryImage) -> Point | None:
    """Corner of the first black pixel with a white pixel above it, or None."""
    for x, y in _pixels(image):
        if image.get(x, y) and not image.get(x, y - 1):
            return Point(x - 1, y - 1)
    return None


def left_pixel(image: BinaryImage, point: Point, orientation: Orientation) -> bool:
    """Colour of the pixel ahead on the left; True for black."""
    x, y = point.x, point.y
    if orientation is Orientation.NORTH:
        return image.get(x, y)
    if orientation is Orientation.EAST:
        return image.get(x + 1, y)
    if orientation is Orientation.SOUTH:
        return image.get(x + 1, y + 1)
    return image.get(x, y + 1)


def right_pixel(image: BinaryImage, point: Point, orientation: Orientation) -> bool:
    """Colour of the pixel ahead on the right; True for black."""
    x, y = point.x, point.y
    if orientation is Orientation.NORTH:
        return image.get(x + 1, y)
    if orientation is Orientation.EAST:
        return image.get(x + 1, y + 1)
    if orientation is Orientation.SOUTH:
        return image.get(x, y + 1)
    return image.get(x, y)


def new_orientation(image: BinaryImage, point: Point, orientation: Orientation) -> Orientation:
    """Direction to take from point, keeping black pixels on the right."""
    left = left_pixel(image, point, orientation)
    right = right_pixel(image, point, orientation)
    if not left and not right:
        return orientation.turn_left().turn_left().turn_left()
    if left:
        return orientation.turn_left()
    return orientation


def edge_mask(image: BinaryImage) -> BinaryImage:
    """Image of the black pixels that have a white pixel above them."""
    mask = BinaryImage(image.width, image.height)
    for x, y in _pixels(image):
        if image.get(x, y) and not image.get(x, y - 1):
            mask.set(x, y, True)
    return mask


def first_black_pixel(image: BinaryImage) -> Point | None:
    """Coordinates of the first black pixel in reading order, or None."""
    for x, y in _pixels(image):
        if image.get(x, y):
            return Point(x, y)
    return None


def trace_contours(image: BinaryImage) -> list[list[Point]]:
    """Every closed contour of the image, each as a list of corner points.

    Each contour ends with its starting point.
    """
    mask = edge_mask(image)
    contours: list[list[Point]] = []
    start = find_start_point(mask)
    while start is not None:
        contour: list[Point] = []
        point = start
        orientation = Orientation.EAST
        while True:
            if orientation is Orientation.EAST:
                mask.set(point.x + 1, point.y + 1, False)
            contour.append(point)
            point = advance(point, orientation)
            orientation = new_orientation(image, point, orientation)
            if point == start and orientation is Orientation.EAST:
                break
        contour.append(point)
        contours.append(contour)
        start = find_start_point(mask)
    return contours


def simplify_polyline(
    points: Sequence[Point], first: int, last: int, threshold: float
) -> list[Point]:
    """Douglas-Peucker simplification of points[first..last].

    The result lists each kept segment as a pair of endpoints, so inner
    split points appear twice.
    """
    segment = Segment(points[first], points[last])
    dmax = 0.0
    split = first
    for j in range(first + 1, last + 1):
        d = distance_point_segment(points[j], segment)
        if dmax < d:
            dmax = d
            split = j
    if dmax <= threshold:
        return [points[first], points[last]]
    return simplify_polyline(points, first, split, threshold) + simplify_polyline(
        points, split, last, threshold
    )


def _eps_header(width: int, height: int) -> str:
    return f"%!PS-Adobe-3.0 EPSF-3.0\n%%BoundingBox: 0 0 {width} {height}\n"


def _eps_path(points: Sequence[Point], height: int) -> str:
    if not points:
        raise ValueError("cannot draw an empty contour")
    head, *rest = points
    parts = [f"{head.x:f} {height - head.y:f} moveto "]
    parts.extend(f"{p.x:f} {height - p.y:f} lineto \n" for p in rest)
    return "".join(parts)


def write_eps_contour(points: Sequence[Point], path: PathLike, width: int, height: int) -> None:
    """Write one contour as a stroked EPS path."""
    body = _eps_path(points, height)
    with open(path, "w", encoding="ascii") as out:
        out.write(_eps_header(width, height))
        out.write(body)
        out.write("0 setlinewidth stroke\n")
        out.write("showpage")


def write_eps_contours(
    contours: Iterable[Sequence[Point]], path: PathLike, width: int, height: int
) -> None:
    """Write several contours as one filled EPS path."""
    body = "".join(_eps_path(contour, height) for contour in contours)
    with open(path, "w", encoding="ascii") as out:
        out.write(_eps_header(width, height))
        out.write(body)
        out.write("0 setlinewidth fill\n")
        out.write("showpage")