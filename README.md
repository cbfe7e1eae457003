# contourvec

contourvec turns a black-and-white image into vector outlines. It follows
the boundary between black and white pixels, collects every closed contour,
optionally simplifies each one, and writes the result as an Encapsulated
PostScript (EPS) file.

The contours can be written as:

* polylines taken straight from the pixel boundaries;
* polylines simplified with the Douglas–Peucker algorithm;
* quadratic Bézier curves (elevated to cubic ones when written);
* cubic Bézier curves.

## Installation

```
pip install .
```

The package needs nothing beyond the standard library.

## Geometry

`contourvec.geom2d` holds the small 2D toolkit the rest is built on.

```python
from contourvec.geom2d import Point, Segment, distance_point_segment

a = Point(0.0, 0.0)
b = Point(4.0, 0.0)
p = Point(2.0, 3.0)

print(a.distance(p))                              # 3.605551...
print(distance_point_segment(p, Segment(a, b)))   # 3.0
```

`Point` and `Vector` are frozen dataclasses. `Point` supports `+` and `-`
with another point, and `*` and `/` by a number; `Point.distance` gives the
Euclidean distance. `Vector` supports `+` with another vector and `*` by a
number, with `dot` and `norm`. `vector_between`, `projection_parameter` and
`project` expose the steps behind `distance_point_segment`: the distance is
taken to the orthogonal projection when it falls on the segment, and to the
nearer end point otherwise.

## Images and contours

`contourvec.contours` works on a `BinaryImage`, whose pixels are addressed
with 1-based `(x, y)` coordinates. `get` returns `True` for black and treats
pixels outside the image as white; `set` raises `IndexError` outside it;
`copy` gives an independent image. `image_from_rows` builds one from rows
written top to bottom, either as strings of `0` and `1` or as sequences of
values taken by their truth.

`trace_contours(image)` returns every closed contour as a list of points on
the pixel-corner grid, each one ending with its starting point. The steps it
is built from are public too: `edge_mask`, `find_start_point` and
`first_black_pixel` (both return `None` when there is nothing to find),
`advance`, `left_pixel`, `right_pixel` and `new_orientation`, with
`Orientation` and its `turn_left` method for the four directions of travel.

```python
from contourvec.contours import (
    image_from_rows,
    simplify_polyline,
    trace_contours,
    write_eps_contours,
)

image = image_from_rows([
    "0000",
    "0110",
    "0110",
    "0000",
])
contours = trace_contours(image)
simplified = [
    simplify_polyline(points, 0, len(points) - 1, 1.0) for points in contours
]
write_eps_contours(simplified, "outline.eps", image.width, image.height)
```

`simplify_polyline` lists each kept segment as a pair of end points, so the
points where a run was split appear twice in its result.

`write_eps_contour` writes a single contour as a stroked path and
`write_eps_contours` writes several as one filled path; both use a bounding
box of `0 0 width height` and raise `ValueError` for an empty contour.

## Bézier curves

`contourvec.bezier` fits curves to a contour with the same divide-and-conquer
scheme: a curve is fitted between two points, and the run is split at the
point farthest from it until every point lies within the threshold.

```python
from contourvec.bezier import simplify_bezier3, write_eps_bezier3

curves = [
    simplify_bezier3(points, 0, len(points) - 1, 0.5) for points in contours
]
write_eps_bezier3(curves, "outline.eps", image.width, image.height)
```

`simplify_bezier2` and `write_eps_bezier2` do the same with quadratic
curves, which are elevated to cubic ones when written. `Bezier2` and
`Bezier3` have `evaluate(t)` and `distance(point, t)`; `Bezier2.elevate`
raises a quadratic curve to a cubic one and `elevate_all` does so for a whole
sequence. `approx_bezier2` and `approx_bezier3` give the single
least-squares curve for a run of points, and `gamma_weight` is the weight
used in the cubic fit. The Bézier EPS files use a bounding box of
`-5 -5 width+5 height+5`, and contours with no curves are left out.

All EPS files put the origin at the bottom left, so y coordinates are
flipped against the image height.

## Command line

`contourvec-distance` prints a prompt and reads a point (two numbers) from
standard input, then prompts for and reads the two end points of a segment
(four numbers), and prints the distance between them. If the input does not
hold the expected numbers it prints an error message and exits with status 1.

```
echo "2 3  0 0 4 0" | contourvec-distance
```

## What the package does not do

The package does not read or write image files: images are built in memory
with `image_from_rows` or `BinaryImage.set`. There is no command that turns
an image into an EPS file; that is done from Python with the functions above.

## Running the tests

```
pip install ".[test]"
pytest
```