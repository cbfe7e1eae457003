import pytest

from contourvec.contours import (
    BinaryImage,
    Orientation,
    advance,
    edge_mask,
    find_start_point,
    first_black_pixel,
    image_from_rows,
    left_pixel,
    new_orientation,
    right_pixel,
    simplify_polyline,
    trace_contours,
    write_eps_contour,
    write_eps_contours,
)
from contourvec.geom2d import Point


@pytest.mark.parametrize(
    "start, expected",
    [
        (Orientation.NORTH, Orientation.WEST),
        (Orientation.WEST, Orientation.SOUTH),
        (Orientation.SOUTH, Orientation.EAST),
        (Orientation.EAST, Orientation.NORTH),
    ],
)
def test_turn_left_four_times_is_identity(start, expected):
    assert start.turn_left() is expected
    assert start.turn_left().turn_left().turn_left().turn_left() is start


def test_turn_left_north_is_west():
    assert Orientation.NORTH.turn_left() is Orientation.WEST


def test_advance_and_back():
    p = Point(3, 4)
    for o in Orientation:
        opposite = o.turn_left().turn_left()
        assert advance(advance(p, o), opposite) == p
        assert advance(p, o).distance(p) == 1.0


def test_image_get_set_and_outside_is_white():
    img = BinaryImage(2, 2)
    img.set(2, 1, True)
    assert img.get(2, 1) is True
    assert img.get(1, 1) is False
    assert img.get(0, 1) is False
    assert img.get(3, 3) is False


def test_image_set_outside_raises():
    with pytest.raises(IndexError):
        BinaryImage(2, 2).set(3, 1, True)


def test_image_copy_is_independent():
    img = image_from_rows(["10", "01"])
    dup = img.copy()
    assert dup == img
    dup.set(1, 1, False)
    assert img.get(1, 1) is True
    assert dup != img


def test_image_from_rows_sequences_match_strings():
    assert image_from_rows([[1, 0], [0, 1]]) == image_from_rows(["10", "01"])


def test_image_from_rows_errors():
    with pytest.raises(ValueError):
        image_from_rows(["10", "1"])
    with pytest.raises(ValueError):
        image_from_rows(["1x"])


def test_find_start_point():
    assert find_start_point(image_from_rows(["00", "01"])) == Point(1, 1)
    assert find_start_point(image_from_rows(["00", "00"])) is None


def test_first_black_pixel():
    assert first_black_pixel(image_from_rows(["00", "01"])) == Point(2, 2)
    assert first_black_pixel(BinaryImage(3, 3)) is None


def test_edge_mask_keeps_only_top_edges():
    mask = edge_mask(image_from_rows(["11", "11"]))
    assert mask.get(1, 1) and mask.get(2, 1)
    assert not mask.get(1, 2) and not mask.get(2, 2)


def test_left_and_right_pixels_around_single_pixel():
    img = image_from_rows(["1"])
    start = Point(0, 0)
    assert right_pixel(img, start, Orientation.EAST) is True
    assert left_pixel(img, start, Orientation.EAST) is False


def test_new_orientation_all_white_turns_right():
    img = BinaryImage(3, 3)
    for o in Orientation:
        assert new_orientation(img, Point(1, 1), o).turn_left() is o


def test_new_orientation_keeps_going_along_edge():
    img = image_from_rows(["11"])
    assert new_orientation(img, Point(1, 0), Orientation.EAST) is Orientation.EAST


def test_trace_single_pixel():
    contours = trace_contours(image_from_rows(["1"]))
    assert contours == [[Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1), Point(0, 0)]]


def test_trace_separate_blobs():
    assert len(trace_contours(image_from_rows(["101"]))) == 2


def test_trace_ring_has_outer_and_inner_contour():
    img = image_from_rows(["111", "101", "111"])
    contours = trace_contours(img)
    assert len(contours) == 2


def test_trace_empty_image():
    assert trace_contours(BinaryImage(4, 4)) == []


def test_trace_contours_invariants():
    img = image_from_rows(["01100", "11110", "01011", "00110"])
    for contour in trace_contours(img):
        assert contour[0] == contour[-1]
        for a, b in zip(contour, contour[1:]):
            assert a.distance(b) == 1.0
        for p in contour:
            assert 0 <= p.x <= img.width and 0 <= p.y <= img.height


def test_trace_does_not_modify_image():
    img = image_from_rows(["110", "011"])
    before = img.copy()
    trace_contours(img)
    assert img == before


def test_simplify_collinear_keeps_endpoints():
    pts = [Point(i, 0) for i in range(6)]
    assert simplify_polyline(pts, 0, 5, 0.0) == [pts[0], pts[5]]


def test_simplify_splits_and_duplicates_split_point():
    pts = [Point(0, 0), Point(1, 1), Point(2, 0)]
    assert simplify_polyline(pts, 0, 2, 0.0) == [pts[0], pts[1], pts[1], pts[2]]
    assert simplify_polyline(pts, 0, 2, 10.0) == [pts[0], pts[2]]


def test_simplify_contour_is_closed_chain():
    contour = trace_contours(image_from_rows(["0110", "1111", "0110"]))[0]
    result = simplify_polyline(contour, 0, len(contour) - 1, 0.5)
    assert len(result) % 2 == 0
    assert result[0] == contour[0] and result[-1] == contour[-1]
    assert all(p in contour for p in result)


def test_write_eps_contour(tmp_path):
    out = tmp_path / "one.eps"
    write_eps_contour([Point(0, 0), Point(1, 0)], out, 4, 3)
    assert out.read_text() == (
        "%!PS-Adobe-3.0 EPSF-3.0\n"
        "%%BoundingBox: 0 0 4 3\n"
        "0.000000 3.000000 moveto 1.000000 3.000000 lineto \n"
        "0 setlinewidth stroke\n"
        "showpage"
    )


def test_write_eps_contours(tmp_path):
    img = image_from_rows(["101"])
    contours = trace_contours(img)
    out = tmp_path / "many.eps"
    write_eps_contours(contours, out, img.width, img.height)
    text = out.read_text()
    assert text.startswith("%!PS-Adobe-3.0 EPSF-3.0\n%%BoundingBox: 0 0 3 1\n")
    assert text.count("moveto") == len(contours)
    assert text.count("lineto") == sum(len(c) - 1 for c in contours)
    assert text.endswith("0 setlinewidth fill\nshowpage")


def test_write_eps_empty_contour_raises(tmp_path):
    with pytest.raises(ValueError):
        write_eps_contour([], tmp_path / "x.eps", 1, 1)
    with pytest.raises(ValueError):
        write_eps_contours([[]], tmp_path / "y.eps", 1, 1)