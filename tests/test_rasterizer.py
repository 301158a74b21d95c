import itertools
import time

import pytest

from wireframe_cube.canvas import Canvas, EDGE, VERTEX, EMPTY
from wireframe_cube.rasterizer import clip_segment, draw_line, rasterize, to_cell


def test_horizontal_line_skips_start_and_includes_end():
    canvas = Canvas(10, 10)
    draw_line(canvas, (0, 0), (5, 0))
    assert canvas.cells(EDGE) == [(1, 0), (2, 0), (3, 0), (4, 0), (5, 0)]
    assert canvas.get_cell(0, 0) == EMPTY


def test_degenerate_line_draws_nothing():
    canvas = Canvas(10, 10)
    draw_line(canvas, (3, 4), (3, 4))
    assert canvas.cells(EDGE) == []


def test_diagonal_line():
    canvas = Canvas(10, 10)
    draw_line(canvas, (0, 0), (3, 3))
    assert canvas.cells(EDGE) == [(1, 1), (2, 2), (3, 3)]


def test_steep_line_visits_one_cell_per_row():
    canvas = Canvas(10, 10)
    draw_line(canvas, (2, 0), (4, 8))
    cells = canvas.cells(EDGE)
    assert len(cells) == 8
    assert sorted(y for _, y in cells) == list(range(1, 9))


def _visited(p1, p2, size=40):
    canvas = Canvas(size, size)
    draw_line(canvas, p1, p2)
    return len(canvas.cells(EDGE))


def test_reverse_direction_visits_same_number_of_cells():
    points = [(0, 0), (7, 3), (2, 11), (15, 15), (9, 1), (0, 13)]
    for a, b in itertools.combinations(points, 2):
        assert _visited(a, b) == _visited(b, a), (a, b)


def test_out_of_range_endpoints_never_fault():
    canvas = Canvas(8, 6)
    draw_line(canvas, (-500, -300), (700, 400))
    draw_line(canvas, (-20, 3), (-1, 3))
    draw_line(canvas, (3, 900), (4, -900))
    for x, y in canvas.cells(EDGE):
        assert 0 <= x < 8 and 0 <= y < 6
    assert all(len(row) == 8 for row in canvas.rows())
    assert len(canvas.rows()) == 6


def test_negative_cells_do_not_wrap_around():
    canvas = Canvas(5, 5)
    draw_line(canvas, (2, 2), (-3, 2))
    assert canvas.cells(EDGE) == [(0, 2), (1, 2)]
    assert canvas.get_cell(4, 2) == EMPTY


def test_vertices_override_edges():
    canvas = Canvas(10, 10)
    projected = [(1.0, 1.0), (6.0, 1.0), (6.0, 6.0)]
    edges = [(0, 1), (1, 2), (2, 0)]
    rasterize(canvas, edges, projected)
    for p in projected:
        assert canvas.get_cell(*to_cell(p)) == VERTEX


def test_vertex_priority_independent_of_edge_order():
    projected = [(0.0, 0.0), (4.0, 0.0), (8.0, 0.0)]
    forward = Canvas(10, 3)
    backward = Canvas(10, 3)
    rasterize(forward, [(0, 1), (1, 2)], projected)
    rasterize(backward, [(2, 1), (1, 0)], projected)
    assert forward.rows() == backward.rows()
    assert forward.cells(VERTEX) == [(0, 0), (4, 0), (8, 0)]


def test_unprojectable_vertex_skips_its_edges():
    canvas = Canvas(10, 10)
    rasterize(canvas, [(0, 1), (1, 2)], [(1.0, 1.0), None, (5.0, 5.0)])
    assert canvas.cells(EDGE) == []
    assert canvas.cells(VERTEX) == [(1, 1), (5, 5)]


def test_to_cell_truncates_toward_zero():
    assert to_cell((4.99, 2.01)) == (4, 2)
    assert to_cell((-0.7, -1.2)) == (0, -1)


def test_far_endpoints_are_clipped_quickly():
    canvas = Canvas(10, 10)
    started = time.perf_counter()
    draw_line(canvas, (-10 ** 8, 5), (10 ** 8, 5))
    draw_line(canvas, (100000021, 100000011), (3, 4))
    assert time.perf_counter() - started < 1.0
    assert [(x, y) for x, y in canvas.cells(EDGE) if y == 5] == [(x, 5) for x in range(10)]
    for x, y in canvas.cells(EDGE):
        assert canvas.in_bounds(x, y)


def test_segment_missing_canvas_draws_nothing():
    canvas = Canvas(10, 10)
    draw_line(canvas, (-10 ** 8, -10 ** 8), (-5, 10 ** 8))
    draw_line(canvas, (-10 ** 8, 20), (10 ** 8, 20))
    assert canvas.cells(EDGE) == []


def test_clip_segment_entry_and_exit():
    start, end = clip_segment((-10, 5), (20, 5), 9, 9)
    assert start == pytest.approx((0.0, 5.0))
    assert end == pytest.approx((9.0, 5.0))
    assert clip_segment((-10, -10), (-1, 20), 9, 9) is None
