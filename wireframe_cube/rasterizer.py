#
# PROJECT: wireframe-cube
# MODULE: wireframe_cube/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from .canvas import Canvas, EDGE, VERTEX


def to_cell(point):
    """Projected float point to integer cell, truncating toward zero."""
    return int(point[0]), int(point[1])


def clip_segment(p1, p2, xmax, ymax):
    """
    Liang-Barsky clip of p1-p2 to the rectangle [0, xmax] x [0, ymax].

    Returns the clipped (start, end) float points, or None when the
    segment never enters the rectangle.
    """
    x1, y1 = p1
    x2, y2 = p2
    dx = x2 - x1
    dy = y2 - y1
    t0, t1 = 0.0, 1.0
    for p, q in ((-dx, x1), (dx, xmax - x1), (-dy, y1), (dy, ymax - y1)):
        if p == 0:
            if q < 0:
                return None
            continue
        t = q / p
        if p < 0:
            if t > t1:
                return None
            t0 = max(t0, t)
        else:
            if t < t0:
                return None
            t1 = min(t1, t)
    return ((x1 + t0 * dx, y1 + t0 * dy), (x1 + t1 * dx, y1 + t1 * dy))


def draw_line(canvas: Canvas, p1, p2, glyph=EDGE):
    """
    Draws a line with the two-error-term Bresenham algorithm.

    p1, p2 are integer (x, y) cells. The start cell is not written; every
    cell stepped onto after it, the end cell included, is. A segment with an
    endpoint off the canvas is clipped to it first, so the walk only covers
    cells that can be written no matter how far away the endpoints are. A
    clipped start is an entry point, not the start cell, and is written.
    """
    w, h = canvas.w, canvas.h
    if not (canvas.in_bounds(*p1) and canvas.in_bounds(*p2)):
        clipped = clip_segment(p1, p2, w - 1, h - 1)
        if clipped is None:
            return

        def snap(pt):
            return (min(max(int(round(pt[0])), 0), w - 1),
                    min(max(int(round(pt[1])), 0), h - 1))

        start, end = snap(clipped[0]), snap(clipped[1])
        if start != tuple(p1):
            canvas.set_cell(start[0], start[1], glyph)
        p1, p2 = start, end

    x1, y1 = p1
    x2, y2 = p2
    x, y = x1, y1

    dx = abs(x2 - x1)
    dy = abs(y2 - y1)
    sx = 1 if x1 < x2 else -1
    sy = 1 if y1 < y2 else -1
    err = dx - dy

    while True:
        if x == x2 and y == y2:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy
        canvas.set_cell(x, y, glyph)


def rasterize(canvas: Canvas, edges, projected):
    """
    Draw every edge, then every vertex on top.

    projected holds one (x, y) float pair per vertex, or None for a vertex
    that could not be projected; edges touching such a vertex are skipped.
    """
    for a, b in edges:
        pa, pb = projected[a], projected[b]
        if pa is None or pb is None:
            continue
        draw_line(canvas, to_cell(pa), to_cell(pb), EDGE)

    # Vertices last so they take priority over edges at shared cells.
    for p in projected:
        if p is None:
            continue
        x, y = to_cell(p)
        canvas.set_cell(x, y, VERTEX)
