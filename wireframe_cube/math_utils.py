#
# PROJECT: wireframe-cube
# MODULE: wireframe_cube/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

"""
Transform and projection stages.

Points are plain (x, y, z) tuples. Angles are radians and are never wrapped;
callers accumulate them by repeated addition, so over very long runs the
values drift by floating-point rounding. sin/cos accept any magnitude.
"""

import math


def scale_vertex(vertex, extents):
    """Scale a unit-solid vertex component-wise by (width, height, depth)."""
    return (vertex[0] * extents[0],
            vertex[1] * extents[1],
            vertex[2] * extents[2])


def rotate_yaw_pitch(point, yaw: float, pitch: float):
    """
    Yaw around the vertical axis, then pitch around the horizontal axis
    applied to the yawed point. Roll is not applied.
    """
    x, y, z = point
    cy, sy = math.cos(yaw), math.sin(yaw)
    cp, sp = math.cos(pitch), math.sin(pitch)

    # around y
    new_x = x * cy - z * sy
    new_z = x * sy + z * cy

    # around x
    new_y = y * cp - new_z * sp
    new_z = y * sp + new_z * cp
    return (new_x, new_y, new_z)


def rotation_matrix(pitch: float, yaw: float, roll: float):
    """
    Combined 3x3 rotation, rows as tuples.

    ZYX composition R = Rz(alpha) @ Ry(beta) @ Rx(gamma) with
    alpha = roll, beta = -pitch, gamma = yaw.
    """
    alpha, beta, gamma = roll, -pitch, yaw
    ca, sa = math.cos(alpha), math.sin(alpha)
    cb, sb = math.cos(beta), math.sin(beta)
    cg, sg = math.cos(gamma), math.sin(gamma)
    return (
        (ca * cb, ca * sb * sg - sa * cg, ca * sb * cg + sa * sg),
        (sa * cb, sa * sb * sg + ca * cg, sa * sb * cg - ca * sg),
        (-sb,     cb * sg,                cb * cg),
    )


def apply_matrix(m, point):
    x, y, z = point
    return (m[0][0] * x + m[0][1] * y + m[0][2] * z,
            m[1][0] * x + m[1][1] * y + m[1][2] * z,
            m[2][0] * x + m[2][1] * y + m[2][2] * z)


def rotate_euler(point, pitch: float, yaw: float, roll: float):
    """Rotate a point by the full pitch/yaw/roll matrix."""
    return apply_matrix(rotation_matrix(pitch, yaw, roll), point)


def transform_vertex(vertex, extents, pitch: float, yaw: float, roll: float,
                     full_rotation: bool = True):
    """Scale a vertex by the extents and rotate it by the current angles."""
    p = scale_vertex(vertex, extents)
    if full_rotation:
        return rotate_euler(p, pitch, yaw, roll)
    return rotate_yaw_pitch(p, yaw, pitch)


def project(point, focal_length: float, view_width: int, view_height: int):
    """
    Perspective-project a rotated point onto the grid.

    Returns (x, y) floats, or None when z + focal_length is zero or the
    result is not finite. Points behind the eye are projected as-is.
    """
    x, y, z = point
    denom = z + focal_length
    if denom == 0:
        return None
    px = x * focal_length / denom + view_width / 2
    py = y * focal_length / denom + view_height / 2
    if not (math.isfinite(px) and math.isfinite(py)):
        return None
    return (px, py)
