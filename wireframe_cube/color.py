#
# PROJECT: wireframe-cube
# MODULE: wireframe_cube/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import curses
import logging

from .canvas import EMPTY, EDGE, VERTEX

logger = logging.getLogger(__name__)


def parse_hex_color(hex_str):
    """
    Parse a hex color string to an (r, g, b) tuple.
    Accepts: '#RRGGBB' or 'RRGGBB' (case-insensitive).
    Returns: (r, g, b) tuple with values 0-255, or None on failure.
    """
    if hex_str is None:
        return None
    val = str(hex_str).strip().lstrip('#')
    if len(val) != 6:
        return None
    try:
        r = int(val[0:2], 16)
        g = int(val[2:4], 16)
        b = int(val[4:6], 16)
        return (r, g, b)
    except ValueError:
        return None

# The 6x6x6 xterm color cube occupies indices 16-231.
# Each axis has values: 0, 95, 135, 175, 215, 255
_CUBE_VALUES = [0, 95, 135, 175, 215, 255]

# ANSI 0-7 approximate RGB values
_ANSI8 = [
    (0, 0, 0),       # 0  black
    (128, 0, 0),     # 1  red
    (0, 128, 0),     # 2  green
    (128, 128, 0),   # 3  yellow
    (0, 0, 128),     # 4  blue
    (128, 0, 128),   # 5  magenta
    (0, 128, 128),   # 6  cyan
    (192, 192, 192), # 7  white
]


def rgb_to_nearest_xterm(r, g, b):
    """Nearest xterm-256 index for an (r, g, b) color, cube or grayscale ramp."""
    def nearest(v):
        return min(range(6), key=lambda i: abs(v - _CUBE_VALUES[i]))

    ri, gi, bi = nearest(r), nearest(g), nearest(b)
    cube_idx = 16 + ri * 36 + gi * 6 + bi
    cr, cg, cb = _CUBE_VALUES[ri], _CUBE_VALUES[gi], _CUBE_VALUES[bi]
    cube_dist = (r - cr) ** 2 + (g - cg) ** 2 + (b - cb) ** 2

    gray_avg = (r + g + b) // 3
    gray_step = max(0, min(23, (gray_avg - 8 + 5) // 10))
    gv = 8 + gray_step * 10
    gray_dist = (r - gv) ** 2 + (g - gv) ** 2 + (b - gv) ** 2

    return 232 + gray_step if gray_dist < cube_dist else cube_idx


def rgb_to_nearest_ansi8(r, g, b):
    """Nearest basic ANSI color index (0-7), for 8-color terminals."""
    return min(range(8), key=lambda i: (r - _ANSI8[i][0]) ** 2 +
                                       (g - _ANSI8[i][1]) ** 2 +
                                       (b - _ANSI8[i][2]) ** 2)


def resolve_color_slots(rgbs, num_colors, can_redefine, base_slot=16):
    """
    Map (r, g, b) colors to curses color numbers.

    Cascade:
      1. True color  - redefine slots base_slot.. with exact RGB
      2. xterm-256   - nearest xterm-256 index
      3. 8-color     - nearest ANSI 0-7
    Returns None when the terminal has fewer than 8 colors.
    """
    if can_redefine and num_colors >= 256:
        slots = []
        for i, (r, g, b) in enumerate(rgbs):
            slot = base_slot + i
            try:
                curses.init_color(slot, r * 1000 // 255, g * 1000 // 255, b * 1000 // 255)
                slots.append(slot)
            except curses.error:
                slots.append(rgb_to_nearest_xterm(r, g, b))
        return slots
    if num_colors >= 256:
        return [rgb_to_nearest_xterm(*rgb) for rgb in rgbs]
    if num_colors >= 8:
        return [rgb_to_nearest_ansi8(*rgb) for rgb in rgbs]
    return None


def init_colors(config):
    """
    Initialize curses color pairs for the three cell kinds.
    Call once after curses.wrapper init.

    Returns {glyph: pair_id} for vertex, edge and empty cells, or an empty
    dict when color is disabled or unsupported (pair 0 is used then).
    """
    if not config.color:
        return {}
    if not curses.has_colors():
        logger.info("Terminal has no color support, drawing monochrome")
        return {}

    curses.start_color()

    vertex_rgb = parse_hex_color(config.vertex_color)
    edge_rgb = parse_hex_color(config.edge_color)
    bg_rgb = parse_hex_color(config.background_color)

    num_colors = getattr(curses, 'COLORS', 8)
    can_redefine = curses.can_change_color()

    slots = resolve_color_slots([vertex_rgb, edge_rgb, bg_rgb], num_colors, can_redefine)
    if slots is None:
        logger.info("Terminal reports %d colors, drawing monochrome", num_colors)
        return {}
    vertex_slot, edge_slot, bg_slot = slots

    pairs = {}
    for pair_id, (glyph, fg) in enumerate(
            ((VERTEX, vertex_slot), (EDGE, edge_slot), (EMPTY, bg_slot)), start=1):
        curses.init_pair(pair_id, fg, bg_slot)
        pairs[glyph] = pair_id
    logger.debug("Color pairs: %s (colors=%d, true color=%s)", pairs, num_colors, can_redefine)
    return pairs
