"""Build automata from input text and draw them as DOT or SVG."""

from __future__ import annotations

import math
from dataclasses import dataclass
from itertools import groupby
from xml.sax.saxutils import escape, quoteattr

from samdrawer.automaton import SAMNode, SAMPool

_CHAR_W = 8.0
_LINE_H = 16.0
_PAD_X = 10.0
_PAD_Y = 6.0
_H_GAP = 40.0
_V_GAP = 70.0
_MARGIN = 20.0
_SVG_NS = "http://www.w3.org/2000/svg"


@dataclass
class _Placed:
    node: SAMNode
    lines: list[str]
    rx: float
    ry: float
    x: float = 0.0
    y: float = 0.0


def build_automaton(text: str) -> SAMPool:
    """Build and collect an automaton; ``|`` separates strings of a generalised one."""
    pool = SAMPool()
    for sid, part in enumerate(text.split("|")):
        pool.join_string(part, sid)
    pool.collect()
    return pool


def generate_dot(text: str) -> str:
    """Return the DOT description of the automaton for ``text``."""
    return build_automaton(text).generate_graph()


def _label_lines(node: SAMNode) -> list[str]:
    lines = [str(node.vtx_id), f"Max={node.max_len}"]
    lines.extend(f"size{sid}={size}" for sid, size in sorted(node.right_size.items()))
    return lines


def _place(pool: SAMPool) -> tuple[dict[int, _Placed], float, float]:
    placed: dict[int, _Placed] = {}
    rows: list[list[_Placed]] = []
    ordered = sorted(pool.nodes, key=lambda n: (n.max_len, n.vtx_id))
    for _, group in groupby(ordered, key=lambda n: n.max_len):
        row = []
        for node in group:
            lines = _label_lines(node)
            w = max(len(line) for line in lines) * _CHAR_W + 2 * _PAD_X
            h = len(lines) * _LINE_H + 2 * _PAD_Y
            item = _Placed(node, lines, w / 2 * math.sqrt(2), h / 2 * math.sqrt(2))
            row.append(item)
            placed[id(node)] = item
        rows.append(row)

    row_widths = [sum(2 * p.rx for p in row) + _H_GAP * (len(row) - 1) for row in rows]
    width = max(row_widths, default=0.0) + 2 * _MARGIN
    y = _MARGIN
    for row, row_width in zip(rows, row_widths):
        row_height = max(2 * p.ry for p in row)
        x = (width - row_width) / 2
        for p in row:
            p.x = x + p.rx
            p.y = y + row_height / 2
            x += 2 * p.rx + _H_GAP
        y += row_height + _V_GAP
    height = y - _V_GAP + _MARGIN
    return placed, width, height


def _boundary(p: _Placed, tx: float, ty: float) -> tuple[float, float]:
    dx, dy = tx - p.x, ty - p.y
    scale = math.hypot(dx / p.rx, dy / p.ry)
    if scale == 0:
        return p.x, p.y
    return p.x + dx / scale, p.y + dy / scale


def _edge(src: _Placed, dst: _Placed, kind: str, colour: str, label: str | None) -> list[str]:
    dx, dy = dst.x - src.x, dst.y - src.y
    length = math.hypot(dx, dy)
    offset = min(40.0, length * 0.2)
    cx = (src.x + dst.x) / 2 - dy / length * offset
    cy = (src.y + dst.y) / 2 + dx / length * offset
    sx, sy = _boundary(src, cx, cy)
    ex, ey = _boundary(dst, cx, cy)
    out = [
        f'<path class="{kind}" d="M {sx:.1f} {sy:.1f} Q {cx:.1f} {cy:.1f} {ex:.1f} {ey:.1f}" '
        f'fill="none" stroke="{colour}" marker-end="url(#arrow-{colour})"/>'
    ]
    if label is not None:
        lx = 0.25 * sx + 0.5 * cx + 0.25 * ex
        ly = 0.25 * sy + 0.5 * cy + 0.25 * ey
        out.append(
            f'<text class="edge-label" x="{lx:.1f}" y="{ly:.1f}" '
            f'text-anchor="middle">{escape(label)}</text>'
        )
    return out


def render_svg(pool: SAMPool) -> str:
    """Lay out a collected automaton in rows by state length and draw it as SVG."""
    placed, width, height = _place(pool)
    parts = [
        f'<svg xmlns="{_SVG_NS}" width="{width:.1f}" height="{height:.1f}" '
        f'viewBox="0 0 {width:.1f} {height:.1f}" font-family="monospace" font-size="13">',
        "<defs>",
    ]
    for colour in ("black", "red"):
        parts.append(
            f'<marker id="arrow-{colour}" viewBox="0 0 10 10" refX="10" refY="5" '
            f'markerWidth="8" markerHeight="8" orient="auto-start-reverse">'
            f'<path d="M 0 0 L 10 5 L 0 10 z" fill="{colour}"/></marker>'
        )
    parts.append("</defs>")

    for node in sorted(pool.nodes, key=lambda n: n.vtx_id):
        src = placed[id(node)]
        if node.link is not None:
            parts.extend(_edge(src, placed[id(node.link)], "link", "red", None))
        for char, child in node.children.items():
            parts.extend(_edge(src, placed[id(child)], "transition", "black", char))

    for node in sorted(pool.nodes, key=lambda n: n.vtx_id):
        p = placed[id(node)]
        parts.append(
            f'<ellipse id="node-{node.vtx_id}" cx="{p.x:.1f}" cy="{p.y:.1f}" '
            f'rx="{p.rx:.1f}" ry="{p.ry:.1f}" fill="white" stroke="black"/>'
        )
        top = p.y - (len(p.lines) - 1) * _LINE_H / 2
        spans = "".join(
            f'<tspan x="{p.x:.1f}" y="{top + i * _LINE_H:.1f}">{escape(line)}</tspan>'
            for i, line in enumerate(p.lines)
        )
        parts.append(
            f'<text class="node-label" text-anchor="middle" dominant-baseline="middle" '
            f"data-node={quoteattr(str(node.vtx_id))}>{spans}</text>"
        )
    parts.append("</svg>")
    return "\n".join(parts) + "\n"


def generate_svg(text: str) -> str:
    """Return an SVG drawing of the automaton for ``text``."""
    return render_svg(build_automaton(text))