"""SVG schematic of a queue: arrivals, waiting line, servers, departures."""

from __future__ import annotations

import math
from typing import List

from .inputs import ModelKind
from .metrics import Metric, is_unbounded

MAX_QUEUE_MARKERS = 8
MAX_SERVER_BOXES = 3

GREEN = "hsl(142, 76%, 36%)"
AMBER = "hsl(38, 92%, 50%)"
AMBER_DARK = "hsl(38, 92%, 40%)"
AMBER_LIGHT = "hsl(38, 92%, 95%)"
GRAY = "hsl(215, 16%, 47%)"
BLUE = "hsl(221, 83%, 53%)"
BLUE_DARK = "hsl(221, 83%, 43%)"
BLUE_LIGHT = "hsl(221, 83%, 95%)"
RED = "hsl(0, 84%, 60%)"


def _queue_size(queue_length: Metric) -> int:
    """Whole customers waiting; undefined lengths draw nothing."""
    if queue_length is None or is_unbounded(queue_length) or math.isnan(queue_length):
        return 0
    return max(0, math.floor(queue_length))


def _overflow_label(queue_length: Metric, waiting: int) -> str:
    if queue_length is not None and is_unbounded(queue_length):
        return "+∞"
    if waiting > MAX_QUEUE_MARKERS:
        return f"+{waiting - MAX_QUEUE_MARKERS}"
    return ""


def _arrow_markers() -> str:
    markers = []
    for name, colour in (("arrowGreen", GREEN), ("arrowGray", GRAY), ("arrowRed", RED)):
        markers.append(
            f'<marker id="{name}" markerWidth="10" markerHeight="10" refX="9" refY="3" orient="auto">'
            f'<path d="M0,0 L0,6 L9,3 z" fill="{colour}"/></marker>'
        )
    return "<defs>" + "".join(markers) + "</defs>"


def render_diagram(kind: ModelKind, queue_length: Metric, servers: int = 1) -> str:
    """
    Return an SVG document sketching the model.

    At most eight customers are drawn in the queue and at most three server
    boxes; anything beyond that is summarised with a "+N" counter, and an
    unbounded queue is drawn full with a "+∞" counter. Only the
    M/M/C model draws more than one server.
    """
    kind = ModelKind(kind)
    num_servers = max(1, servers) if kind is ModelKind.MMC else 1
    waiting = _queue_size(queue_length)
    overflow = _overflow_label(queue_length, waiting)
    shown = MAX_QUEUE_MARKERS if overflow else waiting

    parts: List[str] = [
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 560 200" width="560" height="200">',
        _arrow_markers(),
        # arrivals
        f'<g><line x1="30" y1="100" x2="100" y2="100" stroke="{GREEN}" stroke-width="3" '
        f'marker-end="url(#arrowGreen)"/>'
        f'<text x="65" y="85" text-anchor="middle" fill="{GREEN}" font-size="14" '
        f'font-weight="600">λ</text></g>',
        # queue
        f'<g><rect x="110" y="70" width="180" height="60" rx="8" fill="{AMBER_LIGHT}" '
        f'stroke="{AMBER}" stroke-width="2"/>'
        f'<text x="200" y="60" text-anchor="middle" fill="{AMBER_DARK}" font-size="12" '
        f'font-weight="500">Queue</text>',
    ]
    for i in range(shown):
        parts.append(f'<circle cx="{130 + i * 20}" cy="100" r="8" fill="{AMBER}"/>')
    if overflow:
        parts.append(
            f'<text x="270" y="105" fill="{AMBER_DARK}" font-size="12">'
            f"{overflow}</text>"
        )
    parts.append("</g>")

    parts.append(
        f'<line x1="290" y1="100" x2="350" y2="100" stroke="{GRAY}" stroke-width="2" '
        f'marker-end="url(#arrowGray)"/>'
    )

    multi = num_servers > 1
    box_height = 40 if multi else 60
    start_y = 40 if multi else 70
    spacing = 50 if multi else 0
    for i in range(min(num_servers, MAX_SERVER_BOXES)):
        y = start_y + i * spacing
        label = f"Server {i + 1}" if multi else "Server"
        parts.append(
            f'<g><rect x="360" y="{y}" width="100" height="{box_height}" rx="8" '
            f'fill="{BLUE_LIGHT}" stroke="{BLUE}" stroke-width="2"/>'
            f'<text x="410" y="{y + box_height // 2 + 5}" text-anchor="middle" '
            f'fill="{BLUE_DARK}" font-size="12" font-weight="500">{label}</text></g>'
        )
    if num_servers > MAX_SERVER_BOXES:
        parts.append(
            f'<text x="410" y="175" text-anchor="middle" fill="{BLUE_DARK}" font-size="11">'
            f"+{num_servers - MAX_SERVER_BOXES} more</text>"
        )

    exit_y = 80 if multi else 100
    parts.append(
        f'<g><line x1="460" y1="{exit_y}" x2="530" y2="{exit_y}" stroke="{RED}" '
        f'stroke-width="3" marker-end="url(#arrowRed)"/>'
        f'<text x="495" y="{exit_y - 15}" text-anchor="middle" fill="{RED}" font-size="14" '
        f'font-weight="600">μ</text></g>'
    )
    parts.append("</svg>")
    return "\n".join(parts)
