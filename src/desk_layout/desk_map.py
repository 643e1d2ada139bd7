import html
from typing import Dict, List, Sequence, Tuple

import networkx as nx
from pyvis.network import Network

from .models import DogStatus, Person
from .solver import adjacent_conflicts

# ---------------------------
# Public API
# ---------------------------

def generate_desk_line_map(
    layout: Sequence[Person],
    desk_spacing: int = 90,
    canvas_size: Tuple[int, int] = (1600, 400),
) -> str:
    """
    Build an interactive view of a desk row.

    Parameters:
      layout: people in seating order, left to right.
      desk_spacing: horizontal distance between neighbouring desks in pixels.
      canvas_size: width, height in pixels of the rendered canvas.

    Returns:
      HTML string with embedded network.
    """
    width, height = canvas_size
    positions = _compute_desk_positions(len(layout), desk_spacing, height)

    # Colors per team, in order of first appearance along the row
    palette = [
        "#FFB347", "#77DD77", "#AEC6CF", "#C23B22", "#F49AC2", "#B39EB5",
        "#03C03C", "#779ECB", "#966FD6", "#FFD700", "#FF6961", "#CB99C9",
        "#CFCFC4", "#FDFD96", "#84B6F4", "#FDCAE1",
    ]
    team_color: Dict[str, str] = {}
    for person in layout:
        team_color.setdefault(person.team_key, palette[len(team_color) % len(palette)])

    conflicts = {(left.id, right.id) for left, right in adjacent_conflicts(layout)}

    G = nx.Graph()
    for position, (person, (x, y)) in enumerate(zip(layout, positions), start=1):
        G.add_node(
            person.id,
            label=person.name,
            title=_node_tooltip(person, position),
            color=team_color[person.team_key],
            x=x,
            y=y,
            physics=False,
            shape=_STATUS_SHAPE.get(person.dog_status, "dot"),
            size=18,
        )

    for left, right in zip(layout, layout[1:]):
        conflict = (left.id, right.id) in conflicts
        G.add_edge(
            left.id,
            right.id,
            color="#FF6B6B" if conflict else "#A9A9A9",
            width=4 if conflict else 1,
            dashes=left.team_key != right.team_key,
        )

    net = Network(height=f"{height}px", width=f"{width}px", bgcolor="#111111", font_color="#EEEEEE")
    net.toggle_physics(False)  # positions are fixed
    net.from_nx(G)

    page = net.generate_html()
    return page.replace("</body>", _legend_html() + "</body>", 1)

# ---------------------------
# Internals
# ---------------------------

_STATUS_SHAPE = {
    DogStatus.AVOID: "square",
    DogStatus.LIKE: "dot",
    DogStatus.HAVE: "triangle",
}


def _compute_desk_positions(count: int, spacing: int, height: int) -> List[Tuple[int, int]]:
    margin_x = 60
    y = height // 2
    return [(margin_x + i * spacing, y) for i in range(count)]


def _node_tooltip(person: Person, position: int) -> str:
    status = person.dog_status.value if person.dog_status else "n/a"
    return (
        f"<b>{html.escape(person.name)}</b><br>"
        f"Desk: {position}<br>"
        f"Team: {html.escape(person.team_name)}<br>"
        f"Dogs: {status}"
    )


def _legend_html() -> str:
    css = """
    <style>
    .legend-box{
      position:absolute;right:12px;bottom:12px;
      background:#222;color:#eee;border:1px solid #444;border-radius:8px;
      padding:8px 12px;font-family:system-ui, -apple-system, Segoe UI, Roboto, Arial;font-size:12px;
      z-index:10;
    }
    .legend-swatch{display:inline-block;width:12px;height:12px;margin-right:6px;vertical-align:middle;border:1px solid #444;}
    </style>
    """
    return f"""
    {css}
    <div class="legend-box">
      <div>square: avoids dogs</div>
      <div>dot: likes dogs</div>
      <div>triangle: has a dog</div>
      <div style="margin-top:6px;"><span class="legend-swatch" style="background:#FF6B6B"></span>avoider next to a dog</div>
      <div>dashed edge: team boundary</div>
      <div>node color: team</div>
    </div>
    """
