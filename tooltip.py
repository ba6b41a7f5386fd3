"""Hover tooltip state and tooltip text for the salary charts."""

from typing import Optional, Tuple

from job_groups import describe_experience


def format_usd(value: float) -> str:
    """Dollar amount with two decimals, e.g. 1234.5 → '$1,234.50'."""
    return f"${value:,.2f}"


def bar_payload(category, value) -> dict:
    return {'category': category, 'value': value}


def pie_payload(category, value) -> dict:
    return {'category': category, 'value': value}


def link_payload(source, target, value) -> dict:
    return {'source': source, 'target': target, 'value': value}


def node_payload(name) -> dict:
    return {'name': name}


def format_payload(kind: str, payload: dict) -> str:
    """Tooltip HTML for a chart element ('bar', 'pie', 'link' or 'node')."""
    if kind == 'bar':
        return (f"{describe_experience(payload['category'])}"
                f"<br>Average Salary: {format_usd(payload['value'])}")
    if kind == 'pie':
        return (f"Company Size: {payload['category']}"
                f"<br>Average Salary: {format_usd(payload['value'])}")
    if kind == 'link':
        return (f"<b>Link:</b> {payload['source']} → {payload['target']}"
                f"<br><b>Count:</b> {payload['value']}")
    if kind == 'node':
        return f"<b>Node:</b> {payload['name']}"
    raise ValueError(f"Unknown tooltip kind: {kind}")


def as_plain_text(html: str) -> str:
    """Strip the markup used in tooltip text (for matplotlib annotations)."""
    return html.replace('<br>', '\n').replace('<b>', '').replace('</b>', '')


class Tooltip:
    """The single tooltip shared by every chart element.

    Only one element can be hovered at a time, so hover handlers all go
    through show() and hide() on one instance.
    """

    # Offset from the pointer, in pixels. Page coordinates grow downwards,
    # so a negative y places the tooltip above the pointer.
    OFFSET = (15, -28)

    def __init__(self, offset: Tuple[float, float] = OFFSET):
        self.offset = offset
        self.visible = False
        self.content = ''
        self.position: Optional[Tuple[float, float]] = None

    def show(self, content: str, position: Tuple[float, float]) -> None:
        x, y = position
        self.content = content
        self.position = (x + self.offset[0], y + self.offset[1])
        self.visible = True

    def hide(self) -> None:
        self.visible = False

    def __repr__(self):
        return f"Tooltip(visible={self.visible}, content={self.content!r}, position={self.position})"
