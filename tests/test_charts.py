"""Tests for the plotly and matplotlib chart builders."""

import matplotlib.pyplot as plt
import plotly.graph_objects as go
from matplotlib.backend_bases import MouseEvent

import charts
import interactive_charts
from conftest import make_records
from sankey_data import prepare_sankey_data
from tooltip import Tooltip


def _sample():
    return make_records([
        ("SE", "Data Scientist", "M", 300),
        ("EN", "Data Scientist", "S", 100),
        ("MI", "Data Engineer", "L", 200),
        ("EN", "Product Manager", "S", 120),
    ])


def test_bar_chart_sorted_with_tooltips():
    fig = interactive_charts.create_salary_bar_chart(_sample())
    bar = fig.data[0]
    assert isinstance(bar, go.Bar)
    assert list(bar.x) == ["EN", "MI", "SE"]
    assert list(bar.y) == [110.0, 200.0, 300.0]
    assert bar.customdata[0] == "Entry Level<br>Average Salary: $110.00"


def test_donut_chart():
    fig = interactive_charts.create_company_size_pie(_sample())
    pie = fig.data[0]
    assert list(pie.labels) == ["M", "S", "L"]
    assert list(pie.marker.colors) == interactive_charts.PIE_COLORS
    assert pie.hole > 0
    assert pie.customdata[1] == "Company Size: S<br>Average Salary: $110.00"


def test_sankey_trace():
    fig = interactive_charts.create_sankey(_sample())
    sankey = fig.data[0]
    assert isinstance(sankey, go.Sankey)
    assert list(sankey.node.label) == ["SE", "EN", "MI", "Scientist", "Engineer", "Manager", "M", "S", "L"]
    assert sum(sankey.link.value) == 8
    assert list(sankey.node.color[:3]) == ["#69b3a2"] * 3
    assert sankey.node.color[3] == "#4682B4"
    assert sankey.node.color[-1] == "#FF6347"
    assert any(tip.startswith("<b>Link:</b> EN → Scientist<br>") for tip in sankey.link.customdata)


def test_link_colors():
    colors = interactive_charts.link_colors([1, 2, 4])
    assert len(colors) == 3
    assert all(c.startswith("rgba(") and c.endswith(", 0.5)") for c in colors)
    assert colors[-1] == "rgba(175, 240, 91, 0.5)"
    assert interactive_charts.link_colors([]) == []


def test_dashboard_has_three_charts():
    fig = interactive_charts.create_dashboard(_sample())
    assert [type(trace) for trace in fig.data] == [go.Bar, go.Pie, go.Sankey]


def test_create_all_interactive_charts(tmp_path):
    written = interactive_charts.create_all_charts(_sample(), tmp_path)
    assert {p.name for p in written} == {
        "salary_by_experience.html",
        "salary_by_company_size.html",
        "experience_job_company_flow.html",
        "salary_dashboard.html",
    }
    for path in written:
        assert path.stat().st_size > 0


def test_create_all_static_charts(tmp_path):
    written = charts.create_all_charts(_sample(), tmp_path)
    assert [p.name for p in written] == ["salary_by_experience.png", "salary_by_company_size.png"]
    for path in written:
        assert path.stat().st_size > 0


def test_static_charts_skip_empty(tmp_path):
    assert charts.create_all_charts(make_records([]), tmp_path) == []


def test_hover_shows_and_hides_tooltip():
    tooltip = Tooltip(charts.FIGURE_OFFSET)
    fig, hover = charts.chart_salary_by_experience(_sample(), tooltip)
    fig.canvas.draw()
    ax = fig.axes[0]

    # Middle of the first bar (EN, average 110)
    x, y = ax.transData.transform((0, 55))
    hover.on_move(MouseEvent("motion_notify_event", fig.canvas, x, y))
    assert tooltip.visible
    assert tooltip.content.startswith("Entry Level")
    assert hover.annotation.get_visible()

    hover.on_move(MouseEvent("motion_notify_event", fig.canvas, 1, 1))
    assert not tooltip.visible
    assert not hover.annotation.get_visible()
    plt.close(fig)


def test_figure_tooltip_sits_above_pointer():
    fig, hover = charts.chart_salary_by_company_size(_sample())
    assert hover.tooltip.offset == charts.FIGURE_OFFSET

    hover.tooltip.show("Company Size: M", (100, 200))
    x, y = hover.tooltip.position
    assert x > 100
    assert y > 200
    plt.close(fig)


def test_sankey_colors_follow_node_category():
    # "M" is both an experience code and a company size here
    df = make_records([("M", "Data Scientist", "M", 1)])
    sankey = interactive_charts.sankey_trace(prepare_sankey_data(df, keyed=True))
    assert list(sankey.node.label) == ["M", "Scientist", "M"]
    assert list(sankey.node.color) == ["#69b3a2", "#4682B4", "#FF6347"]
