#!/usr/bin/env python3
"""
Interactive (HTML) salary charts with hover tooltips.
Bar chart, donut chart and Sankey diagram, each on its own page and
together on one dashboard page.
"""
import os
import pandas as pd
import plotly.graph_objects as go
from plotly.colors import sample_colorscale, unlabel_rgb
from plotly.subplots import make_subplots
from pathlib import Path
from dotenv import load_dotenv

from analyze import (
    DATA_PATH,
    load_data,
    mean_salary_by_experience,
    mean_salary_by_company_size,
)
from job_groups import EXPERIENCE, JOB_GROUP
from sankey_data import prepare_sankey_data
from tooltip import (
    bar_payload,
    pie_payload,
    link_payload,
    node_payload,
    format_payload,
)

load_dotenv()

CHARTS_DIR = Path(os.getenv("SALARY_CHARTS_DIR", Path(__file__).parent / "charts"))

BAR_COLOR = "#69b3a2"
PIE_COLORS = ["#FF6347", "#4682B4", "#32CD32"]
NODE_COLORS = {
    EXPERIENCE: "#69b3a2",
    JOB_GROUP: "#4682B4",
}
COMPANY_NODE_COLOR = "#FF6347"

# Cool rainbow, purple → blue → green
COOL_SCALE = [
    [0.0, "rgb(110, 64, 170)"],
    [0.5, "rgb(26, 160, 216)"],
    [1.0, "rgb(175, 240, 91)"],
]
LINK_OPACITY = 0.5

# Donut inner/outer radius 50/120
PIE_HOLE = 50 / 120

TITLES = {
    "bar": "Average Salary by Experience Level",
    "pie": "Average Salary by Company Size",
    "sankey": "Sankey Diagram: Experience Level --> Job Title Group --> Company Size",
}

HOVER = "%{customdata}<extra></extra>"


def bar_trace(salary_data: pd.DataFrame) -> go.Bar:
    """One bar per experience level (already sorted by average salary)."""
    tips = [format_payload("bar", bar_payload(row.experience_level, row.avg_salary))
            for row in salary_data.itertuples(index=False)]
    return go.Bar(
        x=salary_data["experience_level"].tolist(),
        y=salary_data["avg_salary"].tolist(),
        marker_color=BAR_COLOR,
        customdata=tips,
        hovertemplate=HOVER,
        showlegend=False,
    )


def pie_trace(size_data: pd.DataFrame) -> go.Pie:
    """Donut slices proportional to average salary per company size."""
    sizes = size_data["company_size"].tolist()
    tips = [format_payload("pie", pie_payload(row.company_size, row.avg_salary))
            for row in size_data.itertuples(index=False)]
    color_for = {size: PIE_COLORS[i % len(PIE_COLORS)] for i, size in enumerate(sizes)}
    return go.Pie(
        labels=sizes,
        values=size_data["avg_salary"].tolist(),
        hole=PIE_HOLE,
        sort=False,
        direction="clockwise",
        marker=dict(colors=[color_for[s] for s in sizes]),
        text=sizes,
        textinfo="text",
        textfont=dict(color="#fff"),
        customdata=tips,
        hovertemplate=HOVER,
        showlegend=False,
    )


def link_colors(values: list) -> list:
    """Colour each link by its value relative to the largest link."""
    if not values:
        return []
    top = max(values) or 1
    colors = sample_colorscale(COOL_SCALE, [v / top for v in values])
    rgba = []
    for color in colors:
        r, g, b = unlabel_rgb(color)
        rgba.append(f"rgba({r:.0f}, {g:.0f}, {b:.0f}, {LINK_OPACITY})")
    return rgba


def node_colors(nodes: list) -> list:
    """Colour Sankey nodes by the column they came from."""
    return [NODE_COLORS.get(node["category"], COMPANY_NODE_COLOR) for node in nodes]


def sankey_trace(sankey_data: dict) -> go.Sankey:
    """Sankey trace from prepare_sankey_data() output."""
    names = [node["name"] for node in sankey_data["nodes"]]
    links = sankey_data["links"]
    values = [link["value"] for link in links]

    return go.Sankey(
        node=dict(
            pad=10,
            thickness=15,
            line=dict(color="black", width=0.5),
            label=names,
            color=node_colors(sankey_data["nodes"]),
            customdata=[format_payload("node", node_payload(n)) for n in names],
            hovertemplate=HOVER,
        ),
        link=dict(
            source=[link["source"] for link in links],
            target=[link["target"] for link in links],
            value=values,
            color=link_colors(values),
            customdata=[
                format_payload("link", link_payload(names[l["source"]], names[l["target"]], l["value"]))
                for l in links
            ],
            hovertemplate=HOVER,
        ),
    )


def create_salary_bar_chart(df: pd.DataFrame) -> go.Figure:
    fig = go.Figure(bar_trace(mean_salary_by_experience(df)))
    fig.update_layout(title=TITLES["bar"], bargap=0.3, font_size=12)
    fig.update_xaxes(tickangle=-40)
    fig.update_yaxes(tickformat=",.0f")
    return fig


def create_company_size_pie(df: pd.DataFrame) -> go.Figure:
    fig = go.Figure(pie_trace(mean_salary_by_company_size(df)))
    fig.update_layout(title=TITLES["pie"], font_size=12)
    return fig


def create_sankey(df: pd.DataFrame) -> go.Figure:
    fig = go.Figure(sankey_trace(prepare_sankey_data(df)))
    fig.update_layout(title=TITLES["sankey"], font_size=11)
    return fig


def create_dashboard(df: pd.DataFrame) -> go.Figure:
    """All three charts on one page: bar and donut on top, Sankey below."""
    fig = make_subplots(
        rows=2, cols=2,
        specs=[[{"type": "xy"}, {"type": "domain"}],
               [{"type": "domain", "colspan": 2}, None]],
        subplot_titles=[TITLES["bar"], TITLES["pie"], TITLES["sankey"]],
        row_heights=[0.45, 0.55],
        column_widths=[0.6, 0.4],
        vertical_spacing=0.12,
    )
    fig.add_trace(bar_trace(mean_salary_by_experience(df)), row=1, col=1)
    fig.add_trace(pie_trace(mean_salary_by_company_size(df)), row=1, col=2)
    fig.add_trace(sankey_trace(prepare_sankey_data(df)), row=2, col=1)

    fig.update_xaxes(tickangle=-40, row=1, col=1)
    fig.update_yaxes(tickformat=",.0f", row=1, col=1)
    fig.update_layout(height=900, bargap=0.3, font_size=11, showlegend=False)
    return fig


def create_all_charts(df: pd.DataFrame, output_dir=CHARTS_DIR) -> list:
    """Write every interactive chart to output_dir. Returns the written paths."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    print(f"\nGenerating interactive charts in {output_dir}/...")

    if df.empty:
        print("  Skipping charts: no records")
        return []

    pages = {
        "salary_by_experience.html": create_salary_bar_chart,
        "salary_by_company_size.html": create_company_size_pie,
        "experience_job_company_flow.html": create_sankey,
        "salary_dashboard.html": create_dashboard,
    }

    written = []
    for filename, build in pages.items():
        path = output_dir / filename
        build(df).write_html(path)
        print(f"  Created: {path}")
        written.append(path)

    print(f"\nDone! Charts saved to {output_dir}/")
    return written


def main():
    import argparse
    parser = argparse.ArgumentParser(description='Generate interactive salary charts')
    parser.add_argument('--data', default=str(DATA_PATH), help='Salaries CSV')
    parser.add_argument('--output', default=str(CHARTS_DIR), help='Output directory')
    args = parser.parse_args()

    print(f"Loading {args.data}...")
    try:
        df = load_data(args.data)
    except (OSError, ValueError) as e:
        print(f"Error: {e}")
        return 1
    print(f"Found {len(df)} salary records")

    create_all_charts(df, args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
