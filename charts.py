#!/usr/bin/env python3
"""Static (PNG) salary charts, with hover tooltips when shown in a window."""

import pandas as pd
import matplotlib
import matplotlib.pyplot as plt
from matplotlib.ticker import FuncFormatter
from pathlib import Path

from analyze import (
    DATA_PATH,
    load_data,
    mean_salary_by_experience,
    mean_salary_by_company_size,
)
from interactive_charts import CHARTS_DIR, BAR_COLOR, PIE_COLORS, TITLES
from tooltip import Tooltip, bar_payload, pie_payload, format_payload, as_plain_text

COLORS = {
    "bg": "#ffffff",
    "border": "#cccccc",
    "text": "#222222",
    "tooltip_bg": "#000000",
    "tooltip_text": "#ffffff",
}

# Donut inner/outer radius 50/120
PIE_WIDTH = 1 - 50 / 120

# Tooltip offset in figure pixels, where y grows upwards
FIGURE_OFFSET = (Tooltip.OFFSET[0], -Tooltip.OFFSET[1])


def setup_theme():
    """Configure matplotlib for the salary charts."""
    plt.rcParams.update({
        "figure.facecolor": COLORS["bg"],
        "axes.edgecolor": COLORS["border"],
        "text.color": COLORS["text"],
        "figure.figsize": (10, 6),
        "font.size": 11,
        "axes.titlesize": 16,
        "axes.titleweight": "bold",
    })


class HoverTooltip:
    """Connects one Tooltip to a figure: hovering an artist shows its text."""

    def __init__(self, fig, ax, artists, texts, tooltip=None):
        self.fig = fig
        self.ax = ax
        self.targets = list(zip(artists, texts))
        self.tooltip = tooltip or Tooltip(FIGURE_OFFSET)
        self.annotation = ax.annotate(
            "", xy=(0, 0), xycoords="figure pixels",
            color=COLORS["tooltip_text"], fontsize=10,
            bbox=dict(boxstyle="round,pad=0.5", fc=COLORS["tooltip_bg"], alpha=0.8),
        )
        self.annotation.set_visible(False)
        self.cid = fig.canvas.mpl_connect("motion_notify_event", self.on_move)

    def target_at(self, event):
        """Tooltip text of the artist under the pointer, or None."""
        if event.inaxes is not self.ax:
            return None
        for artist, text in self.targets:
            hit, _ = artist.contains(event)
            if hit:
                return text
        return None

    def on_move(self, event):
        text = self.target_at(event)
        if text is None:
            if not self.tooltip.visible:
                return
            self.tooltip.hide()
        else:
            self.tooltip.show(text, (event.x, event.y))
            self.annotation.set_text(as_plain_text(self.tooltip.content))
            self.annotation.xy = self.tooltip.position
        self.annotation.set_visible(self.tooltip.visible)
        self.fig.canvas.draw_idle()


def chart_salary_by_experience(df: pd.DataFrame, tooltip=None):
    """Bar chart of average salary per experience level, lowest first.

    Returns (figure, HoverTooltip), or None when there is nothing to draw.
    The canvas only holds a weak reference to the hover handler, so keep it.
    """
    data = mean_salary_by_experience(df)
    if data.empty:
        print("  - salary_by_experience.png (skipped - no data)")
        return None

    fig, ax = plt.subplots()
    bars = ax.bar(data["experience_level"], data["avg_salary"], color=BAR_COLOR, width=0.7)
    ax.set_title(TITLES["bar"])
    ax.yaxis.set_major_formatter(FuncFormatter(lambda v, _: f"{v:,.0f}"))
    plt.setp(ax.get_xticklabels(), rotation=40, ha="right")
    ax.spines[["top", "right"]].set_visible(False)

    texts = [format_payload("bar", bar_payload(row.experience_level, row.avg_salary))
             for row in data.itertuples(index=False)]
    hover = HoverTooltip(fig, ax, bars.patches, texts, tooltip)
    plt.tight_layout()
    return fig, hover


def chart_salary_by_company_size(df: pd.DataFrame, tooltip=None):
    """Donut chart of average salary per company size. Returns (figure, HoverTooltip) or None."""
    data = mean_salary_by_company_size(df)
    if data.empty:
        print("  - salary_by_company_size.png (skipped - no data)")
        return None

    fig, ax = plt.subplots(figsize=(6, 6))
    wedges, labels = ax.pie(
        data["avg_salary"],
        labels=data["company_size"],
        labeldistance=1 - PIE_WIDTH / 2,
        colors=[PIE_COLORS[i % len(PIE_COLORS)] for i in range(len(data))],
        startangle=90,
        counterclock=False,
        wedgeprops=dict(width=PIE_WIDTH, linewidth=2, edgecolor=COLORS["bg"]),
    )
    for label in labels:
        label.set_color("#fff")
        label.set_fontweight("bold")
        label.set_horizontalalignment("center")
    ax.set_title(TITLES["pie"])

    texts = [format_payload("pie", pie_payload(row.company_size, row.avg_salary))
             for row in data.itertuples(index=False)]
    hover = HoverTooltip(fig, ax, wedges, texts, tooltip)
    plt.tight_layout()
    return fig, hover


def create_all_charts(df: pd.DataFrame, output_dir=CHARTS_DIR, show: bool = False) -> list:
    """Save the static charts to output_dir. Returns the written paths."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    setup_theme()

    # Both charts share one tooltip, only one element is hovered at a time
    tooltip = Tooltip(FIGURE_OFFSET)
    rendered = {
        "salary_by_experience.png": chart_salary_by_experience(df, tooltip),
        "salary_by_company_size.png": chart_salary_by_company_size(df, tooltip),
    }

    written = []
    hovers = []
    for filename, chart in rendered.items():
        if chart is None:
            continue
        fig, hover = chart
        hovers.append(hover)  # keep handlers alive until plt.show() returns
        path = output_dir / filename
        fig.savefig(path, dpi=150, facecolor=COLORS["bg"])
        print(f"  - {filename}")
        written.append(path)

    if show:
        plt.show()
    plt.close("all")
    return written


def main():
    import argparse
    parser = argparse.ArgumentParser(description='Generate static salary charts')
    parser.add_argument('--data', default=str(DATA_PATH), help='Salaries CSV')
    parser.add_argument('--output', default=str(CHARTS_DIR), help='Output directory')
    parser.add_argument('--show', action='store_true', help='Open the charts in a window with hover tooltips')
    args = parser.parse_args()

    if not args.show:
        matplotlib.use("Agg")

    print("Loading data...")
    try:
        df = load_data(args.data)
    except (OSError, ValueError) as e:
        print(f"Error: {e}")
        return 1
    print(f"  {len(df)} salary records loaded\n")

    print("Generating charts:")
    create_all_charts(df, args.output, show=args.show)
    print(f"\nCharts saved to {args.output}/")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
