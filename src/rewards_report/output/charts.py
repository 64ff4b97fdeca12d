"""
Chart rendering for rewards reports

Renders the three report charts to PNG:
- Nominations trend (line chart)
- Reward categories distribution (pie chart)
- Top rewards popularity (horizontal bar chart)

An empty view still produces a figure, with a "No data available" note.
"""

from pathlib import Path
from typing import Union

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for saving files
import matplotlib.pyplot as plt

from rewards_report.analysis.aggregator import ReportData, popularity_percentages

STYLE_CONFIG = {
    "figure.figsize": (10, 6),
    "font.family": "sans-serif",
    "font.size": 11,
    "axes.labelsize": 12,
    "axes.titlesize": 14,
    "lines.linewidth": 1.5,
    "savefig.dpi": 150,
    "savefig.bbox": "tight",
}

CATEGORY_COLORS = ["#0088FE", "#00C49F", "#FFBB28", "#FF8042", "#A28DFF", "#FF6B8B"]
TREND_COLOR = "#8884d8"
BAR_COLOR = "#2563eb"


def _apply_style():
    """Apply consistent styling to matplotlib."""
    plt.rcParams.update(STYLE_CONFIG)


def _no_data(ax, message: str):
    ax.text(0.5, 0.5, message, ha="center", va="center", transform=ax.transAxes, color="gray")
    ax.set_xticks([])
    ax.set_yticks([])


def _save(fig, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path)
    plt.close(fig)
    return output_path


def plot_monthly_trend(report: ReportData, output_path: Union[str, Path]) -> Path:
    """
    Line chart of nominations per month.

    Args:
        report: Aggregated report
        output_path: Path for output PNG

    Returns:
        Path to created file
    """
    _apply_style()
    output_path = Path(output_path)

    fig, ax = plt.subplots()
    ax.set_title("Nominations Trend")

    if report.monthly_nominations:
        months = [m.month for m in report.monthly_nominations]
        counts = [m.nominations for m in report.monthly_nominations]
        ax.plot(months, counts, color=TREND_COLOR, marker="o", label="Nominations")
        ax.set_xlabel("Month")
        ax.set_ylabel("Nominations")
        ax.grid(True, linestyle="--", alpha=0.5)
        ax.legend()
    else:
        _no_data(ax, "No nomination data available")

    return _save(fig, output_path)


def plot_reward_distribution(report: ReportData, output_path: Union[str, Path]) -> Path:
    """Pie chart of nominations per reward category."""
    _apply_style()
    output_path = Path(output_path)

    fig, ax = plt.subplots()
    ax.set_title("Reward Categories Distribution")

    if report.reward_distribution:
        names = [c.name for c in report.reward_distribution]
        values = [c.value for c in report.reward_distribution]
        colors = [CATEGORY_COLORS[i % len(CATEGORY_COLORS)] for i in range(len(values))]
        ax.pie(values, labels=names, colors=colors, autopct="%1.0f%%")
        ax.axis("equal")
    else:
        _no_data(ax, "No reward distribution data available")

    return _save(fig, output_path)


def plot_top_rewards(report: ReportData, output_path: Union[str, Path]) -> Path:
    """Horizontal bars of top reward popularity (most nominated = 100%)."""
    _apply_style()
    output_path = Path(output_path)

    fig, ax = plt.subplots()
    ax.set_title("Top Rewards")

    if report.top_rewards:
        # Reverse so the most popular reward sits at the top
        rows = list(reversed(report.top_rewards))
        popularity = list(reversed(popularity_percentages(report.top_rewards)))
        labels = [f"{r.reward_name} ({r.category_name})" for r in rows]
        ax.barh(labels, popularity, color=BAR_COLOR)
        for y, row in enumerate(rows):
            ax.annotate(f"{row.count}", (popularity[y], y), xytext=(4, 0),
                        textcoords="offset points", va="center", fontsize=9)
        ax.set_xlim(0, 110)
        ax.set_xlabel("Popularity (%)")
    else:
        _no_data(ax, "No top rewards data available")

    return _save(fig, output_path)


def save_report_charts(report: ReportData, output_dir: Union[str, Path]) -> dict[str, Path]:
    """Render all three charts into output_dir."""
    output_dir = Path(output_dir)
    return {
        "monthly_trend": plot_monthly_trend(report, output_dir / "monthly_trend.png"),
        "reward_distribution": plot_reward_distribution(report, output_dir / "reward_distribution.png"),
        "top_rewards": plot_top_rewards(report, output_dir / "top_rewards.png"),
    }
