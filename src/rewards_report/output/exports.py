"""
CSV Export Functions for Rewards Reports

Writes one CSV per report view. All exports use UTF-8 encoding and
handle NaN values gracefully.

Output files:
- monthly_nominations.csv: Nomination counts per month
- reward_distribution.csv: Nomination counts per reward category
- top_rewards.csv: Most nominated rewards with popularity
- metrics.csv: Headline metrics
"""

import csv
import math
from pathlib import Path
from typing import Union

from rewards_report.analysis.aggregator import ReportData, popularity_percentages


def export_monthly_nominations(report: ReportData, output_path: Union[str, Path]) -> Path:
    """
    Export the monthly nomination trend to CSV.

    Args:
        report: Aggregated report
        output_path: Path for output CSV file

    Returns:
        Path to created file
    """
    output_path = Path(output_path)

    with open(output_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["month", "nominations"])

        for row in report.monthly_nominations:
            writer.writerow([row.month, row.nominations])

    return output_path


def export_reward_distribution(report: ReportData, output_path: Union[str, Path]) -> Path:
    """Export nominations per reward category, in report order."""
    output_path = Path(output_path)

    with open(output_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["category", "nominations"])

        for row in report.reward_distribution:
            writer.writerow([row.name, row.value])

    return output_path


def export_top_rewards(report: ReportData, output_path: Union[str, Path]) -> Path:
    """
    Export the top rewards table with a popularity column.

    Popularity is relative to the most nominated reward (100).
    """
    output_path = Path(output_path)
    popularity = popularity_percentages(report.top_rewards)

    with open(output_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["rank", "reward_id", "reward_name", "category_name", "count", "popularity"])

        for rank, (row, pct) in enumerate(zip(report.top_rewards, popularity), start=1):
            writer.writerow([
                rank,
                row.reward_id,
                row.reward_name,
                row.category_name,
                row.count,
                _format_value(pct),
            ])

    return output_path


def export_metrics(report: ReportData, output_path: Union[str, Path]) -> Path:
    """Export headline metrics as metric,value rows."""
    output_path = Path(output_path)
    metrics = report.metrics

    with open(output_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["metric", "value"])
        writer.writerow(["total_nominations", metrics.total_nominations])
        writer.writerow(["approved_nominations", metrics.approved_nominations])
        writer.writerow(["active_employees", metrics.active_employees])
        writer.writerow(["unique_rewards", metrics.unique_rewards])

    return output_path


def export_report_csvs(report: ReportData, output_dir: Union[str, Path]) -> dict[str, Path]:
    """
    Export all CSV files in one call.

    Args:
        report: Aggregated report
        output_dir: Directory to write CSV files (created if missing)

    Returns:
        Dict mapping view name to created file path
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    return {
        "monthly_nominations": export_monthly_nominations(report, output_dir / "monthly_nominations.csv"),
        "reward_distribution": export_reward_distribution(report, output_dir / "reward_distribution.csv"),
        "top_rewards": export_top_rewards(report, output_dir / "top_rewards.csv"),
        "metrics": export_metrics(report, output_dir / "metrics.csv"),
    }


def _format_value(value) -> str:
    """Format a value for CSV output, handling NaN."""
    if value == "" or value is None:
        return ""
    if isinstance(value, float):
        if math.isnan(value):
            return ""
        return str(round(value, 2)) if value != int(value) else str(int(value))
    return str(value)
