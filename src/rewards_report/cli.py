"""
Rewards Report - command line runner

Usage:
    rewards-report --start 2024-01-01 --end 2024-03-31 --export-dir data/exports --charts

Fetches nominations, rewards, reward categories and employees from the
rewards API, builds the report for the date range and prints it.
"""

import argparse
import json
import logging
from datetime import date, datetime, timedelta

from rewards_report import config
from rewards_report.analysis.aggregator import ReportData, popularity_percentages
from rewards_report.analysis.date_filter import day_bounds
from rewards_report.analysis.session import ReportSession
from rewards_report.output.charts import save_report_charts
from rewards_report.output.exports import export_report_csvs


def parse_day(value: str) -> date:
    """argparse type for YYYY-MM-DD dates."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid date '{value}' (expected YYYY-MM-DD)") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rewards-report",
        description="Build the employee rewards nomination report",
    )
    parser.add_argument("--start", type=parse_day, help="First day of the report (YYYY-MM-DD)")
    parser.add_argument("--end", type=parse_day, help="Last day of the report (YYYY-MM-DD, default today)")
    parser.add_argument("--base-url", type=str, default=None, help="Rewards API root URL")
    parser.add_argument("--top", type=int, default=config.TOP_REWARDS_LIMIT, help="Rows in the top rewards table")
    parser.add_argument("--export-dir", type=str, default=None, help="Write CSV files to this directory")
    parser.add_argument("--charts", action="store_true", help="Also render PNG charts into --export-dir")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def resolve_range(start: date = None, end: date = None) -> tuple[date, date]:
    """Fill in the default window: the last DEFAULT_LOOKBACK_DAYS days ending today."""
    end = end or date.today()
    start = start or end - timedelta(days=config.DEFAULT_LOOKBACK_DAYS)
    return start, end


def print_report(report: ReportData, start: date, end: date) -> None:
    """Print a human-readable report summary."""
    metrics = report.metrics

    print("=" * 60)
    print(f"EMPLOYEE REWARDS ANALYTICS  {start.isoformat()} to {end.isoformat()}")
    print("=" * 60)
    print(f"  Total nominations:    {metrics.total_nominations:,}")
    print(f"  Approved nominations: {metrics.approved_nominations:,}")
    print(f"  Active employees:     {metrics.active_employees:,}")
    print(f"  Unique rewards:       {metrics.unique_rewards:,}")

    print("\nNominations trend:")
    if report.monthly_nominations:
        for row in report.monthly_nominations:
            print(f"  {row.month}  {row.nominations:>6,}")
    else:
        print("  No nomination data available")

    print("\nReward categories:")
    if report.reward_distribution:
        for row in report.reward_distribution:
            print(f"  {row.name:<30} {row.value:>6,}")
    else:
        print("  No reward distribution data available")

    print("\nTop rewards:")
    if report.top_rewards:
        for row, pct in zip(report.top_rewards, popularity_percentages(report.top_rewards)):
            print(f"  {row.reward_name:<30} {row.category_name:<20} {row.count:>6,}  {pct:5.1f}%")
    else:
        print("  No top rewards data available")


def main(argv: list = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    start, end = resolve_range(args.start, args.end)
    window_start, window_end = day_bounds(start, end)

    session = ReportSession(base_url=args.base_url, limit=args.top)
    report = session.refresh(window_start, window_end)
    if report is None:
        print("\n[!] Could not build the report. See the log above for details.")
        return 1

    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        print_report(report, start, end)

    if args.export_dir:
        written = list(export_report_csvs(report, args.export_dir).values())
        if args.charts:
            written.extend(save_report_charts(report, args.export_dir).values())
        print(f"\nWrote {len(written)} files to {args.export_dir}")
    elif args.charts:
        paths = save_report_charts(report, config.EXPORT_DIR)
        print(f"\nWrote {len(paths)} charts to {config.EXPORT_DIR}")

    return 0
