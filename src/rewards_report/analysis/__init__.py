"""Report aggregation and dashboard helpers."""

from .date_filter import filter_by_date_range, parse_nomination_date, day_bounds
from .aggregator import (
    ReportData,
    ReportMetrics,
    MonthlyCount,
    CategoryCount,
    RewardCount,
    aggregate_monthly,
    aggregate_by_category,
    top_rewards,
    compute_metrics,
    popularity_percentage,
    popularity_percentages,
    aggregate_report,
    build_report,
)
from .lookups import category_name, employee_name, reward_name, status_label
from .zones import split_zones, add_zone, remove_zone
from .session import ReportSession
