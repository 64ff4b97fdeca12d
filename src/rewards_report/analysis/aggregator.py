"""
Nomination Report Aggregator

Folds a filtered set of nominations into the views shown on the reports
page:

- monthly nomination trend (YYYY-MM buckets, ascending)
- reward distribution by category (first-seen category order)
- top rewards by nomination count
- headline metrics (total, approved, active employees, unique rewards)

Nominations whose reward_id does not match a known reward are left out of
the distribution and the top rewards table, but still count towards the
headline metrics.
"""

from dataclasses import asdict, dataclass, field
from datetime import date, datetime
from typing import Iterable, Union

import numpy as np
import pandas as pd

from rewards_report import config
from rewards_report.analysis.date_filter import filter_by_date_range
from rewards_report.records import Nomination, Reward, RewardCategory

NOMINATION_COLUMNS = ["nomination_id", "nominee_id", "reward_id", "nomination_date", "approval_status"]


@dataclass
class MonthlyCount:
    month: str
    nominations: int


@dataclass
class CategoryCount:
    name: str
    value: int


@dataclass
class RewardCount:
    reward_id: int
    reward_name: str
    category_name: str
    count: int


@dataclass
class ReportMetrics:
    total_nominations: int = 0
    approved_nominations: int = 0
    active_employees: int = 0
    unique_rewards: int = 0


@dataclass
class ReportData:
    """Everything the reports page renders for one date range."""
    monthly_nominations: list[MonthlyCount] = field(default_factory=list)
    reward_distribution: list[CategoryCount] = field(default_factory=list)
    top_rewards: list[RewardCount] = field(default_factory=list)
    metrics: ReportMetrics = field(default_factory=ReportMetrics)

    def to_dict(self) -> dict:
        """Serialize using the dashboard's camelCase keys."""
        return {
            "monthlyNominations": [asdict(m) for m in self.monthly_nominations],
            "rewardDistribution": [asdict(c) for c in self.reward_distribution],
            "topRewards": [asdict(r) for r in self.top_rewards],
            "metrics": {
                "totalNominations": self.metrics.total_nominations,
                "approvedNominations": self.metrics.approved_nominations,
                "activeEmployees": self.metrics.active_employees,
                "uniqueRewards": self.metrics.unique_rewards,
            },
        }


def _plain(value):
    """Convert numpy scalars to built-in Python values."""
    return value.item() if isinstance(value, np.generic) else value


def nominations_frame(nominations: Iterable[Nomination]) -> pd.DataFrame:
    """
    Build a DataFrame of the columns the aggregations need.

    Columns are object dtype so a null id does not upcast the other ids
    to float.
    """
    nominations = list(nominations)
    return pd.DataFrame(
        {col: pd.Series([getattr(n, col) for n in nominations], dtype=object) for col in NOMINATION_COLUMNS},
        columns=NOMINATION_COLUMNS,
    )


def resolve_rewards(
    frame: pd.DataFrame,
    rewards: Iterable[Reward],
    categories: Iterable[RewardCategory],
) -> pd.DataFrame:
    """
    Attach reward_name and category_name to each nomination row.

    Rows whose reward_id matches no reward are dropped. A reward whose
    category cannot be found is labelled config.UNKNOWN_CATEGORY.
    """
    reward_lookup = {r.reward_id: r for r in rewards}
    category_lookup = {c.category_id: c.category_name for c in categories}

    resolved = frame[frame["reward_id"].isin(list(reward_lookup))].copy()
    matched = [reward_lookup[_plain(rid)] for rid in resolved["reward_id"]]

    resolved["reward_name"] = [r.reward_name for r in matched]
    resolved["category_name"] = [
        category_lookup.get(r.category_id) or config.UNKNOWN_CATEGORY for r in matched
    ]
    return resolved


# =============================================================================
# VIEWS
# =============================================================================

def aggregate_monthly(nominations: Iterable[Nomination]) -> list[MonthlyCount]:
    """
    Count nominations per YYYY-MM month.

    The month is the first 7 characters of the ISO date string, so sorting
    the month strings sorts them chronologically.
    """
    frame = nominations_frame(nominations)
    dated = frame[frame["nomination_date"].notna()]
    if dated.empty:
        return []

    months = dated["nomination_date"].astype(str).str.slice(0, 7)
    counts = months.value_counts().sort_index()

    return [MonthlyCount(month=str(month), nominations=int(count)) for month, count in counts.items()]


def aggregate_by_category(
    nominations: Iterable[Nomination],
    rewards: Iterable[Reward],
    categories: Iterable[RewardCategory],
) -> list[CategoryCount]:
    """Count nominations per reward category, in first-seen category order."""
    resolved = resolve_rewards(nominations_frame(nominations), rewards, categories)
    if resolved.empty:
        return []

    counts = resolved.groupby("category_name", sort=False).size()

    return [CategoryCount(name=str(name), value=int(count)) for name, count in counts.items()]


def top_rewards(
    nominations: Iterable[Nomination],
    rewards: Iterable[Reward],
    categories: Iterable[RewardCategory],
    limit: int = None,
) -> list[RewardCount]:
    """
    Rank rewards by nomination count.

    Ties keep the order in which rewards were first seen (stable sort).

    Args:
        nominations: Nominations to rank
        rewards: Known rewards
        categories: Known reward categories
        limit: Number of rows to keep (default config.TOP_REWARDS_LIMIT)

    Returns:
        At most `limit` RewardCount rows, highest count first
    """
    if limit is None:
        limit = config.TOP_REWARDS_LIMIT

    resolved = resolve_rewards(nominations_frame(nominations), rewards, categories)
    if resolved.empty:
        return []

    ranked = (
        resolved.groupby(["reward_id", "reward_name"], sort=False)
        .agg(category_name=("category_name", "first"), nomination_count=("category_name", "size"))
        .reset_index()
        .sort_values("nomination_count", ascending=False, kind="stable")
        .head(limit)
    )

    return [
        RewardCount(
            reward_id=_plain(row.reward_id),
            reward_name=str(row.reward_name),
            category_name=str(row.category_name),
            count=int(row.nomination_count),
        )
        for row in ranked.itertuples(index=False)
    ]


def compute_metrics(nominations: Iterable[Nomination]) -> ReportMetrics:
    """
    Headline numbers for a set of nominations.

    unique_rewards counts distinct raw reward ids, whether or not they
    match a known reward.
    """
    frame = nominations_frame(nominations)

    return ReportMetrics(
        total_nominations=len(frame),
        approved_nominations=int((frame["approval_status"] == config.APPROVED_STATUS).sum()),
        active_employees=int(frame["nominee_id"].nunique(dropna=False)),
        unique_rewards=int(frame["reward_id"].nunique(dropna=False)),
    )


def popularity_percentages(rewards: list[RewardCount]) -> list[float]:
    """
    Popularity of each ranked reward relative to the most nominated one.

    The top entry is always 100. An empty list yields an empty list and a
    maximum of zero yields zeros.
    """
    counts = np.array([r.count for r in rewards], dtype=float)
    if counts.size == 0 or counts.max() <= 0:
        return [0.0] * len(rewards)
    return (100 * counts / counts.max()).tolist()


def popularity_percentage(count: int, rewards: list[RewardCount]) -> float:
    """Popularity of a single count against a ranked list (0 if the list is empty)."""
    if not rewards:
        return 0.0
    max_count = max(r.count for r in rewards)
    if max_count <= 0:
        return 0.0
    return 100 * count / max_count


# =============================================================================
# FULL REPORT
# =============================================================================

def aggregate_report(
    filtered: list[Nomination],
    rewards: Iterable[Reward],
    categories: Iterable[RewardCategory],
    limit: int = None,
) -> ReportData:
    """Build every view from an already date-filtered nomination list."""
    rewards = list(rewards)
    categories = list(categories)

    return ReportData(
        monthly_nominations=aggregate_monthly(filtered),
        reward_distribution=aggregate_by_category(filtered, rewards, categories),
        top_rewards=top_rewards(filtered, rewards, categories, limit=limit),
        metrics=compute_metrics(filtered),
    )


def build_report(
    nominations: Iterable[Nomination],
    rewards: Iterable[Reward],
    categories: Iterable[RewardCategory],
    start: Union[date, datetime],
    end: Union[date, datetime],
    limit: int = None,
) -> ReportData:
    """
    Filter nominations to [start, end] and aggregate them.

    Args:
        nominations: All nominations (not modified)
        rewards: All rewards
        categories: All reward categories
        start: Inclusive window start
        end: Inclusive window end
        limit: Top rewards row count (default config.TOP_REWARDS_LIMIT)

    Returns:
        ReportData for the window
    """
    filtered = filter_by_date_range(nominations, start, end)
    return aggregate_report(filtered, rewards, categories, limit=limit)
