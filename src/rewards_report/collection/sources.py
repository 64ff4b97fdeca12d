"""
Report source loader

Fetches the four collections a report needs (nominations, rewards,
reward categories, employees) concurrently and parses them into records.
The load is all-or-nothing: the first failing fetch aborts it and its
exception propagates to the caller.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

from rewards_report import config
from rewards_report.collection import api
from rewards_report.records import Employee, Nomination, Reward, RewardCategory


@dataclass
class ReportSources:
    """Freshly fetched inputs for one report run."""
    nominations: list[Nomination] = field(default_factory=list)
    rewards: list[Reward] = field(default_factory=list)
    categories: list[RewardCategory] = field(default_factory=list)
    employees: list[Employee] = field(default_factory=list)


# (source attribute, config.RESOURCES key, record type)
REPORT_SOURCES = [
    ("nominations", "nominations", Nomination),
    ("rewards", "rewards", Reward),
    ("categories", "reward_categories", RewardCategory),
    ("employees", "employees", Employee),
]


def load_report_sources(base_url: str = None, page_size: int = None) -> ReportSources:
    """
    Fetch every report input in parallel.

    Args:
        base_url: API root (default config.API_BASE_URL)
        page_size: Page size for each paginated fetch (default config.PAGE_SIZE)

    Returns:
        ReportSources with all four collections populated

    Raises:
        ApiError or requests.RequestException from whichever fetch failed
    """
    with ThreadPoolExecutor(max_workers=len(REPORT_SOURCES)) as pool:
        futures = {
            attr: pool.submit(
                api.fetch_all_paginated,
                config.RESOURCES[resource_key],
                page_size=page_size,
                base_url=base_url,
            )
            for attr, resource_key, _ in REPORT_SOURCES
        }

        parsed = {}
        for attr, _, record_type in REPORT_SOURCES:
            rows = futures[attr].result()
            parsed[attr] = [record_type.from_dict(row) for row in rows]

    return ReportSources(**parsed)
