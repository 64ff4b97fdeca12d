"""
Report session: runs report refreshes and keeps the latest good result.

Each refresh is tagged with a generation number when it starts. Only the
most recently started refresh may publish its report, so a slow, older
refresh finishing late can never replace a newer result. A refresh that
fails publishes nothing and the previous report stays current.
"""

import logging
import threading
from datetime import date, datetime
from typing import Callable, Optional, Union

import requests

from rewards_report.analysis.aggregator import ReportData, build_report
from rewards_report.collection.api import ApiError
from rewards_report.collection.sources import ReportSources, load_report_sources

logger = logging.getLogger(__name__)


class ReportSession:
    """Holds the published report for one dashboard session."""

    def __init__(
        self,
        base_url: str = None,
        page_size: int = None,
        limit: int = None,
        loader: Callable[..., ReportSources] = None,
    ):
        self.base_url = base_url
        self.page_size = page_size
        self.limit = limit
        self._loader = loader or load_report_sources

        self._lock = threading.Lock()
        self._generation = 0
        self._in_flight = 0

        self.report: Optional[ReportData] = None
        self.report_generation = 0

    @property
    def loading(self) -> bool:
        """True while at least one refresh is running."""
        with self._lock:
            return self._in_flight > 0

    @property
    def latest_generation(self) -> int:
        with self._lock:
            return self._generation

    def begin(self) -> int:
        """Start a new request and return its generation number."""
        with self._lock:
            self._generation += 1
            return self._generation

    def publish(self, generation: int, report: ReportData) -> bool:
        """
        Store a report if it belongs to the latest request.

        Returns:
            True if the report was stored, False if it was stale
        """
        with self._lock:
            if generation != self._generation:
                return False
            self.report = report
            self.report_generation = generation
            return True

    def refresh(
        self,
        start: Union[date, datetime],
        end: Union[date, datetime],
    ) -> Optional[ReportData]:
        """
        Fetch fresh sources, aggregate them for [start, end] and publish.

        Returns:
            The new report, or None if the refresh failed or was superseded
        """
        generation = self.begin()
        with self._lock:
            self._in_flight += 1

        try:
            sources = self._loader(base_url=self.base_url, page_size=self.page_size)
            report = build_report(
                sources.nominations,
                sources.rewards,
                sources.categories,
                start,
                end,
                limit=self.limit,
            )
        except (ApiError, requests.RequestException, ValueError):
            logger.exception("Error fetching analytics data")
            return None
        finally:
            with self._lock:
                self._in_flight -= 1

        if not self.publish(generation, report):
            logger.info("Discarding stale report from request %d", generation)
            return None

        logger.info(
            "Published report %d: %d nominations",
            generation,
            report.metrics.total_nominations,
        )
        return report
