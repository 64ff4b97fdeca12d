"""Data collection from the rewards API."""

from .api import (
    ApiError,
    fetch_all_paginated,
    get_record,
    create_record,
    update_record,
    delete_record,
)
from .sources import ReportSources, load_report_sources
