"""
Configuration for the Rewards Report builder

HOW TO USE THIS FILE:
--------------------
1. Point API_BASE_URL at your rewards API (or set REWARDS_API_URL in .env)
2. Adjust the default reporting window if 30 days is not what you want

You generally don't need to change anything else.
"""

import os as _os

from dotenv import load_dotenv

load_dotenv()


# =============================================================================
# API SETTINGS
# =============================================================================
# Base URL of the rewards REST API. Every resource lives under
# {API_BASE_URL}/{resource}/ and accepts ?skip=&limit= for paging.

API_BASE_URL = _os.environ.get(
    "REWARDS_API_URL",
    "https://e-reward-api.onrender.com",
)

# Format: (connect_timeout, read_timeout) in seconds
REQUEST_TIMEOUT = (5, 30)

# Page size for list endpoints. A page shorter than this ends the scan.
PAGE_SIZE = 100


# =============================================================================
# RESOURCES
# =============================================================================
# Path segment for each collection exposed by the API.

RESOURCES = {
    "nominations": "nominations",
    "rewards": "rewards",
    "reward_categories": "reward-categories",
    "employees": "employees",
    "regions": "regions",
    "departments": "departments",
    "customers": "customers",
}


# =============================================================================
# REPORT SETTINGS
# =============================================================================

TOP_REWARDS_LIMIT = 5         # Rows in the "Top Rewards" table
DEFAULT_LOOKBACK_DAYS = 30    # Default window ends today, starts 30 days back
APPROVED_STATUS = "approved"
UNKNOWN_CATEGORY = "Unknown"


# =============================================================================
# FILE PATHS (Advanced - usually don't need to change)
# =============================================================================

EXPORT_DIR = _os.environ.get("REWARDS_EXPORT_DIR", "data/exports")
