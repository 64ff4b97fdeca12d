"""
Rewards REST API client

Handles:
- URL building for collection and item endpoints
- Pagination (fetching complete collections page by page)
- Item CRUD (get, create, update, delete)

Every failure surfaces as an exception: transport errors propagate as
requests.RequestException, non-success statuses and unparseable bodies
are raised as ApiError.
"""

from typing import Optional
from urllib.parse import urlencode

import requests

from rewards_report import config


class ApiError(RuntimeError):
    """Raised when the API answers with a non-success status or bad JSON."""

    def __init__(self, message: str, endpoint: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.endpoint = endpoint
        self.status_code = status_code


# =============================================================================
# URL BUILDING
# =============================================================================

def build_collection_url(resource: str, base_url: str = None) -> str:
    """Return the list endpoint for a resource, e.g. https://host/rewards/."""
    base = (base_url or config.API_BASE_URL).rstrip("/")
    return f"{base}/{resource.strip('/')}/"


def build_item_url(resource: str, record_id, base_url: str = None) -> str:
    """Return the item endpoint for a resource, e.g. https://host/rewards/7."""
    return f"{build_collection_url(resource, base_url)}{record_id}"


def build_page_url(endpoint: str, skip: int, limit: int) -> str:
    """Append skip/limit paging parameters to a list endpoint."""
    return f"{endpoint}?{urlencode({'skip': skip, 'limit': limit})}"


# =============================================================================
# RESPONSE HANDLING
# =============================================================================

def _decode(response, endpoint: str):
    """Check the status of a response and return its JSON body."""
    if not 200 <= response.status_code < 300:
        raise ApiError(
            f"Failed to fetch {endpoint}: API error {response.status_code}",
            endpoint=endpoint,
            status_code=response.status_code,
        )

    try:
        return response.json()
    except ValueError as e:
        raise ApiError(
            f"Failed to fetch {endpoint}: invalid JSON body",
            endpoint=endpoint,
            status_code=response.status_code,
        ) from e


# =============================================================================
# COLLECTION REQUESTS
# =============================================================================

def fetch_page(endpoint: str, skip: int, limit: int) -> list:
    """
    Fetch a single page of a list endpoint.

    Args:
        endpoint: Collection URL (from build_collection_url)
        skip: Number of records to skip
        limit: Page size

    Returns:
        List of record dicts in server order
    """
    response = requests.get(build_page_url(endpoint, skip, limit), timeout=config.REQUEST_TIMEOUT)
    data = _decode(response, endpoint)

    if not isinstance(data, list):
        raise ApiError(
            f"Failed to fetch {endpoint}: expected a JSON list",
            endpoint=endpoint,
            status_code=response.status_code,
        )

    return data


def fetch_all_paginated(
    resource: str,
    page_size: int = None,
    base_url: str = None,
    progress_callback: callable = None,
) -> list[dict]:
    """
    Fetch every record of a collection.

    Keeps requesting pages of page_size records until a page comes back
    shorter than page_size (an empty page included). With M records this
    issues M // page_size + 1 requests.

    Args:
        resource: Resource path segment (e.g. "nominations")
        page_size: Records per request (default config.PAGE_SIZE)
        base_url: API root (default config.API_BASE_URL)
        progress_callback: Optional callback(fetched_count)

    Returns:
        All records in server order

    Raises:
        ApiError: on a non-success status or malformed body for any page
    """
    limit = page_size or config.PAGE_SIZE
    endpoint = build_collection_url(resource, base_url)

    records = []
    skip = 0

    while True:
        batch = fetch_page(endpoint, skip, limit)
        records.extend(batch)

        if progress_callback:
            progress_callback(len(records))

        if len(batch) != limit:
            break
        skip += limit

    return records


# =============================================================================
# ITEM REQUESTS
# =============================================================================

def get_record(resource: str, record_id, base_url: str = None) -> dict:
    """Fetch a single record by id."""
    endpoint = build_item_url(resource, record_id, base_url)
    response = requests.get(endpoint, timeout=config.REQUEST_TIMEOUT)
    return _decode(response, endpoint)


def create_record(resource: str, payload: dict, base_url: str = None) -> dict:
    """POST a new record and return the stored version."""
    endpoint = build_collection_url(resource, base_url)
    response = requests.post(endpoint, json=payload, timeout=config.REQUEST_TIMEOUT)
    return _decode(response, endpoint)


def update_record(resource: str, record_id, payload: dict, base_url: str = None) -> dict:
    """PUT a full replacement of a record and return the stored version."""
    endpoint = build_item_url(resource, record_id, base_url)
    response = requests.put(endpoint, json=payload, timeout=config.REQUEST_TIMEOUT)
    return _decode(response, endpoint)


def delete_record(resource: str, record_id, base_url: str = None) -> None:
    """DELETE a record. The response body, if any, is ignored."""
    endpoint = build_item_url(resource, record_id, base_url)
    response = requests.delete(endpoint, timeout=config.REQUEST_TIMEOUT)

    if not 200 <= response.status_code < 300:
        raise ApiError(
            f"Failed to delete {endpoint}: API error {response.status_code}",
            endpoint=endpoint,
            status_code=response.status_code,
        )
