"""
Extraction Job - Paginated User Collection

Walks the users API page by page until an empty page is returned and
collects every record in server order.

Features:
- Page counter starting at 1, one request in flight at a time
- Stops at the first empty page and never fetches past it
- Safety cap on the number of pages (EXTRACT_MAX_PAGES)
- Fails fast with FetchError; never returns partial data

Usage:
    from apps.extractor.extractor_job import fetch_all_users

    users = fetch_all_users(client)
"""

import logging
import time
from typing import Optional

from pydantic import ValidationError

from services.users_api import UsersApiClient
from utils.config import settings
from utils.errors import FetchError
from utils.schemas import UserRecord

logger = logging.getLogger(__name__)


def _parse_page(page: int, raw_users: list) -> list[UserRecord]:
    records = []
    for index, raw in enumerate(raw_users):
        if not isinstance(raw, dict):
            raise FetchError(page, f"record {index} is not a JSON object")
        try:
            records.append(UserRecord(**raw))
        except ValidationError as e:
            raise FetchError(page, f"invalid record {index}: {str(e).splitlines()[0]}") from e
    return records


def fetch_all_users(
    client: Optional[UsersApiClient] = None,
    max_pages: Optional[int] = None,
) -> list[UserRecord]:
    """
    Fetch every user by following pagination until an empty page.

    Args:
        client: API client, a default one is created (and closed) if omitted
        max_pages: Maximum number of page requests, defaults to settings.EXTRACT_MAX_PAGES

    Returns:
        All records in page order, then in-page order. Duplicates are kept.

    Raises:
        FetchError: On any failed page, or if the cap is reached before an
            empty page is seen
    """
    max_pages = max_pages or settings.EXTRACT_MAX_PAGES
    owns_client = client is None
    if client is None:
        client = UsersApiClient()

    users: list[UserRecord] = []
    page = 1
    start_time = time.time()

    try:
        while True:
            if page > max_pages:
                raise FetchError(page, f"page limit of {max_pages} reached before an empty page")

            raw_users = client.get_page(page)

            if not raw_users:
                break

            users.extend(_parse_page(page, raw_users))
            logger.debug("Fetched page %d (%d records)", page, len(raw_users))
            page += 1

    finally:
        if owns_client:
            client.close()

    logger.info(
        "Collection complete: pages=%d, records=%d, elapsed=%.3fs",
        page - 1, len(users), time.time() - start_time,
    )

    return users
