"""
Users API Client

Thin wrapper over the users REST resource using a `requests.Session`.

Features:
- Paginated reads (`GET <base>?page=<n>`)
- Create / update / delete helpers with optional bearer-token auth
- Per-request timeout from settings
- orjson (de)serialisation of request and response bodies

Usage:
    from services.users_api import UsersApiClient

    with UsersApiClient(token="...") as client:
        page = client.get_page(1)
        created = client.create_user(UserPayload(name="Ada", email="ada@x.test"))
"""

import logging
from typing import Any, Optional, Union

import orjson
import requests

from utils.config import settings
from utils.errors import ApiError, FetchError
from utils.schemas import UserPayload

logger = logging.getLogger(__name__)

DELETE_SUCCESS_CODES = (200, 204)


def _is_success(response: requests.Response) -> bool:
    return 200 <= response.status_code < 300


def _error_body(response: requests.Response) -> Any:
    """Parse a structured error body, falling back to an empty dict."""
    try:
        return orjson.loads(response.content)
    except orjson.JSONDecodeError:
        return {}


class UsersApiClient:
    """Client for the users resource.

    Base URL, token and timeout are fixed at construction; any argument left
    as None falls back to the corresponding setting.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Users resource URL, defaults to settings.USERS_API_BASE
            token: Bearer token, defaults to settings.USERS_API_TOKEN
            timeout: Per-request timeout in seconds, defaults to settings.API_TIMEOUT
            session: HTTP session to use, a new one is created if omitted
        """
        self.base_url = (base_url or settings.USERS_API_BASE).rstrip("/")
        self.token = token if token is not None else settings.USERS_API_TOKEN
        self.timeout = timeout or settings.API_TIMEOUT
        self.session = session or requests.Session()

    def __enter__(self) -> "UsersApiClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    def _headers(self, json_body: bool = False) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if json_body:
            headers["Content-Type"] = "application/json"
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _user_url(self, user_id: int) -> str:
        return f"{self.base_url}/{user_id}"

    def get_page(self, page: int) -> list[dict[str, Any]]:
        """
        Fetch one page of raw user objects.

        Args:
            page: 1-based page number

        Returns:
            List of user dicts, empty when pagination is exhausted

        Raises:
            FetchError: On transport failure, non-2xx status, or a body
                that is not a JSON array
        """
        try:
            response = self.session.get(
                self.base_url,
                params={"page": page},
                headers=self._headers(),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise FetchError(page, str(e)) from e

        if not _is_success(response):
            raise FetchError(
                page,
                f"{response.status_code} {response.reason}",
                status_code=response.status_code,
            )

        try:
            data = orjson.loads(response.content)
        except orjson.JSONDecodeError as e:
            raise FetchError(page, f"invalid JSON body: {e}", status_code=response.status_code) from e

        if not isinstance(data, list):
            raise FetchError(
                page,
                f"expected a JSON array, got {type(data).__name__}",
                status_code=response.status_code,
            )

        return data

    def _send(self, action: str, method: str, url: str, body: Optional[dict[str, Any]] = None) -> requests.Response:
        response = self.session.request(
            method,
            url,
            data=orjson.dumps(body) if body is not None else None,
            headers=self._headers(json_body=body is not None),
            timeout=self.timeout,
        )
        if not _is_success(response):
            raise ApiError(action, response.status_code, response.reason or "", _error_body(response))
        return response

    def create_user(self, user: Union[UserPayload, dict[str, Any]]) -> dict[str, Any]:
        """
        Create a user.

        Args:
            user: Payload with name, email, gender and status

        Returns:
            Created user object as returned by the API

        Raises:
            ApiError: If the API responds with a non-2xx status
        """
        body = user.to_body() if isinstance(user, UserPayload) else dict(user)
        response = self._send("add user", "POST", self.base_url, body)
        return orjson.loads(response.content)

    def update_user(self, user_id: int, user: Union[UserPayload, dict[str, Any]]) -> dict[str, Any]:
        """
        Partially update a user.

        Args:
            user_id: ID of the user to update
            user: Fields to change

        Returns:
            Updated user object as returned by the API

        Raises:
            ApiError: If the API responds with a non-2xx status
        """
        body = user.to_body() if isinstance(user, UserPayload) else dict(user)
        response = self._send("update user", "PATCH", self._user_url(user_id), body)
        return orjson.loads(response.content)

    def delete_user(self, user_id: int) -> bool:
        """
        Delete a user.

        Returns:
            True for 200/204, False for any other success status

        Raises:
            ApiError: If the API responds with a non-2xx status
        """
        response = self._send("delete user", "DELETE", self._user_url(user_id))
        return response.status_code in DELETE_SUCCESS_CODES
