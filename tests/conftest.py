"""
Pytest configuration and fixtures for all tests.
"""

import os
import sys
from unittest.mock import Mock

import orjson
import pytest

# Add project root to Python path before any imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

# Set up test environment variables before importing any modules
os.environ.setdefault('USERS_API_BASE', 'https://api.example.test/users')
os.environ.setdefault('LOG_LEVEL', 'DEBUG')


def make_response(status_code=200, body=None, reason='OK', raw=None):
    """Build a stand-in for requests.Response."""
    response = Mock()
    response.status_code = status_code
    response.reason = reason
    if raw is not None:
        response.content = raw
    else:
        response.content = orjson.dumps(body) if body is not None else b''
    return response


@pytest.fixture
def session():
    """Mock requests.Session."""
    return Mock()


@pytest.fixture
def client(session):
    """UsersApiClient wired to the mock session."""
    from services.users_api import UsersApiClient

    return UsersApiClient(
        base_url='https://api.example.test/users',
        token=None,
        timeout=5,
        session=session,
    )


@pytest.fixture
def sample_users():
    """Raw user dicts covering the report edge cases."""
    return [
        {'id': 1, 'name': 'A', 'email': 'a@x.test', 'gender': 'female', 'status': 'active'},
        {'id': 2, 'name': 'B', 'email': 'b@x.com', 'gender': 'male', 'status': 'active'},
        {'id': 3, 'name': 'C', 'email': 'c@x.test', 'gender': 'male', 'status': 'inactive'},
        {'id': 4, 'name': 'D', 'email': 'd@Foo.COM', 'gender': 'female', 'status': 'active'},
        {'id': 5, 'name': 'E', 'email': None, 'status': 'active'},
        {'id': 6, 'name': 'F', 'email': 'no-at-sign.test', 'status': 'active'},
        {'id': 7, 'name': 'G', 'email': 'g@localhost', 'status': 'active'},
    ]
