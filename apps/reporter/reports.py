"""
Report Builders

Two stateless transforms over the collected users, each producing one CSV:

- active_test_users.csv: active users whose email ends in ".test"
- email_domain_counts.csv: users counted per lowercased top-level label
  of their email domain

Usage:
    from apps.reporter.reports import write_active_test_users_report

    write_active_test_users_report(users, "active_test_users.csv")
"""

import logging
from collections import Counter
from pathlib import Path
from typing import Iterable, Optional, Union

from apps.reporter.writer import format_row, write_report
from utils.schemas import UserRecord

logger = logging.getLogger(__name__)

ACTIVE_TEST_USERS_HEADER = "id,email"
DOMAIN_COUNTS_HEADER = "Domain,count"
TEST_EMAIL_SUFFIX = ".test"


def select_active_test_users(users: Iterable[UserRecord]) -> list[UserRecord]:
    """Active users with a string email ending in ".test", in input order."""
    return [user for user in users if user.is_active and user.email_endswith(TEST_EMAIL_SUFFIX)]


def email_domain_suffix(email: object) -> Optional[str]:
    """
    Extract the lowercased domain suffix of an email.

    The domain is the part between the first "@" and the next "@" (or end of
    string); the suffix is whatever follows its last ".". A domain without a
    dot is returned whole.

        >>> email_domain_suffix("a@Example.COM")
        'com'
        >>> email_domain_suffix("a@localhost")
        'localhost'

    Returns:
        The suffix, or None if email is not a string or has no "@"
    """
    if not isinstance(email, str) or "@" not in email:
        return None

    domain = email.split("@")[1]
    return domain.rsplit(".", 1)[-1].lower()


def count_email_domains(users: Iterable[UserRecord]) -> dict[str, int]:
    """Count users per domain suffix, sorted by suffix."""
    counts: Counter[str] = Counter()
    for user in users:
        suffix = email_domain_suffix(user.email)
        if suffix is not None:
            counts[suffix] += 1
    return dict(sorted(counts.items()))


def write_active_test_users_report(users: Iterable[UserRecord], path: Union[str, Path]) -> Path:
    """
    Write the active ".test" users report.

    Raises:
        WriteError: If the file cannot be written
    """
    selected = select_active_test_users(users)
    rows = [format_row(user.id, user.email) for user in selected]

    report_path = write_report(path, ACTIVE_TEST_USERS_HEADER, rows)
    logger.info("Active test users report written: path=%s, rows=%d", str(report_path), len(rows))
    return report_path


def write_domain_count_report(users: Iterable[UserRecord], path: Union[str, Path]) -> Path:
    """
    Write the email domain counts report.

    Raises:
        WriteError: If the file cannot be written
    """
    counts = count_email_domains(users)
    rows = [format_row(domain, count) for domain, count in counts.items()]

    report_path = write_report(path, DOMAIN_COUNTS_HEADER, rows)
    logger.info("Domain count report written: path=%s, domains=%d", str(report_path), len(rows))
    return report_path
