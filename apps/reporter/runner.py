"""
Report Runner - One-Shot Pipeline Execution

Runs the full pipeline once: collect all users, then write both reports.

Features:
- Collection completes before any report file is touched
- Distinct exit codes per error kind (FetchError=2, WriteError=3, ApiError=4)
- Structured logging configured from settings

Usage:
    python -m apps.reporter

    # Point at another endpoint and output directory
    USERS_API_BASE=http://localhost:8080/users REPORTS_DIR=/tmp python -m apps.reporter
"""

import logging
import sys
import time
from pathlib import Path
from typing import Optional

from apps.extractor.extractor_job import fetch_all_users
from apps.reporter.reports import write_active_test_users_report, write_domain_count_report
from services.users_api import UsersApiClient
from utils.config import Settings, settings
from utils.errors import ReportError, WriteError
from utils.logging import setup_logging

logger = logging.getLogger(__name__)


class ReportRunner:
    """
    Runs collection followed by both reporters.

    Handles:
    - API client lifecycle
    - Output path resolution
    - Summary logging
    """

    def __init__(
        self,
        client: Optional[UsersApiClient] = None,
        config: Optional[Settings] = None,
    ) -> None:
        """
        Initialize runner.

        Args:
            client: API client, a default one is created from config if omitted
            config: Settings to use, defaults to the global settings
        """
        self.config = config or settings
        self.client = client or UsersApiClient(
            base_url=self.config.USERS_API_BASE,
            token=self.config.USERS_API_TOKEN,
            timeout=self.config.API_TIMEOUT,
        )
        reports_dir = Path(self.config.REPORTS_DIR)
        self.active_test_users_path = reports_dir / self.config.ACTIVE_TEST_USERS_CSV
        self.domain_counts_path = reports_dir / self.config.EMAIL_DOMAIN_COUNTS_CSV

        logger.info(
            "ReportRunner initialized",
            extra={
                "base_url": self.client.base_url,
                "reports_dir": str(reports_dir),
                "max_pages": self.config.EXTRACT_MAX_PAGES,
            },
        )

    def run(self) -> list[Path]:
        """
        Execute the pipeline.

        Returns:
            Paths of the written reports

        Raises:
            FetchError: If collection fails; no report is written
            WriteError: If the output directory or a report cannot be written
        """
        start_time = time.time()
        logger.info("Starting report run")

        try:
            users = fetch_all_users(self.client, max_pages=self.config.EXTRACT_MAX_PAGES)
        finally:
            self.client.close()

        reports_dir = Path(self.config.REPORTS_DIR)
        try:
            reports_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise WriteError(str(reports_dir), e.strerror or str(e)) from e

        written = [
            write_active_test_users_report(users, self.active_test_users_path),
            write_domain_count_report(users, self.domain_counts_path),
        ]

        logger.info(
            "CSV reports generated: %s (users=%d, elapsed=%.3fs)",
            ", ".join(str(path) for path in written),
            len(users),
            time.time() - start_time,
        )
        return written


def main() -> None:
    """Main entry point for the report runner."""
    setup_logging(level=settings.LOG_LEVEL, format_type=settings.LOG_FORMAT)

    try:
        ReportRunner().run()
    except ReportError as e:
        logger.error(
            "Report run failed",
            extra={"error": str(e), "error_type": type(e).__name__},
            exc_info=True,
        )
        sys.exit(e.exit_code)
    except Exception as e:
        logger.error("Report run failed", extra={"error": str(e)}, exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
