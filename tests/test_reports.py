"""
Tests for report builders and the CSV writer.
"""

import pytest

from apps.reporter.reports import (
    count_email_domains,
    email_domain_suffix,
    select_active_test_users,
    write_active_test_users_report,
    write_domain_count_report,
)
from apps.reporter.writer import render_report, write_report
from utils.errors import WriteError
from utils.schemas import UserRecord


def records(*raw):
    return [UserRecord(**r) for r in raw]


class TestActiveTestUsers:
    """Test the active '.test' users report."""

    def test_filter_example(self, tmp_path):
        """Test only active users with '.test' emails are written."""
        users = records(
            {'id': 1, 'status': 'active', 'email': 'a@x.test'},
            {'id': 2, 'status': 'active', 'email': 'b@x.com'},
            {'id': 3, 'status': 'inactive', 'email': 'c@x.test'},
        )
        path = tmp_path / 'active_test_users.csv'

        write_active_test_users_report(users, path)

        assert path.read_text(encoding='utf-8') == 'id,email\n1,a@x.test'

    def test_status_is_case_sensitive(self):
        """Test 'Active' does not count as active."""
        users = records({'id': 1, 'status': 'Active', 'email': 'a@x.test'})

        assert select_active_test_users(users) == []

    def test_suffix_is_case_sensitive(self):
        """Test '.TEST' does not match the '.test' suffix."""
        users = records({'id': 1, 'status': 'active', 'email': 'a@x.TEST'})

        assert select_active_test_users(users) == []

    def test_malformed_emails_are_skipped(self):
        """Test missing and non-string emails are excluded without error."""
        users = records(
            {'id': 1, 'status': 'active'},
            {'id': 2, 'status': 'active', 'email': None},
            {'id': 3, 'status': 'active', 'email': 12345},
            {'id': 4, 'status': 'active', 'email': ['a@x.test']},
        )

        assert select_active_test_users(users) == []

    def test_order_is_preserved(self, sample_users, tmp_path):
        """Test rows follow collection order."""
        users = records(*sample_users)
        path = tmp_path / 'out.csv'

        write_active_test_users_report(users, path)

        assert path.read_text(encoding='utf-8') == 'id,email\n1,a@x.test\n6,no-at-sign.test'

    def test_email_without_at_sign_still_qualifies(self, tmp_path):
        """Test a '.test' email without '@' is kept; only the domain report drops it."""
        users = records({'id': 6, 'status': 'active', 'email': 'no-at-sign.test'})
        path = tmp_path / 'out.csv'

        write_active_test_users_report(users, path)

        assert path.read_text(encoding='utf-8') == 'id,email\n6,no-at-sign.test'
        assert count_email_domains(users) == {}

    def test_null_id_renders_empty(self, tmp_path):
        """Test a matching record with a null id gets an empty id column."""
        users = records({'id': None, 'status': 'active', 'email': 'a@x.test'})
        path = tmp_path / 'out.csv'

        write_active_test_users_report(users, path)

        assert path.read_text(encoding='utf-8') == 'id,email\n,a@x.test'

    def test_empty_report(self, tmp_path):
        """Test an empty report is the header line only."""
        path = tmp_path / 'out.csv'

        write_active_test_users_report([], path)

        assert path.read_bytes() == b'id,email\n'


class TestEmailDomainSuffix:
    """Test domain suffix extraction."""

    @pytest.mark.parametrize('email, expected', [
        ('a@Example.COM', 'com'),
        ('a@mail.example.co.UK', 'uk'),
        ('a@localhost', 'localhost'),
        ('a@LocalHost', 'localhost'),
        ('a@', ''),
        ('a@b@c.org', 'b'),
        ('a@x.', ''),
    ])
    def test_suffix(self, email, expected):
        """Test suffix is the lowercased text after the domain's last dot."""
        assert email_domain_suffix(email) == expected

    def test_domain_ends_at_second_at_sign(self):
        """Test the domain is the text between the first and second '@'."""
        assert email_domain_suffix('a@b@c.org') == 'b'

    @pytest.mark.parametrize('email', [None, 42, 'plainaddress', '', ['a@b.com']])
    def test_unusable_email(self, email):
        """Test non-string or '@'-less emails yield None."""
        assert email_domain_suffix(email) is None


class TestDomainCounts:
    """Test the domain counts report."""

    def test_counts_example(self, tmp_path):
        """Test suffixes are grouped case-insensitively."""
        users = records(
            {'id': 1, 'email': 'a@Foo.COM'},
            {'id': 2, 'email': 'b@foo.com'},
            {'id': 3, 'email': 'c@bar.net'},
        )
        path = tmp_path / 'email_domain_counts.csv'

        write_domain_count_report(users, path)

        assert path.read_text(encoding='utf-8') == 'Domain,count\ncom,2\nnet,1'

    def test_rows_sorted_by_domain(self):
        """Test rows are ordered lexicographically regardless of input order."""
        users = records(
            {'id': 1, 'email': 'a@x.org'},
            {'id': 2, 'email': 'b@x.com'},
            {'id': 3, 'email': 'c@x.net'},
            {'id': 4, 'email': 'd@x.com'},
        )

        assert list(count_email_domains(users).items()) == [('com', 2), ('net', 1), ('org', 1)]

    def test_counts_all_statuses(self, sample_users):
        """Test every user counts regardless of status, malformed emails excluded."""
        users = records(*sample_users)

        assert count_email_domains(users) == {'com': 2, 'localhost': 1, 'test': 2}

    def test_empty_report(self, tmp_path):
        """Test no usable emails yields the header line only."""
        users = records({'id': 1}, {'id': 2, 'email': 'nobody'})
        path = tmp_path / 'out.csv'

        write_domain_count_report(users, path)

        assert path.read_bytes() == b'Domain,count\n'


class TestWriter:
    """Test the flat-file writer."""

    def test_render_without_trailing_newline(self):
        """Test rows are newline-joined with no final newline."""
        assert render_report('h1,h2', ['a,1', 'b,2']) == 'h1,h2\na,1\nb,2'

    def test_values_are_not_quoted(self, tmp_path):
        """Test commas inside values are written as-is."""
        users = records({'id': 1, 'status': 'active', 'email': '"odd,name"@x.test'})
        path = tmp_path / 'out.csv'

        write_active_test_users_report(users, path)

        assert path.read_text(encoding='utf-8') == 'id,email\n1,"odd,name"@x.test'

    def test_overwrites_existing_file(self, tmp_path):
        """Test a second write replaces previous content."""
        path = tmp_path / 'out.csv'
        path.write_text('stale content that is longer\n', encoding='utf-8')

        write_report(path, 'h', ['x'])

        assert path.read_text(encoding='utf-8') == 'h\nx'

    def test_missing_directory_raises_write_error(self, tmp_path):
        """Test filesystem failures surface as WriteError."""
        path = tmp_path / 'missing' / 'out.csv'

        with pytest.raises(WriteError) as exc_info:
            write_report(path, 'h', [])

        assert exc_info.value.path == str(path)
        assert exc_info.value.exit_code == 3
