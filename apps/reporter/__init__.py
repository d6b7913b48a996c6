"""
Reporter App - CSV Reports

Responsibilities:
- Filter active users with ".test" emails
- Count users per email domain suffix
- Write both reports to REPORTS_DIR

Output:
- active_test_users.csv (header: id,email)
- email_domain_counts.csv (header: Domain,count)
"""
