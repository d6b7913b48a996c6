"""
Extractor App - Paginated Collection

Responsibilities:
- Request pages 1, 2, 3, ... from the users API
- Stop at the first empty page, bounded by EXTRACT_MAX_PAGES
- Fail the whole run with FetchError on the first bad page

Output:
- In-memory list of UserRecord, handed to the reporters
"""
