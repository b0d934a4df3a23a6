"""
Acceptable HTTP status codes.
"""

# Half-open: 200 through 299. 300 is a redirection and is not accepted.
ACCEPTABLE_STATUS_CODES = range(200, 300)


def is_acceptable(code: int) -> bool:
    """Return True if ``code`` counts as a successful response."""
    return code in ACCEPTABLE_STATUS_CODES
