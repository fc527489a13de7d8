"""
Shared test configuration.

Raises the default rate limit before the application is imported so
that the whole suite can run from one test client address.
"""

import os

os.environ.setdefault("BODYGUARD_RATE_LIMIT_DEFAULT", "10000/minute")
