"""Root conftest — shared test configuration."""

import os

# Pin negotiation defaults so a developer's .env cannot change expectations
os.environ.setdefault("DEFAULT_HTML_VERSION", "2.1.0")
os.environ.setdefault("DEFAULT_PAGEBUNDLE_VERSION", "2.1.0")
os.environ.setdefault("LOG_FORMAT", "json")
