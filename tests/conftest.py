"""Root conftest — shared test configuration."""

import os

# Keep tests independent of a developer's .env / shell
os.environ.setdefault("PORT", "3000")
os.environ.setdefault("LOG_FORMAT", "text")
