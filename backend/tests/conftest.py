"""Root conftest — shared test configuration."""

import os

# Tests never open a real database at import time or startup
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("DATABASE_CHECK_ON_STARTUP", "false")
