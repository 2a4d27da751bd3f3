"""Pytest configuration shared by all test packages."""

import os

# Must be set before core.settings is first read (settings are cached)
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["DATABASE_SEED_ON_STARTUP"] = "true"
