"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports and points the
application at throwaway storage before any project module reads its settings.
"""

import os
import sys
import tempfile
from pathlib import Path

os.environ["ENVIRONMENT"] = "testing"
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["PASSWORD_KDF_ROUNDS"] = "1"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="fastlog-uploads-")
os.environ["LOG_LEVEL"] = "WARNING"

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Shared fixtures live in test_fixtures so test modules can also import its helpers
from test_fixtures import (  # noqa: E402,F401
    avatar_store,
    client,
    db_session,
    fake_clock,
    memory_storage,
    sql_storage,
    storage,
)
