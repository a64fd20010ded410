"""
Root pytest configuration.

Settings are instantiated at import time, so required environment
variables must exist before any test module imports `config`.
"""

import os

os.environ.setdefault("POSTGRES_PASSWORD", "test")
os.environ.setdefault("LOG_FORMAT", "console")
os.environ.setdefault("API_CORS_ORIGINS", "http://localhost:5173")
