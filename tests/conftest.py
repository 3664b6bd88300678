"""Test configuration shared by the whole suite."""

import os

# Configure the environment before any application module loads config.yaml
os.environ["APP_ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_FILE"] = ""
os.environ.setdefault("LOG_LEVEL", "WARNING")

pytest_plugins = ["tests.fixtures"]
