"""Unit tests for the application context and configuration models."""

import os
from unittest.mock import patch

import pytest

from src.catalog.runtime.config.config_data import ConfigData, DatabaseConfig
from src.catalog.runtime.context import (
    AppContext,
    get_config,
    get_context,
    with_context,
)


class TestContextManager:
    """Test the context manager functionality."""

    def test_default_context_available(self):
        context = get_context()
        config = get_config()

        assert isinstance(context, AppContext)
        assert isinstance(config, ConfigData)
        assert context.config is config

    def test_suite_runs_with_test_configuration(self):
        config = get_config()

        assert config.app.environment == "test"
        assert config.database.url == "sqlite://"
        assert config.logging.file is None

    def test_with_context_override_single_level(self):
        original_config = get_config()
        original_host = original_config.app.host

        test_config = ConfigData()
        test_config.app.host = "custom_host"

        with with_context(test_config):
            override_config = get_config()
            assert override_config.app.host == "custom_host"
            assert override_config is not original_config
            # Fields that were not set are inherited
            assert override_config.app.environment == original_config.app.environment
            assert override_config.database.url == original_config.database.url

        after_config = get_config()
        assert after_config.app.host == original_host
        assert after_config is original_config

    def test_with_context_nested_overrides(self):
        outer = ConfigData()
        outer.catalog.default_page_size = 25

        inner = ConfigData()
        inner.catalog.api_prefix = "/v2"

        with with_context(outer):
            with with_context(inner):
                config = get_config()
                assert config.catalog.default_page_size == 25
                assert config.catalog.api_prefix == "/v2"

            assert get_config().catalog.api_prefix == "/api"

        assert get_config().catalog.default_page_size == 10

    def test_with_context_none_is_noop(self):
        original = get_config()

        with with_context(None):
            assert get_config() is original

    def test_with_context_rejects_other_types(self):
        with pytest.raises(ValueError, match="config_override must be ConfigData"):
            with with_context({"app": {"host": "x"}}):
                pass


class TestDatabaseConfig:
    def test_sqlite_connection_string_is_url(self):
        config = DatabaseConfig(url="sqlite:///./catalog.db", password_env_var="UNUSED")

        assert config.is_sqlite
        assert config.connection_string == "sqlite:///./catalog.db"

    def test_password_injected_from_environment(self):
        config = DatabaseConfig(
            url="postgresql://catalog@db:5432/catalog", password_env_var="CATALOG_DB_PASSWORD"
        )

        with patch.dict(os.environ, {"CATALOG_DB_PASSWORD": "s3cret"}):
            assert config.connection_string == "postgresql://catalog:s3cret@db:5432/catalog"

    def test_missing_password_variable_raises(self):
        config = DatabaseConfig(
            url="postgresql://catalog@db:5432/catalog", password_env_var="CATALOG_DB_PASSWORD"
        )

        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError, match="CATALOG_DB_PASSWORD not set"):
                _ = config.connection_string

    def test_url_password_is_kept(self):
        config = DatabaseConfig(
            url="postgresql://catalog:inline@db:5432/catalog", password_env_var="CATALOG_DB_PASSWORD"
        )

        assert config.connection_string == "postgresql://catalog:inline@db:5432/catalog"

    def test_no_password_variable_returns_url(self):
        config = DatabaseConfig(url="postgresql://catalog@db:5432/catalog")

        assert config.connection_string == "postgresql://catalog@db:5432/catalog"
