"""
Unit tests for application settings.
Version: 1.0.0
"""
import pytest

from inventory_search.core import config


pytestmark = pytest.mark.unit


class TestSettings:

    def test_module_settings_is_the_cached_instance(self):
        assert config.settings is config.get_settings()

    def test_get_settings_is_cached(self):
        assert config.get_settings() is config.get_settings()

    def test_overrides_by_keyword(self):
        custom = config.Settings(search_debounce_ms=10, default_page_size=50)
        assert custom.search_debounce_ms == 10
        assert custom.default_page_size == 50
