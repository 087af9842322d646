# tests/test_config.py

import unittest
from unittest.mock import patch

from report_filter.config.filter_config import (
    DEFAULT_CACHE_SIZE,
    FilterConfig,
    PerformanceConfig,
    PRODUCTION_CONFIG,
    TESTING_CONFIG,
)


class TestFilterConfig(unittest.TestCase):

    @patch.dict('os.environ', {}, clear=True)
    def test_defaults(self):
        config = FilterConfig.from_env()
        self.assertTrue(config.performance.enable_caching)
        self.assertEqual(config.performance.default_cache_size, DEFAULT_CACHE_SIZE)
        self.assertEqual(config.performance.effective_cache_size, 100)
        self.assertEqual(config.logging.log_level, 'WARNING')

    @patch.dict('os.environ', {
        'REPORT_FILTER_CACHE_SIZE': '250',
        'REPORT_FILTER_LOG_LEVEL': 'debug',
        'REPORT_FILTER_ENABLE_PERFORMANCE_LOGGING': 'true',
    }, clear=True)
    def test_environment_overrides(self):
        config = FilterConfig.from_env()
        self.assertEqual(config.performance.default_cache_size, 250)
        self.assertEqual(config.logging.log_level, 'DEBUG')
        self.assertTrue(config.logging.enable_performance)

    @patch.dict('os.environ', {'REPORT_FILTER_ENABLE_CACHING': 'false'}, clear=True)
    def test_disabled_caching_means_zero_capacity(self):
        config = FilterConfig.from_env()
        self.assertEqual(config.performance.effective_cache_size, 0)

    @patch.dict('os.environ', {'REPORT_FILTER_CACHE_SIZE': 'lots'}, clear=True)
    def test_non_numeric_cache_size(self):
        with self.assertRaises(ValueError):
            FilterConfig.from_env()

    @patch.dict('os.environ', {'REPORT_FILTER_CACHE_SIZE': '-5'}, clear=True)
    def test_negative_cache_size(self):
        with self.assertRaises(ValueError):
            FilterConfig.from_env()

    def test_profiles(self):
        self.assertEqual(PRODUCTION_CONFIG.performance.default_cache_size, DEFAULT_CACHE_SIZE)
        self.assertEqual(TESTING_CONFIG.logging.log_level, 'DEBUG')
        self.assertEqual(PerformanceConfig(default_cache_size=0).effective_cache_size, 0)


if __name__ == '__main__':
    unittest.main()
