"""
Configuration for performance tests
"""

import pytest


def pytest_collection_modifyitems(config, items):
    """Modify test collection to handle performance tests"""
    for item in items:
        # Add performance marker to all tests in performance/ directory
        if "performance" in str(item.fspath):
            item.add_marker(pytest.mark.performance)


@pytest.fixture(scope="session")
def performance_config():
    """Configuration for performance tests"""
    return {
        "min_throughput_exact": 100000,  # evaluations/sec, exact matching
        "min_throughput_pattern": 20000,  # evaluations/sec, cached regex matching
    }
