"""Pytest configuration and fixtures."""


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: integration tests against real RGS API")
