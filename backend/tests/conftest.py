"""Shared test configuration and pytest markers."""


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: exercises the HTTP layer end to end"
    )
