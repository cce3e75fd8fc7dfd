"""Test configuration and fixtures for repo2dirs."""


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption(
        "--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (network, slow)"
    )
