"""Pytest configuration and fixtures for axioscloud tests."""

from typing import Generator

import pytest

from axioscloud.config import ClientConfig, reset_config, set_config
from axioscloud.logutils.config import reset_config as reset_log_config

TEST_RC4_KEY = "test-rc4-key"
TEST_VENDOR_TOKEN = "00000000-0000-0000-0000-000000000000"


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line("markers", "integration: Integration tests (real Axios access)")
    config.addinivalue_line("markers", "slow: Slow running tests")


@pytest.fixture
def client_config() -> ClientConfig:
    """A configuration that never touches the environment."""
    return ClientConfig(
        rc4_key=TEST_RC4_KEY,
        vendor_token=TEST_VENDOR_TOKEN,
        base_url="https://axios.test/ws",
        timeout=5.0,
    )


@pytest.fixture(autouse=True)
def configured(client_config: ClientConfig) -> Generator[ClientConfig, None, None]:
    """Install the test configuration as the process-wide one for each test."""
    set_config(client_config)
    yield client_config
    reset_config()
    reset_log_config()
