"""Global test configuration and fixtures."""

import pytest

from azure_blob_transfer import constants
from azure_blob_transfer.dto.config import AzureBlobConfig


@pytest.fixture(autouse=True)
def clear_environment_settings(monkeypatch):
    """Keep a developer's .env or shell settings out of the tests."""
    monkeypatch.setattr(constants, "AZURE_CLIENT_ID", "")
    monkeypatch.setattr(constants, "AZURE_TENANT_ID", "")
    monkeypatch.setattr(constants, "AZURE_STORAGE_ACCOUNT", "")
    monkeypatch.setattr(constants, "AZURE_STORAGE_CONTAINER", "")
    monkeypatch.setattr(constants, "AZURE_INTERACTIVE_CREDENTIAL", False)
    monkeypatch.setattr(
        constants, "AZURE_INTERACTIVE_REDIRECT_URI", "http://localhost:9090"
    )


@pytest.fixture
def blob_config():
    """Config for a device-code-only client."""
    return AzureBlobConfig(
        client_id="test-client-id",
        tenant_id="test-tenant-id",
        storage_account="testaccount",
        container_name="assets",
    )
