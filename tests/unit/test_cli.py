"""Unit tests for the azblob command line."""

from unittest.mock import patch

import pytest

from azure_blob_transfer import cli
from azure_blob_transfer.common.error_codes import ClientError, TransferError

CONNECTION_ARGS = [
    "--client-id",
    "client",
    "--tenant-id",
    "tenant",
    "--storage-account",
    "account",
    "--container",
    "assets",
]


@pytest.fixture
def mock_client_cls():
    with patch("azure_blob_transfer.cli.AzureBlobClient") as mock_cls:
        client = mock_cls.from_config.return_value
        client.__enter__.return_value = client
        yield mock_cls


@pytest.fixture
def mock_client(mock_client_cls):
    return mock_client_cls.from_config.return_value


class TestParser:
    def test_download_arguments(self):
        args = cli.build_parser().parse_args(
            CONNECTION_ARGS + ["download", "data/model.bin", "local.bin"]
        )

        assert args.command == "download"
        assert args.asset == "data/model.bin"
        assert args.destination == "local.bin"
        assert args.interactive is None

    def test_upload_arguments(self):
        args = cli.build_parser().parse_args(["--interactive", "upload", "report.csv"])

        assert args.command == "upload"
        assert args.source == "report.csv"
        assert args.blob_path is None
        assert args.interactive is True

    def test_command_required(self):
        with pytest.raises(SystemExit) as exc_info:
            cli.build_parser().parse_args(CONNECTION_ARGS)

        assert exc_info.value.code == 2


class TestMain:
    """Test cases for the CLI entry point."""

    def test_download_defaults_destination_to_basename(
        self, mock_client_cls, mock_client
    ):
        cli.main(CONNECTION_ARGS + ["download", "data/azureblobtest.txt"])

        mock_client.download.assert_called_once_with(
            "data/azureblobtest.txt", "azureblobtest.txt"
        )
        mock_client.__exit__.assert_called_once()

    def test_download_with_destination(self, mock_client):
        cli.main(CONNECTION_ARGS + ["download", "a.txt", "/tmp/b.txt"])

        mock_client.download.assert_called_once_with("a.txt", "/tmp/b.txt")

    def test_upload_defaults_blob_path_to_basename(self, mock_client):
        cli.main(CONNECTION_ARGS + ["upload", "out/report.csv"])

        mock_client.upload.assert_called_once_with("out/report.csv", "report.csv")

    def test_upload_with_blob_path(self, mock_client):
        cli.main(CONNECTION_ARGS + ["upload", "report.csv", "reports/2024.csv"])

        mock_client.upload.assert_called_once_with("report.csv", "reports/2024.csv")

    def test_config_built_from_arguments(self, mock_client_cls, mock_client):
        cli.main(CONNECTION_ARGS + ["--interactive", "download", "a.txt"])

        config = mock_client_cls.from_config.call_args.args[0]
        assert config.client_id == "client"
        assert config.tenant_id == "tenant"
        assert config.storage_account == "account"
        assert config.container_name == "assets"
        assert config.credential_options.interactive_credential is True

    def test_missing_configuration_exits(self, mock_client_cls):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["download", "a.txt"])

        assert exc_info.value.code == 1
        mock_client_cls.from_config.assert_not_called()

    def test_transfer_error_exits(self, mock_client):
        mock_client.download.side_effect = TransferError(
            f"{TransferError.BLOB_PROPERTIES_ERROR}: BlobNotFound"
        )

        with pytest.raises(SystemExit) as exc_info:
            cli.main(CONNECTION_ARGS + ["download", "a.txt"])

        assert exc_info.value.code == 1
        mock_client.__exit__.assert_called_once()

    def test_auth_error_exits(self, mock_client):
        mock_client.upload.side_effect = ClientError(
            f"{ClientError.CLIENT_AUTH_ERROR}: device code expired"
        )

        with pytest.raises(SystemExit) as exc_info:
            cli.main(CONNECTION_ARGS + ["upload", "a.txt"])

        assert exc_info.value.code == 1

    def test_unexpected_error_exits(self, mock_client):
        mock_client.download.side_effect = RuntimeError("boom")

        with pytest.raises(SystemExit) as exc_info:
            cli.main(CONNECTION_ARGS + ["download", "a.txt"])

        assert exc_info.value.code == 1

    def test_unknown_log_level(self, mock_client_cls):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(CONNECTION_ARGS + ["--log-level", "chatty", "download", "a.txt"])

        assert exc_info.value.code == 2
        mock_client_cls.from_config.assert_not_called()

    def test_log_level_applied(self, mock_client):
        with patch("azure_blob_transfer.cli.set_log_level") as mock_set_level:
            cli.main(CONNECTION_ARGS + ["--log-level", "debug", "download", "a.txt"])

        mock_set_level.assert_called_once_with("debug")

    def test_log_level_defaults_to_environment(self, mock_client):
        with patch("azure_blob_transfer.cli.set_log_level") as mock_set_level:
            cli.main(CONNECTION_ARGS + ["download", "a.txt"])

        mock_set_level.assert_not_called()


def test_module_entry_point_uses_cli_main():
    from azure_blob_transfer import __main__

    assert __main__.main is cli.main
