import argparse
import os
import sys
from typing import List, Optional

from azure_blob_transfer import __version__
from azure_blob_transfer.clients.azure.client import AzureBlobClient
from azure_blob_transfer.common.error_codes import AppError
from azure_blob_transfer.dto.config import AzureBlobConfig
from azure_blob_transfer.observability.logger_adaptor import get_logger, set_log_level

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="azblob",
        description="Download or upload a single blob using Azure AD sign-in",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--client-id", help="Azure AD application (client) id [AZURE_CLIENT_ID]"
    )
    parser.add_argument("--tenant-id", help="Azure AD tenant id [AZURE_TENANT_ID]")
    parser.add_argument(
        "--storage-account", help="Storage account name [AZURE_STORAGE_ACCOUNT]"
    )
    parser.add_argument(
        "--container", help="Blob container name [AZURE_STORAGE_CONTAINER]"
    )
    parser.add_argument(
        "--interactive",
        action="store_true",
        default=None,
        help="Try browser login before the device code flow "
        "[AZURE_INTERACTIVE_CREDENTIAL]",
    )
    parser.add_argument(
        "--log-level",
        help="Log level for stderr output [LOG_LEVEL]",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    download = subparsers.add_parser("download", help="Download a blob to a file")
    download.add_argument("asset", help="Blob name within the container")
    download.add_argument(
        "destination",
        nargs="?",
        help="Local file path (defaults to the blob's base name)",
    )

    upload = subparsers.add_parser("upload", help="Upload a file as a block blob")
    upload.add_argument("source", help="Local file to upload")
    upload.add_argument(
        "blob_path",
        nargs="?",
        help="Destination blob name (defaults to the file's base name)",
    )

    return parser


def build_client(args: argparse.Namespace) -> AzureBlobClient:
    config = AzureBlobConfig.from_env(
        {
            "client_id": args.client_id,
            "tenant_id": args.tenant_id,
            "storage_account": args.storage_account,
            "container_name": args.container,
            "interactive_credential": args.interactive,
        }
    )
    return AzureBlobClient.from_config(config)


def run(args: argparse.Namespace) -> None:
    with build_client(args) as client:
        if args.command == "download":
            destination = args.destination or os.path.basename(args.asset)
            client.download(args.asset, destination)
            logger.info(f"Downloaded {args.asset} to {destination}")
        elif args.command == "upload":
            blob_path = args.blob_path or os.path.basename(args.source)
            client.upload(args.source, blob_path)
            logger.info(f"Uploaded {args.source} to {blob_path}")


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.log_level is not None:
        try:
            set_log_level(args.log_level)
        except ValueError:
            parser.error(f"unknown log level: {args.log_level}")

    try:
        run(args)
    except AppError as e:
        logger.error(str(e))
        sys.exit(1)
    except Exception as e:
        logger.exception(f"Unexpected error: {str(e)}")
        sys.exit(1)


if __name__ == "__main__":
    main()
