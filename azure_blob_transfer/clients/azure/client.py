"""
Azure Blob client implementation for azure-blob-transfer.

This module provides the AzureBlobClient class, a container-scoped client that
signs in through Azure AD on first use and transfers single blobs to and from
local files while reporting progress on the console.

Example:
    >>> from azure_blob_transfer.clients.azure.client import AzureBlobClient
    >>>
    >>> client = AzureBlobClient.default(
    ...     client_id="your-client-id",
    ...     tenant_id="your-tenant-id",
    ...     container_name="assets",
    ...     storage_account="youraccount",
    ... )
    >>>
    >>> # The first transfer runs the device code sign-in flow
    >>> client.download("azureblobtest.txt", "azureblobtest.txt")
    >>> client.upload("report.csv", "reports/report.csv")
    >>> client.close()
"""

import os
from typing import BinaryIO, Optional, Union

from azure.core.credentials import TokenCredential
from azure.core.exceptions import AzureError, ClientAuthenticationError
from azure.storage.blob import ContainerClient

from azure_blob_transfer.clients import ClientInterface
from azure_blob_transfer.clients.azure.auth import AzureAuthProvider
from azure_blob_transfer.common.error_codes import ClientError, TransferError
from azure_blob_transfer.common.progress import TransferProgress
from azure_blob_transfer.dto.config import AzureBlobConfig, CredentialOptions
from azure_blob_transfer.observability.logger_adaptor import get_logger

logger = get_logger(__name__)

UploadSource = Union[str, os.PathLike, BinaryIO]


class AzureBlobClient(ClientInterface):
    """
    Container-scoped Azure Blob Storage client.

    The credential and container client are created lazily by ``load()`` and
    cached, so the sign-in flow runs at most once per client instance.

    Attributes:
        config (AzureBlobConfig): Connection parameters and credential options
        auth_provider (AzureAuthProvider): Builds the credential chain
        credential (Optional[TokenCredential]): Credential in use once loaded
        show_progress (bool): Render progress bars on stdout
    """

    def __init__(
        self,
        config: AzureBlobConfig,
        auth_provider: Optional[AzureAuthProvider] = None,
        show_progress: bool = True,
    ):
        self.config = config
        self.auth_provider = auth_provider or AzureAuthProvider()
        self.credential: Optional[TokenCredential] = None
        self.show_progress = show_progress
        self._container_client: Optional[ContainerClient] = None

    @classmethod
    def default(
        cls,
        client_id: str,
        tenant_id: str,
        container_name: str,
        storage_account: str,
        **kwargs,
    ) -> "AzureBlobClient":
        """Create a client that signs in with the device code flow only."""
        config = AzureBlobConfig(
            client_id=client_id,
            tenant_id=tenant_id,
            container_name=container_name,
            storage_account=storage_account,
            credential_options=CredentialOptions(interactive_credential=False),
        )
        return cls(config, **kwargs)

    @classmethod
    def interactive(
        cls,
        client_id: str,
        tenant_id: str,
        container_name: str,
        storage_account: str,
        **kwargs,
    ) -> "AzureBlobClient":
        """Create a client that tries a browser login before the device code flow."""
        config = AzureBlobConfig(
            client_id=client_id,
            tenant_id=tenant_id,
            container_name=container_name,
            storage_account=storage_account,
            credential_options=CredentialOptions(interactive_credential=True),
        )
        return cls(config, **kwargs)

    @classmethod
    def from_config(cls, config: AzureBlobConfig, **kwargs) -> "AzureBlobClient":
        return cls(config, **kwargs)

    @property
    def client_id(self) -> str:
        return self.config.client_id

    @property
    def tenant_id(self) -> str:
        return self.config.tenant_id

    @property
    def storage_account(self) -> str:
        return self.config.storage_account

    @property
    def container_name(self) -> str:
        return self.config.container_name

    @property
    def credential_options(self) -> CredentialOptions:
        return self.config.credential_options

    @property
    def is_loaded(self) -> bool:
        return self._container_client is not None

    def init_credential(
        self, credential_options: Optional[CredentialOptions] = None
    ) -> TokenCredential:
        """
        Build the credential chain for this client.

        Args:
            credential_options (Optional[CredentialOptions]): Overrides the
                options held in the config.

        Returns:
            TokenCredential: Chained interactive/device code credential.
        """
        config = self.config
        if credential_options is not None:
            config = config.model_copy(update={"credential_options": credential_options})
        return self.auth_provider.create_credential(config)

    def init_container_client(self, credential: TokenCredential) -> ContainerClient:
        """
        Build a container client for the configured storage account.

        Args:
            credential (TokenCredential): Credential used to authorize requests.

        Returns:
            ContainerClient: Client scoped to the configured container.

        Raises:
            ClientError: If the container URL is rejected by the SDK.
        """
        try:
            return ContainerClient.from_container_url(
                self.config.container_url, credential=credential
            )
        except ValueError as e:
            logger.error(f"Invalid container URL {self.config.container_url}: {str(e)}")
            raise ClientError(f"{ClientError.CLIENT_CONFIG_ERROR}: {str(e)}")

    def load(self) -> ContainerClient:
        """
        Create and cache the credential and container client if not done yet.

        Returns:
            ContainerClient: The cached container client.
        """
        if self._container_client is None:
            logger.info(
                f"Connecting to container {self.container_name} "
                f"in storage account {self.storage_account}"
            )
            credential = self.init_credential(self.credential_options)
            try:
                client = self.init_container_client(credential)
            except ClientError:
                self._close_credential(credential)
                raise
            self.credential = credential
            self._container_client = client
        return self._container_client

    def close(self) -> None:
        """Close the cached container client and credential."""
        if self._container_client is not None:
            try:
                self._container_client.close()
            except Exception as e:
                logger.warning(f"Error closing container client: {str(e)}")
            self._container_client = None

        if self.credential is not None:
            self._close_credential(self.credential)
            self.credential = None

    def _close_credential(self, credential: TokenCredential) -> None:
        close = getattr(credential, "close", None)
        if close is not None:
            try:
                close()
            except Exception as e:
                logger.warning(f"Error closing credential: {str(e)}")

    def download(self, asset: str, destination: Union[str, os.PathLike]) -> int:
        """
        Download a blob to a local file.

        If the client is not yet authenticated, the sign-in flow runs first.

        Args:
            asset (str): Name of the blob within the container.
            destination: Local file path; created or truncated, and removed
                again if the transfer fails.

        Returns:
            int: Number of bytes in the downloaded blob.

        Raises:
            ClientError: If authentication fails.
            TransferError: If the blob cannot be read or the file cannot be written.
        """
        container = self.load()
        blob = container.get_blob_client(asset)

        try:
            size = blob.get_blob_properties().size
        except ClientAuthenticationError as e:
            logger.error(f"Authentication failed reading {asset}: {str(e)}")
            raise ClientError(f"{ClientError.CLIENT_AUTH_ERROR}: {str(e)}")
        except AzureError as e:
            logger.error(f"Failed to get properties for blob {asset}: {str(e)}")
            raise TransferError(f"{TransferError.BLOB_PROPERTIES_ERROR}: {str(e)}")

        logger.info(f"Downloading {asset} ({size} bytes) to {os.fspath(destination)}")

        try:
            with open(destination, "wb") as f:
                f.truncate(size)
                with self._progress(size, f"Downloading {asset}") as progress:
                    blob.download_blob(progress_hook=progress).readinto(f)
                    self._report(progress)
        except ClientAuthenticationError as e:
            logger.error(f"Authentication failed downloading {asset}: {str(e)}")
            self._remove_partial(destination)
            raise ClientError(f"{ClientError.CLIENT_AUTH_ERROR}: {str(e)}")
        except AzureError as e:
            logger.error(f"Failed to download blob {asset}: {str(e)}")
            self._remove_partial(destination)
            raise TransferError(f"{TransferError.BLOB_DOWNLOAD_ERROR}: {str(e)}")
        except OSError as e:
            logger.error(f"Failed to write {os.fspath(destination)}: {str(e)}")
            raise TransferError(f"{TransferError.LOCAL_FILE_ERROR}: {str(e)}")

        return size

    def _remove_partial(self, destination: Union[str, os.PathLike]) -> None:
        try:
            os.remove(destination)
        except OSError as e:
            logger.warning(
                f"Could not remove partial file {os.fspath(destination)}: {str(e)}"
            )

    def upload(self, source: Optional[UploadSource], blob_path: str) -> int:
        """
        Upload a local file as a block blob, overwriting any existing blob.

        If the client is not yet authenticated, the sign-in flow runs first.

        Args:
            source: Local file path or a binary file object opened for reading.
            blob_path (str): Destination blob name within the container.

        Returns:
            int: Number of bytes uploaded.

        Raises:
            ClientError: If source is None or authentication fails.
            TransferError: If the file cannot be read or the upload fails.
        """
        if source is None:
            raise ClientError(f"{ClientError.INPUT_VALIDATION_ERROR}: file cannot be None")

        container = self.load()
        blob = container.get_blob_client(blob_path)

        try:
            if isinstance(source, (str, os.PathLike)):
                with open(source, "rb") as f:
                    return self._upload_file(blob, f, blob_path)
            return self._upload_file(blob, source, blob_path)
        except ClientAuthenticationError as e:
            logger.error(f"Authentication failed uploading {blob_path}: {str(e)}")
            raise ClientError(f"{ClientError.CLIENT_AUTH_ERROR}: {str(e)}")
        except AzureError as e:
            logger.error(f"Failed to upload blob {blob_path}: {str(e)}")
            raise TransferError(f"{TransferError.BLOB_UPLOAD_ERROR}: {str(e)}")
        except OSError as e:
            logger.error(f"Failed to read upload source for {blob_path}: {str(e)}")
            raise TransferError(f"{TransferError.LOCAL_FILE_ERROR}: {str(e)}")

    def _upload_file(self, blob, f: BinaryIO, blob_path: str) -> int:
        size = os.fstat(f.fileno()).st_size
        # The whole file is sent, whatever the caller already read.
        f.seek(0)
        logger.info(f"Uploading {size} bytes to {blob_path}")

        with self._progress(size, f"Uploading to {blob_path}") as progress:
            blob.upload_blob(f, length=size, overwrite=True, progress_hook=progress)
            self._report(progress)
        return size

    def _progress(self, size: Optional[int], description: str) -> TransferProgress:
        return TransferProgress(size, description, disable=not self.show_progress)

    def _report(self, progress: TransferProgress) -> None:
        line = progress.finish()
        if line:
            print(line, flush=True)

    def __enter__(self) -> "AzureBlobClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
