"""
Azure AD authentication provider for azure-blob-transfer.

This module provides the AzureAuthProvider class that builds the credential
chain used to talk to Blob Storage. An interactive browser login is tried
first when enabled; the device code flow is always the last link.

Example:
    >>> from azure_blob_transfer.clients.azure.auth import AzureAuthProvider
    >>> from azure_blob_transfer.dto.config import AzureBlobConfig
    >>>
    >>> config = AzureBlobConfig(
    ...     client_id="your-client-id",
    ...     tenant_id="your-tenant-id",
    ...     storage_account="youraccount",
    ...     container_name="assets",
    ... )
    >>> credential = AzureAuthProvider().create_credential(config)
    >>>
    >>> # The device code prompt points at the short link:
    >>> # To sign in, use a web browser to open the page https://aka.ms/devicelogin
    >>> # and enter the code ABCD1234 to authenticate.
"""

from datetime import datetime
from typing import Callable, List, Optional

from azure.core.credentials import TokenCredential
from azure.core.exceptions import ClientAuthenticationError
from azure.identity import (
    ChainedTokenCredential,
    DeviceCodeCredential,
    InteractiveBrowserCredential,
)

from azure_blob_transfer.clients.azure import (
    AZURE_DEVICE_LOGIN_SHORT_URL,
    AZURE_DEVICE_LOGIN_URL,
    AZURE_STORAGE_SCOPE,
)
from azure_blob_transfer.common.error_codes import CommonError
from azure_blob_transfer.dto.config import AzureBlobConfig
from azure_blob_transfer.observability.logger_adaptor import get_logger

logger = get_logger(__name__)

AUTH_TYPE_INTERACTIVE_BROWSER = "interactive_browser"
AUTH_TYPE_DEVICE_CODE = "device_code"

DEVICE_CODE_MESSAGE_TEMPLATE = (
    "To sign in, use a web browser to open the page {verification_uri} "
    "and enter the code {user_code} to authenticate."
)


def format_device_code_message(
    verification_uri: str, user_code: str, expires_on: Optional[datetime] = None
) -> str:
    """Build the device code sign-in prompt, pointing at the short login link."""
    message = DEVICE_CODE_MESSAGE_TEMPLATE.format(
        verification_uri=verification_uri, user_code=user_code
    )
    return message.replace(AZURE_DEVICE_LOGIN_URL, AZURE_DEVICE_LOGIN_SHORT_URL, 1)


def print_device_code_prompt(
    verification_uri: str, user_code: str, expires_on: Optional[datetime] = None
) -> None:
    print(format_device_code_message(verification_uri, user_code, expires_on), flush=True)


class AzureAuthProvider:
    """
    Azure AD authentication provider for Blob Storage access.

    Supported authentication methods, in chain order:
    - interactive_browser: Browser login redirected to a local port (optional)
    - device_code: Code displayed on the console, entered on another device
    """

    def __init__(
        self,
        prompt_callback: Callable[..., None] = print_device_code_prompt,
    ):
        """
        Initialize the Azure authentication provider.

        Args:
            prompt_callback: Called with (verification_uri, user_code, expires_on)
                when the device code flow needs the user to sign in.
        """
        self.prompt_callback = prompt_callback

    def create_credential(self, config: AzureBlobConfig) -> TokenCredential:
        """
        Create the chained Azure credential for a blob config.

        Args:
            config (AzureBlobConfig): Connection parameters and credential options.

        Returns:
            TokenCredential: A ChainedTokenCredential trying each credential in order.

        Raises:
            CommonError: If a credential cannot be constructed.
            ClientAuthenticationError: If the SDK rejects the credential parameters.
        """
        try:
            credentials: List[TokenCredential] = []

            if config.credential_options.interactive_credential:
                logger.debug(
                    f"Adding interactive browser credential for tenant: {config.tenant_id}"
                )
                credentials.append(self._create_interactive_credential(config))

            logger.debug(f"Adding device code credential for tenant: {config.tenant_id}")
            credentials.append(self._create_device_code_credential(config))

            return ChainedTokenCredential(*credentials)

        except ClientAuthenticationError:
            raise
        except Exception as e:
            logger.error(f"Failed to create Azure credential: {str(e)}")
            raise CommonError(f"{CommonError.CREDENTIALS_PARSE_ERROR}: {str(e)}")

    def _create_interactive_credential(
        self, config: AzureBlobConfig
    ) -> InteractiveBrowserCredential:
        return InteractiveBrowserCredential(
            tenant_id=config.tenant_id,
            client_id=config.client_id,
            redirect_uri=config.credential_options.redirect_uri,
        )

    def _create_device_code_credential(
        self, config: AzureBlobConfig
    ) -> DeviceCodeCredential:
        return DeviceCodeCredential(
            client_id=config.client_id,
            tenant_id=config.tenant_id,
            prompt_callback=self.prompt_callback,
        )

    def validate_credential(self, credential: TokenCredential) -> bool:
        """
        Validate Azure credential by attempting to get a storage token.

        Args:
            credential (TokenCredential): Azure credential to validate.

        Returns:
            bool: True if credential is valid, False otherwise.
        """
        try:
            logger.debug("Validating Azure credential")

            token = credential.get_token(AZURE_STORAGE_SCOPE)

            if token and token.token:
                logger.debug("Azure credential validation successful")
                return True
            else:
                logger.warning("Azure credential validation failed: No token received")
                return False

        except Exception as e:
            logger.error(f"Azure credential validation failed: {str(e)}")
            return False

    def get_supported_auth_types(self) -> list[str]:
        """
        Get list of supported authentication types, in chain order.

        Returns:
            list[str]: List of supported authentication types.
        """
        return [AUTH_TYPE_INTERACTIVE_BROWSER, AUTH_TYPE_DEVICE_CODE]
