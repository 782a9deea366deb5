from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from azure_blob_transfer import constants
from azure_blob_transfer.common.error_codes import CommonError

AZURE_BLOB_CONTAINER_URL_TEMPLATE = (
    "https://{account_name}.blob.core.windows.net/{container_name}"
)


class CredentialOptions(BaseModel):
    """Which Azure AD credentials are chained ahead of the device code flow.

    Attributes:
        interactive_credential: Try an interactive browser login first.
        redirect_uri: Redirect URL registered for the interactive browser login.
    """

    interactive_credential: bool = False
    redirect_uri: str = Field(default="http://localhost:9090")


class AzureBlobConfig(BaseModel):
    """Connection parameters for a single blob container.

    Attributes:
        client_id: Application (client) id registered in Azure AD.
        tenant_id: Azure AD tenant id.
        storage_account: Storage account name.
        container_name: Blob container name.
        credential_options: Credential chain options.
    """

    client_id: str
    tenant_id: str
    storage_account: str
    container_name: str
    credential_options: CredentialOptions = Field(default_factory=CredentialOptions)

    model_config = ConfigDict(frozen=True)

    @field_validator("client_id", "tenant_id", "storage_account", "container_name")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("value cannot be empty")
        return v.strip()

    @property
    def container_url(self) -> str:
        return AZURE_BLOB_CONTAINER_URL_TEMPLATE.format(
            account_name=self.storage_account, container_name=self.container_name
        )

    @classmethod
    def from_env(cls, overrides: Optional[Dict[str, Any]] = None) -> "AzureBlobConfig":
        """Build a config from environment settings.

        Args:
            overrides: Values that take precedence over the environment. Keys
                whose value is None are ignored.

        Returns:
            AzureBlobConfig: The validated config.

        Raises:
            CommonError: If a required value is missing or invalid.
        """
        values: Dict[str, Any] = {
            "client_id": constants.AZURE_CLIENT_ID,
            "tenant_id": constants.AZURE_TENANT_ID,
            "storage_account": constants.AZURE_STORAGE_ACCOUNT,
            "container_name": constants.AZURE_STORAGE_CONTAINER,
            "interactive_credential": constants.AZURE_INTERACTIVE_CREDENTIAL,
            "redirect_uri": constants.AZURE_INTERACTIVE_REDIRECT_URI,
        }
        for key, value in (overrides or {}).items():
            if value is not None:
                values[key] = value

        try:
            return cls(
                client_id=values["client_id"],
                tenant_id=values["tenant_id"],
                storage_account=values["storage_account"],
                container_name=values["container_name"],
                credential_options=CredentialOptions(
                    interactive_credential=values["interactive_credential"],
                    redirect_uri=values["redirect_uri"],
                ),
            )
        except ValidationError as e:
            fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
            raise CommonError(
                f"{CommonError.CONFIGURATION_ERROR}: "
                f"Missing or invalid settings: {', '.join(fields)}"
            ) from e
