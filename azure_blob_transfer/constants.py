import os

from dotenv import load_dotenv

load_dotenv(dotenv_path=".env")

TRUTHY_VALUES = ("true", "1", "yes", "on")


def get_bool_env(name: str, default: bool = False) -> bool:
    """Read a boolean flag; any of TRUTHY_VALUES (case-insensitive) is true."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in TRUTHY_VALUES


# Azure Identity Constants
AZURE_CLIENT_ID = os.getenv("AZURE_CLIENT_ID", "")
AZURE_TENANT_ID = os.getenv("AZURE_TENANT_ID", "")
AZURE_INTERACTIVE_CREDENTIAL = get_bool_env("AZURE_INTERACTIVE_CREDENTIAL")
AZURE_INTERACTIVE_REDIRECT_URI = os.getenv(
    "AZURE_INTERACTIVE_REDIRECT_URI", "http://localhost:9090"
)

# Azure Storage Constants
AZURE_STORAGE_ACCOUNT = os.getenv("AZURE_STORAGE_ACCOUNT", "")
AZURE_STORAGE_CONTAINER = os.getenv("AZURE_STORAGE_CONTAINER", "")

# Logger Constants
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
