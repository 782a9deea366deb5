"""
Error codes for azure-blob-transfer.

This module defines standardized error codes used throughout the package.
Error codes follow the format: AzBlob-{Component}-{HTTP_Code}-{Unique_ID}

Components:
- Client: Azure client and authentication errors
- Common: Configuration and credential parsing errors
- Transfer: Blob download and upload errors
"""

from typing import Dict


class ErrorCode:
    """Error code with component, HTTP code, and description."""

    def __init__(
        self, component: str, http_code: str, unique_id: str, description: str
    ):
        self.code = f"AzBlob-{component}-{http_code}-{unique_id}"
        self.description = description

    def __str__(self) -> str:
        return f"{self.code}: {self.description}"


# Client Errors
CLIENT_ERRORS = {
    "INPUT_VALIDATION_ERROR": ErrorCode(
        "Client", "403", "01", "Input validation failed"
    ),
    "CLIENT_AUTH_ERROR": ErrorCode(
        "Client", "401", "00", "Client authentication failed"
    ),
    "CLIENT_CONFIG_ERROR": ErrorCode(
        "Client", "400", "00", "Client configuration error"
    ),
}

# Common Utility Errors
COMMON_ERRORS = {
    "CREDENTIALS_PARSE_ERROR": ErrorCode(
        "Common", "400", "01", "Credentials parse error"
    ),
    "CONFIGURATION_ERROR": ErrorCode("Common", "500", "01", "Configuration error"),
}

# Transfer Errors
TRANSFER_ERRORS = {
    "BLOB_PROPERTIES_ERROR": ErrorCode(
        "Transfer", "503", "00", "Blob properties error"
    ),
    "BLOB_DOWNLOAD_ERROR": ErrorCode("Transfer", "503", "01", "Blob download error"),
    "BLOB_UPLOAD_ERROR": ErrorCode("Transfer", "500", "00", "Blob upload error"),
    "LOCAL_FILE_ERROR": ErrorCode("Transfer", "500", "01", "Local file error"),
}

# Combined dictionary of all error codes
ERROR_CODES: Dict[str, ErrorCode] = {
    **CLIENT_ERRORS,
    **COMMON_ERRORS,
    **TRANSFER_ERRORS,
}


class AppError(Exception):
    """Base exception for azure-blob-transfer.

    Subclasses expose their error codes as class attributes so that messages
    can be built as ``f"{ClientError.CLIENT_AUTH_ERROR}: {detail}"``.
    """

    pass


class ClientError(AppError):
    """Raised for Azure client construction and authentication failures."""

    INPUT_VALIDATION_ERROR = CLIENT_ERRORS["INPUT_VALIDATION_ERROR"]
    CLIENT_AUTH_ERROR = CLIENT_ERRORS["CLIENT_AUTH_ERROR"]
    CLIENT_CONFIG_ERROR = CLIENT_ERRORS["CLIENT_CONFIG_ERROR"]


class CommonError(AppError):
    """Raised for configuration and credential parsing failures."""

    CREDENTIALS_PARSE_ERROR = COMMON_ERRORS["CREDENTIALS_PARSE_ERROR"]
    CONFIGURATION_ERROR = COMMON_ERRORS["CONFIGURATION_ERROR"]


class TransferError(AppError):
    """Raised when a blob download or upload fails."""

    BLOB_PROPERTIES_ERROR = TRANSFER_ERRORS["BLOB_PROPERTIES_ERROR"]
    BLOB_DOWNLOAD_ERROR = TRANSFER_ERRORS["BLOB_DOWNLOAD_ERROR"]
    BLOB_UPLOAD_ERROR = TRANSFER_ERRORS["BLOB_UPLOAD_ERROR"]
    LOCAL_FILE_ERROR = TRANSFER_ERRORS["LOCAL_FILE_ERROR"]
