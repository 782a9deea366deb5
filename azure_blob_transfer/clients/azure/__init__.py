"""
Azure client module for azure-blob-transfer.

This module provides the pieces needed to sign in to Azure AD and move a
single blob in or out of a Blob Storage container.

The module includes:
- AzureBlobClient (client.py): Container-scoped client for blob download and upload
- AzureAuthProvider (auth.py): Interactive browser and device code credential chain
"""

# Token scope for Azure Storage data plane access
AZURE_STORAGE_SCOPE = "https://storage.azure.com/.default"

# Device code verification page and the short link shown to users instead
AZURE_DEVICE_LOGIN_URL = "https://microsoft.com/devicelogin"
AZURE_DEVICE_LOGIN_SHORT_URL = "https://aka.ms/devicelogin"
