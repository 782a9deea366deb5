"""Download and upload single blobs from Azure Blob Storage with Azure AD sign-in."""

__version__ = "0.1.0"
