"""Object-storage references for uploaded supporting documents."""

from urllib.parse import quote

from ..generation.errors import ConfigurationError


def document_url(key: str, bucket: str, region: str) -> str:
    """Public S3 URL of an uploaded document. Slashes in the key are kept as path separators.

    Raises ``ConfigurationError`` when the bucket or region is not set.
    """
    if not (bucket or "").strip() or not (region or "").strip():
        raise ConfigurationError("Document storage is not configured")
    return f"https://{bucket.strip()}.s3.{region.strip()}.amazonaws.com/{quote(key.lstrip('/'), safe='/')}"
