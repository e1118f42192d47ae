"""S3 storage client for release archives.

Provides retrieval of previous-release artifacts from the release bucket.
"""

from pathlib import Path

import boto3
from botocore.config import Config
from botocore.exceptions import ClientError

from .config import get_settings
from .logging import get_logger

logger = get_logger(__name__)


class StorageClient:
    """S3 client for the release archive bucket.

    Talks to AWS S3 by default; set an endpoint to use MinIO or another
    S3-compatible store.
    """

    def __init__(self, bucket: str | None = None):
        settings = get_settings()
        self._client = boto3.client(
            "s3",
            endpoint_url=settings.s3_endpoint,
            aws_access_key_id=settings.s3_access_key,
            aws_secret_access_key=settings.s3_secret_key,
            region_name=settings.s3_region,
            config=Config(signature_version="s3v4"),
        )
        self._bucket = bucket or settings.s3_bucket

    @property
    def bucket(self) -> str:
        return self._bucket

    def fetch(self, key: str, destination: str | Path) -> Path:
        """Download an object to a local file.

        Args:
            key: S3 key (path within bucket)
            destination: Local file path to write to

        Returns:
            Path of the downloaded file

        Raises:
            ClientError: If the object does not exist or cannot be read
        """
        destination = Path(destination)
        logger.info(f"Downloading s3://{self._bucket}/{key} to {destination}")
        try:
            self._client.download_file(self._bucket, key, str(destination))
        except ClientError as e:
            logger.error(
                f"Unable to retrieve s3://{self._bucket}/{key}",
                extra={"bucket": self._bucket, "key": key, "error": str(e)},
            )
            raise
        return destination


# Singleton instance
_storage_client: StorageClient | None = None


def get_storage() -> StorageClient:
    """Get the storage client singleton."""
    global _storage_client
    if _storage_client is None:
        _storage_client = StorageClient()
    return _storage_client
