"""S3 backend implementation for container management.

Works against Amazon S3 or any S3-compatible service through a ready
``minio.Minio`` client. Containers are buckets.
"""

from __future__ import annotations

import builtins
import logging

from minio import Minio
from minio.error import MinioException, S3Error
from urllib3.exceptions import HTTPError

from cloudstab.core.storage.container import Container, ContainerBackend
from cloudstab.core.storage.errors import ErrorTranslator

logger = logging.getLogger(__name__)

S3_SECURITY_CODES = frozenset(
    {
        "InvalidAccessKeyId",
        "InvalidSecurity",
        "SignatureDoesNotMatch",
        "AccessDenied",
        "InvalidToken",
        "ExpiredToken",
    }
)

S3_NOT_FOUND_CODES = frozenset({"NoSuchBucket"})


def _s3_error_code(error: BaseException) -> str | None:
    # Only S3Error carries a service code; transport and server errors do not.
    return error.code if isinstance(error, S3Error) else None


class S3Backend(ContainerBackend):
    """S3 implementation of the container backend."""

    error_translator = ErrorTranslator(
        native_errors=(MinioException, HTTPError),
        security_codes=S3_SECURITY_CODES,
        not_found_codes=S3_NOT_FOUND_CODES,
        code_of=_s3_error_code,
    )

    def __init__(self, client: Minio):
        """Initialize S3 backend.

        Args:
            client: Configured MinIO/S3 client
        """
        self._client = client

    def list(self) -> builtins.list[Container]:
        return [Container(bucket.name, bucket) for bucket in self._client.list_buckets()]

    def get(self, name: str) -> Container | None:
        # Legacy buckets may carry uppercase names.
        wanted = name.lower()
        for bucket in self._client.list_buckets():
            if bucket.name.lower() == wanted:
                return Container(bucket.name, bucket)
        return None

    def create(self, name: str) -> Container:
        if not self._client.bucket_exists(bucket_name=name):
            try:
                self._client.make_bucket(bucket_name=name)
                logger.info(f"Created bucket: {name}")
            except S3Error as e:
                if e.code != "BucketAlreadyOwnedByYou":
                    raise

        container = self.get(name)
        if container is None:
            # Freshly created buckets can lag in listings.
            container = Container(name)
        return container

    def delete(self, name: str) -> None:
        if not self._client.bucket_exists(bucket_name=name):
            return
        try:
            self._client.remove_bucket(bucket_name=name)
            logger.info(f"Removed bucket: {name}")
        except S3Error as e:
            if e.code != "NoSuchBucket":
                raise
