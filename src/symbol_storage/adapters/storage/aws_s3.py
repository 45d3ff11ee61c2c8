"""Storage backed by an AWS S3 bucket.

Credentials are resolved by boto3's default chain (environment variables,
shared credentials file, instance profile). Keys map one-to-one to object
keys in the bucket.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import timezone
from typing import Any

import boto3
from botocore.client import Config
from botocore.exceptions import BotoCoreError, ClientError

from symbol_storage.domain.errors import StorageError
from symbol_storage.domain.storage import StorageItem

logger = logging.getLogger(__name__)

_NOT_FOUND_CODES = frozenset({"404", "NoSuchKey", "NotFound"})


class AwsS3Storage:
    """Key/value storage over a single S3 bucket."""

    def __init__(self, bucket: str, region: str, *, client: Any | None = None) -> None:
        self.bucket = bucket
        self.region = region
        if client is None:
            client = boto3.client(
                "s3",
                region_name=region,
                config=Config(retries={"max_attempts": 5, "mode": "standard"}, signature_version="s3v4"),
            )
        self._client = client
        logger.debug("S3 storage client initialised", extra={"bucket": bucket, "region": region})

    def describe(self) -> str:
        return f"s3://{self.bucket}"

    def exists(self, key: str) -> bool:
        try:
            self._client.head_object(Bucket=self.bucket, Key=key)
        except ClientError as exc:
            if exc.response.get("Error", {}).get("Code") in _NOT_FOUND_CODES:
                return False
            raise StorageError(f"Cannot access {key} in s3://{self.bucket}: {exc}") from exc
        return True

    def read(self, key: str) -> bytes:
        try:
            response = self._client.get_object(Bucket=self.bucket, Key=key)
            return response["Body"].read()
        except (BotoCoreError, ClientError) as exc:
            raise StorageError(f"Cannot read {key} from s3://{self.bucket}: {exc}") from exc

    def write(self, key: str, data: bytes) -> None:
        try:
            self._client.put_object(Bucket=self.bucket, Key=key, Body=data)
        except (BotoCoreError, ClientError) as exc:
            raise StorageError(f"Cannot write {key} to s3://{self.bucket}: {exc}") from exc

    def delete(self, key: str) -> None:
        try:
            self._client.delete_object(Bucket=self.bucket, Key=key)
        except (BotoCoreError, ClientError) as exc:
            raise StorageError(f"Cannot delete {key} from s3://{self.bucket}: {exc}") from exc

    def iter_items(self, prefix: str = "") -> Iterator[StorageItem]:
        paginator = self._client.get_paginator("list_objects_v2")
        try:
            for page in paginator.paginate(Bucket=self.bucket, Prefix=prefix):
                for entry in page.get("Contents", []):
                    yield StorageItem(
                        key=entry["Key"],
                        size=int(entry["Size"]),
                        modified=entry["LastModified"].astimezone(timezone.utc),
                    )
        except (BotoCoreError, ClientError) as exc:
            raise StorageError(f"Cannot list s3://{self.bucket}/{prefix}: {exc}") from exc

    def is_empty(self) -> bool:
        try:
            response = self._client.list_objects_v2(Bucket=self.bucket, MaxKeys=1)
        except (BotoCoreError, ClientError) as exc:
            raise StorageError(f"Cannot list s3://{self.bucket}: {exc}") from exc
        return response.get("KeyCount", 0) == 0


__all__ = ["AwsS3Storage"]
