"""Storage adapter - local filesystem and AWS S3 backends, scratch lifecycle.

Contents:
    * :mod:`.filesystem` - Directory-tree storage
    * :mod:`.aws_s3` - S3 bucket storage (boto3)
    * :mod:`.factory` - Destination to storage construction
    * :mod:`.scratch` - Temporary storage acquisition and guaranteed release
"""

from __future__ import annotations

from .aws_s3 import AwsS3Storage
from .factory import open_storage
from .filesystem import FileSystemStorage
from .scratch import acquire, release, scratch_storage

__all__ = [
    "AwsS3Storage",
    "FileSystemStorage",
    "acquire",
    "open_storage",
    "release",
    "scratch_storage",
]
