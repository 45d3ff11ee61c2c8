"""Destination storage descriptor: a local directory or an AWS S3 bucket.

The destination is a sum type resolved once from the global CLI options;
subcommands receive the resolved value instead of checking nullable fields.

Contents:
    * :class:`LocalDestination` - storage rooted at a local directory.
    * :class:`AwsS3Destination` - storage in an S3 bucket.
    * :data:`Destination` - union of the two.
    * :func:`resolve_destination` - choose exactly one destination kind.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TypeAlias

from .errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class LocalDestination:
    """Storage rooted at a local (or mounted network) directory."""

    path: Path

    def describe(self) -> str:
        return str(self.path)


@dataclass(frozen=True, slots=True)
class AwsS3Destination:
    """Storage kept in an S3 bucket; credentials come from the environment."""

    bucket: str
    region: str

    def describe(self) -> str:
        return f"s3://{self.bucket} ({self.region})"


Destination: TypeAlias = LocalDestination | AwsS3Destination


def resolve_destination(
    directory: str | None,
    aws_s3_bucket: str | None,
    aws_s3_region: str | None,
    *,
    default_region: str,
) -> Destination:
    """Resolve the global destination options into exactly one destination.

    Args:
        directory: Value of ``--directory`` or None.
        aws_s3_bucket: Value of ``--aws-s3`` or None.
        aws_s3_region: Value of ``--aws-s3-region`` or None.
        default_region: Region used when a bucket is given without a region.

    Returns:
        The resolved destination.

    Raises:
        ConfigurationError: When neither or both destination kinds are given,
            or when a region is given without a bucket.

    Examples:
        >>> resolve_destination("/srv/symbols", None, None, default_region="eu-west-1").path.name
        'symbols'
        >>> resolve_destination(None, "symbols", None, default_region="eu-west-1")
        AwsS3Destination(bucket='symbols', region='eu-west-1')
        >>> resolve_destination(None, None, None, default_region="eu-west-1")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ConfigurationError: No destination storage specified
    """
    if directory and aws_s3_bucket:
        raise ConfigurationError("Both --directory and --aws-s3 were specified, choose one destination storage")
    if directory:
        if aws_s3_region:
            raise ConfigurationError("--aws-s3-region can only be used together with --aws-s3")
        return LocalDestination(Path(directory))
    if aws_s3_bucket:
        return AwsS3Destination(bucket=aws_s3_bucket, region=aws_s3_region or default_region)
    raise ConfigurationError("No destination storage specified, use --directory or --aws-s3")


__all__ = [
    "AwsS3Destination",
    "Destination",
    "LocalDestination",
    "resolve_destination",
]
