"""arnguard package for matching S3-style policy resource patterns."""

from .checker import ResourceChecker
from .config import Settings, load_settings
from .exceptions import ArnGuardException, BadConfig, BucketMismatch, InvalidResource, ResourceParseError
from .resource import RESOURCE_ARN_PREFIX, Resource, new_resource, parse_resource

__all__ = [
    "RESOURCE_ARN_PREFIX",
    "Resource",
    "new_resource",
    "parse_resource",
    "ResourceChecker",
    "Settings",
    "load_settings",
    "ArnGuardException",
    "BadConfig",
    "BucketMismatch",
    "InvalidResource",
    "ResourceParseError",
]
