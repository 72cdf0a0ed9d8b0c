"""Resource clause of an S3-style access policy statement.

A resource is the part of an ARN following ``arn:aws:s3:::``, for example
``mybucket/*``. It may contain ``*``/``?`` wildcards and ``${...}`` policy
variables that are substituted at match time.

Example
-------
>>> resource = parse_resource("arn:aws:s3:::mybucket/*")
>>> resource.match_resource("mybucket/a/b")
True
"""

from __future__ import annotations

import json
import posixpath
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from .conditions import COMMON_KEYS, ConditionKeyRegistry, substitute
from .exceptions import BucketMismatch, InvalidResource, ResourceParseError
from .wildcard import GlobMatcher, default_matcher

RESOURCE_ARN_PREFIX = "arn:aws:s3:::"


def _clean_path(path: str) -> str:
    cleaned = posixpath.normpath(path)
    # normpath keeps a leading "//"
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


@dataclass(frozen=True, slots=True)
class Resource:
    """Resource pattern in a policy statement.

    Constructing a ``Resource`` directly does not check the pattern; use
    :func:`parse_resource` for checked construction or call
    :meth:`validate` before relying on the value.
    """

    pattern: str

    def __str__(self) -> str:
        return RESOURCE_ARN_PREFIX + self.pattern

    def is_bucket_pattern(self) -> bool:
        return "/" not in self.pattern or self.pattern == "*"

    def is_object_pattern(self) -> bool:
        return "/" in self.pattern or "*" in self.pattern

    def is_valid(self) -> bool:
        if self.pattern.startswith("/"):
            return False
        return self.pattern != ""

    def validate(self) -> None:
        if not self.is_valid():
            raise InvalidResource(message="invalid resource", details={"resource": self.pattern})

    def match_resource(self, target: str) -> bool:
        """Match ``target`` against the pattern without condition values."""

        return self.match(target, None)

    def match(
        self,
        target: str,
        condition_values: Mapping[str, Sequence[str]] | None = None,
        *,
        registry: ConditionKeyRegistry | None = None,
        matcher: GlobMatcher | None = None,
    ) -> bool:
        """Match ``target`` (``bucket`` or ``bucket/key``) against the pattern.

        Policy variables are substituted from ``condition_values`` first. A
        cleaned target equal to the substituted pattern matches outright;
        otherwise the wildcard matcher decides.
        """

        if registry is None:
            registry = COMMON_KEYS
        if matcher is None:
            matcher = default_matcher
        pattern = substitute(self.pattern, condition_values, registry)
        cleaned = _clean_path(target)
        if cleaned != "." and cleaned == pattern:
            return True
        return matcher.match(pattern, target)

    def validate_bucket(self, bucket_name: str, *, matcher: GlobMatcher | None = None) -> None:
        """Check that ``bucket_name`` is covered by this resource.

        The bucket is covered when the whole pattern matches the bucket name
        (``example*a`` and ``example-east-a``) or when ``bucket_name + "/"``
        can start a string the pattern matches (``example*a`` covers objects
        such as ``example22/2023/a`` in bucket ``example22``).
        """

        self.validate()
        if matcher is None:
            matcher = default_matcher
        if not matcher.match(self.pattern, bucket_name) and not matcher.match_as_pattern_prefix(
            self.pattern, bucket_name + "/"
        ):
            raise BucketMismatch(
                message="bucket name does not match",
                details={"resource": self.pattern, "bucket": bucket_name},
            )

    def to_json(self) -> bytes:
        """Encode as a JSON string holding the full ARN."""

        if not self.is_valid():
            raise InvalidResource(message=f"invalid resource {self.pattern!r}", details={"resource": self.pattern})
        return json.dumps(str(self)).encode("utf-8")

    @classmethod
    def from_json(cls, data: str | bytes) -> "Resource":
        """Decode a JSON string holding a full ARN."""

        try:
            value = json.loads(data)
        except ValueError as exc:
            raise ResourceParseError(message=f"invalid resource JSON: {exc}") from exc
        if not isinstance(value, str):
            raise ResourceParseError(
                message=f"resource must be a JSON string, not {type(value).__name__}",
                details={"value": value},
            )
        return parse_resource(value)

    @classmethod
    def parse(cls, arn: str) -> "Resource":
        return parse_resource(arn)

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            _validate_field,
            json_schema_input_schema=core_schema.str_schema(),
            serialization=core_schema.plain_serializer_function_ser_schema(_serialize_field),
        )


def parse_resource(arn: str) -> Resource:
    """Parse a full ARN string into a :class:`Resource`."""

    if not arn.startswith(RESOURCE_ARN_PREFIX):
        raise ResourceParseError(message=f"invalid resource '{arn}'", details={"resource": arn})
    pattern = arn[len(RESOURCE_ARN_PREFIX):]
    if pattern.startswith("/"):
        raise ResourceParseError(
            message=f"invalid resource '{arn}' - starts with '/' will not match a bucket",
            details={"resource": arn},
        )
    return Resource(pattern)


def new_resource(pattern: str) -> Resource:
    """Create a resource without checking the pattern."""

    return Resource(pattern)


def _validate_field(value: Any) -> Resource:
    if isinstance(value, Resource):
        return value
    if not isinstance(value, str):
        raise ValueError(f"resource must be an ARN string, not {type(value).__name__}")
    try:
        return parse_resource(value)
    except ResourceParseError as exc:
        raise ValueError(exc.message) from exc


def _serialize_field(value: Resource) -> str:
    value.validate()
    return str(value)
