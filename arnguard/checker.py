"""Decision layer that checks requests against resources and audits the result."""

from __future__ import annotations

from typing import Mapping, Sequence

from .audit import AuditLogger
from .config import Settings
from .exceptions import BucketMismatch, InvalidResource, ResourceParseError
from .resource import Resource, parse_resource
from .types import MatchDecision
from .wildcard import GlobMatcher, default_matcher


class ResourceChecker:
    """Checks targets against resources, failing closed on any error."""

    def __init__(self, settings: Settings | None = None, *, matcher: GlobMatcher | None = None) -> None:
        self.settings = settings or Settings()
        self.registry = self.settings.registry()
        self.matcher = matcher or default_matcher
        self.audit = AuditLogger(self.settings.logging, self.settings.version)

    def _resolve(self, resource: Resource | str) -> Resource:
        if isinstance(resource, str):
            resource = parse_resource(resource)
        resource.validate()
        return resource

    def check(
        self,
        resource: Resource | str,
        target: str,
        condition_values: Mapping[str, Sequence[str]] | None = None,
    ) -> MatchDecision:
        try:
            resolved = self._resolve(resource)
        except (ResourceParseError, InvalidResource):
            decision = MatchDecision(allowed=False, reason="InvalidResource", resource=str(resource), target=target)
        else:
            allowed = resolved.match(
                target,
                condition_values,
                registry=self.registry,
                matcher=self.matcher,
            )
            decision = MatchDecision(
                allowed=allowed,
                reason="Matched" if allowed else "NotMatched",
                resource=str(resolved),
                target=target,
            )
        self.audit.log(action="match", decision=decision)
        return decision

    def check_bucket(self, resource: Resource | str, bucket_name: str) -> MatchDecision:
        reason = "Matched"
        try:
            self._resolve(resource).validate_bucket(bucket_name, matcher=self.matcher)
        except (ResourceParseError, InvalidResource):
            reason = "InvalidResource"
        except BucketMismatch:
            reason = "BucketMismatch"
        decision = MatchDecision(
            allowed=reason == "Matched",
            reason=reason,
            resource=str(resource),
            target=bucket_name,
        )
        self.audit.log(action="bucket", decision=decision)
        return decision
