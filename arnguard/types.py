"""Shared data structures for arnguard."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class MatchDecision:
    """Result of checking a target against a resource."""

    allowed: bool
    reason: str
    resource: str
    target: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "allowed": self.allowed,
            "reason": self.reason,
            "resource": self.resource,
            "target": self.target,
        }
