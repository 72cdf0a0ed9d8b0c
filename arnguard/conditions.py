"""Policy condition keys usable as ``${...}`` variables in resource patterns."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Protocol, Sequence

_NAMESPACES = ("aws:", "jwt:", "ldap:", "sts:", "svc:", "s3:")


@dataclass(frozen=True, slots=True)
class ConditionKey:
    """A condition key such as ``aws:username``."""

    name: str

    @property
    def var_name(self) -> str:
        return "${" + self.name + "}"

    @property
    def short_name(self) -> str:
        for namespace in _NAMESPACES:
            if self.name.startswith(namespace):
                return self.name[len(namespace):]
        return self.name


class ConditionKeyRegistry(Protocol):
    """Ordered source of substitutable condition keys."""

    def keys(self) -> Sequence[ConditionKey]:
        ...


class StaticKeyRegistry:
    """Registry backed by a fixed, ordered list of keys."""

    def __init__(self, keys: Iterable[ConditionKey | str]) -> None:
        self._keys = tuple(key if isinstance(key, ConditionKey) else ConditionKey(key) for key in keys)

    def keys(self) -> Sequence[ConditionKey]:
        return self._keys

    def extend(self, names: Iterable[str]) -> "StaticKeyRegistry":
        known = {key.name for key in self._keys}
        extra: list[str] = []
        for name in names:
            if name not in known:
                known.add(name)
                extra.append(name)
        return StaticKeyRegistry([*self._keys, *extra])

    def __len__(self) -> int:
        return len(self._keys)


COMMON_KEYS = StaticKeyRegistry(
    [
        "aws:Referer",
        "aws:SourceIp",
        "aws:UserAgent",
        "aws:SecureTransport",
        "aws:CurrentTime",
        "aws:EpochTime",
        "aws:principaltype",
        "aws:userid",
        "aws:username",
        "aws:groups",
        "s3:signatureversion",
        "s3:signatureAge",
        "s3:authType",
        "ldap:user",
        "ldap:username",
        "ldap:groups",
        "sts:DurationSeconds",
        "svc:DurationSeconds",
        # OpenID claims
        "jwt:sub",
        "jwt:iss",
        "jwt:aud",
        "jwt:jti",
        "jwt:upn",
        "jwt:name",
        "jwt:groups",
        "jwt:given_name",
        "jwt:family_name",
        "jwt:middle_name",
        "jwt:nickname",
        "jwt:preferred_username",
        "jwt:profile",
        "jwt:picture",
        "jwt:website",
        "jwt:email",
        "jwt:gender",
        "jwt:birthdate",
        "jwt:phone_number",
        "jwt:address",
        "jwt:scope",
        "jwt:client_id",
    ]
)


def substitute(
    pattern: str,
    condition_values: Mapping[str, Sequence[str]] | None,
    registry: ConditionKeyRegistry = COMMON_KEYS,
) -> str:
    """Replace ``${key}`` variables in ``pattern`` with request values.

    Values are looked up under the full key name and then under its short
    name (``aws:username`` then ``username``). Only the first value is used
    and empty values are never substituted.
    """

    if not condition_values:
        return pattern
    for key in registry.keys():
        values = condition_values.get(key.name)
        if values is None:
            values = condition_values.get(key.short_name)
        if values and values[0] != "":
            pattern = pattern.replace(key.var_name, values[0])
    return pattern
