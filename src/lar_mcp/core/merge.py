"""
Read-modify-write support for edit tools.

The backend only offers full PUT updates, so edits fetch the current entity
and overlay the caller's fields. Which caller values count as "provided" is
decided per field:

- ``OVERRIDE_IF_PROVIDED``: any value that is not ``None``, empty string included.
- ``OVERRIDE_IF_TRUTHY``: only truthy values; ``0`` and ``""`` keep the current value.

The asymmetry is kept for compatibility with existing clients of the tools.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from lar_mcp.core import backend
from lar_mcp.core.errors import BackendError


class MergePolicy(str, Enum):
    override_if_provided = "override_if_provided"
    override_if_truthy = "override_if_truthy"


class Fallback(str, Enum):
    always = "always"  # copy the current value, null included
    if_present = "if_present"  # copy only a truthy current value, else omit the key


@dataclass(frozen=True)
class FieldRule:
    name: str
    policy: MergePolicy
    fallback: Fallback = Fallback.always


CLIENT_FIELDS: tuple[FieldRule, ...] = (
    FieldRule("name", MergePolicy.override_if_provided),
    FieldRule("contactInformation", MergePolicy.override_if_provided),
    FieldRule("address", MergePolicy.override_if_provided, Fallback.if_present),
    FieldRule("notes", MergePolicy.override_if_provided, Fallback.if_present),
)

# assignedUserId and courtDate need extra work and are merged by the case tool.
CASE_FIELDS: tuple[FieldRule, ...] = (
    FieldRule("title", MergePolicy.override_if_truthy),
    FieldRule("description", MergePolicy.override_if_provided),
    FieldRule("status", MergePolicy.override_if_truthy),
    FieldRule("clientId", MergePolicy.override_if_truthy),
)


def is_provided(policy: MergePolicy, value: Any) -> bool:
    if policy is MergePolicy.override_if_truthy:
        return bool(value)
    return value is not None


def merge_fields(
    rules: tuple[FieldRule, ...],
    current: Mapping[str, Any],
    updates: Mapping[str, Any],
) -> dict[str, Any]:
    merged: dict[str, Any] = {}
    for rule in rules:
        value = updates.get(rule.name)
        if is_provided(rule.policy, value):
            merged[rule.name] = value
            continue

        existing = current.get(rule.name)
        if rule.fallback is Fallback.always or existing:
            merged[rule.name] = existing
    return merged


async def fetch_current(token: str, path: str, error_prefix: str) -> dict[str, Any]:
    """GET step of an edit. A failed read stops the edit before any write."""
    response = await backend.execute(backend.json_request("GET", path, token))
    if not response.ok:
        raise BackendError(
            backend.failure_text(error_prefix, response),
            status=response.status,
            body=response.text,
        )

    current = response.payload
    return current if isinstance(current, dict) else {}
