"""Last-write-wins patch merge applied at the storage boundary."""

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, Field

from lexintake.observability.logging import get_logger

logger = get_logger(__name__)


class PatchMergeResult(BaseModel):
    """Merged payload plus the patch keys that were rejected."""

    merged: dict[str, Any] = Field(default_factory=dict)
    unknown_keys: list[str] = Field(default_factory=list)


def merge_payload_patch(
    base: Mapping[str, Any],
    patch: Mapping[str, Any],
    allowed_keys: Iterable[str],
) -> PatchMergeResult:
    """Merge `patch` into a copy of `base`, key by key.

    Keys outside `allowed_keys` are dropped and reported. Values are written
    as given, so an explicit None clears a stored answer. Neither input is
    modified.
    """
    allowed = set(allowed_keys)
    merged = dict(base)
    unknown_keys: list[str] = []

    for key, value in patch.items():
        if key not in allowed:
            unknown_keys.append(key)
            continue
        merged[key] = value

    if unknown_keys:
        logger.warning("payload_patch_unknown_keys", unknown_keys=unknown_keys)

    return PatchMergeResult(merged=merged, unknown_keys=unknown_keys)
