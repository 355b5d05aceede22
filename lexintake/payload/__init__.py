"""Payload helpers: assertion envelopes, patch merge, consistency checks."""

from lexintake.payload.assertions import (
    Assertion,
    AssertionSourceType,
    EvidenceSupportLevel,
    is_assertion,
    unwrap,
    unwrap_payload,
    wrap_assertion,
)
from lexintake.payload.consistency import ConsistencyWarning, run_consistency_checks
from lexintake.payload.merge import PatchMergeResult, merge_payload_patch

__all__ = [
    "Assertion",
    "AssertionSourceType",
    "ConsistencyWarning",
    "EvidenceSupportLevel",
    "PatchMergeResult",
    "is_assertion",
    "merge_payload_patch",
    "run_consistency_checks",
    "unwrap",
    "unwrap_payload",
    "wrap_assertion",
]
