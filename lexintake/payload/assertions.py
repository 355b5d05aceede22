"""Assertion envelope for stored payload values.

Chat and form writes may store a value wrapped with provenance metadata:
who asserted it, how it was captured and what evidence backs it. Every
reader goes through `unwrap` so raw and wrapped values are interchangeable.
"""

from collections.abc import Mapping
from datetime import UTC, datetime
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class AssertionSourceType(str, Enum):
    """How an assertion was captured."""

    CHAT = "chat"
    UPLOAD = "upload"
    MANUAL = "manual"


class EvidenceSupportLevel(str, Enum):
    """Documentary evidence backing an assertion."""

    NONE = "none"
    PARTIAL = "partial"
    ATTACHED = "attached"


class Assertion(BaseModel):
    """A client-asserted value with provenance.

    The intake records what the client says; it never asserts facts itself,
    so `asserted_by` is always "client".
    """

    model_config = ConfigDict(frozen=True)

    assertion_value: Any = Field(..., description="The value the client asserted")
    asserted_by: Literal["client"] = Field(default="client")
    source_type: AssertionSourceType = Field(default=AssertionSourceType.CHAT)
    transcript_reference: str | None = Field(
        default=None, description="Transcript message id, if captured in chat"
    )
    evidence_support_level: EvidenceSupportLevel = Field(default=EvidenceSupportLevel.NONE)
    contradiction_flag: bool = Field(
        default=False, description="Contradicts another assertion in the record"
    )
    recorded_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


def is_assertion(value: Any) -> bool:
    """True if `value` is a stored assertion envelope."""
    return (
        isinstance(value, Mapping)
        and "assertion_value" in value
        and value.get("asserted_by") == "client"
    )


def _strip_envelope(value: Any) -> Any:
    while is_assertion(value):
        value = value["assertion_value"]
    return value


def unwrap(value: Any) -> Any:
    """Return the raw value behind an assertion envelope.

    Mapping values (structured fields such as addresses) have their direct
    sub-values unwrapped as well; anything nested deeper is returned as
    stored, as are lists.
    """
    value = _strip_envelope(value)
    if isinstance(value, Mapping):
        return {key: _strip_envelope(sub_value) for key, sub_value in value.items()}
    return value


def wrap_assertion(
    value: Any,
    source_type: AssertionSourceType = AssertionSourceType.CHAT,
    transcript_reference: str | None = None,
    evidence_support_level: EvidenceSupportLevel = EvidenceSupportLevel.NONE,
    contradiction_flag: bool = False,
) -> dict[str, Any]:
    """Wrap a raw value in a JSON-ready assertion envelope."""
    assertion = Assertion(
        assertion_value=value,
        source_type=source_type,
        transcript_reference=transcript_reference,
        evidence_support_level=evidence_support_level,
        contradiction_flag=contradiction_flag,
    )
    return assertion.model_dump(mode="json")


def unwrap_payload(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Return a new dict with every top-level value unwrapped."""
    return {key: unwrap(value) for key, value in payload.items()}
