"""Test factories for creating test data."""

from tests.factories.payloads import IntakePayloadFactory

__all__ = [
    "IntakePayloadFactory",
]
