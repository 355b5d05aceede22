"""lexintake: deterministic family-law intake orchestration.

Typical use from a request handler:

    from lexintake.orchestration import is_valid_intake_type, orchestrate

    if not is_valid_intake_type(intake.intake_type):
        raise ValueError(...)
    result = orchestrate(intake.intake_type, intake.payload)
    return result.model_dump(mode="json", by_alias=True)
"""

__version__ = "0.1.0"
