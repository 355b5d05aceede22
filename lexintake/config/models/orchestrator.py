"""Orchestrator configuration models."""

from pydantic import BaseModel, Field


class OrchestratorSettings(BaseModel):
    """Process-level switches for the intake orchestrator.

    None of these change what a result contains; results stay a pure
    function of mode and payload.
    """

    assert_prompt_coverage: bool = Field(
        default=True,
        description="Fail startup if a prompt library misses an askable field",
    )
    log_evaluations: bool = Field(
        default=False,
        description="Emit a debug event for every orchestrate() call",
    )
