"""Orchestrator models: mode descriptors and evaluation results."""

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from lexintake.exceptions import SchemaDefinitionError
from lexintake.prompts.models import FieldPrompt
from lexintake.schema.enums import IntakeMode
from lexintake.schema.models import SchemaDef
from lexintake.schema.reveals import RevealRule, build_reveal_index, validate_reveal_table
from lexintake.validation.validators import Validator
from lexintake.wire import WireModel


class StepState(str, Enum):
    """Completion state of a schema step."""

    INCOMPLETE = "incomplete"
    COMPLETE = "complete"


class UiStepState(str, Enum):
    """Display state of a UI step."""

    COMPLETE = "complete"
    CURRENT = "current"
    INCOMPLETE = "incomplete"


class FieldValidationError(WireModel):
    """A present value that failed its validator."""

    field: str = Field(..., description="Field key the error is reported against")
    message: str = Field(..., description="Client-facing message")


class StepStatus(WireModel):
    """Status of one schema step, recomputed on every evaluation."""

    key: str
    status: StepState
    missing_fields: list[str] = Field(default_factory=list)
    validation_errors: list[FieldValidationError] = Field(default_factory=list)


class UiStepDef(BaseModel):
    """Static UI grouping of one or more schema steps."""

    model_config = ConfigDict(frozen=True)

    key: str
    label: str
    schema_steps: tuple[str, ...] = Field(..., min_length=1)


class UiStepStatus(WireModel):
    """Display status of a UI step."""

    key: str
    label: str
    status: UiStepState
    schema_steps: list[str]
    completion_percent: int = Field(..., ge=0, le=100)


class ModeGate(BaseModel):
    """Boolean question that must hold a fixed answer for the mode."""

    model_config = ConfigDict(frozen=True)

    section_id: str = Field(..., description="Section holding the gate question")
    field: str = Field(..., description="Boolean gate field key")
    required_value: bool = Field(..., description="Answer this mode requires")
    blocked_reason: str = Field(..., description="Client-facing routing message")
    suggested_mode: IntakeMode | None = Field(
        default=None, description="Mode to route to when the gate is contradicted"
    )
    posture_reason: str | None = Field(
        default=None, description="Pre-submission message; falls back to blocked_reason"
    )


class OrchestratorConfig(BaseModel):
    """Everything the generic orchestrator needs to evaluate one mode."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    mode: IntakeMode
    schema_def: SchemaDef
    reveals: tuple[RevealRule, ...] = ()
    gate: ModeGate | None = None
    ui_steps: tuple[UiStepDef, ...]
    validators: Mapping[str, Validator] = Field(default_factory=dict, validate_default=True)
    repeat_count_fields: Mapping[str, str] = Field(
        default_factory=dict,
        validate_default=True,
        description="Repeatable section id -> declared count field",
    )
    terminal_step: str = "final_review"

    @field_validator("validators", "repeat_count_fields", mode="after")
    @classmethod
    def _freeze_mapping(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))

    @model_validator(mode="after")
    def _check_against_schema(self) -> "OrchestratorConfig":
        section_ids = self.schema_def.section_ids
        fields = self.schema_def.field_index()
        problems: list[str] = []

        build_reveal_index(self.reveals)
        validate_reveal_table(self.schema_def, self.reveals)

        if self.terminal_step not in section_ids:
            problems.append(f"terminal step {self.terminal_step!r} is not a section")
        covered = [step for ui_step in self.ui_steps for step in ui_step.schema_steps]
        for step in covered:
            if step not in section_ids:
                problems.append(f"UI step references unknown section {step!r}")
        for step in section_ids:
            if step not in covered:
                problems.append(f"section {step!r} is not in any UI step")
        for key in self.validators:
            if key not in fields:
                problems.append(f"validator for unknown field {key!r}")
        for section_id, count_field in self.repeat_count_fields.items():
            section = self.schema_def.section(section_id)
            if section is None or not section.repeatable:
                problems.append(f"{section_id!r} is not a repeatable section")
            if count_field not in fields:
                problems.append(f"unknown count field {count_field!r}")
        if self.gate is not None:
            gate_section = self.schema_def.section(self.gate.section_id)
            if gate_section is None or gate_section.field(self.gate.field) is None:
                problems.append(
                    f"gate field {self.gate.section_id}.{self.gate.field} is not declared"
                )

        if problems:
            raise SchemaDefinitionError(
                f"Orchestrator config for {self.mode.value} is invalid: {'; '.join(problems)}"
            )
        return self


class OrchestratorResult(WireModel):
    """Full evaluation of a payload against one mode."""

    intake_mode: IntakeMode
    schema_steps: list[StepStatus]
    current_schema_step: str
    current_step_missing_fields: list[str] = Field(default_factory=list)
    current_step_validation_errors: list[FieldValidationError] = Field(default_factory=list)
    current_ui_step: str
    ui_steps: list[UiStepStatus]
    completed_schema_steps: list[str] = Field(default_factory=list)
    ready_for_review: bool = False
    completion_percent: int = Field(default=0, ge=0, le=100)
    flow_blocked: bool = False
    flow_blocked_reason: str | None = None

    def step(self, key: str) -> StepStatus | None:
        """Return the status of a schema step by key."""
        for status in self.schema_steps:
            if status.key == key:
                return status
        return None


class SidebarStep(WireModel):
    """Navigation entry for the intake sidebar."""

    id: str
    label: str
    is_completed: bool
    is_active: bool


class PostureResult(WireModel):
    """Whether a payload fits the chosen intake mode."""

    valid: bool
    suggested_type: IntakeMode | None = None
    reason: str | None = None


class ChatPromptFields(WireModel):
    """Prompts the chat layer should ask next."""

    step_key: str
    step_label: str
    prompts: list[FieldPrompt] = Field(default_factory=list)
    missing_fields: list[str] = Field(default_factory=list)
    validation_errors: list[FieldValidationError] = Field(default_factory=list)
    flow_blocked: bool = False
    flow_blocked_reason: str | None = None


StepStatusInput = Mapping[str, str | Mapping[str, Any]]
