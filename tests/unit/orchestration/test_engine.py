"""Tests for the generic step orchestrator, using a small pet-registration schema."""

from typing import Any

import pytest

from lexintake.exceptions import SchemaDefinitionError
from lexintake.orchestration.engine import gate_contradicted, orchestrate
from lexintake.orchestration.models import (
    ModeGate,
    OrchestratorConfig,
    StepState,
    UiStepDef,
    UiStepState,
)
from lexintake.schema.enums import IntakeMode
from lexintake.schema.models import SchemaDef, SectionDef, boolean, date, text
from lexintake.validation.validators import validate_email

SCHEMA = SchemaDef(
    version="test.pets.v1",
    sections=(
        SectionDef(
            id="basics",
            title="BASICS",
            fields=(text("name", True), date("birthday"), text("tag", is_system=True)),
        ),
        SectionDef(id="pets", title="PETS", fields=(boolean("has_pets", True),)),
        SectionDef(
            id="pet_object",
            title="PET DETAILS",
            repeatable=True,
            fields=(text("pet_name", True), text("vet_email")),
        ),
        SectionDef(id="contact", title="CONTACT", fields=(text("email", True),)),
        SectionDef(id="review", title="REVIEW", fields=(text("notes"),)),
    ),
)

UI_STEPS = (
    UiStepDef(key="start", label="Start", schema_steps=("basics",)),
    UiStepDef(key="pets", label="Pets", schema_steps=("pets", "pet_object")),
    UiStepDef(key="contact", label="Contact", schema_steps=("contact",)),
    UiStepDef(key="review", label="Review", schema_steps=("review",)),
)

GATE = ModeGate(
    section_id="pets",
    field="has_pets",
    required_value=True,
    blocked_reason="This form is for pet owners.",
    suggested_mode=IntakeMode.DIVORCE_NO_CHILDREN,
)


def make_config(**overrides: Any) -> OrchestratorConfig:
    values: dict[str, Any] = {
        "mode": IntakeMode.CUSTODY_UNMARRIED,
        "schema_def": SCHEMA,
        "gate": GATE,
        "ui_steps": UI_STEPS,
        "validators": {"email": validate_email, "vet_email": validate_email},
        "terminal_step": "review",
    }
    values.update(overrides)
    return OrchestratorConfig(**values)


@pytest.fixture
def config() -> OrchestratorConfig:
    return make_config()


@pytest.fixture
def complete_payload() -> dict[str, Any]:
    return {"name": "Dana", "has_pets": True, "pet_name": ["Rex"], "email": "dana@example.com"}


class TestProgress:
    """Tests for step statuses and the current step."""

    def test_empty_payload(self, config: OrchestratorConfig) -> None:
        """Nothing answered: first step is current, nothing complete."""
        result = orchestrate(config, {})

        assert result.current_schema_step == "basics"
        assert result.current_step_missing_fields == ["name"]
        assert result.completion_percent == 0
        assert result.completed_schema_steps == []
        assert result.ready_for_review is False

    def test_complete_payload(
        self, config: OrchestratorConfig, complete_payload: dict[str, Any]
    ) -> None:
        """All steps complete: ready for review at 100 percent."""
        result = orchestrate(config, complete_payload)

        assert all(step.status == StepState.COMPLETE for step in result.schema_steps)
        assert result.completed_schema_steps == ["basics", "pets", "pet_object", "contact"]
        assert result.current_schema_step == "review"
        assert result.completion_percent == 100
        assert result.ready_for_review is True

    def test_terminal_step_waits_for_others(self, config: OrchestratorConfig) -> None:
        """The review step has no required fields but stays incomplete."""
        result = orchestrate(config, {"name": "Dana"})

        review = result.step("review")
        assert review is not None
        assert review.status == StepState.INCOMPLETE
        assert review.missing_fields == []

    def test_percent_counts_non_terminal_steps(
        self, config: OrchestratorConfig, complete_payload: dict[str, Any]
    ) -> None:
        """The review step is left out of the percentage."""
        result = orchestrate(config, {"name": "Dana"})
        assert result.completion_percent == 25

        del complete_payload["email"]
        assert orchestrate(config, complete_payload).completion_percent == 75

    def test_current_step_is_first_incomplete(self, config: OrchestratorConfig) -> None:
        """Later answers do not move the current step forward."""
        result = orchestrate(config, {"has_pets": True, "email": "dana@example.com"})

        assert result.current_schema_step == "basics"
        assert result.completed_schema_steps == ["pets", "contact"]

    @pytest.mark.parametrize("payload", [None, [], "payload", 42])
    def test_non_mapping_payload_is_empty(
        self, config: OrchestratorConfig, payload: Any
    ) -> None:
        """Anything that is not a mapping is evaluated as an empty payload."""
        result = orchestrate(config, payload)
        assert result.current_schema_step == "basics"
        assert result.completion_percent == 0

    def test_unknown_keys_ignored(
        self, config: OrchestratorConfig, complete_payload: dict[str, Any]
    ) -> None:
        """Extra keys have no effect."""
        complete_payload["favorite_color"] = "teal"
        assert orchestrate(config, complete_payload).ready_for_review is True


class TestValidation:
    """Tests for field validators inside the orchestrator."""

    def test_invalid_value_reported(
        self, config: OrchestratorConfig, complete_payload: dict[str, Any]
    ) -> None:
        """A present but invalid value makes its step incomplete."""
        complete_payload["email"] = "not-an-email"

        result = orchestrate(config, complete_payload)
        contact = result.step("contact")

        assert contact is not None
        assert contact.status == StepState.INCOMPLETE
        assert contact.missing_fields == []
        assert [error.field for error in contact.validation_errors] == ["email"]
        assert result.ready_for_review is False

    def test_missing_value_not_also_invalid(self, config: OrchestratorConfig) -> None:
        """Missing values are only reported as missing."""
        contact = orchestrate(config, {"email": ""}).step("contact")
        assert contact is not None
        assert contact.missing_fields == ["email"]
        assert contact.validation_errors == []

    def test_optional_date_is_validated(self, config: OrchestratorConfig) -> None:
        """Date fields get the date validator without configuration."""
        result = orchestrate(config, {"name": "Dana", "birthday": "last spring"})

        assert result.current_schema_step == "basics"
        assert result.current_step_validation_errors[0].field == "birthday"
        assert result.current_step_validation_errors[0].message == (
            "Please enter a date like 2024-01-15."
        )

    def test_one_error_per_repeatable_field(
        self, config: OrchestratorConfig, complete_payload: dict[str, Any]
    ) -> None:
        """Several bad entries in one array yield a single error."""
        complete_payload["pet_name"] = ["Rex", "Tom"]
        complete_payload["vet_email"] = ["bad", "worse"]

        pets = orchestrate(config, complete_payload).step("pet_object")

        assert pets is not None
        assert len(pets.validation_errors) == 1
        assert pets.validation_errors[0].field == "vet_email"

    def test_failing_validator_degrades(
        self, complete_payload: dict[str, Any], log_events: list[dict[str, Any]]
    ) -> None:
        """A validator that raises is reported as an invalid answer."""

        def broken(value: Any) -> Any:
            return value.missing_attribute

        config = make_config(validators={"name": broken})

        result = orchestrate(config, complete_payload)

        basics = result.step("basics")
        assert basics is not None
        assert basics.validation_errors[0].message == (
            "This answer could not be checked. Please re-enter it."
        )
        assert {
            "event": "field_validator_failed",
            "log_level": "warning",
            "field_key": "name",
            "error_type": "AttributeError",
        } in log_events


class TestGate:
    """Tests for the fail-closed mode gate."""

    def test_contradiction_blocks_flow(
        self, config: OrchestratorConfig, complete_payload: dict[str, Any]
    ) -> None:
        """A contradicting gate answer pins the flow at the gate."""
        complete_payload["has_pets"] = False

        result = orchestrate(config, complete_payload)

        assert result.flow_blocked is True
        assert result.flow_blocked_reason == "This form is for pet owners."
        assert result.current_schema_step == "pets"
        assert result.current_step_validation_errors[0].field == "has_pets"
        assert result.ready_for_review is False
        assert result.completed_schema_steps == ["basics"]

    def test_sections_after_gate_not_evaluated(
        self, config: OrchestratorConfig, complete_payload: dict[str, Any]
    ) -> None:
        """Downstream steps are reported bare and incomplete."""
        complete_payload["has_pets"] = False
        complete_payload["email"] = "not-an-email"

        result = orchestrate(config, complete_payload)

        for key in ("pet_object", "contact", "review"):
            step = result.step(key)
            assert step is not None
            assert step.status == StepState.INCOMPLETE
            assert step.missing_fields == []
            assert step.validation_errors == []

    @pytest.mark.parametrize("value", [None, "false", 0, "no"])
    def test_non_boolean_answers_do_not_block(self, value: Any) -> None:
        """Only a real boolean can contradict the gate."""
        assert gate_contradicted(GATE, {"has_pets": value}) is False

    def test_no_gate(self) -> None:
        """Modes without a gate never block."""
        assert gate_contradicted(None, {"has_pets": False}) is False

    def test_blocked_flow_is_logged(
        self,
        config: OrchestratorConfig,
        log_events: list[dict[str, Any]],
    ) -> None:
        """Blocking emits an info event with field keys only."""
        orchestrate(config, {"has_pets": False})

        assert log_events == [
            {
                "event": "intake_flow_blocked",
                "log_level": "info",
                "intake_mode": "custody_unmarried",
                "gate_field": "has_pets",
                "suggested_mode": "divorce_no_children",
            }
        ]


class TestUiSteps:
    """Tests for UI step roll-up."""

    def test_ui_step_states(self, config: OrchestratorConfig) -> None:
        """Complete, current and incomplete UI steps with percents."""
        result = orchestrate(config, {"name": "Dana", "has_pets": True})

        states = {step.key: (step.status, step.completion_percent) for step in result.ui_steps}
        assert states == {
            "start": (UiStepState.COMPLETE, 100),
            "pets": (UiStepState.CURRENT, 50),
            "contact": (UiStepState.INCOMPLETE, 0),
            "review": (UiStepState.INCOMPLETE, 0),
        }
        assert result.current_ui_step == "pets"

    def test_review_ui_step_completes_last(
        self, config: OrchestratorConfig, complete_payload: dict[str, Any]
    ) -> None:
        """The review UI step is complete once everything else is."""
        result = orchestrate(config, complete_payload)
        assert [step.status for step in result.ui_steps] == [UiStepState.COMPLETE] * 4


class TestEvaluationLogging:
    """Tests for the optional evaluation debug event."""

    def test_silent_by_default(
        self, config: OrchestratorConfig, log_events: list[dict[str, Any]]
    ) -> None:
        """No events for an ordinary evaluation."""
        orchestrate(config, {"name": "Dana"})
        assert log_events == []

    def test_logs_summary_without_values(
        self, config: OrchestratorConfig, log_events: list[dict[str, Any]]
    ) -> None:
        """The debug event carries step keys and counts, never answers."""
        orchestrate(config, {"name": "Dana"}, log_evaluation=True)

        assert log_events == [
            {
                "event": "intake_orchestrated",
                "log_level": "debug",
                "intake_mode": "custody_unmarried",
                "current_schema_step": "pets",
                "completion_percent": 25,
                "ready_for_review": False,
                "missing_field_count": 1,
            }
        ]


class TestConfigChecks:
    """Tests for descriptor validation at construction."""

    def test_section_missing_from_ui_steps(self) -> None:
        """Every section must belong to a UI step."""
        with pytest.raises(SchemaDefinitionError, match="section 'review' is not in any UI step"):
            make_config(ui_steps=UI_STEPS[:3])

    def test_ui_step_with_unknown_section(self) -> None:
        """UI steps may only reference declared sections."""
        extra = UiStepDef(key="extra", label="Extra", schema_steps=("payments",))
        with pytest.raises(SchemaDefinitionError, match="unknown section 'payments'"):
            make_config(ui_steps=(*UI_STEPS, extra))

    def test_validator_for_unknown_field(self) -> None:
        """Validators must target declared fields."""
        with pytest.raises(SchemaDefinitionError, match="validator for unknown field 'phone'"):
            make_config(validators={"phone": validate_email})

    def test_gate_field_must_exist(self) -> None:
        """The gate must point at a declared field of its section."""
        gate = GATE.model_copy(update={"section_id": "contact"})
        with pytest.raises(SchemaDefinitionError, match="gate field contact.has_pets"):
            make_config(gate=gate)

    def test_repeat_count_needs_repeatable_section(self) -> None:
        """Declared counts only apply to repeatable sections."""
        with pytest.raises(SchemaDefinitionError, match="'contact' is not a repeatable section"):
            make_config(repeat_count_fields={"contact": "name"})

    def test_terminal_step_must_exist(self) -> None:
        """The terminal step is a declared section."""
        with pytest.raises(SchemaDefinitionError, match="terminal step 'submit'"):
            make_config(terminal_step="submit")

    def test_lookup_tables_are_read_only(self) -> None:
        """A built descriptor cannot be changed through its tables."""
        validators = {"email": validate_email}
        config = make_config(validators=validators)
        validators["vet_email"] = validate_email

        assert "vet_email" not in config.validators
        with pytest.raises(TypeError):
            config.validators["name"] = validate_email  # type: ignore[index]
        with pytest.raises(TypeError):
            config.repeat_count_fields["pet_object"] = "name"  # type: ignore[index]
