"""Generic step orchestrator.

`orchestrate` evaluates a payload against one mode descriptor and derives
every piece of progress state from it: step statuses, the current step,
completion percent and the ready-for-review verdict. It never mutates the
payload and never raises on payload content; odd values simply count as
missing or invalid.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from lexintake.observability.logging import get_logger
from lexintake.orchestration.models import (
    FieldValidationError,
    ModeGate,
    OrchestratorConfig,
    OrchestratorResult,
    StepState,
    StepStatus,
    UiStepDef,
    UiStepState,
    UiStepStatus,
)
from lexintake.payload.assertions import unwrap
from lexintake.schema.enums import FieldType
from lexintake.schema.models import SectionDef
from lexintake.validation.completeness import missing_fields_for_section, to_list
from lexintake.validation.validators import Validator, has_value, validate_date

logger = get_logger(__name__)


def gate_contradicted(gate: ModeGate | None, payload: Mapping[str, Any]) -> bool:
    """True when the gate field holds a boolean the mode does not allow.

    Unanswered or non-boolean gate values never block.
    """
    if gate is None:
        return False
    value = unwrap(payload.get(gate.field))
    return isinstance(value, bool) and value is not gate.required_value


def _percent(done: int, total: int) -> int:
    if total <= 0:
        return 100
    return int(100 * done / total + 0.5)


def _validator_for(
    config: OrchestratorConfig, field_key: str, field_type: FieldType
) -> Validator | None:
    validator = config.validators.get(field_key)
    if validator is None and field_type == FieldType.DATE:
        return validate_date
    return validator


def _run_validator(validator: Validator, field_key: str, value: Any) -> str | None:
    try:
        outcome = validator(value)
    except (TypeError, ValueError, AttributeError) as e:
        logger.warning(
            "field_validator_failed",
            field_key=field_key,
            error_type=type(e).__name__,
        )
        return "This answer could not be checked. Please re-enter it."
    return None if outcome.valid else (outcome.message or "This answer is not valid.")


def validation_errors_for_section(
    config: OrchestratorConfig, section: SectionDef, payload: Mapping[str, Any]
) -> list[FieldValidationError]:
    """Run field validators over the present values of a section.

    Missing values are left to the completeness evaluator. In repeatable
    sections each present entry is checked and at most one error is
    reported per field.
    """
    errors: list[FieldValidationError] = []
    for field in section.fields:
        if field.is_system:
            continue
        validator = _validator_for(config, field.key, field.type)
        if validator is None:
            continue

        raw = payload.get(field.key)
        values = to_list(raw) if section.repeatable else [unwrap(raw)]
        for value in values:
            value = unwrap(value)
            if not has_value(value, field.type):
                continue
            message = _run_validator(validator, field.key, value)
            if message is not None:
                errors.append(FieldValidationError(field=field.key, message=message))
                break
    return errors


def _step_status(
    key: str, missing: list[str], errors: list[FieldValidationError]
) -> StepStatus:
    state = StepState.COMPLETE if not missing and not errors else StepState.INCOMPLETE
    return StepStatus(key=key, status=state, missing_fields=missing, validation_errors=errors)


def find_ui_step_for_schema_step(
    ui_steps: Sequence[UiStepDef], schema_step: str
) -> UiStepDef | None:
    for ui_step in ui_steps:
        if schema_step in ui_step.schema_steps:
            return ui_step
    return None


def build_ui_step_statuses(
    ui_steps: Sequence[UiStepDef],
    completed: set[str],
    current_schema_step: str,
) -> list[UiStepStatus]:
    statuses: list[UiStepStatus] = []
    for ui_step in ui_steps:
        done = sum(1 for step in ui_step.schema_steps if step in completed)
        if done == len(ui_step.schema_steps):
            state = UiStepState.COMPLETE
        elif current_schema_step in ui_step.schema_steps:
            state = UiStepState.CURRENT
        else:
            state = UiStepState.INCOMPLETE
        statuses.append(
            UiStepStatus(
                key=ui_step.key,
                label=ui_step.label,
                status=state,
                schema_steps=list(ui_step.schema_steps),
                completion_percent=_percent(done, len(ui_step.schema_steps)),
            )
        )
    return statuses


def orchestrate(
    config: OrchestratorConfig,
    payload: Mapping[str, Any] | None,
    log_evaluation: bool = False,
) -> OrchestratorResult:
    """Evaluate a payload against a mode descriptor.

    Args:
        config: Mode descriptor (schema, reveals, gate, UI steps, validators)
        payload: Stored intake payload; anything that is not a mapping is
            treated as empty
        log_evaluation: Emit an `intake_orchestrated` debug event

    Returns:
        OrchestratorResult derived purely from the payload
    """
    if not isinstance(payload, Mapping):
        payload = {}

    schema = config.schema_def
    gate = config.gate
    blocked = gate_contradicted(gate, payload)

    statuses: list[StepStatus] = []
    past_gate = False
    for section in schema.sections:
        if past_gate:
            statuses.append(StepStatus(key=section.id, status=StepState.INCOMPLETE))
            continue

        missing = missing_fields_for_section(
            payload,
            schema,
            section.id,
            config.reveals,
            config.repeat_count_fields.get(section.id),
        )
        errors = validation_errors_for_section(config, section, payload)
        if blocked and gate is not None and section.id == gate.section_id:
            errors.append(FieldValidationError(field=gate.field, message=gate.blocked_reason))
            past_gate = True
        statuses.append(_step_status(section.id, missing, errors))

    terminal = config.terminal_step
    others_complete = all(
        status.status == StepState.COMPLETE for status in statuses if status.key != terminal
    )
    if not others_complete:
        statuses = [
            status.model_copy(update={"status": StepState.INCOMPLETE})
            if status.key == terminal
            else status
            for status in statuses
        ]

    completed = [
        status.key
        for status in statuses
        if status.status == StepState.COMPLETE and status.key != terminal
    ]
    non_terminal = sum(1 for status in statuses if status.key != terminal)

    if blocked and gate is not None:
        current = gate.section_id
    else:
        current = next(
            (status.key for status in statuses if status.status != StepState.COMPLETE),
            statuses[-1].key,
        )
    current_status = next(status for status in statuses if status.key == current)

    current_ui = find_ui_step_for_schema_step(config.ui_steps, current)
    result = OrchestratorResult(
        intake_mode=config.mode,
        schema_steps=statuses,
        current_schema_step=current,
        current_step_missing_fields=list(current_status.missing_fields),
        current_step_validation_errors=list(current_status.validation_errors),
        current_ui_step=current_ui.key if current_ui else config.ui_steps[0].key,
        ui_steps=build_ui_step_statuses(
            config.ui_steps,
            {status.key for status in statuses if status.status == StepState.COMPLETE},
            current,
        ),
        completed_schema_steps=completed,
        ready_for_review=not blocked and len(completed) == non_terminal,
        completion_percent=_percent(len(completed), non_terminal),
        flow_blocked=blocked,
        flow_blocked_reason=gate.blocked_reason if blocked and gate is not None else None,
    )

    if blocked and gate is not None:
        logger.info(
            "intake_flow_blocked",
            intake_mode=config.mode.value,
            gate_field=gate.field,
            suggested_mode=gate.suggested_mode.value if gate.suggested_mode else None,
        )
    if log_evaluation:
        logger.debug(
            "intake_orchestrated",
            intake_mode=config.mode.value,
            current_schema_step=result.current_schema_step,
            completion_percent=result.completion_percent,
            ready_for_review=result.ready_for_review,
            missing_field_count=len(result.current_step_missing_fields),
        )

    return result
