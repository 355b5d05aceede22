"""Intake step orchestration.

Usage:
    from lexintake.orchestration import orchestrate

    result = orchestrate("divorce_no_children", payload)
    result.current_schema_step
"""

from lexintake.orchestration.models import (
    ChatPromptFields,
    FieldValidationError,
    ModeGate,
    OrchestratorConfig,
    OrchestratorResult,
    PostureResult,
    SidebarStep,
    StepState,
    StepStatus,
    UiStepDef,
    UiStepState,
    UiStepStatus,
)
from lexintake.orchestration.modes import MODE_CONFIGS, STEP_LABELS
from lexintake.orchestration.registry import (
    build_sidebar_steps,
    find_ui_step_for_schema_step,
    get_chat_prompt_fields,
    get_config,
    get_first_schema_step,
    get_step_label,
    get_ui_steps,
    is_ui_step_complete,
    is_valid_intake_type,
    orchestrate,
    validate_intake_type_posture,
)

__all__ = [
    "ChatPromptFields",
    "FieldValidationError",
    "MODE_CONFIGS",
    "ModeGate",
    "OrchestratorConfig",
    "OrchestratorResult",
    "PostureResult",
    "STEP_LABELS",
    "SidebarStep",
    "StepState",
    "StepStatus",
    "UiStepDef",
    "UiStepState",
    "UiStepStatus",
    "build_sidebar_steps",
    "find_ui_step_for_schema_step",
    "get_chat_prompt_fields",
    "get_config",
    "get_first_schema_step",
    "get_step_label",
    "get_ui_steps",
    "is_ui_step_complete",
    "is_valid_intake_type",
    "orchestrate",
    "validate_intake_type_posture",
]
