"""Mode descriptors for the three Georgia family-law intakes.

Each descriptor binds a schema to its reveal table, children gate, UI step
grouping and field validators. They are validated against their schemas
when this module is imported.
"""

from types import MappingProxyType

from lexintake.orchestration.models import ModeGate, OrchestratorConfig, UiStepDef
from lexintake.schema.enums import IntakeMode
from lexintake.schema.registry import get_reveals, get_schema
from lexintake.validation.validators import (
    Validator,
    validate_address,
    validate_email,
    validate_phone,
    validate_positive_count,
)

# Friendly sidebar names by schema step; unknown steps fall back to "Details"
STEP_LABELS: MappingProxyType[str, str] = MappingProxyType(
    {
        "intake_metadata": "Basics",
        "client_identity": "About You",
        "opposing_party": "Other Party",
        "other_parent": "Other Parent",
        "marriage_details": "Marriage Info",
        "separation_grounds": "Separation",
        "children_info": "Children",
        "children_gate": "Children",
        "child_object": "Child Details",
        "custody_preferences": "Custody",
        "assets_property": "Assets",
        "asset_object": "Asset Details",
        "liabilities_debts": "Debts",
        "debt_object": "Debt Details",
        "income_support": "Income & Support",
        "safety_risk": "Safety",
        "jurisdiction_venue": "Legal Venue",
        "prior_legal_actions": "Legal History",
        "desired_outcomes": "Goals",
        "evidence_documents": "Documents",
        "final_review": "Review",
    }
)
DEFAULT_STEP_LABEL = "Details"

CONTACT_VALIDATORS: MappingProxyType[str, Validator] = MappingProxyType(
    {
        "client_email": validate_email,
        "client_phone": validate_phone,
        "client_address": validate_address,
        "opposing_last_known_address": validate_address,
    }
)


def _ui_steps(*steps: tuple[str, str, tuple[str, ...]]) -> tuple[UiStepDef, ...]:
    return tuple(
        UiStepDef(key=key, label=label, schema_steps=schema_steps)
        for key, label, schema_steps in steps
    )


CUSTODY_UNMARRIED = OrchestratorConfig(
    mode=IntakeMode.CUSTODY_UNMARRIED,
    schema_def=get_schema(IntakeMode.CUSTODY_UNMARRIED),
    reveals=get_reveals(IntakeMode.CUSTODY_UNMARRIED),
    gate=ModeGate(
        section_id="children_info",
        field="has_children",
        required_value=True,
        blocked_reason=(
            "This intake requires children. If no children, use a different intake type."
        ),
        posture_reason=(
            "Custody intake requires children. Please select a different intake type."
        ),
    ),
    ui_steps=_ui_steps(
        ("basics", "Basics", ("intake_metadata",)),
        ("client", "About You", ("client_identity",)),
        ("other_parent", "Other Parent", ("other_parent",)),
        ("children", "Children", ("children_info", "child_object")),
        ("custody", "Custody", ("custody_preferences",)),
        ("safety", "Safety", ("safety_risk",)),
        ("venue", "Venue", ("jurisdiction_venue",)),
        ("legal_history", "Legal History", ("prior_legal_actions",)),
        ("goals", "Goals", ("desired_outcomes",)),
        ("documents", "Documents", ("evidence_documents",)),
        ("review", "Review", ("final_review",)),
    ),
    validators={**CONTACT_VALIDATORS, "children_count": validate_positive_count},
    repeat_count_fields={"child_object": "children_count"},
)

DIVORCE_NO_CHILDREN = OrchestratorConfig(
    mode=IntakeMode.DIVORCE_NO_CHILDREN,
    schema_def=get_schema(IntakeMode.DIVORCE_NO_CHILDREN),
    reveals=get_reveals(IntakeMode.DIVORCE_NO_CHILDREN),
    gate=ModeGate(
        section_id="children_gate",
        field="has_minor_children",
        required_value=False,
        blocked_reason=(
            "This intake is for divorces without minor children. We will route you "
            "to the correct intake for matters involving children."
        ),
        suggested_mode=IntakeMode.DIVORCE_WITH_CHILDREN,
        posture_reason="Intake indicates children present. Use divorce with children intake.",
    ),
    ui_steps=_ui_steps(
        ("basics", "Basics", ("intake_metadata",)),
        ("client", "About You", ("client_identity",)),
        ("other_party", "Spouse", ("opposing_party",)),
        ("marriage", "Marriage", ("marriage_details",)),
        ("grounds", "Grounds", ("separation_grounds",)),
        ("children_gate", "Children", ("children_gate",)),
        ("assets", "Assets", ("assets_property", "asset_object")),
        ("debts", "Debts", ("liabilities_debts", "debt_object")),
        ("income_support", "Income & Support", ("income_support",)),
        ("safety", "Safety", ("safety_risk",)),
        ("venue", "Venue", ("jurisdiction_venue",)),
        ("legal_history", "Legal History", ("prior_legal_actions",)),
        ("goals", "Goals", ("desired_outcomes",)),
        ("documents", "Documents", ("evidence_documents",)),
        ("review", "Review", ("final_review",)),
    ),
    validators=dict(CONTACT_VALIDATORS),
)

DIVORCE_WITH_CHILDREN = OrchestratorConfig(
    mode=IntakeMode.DIVORCE_WITH_CHILDREN,
    schema_def=get_schema(IntakeMode.DIVORCE_WITH_CHILDREN),
    reveals=get_reveals(IntakeMode.DIVORCE_WITH_CHILDREN),
    gate=ModeGate(
        section_id="children_gate",
        field="has_minor_children",
        required_value=True,
        blocked_reason=(
            "This intake is for divorces with minor children. "
            "We will route you to the correct intake."
        ),
        suggested_mode=IntakeMode.DIVORCE_NO_CHILDREN,
        posture_reason="No children indicated. Use divorce without children intake.",
    ),
    ui_steps=_ui_steps(
        ("basics", "Basics", ("intake_metadata",)),
        ("client", "About You", ("client_identity",)),
        ("other_party", "Spouse", ("opposing_party",)),
        ("marriage", "Marriage", ("marriage_details",)),
        ("grounds", "Grounds", ("separation_grounds",)),
        ("children_gate", "Children", ("children_gate",)),
        ("children_details", "Child Details", ("child_object",)),
        ("custody", "Custody", ("custody_preferences",)),
        ("assets", "Assets", ("assets_property", "asset_object")),
        ("debts", "Debts", ("liabilities_debts", "debt_object")),
        ("income_support", "Income & Support", ("income_support",)),
        ("safety", "Safety", ("safety_risk",)),
        ("venue", "Venue", ("jurisdiction_venue",)),
        ("legal_history", "Legal History", ("prior_legal_actions",)),
        ("goals", "Goals", ("desired_outcomes",)),
        ("documents", "Documents", ("evidence_documents",)),
        ("review", "Review", ("final_review",)),
    ),
    validators={**CONTACT_VALIDATORS, "children_count": validate_positive_count},
    repeat_count_fields={"child_object": "children_count"},
)

MODE_CONFIGS: MappingProxyType[IntakeMode, OrchestratorConfig] = MappingProxyType(
    {
        IntakeMode.CUSTODY_UNMARRIED: CUSTODY_UNMARRIED,
        IntakeMode.DIVORCE_NO_CHILDREN: DIVORCE_NO_CHILDREN,
        IntakeMode.DIVORCE_WITH_CHILDREN: DIVORCE_WITH_CHILDREN,
    }
)
