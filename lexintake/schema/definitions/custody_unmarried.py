"""Georgia custody intake for parents who were never married.

Mode-locked: no marriage, grounds, asset or debt sections. The children
section is a gate; `has_children` must be true.
"""

from lexintake.schema.definitions import common
from lexintake.schema.models import SchemaDef, SectionDef, boolean, enum, number, text
from lexintake.schema.reveals import RevealTable, validate_reveal_table

SCHEMA = SchemaDef(
    version="ga.custody_unmarried.v1.0",
    sections=(
        common.intake_metadata("custody_unmarried", ("standard", "urgent", "emergency")),
        common.client_identity(),
        common.opposing_party("other_parent", "OTHER PARENT"),
        SectionDef(
            id="children_info",
            title="CHILDREN INFORMATION",
            fields=(
                boolean(
                    "has_children",
                    True,
                    notes="Must be true for custody intake; ask to confirm",
                ),
                number("children_count", True, notes="Must be >= 1"),
            ),
        ),
        common.child_object(),
        common.custody_preferences(
            enum(
                "child_home_state",
                common.US_STATES,
                True,
                notes="State where child has lived for past 6 months",
            ),
            text("child_home_county", True),
            number(
                "time_in_home_state_months",
                True,
                notes="How long child has lived in home state",
            ),
        ),
        common.safety_risk(boolean("children_exposed")),
        common.jurisdiction_venue(),
        common.prior_legal_actions(boolean("prior_custody_orders", True)),
        common.desired_outcomes(
            (
                "sole_custody",
                "parenting_time",
                "establish_order",
                "emergency_order",
                "legitimation",
                "other",
            )
        ),
        common.evidence_documents(
            (
                "birth_certificate",
                "custody_order",
                "paternity_test",
                "school_record",
                "medical_record",
                "text_message",
                "email",
                "photo",
                "video",
                "police_report",
                "protective_order",
                "other",
            ),
            track_missing=False,
        ),
        common.final_review(),
    ),
)

FIELD_REVEALS: RevealTable = (
    common.OPPOSING_ADDRESS_REVEAL,
    common.PROTECTIVE_ORDER_REVEAL,
)

validate_reveal_table(SCHEMA, FIELD_REVEALS)
