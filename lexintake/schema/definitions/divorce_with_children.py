"""Georgia divorce intake for married parents with minor children.

Combines the divorce sections with children, custody and child support.
`has_minor_children` must be true.
"""

from lexintake.schema.definitions import common
from lexintake.schema.models import SchemaDef, SectionDef, boolean, enum, number
from lexintake.schema.reveals import RevealTable, validate_reveal_table

SCHEMA = SchemaDef(
    version="ga.divorce_with_children.v1.0",
    sections=(
        common.intake_metadata("divorce_with_children", ("routine", "urgent", "emergency")),
        common.client_identity(),
        common.opposing_party("opposing_party", "OPPOSING PARTY (SPOUSE)"),
        common.marriage_details(),
        common.separation_grounds(),
        SectionDef(
            id="children_gate",
            title="CHILDREN CONFIRMATION",
            fields=(
                boolean(
                    "has_minor_children",
                    True,
                    notes="Must be true for this intake; false routes to divorce_no_children",
                ),
                number("children_count", True, notes="Must be >= 1"),
            ),
        ),
        common.child_object(
            enum(
                "child_home_state",
                common.US_STATES,
                True,
                notes="State where child has lived for past 6 months (UCCJEA)",
            ),
            number(
                "time_in_home_state_months",
                True,
                notes="How long child has lived in home state",
            ),
        ),
        common.custody_preferences(),
        *common.assets_sections(),
        *common.debts_sections(),
        common.income_support(
            ("none", "child_support_only", "alimony_only", "both", "unsure"),
            number(
                "child_support_estimate",
                is_system=True,
                notes="System: computed later; does not block submission",
            ),
        ),
        common.safety_risk(boolean("children_exposed")),
        common.jurisdiction_venue(),
        common.prior_legal_actions(boolean("prior_custody_orders", True)),
        common.desired_outcomes(
            (
                "quick_resolution",
                "fair_custody",
                "primary_custody",
                "fair_asset_division",
                "child_support",
                "alimony",
                "protect_children",
                "other",
            )
        ),
        common.evidence_documents(
            (
                "marriage_certificate",
                "birth_certificate",
                "custody_order",
                "financial_statement",
                "property_deed",
                "vehicle_title",
                "retirement_statement",
                "bank_statement",
                "tax_return",
                "pay_stub",
                "prenuptial_agreement",
                "protective_order",
                "school_record",
                "medical_record",
                "other",
            )
        ),
        common.final_review(),
    ),
)

FIELD_REVEALS: RevealTable = (
    common.OPPOSING_ADDRESS_REVEAL,
    common.SEPARATION_DATE_REVEAL,
    common.ASSET_DETAILS_REVEAL,
    common.DEBT_DETAILS_REVEAL,
    common.PROTECTIVE_ORDER_REVEAL,
)

validate_reveal_table(SCHEMA, FIELD_REVEALS)
