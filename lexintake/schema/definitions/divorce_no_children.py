"""Georgia divorce intake for couples without minor children.

`has_minor_children` must be false; a true answer routes the client to
the divorce-with-children intake. Asset and debt coverage is mandatory.
"""

from lexintake.schema.definitions import common
from lexintake.schema.models import SchemaDef, SectionDef, boolean
from lexintake.schema.reveals import RevealTable, validate_reveal_table

SCHEMA = SchemaDef(
    version="ga.divorce_no_children.v1.0",
    sections=(
        common.intake_metadata("divorce_no_children", ("routine", "urgent", "emergency")),
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
                    notes="Must be false for this intake; true routes elsewhere",
                ),
            ),
        ),
        *common.assets_sections(),
        *common.debts_sections(),
        common.income_support(("none", "alimony_only", "unsure")),
        common.safety_risk(),
        common.jurisdiction_venue(),
        common.prior_legal_actions(),
        common.desired_outcomes(
            ("quick_resolution", "fair_asset_division", "alimony", "protect_assets", "other")
        ),
        common.evidence_documents(
            (
                "marriage_certificate",
                "financial_statement",
                "property_deed",
                "vehicle_title",
                "retirement_statement",
                "bank_statement",
                "tax_return",
                "pay_stub",
                "prenuptial_agreement",
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
