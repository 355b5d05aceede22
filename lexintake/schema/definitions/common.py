"""Section builders shared by the Georgia family-law schemas.

Each mode gets its own SectionDef instances; these helpers only avoid
retyping identical question lists. Mode-specific enum values are passed in.
"""

from lexintake.schema.models import (
    SectionDef,
    boolean,
    date,
    enum,
    listing,
    multiselect,
    number,
    structured,
    text,
)
from lexintake.schema.reveals import RevealRule

US_STATES: tuple[str, ...] = (
    "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "FL", "GA",
    "HI", "ID", "IL", "IN", "IA", "KS", "KY", "LA", "ME", "MD",
    "MA", "MI", "MN", "MS", "MO", "MT", "NE", "NV", "NH", "NJ",
    "NM", "NY", "NC", "ND", "OH", "OK", "OR", "PA", "RI", "SC",
    "SD", "TN", "TX", "UT", "VT", "VA", "WA", "WV", "WI", "WY", "DC",
)

COVERAGE_STATUS: tuple[str, ...] = ("reported", "none_reported", "deferred_to_attorney")

ASSET_DETAIL_FIELDS: tuple[str, ...] = (
    "asset_type",
    "ownership",
    "estimated_value",
    "title_holder",
    "acquired_pre_marriage",
)

DEBT_DETAIL_FIELDS: tuple[str, ...] = (
    "debt_type",
    "amount",
    "responsible_party",
    "incurred_during_marriage",
)

OPPOSING_ADDRESS_REVEAL = RevealRule(
    controlling_field="opposing_address_known",
    when_value=True,
    reveals=("opposing_last_known_address",),
)
PROTECTIVE_ORDER_REVEAL = RevealRule(
    controlling_field="dv_present",
    when_value=True,
    reveals=("protective_order_exists",),
)
SEPARATION_DATE_REVEAL = RevealRule(
    controlling_field="currently_cohabitating",
    when_value=False,
    reveals=("date_of_separation",),
)
ASSET_DETAILS_REVEAL = RevealRule(
    controlling_field="assets_status",
    when_value="reported",
    reveals=ASSET_DETAIL_FIELDS,
)
DEBT_DETAILS_REVEAL = RevealRule(
    controlling_field="debts_status",
    when_value="reported",
    reveals=DEBT_DETAIL_FIELDS,
)


def intake_metadata(intake_type: str, urgency_levels: tuple[str, ...]) -> SectionDef:
    return SectionDef(
        id="intake_metadata",
        title="INTAKE METADATA",
        fields=(
            text("intake_type", True, is_system=True, notes=f"System: {intake_type}"),
            text("practice_area", True, is_system=True, notes="System: family_law"),
            text("jurisdiction_state", True, is_system=True, notes="System: GA"),
            enum("urgency_level", urgency_levels, True),
            enum("intake_channel", ("web", "referral", "phone"), True),
            date("date_of_intake", True, is_system=True, notes="System generated"),
        ),
    )


def client_identity() -> SectionDef:
    return SectionDef(
        id="client_identity",
        title="CLIENT IDENTITY",
        fields=(
            text("client_first_name", True),
            text("client_last_name", True),
            date("client_dob", True),
            text("client_phone", True, notes="Validated: phone format"),
            text("client_email", True, notes="Validated: email format"),
            structured(
                "client_address", True, notes="Structured: street, city, state, zip (ZIP validated)"
            ),
            enum("client_county", None, True, notes="GA county"),
            enum(
                "citizenship_status",
                (
                    "us_citizen",
                    "lawful_permanent_resident",
                    "nonimmigrant_visa_holder",
                    "undocumented",
                    "dual_citizen",
                    "unknown",
                    "prefer_not_to_say",
                ),
            ),
            boolean("military_status"),
        ),
    )


def opposing_party(section_id: str, title: str) -> SectionDef:
    return SectionDef(
        id=section_id,
        title=title,
        fields=(
            text("opposing_first_name", True),
            text("opposing_last_name", True),
            text("opposing_name", notes="Computed: first + last"),
            boolean("opposing_address_known", True),
            structured(
                "opposing_last_known_address",
                "depends",
                notes="Required if opposing_address_known=true; ZIP validated",
            ),
            boolean("service_concerns", True, notes="Any concerns about serving papers?"),
            enum(
                "opposing_employment_status",
                (
                    "employed_full_time",
                    "employed_part_time",
                    "self_employed",
                    "unemployed",
                    "student",
                    "retired",
                    "disabled",
                    "unknown",
                ),
            ),
        ),
    )


def marriage_details() -> SectionDef:
    return SectionDef(
        id="marriage_details",
        title="MARRIAGE DETAILS",
        fields=(
            date("date_of_marriage", True),
            text("place_of_marriage", True),
            boolean("currently_cohabitating", True),
            date("date_of_separation", "depends", notes="Required if currently_cohabitating=false"),
            boolean("marriage_certificate_available"),
        ),
    )


def separation_grounds() -> SectionDef:
    return SectionDef(
        id="separation_grounds",
        title="SEPARATION & GROUNDS",
        fields=(
            enum(
                "grounds_for_divorce",
                (
                    "irretrievable_breakdown",
                    "irreconcilable_differences",
                    "marriage_void_ab_initio",
                    "adultery",
                    "desertion",
                    "conviction_of_crime",
                    "cruel_treatment",
                    "habitual_intoxication",
                    "mental_incapacity",
                ),
                True,
            ),
            multiselect(
                "fault_allegations",
                (
                    "adultery",
                    "desertion",
                    "cruel_treatment",
                    "habitual_intoxication",
                    "drug_addiction",
                    "conviction_imprisonment",
                    "mental_incapacity",
                ),
            ),
            boolean("reconciliation_attempted"),
        ),
    )


def custody_preferences(*extra_fields) -> SectionDef:
    return SectionDef(
        id="custody_preferences",
        title="CUSTODY PREFERENCES",
        fields=(
            boolean("existing_order", True, notes="Is there an existing custody order?"),
            boolean("seeking_modification", True, notes="Seeking to modify existing order?"),
            enum("custody_type_requested", ("sole", "joint", "primary", "unsure"), True),
            boolean("parenting_plan_exists", True),
            text("current_parenting_schedule", notes="Describe current schedule if one exists"),
            *extra_fields,
        ),
    )


def assets_sections() -> tuple[SectionDef, SectionDef]:
    return (
        SectionDef(
            id="assets_property",
            title="ASSETS & PROPERTY",
            fields=(
                enum(
                    "assets_status",
                    COVERAGE_STATUS,
                    True,
                    notes="Coverage status must be set before proceeding",
                ),
            ),
        ),
        SectionDef(
            id="asset_object",
            title="ASSET DETAILS",
            repeatable=True,
            fields=(
                enum(
                    "asset_type",
                    (
                        "real_estate",
                        "bank_account",
                        "retirement",
                        "vehicle",
                        "business",
                        "personal_property",
                        "investment",
                        "other",
                    ),
                    "depends",
                ),
                enum("ownership", ("client", "spouse", "joint", "unknown"), "depends"),
                number("estimated_value", "depends"),
                enum("title_holder", ("client", "spouse", "joint", "other", "unknown"), "depends"),
                boolean("acquired_pre_marriage", "depends"),
                text("asset_description"),
            ),
        ),
    )


def debts_sections() -> tuple[SectionDef, SectionDef]:
    return (
        SectionDef(
            id="liabilities_debts",
            title="LIABILITIES & DEBTS",
            fields=(
                enum(
                    "debts_status",
                    COVERAGE_STATUS,
                    True,
                    notes="Coverage status must be set before proceeding",
                ),
            ),
        ),
        SectionDef(
            id="debt_object",
            title="DEBT DETAILS",
            repeatable=True,
            fields=(
                enum(
                    "debt_type",
                    (
                        "mortgage",
                        "car_loan",
                        "credit_card",
                        "student_loan",
                        "personal_loan",
                        "medical_debt",
                        "tax_debt",
                        "other",
                    ),
                    "depends",
                ),
                number("amount", "depends"),
                enum("responsible_party", ("client", "spouse", "joint", "unknown"), "depends"),
                boolean("incurred_during_marriage", "depends"),
                text("creditor_name"),
            ),
        ),
    )


def income_support(support_options: tuple[str, ...], *extra_fields) -> SectionDef:
    return SectionDef(
        id="income_support",
        title="INCOME & SUPPORT",
        fields=(
            number("client_income_monthly", True),
            boolean("opposing_income_known", True),
            number("opposing_income_monthly_estimate", notes="If opposing_income_known=true"),
            boolean("alimony_requested"),
            enum("support_requested", support_options, True),
            *extra_fields,
        ),
    )


def safety_risk(*extra_fields) -> SectionDef:
    return SectionDef(
        id="safety_risk",
        title="SAFETY & RISK",
        fields=(
            boolean("dv_present", True),
            boolean("immediate_safety_concerns", True),
            boolean("protective_order_exists", "depends", notes="Required if dv_present=true"),
            *extra_fields,
        ),
    )


def jurisdiction_venue() -> SectionDef:
    return SectionDef(
        id="jurisdiction_venue",
        title="JURISDICTION & VENUE",
        fields=(
            enum("county_of_filing", None, True, notes="GA county where case will be filed"),
            number("residency_duration_months", True, notes="How long client has lived in GA"),
            boolean("venue_confirmed", is_system=True, notes="System: venue validation result"),
        ),
    )


def prior_legal_actions(*leading_fields) -> SectionDef:
    return SectionDef(
        id="prior_legal_actions",
        title="PRIOR LEGAL ACTIONS",
        fields=(
            *leading_fields,
            boolean("prior_divorce_filings", True),
            text("case_numbers"),
            boolean("existing_attorney", True),
        ),
    )


def desired_outcomes(goals: tuple[str, ...]) -> SectionDef:
    return SectionDef(
        id="desired_outcomes",
        title="DESIRED OUTCOMES",
        fields=(
            enum("primary_goal", goals, True),
            enum(
                "settlement_preference", ("negotiation", "mediation", "litigation", "unsure"), True
            ),
            enum("litigation_tolerance", ("low", "medium", "high"), True),
            text("non_negotiables"),
        ),
    )


def evidence_documents(document_types: tuple[str, ...], track_missing: bool = True) -> SectionDef:
    fields = [
        boolean("documents_reviewed_ack", True, notes="Client acknowledges document step complete"),
        enum("document_type", document_types),
        boolean("uploaded"),
    ]
    if track_missing:
        fields.append(
            listing(
                "missing_required_docs",
                is_system=True,
                notes="System: list of missing required documents",
            )
        )
    return SectionDef(id="evidence_documents", title="EVIDENCE & DOCUMENTS", fields=tuple(fields))


def final_review() -> SectionDef:
    return SectionDef(
        id="final_review",
        title="FINAL REVIEW",
        fields=(text("questions_for_firm", notes="Any questions for the firm before submission"),),
    )


def child_object(*extra_fields) -> SectionDef:
    return SectionDef(
        id="child_object",
        title="CHILD DETAILS",
        repeatable=True,
        fields=(
            text("child_full_name", True),
            date("child_dob", True),
            enum(
                "child_current_residence",
                ("with_client", "with_other_parent", "split", "third_party", "other"),
                True,
            ),
            enum("biological_relation", ("biological", "adoptive", "step", "other"), True),
            boolean("special_needs"),
            text("school_district"),
            *extra_fields,
        ),
    )
