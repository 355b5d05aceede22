"""Tests for the schema registry and the built-in mode schemas."""

import pytest

from lexintake.exceptions import ErrorCode, UnknownModeError
from lexintake.schema import (
    FieldType,
    IntakeMode,
    field_index,
    get_reveals,
    get_schema,
    get_section,
    is_valid_intake_type,
    list_intake_types,
    resolve_mode,
    section_for_field,
)
from lexintake.validation.completeness import is_field_required


class TestModeLookup:
    """Tests for mode string validation."""

    @pytest.mark.parametrize("value", list_intake_types())
    def test_known_modes_are_valid(self, value: str) -> None:
        """Every listed mode string is accepted."""
        assert is_valid_intake_type(value) is True

    @pytest.mark.parametrize("value", ["divorce", "", None, 3, "DIVORCE_NO_CHILDREN"])
    def test_unknown_values_are_invalid(self, value: object) -> None:
        """Anything that is not an exact mode string is rejected."""
        assert is_valid_intake_type(value) is False

    def test_list_intake_types(self) -> None:
        """All three modes are listed in enum order."""
        assert list_intake_types() == [
            "custody_unmarried",
            "divorce_no_children",
            "divorce_with_children",
        ]

    def test_resolve_mode_accepts_enum_and_string(self) -> None:
        """Strings are coerced to IntakeMode."""
        assert resolve_mode("custody_unmarried") is IntakeMode.CUSTODY_UNMARRIED
        assert resolve_mode(IntakeMode.DIVORCE_NO_CHILDREN) is IntakeMode.DIVORCE_NO_CHILDREN

    def test_unknown_mode_raises(self) -> None:
        """Unknown modes raise a configuration error."""
        with pytest.raises(UnknownModeError) as exc_info:
            get_schema("adoption")

        assert exc_info.value.error_code == ErrorCode.UNKNOWN_MODE
        assert exc_info.value.message == "Unknown intake type: 'adoption'"

    def test_unknown_mode_for_reveals_raises(self) -> None:
        """The reveal lookup shares the same mode check."""
        with pytest.raises(UnknownModeError):
            get_reveals("adoption")


class TestBuiltInSchemas:
    """Structure of the three Georgia family-law schemas."""

    def test_versions(self) -> None:
        """Each schema carries its own version label."""
        assert get_schema("custody_unmarried").version == "ga.custody_unmarried.v1.0"
        assert get_schema("divorce_no_children").version == "ga.divorce_no_children.v1.0"
        assert get_schema("divorce_with_children").version == "ga.divorce_with_children.v1.0"

    @pytest.mark.parametrize("mode", list(IntakeMode))
    def test_first_and_last_sections(self, mode: IntakeMode) -> None:
        """Every schema opens with metadata and ends with the review step."""
        section_ids = get_schema(mode).section_ids
        assert section_ids[0] == "intake_metadata"
        assert section_ids[-1] == "final_review"

    def test_custody_schema_has_no_marriage_sections(self) -> None:
        """The unmarried custody intake never asks about marriage or property."""
        section_ids = get_schema("custody_unmarried").section_ids
        for absent in ("marriage_details", "separation_grounds", "assets_property"):
            assert absent not in section_ids
        assert "children_info" in section_ids
        assert "other_parent" in section_ids

    def test_divorce_no_children_gate_section(self) -> None:
        """The no-children gate asks only the gate question."""
        gate = get_section(get_schema("divorce_no_children"), "children_gate")
        assert gate is not None
        assert [field.key for field in gate.fields] == ["has_minor_children"]

    def test_divorce_with_children_child_entries(self) -> None:
        """Child details are repeatable and include home-state tracking."""
        schema = get_schema("divorce_with_children")
        child = schema.section("child_object")
        assert child is not None
        assert child.repeatable is True
        assert child.field("child_home_state") is not None
        assert schema.section_ids.index("child_object") < schema.section_ids.index(
            "custody_preferences"
        )

    def test_system_fields_are_never_required(self) -> None:
        """System-populated fields are excluded from completeness."""
        fields = field_index(get_schema("divorce_with_children"))
        intake_type = fields["intake_type"]
        assert intake_type.is_system is True
        assert is_field_required(intake_type.required, intake_type.is_system) is False
        assert fields["child_support_estimate"].is_system is True

    def test_asset_details_depend_on_coverage_status(self) -> None:
        """Asset detail fields are conditionally required."""
        fields = field_index(get_schema("divorce_no_children"))
        assert fields["asset_type"].required == "depends"
        assert fields["assets_status"].enum_values == (
            "reported",
            "none_reported",
            "deferred_to_attorney",
        )

    def test_field_types(self) -> None:
        """Declared types drive prompts and validation."""
        fields = field_index(get_schema("divorce_no_children"))
        assert fields["client_address"].type is FieldType.STRUCTURED
        assert fields["date_of_marriage"].type is FieldType.DATE
        assert fields["fault_allegations"].type is FieldType.MULTISELECT

    def test_section_for_field(self) -> None:
        """Field keys map back to their declaring section."""
        schema = get_schema("custody_unmarried")
        section = section_for_field(schema, "children_count")
        assert section is not None
        assert section.id == "children_info"
        assert section_for_field(schema, "date_of_marriage") is None

    def test_schemas_are_immutable(self) -> None:
        """Schema models are frozen."""
        schema = get_schema("custody_unmarried")
        with pytest.raises(Exception):
            schema.version = "changed"  # type: ignore[misc]


class TestRevealTables:
    """Tests for the per-mode reveal tables."""

    def test_custody_reveals(self) -> None:
        """Custody reveals the opposing address and protective order only."""
        controlling = [rule.controlling_field for rule in get_reveals("custody_unmarried")]
        assert controlling == ["opposing_address_known", "dv_present"]

    @pytest.mark.parametrize("mode", ["divorce_no_children", "divorce_with_children"])
    def test_divorce_reveals(self, mode: str) -> None:
        """Divorce modes also reveal separation date and financial details."""
        controlling = {rule.controlling_field for rule in get_reveals(mode)}
        assert controlling == {
            "opposing_address_known",
            "currently_cohabitating",
            "assets_status",
            "debts_status",
            "dv_present",
        }

    @pytest.mark.parametrize("mode", list(IntakeMode))
    def test_revealed_fields_are_conditionally_required(self, mode: IntakeMode) -> None:
        """Every revealed field is declared "depends" in its schema."""
        fields = field_index(get_schema(mode))
        for rule in get_reveals(mode):
            for key in rule.reveals:
                assert fields[key].required == "depends", key
