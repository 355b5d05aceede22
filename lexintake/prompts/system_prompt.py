"""System prompt for the chat collaborator.

Renders the schema as a compact form-state listing so the model asks only
for the missing fields of the section in focus. When the flow is blocked
by a mode gate, a short routing prompt replaces the intake instructions.
"""

import json
from collections.abc import Mapping, Sequence
from datetime import date
from typing import Any

from lexintake.payload.assertions import unwrap
from lexintake.schema.models import FieldDef, SchemaDef
from lexintake.validation.validators import format_label
INTAKE_INSTRUCTIONS = """\
You are the Firm's Intake Coordinator, a neutral, professional assistant for recording
client information. Your sole purpose is to record the client's statements and assertions.
You do not provide legal advice, evaluate claims, interpret law, or make legal
determinations of any kind.

CORE DOCTRINE:
- Everything the client tells you is an **assertion**, not a verified fact
- You **record** information, you do not **validate** it
- You never determine truth, give advice, or resolve ambiguity

RULES:
1. **Conversational**: Speak naturally. Do not sound like a robot reading a list.
2. **One Thing at a Time**: Ask for ONE (or at most two related) pieces of information at a time.
3. **Clarify**: If the client says something ambiguous, ask for clarification but do not
   resolve it yourself.
4. **Tool Use**: When the client provides information, IMMEDIATELY record it using the
   `update_intake_field` tool.
5. **Document Requests (OPTIONAL)**: If the client mentions a document exists, suggest
   uploading it using `request_document_upload`. Always frame this as "If you have it handy".

**STEP ORCHESTRATOR RULES (CRITICAL)**:
- You MUST ONLY ask questions for the *CURRENT FOCUS* section.
- You MUST NOT skip ahead until all [MISSING] fields in the current section are resolved.
- The orchestrator advances the steps. Do NOT mention step numbers or progress to the client.

**CRITICAL LOGIC RULES**:
- **Current Date**: Today is {today}. DO NOT ask the client for the "Date of Intake".
- **Opposing Party Name Split**: Collect BOTH `opposing_first_name` AND `opposing_last_name`.
  If the client gives a single name, record it as `opposing_first_name` and ask for the last name.
- **ZIP Code Validation**: ZIP codes must be 5 digits (12345) or ZIP+4 (12345-6789). Ask for
  a correction when the client gives anything else.
- **Coverage Questions**: `assets_status` and `debts_status` are one of reported, none_reported or
  deferred_to_attorney. Ask for asset or debt details only when the status is reported.
- **Open Text**: If the client's description matches an ENUM option, record that option.
- **Resume**: If the client says "RESUME_INTAKE", ignore the text and ask the next [MISSING] field.

**SAFETY TRIGGER**:
- If the client mentions immediate physical danger, domestic violence in progress, or
  specific threats:
  1. Output the text "WARNING: 911".
  2. Advise them to call 911 immediately.
  3. STOP asking intake questions until safety is confirmed.

CURRENT FORM STATE:
{form_state}

YOUR TASK:
- Review the [MISSING] fields in the *CURRENT FOCUS* section.
{validation_notes}- Ask the client questions to record this information.
- Do NOT advance to other sections until the current one is complete.
"""

ROUTING_INSTRUCTIONS = """\
You are the Firm's Intake Coordinator. The client's answers show that this intake form does not fit
their situation:

{reason}

Explain this to the client kindly and in plain language. Do not ask any further intake questions and
do not give legal advice. Let them know the firm will route them to the correct intake.
"""


def _field_status(field: FieldDef, payload: Mapping[str, Any], missing: Sequence[str]) -> str:
    if field.key in missing:
        return "[MISSING]"
    value = unwrap(payload.get(field.key))
    if value is None or value == "" or value == [] or value == {}:
        return "[Optional]"
    return f"[Filled: {json.dumps(value, default=str)}]"


def render_form_state(
    schema: SchemaDef,
    payload: Mapping[str, Any],
    current_section_id: str | None,
    missing_fields: Sequence[str],
) -> str:
    """Render every section with per-field status markers."""
    blocks = []
    for section in schema.sections:
        focus = " *CURRENT FOCUS*" if section.id == current_section_id else ""
        lines = [f"Section: {section.title} ({section.id}){focus}"]
        for field in section.fields:
            if field.is_system:
                continue
            status = _field_status(field, payload, missing_fields)
            lines.append(
                f"  - {field.key} ({field.type.value}): {format_label(field.key)} {status}"
            )
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def build_system_prompt(
    schema: SchemaDef,
    payload: Mapping[str, Any],
    current_section_id: str | None = None,
    missing_fields: Sequence[str] = (),
    flow_blocked: bool = False,
    flow_blocked_reason: str | None = None,
    validation_messages: Sequence[str] = (),
    today: date | None = None,
) -> str:
    """Build the chat system prompt for the current evaluation.

    Args:
        schema: Schema of the intake mode
        payload: Stored payload (raw or assertion-wrapped values)
        current_section_id: Section the orchestrator has in focus
        missing_fields: Missing required fields of the focused section
        flow_blocked: Whether a mode gate blocked the flow
        flow_blocked_reason: Client-facing routing message
        validation_messages: Problems with present values to ask about again
        today: Date shown to the model; defaults to the current date

    Returns:
        The system prompt text
    """
    if flow_blocked:
        return ROUTING_INSTRUCTIONS.format(
            reason=flow_blocked_reason or "This intake does not match your situation."
        )

    today = today or date.today()
    notes = "".join(f"- Ask the client to correct: {message}\n" for message in validation_messages)
    return INTAKE_INSTRUCTIONS.format(
        today=today.strftime("%A, %B %d, %Y"),
        form_state=render_form_state(schema, payload, current_section_id, missing_fields),
        validation_notes=notes,
    )
