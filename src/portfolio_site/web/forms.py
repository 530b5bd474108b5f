"""Admin form definitions for the three resource kinds.

Each manager view in the dashboard is rendered from one ``ResourceForm``:
the table columns, the modal's controlled fields and the multipart file
field all come from here, so the three views share one template.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class FormField:
    """One input of a manager's create/edit modal.

    Attributes:
        name: Multipart field name sent to the API.
        label: Label shown above the input.
        widget: ``text``, ``url`` or ``textarea``.
        required: Whether the browser should refuse an empty value.
        placeholder: Hint text.
        half: Render at half width (paired with the next half field).
    """

    name: str
    label: str
    widget: str = "text"
    required: bool = False
    placeholder: str = ""
    half: bool = False


@dataclass(frozen=True, slots=True)
class ResourceForm:
    """Everything the admin UI needs to manage one resource kind."""

    kind: str
    title: str
    singular: str
    file_field: str
    file_label: str
    glyph: str
    fields: tuple[FormField, ...]
    columns: tuple[tuple[str, str], ...]

    @property
    def api_path(self) -> str:
        return f"/{self.kind}"


def text_to_description(text: str | None) -> list[str]:
    """Split textarea input into bullet points, one per non-blank line."""
    if not text:
        return []
    return [line.strip() for line in text.splitlines() if line.strip()]


def description_to_text(items: list[str] | None) -> str:
    """Join bullet points back into textarea input."""
    return "\n".join(items or [])


def record_to_form_values(form: ResourceForm, record: Mapping[str, Any]) -> dict[str, str]:
    """Return the modal's initial values for editing ``record``.

    Missing values become empty strings; list fields become newline-joined text.
    """
    values: dict[str, str] = {}
    for field in form.fields:
        value = record.get(field.name)
        if isinstance(value, list):
            values[field.name] = description_to_text(value)
        else:
            values[field.name] = "" if value is None else str(value)
    return values


EXPERIENCE_FORM = ResourceForm(
    kind="experience",
    title="Experience",
    singular="Experience",
    file_field="logo",
    file_label="Company Logo",
    glyph="💼",
    fields=(
        FormField("title", "Job Title", required=True),
        FormField("company", "Company Name", required=True),
        FormField("location", "Location", placeholder="e.g., Dhaka, Bangladesh"),
        FormField("start_date", "Start Date", placeholder="e.g., Oct 2023", half=True),
        FormField("end_date", "End Date", placeholder="e.g., Present", half=True),
        FormField(
            "description",
            "Description (one bullet point per line)",
            widget="textarea",
            placeholder="Enter each responsibility on a new line",
        ),
    ),
    columns=(("title", "Title"), ("company", "Company"), ("duration", "Duration")),
)

EDUCATION_FORM = ResourceForm(
    kind="education",
    title="Education",
    singular="Education",
    file_field="logo",
    file_label="Institution Logo",
    glyph="🎓",
    fields=(
        FormField("degree", "Degree", required=True),
        FormField("institution", "Institution", required=True),
        FormField("location", "Location", placeholder="e.g., Dhaka", half=True),
        FormField("year", "Year", placeholder="e.g., 2023", half=True),
    ),
    columns=(("degree", "Degree"), ("institution", "Institution"), ("year", "Year")),
)

PROJECTS_FORM = ResourceForm(
    kind="projects",
    title="Projects",
    singular="Project",
    file_field="image",
    file_label="Project Image",
    glyph="🖼️",
    fields=(
        FormField("title", "Project Title", required=True),
        FormField("description", "Description", widget="textarea"),
        FormField("link", "Project Link", widget="url", required=True, placeholder="https://"),
    ),
    columns=(("title", "Title"), ("link", "Link")),
)

RESOURCE_FORMS: dict[str, ResourceForm] = {
    form.kind: form for form in (EXPERIENCE_FORM, EDUCATION_FORM, PROJECTS_FORM)
}


def table_cell(form: ResourceForm, record: Mapping[str, Any], column: str) -> str:
    """Text shown in a manager table cell."""
    if form.kind == "experience" and column == "duration":
        start = record.get("start_date") or ""
        end = record.get("end_date") or ""
        return f"{start} - {end}" if start or end else ""
    value = record.get(column)
    return "" if value is None else str(value)
