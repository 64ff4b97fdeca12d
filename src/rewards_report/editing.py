"""
Record editor for the management screens.

A form is always in exactly one state:

- Idle: blank form, submit creates a record (POST)
- Editing(entity_id): form loaded from a record, submit replaces it (PUT)
- Submitting(entity_id): a request is in flight

Keeping the edited id inside the state means "am I editing" and "which
record" cannot disagree.
"""

from dataclasses import dataclass
from typing import Optional, Union

from rewards_report.collection import api


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Editing:
    entity_id: int


@dataclass(frozen=True)
class Submitting:
    entity_id: Optional[int] = None


FormState = Union[Idle, Editing, Submitting]


def missing_fields(payload: dict, required: tuple) -> list[str]:
    """Required fields that are absent, null or blank."""
    missing = []
    for name in required:
        value = payload.get(name)
        if value is None or (isinstance(value, str) and not value.strip()):
            missing.append(name)
    return missing


class RecordEditor:
    """
    Create, update and delete records of one resource.

    Args:
        resource: Resource path segment (e.g. "regions")
        id_field: Primary key field of the resource (e.g. "region_id")
        required_fields: Fields that must be filled before submitting
        base_url: API root (default config.API_BASE_URL)
    """

    def __init__(self, resource: str, id_field: str, required_fields: tuple = (), base_url: str = None):
        self.resource = resource
        self.id_field = id_field
        self.required_fields = tuple(required_fields)
        self.base_url = base_url
        self.state: FormState = Idle()

    def _check_not_submitting(self):
        if isinstance(self.state, Submitting):
            raise RuntimeError(f"A {self.resource} submission is already in progress")

    def edit(self, record: dict) -> FormState:
        """Load an existing record into the form."""
        self._check_not_submitting()
        self.state = Editing(entity_id=record[self.id_field])
        return self.state

    def cancel(self) -> FormState:
        """Reset the form."""
        self._check_not_submitting()
        self.state = Idle()
        return self.state

    def submit(self, payload: dict) -> dict:
        """
        Save the form: POST when idle, PUT when editing.

        Returns:
            The record as stored by the API

        Raises:
            ValueError: if required fields are missing (nothing is sent)
            RuntimeError: if another submission is in progress
            ApiError / requests.RequestException: if the request fails; the
                form returns to the state it was in before submitting
        """
        self._check_not_submitting()

        missing = missing_fields(payload, self.required_fields)
        if missing:
            raise ValueError(f"Missing required fields: {', '.join(missing)}")

        previous = self.state
        entity_id = previous.entity_id if isinstance(previous, Editing) else None
        self.state = Submitting(entity_id=entity_id)

        try:
            if entity_id is None:
                result = api.create_record(self.resource, payload, base_url=self.base_url)
            else:
                result = api.update_record(self.resource, entity_id, payload, base_url=self.base_url)
        except Exception:
            self.state = previous
            raise

        self.state = Idle()
        return result

    def delete(self, entity_id) -> None:
        """Delete a record; if it was being edited the form is reset."""
        self._check_not_submitting()
        api.delete_record(self.resource, entity_id, base_url=self.base_url)
        if self.state == Editing(entity_id=entity_id):
            self.state = Idle()
