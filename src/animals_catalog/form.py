from __future__ import annotations
from dataclasses import dataclass
from typing import List, Mapping, Optional

from .errors import ValidationError
from .models import EDITABLE_FIELDS, AnimalFields

# population only has to be non-empty, it is never parsed as a number
REQUIRED_NON_EMPTY = ("name", "location", "category", "description", "image")

@dataclass
class FormState:
    """Editable fields plus the record currently being edited, if any."""

    name: str = ""
    location: str = ""
    population: str = ""
    description: str = ""
    category: str = ""
    image: str = ""
    edit_index: Optional[int] = None
    edit_doc_id: Optional[str] = None

    @property
    def is_update(self) -> bool:
        return self.edit_index is not None

    def get_field(self, name: str) -> str:
        if name not in EDITABLE_FIELDS:
            raise KeyError(name)
        return getattr(self, name)

    def update_field(self, name: str, value: str) -> None:
        if name not in EDITABLE_FIELDS:
            raise KeyError(name)
        setattr(self, name, value)

    def load(self, record: Mapping[str, str], index: int) -> None:
        for field in EDITABLE_FIELDS:
            setattr(self, field, record.get(field, ""))
        self.edit_index = index
        self.edit_doc_id = record.get("id")

    def reset(self) -> None:
        for field in EDITABLE_FIELDS:
            setattr(self, field, "")
        self.edit_index = None
        self.edit_doc_id = None

    def fields(self) -> AnimalFields:
        return {field: getattr(self, field) for field in EDITABLE_FIELDS}  # type: ignore[return-value]

    def missing_fields(self) -> List[str]:
        missing = []
        for f in EDITABLE_FIELDS:
            value = getattr(self, f)
            if (f in REQUIRED_NON_EMPTY and not value) or (f == "population" and value == ""):
                missing.append(f)
        return missing

    def validate(self) -> AnimalFields:
        """Return the submission payload or raise ValidationError."""
        missing = self.missing_fields()
        if missing:
            raise ValidationError(missing)
        return self.fields()
