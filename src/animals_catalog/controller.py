"""
Form/state controller for the animals catalog.

Owns the form, the record list loaded most recently from the store, the two
filter inputs, the current page and the deletion-confirmation state. All
persistence goes through the injected gateway; after every successful
mutation the whole list is reloaded, never patched locally.

Overlapping actions (two submits in flight at once) are not serialized.
"""
from __future__ import annotations
import sys
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional, Union

from .api import AnimalsGateway
from .errors import PersistenceError, ValidationError
from .filtering import compute_filtered_view
from .form import FormState
from .models import AnimalRecord
from .utils import file_to_data_url

INCOMPLETE_MESSAGE = "Please complete all fields and upload an image."
SAVE_FAILED_MESSAGE = "Failed to save to database."
DELETE_FAILED_MESSAGE = "Failed to delete from database."

HOME_PAGE = "home"
FORM_PAGE = "form"

class DeleteState(str, Enum):
    IDLE = "idle"
    CONFIRMING = "confirming"
    DELETED = "deleted"
    CANCELLED = "cancelled"

def _alert_stderr(message: str) -> None:
    print(message, file=sys.stderr)

class CatalogController:

    def __init__(
        self,
        gateway: AnimalsGateway,
        confirm: Callable[[str], bool],
        alert: Callable[[str], None] = _alert_stderr,
    ):
        self.gateway = gateway
        self.confirm = confirm
        self.alert = alert
        self.form = FormState()
        self.records: List[AnimalRecord] = []
        self.search_query = ""
        self.selected_category = ""
        self.current_page = HOME_PAGE
        self.delete_state = DeleteState.IDLE

    # -------- derived view --------

    @property
    def filtered_animals(self) -> List[AnimalRecord]:
        return compute_filtered_view(self.records, self.search_query, self.selected_category)

    def find_index(self, doc_id: str) -> Optional[int]:
        for i, record in enumerate(self.records):
            if record.get("id") == doc_id:
                return i
        return None

    # -------- pages --------

    def show_home(self) -> None:
        self.current_page = HOME_PAGE

    def show_form(self) -> None:
        self.current_page = FORM_PAGE

    # -------- form --------

    def update_field(self, name: str, value: str) -> None:
        self.form.update_field(name, value)

    def handle_image_upload(self, path: Union[str, Path, None]) -> None:
        """Read the selected file into the form's image as a data URL; no selection is a no-op."""
        if path:
            self.form.image = file_to_data_url(path)

    def begin_edit(self, index: int) -> None:
        self.form.load(self.records[index], index)
        self.show_form()

    def reset_form(self) -> None:
        self.form.reset()

    # -------- persistence --------

    async def load_animals(self) -> List[AnimalRecord]:
        self.records = list(await self.gateway.list_all())
        return self.records

    async def submit(self) -> Optional[str]:
        """
        Create (or update, when a record is loaded for editing) from the form.
        Returns the record id, or None when the submission was rejected locally
        or by the store. On failure the form is left untouched so the user can retry.
        """
        try:
            fields = self.form.validate()
        except ValidationError as e:
            print(f"[warn] submission rejected: {e}", file=sys.stderr)
            self.alert(INCOMPLETE_MESSAGE)
            return None

        try:
            if self.form.is_update:
                doc_id = self.form.edit_doc_id
                assert doc_id is not None
                await self.gateway.update(doc_id, fields)
            else:
                doc_id = await self.gateway.create(fields)
            await self.load_animals()
        except PersistenceError as e:
            print(f"[error] Firestore error: {e}", file=sys.stderr)
            self.alert(SAVE_FAILED_MESSAGE)
            return None

        self.reset_form()
        return doc_id

    async def request_delete(self, index: int) -> DeleteState:
        """
        idle -> confirming -> deleted | cancelled; a cancel settles back to idle.
        Returns the outcome: DELETED, CANCELLED, or IDLE when the store
        rejected the delete (list and form untouched).
        Declining makes no remote call. Deleting the record that is loaded
        into the form also resets the form.
        """
        record = self.records[index]
        self.delete_state = DeleteState.CONFIRMING
        if not self.confirm(f'Delete "{record["name"]}"?'):
            self.delete_state = DeleteState.IDLE
            return DeleteState.CANCELLED

        doc_id = record["id"]
        try:
            await self.gateway.delete(doc_id)
            await self.load_animals()
        except PersistenceError as e:
            print(f"[error] Firestore error: {e}", file=sys.stderr)
            self.alert(DELETE_FAILED_MESSAGE)
            self.delete_state = DeleteState.IDLE
            return DeleteState.IDLE

        if self.form.edit_doc_id == doc_id:
            self.reset_form()
        self.delete_state = DeleteState.DELETED
        return DeleteState.DELETED
