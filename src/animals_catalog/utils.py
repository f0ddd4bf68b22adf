from __future__ import annotations
import base64, mimetypes
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from .models import EDITABLE_FIELDS, AnimalRecord, FirestoreDocument, FirestoreValue

FALLBACK_MIME = "application/octet-stream"

def file_to_data_url(path: Union[str, Path]) -> str:
    """Read a file into a base64 data URL; MIME guessed from the file name."""
    p = Path(path)
    mime, _ = mimetypes.guess_type(p.name)
    payload = base64.b64encode(p.read_bytes()).decode("ascii")
    return f"data:{mime or FALLBACK_MIME};base64,{payload}"

def doc_id_from_name(name: str) -> str:
    """'projects/p/databases/(default)/documents/animals/abc' -> 'abc'."""
    return name.rstrip("/").rsplit("/", 1)[-1]

def decode_value(value: Optional[FirestoreValue]) -> str:
    """
    Read a Firestore typed value back as text.
    Numbers and booleans written by other clients become their string form;
    null, missing, or unsupported (map/array/...) values read as "".
    """
    if not value:
        return ""
    if "stringValue" in value:
        return str(value["stringValue"])
    if "integerValue" in value:
        return str(value["integerValue"])
    if "doubleValue" in value:
        d = value["doubleValue"]
        return str(int(d)) if isinstance(d, float) and d.is_integer() else str(d)
    if "booleanValue" in value:
        return "true" if value["booleanValue"] else "false"
    return ""

def encode_fields(fields: Mapping[str, Any]) -> Dict[str, FirestoreValue]:
    """All editable fields are stored as strings; the id never goes on the wire."""
    return {k: {"stringValue": "" if fields.get(k) is None else str(fields.get(k))} for k in EDITABLE_FIELDS}

def document_to_record(doc: FirestoreDocument) -> AnimalRecord:
    raw = doc.get("fields", {})
    record: AnimalRecord = {k: decode_value(raw.get(k)) for k in EDITABLE_FIELDS}  # type: ignore[assignment]
    record["id"] = doc_id_from_name(doc["name"])
    return record
