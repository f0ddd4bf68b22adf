"""
TypedDict models for animal records and the Firestore documents that hold them.

Includes:
- AnimalFields: the six editable fields (create/update payload)
- AnimalRecord: AnimalFields plus the store-assigned id
- FirestoreValue / FirestoreDocument: REST wire shapes of the "animals" collection
- FirestoreListPage: one page of GET .../documents/animals

"""

from __future__ import annotations
from typing import Dict, List, TypedDict

EDITABLE_FIELDS = ("name", "location", "population", "description", "category", "image")

# population is numeric-as-text, image is a data URL
class AnimalFields(TypedDict):
    name: str
    location: str
    population: str
    description: str
    category: str
    image: str

class AnimalRecord(AnimalFields, total=False):
    id: str                  # absent until first persisted

# {"stringValue": "..."} / {"integerValue": "12"} / {"nullValue": None} ...
FirestoreValue = Dict[str, object]

class FirestoreDocument(TypedDict, total=False):
    name: str                # projects/<p>/databases/(default)/documents/animals/<id>
    fields: Dict[str, FirestoreValue]
    createTime: str
    updateTime: str

class FirestoreListPage(TypedDict, total=False):
    documents: List[FirestoreDocument]
    nextPageToken: str
