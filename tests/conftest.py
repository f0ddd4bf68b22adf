import pytest
from animals_catalog.errors import PersistenceError

class FakeGateway:
    """In-memory stand-in for AnimalsAPI; counts every call."""
    def __init__(self, records=None):
        self.docs = {r["id"]: {k: v for k, v in r.items() if k != "id"} for r in (records or [])}
        self.calls = {"list_all": 0, "create": 0, "update": 0, "delete": 0}
        self.created = []
        self.updated = []
        self.deleted = []
        self.fail_on = set()
        self._seq = 0

    def _maybe_fail(self, op):
        self.calls[op] += 1
        if op in self.fail_on:
            raise PersistenceError(op, "permission denied")

    async def list_all(self):
        self._maybe_fail("list_all")
        return [{**fields, "id": doc_id} for doc_id, fields in self.docs.items()]

    async def create(self, fields):
        self._maybe_fail("create")
        self._seq += 1
        doc_id = f"gen{self._seq}"
        self.created.append(dict(fields))
        self.docs[doc_id] = dict(fields)
        return doc_id

    async def update(self, doc_id, fields):
        self._maybe_fail("update")
        self.updated.append((doc_id, dict(fields)))
        self.docs[doc_id] = dict(fields)

    async def delete(self, doc_id):
        self._maybe_fail("delete")
        self.deleted.append(doc_id)
        del self.docs[doc_id]

def make_record(id, name, location="Somewhere", population="10", description="", category="mammal", image="data:image/png;base64,AA=="):
    return {"id": id, "name": name, "location": location, "population": population,
            "description": description, "category": category, "image": image}

@pytest.fixture
def records():
    return [
        make_record("a1", "Amur Leopard", location="Russia", population="100", description="rare big cat"),
        make_record("b2", "Hawksbill Turtle", location="Caribbean", population="8000", description="Sea turtle", category="reptile"),
        make_record("c3", "Kakapo", location="New Zealand", population="250", description="flightless parrot", category="bird"),
    ]

@pytest.fixture
def gateway(records):
    return FakeGateway(records)

@pytest.fixture
def empty_gateway():
    return FakeGateway()
