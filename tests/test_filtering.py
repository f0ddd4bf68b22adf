import copy
from animals_catalog.filtering import compute_filtered_view, matches_query

def test_query_matches_name_location_or_description(records):
    assert [r["id"] for r in compute_filtered_view(records, "leopard", "")] == ["a1"]
    assert [r["id"] for r in compute_filtered_view(records, "zealand", "")] == ["c3"]
    assert [r["id"] for r in compute_filtered_view(records, "BIG CAT", "")] == ["a1"]
    assert compute_filtered_view(records, "mammal", "") == []  # category is not searched

def test_every_match_contains_query(records):
    for q in ["a", "r", "turtle", "xyz", "Ka"]:
        for r in compute_filtered_view(records, q, ""):
            assert any(q.lower() in r[f].lower() for f in ("name", "location", "description"))

def test_category_gate(records):
    assert [r["id"] for r in compute_filtered_view(records, "", "reptile")] == ["b2"]
    assert compute_filtered_view(records, "", "") == records
    assert compute_filtered_view(records, "", "Reptile") == []  # exact match only

def test_query_and_category_intersect(records):
    assert compute_filtered_view(records, "a", "bird") == [records[2]]
    assert compute_filtered_view(records, "leopard", "bird") == []

def test_pure_and_repeatable(records):
    snapshot = copy.deepcopy(records)
    first = compute_filtered_view(records, "r", "mammal")
    second = compute_filtered_view(records, "r", "mammal")
    assert first == second
    assert records == snapshot

def test_missing_fields_read_as_empty():
    assert not matches_query({"name": "Okapi"}, "congo")
    assert matches_query({"name": "Okapi", "location": None}, "oka")
