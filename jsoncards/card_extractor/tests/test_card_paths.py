import pytest

from jsoncards.card_extractor import PathNotFound, get_at_path, set_at_path
from jsoncards.card_extractor.paths import child_path, path_segments


def test_child_path():
    assert child_path("$", "a") == "$.a"
    assert child_path("$.a", "b") == "$.a.b"


def test_path_segments():
    assert path_segments("$") == []
    assert path_segments("$.a.b") == ["a", "b"]
    with pytest.raises(PathNotFound):
        path_segments("a.b")


def test_get_at_path():
    doc = {"a": {"b": [1, 2]}}
    assert get_at_path(doc, "$") is doc
    assert get_at_path(doc, "$.a.b") == [1, 2]


def test_get_at_path_with_dotted_key():
    doc = {"a.b": {"c": 1}, "a": {"x": 2}}
    assert get_at_path(doc, "$.a.b.c") == 1
    assert get_at_path(doc, "$.a.x") == 2


def test_missing_path():
    with pytest.raises(PathNotFound):
        get_at_path({"a": {"b": 1}}, "$.a.c")
    with pytest.raises(PathNotFound):
        get_at_path({"a": [{"b": 1}]}, "$.a.b")


def test_set_at_path_copies_along_path_only():
    sibling = {"keep": True}
    doc = {"a": {"b": {"c": 1}, "s": sibling}, "z": [1]}
    updated = set_at_path(doc, "$.a.b", {"c": 2, "d": 3})
    assert updated == {"a": {"b": {"c": 2, "d": 3}, "s": {"keep": True}}, "z": [1]}
    assert doc["a"]["b"] == {"c": 1}
    assert updated["a"]["s"] is sibling
    assert updated["z"] is doc["z"]


def test_set_at_root_replaces_document():
    assert set_at_path({"a": 1}, "$", [1, 2]) == [1, 2]
