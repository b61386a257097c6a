import json

import pytest

from models.parameters import BoundedIntegerParameter
from services.preferences_store import (
    JsonPreferencesStore,
    MemoryPreferencesStore,
    namespace_name,
)


class Deconvolve:
    pass


def test_namespace_name_for_string_and_class():
    assert namespace_name("demo") == "demo"
    assert namespace_name(Deconvolve) == f"{__name__}.Deconvolve"


def test_namespace_name_for_instance_uses_class():
    assert namespace_name(Deconvolve()) == namespace_name(Deconvolve)


def test_memory_store_round_trip():
    store = MemoryPreferencesStore()
    store.put_int(Deconvolve, "Iterations", 12)

    assert store.get_int(Deconvolve, "Iterations", 0) == 12
    assert store.get_int(Deconvolve, "Radius", 5) == 5


def test_memory_store_keys_are_scoped_by_namespace():
    store = MemoryPreferencesStore()
    store.put_int("a", "x", 1)
    store.put_int("b", "x", 2)

    assert store.get_int("a", "x", 0) == 1
    assert store.get_int("b", "x", 0) == 2


def test_memory_store_clear():
    store = MemoryPreferencesStore()
    store.put_int("a", "x", 1)
    store.clear()
    assert store.get_int("a", "x", 7) == 7


def test_json_store_missing_file_starts_empty(tmp_path):
    store = JsonPreferencesStore(tmp_path / "prefs.json")
    assert store.get_int("demo", "Radius", 3) == 3


def test_json_store_persists_across_instances(tmp_path):
    path = tmp_path / "nested" / "prefs.json"
    JsonPreferencesStore(path).put_int(Deconvolve, "Iterations", 12)

    reopened = JsonPreferencesStore(path)
    assert reopened.get_int(Deconvolve, "Iterations", 0) == 12

    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    assert data == {namespace_name(Deconvolve): {"Iterations": 12}}


def test_json_store_invalid_json_raises(tmp_path):
    path = tmp_path / "prefs.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(json.JSONDecodeError):
        JsonPreferencesStore(path)


def test_json_store_non_object_root_is_ignored(tmp_path):
    path = tmp_path / "prefs.json"
    path.write_text("[1, 2]", encoding="utf-8")

    store = JsonPreferencesStore(path)
    assert store.get_int("demo", "Radius", 3) == 3


@pytest.mark.parametrize("stored", ["12", 1.5, True, None])
def test_json_store_non_integer_value_uses_default(tmp_path, log_output, stored):
    path = tmp_path / "prefs.json"
    path.write_text(json.dumps({"demo": {"Radius": stored}}), encoding="utf-8")

    store = JsonPreferencesStore(path)

    assert store.get_int("demo", "Radius", 3) == 3
    assert "not an integer" in log_output.getvalue()


def test_parameter_round_trip_through_json_file(tmp_path):
    path = tmp_path / "prefs.json"
    first = BoundedIntegerParameter(25, "Radius", prefs=JsonPreferencesStore(path))
    first.save_to_prefs(Deconvolve, "Radius")

    second = BoundedIntegerParameter(0, "Radius", prefs=JsonPreferencesStore(path))
    second.set_bounds(0, 20)
    second.read_from_prefs(Deconvolve, "Radius")

    assert second.get_value() == 25
    assert second.get_error() == "Radius is not in the range [0..20]."


def test_json_store_failed_write_keeps_previous_values(tmp_path, log_output):
    directory = tmp_path / "d"
    store = JsonPreferencesStore(directory / "prefs.json")
    store.put_int("demo", "Radius", 3)

    # Replace the directory with a plain file so the next write cannot open it
    (directory / "prefs.json").unlink()
    directory.rmdir()
    directory.write_text("", encoding="utf-8")

    with pytest.raises(OSError):
        store.put_int("demo", "Radius", 9)

    assert store.get_int("demo", "Radius", 0) == 3
    assert store.get_int("demo", "Other", 5) == 5
    assert "Failed to save preferences" in log_output.getvalue()


def test_json_store_unreadable_path_raises_and_logs(tmp_path, log_output):
    with pytest.raises(OSError):
        JsonPreferencesStore(tmp_path)

    assert "Failed to read preferences" in log_output.getvalue()
