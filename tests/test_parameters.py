"""
Unit tests for BoundedIntegerParameter
"""

import math
from unittest.mock import MagicMock

import pytest

from components.forms import ScriptedForm
from models.parameters import BoundedIntegerParameter, DialogParameter, is_int, INT_MIN, INT_MAX


# === is_int ===

@pytest.mark.parametrize("value", [3.0, 0.0, -0.0, -7.0, 1e15, float(INT_MAX)])
def test_is_int_accepts_integral_floats(value):
    assert is_int(value)


@pytest.mark.parametrize("value", [3.5, -2.5, 0.1, math.nan, math.inf, -math.inf])
def test_is_int_rejects_fractions_and_non_finite(value):
    assert not is_int(value)


# === Construction ===

def test_defaults_are_unbounded_and_valid():
    param = BoundedIntegerParameter(5, "Count")

    assert param.get_value() == 5
    assert param.label == "Count"
    assert param.units == ""
    assert param.get_min() == INT_MIN
    assert param.get_max() == INT_MAX
    assert param.get_error() is None
    assert not param.has_error()


def test_constructor_validates_starting_value():
    param = BoundedIntegerParameter(2**40, "Count")

    assert param.get_error() == "Count must be less than or equal to 2147483647."


def test_constructor_in_range_value_has_no_error():
    assert BoundedIntegerParameter(INT_MIN, "Count").get_error() is None
    assert BoundedIntegerParameter(INT_MAX, "Count").get_error() is None


def test_units_are_kept():
    param = BoundedIntegerParameter(5, "Radius", "px")
    assert param.units == "px"


def test_is_a_dialog_parameter():
    assert isinstance(BoundedIntegerParameter(1, "x"), DialogParameter)


def test_label_and_units_are_read_only():
    param = BoundedIntegerParameter(5, "Radius", "px")
    with pytest.raises(AttributeError):
        param.label = "Other"
    with pytest.raises(AttributeError):
        param.units = "nm"


# === Bounds ===

@pytest.mark.parametrize("value", [0, 3, 10])
def test_value_inside_bounds_has_no_error(value):
    param = BoundedIntegerParameter(value, "Radius")
    param.set_bounds(0, 10)
    assert param.get_error() is None


@pytest.mark.parametrize("value", [-1, 11])
def test_value_outside_full_range(value):
    param = BoundedIntegerParameter(value, "Radius")
    param.set_bounds(0, 10)
    assert param.get_error() == "Radius is not in the range [0..10]."


def test_upper_bound_only_message():
    param = BoundedIntegerParameter(300, "Offset")
    param.set_bounds(INT_MIN, 255)
    assert param.get_error() == "Offset must be less than or equal to 255."


def test_lower_bound_only_message():
    param = BoundedIntegerParameter(0, "Iterations")
    param.set_bounds(1, INT_MAX)
    assert param.get_error() == "Iterations must be greater than or equal to 1."


def test_set_bounds_clears_error_when_value_fits_again():
    param = BoundedIntegerParameter(20, "Radius")
    param.set_bounds(0, 10)
    assert param.has_error()

    param.set_bounds(0, 50)
    assert param.get_error() is None


def test_inverted_bounds_always_error():
    param = BoundedIntegerParameter(3, "Radius")
    param.set_bounds(5, 1)
    assert param.get_error() == "Radius is not in the range [5..1]."


def test_get_value_ignores_error_state():
    param = BoundedIntegerParameter(99, "Radius")
    param.set_bounds(0, 10)
    assert param.get_value() == 99


# === Dialog ===

def test_add_to_dialog_registers_formatted_field():
    form = MagicMock()
    param = BoundedIntegerParameter(7, "Radius", "px")

    param.add_to_dialog(form)

    form.add_numeric_field.assert_called_once_with("Radius", 7, 0, 9, "px")


def test_add_to_dialog_does_not_validate():
    param = BoundedIntegerParameter(7, "Radius")
    param.read_from_dialog(ScriptedForm(["x"]))
    assert param.get_error() == "Radius is not a number."

    param.add_to_dialog(MagicMock())

    assert param.get_error() == "Radius is not a number."


def test_read_integral_value_in_bounds():
    param = BoundedIntegerParameter(1, "Radius")
    param.set_bounds(0, 10)

    param.read_from_dialog(ScriptedForm([7.0]))

    assert param.get_value() == 7
    assert isinstance(param.get_value(), int)
    assert param.get_error() is None


def test_read_nan_sets_error_and_keeps_value():
    param = BoundedIntegerParameter(4, "Radius")

    param.read_from_dialog(ScriptedForm(["not a number"]))

    assert param.get_error() == "Radius is not a number."
    assert param.get_value() == 4


def test_read_fraction_sets_error_and_keeps_value():
    param = BoundedIntegerParameter(4, "Radius")

    param.read_from_dialog(ScriptedForm([4.5]))

    assert param.get_error() == "Radius is not an integer."
    assert param.get_value() == 4


def test_read_infinity_is_not_an_integer():
    param = BoundedIntegerParameter(4, "Radius")
    param.read_from_dialog(ScriptedForm([math.inf]))
    assert param.get_error() == "Radius is not an integer."


def test_read_out_of_bounds_value_is_stored_with_error():
    param = BoundedIntegerParameter(1, "Radius")
    param.set_bounds(0, 10)

    param.read_from_dialog(ScriptedForm([12.0]))

    assert param.get_value() == 12
    assert param.get_error() == "Radius is not in the range [0..10]."


def test_valid_read_clears_previous_content_error():
    param = BoundedIntegerParameter(1, "Radius")
    form = ScriptedForm(["abc", 3.0])

    param.read_from_dialog(form)
    assert param.has_error()

    param.read_from_dialog(form)
    assert param.get_error() is None
    assert param.get_value() == 3


def test_read_consumes_exactly_one_number():
    form = MagicMock()
    form.read_next_number.return_value = 2.0
    param = BoundedIntegerParameter(1, "Radius")

    param.read_from_dialog(form)

    form.read_next_number.assert_called_once_with()


def test_read_value_beyond_sentinel_range_reports_bound():
    param = BoundedIntegerParameter(0, "Count")

    param.read_from_dialog(ScriptedForm([float(2**40)]))

    assert param.get_value() == 2**40
    assert param.get_error() == f"Count must be less than or equal to {INT_MAX}."


# === Preferences ===

def test_save_then_read_round_trips(memory_store):
    saved = BoundedIntegerParameter(42, "Radius", prefs=memory_store)
    saved.save_to_prefs("plugin.Filter", "radius")

    restored = BoundedIntegerParameter(0, "Radius", prefs=memory_store)
    restored.read_from_prefs("plugin.Filter", "radius")

    assert restored.get_value() == 42
    assert restored.get_error() is None


def test_read_from_prefs_applies_bounds(memory_store):
    BoundedIntegerParameter(42, "Radius", prefs=memory_store).save_to_prefs("plugin.Filter", "radius")

    restored = BoundedIntegerParameter(0, "Radius", prefs=memory_store)
    restored.set_bounds(0, 10)
    restored.read_from_prefs("plugin.Filter", "radius")

    assert restored.get_value() == 42
    assert restored.get_error() == "Radius is not in the range [0..10]."


def test_read_from_prefs_falls_back_to_current_value(memory_store):
    param = BoundedIntegerParameter(8, "Radius", prefs=memory_store)
    param.read_from_prefs("plugin.Filter", "missing")
    assert param.get_value() == 8


def test_prefs_default_to_process_store(fresh_default_store):
    param = BoundedIntegerParameter(6, "Radius")
    param.save_to_prefs("plugin.Filter", "radius")

    assert param.prefs() is fresh_default_store
    assert fresh_default_store.get_int("plugin.Filter", "radius", 0) == 6


def test_save_uses_put_int():
    store = MagicMock()
    param = BoundedIntegerParameter(6, "Radius", prefs=store)

    param.save_to_prefs(BoundedIntegerParameter, "radius")

    store.put_int.assert_called_once_with(BoundedIntegerParameter, "radius", 6)


def test_repr_mentions_state():
    param = BoundedIntegerParameter(6, "Radius")
    text = repr(param)
    assert "Radius" in text
    assert "value=6" in text
