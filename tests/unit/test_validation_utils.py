"""
Unit tests for validation utilities.
"""
import pytest

from nextra.utils.validation_utils import is_blank


@pytest.mark.parametrize("value", [None, "", "   ", "\t\n", 42, ["name"]])
def test_blank_values(value):
    assert is_blank(value)


@pytest.mark.parametrize("value", ["a", " Bob ", "0"])
def test_non_blank_values(value):
    assert not is_blank(value)
