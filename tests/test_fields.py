"""Tests for the field configuration table."""

import dataclasses

import pytest

from cron_parser.fields import FIELD_SPECS, LABEL_WIDTH, format_label


def test_field_specs_order_and_bounds():
    assert [(f.name, f.min, f.max) for f in FIELD_SPECS] == [
        ("minute", 0, 59),
        ("hour", 0, 23),
        ("day of month", 1, 31),
        ("month", 1, 12),
        ("day of week", 0, 6),
    ]


def test_field_spec_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        FIELD_SPECS[0].max = 60  # type: ignore[misc]


def test_format_label_pads_to_column():
    assert LABEL_WIDTH == 14
    assert format_label("hour") == "hour          "
    assert format_label("day of month") == "day of month  "
