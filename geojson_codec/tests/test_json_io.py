"""Tests for services/json_io.py — JSON text boundary."""

from __future__ import annotations

import sys

import pytest


class TestLoadJson:
    """Test load_json()."""

    def test_object(self):
        from geojson_codec.services.json_io import load_json
        assert load_json('{"type":"Point"}') == {"type": "Point"}

    @pytest.mark.parametrize("text", ["{", "[1, 2]", "null", ""])
    def test_not_an_object(self, text):
        from geojson_codec.services.errors import MalformedJSON
        from geojson_codec.services.json_io import load_json
        with pytest.raises(MalformedJSON):
            load_json(text)

    def test_wrong_input_type(self):
        from geojson_codec.services.errors import MalformedJSON
        from geojson_codec.services.json_io import load_json
        with pytest.raises(MalformedJSON):
            load_json(12)

    @pytest.mark.skipif(
        not hasattr(sys, "get_int_max_str_digits"),
        reason="integer digit limit added in Python 3.11",
    )
    def test_integer_over_digit_limit(self):
        from geojson_codec.services.errors import MalformedJSON
        from geojson_codec.services.json_io import load_json
        previous = sys.get_int_max_str_digits()
        sys.set_int_max_str_digits(640)
        try:
            with pytest.raises(MalformedJSON):
                load_json('{"n":' + "9" * 1000 + "}")
        finally:
            sys.set_int_max_str_digits(previous)
