"""Unit tests for Baseline dataset loading."""

import json

import pytest

from baseline_check.catalog import CATALOG
from baseline_check.dataset import DatasetError, default_baseline_data, load_baseline_data, parse_baseline_data


class TestBundledDataset:
    def test_loads(self):
        data = load_baseline_data()
        assert data["grid"] is True
        assert data["css-anchor-positioning"] is False

    def test_some_features_left_unknown(self):
        assert "input-multiple" not in load_baseline_data()

    def test_keys_are_catalog_features(self):
        assert set(load_baseline_data()) <= set(CATALOG)

    def test_read_only(self):
        data = load_baseline_data()
        with pytest.raises(TypeError):
            data["grid"] = False

    def test_default_is_cached(self):
        assert default_baseline_data() is default_baseline_data()


class TestLoadFromPath:
    def test_custom_file(self, tmp_path):
        path = tmp_path / "baseline.json"
        path.write_text(json.dumps({"grid": True, "fetch": False}), encoding="utf-8")
        assert dict(load_baseline_data(path)) == {"grid": True, "fetch": False}

    def test_missing_file(self, tmp_path):
        with pytest.raises(DatasetError, match="cannot be read") as exc_info:
            load_baseline_data(tmp_path / "missing.json")
        assert exc_info.value.source.endswith("missing.json")


class TestParseBaselineData:
    def test_null_dropped(self):
        data = parse_baseline_data('{"grid": true, "css-scope": null}')
        assert dict(data) == {"grid": True}

    def test_empty_object(self):
        assert dict(parse_baseline_data("{}")) == {}

    def test_invalid_json(self):
        with pytest.raises(DatasetError, match="not valid JSON"):
            parse_baseline_data("{grid: true")

    def test_top_level_array_rejected(self):
        with pytest.raises(DatasetError, match="JSON object"):
            parse_baseline_data('["grid"]')

    @pytest.mark.parametrize("value", ['"yes"', "1", "0", '{"chrome": true}'])
    def test_non_bool_rejected(self, value):
        with pytest.raises(DatasetError, match="true, false or null"):
            parse_baseline_data('{"grid": %s}' % value)
