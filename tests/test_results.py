"""Tests for result assembly, schema validation, writing, and run IDs."""

import json
import re
from pathlib import Path

import pytest

from egostats.analysis import SeparationStats
from egostats.config import DEFAULT_CONFIG
from egostats.graph import build_graph
from egostats.results import (
    build_result,
    generate_run_id,
    load_result,
    validate_result,
    write_result,
)


@pytest.fixture
def valid_result():
    return build_result(
        config=DEFAULT_CONFIG,
        run_id="0_n4_e3_20261019_120000",
        node_count=4,
        edge_count=3,
        component_count=1,
        degree_distribution={2: 2, 1: 2},
        separation=SeparationStats(mean=20 / 12, std_dev=0.745, median=1.5, sample_size=12),
        inventory={"0.edges": 3},
    )


class TestBuildResult:
    """build_result produces a schema-conformant dict."""

    def test_valid(self, valid_result):
        assert validate_result(valid_result) == []

    def test_degree_keys_sorted_strings(self, valid_result):
        dist = valid_result["metrics"]["degree_distribution"]
        assert list(dist.keys()) == ["1", "2"]

    def test_scalars(self, valid_result):
        scalars = valid_result["metrics"]["scalars"]
        assert scalars["median_separation"] == 1.5
        assert scalars["distance_sample_size"] == 12
        assert scalars["component_count"] == 1

    def test_json_serializable(self, valid_result):
        json.dumps(valid_result)


class TestValidateResult:
    """validate_result rejects malformed dicts."""

    def test_missing_fields(self):
        errors = validate_result({"schema_version": "1.0"})
        assert any("Missing required" in e for e in errors)

    def test_missing_scalars(self, valid_result):
        valid_result["metrics"] = {"degree_distribution": {}}
        errors = validate_result(valid_result)
        assert any("scalars" in e for e in errors)

    def test_missing_scalar_field(self, valid_result):
        del valid_result["metrics"]["scalars"]["median_separation"]
        errors = validate_result(valid_result)
        assert any("median_separation" in e for e in errors)

    def test_negative_statistic(self, valid_result):
        valid_result["metrics"]["scalars"]["mean_separation"] = -1.0
        errors = validate_result(valid_result)
        assert any("mean_separation" in e for e in errors)

    def test_bad_degree_key(self, valid_result):
        valid_result["metrics"]["degree_distribution"]["x"] = 1
        errors = validate_result(valid_result)
        assert any("'x'" in e for e in errors)

    def test_distribution_total_mismatch(self, valid_result):
        valid_result["metrics"]["degree_distribution"]["3"] = 5
        errors = validate_result(valid_result)
        assert any("node_count" in e for e in errors)

    def test_bad_timestamp(self, valid_result):
        valid_result["timestamp"] = "yesterday"
        errors = validate_result(valid_result)
        assert any("ISO 8601" in e for e in errors)

    def test_bad_tags_type(self, valid_result):
        valid_result["tags"] = "not-a-list"
        errors = validate_result(valid_result)
        assert any("tags" in e for e in errors)


class TestWriteLoad:
    """write_result / load_result."""

    def test_roundtrip(self, valid_result, tmp_path: Path):
        path = write_result(valid_result, tmp_path)
        assert path == tmp_path / valid_result["run_id"] / "result.json"
        assert load_result(path) == valid_result
        assert load_result(path.parent) == valid_result

    def test_invalid_not_written(self, valid_result, tmp_path: Path):
        del valid_result["metrics"]
        with pytest.raises(ValueError, match="validation failed"):
            write_result(valid_result, tmp_path)
        assert not any(tmp_path.iterdir())


class TestGenerateRunId:
    """Run ID follows the scannable slug format."""

    def test_format(self):
        graph = build_graph([("1", "2"), ("2", "3"), ("3", "4")])
        run_id = generate_run_id(DEFAULT_CONFIG, graph)
        assert re.fullmatch(r"0_n4_e3_\d{8}_\d{6}", run_id)
