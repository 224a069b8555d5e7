"""Tests for config: YAML loading and validation."""

import pytest

from config import AggregationConfig, OutputConfig, config_from_mapping, load_config


def test_load_config_defaults(tmp_path):
    p = tmp_path / "config.yaml"
    p.write_text("input:\n  actors: [a.json, b.json]\n", encoding="utf-8")
    cfg = load_config(str(p))
    assert cfg.input.actors == ["a.json", "b.json"]
    assert not cfg.input.is_mixed
    assert cfg.aggregation == AggregationConfig()
    assert cfg.output == OutputConfig()


def test_load_config_full(tmp_path):
    p = tmp_path / "config.yaml"
    p.write_text(
        "aggregation:\n"
        "  moving_average_window: 5\n"
        "  classification_threshold: 10\n"
        "input:\n"
        "  producers: [p1.json]\n"
        "  consumers: [c1.json, c2.json]\n"
        "output:\n"
        "  print: false\n"
        "  json_path: out/group.json\n"
        "  csv_path: '  '\n"
        "  log_stages: true\n",
        encoding="utf-8",
    )
    cfg = load_config(str(p))
    assert cfg.aggregation.moving_average_window == 5
    assert cfg.aggregation.classification_threshold == 10
    assert cfg.input.is_mixed
    assert cfg.input.consumers == ["c1.json", "c2.json"]
    assert cfg.output.print is False
    assert cfg.output.json_path == "out/group.json"
    assert cfg.output.csv_path is None
    assert cfg.output.log_stages is True


def test_missing_input_section():
    with pytest.raises(ValueError, match="'input' ausente"):
        config_from_mapping({})


def test_input_without_files():
    with pytest.raises(ValueError, match="nenhum arquivo"):
        config_from_mapping({"input": {"producers": []}})


def test_actors_cannot_mix_with_producers():
    with pytest.raises(ValueError, match="input.actors"):
        config_from_mapping({"input": {"actors": ["a"], "producers": ["p"]}})


def test_input_paths_must_be_list():
    with pytest.raises(ValueError, match="input.consumers"):
        config_from_mapping({"input": {"consumers": "c.json"}})


@pytest.mark.parametrize("value", [0, -3, "abc"])
def test_invalid_window(value):
    with pytest.raises(ValueError, match="moving_average_window"):
        config_from_mapping(
            {"aggregation": {"moving_average_window": value}, "input": {"actors": ["a"]}}
        )


def test_invalid_threshold():
    with pytest.raises(ValueError, match="classification_threshold"):
        config_from_mapping(
            {"aggregation": {"classification_threshold": 0}, "input": {"actors": ["a"]}}
        )


def test_output_must_be_mapping():
    with pytest.raises(ValueError, match="'output'"):
        config_from_mapping({"input": {"actors": ["a"]}, "output": ["x"]})
