import json

import pytest

from adapters.config_loader import load_combine_config
from adapters.config_writer import render_combine_config
from core.errors import ConfigParseError, ConfigReadError


CONFIG = {
    "swagger": "2.0",
    "info": {"title": "Combined", "version": "1.0.0"},
    "apis": [
        {"url": "http://pets/openapi.json", "paths": {"base": "/pets"}},
        {"url": "http://orders/openapi.yaml", "tags": {"rename": {"old": "new"}, "add": ["x"]}},
    ],
}


def test_loads_json_config_preserving_api_order(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(CONFIG), encoding="utf-8")

    config = load_combine_config(path)

    assert config.swagger == "2.0"
    assert config.info.title == "Combined"
    assert [api.url for api in config.apis] == ["http://pets/openapi.json", "http://orders/openapi.yaml"]
    assert config.apis[0].tags is None
    assert config.apis[1].tags.rename == {"old": "new"}
    assert config.apis[1].tags.add == ["x"]


@pytest.mark.parametrize("name", ["config.yaml", "config.yml"])
def test_loads_yaml_config_with_distinct_rename_and_add_keys(tmp_path, name):
    path = tmp_path / name
    path.write_text(
        "swagger: '2.0'\n"
        "info:\n"
        "  title: Combined\n"
        "  version: 1.0\n"
        "apis:\n"
        "  - url: http://pets/openapi.json\n"
        "    tags:\n"
        "      rename:\n"
        "        old: new\n"
        "      add:\n"
        "        - extra\n",
        encoding="utf-8",
    )

    config = load_combine_config(path)

    assert config.info.version == "1.0"
    assert config.apis[0].tags.rename == {"old": "new"}
    assert config.apis[0].tags.add == ["extra"]


def test_missing_file_is_a_read_error(tmp_path):
    with pytest.raises(ConfigReadError) as excinfo:
        load_combine_config(tmp_path / "nope.json")

    assert "nope.json" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, OSError)


def test_invalid_json_is_a_parse_error(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigParseError):
        load_combine_config(path)


def test_yaml_content_in_json_named_file_is_a_parse_error(tmp_path):
    path = tmp_path / "config.txt"
    path.write_text("swagger: '2.0'\n", encoding="utf-8")

    with pytest.raises(ConfigParseError):
        load_combine_config(path)


def test_api_without_url_is_a_parse_error(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"apis": [{"paths": {}}]}), encoding="utf-8")

    with pytest.raises(ConfigParseError):
        load_combine_config(path)


def test_non_object_document_is_a_parse_error(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ConfigParseError):
        load_combine_config(path)


def test_round_trip_without_apis_keeps_structure(tmp_path):
    source = {"swagger": "2.0", "info": {"title": "Combined", "version": "1.0.0"}, "apis": []}
    path = tmp_path / "config.json"
    path.write_text(json.dumps(source), encoding="utf-8")

    assert json.loads(render_combine_config(load_combine_config(path))) == source


def test_round_trip_keeps_unknown_keys_and_omits_absent_tags(tmp_path):
    source = {
        "swagger": "2.0",
        "info": {"title": "Combined", "version": "1.0.0", "description": "all apis"},
        "apis": [{"url": "http://pets/openapi.json", "paths": {"base": "/pets"}, "info": {"title": "x"}}],
        "basePath": "/api",
    }
    path = tmp_path / "config.json"
    path.write_text(json.dumps(source), encoding="utf-8")

    assert json.loads(render_combine_config(load_combine_config(path))) == source


def test_yaml_float_and_date_scalars_round_trip_as_written(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "swagger: 2.0\n"
        "info:\n"
        "  title: 2021-01-01\n"
        "  version: 1.10\n"
        "apis:\n"
        "  - url: http://pets/openapi.json\n",
        encoding="utf-8",
    )

    written = json.loads(render_combine_config(load_combine_config(path)))

    assert written["swagger"] == "2.0"
    assert written["info"] == {"title": "2021-01-01", "version": "1.10"}
