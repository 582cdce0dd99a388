from __future__ import annotations

import json

import jsonschema
import pytest
import yaml
from jsonschema.exceptions import ValidationError

from oilforms.config.loader import SCHEMA_PATH

"""Config schema contract test (bundled oilforms/config/schema.json)."""


def _schema() -> dict:
    return json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))


def test_config_schema_valid_example(sample_config_yaml: str):
    jsonschema.validate(yaml.safe_load(sample_config_yaml), _schema())


def test_config_schema_accepts_empty_mapping():
    jsonschema.validate({}, _schema())


@pytest.mark.parametrize(
    "config",
    [
        {"unknown_key": 1},
        {"header_scan_limit": 0},
        {"forms_per_page": "2"},
        {"forms_per_page": 3},
        {"station_sentinel": ""},
        {"output_directory": None},
    ],
)
def test_config_schema_rejects_invalid(config: dict):
    with pytest.raises(ValidationError):
        jsonschema.validate(config, _schema())


def test_example_config_matches_schema():
    example = SCHEMA_PATH.parents[2] / "config" / "forms.example.yml"
    jsonschema.validate(yaml.safe_load(example.read_text(encoding="utf-8")), _schema())
