#!/usr/bin/env python3

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from json_schema_tree.json_schema_tree import json_schema_tree

SCHEMAS_DIR = Path(__file__).parent / "test_data" / "schemas"


class TestCli:
    """Test cases for the json_schema_tree command"""

    def test_prints_tree(self):
        result = CliRunner().invoke(json_schema_tree, [str(SCHEMAS_DIR / "geometry.schema.json")])
        assert result.exit_code == 0, result.output
        assert '(root): object "Geometry"' in result.output
        assert '  origin: object "Point"' in result.output

    def test_writes_output_file(self, tmp_path):
        output = tmp_path / "tree.txt"
        result = CliRunner().invoke(json_schema_tree, [str(SCHEMAS_DIR / "geometry.schema.json"), "--output", str(output)])
        assert result.exit_code == 0, result.output
        assert "    [items]: object" in output.read_text()

    def test_schema_error_exit_code(self):
        result = CliRunner().invoke(json_schema_tree, [str(SCHEMAS_DIR / "missing_type.schema.json")])
        assert result.exit_code == 1
        assert "schema (root).x - type is required" in result.output

    def test_config_file(self, tmp_path):
        schema = tmp_path / "latin.schema.json"
        schema.write_bytes(b'{"$schema": "http://json-schema.org/draft-04/schema#", "type": "string", "title": "caf\xe9"}')

        result = CliRunner().invoke(json_schema_tree, [str(schema)])
        assert result.exit_code == 1
        assert "failed to decode" in result.output

        config = tmp_path / "config.json"
        config.write_text(json.dumps({"encoding": "latin-1", "unknown_option": True}))
        result = CliRunner().invoke(json_schema_tree, [str(schema), "--config", str(config)])
        assert result.exit_code == 0, result.output
        assert '(root): string "café"' in result.output


if __name__ == "__main__":
    pytest.main([__file__])
