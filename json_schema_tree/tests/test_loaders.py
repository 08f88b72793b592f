from unittest.mock import patch

import pytest
import requests

from json_schema_tree.config import ParserConfig
from json_schema_tree.errors import DecodeError, FetchError
from json_schema_tree.loaders import DocumentLoader
from json_schema_tree.pool import SchemaPool
from json_schema_tree.reference import JsonReference


class TestDocumentLoader:
    """Test cases for DocumentLoader transports"""

    def test_registered_document_skips_transport(self):
        loader = DocumentLoader()
        document = {"type": "object"}
        loader.register("http://example.com/a.json#/ignored", document)

        with patch("json_schema_tree.loaders.requests.get") as mock_get:
            assert loader.load("http://example.com/a.json") is document
        mock_get.assert_not_called()

    def test_http(self):
        loader = DocumentLoader(ParserConfig(http_timeout=5))
        with patch("json_schema_tree.loaders.requests.get") as mock_get:
            mock_get.return_value.text = '{"type": "string"}'
            assert loader.load("https://example.com/a.json") == {"type": "string"}
        mock_get.assert_called_once_with("https://example.com/a.json", timeout=5)

    def test_http_status_error(self):
        loader = DocumentLoader()
        with patch("json_schema_tree.loaders.requests.get") as mock_get:
            mock_get.return_value.raise_for_status.side_effect = requests.HTTPError("404 Not Found")
            with pytest.raises(FetchError) as excinfo:
                loader.load("http://example.com/missing.json")
        assert excinfo.value.uri == "http://example.com/missing.json"
        assert "404" in str(excinfo.value)

    def test_http_connection_error(self):
        loader = DocumentLoader()
        with patch("json_schema_tree.loaders.requests.get", side_effect=requests.ConnectionError("refused")):
            with pytest.raises(FetchError):
                loader.load("http://example.com/a.json")

    def test_http_invalid_json(self):
        loader = DocumentLoader()
        with patch("json_schema_tree.loaders.requests.get") as mock_get:
            mock_get.return_value.text = "<html>not json</html>"
            with pytest.raises(DecodeError):
                loader.load("http://example.com/a.json")

    def test_file(self, tmp_path):
        path = tmp_path / "my schema.json"
        path.write_text('{"type": "integer"}', encoding="utf-8")
        assert DocumentLoader().load(path.as_uri()) == {"type": "integer"}

    def test_missing_file(self, tmp_path):
        with pytest.raises(FetchError):
            DocumentLoader().load((tmp_path / "missing.json").as_uri())

    def test_invalid_json_file(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(DecodeError):
            DocumentLoader().load(path.as_uri())

    def test_unsupported_scheme(self):
        with pytest.raises(FetchError) as excinfo:
            DocumentLoader().load("ftp://example.com/a.json")
        assert "Unsupported URL scheme" in str(excinfo.value)

    def test_file_not_in_configured_encoding(self, tmp_path):
        path = tmp_path / "latin.json"
        path.write_bytes(b'{"title": "\xff"}')
        with pytest.raises(DecodeError) as excinfo:
            DocumentLoader().load(path.as_uri())
        assert excinfo.value.uri == path.as_uri()

    def test_file_in_configured_encoding(self, tmp_path):
        path = tmp_path / "latin.json"
        path.write_bytes(b'{"title": "\xff"}')
        assert DocumentLoader(ParserConfig(encoding="latin-1")).load(path.as_uri()) == {"title": "ÿ"}

    def test_registered_uri_is_normalized(self):
        loader = DocumentLoader()
        document = {"type": "object"}
        loader.register("HTTP://example.com/a.json", document)

        pool = SchemaPool(loader)
        with patch("json_schema_tree.loaders.requests.get") as mock_get:
            assert loader.load("http://example.com/a.json") is document
            assert pool.get_document(JsonReference("http://example.com/a.json#/type")).document is document
        mock_get.assert_not_called()
