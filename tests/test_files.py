"""
File Tests - IniParser, JSON/YAML handlers and the IniStore load/save helpers.
"""

import logging

import pytest

from inijson import (
    IniParser,
    IniStore,
    InvalidDocument,
    JsonDocParser,
    YamlDocParser,
    from_json_text,
    from_yaml_text,
    to_json_text,
    to_yaml_text,
)

SAMPLE = """
; This is a comment
[Database]
host = localhost
port = 3306
user = app_user
password = S3cr3tP@ssw0rd

[Settings]
debug_mode = true
max_connections = 50
timeout_seconds = 30
"""


@pytest.fixture
def sample_ini(tmp_path):
    path = tmp_path / "demo.ini"
    path.write_text(SAMPLE, encoding="utf-8")
    return path


# =============================================================================
# IniParser
# =============================================================================

class TestIniParser:

    def test_read_typed(self, sample_ini):
        doc = IniParser(sample_ini).read()
        assert doc["Database"]["port"] == 3306
        assert doc["Settings"]["debug_mode"] is True
        assert doc["Database"]["password"] == "S3cr3tP@ssw0rd"

    def test_read_strings(self, sample_ini):
        doc = IniParser(sample_ini, typed=False).read()
        assert doc["Database"]["port"] == "3306"
        assert doc["Settings"]["debug_mode"] == "true"

    def test_write_then_read(self, tmp_path):
        path = tmp_path / "out.ini"
        doc = {"Features": {"caching_enabled": True, "cache_ttl": 3600}}
        IniParser(path).write(doc)
        assert path.read_text(encoding="utf-8") == "[Features]\ncaching_enabled = true\ncache_ttl = 3600\n"
        assert IniParser(path).read() == doc

    def test_write_empty_document(self, tmp_path):
        path = tmp_path / "empty.ini"
        IniParser(path).write({})
        assert path.read_text(encoding="utf-8") == ""

    def test_write_layout_options(self, tmp_path):
        path = tmp_path / "tight.ini"
        IniParser(path).write({"A": {"a": 1}, "B": {"b": 2}}, delimiter="=", blank_lines=0)
        assert path.read_text(encoding="utf-8") == "[A]\na=1\n[B]\nb=2\n"

    def test_undecodable_file_falls_back(self, tmp_path, caplog):
        path = tmp_path / "legacy.ini"
        path.write_bytes("[S]\nname = caf\u00e9 cr\u00e8me br\u00fbl\u00e9e\n".encode("cp1252"))
        with caplog.at_level(logging.WARNING):
            doc = IniParser(path, "utf-8").read()
        assert doc["S"]["name"].startswith("caf")
        assert "decoding failed" in caplog.text

    def test_str(self, tmp_path):
        path = tmp_path / "a.ini"
        assert str(IniParser(path, "utf-8")) == f"{path} (utf-8)"
        assert str(IniParser(path)) == f"{path} (default encoding)"

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(OSError):
            IniParser(tmp_path / "nope.ini").read()


# =============================================================================
# IniStore load / save
# =============================================================================

class TestStoreFiles:

    def test_load_modify_save(self, sample_ini, tmp_path):
        store = IniStore()
        store.load(sample_ini)
        assert store.get("Database", "port") == "3306"

        store.set("Database", "port", 5432)
        store.delete("Settings", "timeout_seconds")
        out = tmp_path / "saved.ini"
        store.save(out)

        again = IniStore()
        again.load(out)
        assert again.get("Database", "port") == "5432"
        assert again.get("Settings", "timeout_seconds") is None
        assert again.to_json() == store.to_json()


# =============================================================================
# JSON / YAML
# =============================================================================

class TestJson:

    def test_to_json_text(self):
        assert to_json_text({"S": {"a": 1, "b": True}}, indent=None) == '{"S": {"a": 1, "b": true}}'

    def test_from_json_text(self):
        doc = from_json_text('{"g": null, "S": {"a": 1.5, "b": "x"}}')
        assert doc == {"g": None, "S": {"a": 1.5, "b": "x"}}

    @pytest.mark.parametrize("text", [
        "[1, 2]",
        '{"S": {"deep": {"x": 1}}}',
        '{"S": [1, 2]}',
    ])
    def test_rejects_shapes_ini_cannot_hold(self, text):
        with pytest.raises(InvalidDocument):
            from_json_text(text)

    def test_file_round_trip(self, tmp_path):
        doc = {"Database": {"host": "localhost", "port": 5432}, "Empty": {}}
        handler = JsonDocParser(tmp_path / "doc.json")
        handler.write(doc)
        assert handler.read() == doc


class TestYaml:

    def test_to_yaml_text_keeps_order(self):
        assert to_yaml_text({"B": {"k": 1, "a": True}, "A": {"x": "y"}}) == "B:\n  k: 1\n  a: true\nA:\n  x: y\n"

    def test_from_yaml_text(self):
        assert from_yaml_text("S:\n  a: 1\n  b: text\n") == {"S": {"a": 1, "b": "text"}}

    def test_empty_stream(self):
        assert from_yaml_text("") == {}

    def test_rejects_scalar_stream(self):
        with pytest.raises(InvalidDocument):
            from_yaml_text("just a string")

    def test_file_round_trip(self, tmp_path):
        doc = {"g": "top", "S": {"flag": False, "ratio": 0.5}}
        handler = YamlDocParser(tmp_path / "doc.yaml")
        handler.write(doc)
        assert handler.read() == doc
