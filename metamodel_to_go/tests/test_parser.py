"""
Tests for loading the metamodel into the schema model.
"""

from __future__ import annotations

import dataclasses
import json

import pytest

from metamodel_to_go.pipeline import LoadError, MetaModelParser, load_metamodel


def enumeration(name="TraceValues", type_name="string", values=None, **extra):
    item = {
        "name": name,
        "type": {"kind": "base", "name": type_name},
        "values": values if values is not None else [{"name": "off", "value": "off"}],
    }
    item.update(extra)
    return item


def document(enumerations=(), aliases=(), **extra):
    doc = {"enumerations": list(enumerations), "typeAliases": list(aliases)}
    doc.update(extra)
    return doc


class TestMetaModelParser:
    def setup_method(self):
        self.parser = MetaModelParser()

    def test_parse_enumeration(self):
        model = self.parser.parse(
            document(
                [
                    enumeration(
                        "ErrorCodes",
                        "integer",
                        [
                            {"name": "ParseError", "value": -32700, "documentation": "Parse error."},
                            {"name": "InvalidRequest", "value": -32600, "since": "3.0"},
                        ],
                        documentation="Predefined error codes.",
                        supportsCustomValues=True,
                    )
                ]
            )
        )

        (codes,) = model.enumerations
        assert codes.name == "ErrorCodes"
        assert codes.underlying_type == "integer"
        assert codes.documentation == "Predefined error codes."
        assert codes.supports_custom_values is True
        assert [v.name for v in codes.values] == ["ParseError", "InvalidRequest"]
        assert codes.values[0].value == -32700
        assert codes.values[0].documentation == "Parse error."
        assert codes.values[1].since == "3.0"

    def test_parse_type_alias(self):
        model = self.parser.parse(
            document(
                aliases=[
                    {
                        "name": "ProgressToken",
                        "type": {"kind": "or", "items": [{"kind": "base", "name": "integer"}, {"kind": "base", "name": "string"}]},
                        "documentation": "A progress token.",
                        "deprecated": "use something else",
                    }
                ]
            )
        )

        (alias,) = model.type_aliases
        assert alias.name == "ProgressToken"
        assert alias.type.kind == "or"
        assert [t.name for t in alias.type.items] == ["integer", "string"]
        assert alias.deprecated == "use something else"

    def test_order_is_preserved(self):
        names = ["Zeta", "Alpha", "Mid"]
        model = self.parser.parse(document([enumeration(n) for n in names]))
        assert [e.name for e in model.enumerations] == names

    def test_other_sections_carried_unexamined(self):
        raw = document(
            structures=[{"name": "Position", "properties": []}],
            requests=[{"method": "initialize"}],
            metaData={"version": "3.17.0"},
        )
        model = self.parser.parse(raw)

        assert model.version == "3.17.0"
        assert model.extras["structures"] == [{"name": "Position", "properties": []}]
        assert model.extras["requests"] == [{"method": "initialize"}]
        assert "enumerations" not in model.extras

    def test_model_is_immutable(self):
        model = self.parser.parse(document([enumeration()]))
        with pytest.raises(dataclasses.FrozenInstanceError):
            model.enumerations[0].name = "Other"
        with pytest.raises(TypeError):
            model.extras["structures"] = []

    def test_missing_version(self):
        assert self.parser.parse(document()).version == ""

    @pytest.mark.parametrize(
        "raw,message",
        [
            ([], "JSON object"),
            ({"typeAliases": []}, "enumerations"),
            ({"enumerations": []}, "typeAliases"),
            ({"enumerations": {}, "typeAliases": []}, "expected an array"),
            (document([enumeration(values=[])]), "no values"),
            (document([{"type": {"kind": "base", "name": "string"}, "values": []}]), "'name'"),
            (document([{"name": "X", "values": [{"name": "a", "value": "a"}]}]), "'type'"),
            (document([enumeration(values=[{"name": "a"}])]), "'value'"),
            (document([enumeration(values=[{"value": "a"}])]), "'name'"),
            (document([enumeration(type_name="string", values=[{"name": "a", "value": 1}])]), "does not match"),
            (document([enumeration(type_name="integer", values=[{"name": "a", "value": "1"}])]), "does not match"),
            (document([enumeration(type_name="integer", values=[{"name": "a", "value": True}])]), "does not match"),
            (document([enumeration(type_name="integer", values=[{"name": "a", "value": 1.5}])]), "does not match"),
            (document([enumeration(documentation=["not", "text"])]), "documentation"),
            (document(aliases=[{"name": "A", "type": {"kind": "union"}}]), "unknown type kind"),
            (document(aliases=[{"name": "A", "type": {"kind": "or", "items": []}}]), "items"),
            (document(aliases=[{"name": "A", "type": {"kind": "array"}}]), "element"),
            (document(aliases=[{"name": "A"}]), "'type'"),
            (document([{"name": "X", "type": {"kind": "reference", "name": "Y"}, "values": [{"name": "a", "value": 1}]}]), "base type"),
        ],
    )
    def test_invalid_documents_raise_load_error(self, raw, message):
        with pytest.raises(LoadError, match=message):
            self.parser.parse(raw)


class TestLoadMetamodel:
    def test_load_from_file(self, tmp_path):
        path = tmp_path / "metaModel.json"
        path.write_text(json.dumps(document([enumeration()])), encoding="utf-8")

        model = load_metamodel(path)
        assert model.enumerations[0].name == "TraceValues"

    def test_missing_file(self, tmp_path):
        with pytest.raises(LoadError, match="cannot read"):
            load_metamodel(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(LoadError, match="invalid JSON"):
            load_metamodel(path)
