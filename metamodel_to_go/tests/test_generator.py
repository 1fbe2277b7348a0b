"""
End-to-end tests for the pipeline generator.
"""

from __future__ import annotations

import sys

import pytest

from metamodel_to_go import __version__
from metamodel_to_go.pipeline import GeneratorConfig, MetaModelParser, PipelineGenerator, RenderError
from metamodel_to_go.pipeline.errors import FormatError
from metamodel_to_go.pipeline.formatters import Formatter

IDENTITY = [sys.executable, "-c", "import sys; sys.stdout.write(sys.stdin.read())"]

OFF_MODEL = {
    "metaData": {"version": "3.17.0"},
    "enumerations": [
        {"name": "Off", "type": {"kind": "base", "name": "string"}, "values": [{"name": "off", "value": "off"}]},
    ],
    "typeAliases": [
        {"name": "ProgressToken", "type": {"kind": "or", "items": [{"kind": "base", "name": "integer"}, {"kind": "base", "name": "string"}]}},
    ],
}

COLLIDING_MODEL = {
    "enumerations": [
        {"name": "SymbolTag", "type": {"kind": "base", "name": "string"}, "values": [{"name": "Type", "value": "type"}]},
        {"name": "TokenFormat", "type": {"kind": "base", "name": "string"}, "values": [{"name": "Type", "value": "type"}]},
    ],
    "typeAliases": [],
}


class RejectingFormatter(Formatter):
    def is_available(self, config):
        return True

    def format(self, code, config):
        raise FormatError("7:2: expected ';', found 'IDENT'")


def config(**overrides):
    cfg = GeneratorConfig()
    cfg.formatter.command = IDENTITY
    for key, value in overrides.items():
        setattr(cfg, key, value)
    return cfg


def templates(tmp_path, **files):
    template_dir = tmp_path / "templates"
    template_dir.mkdir()
    for name, content in files.items():
        (template_dir / f"{name}.jinja2").write_text(content, encoding="utf-8")
    return template_dir


class TestPipelineGenerator:
    def test_generates_default_target(self, tmp_path):
        model = MetaModelParser().parse(OFF_MODEL)

        report = PipelineGenerator(model, config()).generate(tmp_path)

        assert report.ok
        (result,) = report.results
        assert result.path == tmp_path / "protocol.go"
        text = result.path.read_text()
        assert text.startswith(f"// Code generated by metamodel_to_go v{__version__}: metamodel_to_go. DO NOT EDIT.\n\npackage lsp\n")
        assert "type Off string" in text
        assert '\tOff Off = "off"' in text
        assert "type ProgressToken any" in text
        assert result.bytes_written == len(text.encode("utf-8"))

    def test_runs_are_byte_identical(self, tmp_path):
        model = MetaModelParser().parse(OFF_MODEL)

        PipelineGenerator(model, config()).generate(tmp_path / "first")
        PipelineGenerator(MetaModelParser().parse(OFF_MODEL), config()).generate(tmp_path / "second")

        assert (tmp_path / "first" / "protocol.go").read_bytes() == (tmp_path / "second" / "protocol.go").read_bytes()

    def test_one_file_per_template(self, tmp_path):
        template_dir = templates(
            tmp_path,
            **{
                "enums.go": "package {{ package }}\n{% for e in enumerations %}\n\n{{ e }}\n{% endfor %}\n",
                "aliases.go": "package {{ package }}\n{% for a in type_aliases %}\n\n{{ a }}\n{% endfor %}\n",
            },
        )
        model = MetaModelParser().parse(OFF_MODEL)
        out = tmp_path / "out"

        report = PipelineGenerator(model, config(package_name="protocol"), template_dir).generate(out)

        assert [r.name for r in report.results] == ["aliases.go.jinja2", "enums.go.jinja2"]
        assert (out / "aliases.go").read_text() == "package protocol\n\ntype ProgressToken any\n"
        assert (out / "enums.go").read_text().startswith("package protocol\n\ntype Off string\n")

    def test_format_failure_keeps_output_and_reports(self, tmp_path):
        model = MetaModelParser().parse(OFF_MODEL)
        generator = PipelineGenerator(model, config(add_generation_comment=False), formatter=RejectingFormatter())

        report = generator.generate(tmp_path)

        assert not report.ok
        (warning,) = report.warnings
        assert warning.path == tmp_path / "protocol.go"
        assert (tmp_path / "protocol.go").read_text() == generator.render("protocol.go.jinja2")

    def test_collision_aborts_strict_run_before_writing(self, tmp_path):
        template_dir = templates(tmp_path, **{"a.go": "package a\n", "b.go": "package b\n"})
        model = MetaModelParser().parse(COLLIDING_MODEL)
        out = tmp_path / "out"

        with pytest.raises(RenderError, match="Type"):
            PipelineGenerator(model, config(), template_dir).generate(out)

        assert not out.exists()

    def test_non_strict_run_records_errors(self, tmp_path, caplog):
        model = MetaModelParser().parse(COLLIDING_MODEL)

        with caplog.at_level("ERROR", logger="metamodel_to_go.pipeline.generator"):
            report = PipelineGenerator(model, config(strict=False)).generate(tmp_path)

        assert not report.ok
        (error,) = report.errors
        assert "Type" in error.duplicates
        assert not (tmp_path / "protocol.go").exists()
        assert "duplicate identifiers" in caplog.text

    def test_non_strict_run_continues_with_other_targets(self, tmp_path):
        template_dir = templates(tmp_path, **{"bad.go": "{{ missing }}", "good.go": "package {{ package }}\n"})
        model = MetaModelParser().parse(OFF_MODEL)
        out = tmp_path / "out"

        report = PipelineGenerator(model, config(strict=False), template_dir).generate(out)

        bad, good = report.results
        assert bad.error is not None
        assert good.error is None and good.warning is None
        assert (out / "good.go").read_text() == "package lsp\n"
        assert not (out / "bad.go").exists()

    def test_no_generation_comment(self):
        model = MetaModelParser().parse(OFF_MODEL)
        text = PipelineGenerator(model, config(add_generation_comment=False)).render("protocol.go.jinja2")
        assert text.startswith("package lsp\n")

    def test_empty_template_directory(self, tmp_path, caplog):
        template_dir = templates(tmp_path)
        model = MetaModelParser().parse(OFF_MODEL)

        with caplog.at_level("WARNING", logger="metamodel_to_go.pipeline.generator"):
            report = PipelineGenerator(model, config(), template_dir).generate(tmp_path / "out")

        assert report.results == []
        assert report.ok
        assert "no render targets" in caplog.text
