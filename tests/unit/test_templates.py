"""Tests for the template engine and filters (templates/)."""

from __future__ import annotations

from pathlib import Path

from pystatecu.components.blaney_criddle import KTSW_METHODS
from pystatecu.templates import (
    TEMPLATES_DIR,
    TemplateEngine,
    fortran_float,
    get_engine,
    statecu_comment,
)


class TestFilters:
    def test_fortran_float(self) -> None:
        assert fortran_float(40.12, 6, 2) == " 40.12"
        assert fortran_float(5280.0, 9, 2) == "  5280.00"

    def test_fortran_float_missing_is_blank(self) -> None:
        assert fortran_float(-999.0, 6, 2) == "      "
        assert fortran_float(None, 4) == "    "

    def test_statecu_comment(self) -> None:
        assert statecu_comment("note") == "# note"
        assert statecu_comment("") == "#"
        assert statecu_comment("legend", prefix="#>") == "#> legend"


class TestTemplateEngine:
    def test_package_templates_exist(self) -> None:
        assert (TEMPLATES_DIR / "climate_station.j2").exists()
        assert (TEMPLATES_DIR / "provenance.j2").exists()

    def test_comment_filter_in_template(self, tmp_path: Path) -> None:
        (tmp_path / "note.j2").write_text("{{ text | statecu_comment('#>') }}")
        engine = TemplateEngine(template_dir=tmp_path, use_package_templates=False)
        assert engine.render_template("note.j2", text="legend") == "#> legend"

    def test_render_package_template(self) -> None:
        text = get_engine().render_template("delay_table_assignment.j2")
        assert "StateCU Delay Table Assignment (DLA) File" in text
        assert text.endswith("#>EndHeader\n")

    def test_version_10_branch(self) -> None:
        engine = get_engine()
        context = {"title": "T", "ktsw_methods": KTSW_METHODS}
        current = engine.render_template("blaney_criddle.j2", version_10=False, **context)
        old = engine.render_template("blaney_criddle.j2", version_10=True, **context)
        assert "BCMethod" in current
        assert "#>                     4 = Pochop\n" in current
        assert "BCMethod" not in old
        assert old.splitlines()[-1] == "T"

    def test_custom_template_dir_overrides(self, tmp_path: Path) -> None:
        (tmp_path / "climate_station.j2").write_text("#> custom\n")
        engine = TemplateEngine(template_dir=tmp_path)
        assert engine.render_template("climate_station.j2") == "#> custom\n"
        # Other templates still come from the package
        assert "EndHeader" in engine.render_template("delay_table.j2")

    def test_render_lines(self, tmp_path: Path) -> None:
        (tmp_path / "two.j2").write_text("{{ a }}\n{{ b }}\n")
        engine = TemplateEngine(template_dir=tmp_path, use_package_templates=False)
        assert engine.render_lines("two.j2", a="x", b="y") == ["x", "y"]
