"""Tests for the format_result dispatcher and OutputSettings."""

import json

from dyndomain.output.formatters import OutputSettings, format_result
from dyndomain.services.result import ServiceError, ServiceResult


def _ok(op: str = "render", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "render", msg: str = "fail") -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="ERR", message=msg),
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        result = _ok(notation="(5;∞)", kind="interval", cardinality=None)
        output = format_result(result, settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "render"
        assert data["data"]["notation"] == "(5;∞)"

    def test_json_beats_quiet(self) -> None:
        result = _ok(notation="∅")
        output = format_result(result, settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(output)["data"]["notation"] == "∅"

    def test_json_mode_error(self) -> None:
        output = format_result(_err(msg="Bad"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"


class TestFormatResultQuiet:
    def test_render_prints_notation_only(self) -> None:
        output = format_result(_ok(notation="[1;2]"), settings=OutputSettings(quiet=True))
        assert output == "[1;2]"

    def test_enumerate_prints_one_member_per_line(self) -> None:
        result = _ok("enumerate", members=[1, 2, 3])
        assert format_result(result, settings=OutputSettings(quiet=True)) == "1\n2\n3"

    def test_check_prints_yes_or_no(self) -> None:
        settings = OutputSettings(quiet=True)
        assert format_result(_ok("check", member=True), settings=settings) == "yes"
        assert format_result(_ok("check", member=False), settings=settings) == "no"

    def test_error(self) -> None:
        output = format_result(_err(msg="Nope"), settings=OutputSettings(quiet=True))
        assert output.startswith("ERROR: render")
        assert "Nope" in output


class TestFormatResultHuman:
    def test_default_settings(self) -> None:
        output = format_result(_ok(notation="[1;2]", kind="interval", cardinality=2))
        assert output.startswith("OK  render")
        assert "[1;2]" in output
