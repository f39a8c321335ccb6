"""Tests for the Rich renderers."""

from dyndomain.output.renderers import render_result
from dyndomain.services.result import ServiceError, ServiceResult


class TestRenderDomain:
    def test_fields(self) -> None:
        result = ServiceResult(
            ok=True,
            op="render",
            data={
                "notation": "(5;∞)",
                "kind": "interval",
                "finite": False,
                "cardinality": None,
                "constraints": ["x > 5"],
            },
        )
        output = render_result(result)
        assert "OK  render" in output
        assert "notation: (5;∞)" in output
        assert "members: infinite" in output
        assert "x > 5" not in output

    def test_verbose_lists_constraints(self) -> None:
        result = ServiceResult(
            ok=True,
            op="render",
            data={
                "notation": "[1;2]",
                "kind": "interval",
                "finite": True,
                "cardinality": 2,
                "constraints": ["x >= 1"],
            },
        )
        output = render_result(result, verbose=True)
        assert "members: 2" in output
        assert "x >= 1" in output


class TestRenderMembers:
    def test_members_listed(self) -> None:
        result = ServiceResult(
            ok=True,
            op="enumerate",
            data={"notation": "(5;10)", "count": 4, "members": [6, 7, 8, 9], "truncated": False},
        )
        output = render_result(result)
        assert "members: 6, 7, 8, 9" in output
        assert "count: 4" in output

    def test_truncated_count_marked(self) -> None:
        result = ServiceResult(
            ok=True,
            op="enumerate",
            data={"notation": "(0;∞)", "count": 2, "members": [1, 2], "truncated": True},
        )
        assert "count: 2+" in render_result(result)

    def test_no_members(self) -> None:
        result = ServiceResult(
            ok=True,
            op="enumerate",
            data={"notation": "∅", "count": 0, "members": [], "truncated": False},
        )
        assert "members: (none)" in render_result(result)


class TestRenderMembership:
    def test_verdict(self) -> None:
        result = ServiceResult(
            ok=True,
            op="check",
            data={"notation": "(5;10)", "value": 7, "member": True},
        )
        output = render_result(result)
        assert "member: yes" in output


class TestRenderError:
    def test_message_with_brackets_is_not_markup(self) -> None:
        result = ServiceResult(
            ok=False,
            op="render",
            error=ServiceError(code="INVALID_NOTATION", message="Malformed interval '[abc;5]'"),
        )
        output = render_result(result)
        assert "ERROR  render" in output
        assert "[abc;5]" in output

    def test_unknown_op_uses_generic_renderer(self) -> None:
        result = ServiceResult(ok=True, op="custom", data={"answer": 42})
        output = render_result(result)
        assert "answer: 42" in output


class TestRenderMeta:
    def test_config_source_shown_when_verbose(self) -> None:
        result = ServiceResult(
            ok=True,
            op="check",
            data={"notation": "(5,10)", "value": 7, "member": True},
            meta={"config": {"path": "/srv/dyndomain.toml", "sections": ["notation"]}},
        )
        output = render_result(result, verbose=True)
        assert "config:" in output
        assert "path: /srv/dyndomain.toml" in output
        assert "sections: ['notation']" in output

    def test_config_source_hidden_by_default(self) -> None:
        result = ServiceResult(
            ok=True,
            op="check",
            data={"notation": "(5,10)", "value": 7, "member": True},
            meta={"config": {"path": "/srv/dyndomain.toml", "sections": ["notation"]}},
        )
        assert "dyndomain.toml" not in render_result(result)
