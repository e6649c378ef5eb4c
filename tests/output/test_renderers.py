"""Tests for Rich renderers."""

from __future__ import annotations

from petledger.output.renderers import render_quiet, render_result
from petledger.services.result import ServiceError, ServiceResult


def _error(op: str = "borrow") -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(
            code="INELIGIBLE_ANIMAL",
            message="invalid animal for men",
            detail={"animal": "cat"},
        ),
    )


class TestRenderQuiet:
    def test_error(self) -> None:
        assert render_quiet(_error()) == "ERROR: borrow — invalid animal for men"

    def test_available(self) -> None:
        result = ServiceResult(ok=True, op="available", data={"available": 4})
        assert render_quiet(result) == "4"

    def test_eligible(self) -> None:
        result = ServiceResult(ok=True, op="eligible", data={"animals": ["fish", "dog"]})
        assert render_quiet(result) == "fish dog"

    def test_other(self) -> None:
        assert render_quiet(ServiceResult(ok=True, op="return")) == "OK: return"


class TestRenderResult:
    def test_error_line(self) -> None:
        out = render_result(_error())
        assert "ERROR  borrow [INELIGIBLE_ANIMAL] — invalid animal for men" in out
        assert "detail" not in out

    def test_error_detail_verbose(self) -> None:
        out = render_result(_error(), verbose=True)
        assert "animal: cat" in out

    def test_borrow(self) -> None:
        result = ServiceResult(
            ok=True,
            op="borrow",
            data={
                "identity": "alice",
                "animal": "dog",
                "age": 25,
                "gender": "male",
                "available": 0,
                "profile_created": True,
                "seq": 7,
            },
        )
        out = render_result(result)
        assert out.startswith("OK  borrow")
        assert "  identity: alice" in out
        assert "  available: 0" in out
        assert "profile: bound age=25 gender=male" in out
        assert "seq" not in out
        assert "seq: 7" in render_result(result, verbose=True)

    def test_inventory_table(self) -> None:
        result = ServiceResult(
            ok=True,
            op="inventory",
            data={
                "items": [{"animal": "fish", "available": 3}, {"animal": "cat", "available": 0}],
                "total": 3,
            },
        )
        out = render_result(result, width=80)
        assert "fish" in out
        assert "3 animals in stock" in out

    def test_loans_table(self) -> None:
        result = ServiceResult(
            ok=True,
            op="loans",
            data={
                "items": [{"identity": "bob", "animal": "dog", "borrowed": "2026-01-01"}],
                "count": 1,
            },
        )
        out = render_result(result)
        assert "bob" in out
        assert "1 outstanding loans" in out

    def test_events_table(self) -> None:
        result = ServiceResult(
            ok=True,
            op="events",
            data={
                "items": [
                    {"seq": 1, "kind": "added", "animal": "dog", "count": 2, "created": "t"},
                    {"seq": 2, "kind": "borrowed", "animal": "dog", "identity": "al"},
                ],
                "count": 2,
            },
        )
        out = render_result(result, width=100)
        assert "added" in out
        assert "borrowed" in out

    def test_eligible_nothing(self) -> None:
        result = ServiceResult(
            ok=True,
            op="eligible",
            data={"age": 30, "gender": "male", "animals": [], "mask": 0},
        )
        assert "(nothing)" in render_result(result)

    def test_generic_fallback(self) -> None:
        result = ServiceResult(ok=True, op="whoami", data={"caller": "alice", "is_admin": False})
        out = render_result(result)
        assert "caller: alice" in out
        assert "is_admin: False" in out
