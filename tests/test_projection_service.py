from __future__ import annotations

import logging

import pytest

from affiliate_roi.analytics.milestones import Milestone
from affiliate_roi.core.errors import InvalidInputError
from affiliate_roi.schemas.projection import ProjectionInputs, ProjectionRequest
from affiliate_roi.services.projection_service import ProjectionService, parse_projection_inputs


def test_parse_converts_percentages_to_fractions(baseline_request: ProjectionRequest) -> None:
    inputs = parse_projection_inputs(baseline_request)
    assert inputs == ProjectionInputs(
        baseline_revenue=100000,
        acquisition_cost=50,
        commission_rate=0.10,
        average_order_value=85,
        lifetime_value=125,
        cogs_rate=0.40,
    )


def test_parse_accepts_numbers_and_padded_text() -> None:
    request = ProjectionRequest(
        current_revenue=100000,
        acquisition_cost=" 50 ",
        commission_percent=0,
        average_order_value=85.5,
        lifetime_value="125.25",
        cogs_percent="0",
    )
    inputs = parse_projection_inputs(request)
    assert inputs.acquisition_cost == 50
    assert inputs.commission_rate == 0
    assert inputs.average_order_value == 85.5
    assert inputs.cogs_rate == 0


@pytest.mark.parametrize("field", ["current_revenue", "commission_percent", "cogs_percent"])
def test_parse_reports_missing_field(baseline_request: ProjectionRequest, field: str) -> None:
    request = baseline_request.model_copy(update={field: None})
    with pytest.raises(InvalidInputError) as exc_info:
        parse_projection_inputs(request)
    assert exc_info.value.missing == [field]
    assert exc_info.value.invalid == []
    assert exc_info.value.code == "invalid_input"


def test_parse_treats_blank_text_as_missing(baseline_request: ProjectionRequest) -> None:
    request = baseline_request.model_copy(update={"lifetime_value": "   "})
    with pytest.raises(InvalidInputError) as exc_info:
        parse_projection_inputs(request)
    assert exc_info.value.missing == ["lifetime_value"]


@pytest.mark.parametrize(
    "field, value",
    [
        ("current_revenue", "abc"),
        ("acquisition_cost", "nan"),
        ("lifetime_value", "inf"),
        ("current_revenue", "-1"),
        ("commission_percent", "150"),
        ("average_order_value", "0"),
    ],
)
def test_parse_reports_invalid_field(
    baseline_request: ProjectionRequest, field: str, value: str
) -> None:
    request = baseline_request.model_copy(update={field: value})
    with pytest.raises(InvalidInputError) as exc_info:
        parse_projection_inputs(request)
    assert exc_info.value.invalid == [field]
    assert exc_info.value.missing == []


def test_parse_reports_every_problem_at_once() -> None:
    request = ProjectionRequest(current_revenue="x", average_order_value="85")
    with pytest.raises(InvalidInputError) as exc_info:
        parse_projection_inputs(request)
    assert exc_info.value.invalid == ["current_revenue"]
    assert exc_info.value.missing == [
        "acquisition_cost",
        "commission_percent",
        "lifetime_value",
        "cogs_percent",
    ]


def test_project_returns_records_and_summary(baseline_request: ProjectionRequest) -> None:
    response = ProjectionService().project(baseline_request)
    assert len(response.records) == 12
    assert response.records[-1].new_revenue == 100000
    assert response.summary.final_cumulative_customers == response.records[-1].cumulative_customers


def test_invalid_request_leaves_prior_result_untouched(
    baseline_request: ProjectionRequest, caplog: pytest.LogCaptureFixture
) -> None:
    service = ProjectionService()
    first = service.project(baseline_request)
    snapshot = first.model_dump()

    with caplog.at_level(logging.WARNING, logger="affiliate_roi.services.projection_service"):
        with pytest.raises(InvalidInputError):
            service.project(baseline_request.model_copy(update={"cogs_percent": ""}))

    assert first.model_dump() == snapshot
    assert "Projection rejected" in caplog.text


def test_service_validates_custom_milestones() -> None:
    with pytest.raises(ValueError):
        ProjectionService(milestones=(Milestone(6, 0.4), Milestone(3, 0.2)))


def test_service_exposes_milestones_and_curve() -> None:
    service = ProjectionService()
    assert [milestone.month for milestone in service.get_milestones()] == [3, 6, 9, 12]
    curve = service.get_growth_curve()
    assert len(curve) == 12
    assert curve[5].target_fraction == 0.4


@pytest.mark.parametrize("value", [True, False])
def test_parse_rejects_booleans(baseline_request: ProjectionRequest, value: bool) -> None:
    request = baseline_request.model_copy(update={"current_revenue": value})
    with pytest.raises(InvalidInputError) as exc_info:
        parse_projection_inputs(request)
    assert exc_info.value.invalid == ["current_revenue"]


def test_parse_rejects_integers_beyond_float_range(baseline_request: ProjectionRequest) -> None:
    request = baseline_request.model_copy(update={"lifetime_value": 10**400})
    with pytest.raises(InvalidInputError) as exc_info:
        parse_projection_inputs(request)
    assert exc_info.value.invalid == ["lifetime_value"]


@pytest.mark.parametrize(
    "update",
    [
        {"current_revenue": "1e10", "average_order_value": "1e-300"},
        {"lifetime_value": "1e308"},
        {"current_revenue": "1e308", "average_order_value": "1"},
    ],
)
def test_project_rejects_inputs_that_overflow(
    baseline_request: ProjectionRequest, update: dict
) -> None:
    request = baseline_request.model_copy(update=update)
    with pytest.raises(InvalidInputError) as exc_info:
        ProjectionService().project(request)
    assert exc_info.value.code == "invalid_input"
    assert exc_info.value.missing == []
    assert exc_info.value.invalid == []
    assert "not finite" in exc_info.value.reason


def test_project_handles_large_finite_inputs(baseline_request: ProjectionRequest) -> None:
    request = baseline_request.model_copy(update={"current_revenue": "1e12"})
    response = ProjectionService().project(request)
    assert len(response.records) == 12
    assert response.records[-1].new_revenue == 10**12
    assert response.summary.total_revenue > 0
