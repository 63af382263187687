from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from affiliate_roi.main import create_app
from affiliate_roi.schemas.projection import ProjectionInputs, ProjectionRequest


@pytest.fixture()
def baseline_inputs() -> ProjectionInputs:
    return ProjectionInputs(
        baseline_revenue=100000,
        acquisition_cost=50,
        commission_rate=0.10,
        average_order_value=85,
        lifetime_value=125,
        cogs_rate=0.40,
    )


@pytest.fixture()
def baseline_request() -> ProjectionRequest:
    return ProjectionRequest(
        current_revenue="100000",
        acquisition_cost="50",
        commission_percent="10",
        average_order_value="85",
        lifetime_value="125",
        cogs_percent="40",
    )


@pytest.fixture()
def client() -> TestClient:
    app = create_app()
    return TestClient(app)
