import pytest
from fastapi.testclient import TestClient

from siteprofit.main import app
from siteprofit.schemas.benchmark import BenchmarkDefinition
from siteprofit.schemas.metrics import RawInputs


@pytest.fixture()
def benchmarks() -> BenchmarkDefinition:
    return BenchmarkDefinition()


@pytest.fixture()
def sample_inputs() -> RawInputs:
    # 500k build-out, 1.5M sales, 12.5 % EBITDA, 120k rent + CAM
    return RawInputs(
        investment_cost="500000",
        annual_net_sales="1500000",
        ebitda_percentage="12.5",
        annual_rent_cam="120000",
    )


@pytest.fixture()
def client() -> TestClient:
    return TestClient(app)
