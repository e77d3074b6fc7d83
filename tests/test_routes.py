from siteprofit.core.config import settings


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_fields(client):
    r = client.get("/calculator/fields")
    assert r.status_code == 200
    data = r.json()
    assert [f["name"] for f in data["inputs"]] == [
        "investment_cost",
        "annual_net_sales",
        "ebitda_percentage",
        "annual_rent_cam",
    ]
    roi = next(f for f in data["results"] if f["kind"] == "roi")
    assert roi["display"] is False


def test_benchmarks(client):
    r = client.get("/calculator/benchmarks")
    assert r.status_code == 200
    assert r.json() == {
        "sales_to_investment_ratio": 1.5,
        "payback_period": {"ideal": 5, "max": 7},
        "roi": 20,
        "rent_factor": 10,
    }


def test_evaluate_flow(client):
    payload = {
        "inputs": {
            "investment_cost": "500,000",
            "annual_net_sales": "1500000",
            "ebitda_percentage": "12.5",
            "annual_rent_cam": "120000",
        }
    }
    r = client.post("/calculator/evaluate", json=payload)
    assert r.status_code == 200
    data = r.json()
    assert data["metrics"]["roi"] == 37.5
    rows = {row["kind"]: row for row in data["results"]}
    assert rows["payback_period"]["status"] == {"label": "Excellent", "severity": "good"}
    assert rows["rent_factor"]["display_value"] == "8%"


def test_evaluate_with_custom_benchmarks(client):
    payload = {
        "inputs": {
            "investment_cost": "500000",
            "annual_net_sales": "1500000",
            "ebitda_percentage": "12.5",
            "annual_rent_cam": "120000",
        },
        "benchmarks": {"rent_factor": 7.5, "payback_period": {"ideal": 2, "max": 3}},
    }
    rows = {row["kind"]: row for row in client.post("/calculator/evaluate", json=payload).json()["results"]}
    assert rows["rent_factor"]["status"]["label"] == "High"
    assert rows["payback_period"]["status"]["label"] == "Good"
    assert rows["sales_to_investment_ratio"]["status"]["label"] == "Meets Target"


def test_evaluate_blank_form_is_not_an_error(client):
    r = client.post("/calculator/evaluate", json={})
    assert r.status_code == 200
    assert all(row["display_value"] == "N/A" for row in r.json()["results"])


def test_evaluate_rejects_bad_benchmarks(client):
    payload = {"benchmarks": {"payback_period": {"ideal": 9, "max": 7}}}
    assert client.post("/calculator/evaluate", json=payload).status_code == 422


def test_evaluate_show_roi_setting(client, monkeypatch):
    monkeypatch.setattr(settings, "SHOW_ROI", True)
    r = client.post("/calculator/evaluate", json={})
    roi = next(row for row in r.json()["results"] if row["kind"] == "roi")
    assert roi["display"] is True


def test_classify(client):
    r = client.post("/calculator/classify", json={"kind": "payback_period", "value": 7})
    assert r.status_code == 200
    assert r.json() == {"label": "High Risk", "severity": "bad"}


def test_classify_absent_and_unknown(client):
    r = client.post("/calculator/classify", json={"kind": "rent_factor", "value": None})
    assert r.json() == {"label": "N/A", "severity": "unknown"}
    r = client.post("/calculator/classify", json={"kind": "cap_rate", "value": 6.5})
    assert r.json() == {"label": "", "severity": "unknown"}


def test_evaluate_overflow_reads_not_applicable(client):
    payload = {
        "inputs": {
            "investment_cost": "500000",
            "annual_net_sales": "1e308",
            "ebitda_percentage": "1000",
            "annual_rent_cam": "120000",
        }
    }
    rows = {row["kind"]: row for row in client.post("/calculator/evaluate", json=payload).json()["results"]}
    for kind in ("roi", "payback_period"):
        assert rows[kind]["value"] is None
        assert rows[kind]["display_value"] == "N/A"
        assert rows[kind]["status"] == {"label": "N/A", "severity": "unknown"}


def test_evaluate_failure_hides_internals(client, monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("secret internals")

    monkeypatch.setattr("siteprofit.routers.calculator.evaluate", boom)
    r = client.post("/calculator/evaluate", json={})
    assert r.status_code == 500
    assert r.json() == {"detail": "evaluation failed"}
