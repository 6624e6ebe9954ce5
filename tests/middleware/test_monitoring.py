from prometheus_client import REGISTRY

from solid_lessons import create_app
from solid_lessons.config.settings import Config, TestingConfig
from solid_lessons.middleware.monitoring import track_lesson_run


class MetricsConfig(TestingConfig):
    ENABLE_METRICS = True


def _run_count(lesson_id, status):
    return REGISTRY.get_sample_value(
        "solid_lessons_runs_total", {"lesson_id": lesson_id, "status": status}
    ) or 0.0


class TestTrackLessonRun:

    def test_counts_runs_by_status(self, monkeypatch):
        monkeypatch.setattr(Config, "ENABLE_METRICS", True)
        before = _run_count("metrics.example", "error")

        track_lesson_run("metrics.example", False, 0.01)

        assert _run_count("metrics.example", "error") == before + 1

    def test_disabled_metrics_are_not_recorded(self, monkeypatch):
        monkeypatch.setattr(Config, "ENABLE_METRICS", False)
        before = _run_count("metrics.disabled", "success")

        track_lesson_run("metrics.disabled", True, 0.01)

        assert _run_count("metrics.disabled", "success") == before


class TestMetricsEndpoint:

    def test_metrics_served_when_enabled(self):
        client = create_app(MetricsConfig).test_client()

        response = client.get("/metrics")

        assert response.status_code == 200
        assert b"solid_lessons_runs_total" in response.data

    def test_metrics_not_served_when_disabled(self, client):
        assert client.get("/metrics").status_code == 404


def _request_count(endpoint, status):
    return REGISTRY.get_sample_value(
        "solid_lessons_http_requests_total",
        {"method": "GET", "endpoint": endpoint, "status": str(status)}
    ) or 0.0


class TestTrackRequest:

    def test_aborted_request_counted_with_its_status(self):
        # Arrange
        client = create_app(MetricsConfig).test_client()
        bad_before = _request_count("lessons", 400)
        error_before = _request_count("lessons", 500)

        # Act
        response = client.get("/lessons?principle=xyz")

        # Assert
        assert response.status_code == 400
        assert _request_count("lessons", 400) == bad_before + 1
        assert _request_count("lessons", 500) == error_before

    def test_successful_request_counted_as_200(self):
        client = create_app(MetricsConfig).test_client()
        before = _request_count("lessons", 200)

        client.get("/lessons")

        assert _request_count("lessons", 200) == before + 1


class TestAppMetricsSwitch:

    def test_app_with_metrics_off_records_no_lesson_runs(self, client, monkeypatch):
        monkeypatch.setattr(Config, "ENABLE_METRICS", True)
        before = _run_count("ocp.shape", "success")

        response = client.post("/lessons/ocp.shape/run")

        assert response.status_code == 200
        assert _run_count("ocp.shape", "success") == before

    def test_app_with_metrics_on_records_lesson_runs(self, monkeypatch):
        monkeypatch.setattr(Config, "ENABLE_METRICS", False)
        client = create_app(MetricsConfig).test_client()
        before = _run_count("lsp.bird", "success")

        client.post("/lessons/lsp.bird/run")

        assert _run_count("lsp.bird", "success") == before + 1
