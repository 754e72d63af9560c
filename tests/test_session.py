import json

from masldviz.core.data_objects import LocalUploadSource, RemoteSource, UploadedFile
from masldviz.core.session import DashboardSession
from masldviz.core.settings import DEFAULT_CANDIDATE_ROOTS, ViewerSettings

from conftest import ORIGIN, FakeFetcher, remote_url


def test_starts_on_default_remote_root(session):
    assert isinstance(session.source, RemoteSource)
    assert session.results_path == "results"
    assert not session.has_uploads


def test_source_change_invalidates_cache(session, fetcher):
    assert session.load_json("run_config.json")["seed"] == 42

    session.load_uploads([
        UploadedFile("export/run_config.json", data=json.dumps({"timestamp": "2024-01-01", "seed": 7}).encode()),
    ])
    assert len(session.cache) == 0
    assert session.load_json("run_config.json")["seed"] == 7

    session.reset()
    assert session.load_json("run_config.json")["seed"] == 42
    assert fetcher.calls.count(remote_url("run_config.json")) == 2


def test_generation_bumps_on_every_source_change(session):
    start = session.generation
    session.set_source(RemoteSource(base="../results", origin=ORIGIN))
    session.set_source(LocalUploadSource.from_files([UploadedFile("x/a.csv", data=b"a\n1\n")]))
    assert session.generation == start + 2


def test_upload_first_then_remote_fallback(session, fetcher):
    session.load_uploads([UploadedFile("export/calibration_summary.csv", data=b"model,brier\nRF,0.12\n")])

    assert session.load_table("calibration_summary.csv") == [{"model": "RF", "brier": "0.12"}]
    assert remote_url("calibration_summary.csv") not in fetcher.calls

    # not uploaded, still served remotely
    rows = session.load_table("patient_metrics_summary.csv")
    assert rows[0]["n_patients"] == "120"
    assert remote_url("patient_metrics_summary.csv") in fetcher.calls


def test_discovery_falls_through_to_parent_results(settings):
    fetcher = FakeFetcher({
        remote_url("run_config.json", base="../results"): b"{}",
        remote_url("coverage_vs_performance.csv", base="../results"): b"coverage,auc\n0.8,0.95\n",
    })
    session = DashboardSession(settings, fetcher=fetcher)

    found = session.discover_root()

    assert found is not None and found.base == "../results"
    assert fetcher.calls == [
        remote_url("run_config.json", base="results"),
        remote_url("run_config.json", base="masld_export/results"),
        remote_url("run_config.json", base="../results"),
    ]
    assert session.results_path == "../results"
    assert session.load_table("coverage_vs_performance.csv") == [{"coverage": "0.8", "auc": "0.95"}]
    assert fetcher.calls[-1] == "http://results.test/results/coverage_vs_performance.csv"


def test_discovery_failure_keeps_default_state(settings):
    fetcher = FakeFetcher()
    session = DashboardSession(settings, fetcher=fetcher)
    session.cache.put("stale.csv", [])

    assert session.discover_root() is None
    assert len(fetcher.calls) == len(DEFAULT_CANDIDATE_ROOTS)
    assert session.results_path == "results"
    assert "stale.csv" in session.cache


def test_discovery_clears_uploads(session):
    session.load_uploads([UploadedFile("x/run_config.json", data=b"{}")])
    assert session.has_uploads
    assert session.discover_root().base == "results"
    assert not session.has_uploads


def test_empty_upload_falls_back_to_remote(session, fetcher):
    session.load_uploads([])
    assert not session.has_uploads
    assert session.load_json("run_config.json") is not None


def test_load_local_dir_registers_folder_contents(tmp_path, settings):
    export = tmp_path / "masld_results"
    (export / "ai_reports").mkdir(parents=True)
    (export / "ai_reports" / "index.csv").write_text("case,label\n01,MASLD\n")
    (export / "run_config.json").write_text(json.dumps({"timestamp": "2025-05-01T08:00:00"}))

    fetcher = FakeFetcher()
    session = DashboardSession(settings, fetcher=fetcher)
    source = session.load_local_dir(export)

    assert len(source) == 2
    assert "masld_results/ai_reports/index.csv" in source.keys()
    assert session.load_table("ai_reports/index.csv") == [{"case": "01", "label": "MASLD"}]
    assert session.load_json("run_config.json")["timestamp"].startswith("2025-05-01")
    assert fetcher.calls == []


def test_exists_checks_uploads_then_head(session, fetcher):
    assert session.exists("run_config.json")
    assert not session.exists("coverage_curve.png")
    assert remote_url("coverage_curve.png") in fetcher.head_calls

    session.load_uploads([UploadedFile("e/coverage_curve.png", data=b"png")])
    fetcher.head_calls.clear()
    assert session.exists("coverage_curve.png")
    assert fetcher.head_calls == []


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("MASLDVIZ_ORIGIN", "http://env.test/")
    monkeypatch.setenv("MASLDVIZ_CANDIDATE_ROOTS", "a, b ,")
    monkeypatch.setenv("MASLDVIZ_REQUEST_TIMEOUT", "2.5")
    monkeypatch.setenv("MASLDVIZ_VERBOSE", "0")

    settings = ViewerSettings.from_env(local_dir="/data/results")

    assert settings.origin == "http://env.test/"
    assert settings.candidate_roots == ["a", "b"]
    assert settings.request_timeout == 2.5
    assert settings.local_dir == "/data/results"
    assert settings.verbose is False
    assert settings.default_root == "a"


def test_settings_overrides_win_over_env(monkeypatch):
    monkeypatch.setenv("MASLDVIZ_ORIGIN", "http://env.test/")
    assert ViewerSettings.from_env(origin="http://cli.test/").origin == "http://cli.test/"
    assert ViewerSettings.from_env(origin=None).origin == "http://env.test/"
