import json

import pytest

from masldviz.core.data_objects import ArtifactKind, LoadStatus, UploadedFile
from masldviz.core.loaders import ArtifactParseError, parse_table
from masldviz.core.session import DashboardSession

from conftest import SAMPLE_CONFIG, FakeFetcher, remote_url


def test_parse_table_preserves_row_order():
    rows = parse_table(b"a,b\n1,2\n3,4\n")
    assert rows == [{"a": "1", "b": "2"}, {"a": "3", "b": "4"}]


def test_parse_table_keeps_strings_and_empty_cells():
    rows = parse_table(b"model,auc,note\nRF,0.90,\n\nCNN,1e-3,NA\n")
    assert rows == [
        {"model": "RF", "auc": "0.90", "note": ""},
        {"model": "CNN", "auc": "1e-3", "note": "NA"},
    ]
    assert list(rows[0].keys()) == ["model", "auc", "note"]


def test_parse_table_handles_bom_and_empty_payloads():
    assert parse_table("\ufeffx\n1\n".encode("utf-8")) == [{"x": "1"}]
    assert parse_table(b"") == []
    assert parse_table(b"a,b\n") == []


def test_parse_table_rejects_undecodable_bytes():
    with pytest.raises(ArtifactParseError):
        parse_table(b"a,b\n\xff\xfe,1\n", "bad.csv")


def test_missing_artifacts_are_none_for_both_loaders(session):
    assert session.load_table("model_comparison_stats.csv") is None
    assert session.load_json("missing.json") is None
    assert "model_comparison_stats.csv" not in session.cache
    assert session.errors == []


def test_second_load_is_served_from_cache(session, fetcher):
    first = session.load_table("patient_metrics_summary.csv")
    second = session.load_table("patient_metrics_summary.csv")
    assert second == first
    assert fetcher.calls.count(remote_url("patient_metrics_summary.csv")) == 1

    session.load_json("run_config.json")
    assert session.load_json("run_config.json") == SAMPLE_CONFIG
    assert fetcher.calls.count(remote_url("run_config.json")) == 1


def test_misses_are_not_cached(session, fetcher):
    session.load_table("calibration_summary.csv")
    session.load_table("calibration_summary.csv")
    assert fetcher.calls.count(remote_url("calibration_summary.csv")) == 2


def test_empty_table_is_cached(settings):
    fetcher = FakeFetcher({remote_url("coverage_vs_performance.csv"): b"coverage,auc\n"})
    session = DashboardSession(settings, fetcher=fetcher)
    assert session.load_table("coverage_vs_performance.csv") == []
    assert session.load_table("coverage_vs_performance.csv") == []
    assert len(fetcher.calls) == 1


def test_malformed_json_is_treated_as_absent(settings):
    fetcher = FakeFetcher({remote_url("run_config.json"): b"{not json"})
    session = DashboardSession(settings, fetcher=fetcher)
    assert session.load_json("run_config.json") is None
    assert "run_config.json" not in session.cache
    assert len(session.errors) == 1
    assert session.errors[0]["context"] == "run_config.json"


def test_malformed_json_raises_in_fail_fast_mode(settings):
    fetcher = FakeFetcher({remote_url("run_config.json"): b"[1, 2"})
    session = DashboardSession(settings, fetcher=fetcher, fail_fast=True)
    with pytest.raises(ArtifactParseError):
        session.load_json("run_config.json")


def test_malformed_table_propagates(settings):
    fetcher = FakeFetcher({remote_url("cnn_uncertainty_patientlevel.csv"): b"id,entropy\n\xff,0.2\n"})
    session = DashboardSession(settings, fetcher=fetcher)
    with pytest.raises(ArtifactParseError) as excinfo:
        session.load_table("cnn_uncertainty_patientlevel.csv")
    assert excinfo.value.path == "cnn_uncertainty_patientlevel.csv"
    assert len(session.errors) == 1


def test_load_result_distinguishes_missing_from_malformed(settings):
    fetcher = FakeFetcher({remote_url("run_config.json"): b"oops"})
    session = DashboardSession(settings, fetcher=fetcher)

    malformed = session.loader.load("run_config.json", ArtifactKind.JSON)
    missing = session.loader.load("nothing.json", ArtifactKind.JSON)

    assert malformed.status == LoadStatus.PARSE_ERROR
    assert isinstance(malformed.error, ArtifactParseError)
    assert missing.status == LoadStatus.NOT_FOUND
    assert missing.error is None


def test_load_result_reports_origin(session):
    session.load_uploads([UploadedFile("export/ai_reports/index.csv", data=b"case,file\n01,Case-01.png\n")])
    first = session.loader.load("ai_reports/index.csv", ArtifactKind.TABLE)
    second = session.loader.load("ai_reports/index.csv", ArtifactKind.TABLE)
    assert first.origin == "upload"
    assert second.origin == "cache"
    assert second.value == [{"case": "01", "file": "Case-01.png"}]


def test_images_have_no_parser(session):
    with pytest.raises(ValueError):
        session.loader.load("coverage_curve.png", ArtifactKind.IMAGE)


def test_parse_table_keeps_header_cells_as_written():
    # DataFrame.to_csv() writes an unnamed index column
    rows = parse_table(b",auc,f1\nRF,0.9,0.8\nXGB,0.95,0.85\n")
    assert list(rows[0].keys()) == ["", "auc", "f1"]
    assert rows[1] == {"": "XGB", "auc": "0.95", "f1": "0.85"}


def test_parse_table_repeated_header_keeps_name():
    rows = parse_table(b"model,auc,auc\nRF,0.9,0.8\n")
    assert list(rows[0].keys()) == ["model", "auc"]
    assert rows[0]["auc"] == "0.8"


def test_parse_table_pads_short_rows():
    assert parse_table(b"a,b,c\n1,2\n") == [{"a": "1", "b": "2", "c": ""}]


class SwitchingFetcher(FakeFetcher):
    """Switches the session to an uploaded folder while a GET is in flight."""

    def __init__(self, files, upload):
        super().__init__(files)
        self.session = None
        self.upload = upload

    def get(self, url):
        data = super().get(url)
        if self.upload is not None:
            upload, self.upload = self.upload, None
            self.session.load_uploads(upload)
        return data


def test_source_change_during_load_does_not_cache_old_source(settings):
    upload = [UploadedFile("export/run_config.json", data=json.dumps({"src": "upload"}).encode())]
    fetcher = SwitchingFetcher({remote_url("run_config.json"): json.dumps({"src": "remote"}).encode()}, upload)
    session = DashboardSession(settings, fetcher=fetcher)
    fetcher.session = session

    # the in-flight load still returns what it fetched
    assert session.load_json("run_config.json") == {"src": "remote"}
    assert "run_config.json" not in session.cache

    assert session.load_json("run_config.json") == {"src": "upload"}
    assert session.cache.get("run_config.json") == {"src": "upload"}
