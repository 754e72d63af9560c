"""Shared fixtures: a fake HTTP fetcher and sessions wired to it."""

import json

import pytest

from masldviz.core.session import DashboardSession
from masldviz.core.settings import ViewerSettings

ORIGIN = "http://results.test/app/"


class FakeFetcher:
    """Stands in for HttpFetcher; serves a fixed URL -> bytes mapping."""

    def __init__(self, files=None):
        self.files = dict(files or {})
        self.calls = []
        self.head_calls = []

    def get(self, url):
        self.calls.append(url)
        return self.files.get(url)

    def head(self, url):
        self.head_calls.append(url)
        return url in self.files

    def close(self):
        pass


def remote_url(path, base="results"):
    from masldviz.core.data_objects import RemoteSource
    return RemoteSource(base=base, origin=ORIGIN).url_for(path)


SAMPLE_CONFIG = {"timestamp": "2025-03-14T10:22:31", "models": ["RF", "XGB", "CNN"], "seed": 42}
SAMPLE_SUMMARY = "model,n_patients,n_pos,n_neg,auc\nRF,120,45,75,0.91\nXGB,120,45,75,0.93\n"


@pytest.fixture
def settings():
    return ViewerSettings(origin=ORIGIN)


@pytest.fixture
def fetcher():
    return FakeFetcher({
        remote_url("run_config.json"): json.dumps(SAMPLE_CONFIG).encode(),
        remote_url("patient_metrics_summary.csv"): SAMPLE_SUMMARY.encode(),
    })


@pytest.fixture
def session(settings, fetcher):
    return DashboardSession(settings, fetcher=fetcher)
