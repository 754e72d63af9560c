from unittest.mock import MagicMock

import requests

from masldviz.core.fetcher import HttpFetcher


def _fetcher(status_code=200, content=b"", side_effect=None):
    session = MagicMock()
    response = MagicMock(status_code=status_code, content=content)
    session.get.return_value = response
    session.head.return_value = response
    if side_effect is not None:
        session.get.side_effect = side_effect
        session.head.side_effect = side_effect
    return HttpFetcher(session=session, timeout_s=3), session


def test_success_returns_body():
    fetcher, session = _fetcher(200, b"a,b\n1,2\n")
    assert fetcher.get("http://host/results/a.csv") == b"a,b\n1,2\n"
    session.get.assert_called_once_with("http://host/results/a.csv", timeout=3.0)
    assert fetcher.head("http://host/results/a.csv") is True


def test_non_success_status_is_not_found():
    fetcher, _ = _fetcher(404)
    assert fetcher.get("http://host/results/missing.csv") is None
    assert fetcher.head("http://host/results/missing.csv") is False


def test_transport_errors_are_not_found():
    fetcher, _ = _fetcher(side_effect=requests.ConnectionError("connection refused"))
    assert fetcher.get("http://host/results/a.csv") is None
    assert fetcher.head("http://host/results/a.csv") is False
