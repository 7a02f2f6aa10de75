"""Tests for TMDBClient.fetch / TMDBClient.decode."""

import json

import pytest
import requests

from movieBrowser.metadata.api_clients.tmdb_client import TMDBClient
from movieBrowser.metadata.core.errors import FetchError
from movieBrowser.metadata.core.models import ErrorKind


@pytest.fixture(autouse=True)
def no_throttle_sleep(mocker):
    return mocker.patch("movieBrowser.utils.time.sleep")


@pytest.fixture
def session(mocker):
    return mocker.Mock(spec=requests.Session)


def _response(mocker, status=200, body=b"", json_data=None):
    r = mocker.Mock()
    r.status_code = status
    r.content = body
    if json_data is None:
        r.json.side_effect = ValueError("no json")
    else:
        r.json.return_value = json_data
    return r


def _payload(*entries):
    return json.dumps({"page": 1, "results": list(entries)}).encode()


class TestFetch:

    def test_returns_raw_body_and_sends_key(self, mocker, session):
        body = _payload({"id": 1, "title": "A"})
        session.get.return_value = _response(mocker, body=body)
        client = TMDBClient(api_key="k", session=session)

        assert client.fetch("/movie/popular") == body

        url = session.get.call_args.args[0]
        params = session.get.call_args.kwargs["params"]
        assert url.endswith("/movie/popular")
        assert params["api_key"] == "k"
        assert params["page"] == 1

    def test_transport_error_is_network(self, session):
        session.get.side_effect = requests.ConnectionError("refused")
        client = TMDBClient(api_key="k", session=session)

        with pytest.raises(FetchError) as exc:
            client.fetch("/movie/popular")
        assert exc.value.kind is ErrorKind.NETWORK

    def test_timeout_is_network(self, session):
        session.get.side_effect = requests.Timeout("slow")
        client = TMDBClient(api_key="k", session=session)

        with pytest.raises(FetchError) as exc:
            client.fetch("/movie/popular")
        assert exc.value.kind is ErrorKind.NETWORK

    def test_http_error_is_server_with_tmdb_message(self, mocker, session):
        session.get.return_value = _response(
            mocker, status=401,
            json_data={"status_code": 7, "status_message": "Invalid API key"},
        )
        client = TMDBClient(api_key="bad", session=session)

        with pytest.raises(FetchError) as exc:
            client.fetch("/movie/popular")
        assert exc.value.kind is ErrorKind.SERVER
        assert "401" in str(exc.value)
        assert "Invalid API key" in str(exc.value)

    def test_http_error_without_json_body(self, mocker, session):
        session.get.return_value = _response(mocker, status=503)
        client = TMDBClient(api_key="k", session=session)

        with pytest.raises(FetchError) as exc:
            client.fetch("/movie/popular")
        assert exc.value.kind is ErrorKind.SERVER
        assert "503" in str(exc.value)


class TestDecode:

    def test_keeps_server_order(self):
        raw = _payload({"id": 3, "title": "C"}, {"id": 1, "title": "A"}, {"id": 2, "title": "B"})
        movies = TMDBClient.decode(raw)
        assert isinstance(movies, tuple)
        assert [m.id for m in movies] == [3, 1, 2]

    def test_empty_results(self):
        assert TMDBClient.decode(_payload()) == ()

    @pytest.mark.parametrize("raw", [
        b"<html>oops</html>",
        b'{"page": 1}',
        b'{"results": {"id": 1}}',
        b'{"results": [{"title": "no id"}]}',
        b'{"results": ["not an object"]}',
        b"[]",
    ])
    def test_malformed_payload_is_decoding(self, raw):
        with pytest.raises(FetchError) as exc:
            TMDBClient.decode(raw)
        assert exc.value.kind is ErrorKind.DECODING


class TestFetchImage:

    def test_returns_image_bytes_without_api_key(self, mocker, session):
        session.get.return_value = _response(mocker, body=b"\x89PNG")
        client = TMDBClient(api_key="k", session=session)

        assert client.fetch_image("https://image.tmdb.org/t/p/w500/a.jpg") == b"\x89PNG"
        assert "params" not in session.get.call_args.kwargs

    def test_http_error_propagates(self, mocker, session):
        r = _response(mocker, status=404)
        r.raise_for_status.side_effect = requests.HTTPError("404 Not Found")
        session.get.return_value = r
        client = TMDBClient(api_key="k", session=session)

        with pytest.raises(requests.HTTPError):
            client.fetch_image("https://image.tmdb.org/t/p/w500/missing.jpg")


def test_missing_api_key_raises(monkeypatch):
    monkeypatch.setattr("movieBrowser.metadata.api_clients.tmdb_client.TMDB_API_KEY", None)
    with pytest.raises(RuntimeError):
        TMDBClient()
