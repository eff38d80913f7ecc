import logging

import pytest

from dirserve.app import create_app

LOGGER_NAME = "tests.requests"


@pytest.fixture
def app(site):
    return create_app(str(site), logger=logging.getLogger(LOGGER_NAME))


def _lines(caplog):
    return [r.getMessage() for r in caplog.records if r.name == LOGGER_NAME]


def test_one_line_per_request(app, caplog):
    with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
        app.test_client().get("/about.html")
    assert _lines(caplog) == ["200 GET /about.html"]


def test_query_string_is_logged(app, caplog):
    with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
        app.test_client().get("/about.html?v=2&x=y")
    assert _lines(caplog) == ["200 GET /about.html?v=2&x=y"]


def test_not_found_is_logged(app, caplog):
    with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
        app.test_client().get("/missing.html")
    assert _lines(caplog) == ["200 GET /missing.html"]


def test_redirect_and_method_are_logged(app, caplog):
    client = app.test_client()
    with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
        client.get("/docs")
        client.post("/about.html")
    assert _lines(caplog) == ["307 GET /docs", "405 POST /about.html"]


def test_handler_failure_is_logged_as_500(app, caplog):
    @app.route("/boom")
    def boom():
        raise RuntimeError("boom")

    with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
        resp = app.test_client().get("/boom")
    assert resp.status_code == 500
    assert _lines(caplog) == ["500 GET /boom"]


def test_default_logger_name(site, caplog):
    app = create_app(str(site))
    with caplog.at_level(logging.INFO, logger="dirserve.requests"):
        app.test_client().get("/")
    assert [r.getMessage() for r in caplog.records if r.name == "dirserve.requests"] == ["200 GET /"]


def test_encoded_path_is_logged_encoded(app, caplog):
    with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
        app.test_client().get("/a%3Fb.html")
    assert _lines(caplog) == ["200 GET /a%3Fb.html"]


def test_raw_request_uri_is_preferred(app, caplog):
    with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
        app.test_client().get("/about.html", environ_overrides={"REQUEST_URI": "/about%2Ehtml?v=1"})
    assert _lines(caplog) == ["200 GET /about%2Ehtml?v=1"]


def test_path_is_reencoded_without_raw_uri(app, caplog):
    overrides = {"REQUEST_URI": "", "RAW_URI": ""}
    with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
        app.test_client().get("/a%20b.html?q=1", environ_overrides=overrides)
    assert _lines(caplog) == ["200 GET /a%20b.html?q=1"]
