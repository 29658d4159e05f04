"""
Entry point tests: argument handling and logging setup.
"""
import logging
import sys
from unittest.mock import patch

import pytest
from flask import Flask

import run
from wiki_api import create_app


@pytest.fixture
def started(monkeypatch, database):
    """Run ``run.main()`` with a mongomock database and a stubbed server."""
    apps = []

    def fake_create_app(overrides):
        app = create_app(overrides, database=database)
        apps.append(app)
        return app

    monkeypatch.setattr(run, "create_app", fake_create_app)
    monkeypatch.setattr(run, "setup_logging", lambda verbose, log_file: None)

    def _start(*argv):
        monkeypatch.setattr(sys, "argv", ["run.py", *argv])
        with patch.object(Flask, "run") as mock_run:
            run.main()
        return apps[-1], mock_run
    return _start


class TestMain:

    def test_defaults(self, started):
        app, mock_run = started()
        mock_run.assert_called_once_with(
            host=app.config["WIKI_HOST"],
            port=app.config["WIKI_PORT"],
            debug=app.config["WIKI_DEBUG"],
            use_reloader=app.config["WIKI_DEBUG"],
            threaded=True
        )

    def test_host_and_port_override_config(self, started):
        app, mock_run = started("--host", "127.0.0.1", "--port", "8123")
        assert app.config["WIKI_HOST"] == "127.0.0.1"
        assert app.config["WIKI_PORT"] == 8123
        kwargs = mock_run.call_args.kwargs
        assert kwargs["host"] == "127.0.0.1"
        assert kwargs["port"] == 8123

    def test_configuration_error_exits(self, monkeypatch):
        def broken(overrides):
            raise run.ConfigurationError("WIKI_PORT must be an integer")

        monkeypatch.setattr(run, "create_app", broken)
        monkeypatch.setattr(run, "setup_logging", lambda verbose, log_file: None)
        monkeypatch.setattr(sys, "argv", ["run.py"])

        with pytest.raises(SystemExit) as exc_info:
            run.main()
        assert exc_info.value.code == 1


class TestSetupLogging:

    def test_stdout_only(self):
        with patch("run.logging.basicConfig") as mock_config:
            run.setup_logging()
        kwargs = mock_config.call_args.kwargs
        assert kwargs["level"] == logging.INFO
        assert [type(h) for h in kwargs["handlers"]] == [logging.StreamHandler]

    def test_verbose_with_log_file(self, tmp_path):
        log_file = tmp_path / "wiki.log"
        with patch("run.logging.basicConfig") as mock_config:
            run.setup_logging(verbose=True, log_file=str(log_file))
        kwargs = mock_config.call_args.kwargs
        assert kwargs["level"] == logging.DEBUG
        file_handler = kwargs["handlers"][1]
        assert isinstance(file_handler, logging.FileHandler)
        assert file_handler.baseFilename == str(log_file)
        file_handler.close()
