from unittest.mock import patch

from fastapi import FastAPI

from email_pgp.cli import main


def test_main_serves_app_on_configured_port(monkeypatch) -> None:
    monkeypatch.setenv("EMAIL_PGP_PORT", "4242")
    monkeypatch.setenv("EMAIL_PGP_LOG_LEVEL", "warning")

    with (
        patch("email_pgp.cli.uvicorn.run") as run,
        patch("email_pgp.cli.configure_logging") as configure,
    ):
        main()

    configure.assert_called_once_with("WARNING", "console")
    app = run.call_args.args[0]
    assert isinstance(app, FastAPI)
    assert run.call_args.kwargs == {"host": "127.0.0.1", "port": 4242, "log_level": "warning"}
