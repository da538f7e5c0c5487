"""
Server Entry Point Tests
"""

from unittest.mock import patch

from app import run
from app.core.config import Settings


def test_main_serves_app_with_configured_host_and_port():
    settings = Settings(HOST="127.0.0.1", PORT=9001, LOG_LEVEL="WARNING")

    with patch.object(run, "get_settings", return_value=settings), patch.object(run.uvicorn, "run") as serve:
        run.main()

    serve.assert_called_once_with("app.main:app", host="127.0.0.1", port=9001, log_level="warning")
