from __future__ import annotations

import json
import threading
from collections.abc import Iterator
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path

import pytest
from typer.testing import CliRunner, Result

from atlas.cli.main import app
from tests.factories import country_payload

RUNNER = CliRunner()
pytestmark = pytest.mark.e2e

COUNTRIES = [
    country_payload("NOR", "Norway", region="Europe", languages={"nob": "Norwegian Bokmål"}),
    country_payload("KEN", "Kenya", region="Africa", languages={"eng": "English", "swa": "Swahili"}),
    country_payload("NZL", "New Zealand", region="Oceania", languages={"eng": "English", "mri": "Māori"}),
]


class _RestCountriesHandler(BaseHTTPRequestHandler):
    def do_GET(self) -> None:
        path = self.path.split("?", 1)[0]
        if path == "/v3.1/all":
            self._send(200, COUNTRIES)
            return

        code = path.removeprefix("/v3.1/alpha/").upper()
        matches = [country for country in COUNTRIES if country["cca3"] == code]
        if path.startswith("/v3.1/alpha/") and matches:
            self._send(200, matches)
        else:
            self._send(404, {"status": 404, "message": "Not Found"})

    def _send(self, status: int, body: object) -> None:
        payload = json.dumps(body).encode()
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        self.wfile.write(payload)

    def log_message(self, format: str, *args: object) -> None:
        pass


@pytest.fixture
def api_url() -> Iterator[str]:
    server = ThreadingHTTPServer(("127.0.0.1", 0), _RestCountriesHandler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.server_address[1]}"
    finally:
        server.shutdown()
        server.server_close()


def _invoke(args: list[str], api_url: str) -> Result:
    return RUNNER.invoke(app, args, env={"ATLAS_CONFIG__API__BASE_URL": api_url})


def test_browse_sign_in_and_bookmark(api_url: str, tmp_path: Path) -> None:
    listed = _invoke(["countries", "list", "--language", "English"], api_url)
    assert listed.exit_code == 0, listed.output
    assert "Kenya" in listed.stdout
    assert "New Zealand" in listed.stdout
    assert "Norway" not in listed.stdout
    assert "share: atlas countries query 'language=English'" in listed.stdout

    assert _invoke(["favorites", "add", "NZL"], api_url).exit_code == 1

    login = _invoke(["session", "login", "-u", "kiri", "-e", "kiri@example.com"], api_url)
    assert login.exit_code == 0, login.output

    added = _invoke(["favorites", "add", "nzl"], api_url)
    assert added.exit_code == 0, added.output
    assert "✓ Added 'New Zealand' to favorites" in added.stdout

    shown = _invoke(["countries", "show", "NZL"], api_url)
    assert "New Zealand ♥" in shown.stdout

    stored = json.loads((tmp_path / "xdg-data" / "atlas" / "countries" / "data.json").read_text())
    assert [entry["code"] for entry in stored["favorites"]] == ["NZL"]


def test_unreachable_api_reports_error() -> None:
    result = _invoke(["countries", "list"], "http://127.0.0.1:9")

    assert result.exit_code == 1
    assert "error: Failed to fetch countries" in result.stderr
