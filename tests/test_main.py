import json

import pytest

from registrar import main as main_module
from registrar.main import RegistrarPlatform, main


def test_demo_prints_report(capsys):
    main(["--demo"])

    out = capsys.readouterr().out
    assert "=== REGISTRAR REPORT ===" in out
    assert "Students:    4" in out
    assert "Top student: Carol Davis (S003), GPA 3.90" in out


def test_console_mode_with_seed(monkeypatch, capsys):
    inputs = iter(["1", "4", "9", "99"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(inputs))

    main(["--seed"])

    out = capsys.readouterr().out
    assert "Student[Id=S001, Name=Alice Johnson, Age=19, GPA=3.60]" in out
    assert out.rstrip().endswith("Goodbye!")


def test_serve_uses_configured_address(monkeypatch, tmp_path):
    calls = {}

    def fake_run_server(self):
        calls['host'] = self.settings.rest_host
        calls['port'] = self.settings.rest_port

    monkeypatch.setattr(RegistrarPlatform, "run_server", fake_run_server)
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"rest_host": "0.0.0.0", "rest_port": 9000}))

    main(["--config", str(path), "--serve", "--port", "9100"])

    assert calls == {'host': "0.0.0.0", 'port': 9100}


def test_bad_config_exits(tmp_path):
    with pytest.raises(SystemExit):
        main(["--config", str(tmp_path / "missing.json")])


def test_configure_logging_level():
    import logging

    main_module.configure_logging("DEBUG")
    assert logging.getLogger().level == logging.DEBUG
    main_module.configure_logging("WARNING")


@pytest.mark.parametrize("argv", [
    ["--serve", "--port", "99999"],
    ["--serve", "--port", "0"],
    ["--serve", "--log-level", "verbose"],
])
def test_invalid_cli_overrides_exit(monkeypatch, argv):
    monkeypatch.setattr(RegistrarPlatform, "run_server", lambda self: pytest.fail("server started"))

    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    assert exc_info.value.code == 2
