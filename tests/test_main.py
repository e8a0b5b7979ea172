"""Tests for the application entry point."""

from pathlib import Path

import pytest

from bus_countdown.main import main

STATIC_DATA = Path(__file__).resolve().parent.parent / "static_data"


def _write_config(tmp_path: Path, routes_json: Path, stops_json: Path) -> Path:
    config_path = tmp_path / "config.toml"
    config_path.write_text(
        f'[catalog]\nroutes_json = "{routes_json.as_posix()}"\nstops_json = "{stops_json.as_posix()}"\n',
        encoding="utf-8",
    )
    return config_path


def test_search_with_bundled_catalog(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Given a config pointing at the sample catalog, when searching, then matches are printed."""
    config_path = _write_config(tmp_path, STATIC_DATA / "routes.json", STATIC_DATA / "stops.json")

    status = main(["--config", str(config_path), "search", "Kennedy Plaza", "--threshold", "1.0"])

    assert status == 0
    assert "Kennedy Plaza (ID: 10010" in capsys.readouterr().out


def test_missing_catalog_exits_with_error(tmp_path: Path) -> None:
    """Given a config pointing at missing files, when running, then status is 1."""
    config_path = _write_config(tmp_path, tmp_path / "routes.json", tmp_path / "stops.json")

    assert main(["--config", str(config_path), "info", "10010"]) == 1


def test_missing_config_file_exits_with_error(tmp_path: Path) -> None:
    """Given a config file that does not exist, when running, then status is 1."""
    assert main(["--config", str(tmp_path / "nope.toml"), "info", "10010"]) == 1


def test_invalid_catalog_exits_with_error(tmp_path: Path) -> None:
    """Given malformed catalog JSON records, when running, then status is 1."""
    routes_json = tmp_path / "routes.json"
    stops_json = tmp_path / "stops.json"
    routes_json.write_text('[{"route_id": 1}]', encoding="utf-8")
    stops_json.write_text("[]", encoding="utf-8")
    config_path = _write_config(tmp_path, routes_json, stops_json)

    assert main(["--config", str(config_path), "info", "10010"]) == 1


def test_wrongly_typed_config_value_exits_with_error(tmp_path: Path) -> None:
    """Given a TOML threshold that is not a number, when running, then status is 1."""
    config_path = tmp_path / "config.toml"
    config_path.write_text("[matching]\nthreshold = [1]\n", encoding="utf-8")

    assert main(["--config", str(config_path), "info", "10010"]) == 1
