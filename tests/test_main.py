"""Tests for main.py: command line entry point."""

from unittest.mock import patch

import pytest

from core.errors import NetworkError, SubmissionError


@pytest.fixture(autouse=True)
def no_log_file(monkeypatch, tmp_path):
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "customer_table.log"))


def test_list_prints_table(capsys):
    from main import main

    records = ({"cod_cliente": 1, "nombre": "Ana", "apellidos": "Rojas", "estado": 1},)
    with patch("main.CustomerApiClient.fetch_records", return_value=records):
        code = main(["list"])

    out = capsys.readouterr().out
    assert code == 0
    assert "NOMBRE" in out
    assert "APELLIDOS" in out
    assert "Ana" in out
    assert "COD_CLIENTE" not in out
    assert "ESTADO" not in out


def test_list_empty(capsys):
    from main import main, EMPTY_MESSAGE

    with patch("main.CustomerApiClient.fetch_records", return_value=()):
        code = main(["list"])
    assert code == 0
    assert EMPTY_MESSAGE in capsys.readouterr().out


def test_list_failure_exit_code(capsys):
    from main import main

    with patch("main.CustomerApiClient.fetch_records", side_effect=NetworkError("down")):
        code = main(["list"])
    assert code == 1
    assert "Could not load the data" in capsys.readouterr().err


def test_add_missing_required_sends_nothing(capsys):
    from main import main

    with patch("main.CustomerApiClient.create_record") as mock_create:
        code = main(["add", "--apellidos", "X", "--ci", "1"])
    assert code == 1
    mock_create.assert_not_called()
    assert "nombre" in capsys.readouterr().err


def test_add_success_prints_confirmation_and_table(capsys):
    from main import main

    records = ({"cod_cliente": 7, "nombre": "Ana", "estado": 1},)
    with patch("main.CustomerApiClient.create_record", return_value="Cliente añadido") as mock_create, \
         patch("main.CustomerApiClient.fetch_records", return_value=records) as mock_fetch:
        code = main(["add", "--nombre", "Ana", "--apellidos", "Rojas", "--ci", "123",
                     "--fecha-nacimiento", "1990-05-01"])

    assert code == 0
    draft = mock_create.call_args.args[0]
    assert draft.fecha_nacimiento == "1990-05-01"
    assert draft.estado == 1
    mock_fetch.assert_called_once()
    out = capsys.readouterr().out
    assert "Cliente añadido" in out
    assert "Ana" in out


def test_add_rejected(capsys):
    from main import main

    with patch("main.CustomerApiClient.create_record", side_effect=SubmissionError("CI duplicado")), \
         patch("main.CustomerApiClient.fetch_records") as mock_fetch:
        code = main(["add", "--nombre", "Ana", "--apellidos", "Rojas", "--ci", "123"])

    assert code == 1
    mock_fetch.assert_not_called()
    assert "CI duplicado" in capsys.readouterr().err
