from __future__ import annotations

import logging
import os

import pytest

from water_switch.shared.env import load_secret_file_variables


@pytest.fixture(autouse=True)
def _clean_tuya_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("TUYA_ACCESS_ID", "TUYA_ACCESS_SECRET", "TUYA_ACCESS_SECRET_FILE"):
        monkeypatch.delenv(key, raising=False)


def test_secret_file_populates_target_variable(tmp_path, monkeypatch) -> None:
    secret_file = tmp_path / "tuya_access_secret"
    secret_file.write_text("  s3cr3t\n", encoding="utf-8")
    monkeypatch.setenv("TUYA_ACCESS_SECRET_FILE", str(secret_file))

    load_secret_file_variables()

    assert os.environ["TUYA_ACCESS_SECRET"] == "s3cr3t"


def test_existing_variable_wins_over_secret_file(tmp_path, monkeypatch) -> None:
    secret_file = tmp_path / "tuya_access_id"
    secret_file.write_text("from-file", encoding="utf-8")
    monkeypatch.setenv("TUYA_ACCESS_ID", "from-env")
    monkeypatch.setenv("TUYA_ACCESS_ID_FILE", str(secret_file))

    load_secret_file_variables()

    assert os.environ["TUYA_ACCESS_ID"] == "from-env"


def test_empty_file_path_is_ignored(monkeypatch) -> None:
    monkeypatch.setenv("TUYA_ACCESS_SECRET_FILE", "")

    load_secret_file_variables()

    assert "TUYA_ACCESS_SECRET" not in os.environ


def _write_binary(path) -> str:
    path.write_bytes(b"\xff\xfe\xfd")
    return str(path)


@pytest.mark.parametrize(
    ("make_path", "event"),
    [
        (lambda tmp_path: str(tmp_path / "missing"), "env.secret_file.missing"),
        (
            lambda tmp_path: _write_binary(tmp_path / "binary"),
            "env.secret_file.decode_failed",
        ),
        (lambda tmp_path: str(tmp_path), "env.secret_file.load_failed"),
    ],
)
def test_unreadable_secret_files_are_logged(
    tmp_path, monkeypatch, caplog, make_path, event
) -> None:
    monkeypatch.setenv("TUYA_ACCESS_SECRET_FILE", make_path(tmp_path))

    with caplog.at_level(logging.WARNING):
        load_secret_file_variables()

    assert "TUYA_ACCESS_SECRET" not in os.environ
    assert any(record.message == event for record in caplog.records)
