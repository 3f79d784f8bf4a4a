# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from correct_word import envdefault
from correct_word.cli import CorrectWordCLI
from pathlib import Path
from pytest import CaptureFixture, LogCaptureFixture, MonkeyPatch

import io
import json
import pytest
import re

DICTIONARY = ["hello", "world", "hell", "help", "helo", "hola"]
EXIT_CODE_INVALID_USAGE = 2


@pytest.fixture(name="config_file")
def fixture_config_file(tmp_path: Path, monkeypatch: MonkeyPatch) -> Path:
    monkeypatch.setattr(envdefault, "CORRECT_WORD_ALGORITHM", None)
    return tmp_path / "correct-word.json"


def run(config_file: Path, *args: str) -> int | None:
    return CorrectWordCLI().run(args=["--config", str(config_file), *args])


def fuzzy_compare_assert(actual: str, expected: str) -> None:
    cleanup_actual = re.sub(r" +$", "", actual.strip(), flags=re.MULTILINE)
    cleanup_expected = re.sub(r" +$", "", expected.strip(), flags=re.MULTILINE)
    assert cleanup_actual == cleanup_expected


def test_cli() -> None:
    with pytest.raises(SystemExit) as excinfo:
        CorrectWordCLI().run(args=["--help"])
    assert excinfo.value.code == 0


def test_correct(config_file: Path, capsys: CaptureFixture[str]) -> None:
    assert run(config_file, "correct", "helo", *DICTIONARY) is None
    expected = """
RANK  WORD  CONFIDENCE
====  ====  ==========
1     helo  1.000
"""
    fuzzy_compare_assert(capsys.readouterr().out, expected)


def test_correct_limit(config_file: Path, capsys: CaptureFixture[str]) -> None:
    assert run(config_file, "correct", "--limit", "3", "helo", *DICTIONARY) is None
    expected = """
RANK  WORD   CONFIDENCE
====  =====  ==========
1     helo   1.000
2     hello  0.800
3     hell   0.750
"""
    fuzzy_compare_assert(capsys.readouterr().out, expected)


def test_correct_json(config_file: Path, capsys: CaptureFixture[str]) -> None:
    assert run(config_file, "correct", "--json", "-n", "2", "helo", *DICTIONARY) is None
    assert json.loads(capsys.readouterr().out) == [
        {"confidence": 1.0, "rank": 1, "word": "helo"},
        {"confidence": 0.8, "rank": 2, "word": "hello"},
    ]


def test_correct_word_list_file(config_file: Path, tmp_path: Path, capsys: CaptureFixture[str]) -> None:
    word_list = tmp_path / "words.txt"
    word_list.write_text("world\n\nhelp\n  hell  \n", encoding="utf-8")
    assert run(config_file, "correct", "--json", "--limit", "5", "helo", "hola", f"@{word_list}") is None
    assert [item["word"] for item in json.loads(capsys.readouterr().out)] == ["help", "hell", "hola", "world"]


def test_correct_word_list_stdin(config_file: Path, monkeypatch: MonkeyPatch, capsys: CaptureFixture[str]) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("world\nhell\n"))
    assert run(config_file, "correct", "--json", "helo", "@-") is None
    assert json.loads(capsys.readouterr().out) == [{"confidence": 0.75, "rank": 1, "word": "hell"}]


def test_correct_missing_word_list(config_file: Path, tmp_path: Path, caplog: LogCaptureFixture) -> None:
    assert run(config_file, "correct", "helo", f"@{tmp_path / 'missing.txt'}") == 1
    assert "command failed: UserError: Failed to read word list" in caplog.text


def test_correct_empty_dictionary(config_file: Path, caplog: LogCaptureFixture) -> None:
    assert run(config_file, "correct", "helo") == 1
    assert "command failed: EmptyDictionary" in caplog.text


@pytest.mark.parametrize("limit", ["0", "-1", "many"])
def test_correct_invalid_limit(config_file: Path, limit: str) -> None:
    with pytest.raises(SystemExit) as excinfo:
        run(config_file, "correct", "--limit", limit, "helo", *DICTIONARY)
    assert excinfo.value.code == EXIT_CODE_INVALID_USAGE


def test_config_limit(config_file: Path, capsys: CaptureFixture[str]) -> None:
    config_file.write_text('{"limit": 2}', encoding="utf-8")
    assert run(config_file, "correct", "--json", "helo", *DICTIONARY) is None
    assert [item["word"] for item in json.loads(capsys.readouterr().out)] == ["helo", "hello"]

    # command line wins over the config file
    assert run(config_file, "correct", "--json", "--limit", "1", "helo", *DICTIONARY) is None
    assert [item["word"] for item in json.loads(capsys.readouterr().out)] == ["helo"]


@pytest.mark.parametrize("limit", ["0", "true", '"2"'])
def test_config_invalid_limit(config_file: Path, caplog: LogCaptureFixture, limit: str) -> None:
    config_file.write_text('{"limit": %s}' % limit, encoding="utf-8")
    assert run(config_file, "correct", "helo", *DICTIONARY) == 1
    assert "Invalid 'limit' in configuration file" in caplog.text


def test_config_invalid_json(config_file: Path, caplog: LogCaptureFixture) -> None:
    config_file.write_text("{", encoding="utf-8")
    assert run(config_file, "distance", "a", "b") == 1
    assert "Invalid JSON in configuration file" in caplog.text


def test_config_algorithm(config_file: Path, caplog: LogCaptureFixture) -> None:
    config_file.write_text('{"algorithm": "soundex"}', encoding="utf-8")
    assert run(config_file, "distance", "a", "b") == 1
    assert "command failed: UnknownAlgorithm" in caplog.text


def test_algorithm_precedence(config_file: Path, monkeypatch: MonkeyPatch, capsys: CaptureFixture[str]) -> None:
    config_file.write_text('{"algorithm": "soundex"}', encoding="utf-8")
    monkeypatch.setattr(envdefault, "CORRECT_WORD_ALGORITHM", "Levenshtein")
    assert run(config_file, "distance", "kitten", "sitting") is None
    assert capsys.readouterr().out == "3\n"

    monkeypatch.setattr(envdefault, "CORRECT_WORD_ALGORITHM", "soundex")
    assert run(config_file, "--algorithm", "LEVENSHTEIN", "distance", "kitten", "sitting") is None
    assert capsys.readouterr().out == "3\n"


def test_unknown_algorithm_option(config_file: Path, caplog: LogCaptureFixture) -> None:
    assert run(config_file, "--algorithm", "soundex", "distance", "a", "b") == 1
    assert "unsupported algorithm 'soundex'" in caplog.text


def test_distance(config_file: Path, capsys: CaptureFixture[str]) -> None:
    assert run(config_file, "distance", "helo", "") is None
    assert capsys.readouterr().out == "4\n"


def test_suggest(config_file: Path, capsys: CaptureFixture[str]) -> None:
    assert run(config_file, "suggest", "kakfa", "kafka", "pg", "redis") is None
    assert capsys.readouterr().out == "kafka\n"


def test_suggest_nothing_close(config_file: Path, caplog: LogCaptureFixture, capsys: CaptureFixture[str]) -> None:
    assert run(config_file, "suggest", "--max-distance", "1", "kakfa", "kafka", "pg") == 1
    assert capsys.readouterr().out == ""
    assert "No suggestion within 1 edits of 'kakfa'" in caplog.text


def test_algorithm_list(config_file: Path, capsys: CaptureFixture[str]) -> None:
    assert run(config_file, "algorithm", "list") is None
    assert capsys.readouterr().out == "levenshtein\n"


def test_main_exit_code(config_file: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        CorrectWordCLI().main(["--config", str(config_file), "correct", "helo"])
    assert excinfo.value.code == 1


def test_correct_literal_at_sign_word(config_file: Path, capsys: CaptureFixture[str]) -> None:
    assert run(config_file, "correct", "--json", "@home", "@@home", "@@house") is None
    assert json.loads(capsys.readouterr().out) == [{"confidence": 1.0, "rank": 1, "word": "@home"}]


def test_empty_algorithm_option(config_file: Path, caplog: LogCaptureFixture) -> None:
    config_file.write_text('{"algorithm": "levenshtein"}', encoding="utf-8")
    assert run(config_file, "--algorithm", "", "distance", "a", "b") == 1
    assert "command failed: UnknownAlgorithm: unsupported algorithm ''" in caplog.text
