import json

import pytest

import roman_converter.__main__ as cli


@pytest.fixture
def typed(monkeypatch):
    """Feeds the given answers to input() one by one."""
    def feed(*answers):
        iterator = iter(answers)
        monkeypatch.setattr("builtins.input", lambda prompt="": next(iterator))
    return feed


def run_menu(argv=None):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(argv or [])
    return excinfo.value.code


def test_roman_to_decimal(typed, capsys):
    typed("1", "x i v", "0")
    assert run_menu() == 0
    assert "Success! Result: 14" in capsys.readouterr().out


def test_roman_input_is_capped_at_max_length(typed, capsys):
    # 30 characters are cut to 25, still too many repeats
    typed("1", "M" * 30, "0")
    run_menu()
    assert "Error: A symbol cannot appear more than 3 times consecutively" in capsys.readouterr().out


def test_decimal_to_roman(typed, capsys):
    typed("2", "4000", "0")
    run_menu()
    assert "Success! Result: I·V·" in capsys.readouterr().out


def test_decimal_error_keeps_menu_running(typed, capsys):
    typed("2", "-3", "2", "7", "0")
    run_menu()
    out = capsys.readouterr().out
    assert "Error: The number must be positive" in out
    assert "Success! Result: VII" in out


def test_auto_convert(typed, capsys):
    typed("3", "MMXXV", "3", "2025", "0")
    run_menu()
    out = capsys.readouterr().out
    assert "Success! Result: 2025" in out
    assert "Success! Result: MMXXV" in out


def test_legend(typed, capsys):
    typed("4", "0")
    run_menu()
    out = capsys.readouterr().out
    assert "I = 1" in out
    assert "M = 1,000" in out
    assert ": after a symbol = x 1,000,000" in out


def test_invalid_choice(typed, capsys):
    typed("9", "0")
    run_menu()
    assert "Invalid choice" in capsys.readouterr().out


def test_end_of_input_exits(monkeypatch):
    def no_more_input(prompt=""):
        raise EOFError
    monkeypatch.setattr("builtins.input", no_more_input)
    assert run_menu() == 0


def test_debug_prints_tokens(typed, capsys, monkeypatch):
    monkeypatch.setattr(cli, "ROMAN_CONVERTER_DEBUG", True)
    typed("1", "I·V·", "0")
    run_menu()
    assert "Tokens: I·=1000 V·=5000" in capsys.readouterr().out


def test_csv_without_config(typed, capsys):
    typed("5", "0")
    run_menu()
    assert "Error: missing config entry 'paths'" in capsys.readouterr().out


def test_csv_with_config(typed, capsys, tmp_path):
    input_csv = tmp_path / "numbers.csv"
    input_csv.write_text("roman\nXLII\n", encoding="utf-8")
    output_csv = tmp_path / "converted.csv"
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({
        "paths": {"input_csv": str(input_csv), "output_csv": str(output_csv)},
        "column": "roman",
        "direction": "roman",
    }))

    typed("5", "0")
    run_menu([str(config_path)])

    out = capsys.readouterr().out
    assert f"Loaded configuration from: {config_path}" in out
    assert f"Success! Created: {output_csv}" in out
    assert output_csv.read_text(encoding="utf-8").splitlines() == ["roman,value,error", "XLII,42,"]


def test_missing_config_exits(capsys, tmp_path):
    assert run_menu([str(tmp_path / "missing.json")]) == 1
    assert "Error loading config" in capsys.readouterr().out


def test_json_output(typed, capsys):
    typed("2", "4000", "1", "IIII", "0")
    run_menu(["--json"])

    lines = [line for line in capsys.readouterr().out.splitlines() if line.startswith("{")]
    assert json.loads(lines[0]) == {"status": "success", "value": "I·V·"}
    assert json.loads(lines[1]) == {
        "status": "error",
        "value": 0,
        "kind": "too_many_repeats",
        "error": "A symbol cannot appear more than 3 times consecutively",
    }
