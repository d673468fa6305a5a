import builtins

import pytest

from classicalciphers import cli


def feed(monkeypatch, answers):
    answers = iter(answers)
    monkeypatch.setattr(builtins, "input", lambda prompt="": next(answers))


def last_line(out: str) -> str:
    return out.strip().splitlines()[-1]


def test_playfair_encrypt_from_arguments(capsys):
    code = cli.main(["--cipher", "playfair", "--key", "monarchy", "--message", "instruments", "--encrypt"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Encrypted text:" in out
    assert last_line(out) == "gatlmzclrqtx"


def test_playfair_input_is_normalised(capsys):
    code = cli.main(["--cipher", "playfair", "--key", "Mon Archy", "--message", "Instru Ments", "--encrypt"])
    assert code == 0
    assert last_line(capsys.readouterr().out) == "gatlmzclrqtx"


def test_hill_decrypt_from_arguments(capsys):
    code = cli.main(["--cipher", "hill", "--key", "gybnqkurp", "--message", "POH", "--decrypt"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Decrypted text:" in out
    assert last_line(out) == "act"


def test_hill_non_invertible_key_is_reported(capsys):
    code = cli.main(["--cipher", "hill", "--key", "abc", "--message", "abcdef", "--decrypt"])
    out = capsys.readouterr().out
    assert code == 1
    assert out.startswith("Error:")
    assert "not invertible" in out


def test_railfence_keeps_case_and_spaces(capsys):
    code = cli.main(["--cipher", "railfence", "--key", "2", "--message", "He llo", "--encrypt"])
    assert code == 0
    assert last_line(capsys.readouterr().out) == "H lXeloX"


def test_railfence_rejects_zero_rails(capsys):
    code = cli.main(["--cipher", "railfence", "--key", "0", "--message", "abc", "--encrypt"])
    out = capsys.readouterr().out
    assert code == 1
    assert "cannot be used with Rail Fence" in out


def test_verbose_flag_prints_trace(capsys):
    cli.main(["--cipher", "railfence", "--key", "3", "--message", "wearediscoveredfleeatonce",
              "--encrypt", "--verbose"])
    out = capsys.readouterr().out
    assert "[RAIL] Matrix:" in out
    assert last_line(out) == "wecrlteerdsoeefeaocXaivdenX"


@pytest.mark.parametrize("argv", [
    ["--cipher", "rot13"],
    ["--message", "abc1"],
    ["--key", "abc-1"],
    ["--encrypt", "--decrypt"],
])
def test_malformed_arguments_exit_with_usage_error(argv):
    with pytest.raises(SystemExit) as exc:
        cli.main(argv)
    assert exc.value.code == 2


def test_fully_interactive_session_reprompts(monkeypatch, capsys):
    feed(monkeypatch, ["rot13", "playfair", "monarchy!", "monarchy", "instruments 2", "instruments", "maybe", "no", "yes"])
    code = cli.main([])
    out = capsys.readouterr().out
    assert code == 0
    assert "Error: Unknown value `rot13`" in out
    assert "Error: Invalid key `monarchy!`" in out
    assert "Error: Invalid message `instruments 2`" in out
    assert "Error: Unexpected answer `maybe`" in out
    assert "[PLAYFAIR]" not in out
    assert last_line(out) == "gatlmzclrqtx"


def test_missing_values_are_asked_for(monkeypatch, capsys):
    feed(monkeypatch, ["0", "abc", "3", "no"])
    code = cli.main(["--cipher", "railfence", "--message", "wearediscoveredfleeatonce"])
    out = capsys.readouterr().out
    assert code == 0
    assert out.count("cannot be used with RailFence cipher") == 2
    assert "Decrypted text:" in out


def test_verbose_is_not_asked_when_arguments_are_given(monkeypatch, capsys):
    feed(monkeypatch, ["yes"])
    code = cli.main(["--cipher", "hill", "--key", "gybnqkurp", "--message", "act"])
    out = capsys.readouterr().out
    assert code == 0
    assert "[HILL]" not in out
    assert last_line(out) == "poh"


def test_end_of_input_aborts(monkeypatch, capsys):
    def eof(prompt=""):
        raise EOFError
    monkeypatch.setattr(builtins, "input", eof)
    assert cli.main(["--cipher", "hill"]) == 1
    assert "Aborted." in capsys.readouterr().out


def test_normalize():
    assert cli.normalize("Hello World") == "helloworld"
    assert cli.normalize("   ") == ""


def test_is_yes():
    assert cli.is_yes("YES")
    assert cli.is_yes("y")
    assert cli.is_yes("True")
    assert not cli.is_yes("no")
    assert not cli.is_yes("false")
