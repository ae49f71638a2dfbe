# pylint: disable=missing-module-docstring,redefined-outer-name
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import pytest

from rsatrace import __main__ as cli
import rsatrace


@pytest.fixture
def teaching_keys(tmp_path):
    pub, priv = tmp_path / "demo.pub", tmp_path / "demo.key"
    with pytest.warns(RuntimeWarning):
        cli.main(["-n", "keygen", "--mode", "teaching", "-p", str(pub), "-P", str(priv)])
    return pub, priv


def test_keygen_writes_keys(teaching_keys, capsys):
    pub, priv = teaching_keys
    assert capsys.readouterr().out == ""
    assert rsatrace.RSAPubKey.import_key(pub).expo == 5
    assert rsatrace.RSAPrivKey.import_key(priv).expo == 77
    assert "mode: teaching" in pub.read_text(encoding="ascii")


def test_keygen_refuses_overwrite(teaching_keys, capsys):
    pub, priv = teaching_keys
    before = priv.read_text(encoding="ascii")
    priv.write_text("junk", encoding="ascii")
    capsys.readouterr()
    cli.main(["-n", "keygen", "--mode", "teaching", "-p", str(pub), "-P", str(priv)])
    assert "already exists" in capsys.readouterr().out
    assert priv.read_text(encoding="ascii") == "junk"
    with pytest.warns(RuntimeWarning):
        cli.main(["-n", "keygen", "-m", "teaching", "-o", "-p", str(pub), "-P", str(priv)])
    assert priv.read_text(encoding="ascii") == before


def test_encrypt_decrypt(teaching_keys, capsys):
    pub, priv = teaching_keys
    capsys.readouterr()
    cli.main(["-n", "encrypt", "-p", str(pub), "--message", "Hi"])
    assert capsys.readouterr().out == "WQ==:0Q==\n"
    cli.main(["-n", "decrypt", "-P", str(priv), "--message", "WQ==:0Q=="])
    assert capsys.readouterr().out == "Hi\n"


def test_message_from_file(teaching_keys, tmp_path, capsys):
    pub, priv = teaching_keys
    (tmp_path / "plain.txt").write_text("Hi", encoding="utf-8")
    (tmp_path / "cipher.txt").write_text("WQ==:0Q==\n", encoding="ascii")
    capsys.readouterr()
    cli.main(["-n", "encrypt", "-p", str(pub), "--message", f"P:{tmp_path / 'plain.txt'}"])
    assert capsys.readouterr().out == "WQ==:0Q==\n"
    cli.main(["-n", "decrypt", "-P", str(priv), "--message", f"P:{tmp_path / 'cipher.txt'}"])
    assert capsys.readouterr().out == "Hi\n"


def test_trace_output(teaching_keys, capsys):
    pub, _ = teaching_keys
    capsys.readouterr()
    cli.main(["-n", "encrypt", "-p", str(pub), "--message", "Hi", "--trace"])
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "[1] Input Message: Reading the plaintext message (active)"
    assert "    value: 72^5 mod 221 = 89" in lines
    assert "[8] Complete: Encryption finished successfully (completed)" in lines
    assert lines[-1] == "WQ==:0Q=="


def test_out_of_range_character(teaching_keys, capsys):
    pub, _ = teaching_keys
    with pytest.raises(SystemExit) as err:
        cli.main(["-n", "encrypt", "-p", str(pub), "--message", "H" + chr(300)])
    assert err.value.code == 1
    assert "out of range" in capsys.readouterr().err


def test_bad_ciphertext(teaching_keys, capsys):
    _, priv = teaching_keys
    with pytest.raises(SystemExit):
        cli.main(["-n", "decrypt", "-P", str(priv), "--message", "WQ==::0Q=="])
    assert capsys.readouterr().err.startswith("Error: ")


def test_non_interactive_missing_argument():
    with pytest.raises(OSError, match="public_key"):
        cli.main(["-n", "encrypt", "--message", "Hi"])


def test_interactive_prompts(teaching_keys, mocker, capsys):
    pub, _ = teaching_keys
    mocker.patch("builtins.input", side_effect=["nonsense", "encrypt", str(pub), "", "Hi"])
    cli.main([])
    out = capsys.readouterr().out
    assert "Please select an option from the list." in out
    assert "Please provide a value." in out
    assert "Ciphertext:\nWQ==:0Q==\n" in out
    assert out.rstrip().endswith("Goodbye!")


def test_checkmodes():
    assert cli.checkmodes("mode", (True, False)) == "secure"
    assert cli.checkmodes("trace", (False, False)) is False
    assert isinstance(cli.checkmodes("trace", (False, True)), cli.HelpData)
    with pytest.raises(IOError):
        cli.checkmodes("message", (True, False))
