import json

import pytest

from des_trace.cli import main

from .vectors import CIPHERTEXT, KEY, PLAINTEXT


def test_full_trace(capsys):
    assert main([PLAINTEXT, KEY]) == 0
    out = capsys.readouterr().out
    assert "After Initial Permutation: CC00CCFFF0AAF0AA" in out
    assert "K1 : 1B02EFFC7072" in out
    assert "R16||L16 = 0A4CD99543423234" in out
    assert f"Ciphertext = {CIPHERTEXT}" in out


def test_defaults(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Plaintext: 123456ABCD132536" in out
    assert "Ciphertext = C0B7A8D05F3A829C" in out


def test_single_round(capsys):
    assert main([PLAINTEXT, KEY, "--round", "1"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Round 1:")
    assert "Output: L1 = F0AAF0AA, R1 = EF4A6544" in out
    assert "Round 2:" not in out


def test_json(capsys):
    assert main([PLAINTEXT, KEY, "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["ciphertext"] == CIPHERTEXT
    assert len(data["sub_keys"]) == 16


def test_malformed_input(capsys):
    assert main(["12GZ", KEY]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Invalid hex digit 'G'" in captured.err


def test_json_and_round_are_exclusive(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([PLAINTEXT, KEY, "--json", "--round", "1"])
    assert excinfo.value.code == 2
    assert "not allowed with argument" in capsys.readouterr().err
