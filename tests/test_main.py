# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import sys

import pytest

import toyrsa
from toyrsa import __main__ as cli


def run_cli(monkeypatch, *argv: str) -> None:
    monkeypatch.setattr(sys, "argv", ["toyrsa", *argv])
    cli.main()


def test_keygen_known(monkeypatch, capsys):
    run_cli(monkeypatch, "-n", "keygen", "-p", "11", "-q", "13", "-e", "23")
    assert capsys.readouterr().out == "(23, 143)\n(47, 143)\n"


def test_keygen_round_trip(monkeypatch, capsys):
    with pytest.warns(RuntimeWarning):
        run_cli(monkeypatch, "-n", "keygen", "-p", "61", "-q", "53", "-e", "17", "-m", "65")
    assert capsys.readouterr().out == "(17, 3233)\n(2753, 3233)\n2790\n65\n"


def test_keygen_message_out_of_range(monkeypatch, capsys):
    with pytest.raises(SystemExit), pytest.warns(RuntimeWarning):
        run_cli(monkeypatch, "-n", "keygen", "-p", "11", "-q", "13", "-e", "23", "-m", "143")
    assert "Value must be in range [0, 143)." in capsys.readouterr().out


@pytest.mark.parametrize("argv,problem", [
    (("-p", "11", "-q", "11", "-e", "7"), "p and q must be different."),
    (("-p", "12", "-q", "13", "-e", "5"), "p = 12 is not a prime number."),
    (("-p", "11", "-q", "15", "-e", "7"), "q = 15 is not a prime number."),
    (("-p", "11", "-q", "13", "-e", "10"), "e = 10 is not coprime to the totient 120."),
    (("-p", "11", "-q", "13", "-e", "121"), "e = 121 must be in range (1, 120)."),
])
def test_keygen_validates(monkeypatch, capsys, argv, problem):
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch, "-n", "keygen", *argv)
    assert exc.value.code == 1
    assert problem in capsys.readouterr().out


def test_keygen_non_interactive_missing(monkeypatch):
    with pytest.raises(IOError, match="Value e is missing"):
        run_cli(monkeypatch, "-n", "keygen", "-p", "11", "-q", "13")


def test_non_interactive_requires_step(monkeypatch):
    with pytest.raises(IOError, match="No step given"):
        run_cli(monkeypatch, "-n")


def test_keygen_interactive(monkeypatch, capsys, mocker):
    mocker.patch("builtins.input", side_effect=["eleven", "11", "", "13", "23"])
    run_cli(monkeypatch, "keygen")
    out = capsys.readouterr().out
    assert out.count("must be a whole number.") == 2
    assert "(47, 143)" in out


def test_step_interactive(monkeypatch, capsys, mocker):
    mocker.patch("builtins.input", side_effect=["nope", "exponent", "61", "53"])
    run_cli(monkeypatch)
    out = capsys.readouterr().out
    assert "Please pick one of: primes, exponent, keygen." in out
    assert "e = 7" in out


def test_primes_defaults_without_advanced(monkeypatch, mocker):
    asked = mocker.patch("builtins.input")
    run_cli(monkeypatch, "primes")
    asked.assert_not_called()


def test_primes_advanced_asks_range(monkeypatch, capsys, mocker):
    mocker.patch("builtins.input", side_effect=["", "12"])
    run_cli(monkeypatch, "-a", "primes")
    out = capsys.readouterr().out
    assert "Press enter to use 100." in out
    # The empty answer keeps min at 100, so the range [100, 12) is rejected.
    assert "min_val must be smaller than max_val." in out


def test_exponent(monkeypatch, capsys):
    run_cli(monkeypatch, "-n", "exponent", "-p", "11", "-q", "13")
    assert capsys.readouterr().out == "e = 7\n"


def test_exponent_randomized(monkeypatch, capsys):
    run_cli(monkeypatch, "-n", "exponent", "-p", "61", "-q", "53", "--randomized")
    e = int(capsys.readouterr().out.strip().removeprefix("e = "))
    assert 1 < e < 3120
    assert toyrsa.gcd(e, 3120) == 1


def test_exponent_validates(monkeypatch, capsys):
    with pytest.raises(SystemExit):
        run_cli(monkeypatch, "-n", "exponent", "-p", "10", "-q", "13")
    assert "p = 10 is not a prime number." in capsys.readouterr().out


def test_exponent_degenerate(monkeypatch, capsys):
    with pytest.raises(SystemExit):
        run_cli(monkeypatch, "-n", "exponent", "-p", "2", "-q", "3")
    assert "Totient must be greater than 3." in capsys.readouterr().out


def test_primes(monkeypatch, capsys):
    run_cli(monkeypatch, "-n", "primes")
    lines = capsys.readouterr().out.splitlines()
    values = dict(line.split(" = ") for line in lines)
    p, q, m = int(values["p"]), int(values["q"]), int(values["M"])
    assert p != q
    assert 100 <= p < 1000
    assert 100 <= q < 1000
    assert toyrsa.is_prime(p)
    assert toyrsa.is_prime(q)
    assert m == p * q


def test_primes_unsatisfiable(monkeypatch, capsys):
    with pytest.raises(SystemExit):
        run_cli(monkeypatch, "-n", "primes", "--min", "24", "--max", "29")
    assert "no prime found" in capsys.readouterr().out
