import pytest

import demo


def test_parse_command_prints_all_encodings(capsys):
    rc = demo.main(["parse", "1.5 UNC", "123456 yn"])
    out = capsys.readouterr().out
    print(out)
    assert rc == 0
    assert "yocto=1500000000000000000000000" in out
    assert "display='1.50 UNC'" in out
    assert 'json="123456"' in out
    assert "borsh=40e20100000000000000000000000000" in out


def test_parse_command_reports_errors(capsys):
    rc = demo.main(["parse", "1.1.1 UNC", "5 pas"])
    out = capsys.readouterr().out
    assert rc == 1
    assert "invalid tokens amount: invalid number: 1.1.1" in out
    assert "invalid token unit: 5 pas" in out


def test_format_command(capsys):
    rc = demo.main(["format", "0", "1", str(10 ** 24 + 1), "-3"])
    out = capsys.readouterr().out
    assert rc == 1
    assert "0: 0 UNC" in out
    assert "1: <0.001 UNC" in out
    assert "1.01 UNC" in out
    assert "'-3': error" in out


def test_tiers_command(capsys):
    assert demo.main(["tiers"]) == 0
    out = capsys.readouterr().out
    assert out.count("tier=") == 11
    assert "display='1.00 UNC' tier=4" in out


def test_command_required():
    with pytest.raises(SystemExit):
        demo.main([])
