import logging

import pytest

from py_convtable.__main__ import main
from py_convtable.logger import logger


def test_convert(capsys):
    assert main(['convert', '1p6', 'pt']) == 0
    assert capsys.readouterr().out == "18 Points\n"


def test_convert_singular(capsys):
    assert main(['convert', '12pt', 'p']) == 0
    assert capsys.readouterr().out == "1 Pica\n"


def test_convert_raw(capsys):
    assert main(['convert', '2i', 'pt', '--raw']) == 0
    assert capsys.readouterr().out == "144.0\n"


def test_convert_other_table(capsys):
    assert main(['-t', 'temperature', 'convert', '0C', 'K']) == 0
    assert capsys.readouterr().out == "273.15 Kelvin\n"


def test_convert_invalid_input(capsys, caplog):
    with caplog.at_level(logging.ERROR, logger=logger.name):
        assert main(['convert', '20km', 'pt']) == 1
    assert capsys.readouterr().out == ''
    assert "Invalid input format or no match found." in caplog.text


def test_unknown_table(caplog):
    with caplog.at_level(logging.ERROR, logger=logger.name):
        assert main(['-t', 'volume', 'convert', '1', 'l']) == 1
    assert "Table 'volume' not found." in caplog.text


def test_parse(capsys):
    assert main(['parse', '1p6']) == 0
    assert capsys.readouterr().out.splitlines() == [
        "main: 1.0 p (scale=12.0, bias=0.0)",
        "sub: 6.0 pt (scale=1.0, bias=0.0)",
        "base: 18.0 pt",
    ]


def test_find(capsys):
    assert main(['find', 'i']) == 0
    assert capsys.readouterr().out == "i: Inch/Inches scale=72.0, bias=0.0, minor=None\n"


def test_tables(capsys):
    assert main(['tables']) == 0
    names = [line.split(':')[0] for line in capsys.readouterr().out.splitlines()]
    assert names == ['distance', 'temperature', 'typography']


def test_config_file(tmp_path, capsys):
    path = tmp_path / "convtab.toml"
    path.write_text('[convtab.tables.typography]\n'
                    'pt = { base = true, term = "Point(s)" }\n'
                    'q = { scale = 0.708661417, term = "Q" }\n', encoding="utf-8")
    assert main(['-c', str(path), 'convert', '4q', 'pt']) == 0
    assert capsys.readouterr().out == "2.834645668 Points\n"


def test_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(['--version'])
    assert exc_info.value.code == 0
    assert capsys.readouterr().out.startswith('convtab v')
