from __future__ import annotations

import logging
from pathlib import Path

from cart_parser.cli import main as cli_main
from cart_parser.logging.init import get_logger

"""CLI --debug / --inspect-data modes."""


def test_cli_debug_mode_enables_debug_level(write_config, temp_workdir: Path, clean_logging, capsys):
    code = cli_main(['--debug'])

    out = capsys.readouterr().out
    assert code == 0
    assert 'DEBUG debug mode enabled' in out
    assert get_logger().level == logging.DEBUG


def test_cli_inspect_data_prints_table(write_config, sample_csv_files, clean_logging, capsys):
    code = cli_main(['--inspect-data'])

    out = capsys.readouterr().out
    assert code == 2  # invalid.csv fails validation
    assert 'FILE: valid.csv' in out
    assert 'Mollis consequat' in out
    assert 'amount' in out
    assert 'total=28.32' in out
    assert 'FILE: invalid.csv' in out
    assert 'CELL row=1 column=1' in out
    # inspect は出力ファイルを作らない
    assert not Path('output').exists()


def test_cli_inspect_data_no_files(write_config, temp_workdir: Path, clean_logging, capsys):
    code = cli_main(['--inspect-data'])

    assert code == 0
    assert 'inspect: no .csv files' in capsys.readouterr().out


def test_cli_inspect_single_file(temp_workdir: Path, clean_logging, capsys, valid_content: str):
    f = temp_workdir / 'cart.csv'
    f.write_text(valid_content, encoding='utf-8')

    code = cli_main(['--inspect-data', str(f)])

    out = capsys.readouterr().out
    assert code == 0
    assert 'Tvoluptatem' in out
