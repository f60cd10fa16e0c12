import csv
import io

import pytest

from slushfind.cli import build_parser, format_hashes, main, render_table

HEADER = ["id", "h", "d", "sig bytes"]
ROWS = [["x1", 20, 4, 5888], ["x2", 32, 8, 7408]]
TITLE = "Target security level 128, 2^20.0 signatures"


@pytest.mark.parametrize("count", [0, 7, 999, 1000])
def test_format_small_counts_plain(count):
    assert format_hashes(count) == str(count)


def test_format_thousands():
    assert format_hashes(89576) == "89.6K"


def test_format_millions():
    assert format_hashes(553779196) == "554M"


def test_format_billions():
    assert format_hashes(1500000000) == "1.5B"


@pytest.mark.parametrize(
    "count,suffix", [(1001, "K"), (1000001, "M"), (1000000001, "B")]
)
def test_format_suffix_thresholds(count, suffix):
    assert format_hashes(count).endswith(suffix)


def test_render_csv_round_trip():
    text = render_table(HEADER, ROWS, TITLE, "csv")
    parsed = list(csv.reader(io.StringIO(text)))
    assert parsed == [HEADER] + [[str(v) for v in row] for row in ROWS]


def test_render_markdown_has_title_and_cells():
    text = render_table(HEADER, ROWS, TITLE, "markdown")
    assert TITLE in text
    assert "| x1" in text
    assert "5888" in text


def test_render_console_case_insensitive():
    text = render_table(HEADER, ROWS, TITLE, "CONSOLE")
    assert text.splitlines()[0] == TITLE
    for name in HEADER:
        assert name in text


def test_render_unknown_format():
    with pytest.raises(ValueError):
        render_table(HEADER, ROWS, TITLE, "html")


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.target_security_level == 128
    assert args.fallback_security_level == 112
    assert args.min_sig_count == 20.0
    assert args.max_sig_size == 4000
    assert args.min_sig_hashes == 900000000
    assert args.max_sig_hashes == 2000000000
    assert args.max_verify_hashes == 2000
    assert args.eval_sig_size == 0.5
    assert args.eval_sig_hashes == 0.0
    assert args.eval_verify_hashes == 0.5
    assert args.table_format == "console"
    assert args.name_prefix == ""


def test_parser_single_and_double_dash():
    parser = build_parser()
    single = parser.parse_args(["-max_sig_size", "3000"])
    double = parser.parse_args(["--name_prefix", "P-"])
    assert single.max_sig_size == 3000
    assert double.name_prefix == "P-"


def test_main_rejects_extra_arguments(capsys):
    assert main(["stray", "other"]) == 1
    assert "unrecognized arguments: stray, other" in capsys.readouterr().err


def test_main_rejects_unknown_format(capsys):
    assert main(["-table_format", "html"]) == 1
    assert "unrecognized table format: html" in capsys.readouterr().err