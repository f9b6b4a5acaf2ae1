"""
tests/test_cli.py

Unit tests for the seqturns command-line entry point.
"""

import pytest
import pandas as pd
from seqturns.cli import main, parse_args


class TestParseArgs:

    def test_defaults(self):
        args = parse_args(["1", "2", "3"])
        assert args.values == ["1", "2", "3"]
        assert args.tails == 2
        assert args.no_ccorr is False
        assert args.text == 1

    def test_invalid_tails_exits(self):
        with pytest.raises(SystemExit):
            parse_args(["--tails", "3"])


class TestMain:

    def test_positional_values(self, capsys):
        status = main("0 3 9 2 1 1 3 4 0 3 5 5 5 8 4 7 3 2 4 3 6".split())
        out = capsys.readouterr().out
        assert status == 0
        assert out.strip() == (
            "Turns: observed = 10.00, expected = 10.67, Z = -0.10, 2p = 0.921736"
        )

    def test_example_dataset(self, capsys):
        assert main(["--example", "gatlin", "--tails", "1"]) == 0
        out = capsys.readouterr().out
        assert "observed = 35.00" in out
        assert "1p = " in out

    def test_csv_file(self, tmp_path, capsys):
        path = tmp_path / "seq.csv"
        pd.DataFrame({"t": range(5), "value": [1, 3, 2, 4, 3]}).to_csv(path, index=False)
        assert main(["--file", str(path), "--column", "value", "--text", "0"]) == 0
        assert capsys.readouterr().out.startswith("observed=3")

    def test_verbose_text(self, capsys):
        assert main(["--example", "gatlin", "--text", "2"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("Turns test results:")
        assert "variance" in out

    def test_non_numeric_reports_error(self, capsys):
        assert main(["1", "x", "3"]) == 1
        assert "numerical" in capsys.readouterr().err

    def test_no_values_reports_error(self, capsys):
        # An empty sequence has N = 0, so the variance is negative.
        assert main([]) == 1
        assert "error" in capsys.readouterr().err

    def test_unknown_column_reports_error(self, tmp_path, capsys):
        path = tmp_path / "seq.csv"
        pd.DataFrame({"value": [1, 3, 2, 4]}).to_csv(path, index=False)
        assert main(["--file", str(path), "--column", "nope"]) == 1
        err = capsys.readouterr().err
        assert "Unknown column 'nope'" in err
        assert "value" in err

    def test_missing_file_reports_error(self, tmp_path, capsys):
        assert main(["--file", str(tmp_path / "absent.csv")]) == 1
        assert "error" in capsys.readouterr().err
