"""Tests for the pie command — seed handling, banner and report."""

import math

import pytest

import pie
from estimator import estimate_pi
from monte_carlo import WorkerResult
from pie import DEFAULT_SEED, MAX_SEED, main, parse_seed, seed_from_argv
from report import format_banner, format_report, format_worker_line
from runtime import RuntimeConfig


class TestParseSeed:

    @pytest.mark.unit
    @pytest.mark.parametrize("text,expected", [
        ("123", 123),
        ("  42abc", 42),
        ("+7", 7),
        ("abc", 0),
        ("", 0),
        ("-5", 0),
        ("0099", 99),
    ])
    def test_best_effort(self, text, expected):
        assert parse_seed(text) == expected

    @pytest.mark.unit
    def test_clamps_large_values(self):
        assert parse_seed("9" * 40) == MAX_SEED


class TestSeedFromArgv:

    @pytest.mark.unit
    def test_single_argument(self):
        seed, notices = seed_from_argv(["pie", "99"])
        assert seed == 99
        assert "argv[1]: 99" in notices[0]

    @pytest.mark.unit
    @pytest.mark.parametrize("argv", [["pie"], ["pie", "1", "2"], []])
    def test_wrong_count_uses_default(self, argv):
        seed, notices = seed_from_argv(argv)
        assert seed == DEFAULT_SEED
        assert notices[-1] == f"Will use default seed {DEFAULT_SEED}"


class TestReport:

    @pytest.mark.unit
    def test_worker_line(self):
        line = format_worker_line(WorkerResult(0, 1, 10, 7), 4)
        assert line == "taskid   0 [4]  with seed      1 : nhits = 7"

    @pytest.mark.unit
    def test_banner(self):
        text = format_banner(654321, RuntimeConfig('threads', 2), 1000)
        assert "Base seed set to 654321" in text
        assert "concurrent.futures threads" in text
        assert "with 1000 throws" in text

    @pytest.mark.unit
    def test_serial_banner(self):
        text = format_banner(1, RuntimeConfig('serial', 1), 10)
        assert "NOT running in parallel" in text

    @pytest.mark.unit
    def test_report_contents(self):
        results = [WorkerResult(0, 1, 500, 340), WorkerResult(1, 2, 500, 350)]
        est = estimate_pi(690, 1000)
        text = format_report(results, est, 2)
        assert "Total nhits : 690" in text
        assert "Binomial probability 0.6900000000" in text
        assert "Sum 1.0000000000" in text
        assert f"Estimate of pi = {est.pi:.10f} +- {est.error:.10f}" in text
        assert f"True value PIE = {math.pi:.10f}" in text
        assert "No. of standard deviations" in text
        assert text.endswith("Used 2 workers")


class TestMain:

    @pytest.mark.unit
    def test_runs_and_reports(self, monkeypatch, capsys):
        monkeypatch.setattr(pie, 'N_TRIALS', 20_000)
        monkeypatch.setenv('PIE_BACKEND', 'serial')
        monkeypatch.delenv('PIE_VERBOSE', raising=False)
        assert main(["pie", "17"]) == 0
        out = capsys.readouterr().out
        assert "Base seed set to 17" in out
        assert "taskid   0 [1]  with seed     17" in out
        assert "Estimate of pi =" in out
        assert "Sampling took" in out

    @pytest.mark.unit
    def test_default_seed_notice(self, monkeypatch, capsys):
        monkeypatch.setattr(pie, 'N_TRIALS', 1000)
        monkeypatch.setenv('PIE_BACKEND', 'threads')
        monkeypatch.setenv('PIE_NUM_WORKERS', '3')
        assert main(["pie"]) == 0
        out = capsys.readouterr().out
        assert f"Will use default seed {DEFAULT_SEED}" in out
        assert "Used 3 workers" in out
