"""Tests for the demo entry point."""

from lazy_generator import main as demo


def test_prints_range12(capsys):
    """Test that the demo prints 1 and 2 on separate lines."""
    assert demo.main([]) == 0
    assert capsys.readouterr().out == "1\n2\n"


def test_square(capsys):
    """Test that --square maps x*x over the sample values."""
    assert demo.main(["--square"]) == 0
    assert capsys.readouterr().out == "1\n4\n"


def test_run_records():
    """Test streaming fake records into DataFrame batches."""
    assert demo.run_records(7, batch_size=3) == 7


def test_records_mode(capsys):
    """Test that --records does not print sample values."""
    assert demo.main(["--records", "4", "--batch-size", "2"]) == 0
    assert capsys.readouterr().out == ""


def test_invalid_config_returns_error(monkeypatch):
    """Test that configuration errors become a non-zero exit code."""
    monkeypatch.setenv("LAZY_GENERATOR_FAULT_POLICY", "bogus")

    assert demo.main([]) == 1
