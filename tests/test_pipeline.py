import os

from pipex.errors import CommandError
from pipex.pipeline import main, run_pipeline


def test_pipeline_runs_both_commands(tmp_path):
    infile = tmp_path / "in.txt"
    outfile = tmp_path / "out.txt"
    infile.write_text("apple\nbanana\ncherry\n")
    errors = run_pipeline(str(infile), "cat", "grep an", str(outfile), os.environ)
    assert errors == []
    assert outfile.read_text() == "banana\n"


def test_pipeline_truncates_outfile(tmp_path):
    infile = tmp_path / "in.txt"
    outfile = tmp_path / "out.txt"
    infile.write_text("new\n")
    outfile.write_text("old content that is longer\n")
    assert run_pipeline(str(infile), "cat", "cat", str(outfile)) == []
    assert outfile.read_text() == "new\n"


def test_missing_infile_still_creates_outfile(tmp_path):
    outfile = tmp_path / "out.txt"
    errors = run_pipeline(str(tmp_path / "missing"), "cat", "cat", str(outfile))
    assert len(errors) == 1
    assert isinstance(errors[0], FileNotFoundError)
    assert outfile.read_text() == ""


def test_unknown_second_command_reported(tmp_path):
    infile = tmp_path / "in.txt"
    outfile = tmp_path / "out.txt"
    infile.write_text("data\n")
    errors = run_pipeline(str(infile), "cat", "no-such-tool-here", str(outfile))
    assert len(errors) == 1
    assert isinstance(errors[0], CommandError)
    assert outfile.exists()


def test_empty_first_command_reported(tmp_path):
    infile = tmp_path / "in.txt"
    outfile = tmp_path / "out.txt"
    infile.write_text("data\n")
    errors = run_pipeline(str(infile), "", "cat", str(outfile))
    assert [type(e) for e in errors] == [CommandError]
    assert outfile.read_text() == ""


def test_main_wrong_argument_count(capsys):
    assert main(["a", "b"]) == 1
    assert "too few arguments" in capsys.readouterr().err


def test_main_too_many_arguments(capsys):
    assert main(["a", "b", "c", "d", "e"]) == 1
    assert "too many arguments" in capsys.readouterr().err


def test_main_success(tmp_path, capsys):
    infile = tmp_path / "in.txt"
    outfile = tmp_path / "out.txt"
    infile.write_text("one\ntwo\n")
    assert main([str(infile), "cat", "cat", str(outfile)]) == 0
    assert outfile.read_text() == "one\ntwo\n"
    assert capsys.readouterr().err == ""


def test_main_reports_failures_but_succeeds(tmp_path, capsys):
    outfile = tmp_path / "out.txt"
    assert main([str(tmp_path / "missing"), "cat", "cat", str(outfile)]) == 0
    assert os.strerror(2) in capsys.readouterr().err