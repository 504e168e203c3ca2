import io

from ac_match.__main__ import main


def test_cli_prints_patterns(capsys):
    """
    Test the default output: one matched pattern per line.
    """
    status = main(["cat|dog", "the cat scaty on the dog"])
    out = capsys.readouterr().out

    assert status == 0
    assert out.splitlines() == ["cat", "cat", "dog"]


def test_cli_positions(capsys):
    """
    Test printing the offsets and text of each match.
    """
    status = main(["--positions", "he|she", "ushers"])
    out = capsys.readouterr().out

    assert status == 0
    assert out.splitlines() == ["1\t4\tshe", "2\t4\the"]


def test_cli_ignore_case_and_bounds(capsys):
    """
    Test case-insensitive matching restricted to whole words.
    """
    status = main(["-i", "-w", "cat", "Cat concat CAT"])
    out = capsys.readouterr().out

    assert status == 0
    assert out.splitlines() == ["cat", "cat"]


def test_cli_stdin(capsys, monkeypatch):
    """
    Test reading the text from standard input.
    """
    monkeypatch.setattr("sys.stdin", io.StringIO("a dog\nand a cat\n"))
    status = main(["dog cat", "-"])

    assert status == 0
    assert capsys.readouterr().out.splitlines() == ["dog", "cat"]


def test_cli_no_match(capsys):
    """
    Test the exit status when nothing matches.
    """
    assert main(["xyz", "nothing here"]) == 1
    assert capsys.readouterr().out == ""


def test_cli_no_patterns(capsys):
    """
    Test the exit status and message when the pattern list is empty.
    """
    assert main(["| |", "text"]) == 2
    assert "no patterns" in capsys.readouterr().err


def test_cli_repeated_patterns_reported_once(capsys):
    """
    Test that a repeated pattern gives one line per occurrence in every output mode.
    """
    assert main(["cat|cat", "a cat"]) == 0
    assert capsys.readouterr().out.splitlines() == ["cat"]

    assert main(["-p", "cat|cat", "a cat"]) == 0
    assert capsys.readouterr().out.splitlines() == ["2\t5\tcat"]
