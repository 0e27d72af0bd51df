"""
Tests for the command-line entry point.
"""

import pytest

from main import EXIT_ERROR, EXIT_NOT_FOUND, EXIT_OK, main


@pytest.fixture
def word_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("word\nward\nwork\nfork\ndork\ncord\ncork\n")
    return str(path)


class TestMain:
    def test_bundled_dictionary(self, capsys):
        assert main(["cold", "warm"]) == EXIT_OK
        out = capsys.readouterr().out
        assert out.startswith("cold -> ")
        assert out.rstrip().endswith(" -> warm")
        assert out.count(" -> ") == 4

    def test_custom_dictionary(self, capsys, word_file):
        assert main(["word", "dork", "--dict", word_file]) == EXIT_OK
        assert capsys.readouterr().out == "word -> work -> dork\n"

    def test_graph_strategy(self, capsys, word_file):
        assert main(["word", "dork", "--dict", word_file, "--strategy", "graph"]) == 0
        assert capsys.readouterr().out == "word -> work -> dork\n"

    def test_not_found(self, capsys, word_file):
        assert main(["word", "zzzz", "--dict", word_file]) == EXIT_NOT_FOUND
        assert "No ladder exists between word and zzzz" in capsys.readouterr().out

    def test_max_steps(self, capsys, word_file):
        assert main(["word", "dork", "--dict", word_file, "--max-steps", "1"]) == 1

    def test_invalid_word(self, capsys):
        assert main(["ab", "abc"]) == EXIT_ERROR
        assert "error" in capsys.readouterr().err

    def test_strict_unknown_endpoint(self, capsys):
        assert main(["cold", "zzzz", "--strict"]) == EXIT_ERROR
        assert "not in the dictionary" in capsys.readouterr().err

    def test_missing_dictionary_file(self, capsys, tmp_path):
        missing = str(tmp_path / "missing.txt")
        assert main(["word", "dork", "--dict", missing]) == EXIT_ERROR
        assert "not found" in capsys.readouterr().err

    def test_empty_dictionary_file(self, capsys, tmp_path):
        path = tmp_path / "empty.txt"
        path.write_text("\n")
        assert main(["word", "dork", "--dict", str(path)]) == EXIT_ERROR

    def test_invalid_max_steps(self, capsys, word_file):
        assert main(["word", "dork", "--dict", word_file, "--max-steps", "0"]) == 2

    def test_long_ladder_printed_on_one_line(self, capsys, tmp_path):
        chain = ["b" * i + "a" * (10 - i) for i in range(11)]
        path = tmp_path / "chain.txt"
        path.write_text("\n".join(chain) + "\n")

        assert main([chain[0], chain[-1], "--dict", str(path)]) == EXIT_OK
        out = capsys.readouterr().out
        assert out == " -> ".join(chain) + "\n"
