"""Integration tests for the wsana, wswordle and wstrie front-ends."""

import logging

import orjson
import pytest

from wordsieve.cli import ana, trie, wordle
from wordsieve.cli.common import configure_logging
from wordsieve.generate import candidates


def run_lines(capsys, main, argv):
    assert main(argv) == 0
    return capsys.readouterr().out.splitlines()


# =============================================================================
# wsana
# =============================================================================

class TestAnaCLI:
    """Anagram front-end."""

    def test_anagram_equal_length(self, dict_file, capsys):
        lines = run_lines(capsys, ana.main, ['--dict', str(dict_file), '--known', 'abc', '--mask', '???'])
        assert lines == ['cab', 'abc', 'bca']

    def test_anagram_with_filler(self, dict_file, capsys):
        lines = run_lines(capsys, ana.main, [
            '--dict', str(dict_file), '--known', 'ab', '--maybe', 'c', '--mask', '???',
        ])
        assert set(lines) == {'cab', 'abc', 'bca'}

    def test_mask_only(self, dict_file, capsys):
        lines = run_lines(capsys, ana.main, ['--dict', str(dict_file), '--mask', '?i?e?'])
        assert lines == ['liker', 'tiger']

    def test_partial(self, dict_file, capsys):
        lines = run_lines(capsys, ana.main, [
            '--dict', str(dict_file), '--known', 'tacx', '--mask', '???', '--partial',
        ])
        assert lines == ['cat', 'act', 'tac']

    def test_limit(self, dict_file, capsys):
        lines = run_lines(capsys, ana.main, ['--dict', str(dict_file), '--mask', '???', '--limit', '2'])
        assert lines == ['cab', 'abc']

    def test_analyze(self, dict_file, capsys):
        lines = run_lines(capsys, ana.main, [
            '--dict', str(dict_file), '--mask', '?????', '--analyze', '--limit', '3',
        ])
        assert len(lines) == 3
        for line in lines:
            word, counts = line.split(': ')
            green, yellow = counts.split('/')
            assert len(word) == 5
            assert int(green) >= 0 and int(yellow) >= 0

    def test_no_results_is_success(self, dict_file, capsys):
        assert run_lines(capsys, ana.main, ['--dict', str(dict_file), '--known', 'xyz', '--mask', '???']) == []

    def test_embedded_dictionary(self, capsys, monkeypatch):
        monkeypatch.delenv('WORDSIEVE_DICT', raising=False)
        lines = run_lines(capsys, ana.main, ['--known', 'listen', '--mask', '??????'])
        assert set(lines) == {'enlist', 'inlets', 'listen', 'silent', 'tinsel'}

    def test_spec_file(self, dict_file, tmp_path, capsys):
        spec_file = tmp_path / "anagram.yaml"
        spec_file.write_text("known: abc\nmask: '???'\nlimit: 1\n")
        lines = run_lines(capsys, ana.main, ['--dict', str(dict_file), '--spec', str(spec_file)])
        assert lines == ['cab']

    def test_wordle_keys_rejected(self, dict_file, tmp_path, caplog):
        spec_file = tmp_path / "wordle.yaml"
        spec_file.write_text("gray: stoi\n")
        with caplog.at_level(logging.ERROR):
            assert ana.main(['--dict', str(dict_file), '--spec', str(spec_file)]) == 1
        assert "wswordle" in caplog.text

    def test_wordle_wildcard_rejected(self, dict_file, caplog):
        with caplog.at_level(logging.ERROR):
            assert ana.main(['--dict', str(dict_file), '--mask', '__a__']) == 1
        assert "wildcard" in caplog.text

    def test_missing_dictionary(self, temp_dir, caplog):
        with caplog.at_level(logging.ERROR):
            assert ana.main(['--dict', str(temp_dir / 'missing.txt')]) == 1
        assert "missing.txt" in caplog.text

    def test_negative_limit(self, dict_file):
        assert ana.main(['--dict', str(dict_file), '--limit', '-1']) == 1

    def test_malformed_limit(self, dict_file, capsys, caplog):
        with caplog.at_level(logging.ERROR):
            with pytest.raises(SystemExit) as excinfo:
                ana.main(['--dict', str(dict_file), '--limit', 'abc'])
        assert excinfo.value.code == 1
        assert "--limit" in caplog.text
        assert "usage: wsana" in capsys.readouterr().err

    def test_corrupt_trie(self, temp_dir, caplog):
        bad_trie = temp_dir / "words.trie"
        bad_trie.write_text("crane\nstare\n")
        with caplog.at_level(logging.ERROR):
            assert ana.main(['--dict', str(bad_trie)]) == 1
        assert "not a MARISA trie" in caplog.text


# =============================================================================
# wswordle
# =============================================================================

class TestWordleCLI:
    """Wordle front-end."""

    def test_match(self, dict_file, capsys):
        lines = run_lines(capsys, wordle.main, [
            '--dict', str(dict_file), '--green', '__a__', '--yellow', '_r___', '--gray', 's', '--match',
        ])
        assert lines == [
            'urali (150)', 'crane (145)', 'trace (145)', 'react (145)', 'crate (145)', 'grape (143)',
        ]

    def test_discover_is_default(self, dict_file, capsys):
        lines = run_lines(capsys, wordle.main, [
            '--dict', str(dict_file), '--yellow', '_r___', '--exclude', 'c', '--limit', '2',
        ])
        assert lines == ['slate (150)', 'lipas (145)']

    def test_gray_and_exclude_combine(self, dict_file, capsys):
        lines = run_lines(capsys, wordle.main, [
            '--dict', str(dict_file), '--yellow', '_r___', '--gray', 'c', '--exclude', 'e',
        ])
        assert lines == ['lipas (145)', 'ghost (142)']

    def test_repeated_yellows(self, dict_file, capsys):
        lines = run_lines(capsys, wordle.main, [
            '--dict', str(dict_file), '--yellow', '_i___', '--yellow', '__p__', '--match',
        ])
        assert lines == ['lipas (145)']

    def test_analyze(self, dict_file, capsys):
        lines = run_lines(capsys, wordle.main, [
            '--dict', str(dict_file), '--green', '__a__', '--yellow', '_r___', '--gray', 's', '--analyze',
        ])
        assert sorted(line.split(':')[0] for line in lines) == [
            'crane', 'crate', 'grape', 'react', 'trace', 'urali',
        ]

    def test_json_output(self, dict_file, capsys):
        assert wordle.main([
            '--dict', str(dict_file), '--green', '__a__', '--include', 'p', '--match', '--format', 'json',
        ]) == 0
        assert orjson.loads(capsys.readouterr().out) == [{'word': 'grape', 'score': 143}]

    def test_spec_with_override(self, dict_file, tmp_path, capsys):
        spec_file = tmp_path / "today.yaml"
        spec_file.write_text("""
green: __a__
yellow: [_r___]
gray: s
mode: match
limit: 1
""")
        lines = run_lines(capsys, wordle.main, ['--dict', str(dict_file), '--spec', str(spec_file)])
        assert lines == ['urali (150)']

        lines = run_lines(capsys, wordle.main, [
            '--dict', str(dict_file), '--spec', str(spec_file), '--limit', '2',
        ])
        assert lines == ['urali (150)', 'crane (145)']

    def test_unknown_spec_mode(self, dict_file, tmp_path, caplog):
        spec_file = tmp_path / "bad.json"
        spec_file.write_text('{"mode": "solve"}')
        with caplog.at_level(logging.ERROR):
            assert wordle.main(['--dict', str(dict_file), '--spec', str(spec_file)]) == 1
        assert "Unknown mode" in caplog.text

    def test_match_and_analyze_conflict(self, dict_file):
        with pytest.raises(SystemExit) as excinfo:
            wordle.main(['--dict', str(dict_file), '--match', '--analyze'])
        assert excinfo.value.code == 1

    def test_anagram_wildcard_rejected(self, dict_file):
        assert wordle.main(['--dict', str(dict_file), '--green', '??a??']) == 1


# =============================================================================
# wstrie
# =============================================================================

class TestTrieCLI:
    """Trie builder front-end."""

    def test_build_then_query(self, dict_file, tmp_path, capsys):
        trie_path = tmp_path / "five.trie"
        assert trie.main([str(dict_file), str(trie_path), '--profile', 'game', '--length', '5']) == 0
        assert trie_path.exists()

        lines = run_lines(capsys, wordle.main, [
            '--dict', str(trie_path), '--green', '__a__', '--yellow', '_r___', '--gray', 's', '--match',
        ])
        assert sorted(lines) == sorted([
            'urali (150)', 'crane (145)', 'trace (145)', 'react (145)', 'crate (145)', 'grape (143)',
        ])

    def test_missing_input(self, tmp_path):
        assert trie.main([str(tmp_path / 'missing.txt'), str(tmp_path / 'out.trie')]) == 1

    def test_negative_length(self, dict_file, tmp_path):
        with pytest.raises(SystemExit) as excinfo:
            trie.main([str(dict_file), str(tmp_path / 'out.trie'), '--length', '-1'])
        assert excinfo.value.code == 1


# =============================================================================
# Logging
# =============================================================================

@pytest.fixture
def bare_root_logger(monkeypatch):
    """Root logger with no handlers, so configure_logging() takes effect."""
    root = logging.getLogger()
    level = root.level
    monkeypatch.setattr(root, 'handlers', [])
    yield root
    root.setLevel(level)


class TestLoggingSetup:
    """$DEBUG switches on debug tracing."""

    def test_debug_enabled(self, bare_root_logger, monkeypatch, capsys):
        monkeypatch.setenv('DEBUG', '1')
        configure_logging()
        assert bare_root_logger.level == logging.DEBUG

        candidates('ab', 'c', '???')
        assert "DEBUG: " in capsys.readouterr().err

    @pytest.mark.parametrize("value", [None, ""])
    def test_debug_disabled(self, bare_root_logger, monkeypatch, capsys, value):
        if value is None:
            monkeypatch.delenv('DEBUG', raising=False)
        else:
            monkeypatch.setenv('DEBUG', value)
        configure_logging()
        assert bare_root_logger.level == logging.INFO

        candidates('ab', 'c', '???')
        assert "DEBUG" not in capsys.readouterr().err
