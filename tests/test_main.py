"""Tests for the command line entry point."""

import pytest

from scripture_spotlight import __main__ as cli
from scripture_spotlight.config import Config


@pytest.fixture(autouse=True)
def isolated(monkeypatch, tmp_path):
    monkeypatch.setattr(cli, "get_config", lambda: Config(topic_index_paths=[str(tmp_path / "none.json")]))
    opened = []
    monkeypatch.setattr(cli, "open_uri", lambda uri, command=None: opened.append(uri))
    return opened


class TestMain:
    """Test one-shot decoding from the command line."""

    def test_reference(self, isolated, capsys):
        assert cli.main(["John", "3:16"]) == 0
        uri = "jwlibrary:///finder?srcid=jwlshare&wtlocale=E&prefer=lang&bible=43003016&pub=nwtsty"
        assert capsys.readouterr().out.strip() == uri
        assert isolated == [uri]

    def test_print_only(self, isolated, capsys):
        assert cli.main(["--print-only", "wt", "sep", "2025"]) == 0
        assert "pub=wp25&issue=202509" in capsys.readouterr().out
        assert isolated == []

    def test_structured(self, isolated, capsys):
        assert cli.main(["--book", "43", "--chapter", "99", "--verse", "1"]) == 0
        assert "bible=43021001" in capsys.readouterr().out

    def test_no_match(self, isolated, capsys):
        assert cli.main(["xyz123"]) == 1
        assert "No match" in capsys.readouterr().err
        assert isolated == []
