"""Tests for the command line interface."""

from typer.testing import CliRunner

from nerstream.cli import app
from nerstream.config import settings


runner = CliRunner()


class TestShow:
    """Tests for the show command."""

    def test_prints_inline_samples(self, corpus_path):
        result = runner.invoke(app, ["show", str(corpus_path)])

        assert result.exit_code == 0
        assert "<START:person> Mario Rossi <END>" in result.stdout
        assert "<START:location> Garda <END>" in result.stdout

    def test_limit(self, corpus_path):
        result = runner.invoke(app, ["show", str(corpus_path), "--limit", "1"])

        assert result.exit_code == 0
        assert "Mario" in result.stdout
        assert "Garda" not in result.stdout

    def test_types(self, corpus_path):
        result = runner.invoke(app, ["show", str(corpus_path), "--types", "LOC"])

        assert result.exit_code == 0
        assert "<START:person>" not in result.stdout
        assert "<START:location> Garda <END>" in result.stdout

    def test_unknown_type(self, corpus_path):
        result = runner.invoke(app, ["show", str(corpus_path), "--types", "MISC"])

        assert result.exit_code == 2

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["show", str(tmp_path / "missing.iob2")])

        assert result.exit_code == 2

    def test_malformed_corpus(self, write_corpus):
        path = write_corpus("Roma X B-GPE\n")

        result = runner.invoke(app, ["show", str(path)])

        assert result.exit_code == 1
        assert "Invalid corpus" in result.stdout


class TestValidate:
    """Tests for the validate command."""

    def test_valid_corpus(self, corpus_path):
        result = runner.invoke(app, ["validate", str(corpus_path)])

        assert result.exit_code == 0
        assert "2 samples" in result.stdout

    def test_invalid_corpus(self, write_corpus):
        path = write_corpus("a X s O\n\n-DOCSTART-\nRoma X s B-GPE\n")

        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "Invalid corpus" in result.stdout
        assert "Roma X s B-GPE" in result.stdout
        assert "1 samples decoded" in result.stdout


class TestShowEntities:
    """Tests for the entity listing option."""

    def test_lists_entities(self, corpus_path):
        result = runner.invoke(app, ["show", str(corpus_path), "--entities"])

        assert result.exit_code == 0
        assert "person: Mario Rossi" in result.stdout
        assert "gpe: Roma" in result.stdout
        assert "location: Garda" in result.stdout

    def test_entities_follow_type_filter(self, corpus_path):
        result = runner.invoke(app, ["show", str(corpus_path), "-e", "--types", "ORG"])

        assert result.exit_code == 0
        assert "organization: Fiat" in result.stdout
        assert "person: Mario Rossi" not in result.stdout


class TestConfigurationErrors:
    """Tests for bad settings and encodings reported without a traceback."""

    def test_invalid_entity_types_setting(self, corpus_path, monkeypatch):
        monkeypatch.setattr(settings, "entity_types", "PER,MISC")

        result = runner.invoke(app, ["validate", str(corpus_path)])

        assert result.exit_code == 2
        assert not isinstance(result.exception, ValueError)

    def test_invalid_log_level_setting(self, corpus_path, monkeypatch):
        monkeypatch.setattr(settings, "log_level", "LOUD")

        result = runner.invoke(app, ["validate", str(corpus_path)])

        assert result.exit_code == 2
        assert not isinstance(result.exception, ValueError)

    def test_wrong_encoding(self, write_corpus):
        path = write_corpus("Città X s B-GPE\n", encoding="latin-1")

        result = runner.invoke(app, ["validate", str(path), "--encoding", "utf-8"])

        assert result.exit_code == 1
        assert "Invalid corpus" in result.stdout
        assert not isinstance(result.exception, UnicodeDecodeError)

    def test_unknown_encoding(self, corpus_path):
        result = runner.invoke(app, ["show", str(corpus_path), "--encoding", "no-such-codec"])

        assert result.exit_code == 1
        assert "Invalid corpus" in result.stdout
