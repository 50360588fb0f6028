"""
Test suite for the command line interface.
"""
import json
import pytest
from typer.testing import CliRunner

from ..app import app


@pytest.fixture
def runner():
    return CliRunner()


class TestParseCommand:
    """clientbank parse"""

    def test_parse_to_stdout(self, runner, statement_file):
        result = runner.invoke(app, ["parse", str(statement_file)])
        assert result.exit_code == 0
        assert '"state": "success"' in result.output
        assert '"payment_order"' in result.output

    def test_parse_to_file(self, runner, statement_file, tmp_path):
        output = tmp_path / "out.json"
        result = runner.invoke(app, ["parse", str(statement_file), "--out", str(output)])
        assert result.exit_code == 0

        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["state"] == "success"
        assert len(data["root"]["sections"]) == 3
        assert data["root"]["sections"][2]["type"] == "bank_order"

    def test_parse_failure(self, runner, tmp_path):
        path = tmp_path / "broken.txt"
        path.write_bytes("1CClientBankExchange\nВерсияФормата=1.1\n".encode("cp1251"))
        result = runner.invoke(app, ["parse", str(path)])
        assert result.exit_code == 1
        assert "no_end_of_file" in result.output

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(app, ["parse", str(tmp_path / "missing.txt")])
        assert result.exit_code == 1
        assert "Unable to read file" in result.output

    def test_wrong_encoding(self, runner, tmp_path):
        path = tmp_path / "statement.txt"
        path.write_bytes(b"1CClientBankExchange\n\x98\n")
        result = runner.invoke(app, ["parse", str(path)])
        assert result.exit_code == 1


class TestOtherCommands:
    """clientbank documents / detect / trace"""

    def test_documents(self, runner, statement_file):
        result = runner.invoke(app, ["documents", str(statement_file)])
        assert result.exit_code == 0
        assert "Documents (2)" in result.output
        assert "1500.55" in result.output
        assert "25000.50" in result.output

    def test_documents_bad_timezone(self, runner, statement_file):
        result = runner.invoke(app, ["documents", str(statement_file), "--timezone", "Nowhere/City"])
        assert result.exit_code == 1
        assert "Unknown time zone" in result.output

    def test_detect(self, runner):
        result = runner.invoke(app, ["detect", "Инкассовое поручение"])
        assert result.exit_code == 0
        assert "collection_order" in result.output

    def test_detect_with_aliases(self, runner, tmp_path):
        alias_file = tmp_path / "aliases.yaml"
        alias_file.write_text("payment_claim:\n  - Требование\n", encoding="utf-8")
        result = runner.invoke(app, ["detect", "требование", "--aliases", str(alias_file)])
        assert result.exit_code == 0
        assert "payment_claim" in result.output

    def test_trace(self, runner, statement_file):
        result = runner.invoke(app, ["trace", str(statement_file)])
        assert result.exit_code == 0
        assert "document_begin" in result.output
        assert "footer" in result.output
