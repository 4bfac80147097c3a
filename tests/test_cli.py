"""Tests for the command line entry point (PDF reading is monkeypatched)."""

import json

import pytest

from quirion_import import cli


@pytest.fixture
def fake_pdf(tmp_path):
    path = tmp_path / "Kontoauszug_2021_07.pdf"
    path.write_bytes(b"%PDF-1.4")
    return path


class TestMain:
    """Test the main function."""

    def test_writes_activities(self, monkeypatch, tmp_path, fake_pdf, statement_pages):
        monkeypatch.setattr(cli, "extract_pages", lambda path: statement_pages)
        out = tmp_path / "out" / "activities.json"

        assert cli.main([str(fake_pdf), "-o", str(out)]) == 0

        data = json.loads(out.read_text(encoding="utf-8"))
        assert len(data) == 1
        assert data[0]["file"] == str(fake_pdf)
        assert data[0]["status"] == 0
        assert [a["type"] for a in data[0]["activities"]] == ["Buy", "Sell", "Dividend"]

    def test_skips_foreign_documents(self, monkeypatch, tmp_path, fake_pdf):
        monkeypatch.setattr(cli, "extract_pages", lambda path: [["Some other bank"]])
        out = tmp_path / "activities.json"

        assert cli.main([str(fake_pdf), "-o", str(out)]) == 0
        assert json.loads(out.read_text(encoding="utf-8")) == []

    def test_extraction_error_sets_exit_code(self, monkeypatch, tmp_path, fake_pdf, statement_pages):
        statement_pages[0][-12] = "USD"  # currency of the buy line
        monkeypatch.setattr(cli, "extract_pages", lambda path: statement_pages)

        assert cli.main([str(fake_pdf), "-o", str(tmp_path / "a.json")]) == 1

    def test_missing_file(self, tmp_path):
        assert cli.main([str(tmp_path / "nope.pdf"), "-o", str(tmp_path / "a.json")]) == 1

    def test_stdout(self, monkeypatch, capsys, fake_pdf, eur_notice):
        monkeypatch.setattr(cli, "extract_pages", lambda path: [eur_notice])

        assert cli.main([str(fake_pdf), "--log-level", "WARNING"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data[0]["activities"][0]["type"] == "Dividend"
