"""Unit tests for memo session state."""

from voicememo.categorization.rules import Category, build_rules
from voicememo.services.summary import SummaryService
from voicememo.session import MemoSession, TranscriptCell


class TestTranscriptCell:
    def test_writes_bump_revision_and_record_writer(self):
        cell = TranscriptCell()
        cell.append("ciao ", "capture")
        cell.set("testo nuovo", "edit")

        assert cell.value == "testo nuovo"
        assert cell.revision == 2
        assert cell.last_writer == "edit"

    def test_last_write_wins(self):
        cell = TranscriptCell("base ")
        cell.set("modificato", "edit")
        cell.append("dopo ", "capture")
        assert cell.value == "modificatodopo "

        cell.set("di nuovo", "edit")
        assert cell.value == "di nuovo"

    def test_truthiness_follows_content(self):
        assert not TranscriptCell()
        assert TranscriptCell("x")


class TestMemoSession:
    def test_append_capture_accumulates(self):
        session = MemoSession()
        session.append_capture("prima frase ")
        session.append_capture("seconda frase ")
        assert session.text == "prima frase seconda frase "

    def test_append_capture_ignores_empty(self):
        session = MemoSession()
        session.append_capture("")
        assert session.transcript.revision == 0

    def test_edit_overwrites(self):
        session = MemoSession()
        session.append_capture("testo catturato ")
        session.edit("testo corretto")
        assert session.text == "testo corretto"

    def test_toggle_editing(self):
        session = MemoSession()
        assert session.toggle_editing() is True
        assert session.toggle_editing() is False

    def test_restore_applies_non_empty_snapshot(self):
        session = MemoSession()
        assert session.restore("testo salvato") is True
        assert session.text == "testo salvato"
        assert session.transcript.last_writer == "restore"

    def test_restore_ignores_missing_snapshot(self):
        session = MemoSession()
        assert session.restore(None) is False
        assert session.restore("") is False
        assert session.text == ""

    def test_generate_summary_uses_current_text(self, italian_memo):
        session = MemoSession()
        session.edit(italian_memo)

        summary = session.generate_summary()

        assert [p.category for p in session.key_points] == [
            Category.IMPORTANT,
            Category.ACTION,
            Category.OTHER,
        ]
        assert summary == session.summary
        assert summary.startswith("Riassunto Dettagliato:")

    def test_generate_summary_replaces_previous(self, italian_memo):
        session = MemoSession()
        session.edit(italian_memo)
        session.generate_summary()

        session.edit("")
        session.generate_summary()

        assert session.key_points == []
        assert "1." not in session.summary

    def test_generate_summary_with_custom_service(self):
        service = SummaryService(min_length=3, rules=build_rules(important=["urgent"]))
        session = MemoSession()
        session.edit("This is urgent. Fine.")

        session.generate_summary(service)

        assert [p.category for p in session.key_points] == [Category.IMPORTANT, Category.OTHER]
