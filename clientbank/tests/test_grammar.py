"""
Test suite for line classification.
"""
import pytest

from ..core.grammar import Line, LineKind, classify_line, clean_line, split_lines


class TestClassifyLine:
    """Each marker and the order in which the rules are tried."""

    def test_header(self):
        assert classify_line("1CClientBankExchange") == Line(LineKind.HEADER, "1CClientBankExchange")

    def test_header_is_case_sensitive(self):
        assert classify_line("1cclientbankexchange") is None

    def test_footer_wins_over_section_end(self):
        token = classify_line("КонецФайла")
        assert token.kind is LineKind.FOOTER

    def test_footer_in_other_case_is_a_section_end(self):
        token = classify_line("конецфайла")
        assert token.kind is LineKind.SECTION_END
        assert token.name == "файла"

    def test_document_begin(self):
        token = classify_line("СекцияДокумент=Платёжное поручение")
        assert token.kind is LineKind.DOCUMENT_BEGIN
        assert token.name == "Платёжное поручение"

    def test_document_begin_is_case_insensitive(self):
        token = classify_line("СЕКЦИЯДОКУМЕНТ=Банковский ордер")
        assert token.kind is LineKind.DOCUMENT_BEGIN
        assert token.name == "Банковский ордер"

    def test_document_label_keeps_later_equals_signs(self):
        token = classify_line("СекцияДокумент=a=b")
        assert token.name == "a=b"

    def test_document_begin_without_label_is_a_field(self):
        token = classify_line("СекцияДокумент=")
        assert token.kind is LineKind.FIELD
        assert token.name == "СекцияДокумент"
        assert token.value == ""

    @pytest.mark.parametrize("line", ["КонецДокумента", "конецдокумента", "КОНЕЦДОКУМЕНТА"])
    def test_document_end(self, line):
        assert classify_line(line).kind is LineKind.DOCUMENT_END

    def test_section_begin(self):
        token = classify_line("СекцияРасчСчет")
        assert token.kind is LineKind.SECTION_BEGIN
        assert token.name == "РасчСчет"

    def test_section_end(self):
        token = classify_line("КонецРасчСчет")
        assert token.kind is LineKind.SECTION_END
        assert token.name == "РасчСчет"

    def test_field(self):
        token = classify_line("Номер=45")
        assert token.kind is LineKind.FIELD
        assert token.name == "Номер"
        assert token.value == "45"

    def test_field_splits_on_first_equals(self):
        token = classify_line("НазначениеПлатежа=x=1; y=2")
        assert token.name == "НазначениеПлатежа"
        assert token.value == "x=1; y=2"

    def test_field_with_empty_value(self):
        token = classify_line("ПлательщикКорсчет=")
        assert token.kind is LineKind.FIELD
        assert token.value == ""

    def test_section_like_line_with_equals_is_a_field(self):
        token = classify_line("СекцияРасчСчет=1")
        assert token.kind is LineKind.FIELD
        assert token.name == "СекцияРасчСчет"

    @pytest.mark.parametrize("line", ["garbage", "=value", "Просто текст"])
    def test_unrecognized(self, line):
        assert classify_line(line) is None


class TestLineSplitting:
    """Line breaks and trimming."""

    def test_mixed_line_breaks(self):
        assert split_lines("a\r\nb\rc\nd") == ["a", "b", "c", "d"]

    def test_blank_lines_are_kept(self):
        assert split_lines("a\n\nb\n") == ["a", "", "b", ""]

    def test_clean_line(self):
        assert clean_line(" \tНомер=45 \x0b\0") == "Номер=45"

    def test_clean_line_keeps_inner_spaces(self):
        assert clean_line("  Оплата  по счету ") == "Оплата  по счету"
