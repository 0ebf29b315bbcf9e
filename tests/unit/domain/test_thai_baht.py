"""Unit tests for Thai baht text"""

from src.domain.thai_baht import baht_text


class TestBahtText:

    def test_whole_baht(self):
        assert baht_text(107) == "หนึ่งร้อยเจ็ดบาทถ้วน"

    def test_baht_and_satang(self):
        assert baht_text(1234.5) == "หนึ่งพันสองร้อยสามสิบสี่บาทห้าสิบสตางค์"

    def test_ed_after_million(self):
        assert baht_text(1000001) == "หนึ่งล้านเอ็ดบาทถ้วน"

    def test_ed_in_baht_and_satang(self):
        assert baht_text(21.21) == "ยี่สิบเอ็ดบาทยี่สิบเอ็ดสตางค์"

    def test_satang_only(self):
        assert baht_text(0.01) == "หนึ่งสตางค์"

    def test_zero(self):
        assert baht_text(0) == "ศูนย์บาทถ้วน"

    def test_rounds_half_up_to_satang(self):
        assert baht_text(0.005) == "หนึ่งสตางค์"
        assert baht_text(203.66183574879227) == "สองร้อยสามบาทหกสิบหกสตางค์"

    def test_negative_amount(self):
        assert baht_text(-107) == "ลบหนึ่งร้อยเจ็ดบาทถ้วน"
