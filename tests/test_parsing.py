"""Tests for CSV decoding and the three source parsers."""

import pytest

from msm_floorplan.errors import UnknownPhaseError
from msm_floorplan.models import STATUS_AVAILABLE, STATUS_RESERVED, STATUS_SOLD
from msm_floorplan.parsing import (
    classify_status,
    decode_csv_line,
    get_phase_layout,
    parse_firms_csv,
    parse_override_csv,
    parse_units_csv,
)
from msm_floorplan.parsing.values import (
    parse_decimal_comma,
    parse_float,
    parse_int,
    turkish_casefold,
)
from msm_floorplan.pricing import PricingPolicy

from tests.conftest import FIRMS_CSV, OVERRIDE_CSV, PHASE_2_CSV, PHASE_3_CSV


class TestDecodeCsvLine:
    def test_quoted_comma_stays_in_field(self):
        assert decode_csv_line('A,"B, C",D') == ["A", "B, C", "D"]

    def test_fields_are_trimmed(self):
        assert decode_csv_line(" a , b ,c ") == ["a", "b", "c"]

    def test_trailing_empty_field_is_emitted(self):
        assert decode_csv_line("a,b,") == ["a", "b", ""]

    def test_all_empty_fields(self):
        assert decode_csv_line(",,") == ["", "", ""]


class TestValues:
    def test_parse_float_reads_leading_number(self):
        assert parse_float("120 m²") == 120.0
        assert parse_float("146.3") == 146.3

    def test_parse_float_unreadable_is_zero(self):
        assert parse_float("abc") == 0.0
        assert parse_float("") == 0.0
        assert parse_float(None) == 0.0

    def test_parse_int(self):
        assert parse_int("12") == 12
        assert parse_int("7a") == 7
        assert parse_int("TOPLAM") is None
        assert parse_int("") is None

    def test_decimal_comma(self):
        assert parse_decimal_comma("12,5") == 12.5
        assert parse_decimal_comma("1.234,5") == 1234.5
        assert parse_decimal_comma("98") == 98.0
        assert parse_decimal_comma("") == 0.0

    def test_turkish_casefold(self):
        assert turkish_casefold("SATILDI") == "satıldı"
        assert turkish_casefold("SATIŞA KAPALI") == "satışa kapalı"
        assert turkish_casefold("İŞ") == "iş"


class TestClassifyStatus:
    @pytest.mark.parametrize("text,expected", [
        ("Satıldı", STATUS_SOLD),
        ("SATILDI", STATUS_SOLD),
        ("satıldı (kapora)", STATUS_SOLD),
        ("Satışa Kapalı", STATUS_RESERVED),
        ("Satılık", STATUS_AVAILABLE),
        ("", STATUS_AVAILABLE),
        ("bilinmiyor", STATUS_AVAILABLE),
    ])
    def test_mapping(self, text, expected):
        assert classify_status(text) == expected

    def test_sold_wins_over_other_keywords(self):
        assert classify_status("Satılık / Satıldı") == STATUS_SOLD
        assert classify_status("Satışa Kapalı - Satıldı") == STATUS_SOLD


class TestParseUnits:
    def test_standard_layout(self):
        units = parse_units_csv(PHASE_3_CSV, "3")

        assert len(units) == 8
        first = units[0]
        assert first.section == "3. Etap"
        assert first.block == "K"
        assert first.unit_number == "1"
        assert first.gross_area == 158.0
        assert first.net_area == 146.3
        assert first.status == STATUS_SOLD
        assert first.list_price is None
        assert [u.status for u in units[:6]] == [
            STATUS_SOLD, STATUS_SOLD, STATUS_AVAILABLE,
            STATUS_AVAILABLE, STATUS_RESERVED, STATUS_AVAILABLE,
        ]

    def test_phase_2_layout(self):
        units = parse_units_csv(PHASE_2_CSV, "2")

        assert len(units) == 3
        assert units[0].block == "D"
        assert units[0].unit_number == "1"
        assert units[0].net_area == 190.5
        assert units[0].list_price == 7175000.0
        assert units[0].status == STATUS_SOLD
        assert units[2].status == STATUS_RESERVED

    def test_short_rows_are_dropped(self):
        content = PHASE_3_CSV + "3. Etap,K,7\n"
        assert len(parse_units_csv(content, "3")) == 8

    def test_blank_lines_and_crlf(self):
        content = PHASE_3_CSV.replace("\n", "\r\n") + "\r\n\r\n"
        units = parse_units_csv(content, "3")
        assert len(units) == 8
        assert units[-1].status == STATUS_AVAILABLE

    def test_unparsable_area_is_zero(self):
        content = "h\n1. Etap,A,1,-,?,Satılık\n"
        unit = parse_units_csv(content, "1")[0]
        assert unit.gross_area == 0.0
        assert unit.net_area == 0.0

    def test_header_only_gives_no_units(self):
        assert parse_units_csv("Bölüm Adı,Blok No\n", "1") == []
        assert parse_units_csv("", "1") == []

    def test_unknown_phase_raises(self):
        with pytest.raises(UnknownPhaseError):
            parse_units_csv(PHASE_3_CSV, "9")
        with pytest.raises(ValueError):
            get_phase_layout("")

    def test_min_fields(self):
        assert get_phase_layout("1").min_fields == 6
        assert get_phase_layout("2").min_fields == 8


class TestParseFirms:
    def test_guard_skips_blank_and_footer_rows(self):
        firms = parse_firms_csv(FIRMS_CSV)
        assert [f.sira_no for f in firms] == [1, 2, 3, 4]

    def test_fields(self):
        firm = parse_firms_csv(FIRMS_CSV)[1]
        assert firm.etap == "3"
        assert firm.block == "L"
        assert firm.unit_no == "1"
        assert firm.firma == "Marmara Elektrik, Pano"
        assert firm.kiraci == "KİRACI"
        assert firm.is_kolu == "Elektrik"

    def test_short_row_is_skipped(self):
        assert parse_firms_csv("h\n5,3,K,1,Firma\n") == []


class TestParseOverrides:
    def test_keys_and_areas(self):
        records = parse_override_csv(OVERRIDE_CSV)

        assert set(records) == {"K-1", "K-3", "L-2"}
        assert records["K-1"].ground == 98.5
        assert records["K-1"].normal == 59.5
        assert records["K-1"].total_area == 158.0

    def test_placeholder_prices(self):
        records = parse_override_csv(OVERRIDE_CSV)

        assert records["K-1"].price_tl == 158 * 35000
        assert records["K-1"].price_usd == 158000
        # no area breakdown falls back to 100 m²
        assert records["K-3"].price_tl == 3_500_000
        assert records["K-3"].price_usd == 100000

    def test_custom_policy(self):
        records = parse_override_csv(OVERRIDE_CSV, PricingPolicy(tl_per_sqm=1000, tl_per_usd=40))
        assert records["L-2"].price_tl == 155000
        assert records["L-2"].price_usd == 3875

    def test_last_duplicate_wins(self):
        content = OVERRIDE_CSV + '4,7,MSM,Satış,3. Etap,K,1,Zemin,158,146.3,,,"10","20"\n'
        assert parse_override_csv(content)["K-1"].total_area == 30.0

    def test_short_rows_are_skipped(self):
        assert parse_override_csv("h\n1,2,3,4,5,K,1\n") == {}
