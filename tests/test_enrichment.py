"""Tests for override enrichment and firm lookup."""

from msm_floorplan.enrichment import (
    enrich_units,
    find_overlapping_claims,
    get_all_firms_for_unit,
    get_firm_info_for_unit,
    get_firms_for_block,
    get_firms_for_phase,
)
from msm_floorplan.models import FirmInfo, OverrideRecord, Unit
from msm_floorplan.parsing import parse_firms_csv

from tests.conftest import FIRMS_CSV


def _firm(sira_no, etap, block, unit_no, firma="Firma"):
    return FirmInfo(sira_no, etap, block, unit_no, firma, "MALİK", "Genel")


class TestEnrichUnits:
    def test_matched_unit_gets_override_values(self):
        units = [Unit("3. Etap", "K", "1", 158, 146.3), Unit("3. Etap", "K", "2", 158, 146.3)]
        overrides = {"K-1": OverrideRecord(98.5, 59.5, price_tl=5_530_000, price_usd=158_000)}

        enriched = enrich_units(units, overrides)

        assert enriched[0].ground_floor_area == 98.5
        assert enriched[0].normal_floor_area == 59.5
        assert enriched[0].price_tl == 5_530_000
        assert enriched[0].price_usd == 158_000
        assert enriched[0].is_enriched
        assert enriched[1] == units[1]
        assert not enriched[1].is_enriched

    def test_inputs_are_not_modified(self):
        unit = Unit("3. Etap", "K", "1", 158, 146.3)
        enrich_units([unit], {"K-1": OverrideRecord(1, 2)})
        assert unit.ground_floor_area is None
        assert unit.price_tl is None

    def test_key_is_case_sensitive(self):
        enriched = enrich_units([Unit("s", "k", "1")], {"K-1": OverrideRecord(1, 2)})
        assert not enriched[0].is_enriched


class TestDisplayArea:
    def test_override_area_is_preferred(self):
        unit = Unit("s", "K", "1", net_area=146.3, ground_floor_area=98.5, normal_floor_area=59.6)
        assert unit.display_area == 158

    def test_zero_override_falls_back_to_net_area(self):
        unit = Unit("s", "K", "1", net_area=146.3, ground_floor_area=0.0, normal_floor_area=0.0)
        assert unit.display_area == 146.3

    def test_unenriched_uses_net_area(self):
        assert Unit("s", "K", "1", net_area=120.0).display_area == 120.0


class TestFirmLookup:
    def test_dash_list_is_exact_membership(self):
        firms = [_firm(1, "3", "K", "3-4-6")]

        assert get_firm_info_for_unit(firms, "K", "4") is firms[0]
        assert get_firm_info_for_unit(firms, "K", "6") is firms[0]
        assert get_firm_info_for_unit(firms, "K", "5") is None
        assert get_firm_info_for_unit(firms, "K", "46") is None

    def test_block_is_compared_case_insensitively(self):
        firms = [_firm(1, "3", "K", "1")]
        assert get_firm_info_for_unit(firms, " k ", "1") is firms[0]

    def test_etap_filter(self):
        firms = [_firm(1, "3", "K", "1", "Etap 3"), _firm(2, "4", "K", "1", "Etap 4")]

        assert get_firm_info_for_unit(firms, "K", "1", "4").firma == "Etap 4"
        assert get_firm_info_for_unit(firms, "K", "1", "5") is None
        # no filter: first match in source order
        assert get_firm_info_for_unit(firms, "K", "1").firma == "Etap 3"

    def test_first_match_wins_on_overlap(self):
        firms = [_firm(1, "3", "K", "1-2", "First"), _firm(2, "3", "K", "2", "Second")]

        assert get_firm_info_for_unit(firms, "K", "2").firma == "First"
        assert [f.firma for f in get_all_firms_for_unit(firms, "K", "2")] == ["First", "Second"]

    def test_block_and_phase_lists(self):
        firms = parse_firms_csv(FIRMS_CSV)

        assert [f.sira_no for f in get_firms_for_block(firms, "K")] == [1, 4]
        assert [f.sira_no for f in get_firms_for_block(firms, "D", "3")] == []
        assert [f.sira_no for f in get_firms_for_phase(firms, "3")] == [1, 2, 4]

    def test_parsed_firms(self):
        firms = parse_firms_csv(FIRMS_CSV)

        assert get_firm_info_for_unit(firms, "K", "2", "3").firma == "Kapaklı Kalıp"
        assert get_firm_info_for_unit(firms, "K", "4", "3").firma == "Trakya Ambalaj"
        assert get_firm_info_for_unit(firms, "K", "5", "3") is None


class TestOverlappingClaims:
    def test_reports_only_shared_units(self):
        firms = [
            _firm(1, "3", "K", "1-2"),
            _firm(2, "3", "k", "2-3"),
            _firm(3, "4", "K", "2"),
        ]

        overlaps = find_overlapping_claims(firms)

        assert list(overlaps) == [("3", "K", "2")]
        assert [f.sira_no for f in overlaps[("3", "K", "2")]] == [1, 2]

    def test_no_overlaps(self):
        assert find_overlapping_claims(parse_firms_csv(FIRMS_CSV)) == {}
