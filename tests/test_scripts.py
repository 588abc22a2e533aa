"""Tests for the maintenance scripts under scripts/."""

import importlib.util
import json
from pathlib import Path

import pandas as pd
import pytest

from msm_floorplan.pricing import PricingPolicy
from web.services.unit_storage import UnitStore

SCRIPTS_DIR = Path(__file__).resolve().parent.parent / "scripts"


def _load_script(name):
    spec = importlib.util.spec_from_file_location(f"{name}_script", SCRIPTS_DIR / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture(scope="module")
def pricing_script():
    return _load_script("apply_override_pricing")


@pytest.fixture(scope="module")
def generator_script():
    return _load_script("generate_unit_data")


@pytest.fixture(scope="module")
def report_script():
    return _load_script("run_floorplan_report")


class TestApplyOverridePricing:
    CSV = (
        "Blok No,Daire No,Satış Fiyatı 01,Satış Fiyatı 02,Zemin Kat m²,Normal Kat m²\n"
        'K,1,,,"98,5","59,5"\n'
        'K,2,1000,2000,"10","20"\n'
        "K,3,,777,,\n"
    )

    def test_fills_only_blank_cells(self, pricing_script, tmp_path):
        source = tmp_path / "zknk.csv"
        source.write_text(self.CSV, encoding="utf-8")
        output = tmp_path / "out" / "zknk_data.csv"

        pricing_script.apply_override_pricing(source, output)

        df = pd.read_csv(output, dtype=str)
        assert list(df["Satış Fiyatı 01"]) == ["5530000", "1000", "3500000"]
        assert list(df["Satış Fiyatı 02"]) == ["158000", "2000", "777"]

    def test_adds_missing_price_columns(self, pricing_script, tmp_path):
        source = tmp_path / "areas.csv"
        source.write_text('Blok No,Daire No,Zemin Kat m²,Normal Kat m²\nL,1,"96","59"\n', encoding="utf-8")

        df = pricing_script.apply_override_pricing(
            source, tmp_path / "priced.csv", PricingPolicy(tl_per_sqm=1000, tl_per_usd=40)
        )

        assert df.loc[0, "Satış Fiyatı 01"] == "155000"
        assert df.loc[0, "Satış Fiyatı 02"] == "3875"

    def test_missing_area_column(self, pricing_script, tmp_path):
        source = tmp_path / "bad.csv"
        source.write_text("Blok No,Daire No,Zemin Kat m²\nK,1,10\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Normal Kat"):
            pricing_script.apply_override_pricing(source, tmp_path / "out.csv")
        assert not (tmp_path / "out.csv").exists()


class TestGenerateUnitData:
    def test_same_seed_same_units(self, generator_script):
        assert generator_script.generate_units(7) == generator_script.generate_units(7)

    def test_inventory_shape(self, generator_script):
        units = generator_script.generate_units()

        assert len(units) == sum(count for _, count, _ in generator_script.BLOCKS)
        assert len({u["unitNumber"] for u in units}) == len(units)
        assert {u["status"] for u in units} <= {"available", "reserved", "sold"}
        m1 = units[0]
        assert m1["unitNumber"] == "M-1"
        assert m1["price"] == 120 * 35000

    def test_output_loads_into_store(self, generator_script, tmp_path):
        path = generator_script.write_unit_data(tmp_path / "units.json", seed=3)

        store = UnitStore.from_json(path)
        with open(path, encoding="utf-8") as f:
            assert len(store.get_all_units()) == len(json.load(f))
        assert store.get_unit_by_unit_number("E-20").size == 200

    def test_default_output_is_not_the_served_seed(self, generator_script):
        from msm_floorplan.config import UNIT_DATA_PATH

        assert generator_script.DEFAULT_OUTPUT != UNIT_DATA_PATH


class TestRunFloorplanReport:
    def test_writes_json_and_block_summary(self, report_script, raw_dir, tmp_path):
        output_dir = tmp_path / "report"

        datasets = report_script.run_floorplan_report(
            phases=["3", "4"], source=str(raw_dir), output_dir=output_dir
        )

        assert [d.phase for d in datasets] == ["3", "4"]
        assert (output_dir / "floorplan_3.json").exists()
        assert (output_dir / "floorplan_4.json").exists()
        summary = pd.read_csv(output_dir / "block_summary.csv", encoding="utf-8-sig")
        assert list(summary["block"]) == ["K", "L"]
        assert list(summary["sold"]) == [2, 1]


class TestSetupDataDirectories:
    def test_creates_missing_directories(self, tmp_path, monkeypatch, capsys):
        module = _load_script("setup_data_directories")
        existing = tmp_path / "raw"
        existing.mkdir()
        missing = tmp_path / "processed"
        monkeypatch.setattr(module, "REQUIRED_DIRECTORIES", [existing, missing])

        module.setup_data_directories()

        assert missing.is_dir()
        out = capsys.readouterr().out
        assert "Total directories checked: 2" in out
        assert "Created: 1" in out
        assert "Already existed: 1" in out
