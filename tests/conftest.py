"""Shared fixtures: small CSV exports written into a temporary source directory."""

from pathlib import Path

import pytest

from msm_floorplan.config import FIRM_SOURCE, OVERRIDE_SOURCE, PHASE_SOURCES
from msm_floorplan.loader import FloorPlanDataLoader

PHASE_3_CSV = """Bölüm Adı,Blok No,Daire No,Brüt m²,Net M²,Durumu
3. Etap,K,1,158,146.3,Satıldı
3. Etap,K,2,158,146.3,SATILDI
3. Etap,K,3,158,146.3,Satılık
3. Etap,K,4,158,146.3,Satılık
3. Etap,K,5,158,146.3,Satışa Kapalı
3. Etap,K,6,158,146.3,Satılık
3. Etap,L,1,155,143.8,Satıldı
3. Etap,L,2,155,143.8,Satılık
"""

PHASE_2_CSV = """ID,Bölüm Adı,Blok No,Daire No,Brüt m²,Net M²,Fiyat,Durumu
101,2. Etap,D,1,205,190.5,7175000,Satıldı
102,2. Etap,D,2,205,190.5,7175000,Satılık
103,2. Etap,E,1,210,195,7350000,Satışa Kapalı
"""

FIRMS_CSV = """SIRA NO,ETAP,BLOK,NO,FİRMA,KİRACI/MALİK,İŞ KOLU
1,3,K,1-2,Kapaklı Kalıp,MALİK,Kalıp
2,3,l,1,"Marmara Elektrik, Pano",KİRACI,Elektrik
3,2,D,1,Anadolu Lojistik,MALİK,Lojistik
4,3,K,3-4-6,Trakya Ambalaj,KİRACI,Ambalaj
,,,,,,
TOPLAM,,,,,,
"""

OVERRIDE_CSV = """ID,Proje ID,Proje Adı,Hareket Tipi,Bölüm Adı,Blok No,Daire No,Kat,Brüt m²,Net m²,Satış Fiyatı 01,Satış Fiyatı 02,Zemin Kat m²,Normal Kat m²
1,7,MSM,Satış,3. Etap,K,1,Zemin,158,146.3,,,"98,5","59,5"
2,7,MSM,Satış,3. Etap,K,3,Zemin,158,146.3,,,"0","0"
3,7,MSM,Satış,3. Etap,L,2,Zemin,155,143.8,,,"96","59"
"""


@pytest.fixture
def raw_dir(tmp_path: Path) -> Path:
    """Source directory holding phase 2 and 3 inventories, firms and overrides."""
    (tmp_path / PHASE_SOURCES["3"]).write_text(PHASE_3_CSV, encoding="utf-8")
    (tmp_path / PHASE_SOURCES["2"]).write_text(PHASE_2_CSV, encoding="utf-8")
    (tmp_path / FIRM_SOURCE).write_text(FIRMS_CSV, encoding="utf-8")
    (tmp_path / OVERRIDE_SOURCE).write_text("\ufeff" + OVERRIDE_CSV, encoding="utf-8")
    return tmp_path


@pytest.fixture
def loader(raw_dir: Path) -> FloorPlanDataLoader:
    return FloorPlanDataLoader(source=raw_dir)
