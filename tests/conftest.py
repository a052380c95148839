"""
Общие фикстуры для тестов PCM Explorer.
"""

import sys
from pathlib import Path
from typing import Dict

import pytest

# Добавляем src в путь для тестов
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from pcm_explorer.exceptions import SourceUnavailableError


PCM_CSV = """id,name,tmin,tmax,latentHeat,meltingPointK,boilingPointK,flashPointK,cost,safetyRating
PCM-001,Dummy cryo-PCM A,200,300,180.5,250,310,320,12.5,A
PCM-002,Dummy cryo-PCM B,150,250,150,200,300,290,8,B
PCM-003,Dummy cryo-PCM C,100,200,95.2,120,180,,3.75,C
PCM-004,Dummy cryo-PCM D,250,350,210,n/a,400,410,20,A
"""

PROPERTY_CSV = """pcmId,name,propertyType,a,b,c,tmin,tmax
PCM-001,Solid specific heat,solid-specific-heat,1,0,0,2,4
PCM-001,Thermal conductivity,thermal-conductivity,0,0.5,1,200,205
PCM-002,Solid specific heat,solid-specific-heat,0.001,0.2,1.5,150,200
PCM-003,Solid specific heat,solid-specific-heat,1,1,1,300,200
"""


class InMemoryTextSource:
    """TextSource на словаре; отсутствующий ключ означает недоступный источник."""

    def __init__(self, tables: Dict[str, str]):
        self.tables = tables
        self.requested = []

    async def fetch_text(self, location: str) -> str:
        self.requested.append(location)
        if location not in self.tables:
            raise SourceUnavailableError(location, "not found")
        return self.tables[location]


@pytest.fixture
def pcm_csv() -> str:
    return PCM_CSV


@pytest.fixture
def property_csv() -> str:
    return PROPERTY_CSV


@pytest.fixture
def tables() -> Dict[str, str]:
    return {
        "rawdata/pcms.csv": PCM_CSV,
        "documentation/property_data.csv": PROPERTY_CSV,
    }


@pytest.fixture
def memory_source(tables) -> InMemoryTextSource:
    return InMemoryTextSource(tables)


@pytest.fixture
def source_factory():
    """Фабрика InMemoryTextSource для тестов с нестандартными таблицами."""
    return InMemoryTextSource
