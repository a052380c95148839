"""
Pydantic models for the phase-change material catalog.

This module contains the typed records produced by the tabular parser:
PcmRecord (one cataloged material) and PropertyDefinition (one quadratic
property model for one material).

Техническое описание:
Модели данных каталога материалов с фазовым переходом (PCM).
Числовые поля хранятся как Optional[float]: None означает "значение
отсутствует или не распознано" и никогда не подменяется нулём.

Основные модели:

PcmRecord:
- id: уникальный ключ материала (строка)
- name: наименование
- tmin/tmax, latent_heat, melting_point_k, boiling_point_k,
  flash_point_k, cost: числовые характеристики
- safety_rating: метка класса безопасности (непрозрачная строка)

PropertyDefinition:
- pcm_id: ссылка на PcmRecord.id (не проверяется)
- property_type: ключ свойства (например, "solid-specific-heat")
- a, b, c: коэффициенты полинома value(T) = a*T^2 + b*T + c
- tmin/tmax: область определения полинома, K

Особенности реализации:
- Алиасы полей совпадают с заголовками CSV (latentHeat, meltingPointK, ...)
- populate_by_name: допускается создание и по имени поля, и по алиасу
- frozen: записи неизменяемы после загрузки
"""

import math
from typing import Optional

from pydantic import BaseModel, Field


def is_finite(value: Optional[float]) -> bool:
    """Check that a numeric field is present and finite."""
    return value is not None and math.isfinite(value)


class PcmRecord(BaseModel):
    """
    Represents a single phase-change material from the catalog table.

    Numeric fields are None when the source cell is missing or cannot be
    parsed as a number. Columns not known to the model are kept as extra
    string fields.
    """

    id: str = Field("", description="Unique material identifier")
    name: str = Field("", description="Material name")

    tmin: Optional[float] = Field(None, description="Lower operating temperature (K)")
    tmax: Optional[float] = Field(None, description="Upper operating temperature (K)")
    latent_heat: Optional[float] = Field(
        None, description="Latent heat of fusion (kJ/kg)", alias="latentHeat"
    )
    melting_point_k: Optional[float] = Field(
        None, description="Melting point (K)", alias="meltingPointK"
    )
    boiling_point_k: Optional[float] = Field(
        None, description="Boiling point (K)", alias="boilingPointK"
    )
    flash_point_k: Optional[float] = Field(
        None, description="Flash point (K)", alias="flashPointK"
    )
    cost: Optional[float] = Field(None, description="Cost (relative units)")

    safety_rating: str = Field("", description="Safety label", alias="safetyRating")

    class Config:
        """Pydantic configuration."""

        frozen = True
        extra = "allow"  # Unknown CSV columns are kept as strings
        populate_by_name = True

    @property
    def display_name(self) -> str:
        """Label used by result lists: '<id> — <name>'."""
        return f"{self.id} — {self.name}"

    def melts_within(self, tmin: float, tmax: float) -> bool:
        """Check that the melting point lies in the inclusive range [tmin, tmax]."""
        if not is_finite(self.melting_point_k):
            return False
        return tmin <= self.melting_point_k <= tmax

    def boils_above(self, temperature: float) -> bool:
        """Check that the boiling point is strictly above the given temperature."""
        if not is_finite(self.boiling_point_k):
            return False
        return self.boiling_point_k > temperature


class PropertyDefinition(BaseModel):
    """
    Quadratic model of one property of one material.

    value(T) = a*T^2 + b*T + c, defined on [tmin, tmax].
    """

    pcm_id: str = Field("", description="Referenced PcmRecord.id", alias="pcmId")
    name: str = Field("", description="Human-readable property name")
    property_type: str = Field(
        "", description="Property key used by the property selector", alias="propertyType"
    )

    a: Optional[float] = Field(None, description="Quadratic coefficient")
    b: Optional[float] = Field(None, description="Linear coefficient")
    c: Optional[float] = Field(None, description="Constant term")

    tmin: Optional[float] = Field(None, description="Domain lower bound (K)")
    tmax: Optional[float] = Field(None, description="Domain upper bound (K)")

    class Config:
        """Pydantic configuration."""

        frozen = True
        populate_by_name = True

    def is_valid(self) -> bool:
        """
        Check that the definition can be evaluated.

        All five numeric fields must be finite and tmin < tmax.
        """
        numeric = (self.a, self.b, self.c, self.tmin, self.tmax)
        if not all(is_finite(value) for value in numeric):
            return False
        return self.tmin < self.tmax

    def matches(self, pcm_id: str, property_type: str) -> bool:
        """Check the (pcm_id, property_type) key."""
        return self.pcm_id == pcm_id and self.property_type == property_type

    def value_at(self, temperature: float) -> float:
        """Evaluate a*T^2 + b*T + c. Caller must check is_valid() first."""
        return self.a * temperature ** 2 + self.b * temperature + self.c
