"""
DecimalRecord — запись для персистентности NormalizedDecimal

Immutable Pydantic модель: пара двух signed 32-bit целых (mantissa, exponent).
Полная совместимость с JSON Schema (contracts/schema/normalized_decimal.json).

Бесконечности хранятся как (±1, INFINITY_EXPONENT_BITS): битовый паттерн
порядка float32 +inf. Нормализованное конечное значение никогда не имеет
мантиссы ±1, поэтому такая пара однозначна.
"""

from typing import Final

from pydantic import BaseModel, Field, field_validator, model_validator

from normdec.core.domain.normalized_decimal import (
    NEGATIVE_INFINITY,
    POSITIVE_INFINITY,
    NormalizedDecimal,
)
from normdec.core.math.normalizer import NORMALIZE_MAX, NORMALIZE_MIN, ZERO_EXPONENT
from normdec.core.math.numerical_safeguards import INT32_MAX, INT32_MIN

# Битовый паттерн порядка float32 для ±inf
INFINITY_EXPONENT_BITS: Final[int] = 0x7F800000


class DecimalRecord(BaseModel):
    """
    Сериализуемая пара (mantissa, exponent).

    Immutable модель (frozen=True). Валидирует нормальную форму, но не
    нормализует: запись с ненормализованной парой отвергается.
    """

    mantissa: int = Field(
        ..., ge=INT32_MIN, le=INT32_MAX, description="Мантисса (signed 32-bit)"
    )
    exponent: int = Field(
        ..., ge=INT32_MIN, le=INT32_MAX, description="Порядок (signed 32-bit)"
    )

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("mantissa")
    @classmethod
    def validate_mantissa_form(cls, v: int) -> int:
        """
        Мантисса: 0, ±1 (маркер бесконечности) или ровно 9 цифр.
        """
        if v in (0, 1, -1):
            return v
        if not NORMALIZE_MIN <= abs(v) < NORMALIZE_MAX:
            raise ValueError(f"mantissa {v} is not normalized to 9 significant digits")
        return v

    @model_validator(mode="after")
    def validate_pair(self) -> "DecimalRecord":
        """
        Согласованность пары:
        - mantissa == 0 ⇒ exponent == ZERO_EXPONENT
        - mantissa == ±1 ⇒ exponent == INFINITY_EXPONENT_BITS
        """
        if self.mantissa == 0 and self.exponent != ZERO_EXPONENT:
            raise ValueError(
                f"zero record must have exponent {ZERO_EXPONENT}, got {self.exponent}"
            )
        if abs(self.mantissa) == 1 and self.exponent != INFINITY_EXPONENT_BITS:
            raise ValueError(
                f"infinity record must have exponent {INFINITY_EXPONENT_BITS:#x}, "
                f"got {self.exponent}"
            )
        return self

    @property
    def is_infinity(self) -> bool:
        return abs(self.mantissa) == 1

    @classmethod
    def from_value(cls, value: NormalizedDecimal) -> "DecimalRecord":
        """
        Запись для значения.

        Args:
            value: Любое NormalizedDecimal, включая бесконечности

        Returns:
            DecimalRecord
        """
        if value.is_infinite:
            return cls(mantissa=value.sign, exponent=INFINITY_EXPONENT_BITS)
        return cls(mantissa=value.mantissa, exponent=value.exponent)

    def to_value(self) -> NormalizedDecimal:
        """Восстановление значения из записи."""
        if self.is_infinity:
            return POSITIVE_INFINITY if self.mantissa > 0 else NEGATIVE_INFINITY
        return NormalizedDecimal(self.mantissa, self.exponent)
