"""
StepRecord — Снимок одной итерации извлечения корня

Immutable Pydantic модель. Все величины целые произвольной точности
(Python int), поэтому модель пригодна для входа любой длины.

Связи между полями:
    multiplier = k + d
    product = multiplier * d
    remainder_after = remainder_before - product
"""

from pydantic import BaseModel, Field, model_validator


class StepRecord(BaseModel):
    """
    Одна строка "вывода решения".

    remainder_before: остаток после сноса очередной пары цифр,
    remainder_after: остаток после вычитания product.
    """

    index: int = Field(..., ge=0, description="Номер итерации")
    group: str = Field(..., pattern=r"^[0-9]{1,2}$", description="Снесённые цифры")
    k: int = Field(..., ge=0, description="База множителя: 20 * P")
    d: int = Field(..., ge=0, le=9, description="Выбранная цифра корня")
    multiplier: int = Field(..., ge=0, description="k + d")
    product: int = Field(..., ge=0, description="(k + d) * d")
    remainder_before: int = Field(..., ge=0, description="Остаток после сноса")
    remainder_after: int = Field(..., ge=0, description="Остаток после вычитания")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_arithmetic(self) -> "StepRecord":
        if self.multiplier != self.k + self.d:
            raise ValueError(
                f"multiplier {self.multiplier} != k + d ({self.k} + {self.d})"
            )
        if self.product != self.multiplier * self.d:
            raise ValueError(
                f"product {self.product} != multiplier * d ({self.multiplier} * {self.d})"
            )
        if self.remainder_after != self.remainder_before - self.product:
            raise ValueError(
                f"remainder_after {self.remainder_after} != "
                f"remainder_before - product ({self.remainder_before} - {self.product})"
            )
        return self
