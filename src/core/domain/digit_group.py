"""
DigitGroup / TokenizedInput — Пары цифр для "сноса" в алгоритме

Immutable Pydantic модели результата токенизации.

ИНВАРИАНТЫ:
1. Первая группа имеет длину 1 тогда и только тогда, когда в целой части
   нечётное число цифр; все последующие группы имеют длину 2
2. Суммарное число цифр во всех группах равно длине дополненного входа
3. Ровно одна группа закрывает целую часть
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from src.core.domain.decimal_input import DecimalInput


# =============================================================================
# DIGIT GROUP
# =============================================================================


class DigitGroup(BaseModel):
    """Одна группа из 1-2 цифр, сносимая за одну итерацию."""

    index: int = Field(..., ge=0, description="Порядковый номер группы")
    digits: str = Field(..., pattern=r"^[0-9]{1,2}$", description="Цифры группы")
    is_fractional: bool = Field(False, description="Группа из дробной части")
    closes_integer_part: bool = Field(
        False, description="Последняя группа целой части"
    )

    model_config = {"frozen": True}

    @field_validator("closes_integer_part")
    @classmethod
    def validate_closing_group_is_integer(cls, v: bool, info) -> bool:
        """Дробная группа не может закрывать целую часть"""
        if v and info.data.get("is_fractional"):
            raise ValueError("fractional group cannot close the integer part")
        return v

    @property
    def value(self) -> int:
        return int(self.digits)


# =============================================================================
# TOKENIZED INPUT
# =============================================================================


class TokenizedInput(BaseModel):
    """
    Результат токенизации.

    root_point_index: позиция в корне (число цифр до точки), после которой
    вставляется точка; None если во входе точки нет.
    point_group_index: индекс первой группы после точки; None если дробных
    групп нет.
    """

    source: DecimalInput
    groups: tuple[DigitGroup, ...] = Field(..., min_length=1)
    integer_group_count: int = Field(..., ge=1)
    point_group_index: Optional[int] = None
    root_point_index: Optional[int] = None

    model_config = {"frozen": True}

    @field_validator("groups")
    @classmethod
    def validate_group_lengths(cls, v: tuple[DigitGroup, ...]) -> tuple[DigitGroup, ...]:
        """Только первая группа может быть короче двух цифр"""
        for group in v[1:]:
            if len(group.digits) != 2:
                raise ValueError(
                    f"group {group.index} has {len(group.digits)} digit(s), expected 2"
                )
        return v

    @property
    def padded(self) -> str:
        return self.source.padded

    @property
    def first_group_length(self) -> int:
        return len(self.groups[0].digits)

    def __len__(self) -> int:
        return len(self.groups)
