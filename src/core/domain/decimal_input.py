"""
DecimalInput — Валидированная десятичная запись подкоренного числа

Immutable Pydantic модель исходной строки: цифры ASCII и не более одной
десятичной точки. Знак не поддерживается.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Десятичная точка никогда не стоит первым символом
2. Целая часть содержит хотя бы одну цифру
3. Дробная часть после паддинга всегда имеет чётную длину
"""

from typing import Final, Optional

from pydantic import BaseModel, Field

# =============================================================================
# CONSTANTS
# =============================================================================

DECIMAL_POINT: Final[str] = "."
DIGITS: Final[frozenset[str]] = frozenset("0123456789")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MalformedInput(ValueError):
    """
    Строка не является допустимой десятичной записью.

    Возникает до начала любых вычислений: частичный результат не формируется.
    """

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.position = position


# =============================================================================
# DECIMAL INPUT MODEL
# =============================================================================


class DecimalInput(BaseModel):
    """
    Разобранная десятичная запись.

    Создаётся один раз через DecimalInput.parse() и дальше только читается
    токенизатором.
    """

    raw: str = Field(..., min_length=1, description="Исходная строка")
    integer_digits: str = Field(
        ..., pattern=r"^[0-9]+$", description="Цифры целой части (минимум одна)"
    )
    fraction_digits: str = Field(
        "", pattern=r"^[0-9]*$", description="Цифры дробной части (может быть пусто)"
    )
    has_point: bool = Field(False, description="Присутствует ли десятичная точка")

    model_config = {"frozen": True}

    @classmethod
    def parse(cls, raw: str) -> "DecimalInput":
        """
        Разбор строки вида digits ['.' [digits]].

        Args:
            raw: Исходная строка (без пробелов и знака)

        Returns:
            DecimalInput

        Raises:
            MalformedInput: пустая строка, точка первым символом, посторонние
                символы или больше одной точки

        Examples:
            >>> DecimalInput.parse("2.25").fraction_digits
            '25'
            >>> DecimalInput.parse(".5")  # doctest: +SKIP
            Traceback (most recent call last):
                ...
            MalformedInput: ...
        """
        if not isinstance(raw, str):
            raise MalformedInput(f"Expected str, got {type(raw).__name__}")
        if not raw:
            raise MalformedInput("Empty input", position=0)

        point_at: Optional[int] = None
        for i, ch in enumerate(raw):
            if ch == DECIMAL_POINT:
                if i == 0:
                    raise MalformedInput(
                        "Decimal point must be preceded by at least one digit", position=0
                    )
                if point_at is not None:
                    raise MalformedInput(
                        f"Second decimal point at position {i} (first at {point_at})",
                        position=i,
                    )
                point_at = i
            elif ch not in DIGITS:
                raise MalformedInput(
                    f"Illegal character {ch!r} at position {i}. Allowed are only 0-9 and '.'",
                    position=i,
                )

        if point_at is None:
            return cls(raw=raw, integer_digits=raw, fraction_digits="", has_point=False)

        return cls(
            raw=raw,
            integer_digits=raw[:point_at],
            fraction_digits=raw[point_at + 1 :],
            has_point=True,
        )

    @property
    def padded_fraction_digits(self) -> str:
        """Дробная часть, дополненная одним нулём до чётной длины."""
        if len(self.fraction_digits) % 2 == 1:
            return self.fraction_digits + "0"
        return self.fraction_digits

    @property
    def padded(self) -> str:
        """Строка, которая фактически разбивается на пары."""
        if not self.has_point:
            return self.integer_digits
        return f"{self.integer_digits}{DECIMAL_POINT}{self.padded_fraction_digits}"

    @property
    def digit_count(self) -> int:
        """Количество цифр после паддинга (без точки)."""
        return len(self.integer_digits) + len(self.padded_fraction_digits)
