"""Digit-Pair Tokenizer — разбиение десятичной строки на пары цифр.

Правила:
- Первая группа имеет длину 1, если в целой части нечётное число цифр,
  иначе 2; все последующие группы по 2 цифры
- Нечётная дробная часть дополняется одним нулём справа
- Последняя группа целой части помечается closes_integer_part

Чистая функция: одинаковый вход → одинаковый результат.
"""

from typing import Iterator, Union

from src.core.domain.decimal_input import DecimalInput
from src.core.domain.digit_group import DigitGroup, TokenizedInput


def iter_digit_groups(decimal_input: DecimalInput) -> Iterator[DigitGroup]:
    """Генератор групп цифр в порядке сноса.

    Args:
        decimal_input: разобранная десятичная запись

    Yields:
        DigitGroup
    """
    integer = decimal_input.integer_digits
    fraction = decimal_input.padded_fraction_digits

    index = 0
    pos = 0
    length = 2 - len(integer) % 2  # 1 или 2
    while pos < len(integer):
        end = pos + length
        yield DigitGroup(
            index=index,
            digits=integer[pos:end],
            closes_integer_part=end == len(integer),
        )
        index += 1
        pos = end
        length = 2

    for pos in range(0, len(fraction), 2):
        yield DigitGroup(index=index, digits=fraction[pos : pos + 2], is_fractional=True)
        index += 1


def tokenize(raw: Union[str, DecimalInput]) -> TokenizedInput:
    """Токенизация десятичной строки.

    Args:
        raw: строка вида digits ['.' digits] или уже разобранный DecimalInput

    Returns:
        TokenizedInput с группами и позицией точки в будущем корне

    Raises:
        MalformedInput: если строка невалидна

    Examples:
        >>> [g.digits for g in tokenize("12345.6").groups]
        ['1', '23', '45', '60']
        >>> tokenize("12345.6").root_point_index
        3
    """
    decimal_input = raw if isinstance(raw, DecimalInput) else DecimalInput.parse(raw)
    groups = tuple(iter_digit_groups(decimal_input))

    integer_group_count = sum(1 for g in groups if not g.is_fractional)
    has_fraction_groups = integer_group_count < len(groups)

    return TokenizedInput(
        source=decimal_input,
        groups=groups,
        integer_group_count=integer_group_count,
        point_group_index=integer_group_count if has_fraction_groups else None,
        root_point_index=integer_group_count if decimal_input.has_point else None,
    )
