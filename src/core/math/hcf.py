"""
HCF — Highest Common Factor (GCD)

Листовая утилита движка факторизации:
- hcf(a, b): попарный HCF алгоритмом Евклида
- hcf_many(*values): цепочка hcf(a, hcf(b, c))
- common_factors(a, b): все общие положительные делители

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат всегда неотрицателен (работаем с |a|, |b|)
2. hcf(a, b) делит a и b нацело, большего общего делителя нет
3. hcf(0, 0) → InvalidInput (максимум не определён)
4. hcf(n, 0) == |n|
"""

from src.core.math.errors import InvalidInput
from src.core.math.numerical_safeguards import validate_integer


def hcf(a: int, b: int) -> int:
    """
    Highest common factor двух целых чисел (алгоритм Евклида).

    Args:
        a: Первое число (может быть отрицательным)
        b: Второе число (может быть отрицательным)

    Returns:
        HCF(|a|, |b|) >= 1

    Raises:
        InvalidInput: если a == b == 0
        TypeError: если a или b не целые

    Examples:
        >>> hcf(12, 18)
        6
        >>> hcf(-4, 6)
        2
        >>> hcf(7, 0)
        7
    """
    validate_integer(a, "a")
    validate_integer(b, "b")

    if a == 0 and b == 0:
        raise InvalidInput("hcf(0, 0) is undefined: every integer divides zero")

    x, y = abs(a), abs(b)
    while y:
        x, y = y, x % y

    return x


def hcf_many(*values: int) -> int:
    """
    HCF нескольких чисел: попарная цепочка справа налево.

    Для трёх коэффициентов: hcf(a, hcf(b, c)). Нули пропускаются
    (hcf(n, 0) == |n|), поэтому отказ возможен только если все значения нулевые.

    Raises:
        InvalidInput: если значений нет или все равны нулю
    """
    if not values:
        raise InvalidInput("hcf_many requires at least one value")

    for i, value in enumerate(values):
        validate_integer(value, f"values[{i}]")

    nonzero = [v for v in values if v != 0]
    if not nonzero:
        raise InvalidInput(f"hcf of all-zero values {values} is undefined")

    result = abs(nonzero[-1])
    for value in reversed(nonzero[:-1]):
        result = hcf(value, result)

    return result


def common_factors(a: int, b: int) -> list[int]:
    """
    Все общие положительные делители |a| и |b| в порядке возрастания.

    Последний элемент всегда равен hcf(a, b). Делители HCF перебираются
    парами до sqrt(hcf).

    Raises:
        InvalidInput: если a == b == 0

    Examples:
        >>> common_factors(12, 18)
        [1, 2, 3, 6]
        >>> common_factors(-5, 0)
        [1, 5]
    """
    g = hcf(a, b)

    low: list[int] = []
    high: list[int] = []
    i = 1
    while i * i <= g:
        if g % i == 0:
            low.append(i)
            if i != g // i:
                high.append(g // i)
        i += 1

    return low + high[::-1]
