"""
Factoring Errors — таксономия отказов движка факторизации

Все ошибки означают отказ на математически невалидный или неподдерживаемый запрос.
Ни одна из них не является транзиентной: повторный вызов с теми же входами
всегда даст тот же отказ.

| Ошибка                  | Источник         | Условие                                     |
|-------------------------|------------------|---------------------------------------------|
| InvalidInput            | hcf              | оба аргумента равны нулю                    |
| NonIntegerFactors       | diamond          | корни не целые / дискриминант < 0           |
| NotPerfectSquare        | factor_ac        | |a| или |c| не полный квадрат               |
| NotDifferenceOfSquares  | factor_ac        | сумма квадратов вместо разности             |
| NoRealRoots             | factor_abc       | парабола не пересекает ось x                |
"""


class FactoringError(ArithmeticError):
    """Базовый класс отказов факторизации."""
    pass


class InvalidInput(FactoringError, ValueError):
    """
    Вырожденный вход утилиты HCF: hcf(0, 0).

    Множество общих делителей 0 и 0 не ограничено, максимум не определён.
    """
    pass


class NonIntegerFactors(FactoringError):
    """
    Diamond problem не имеет целочисленного решения.

    Трёхчлен не раскладывается над целыми числами методом diamond/box.
    """
    pass


class NotPerfectSquare(FactoringError):
    """|a| или |c| не является полным квадратом (difference of squares невозможна)."""
    pass


class NotDifferenceOfSquares(FactoringError):
    """
    Выражение является суммой квадратов, а не разностью.

    Отдельный тип от NotPerfectSquare: вызывающий код различает
    "неверная форма задачи" и "не целочисленно".
    """
    pass


class NoRealRoots(FactoringError):
    """Парабола не пересекает ось x (вершина по ту же сторону, куда открыты ветви)."""
    pass
