"""
Precision Contract — общие правила валидации и округления

Модуль задаёт политику точности для всех функций, вычисляемых рядами:
- Приведение аргументов к Decimal без двоичных искажений
- Валидация аргумента и точности (0 < precision < 1)
- Scale точности: число дробных разрядов precision
- Порог сходимости ряда: 10^(-scale)
- Финальное округление результата до scale (ROUND_HALF_EVEN)
- Рабочая точность промежуточных делений (DECIMAL128, 34 значащих цифры)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. precision ∈ (0, 1) строго; нарушение — ошибка вызывающего, не численный случай
2. Результат любой функции имеет ровно scale(precision) дробных разрядов
3. Рабочая точность делений всегда >= 34 значащих цифр
4. Сложения, вычитания и произведения выполняются точно
"""

from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    Context,
    Decimal,
    InvalidOperation,
    localcontext,
)
from typing import Final

# =============================================================================
# ПАРАМЕТРЫ ТОЧНОСТИ
# =============================================================================

# Рабочая точность промежуточных делений (DECIMAL128)
WORKING_PRECISION: Final[int] = 34

# Максимальное число членов ряда (iteration budget)
MAX_ITERATIONS: Final[int] = 1000

# Контекст промежуточных делений: 34 значащих цифры, банковское округление
WORKING_CONTEXT: Final[Context] = Context(
    prec=WORKING_PRECISION,
    rounding=ROUND_HALF_EVEN,
    Emax=MAX_EMAX,
    Emin=MIN_EMIN,
)

# Контекст точной арифметики: сложение, вычитание, умножение и остаток
# не округляются (деление в этом контексте не выполняется)
EXACT_CONTEXT: Final[Context] = Context(
    prec=MAX_PREC,
    rounding=ROUND_HALF_EVEN,
    Emax=MAX_EMAX,
    Emin=MIN_EMIN,
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class SeriesMathError(Exception):
    """Базовая ошибка вычисления функций рядами."""


class InvalidParameterError(SeriesMathError, ValueError):
    """
    Аргумент или точность отсутствуют либо некорректны.

    Возникает до любых вычислений и всегда пробрасывается вызывающему.
    """


class FunctionDomainError(SeriesMathError, ArithmeticError):
    """
    Функция не определена в (приведённой) точке.

    Примеры: cos(x) = 0 для tan/sec, sin(x) = 0 для cot/csc,
    x <= 0 для логарифмов.
    """


# =============================================================================
# КОНТЕКСТЫ
# =============================================================================


def working_context():
    """Локальная копия WORKING_CONTEXT (потокобезопасно)."""
    return localcontext(WORKING_CONTEXT)


def exact_context():
    """Локальная копия EXACT_CONTEXT (потокобезопасно)."""
    return localcontext(EXACT_CONTEXT)


def series_context(scale: int):
    """
    Контекст для членов ряда: scale + WORKING_PRECISION значащих цифр.

    Args:
        scale: Число дробных разрядов результата

    Returns:
        Context manager с локальной копией контекста
    """
    return localcontext(
        Context(
            prec=scale + WORKING_PRECISION,
            rounding=ROUND_HALF_EVEN,
            Emax=MAX_EMAX,
            Emin=MIN_EMIN,
        )
    )


def working_divide(numerator: Decimal, denominator: Decimal) -> Decimal:
    """
    Деление с рабочей точностью (34 значащих цифры, ROUND_HALF_EVEN).

    Raises:
        decimal.DivisionByZero: Если denominator == 0
    """
    with working_context():
        return numerator / denominator


# =============================================================================
# ПРИВЕДЕНИЕ ТИПОВ
# =============================================================================


def as_decimal(value: object, name: str) -> Decimal:
    """
    Приведение значения к конечному Decimal.

    float приводится через repr (кратчайшее представление), чтобы 0.0001
    давало Decimal("0.0001"), а не двоичное приближение.

    Args:
        value: Decimal, int, float или str
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        Конечный Decimal

    Raises:
        InvalidParameterError: Если value отсутствует, не число или не конечно

    Examples:
        >>> as_decimal(0.0001, "precision")
        Decimal('0.0001')
        >>> as_decimal("-5", "x")
        Decimal('-5')
    """
    if value is None:
        raise InvalidParameterError(f"{name} can not be None")

    if isinstance(value, bool):
        raise InvalidParameterError(f"{name} must be a decimal number, got bool")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, (float, str)):
        text = repr(value) if isinstance(value, float) else value.strip()
        try:
            result = Decimal(text)
        except InvalidOperation as exc:
            raise InvalidParameterError(
                f"{name} must be a decimal number, got {value!r}"
            ) from exc
    else:
        raise InvalidParameterError(
            f"{name} must be a decimal number, got {type(value).__name__}"
        )

    if not result.is_finite():
        raise InvalidParameterError(f"{name} must be finite, got {result}")

    return result


# =============================================================================
# SCALE, ПОРОГ СХОДИМОСТИ, ОКРУГЛЕНИЕ
# =============================================================================


def scale_of(precision: Decimal) -> int:
    """
    Число дробных разрядов precision.

    Examples:
        >>> scale_of(Decimal("0.0001"))
        4
        >>> scale_of(Decimal("1E-10"))
        10
        >>> scale_of(Decimal("0.00050"))
        5
    """
    return -precision.as_tuple().exponent


def quantum(scale: int) -> Decimal:
    """Шаг квантования 10^(-scale)."""
    return Decimal(1).scaleb(-scale)


def convergence_threshold(precision: Decimal) -> Decimal:
    """
    Порог сходимости ряда: 10^(-scale(precision)).

    Итерация останавливается, когда разность соседних частичных сумм
    не превышает порога.
    """
    return quantum(scale_of(precision))


def round_to_scale(value: Decimal, precision: Decimal) -> Decimal:
    """
    Финальное округление до scale(precision) разрядов, ROUND_HALF_EVEN.

    Examples:
        >>> round_to_scale(Decimal("0.12345"), Decimal("0.0001"))
        Decimal('0.1234')
        >>> round_to_scale(Decimal("1"), Decimal("0.01"))
        Decimal('1.00')
    """
    with exact_context():
        result = value.quantize(quantum(scale_of(precision)), rounding=ROUND_HALF_EVEN)

    # -0.0000 → 0.0000
    if result.is_zero():
        return result.copy_abs()
    return result


def round_term(value: Decimal, scale: int) -> Decimal:
    """Округление члена ряда до scale разрядов, ROUND_HALF_UP."""
    with exact_context():
        return value.quantize(quantum(scale), rounding=ROUND_HALF_UP)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate(x: object, precision: object) -> tuple[Decimal, Decimal]:
    """
    Проверка аргумента и точности перед вычислением.

    Args:
        x: Аргумент функции
        precision: Требуемая точность, строго между 0 и 1

    Returns:
        (x, precision), приведённые к Decimal

    Raises:
        InvalidParameterError: Если x или precision отсутствуют, не конечны,
            или precision не лежит строго в (0, 1)
    """
    x_value = as_decimal(x, "Function argument")
    precision_value = as_decimal(precision, "Precision")

    if precision_value <= 0 or precision_value >= 1:
        raise InvalidParameterError(
            f"Precision must be less than one and more than zero, got {precision_value}"
        )

    return x_value, precision_value
