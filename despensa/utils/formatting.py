# despensa/utils/formatting.py
import math
from decimal import Decimal, ROUND_HALF_UP


def format_price(amount) -> str:
    """Formatea pesos argentinos sin decimales: $ 25.000"""
    try:
        value = Decimal(str(amount)).quantize(Decimal('1'), rounding=ROUND_HALF_UP)
    except (ArithmeticError, ValueError, TypeError):
        return f"$ {amount}"
    sign = '-' if value < 0 else ''
    digits = f"{abs(int(value)):,}".replace(',', '.')
    return f"{sign}$ {digits}"


def to_float(value, default=None):
    """Convierte a float; retorna default si está vacío o es inválido (incluye inf y nan)."""
    if value is None or isinstance(value, bool) or (isinstance(value, str) and not value.strip()):
        return default
    try:
        result = float(value)
    except (TypeError, ValueError):
        return default
    return result if math.isfinite(result) else default


def to_int(value, default=None):
    if value is None or isinstance(value, bool) or (isinstance(value, str) and not value.strip()):
        return default
    if isinstance(value, float) and not value.is_integer():
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def to_text(value) -> str:
    """Texto recortado de un campo. Números se aceptan como texto; listas u objetos no."""
    if isinstance(value, (str, int, float)) and not isinstance(value, bool):
        return str(value).strip()
    return ''
