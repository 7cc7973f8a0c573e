# -*- coding: utf-8 -*-
"""
CalcLog — Arithmetic Engine
İki operandlı saf işlemler. Toplama, çıkarma ve çarpma IEEE-754 kurallarıyla
her zaman sonuç üretir; bölme yalnızca sıfıra bölmede başarısız olur.
"""

from errors import CalculationError, ErrorKind
from results import Err, Ok, Result


def add(a: float, b: float) -> float:
    return a + b


def subtract(a: float, b: float) -> float:
    return a - b


def multiply(a: float, b: float) -> float:
    return a * b


def divide(a: float, b: float) -> Result:
    """
    Bölme. `b == 0` (-0.0 dahil) için Err(DIVISION_BY_ZERO) döner.
    Taşmadan doğan sonsuz değerler hata sayılmaz.
    """
    if b == 0:
        return Err(CalculationError(ErrorKind.DIVISION_BY_ZERO))
    return Ok(a / b)
