# -*- coding: utf-8 -*-
"""
CalcLog — Operator Dispatcher
Operatör token'ını Arithmetic Engine işlemine eşler. Bilinmeyen token'lar
Err(INVALID_OPERATOR) döner; bu hata sıfıra bölmeden her zaman ayırt edilebilir.
"""

import logging
from enum import Enum
from typing import Optional

import arithmetic
from errors import CalculationError, ErrorKind
from results import Err, Ok, Result

logger = logging.getLogger("calclog.dispatcher")


class Operator(Enum):
    """Değerler sunum yüzeyindeki operatör butonlarının sabit token'larıdır."""

    ADD = "1"
    SUBTRACT = "2"
    MULTIPLY = "3"
    DIVIDE = "4"

    @property
    def token(self) -> str:
        return self.value

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {
    Operator.ADD: "+",
    Operator.SUBTRACT: "-",
    Operator.MULTIPLY: "×",
    Operator.DIVIDE: "÷",
}

# Sonuç her zaman Ok/Err olacak şekilde sarılır
_OPERATIONS = {
    Operator.ADD: lambda a, b: Ok(arithmetic.add(a, b)),
    Operator.SUBTRACT: lambda a, b: Ok(arithmetic.subtract(a, b)),
    Operator.MULTIPLY: lambda a, b: Ok(arithmetic.multiply(a, b)),
    Operator.DIVIDE: arithmetic.divide,
}

# CLI ve kabuk için ek yazımlar
_ALIASES = {
    "add": Operator.ADD, "+": Operator.ADD,
    "subtract": Operator.SUBTRACT, "sub": Operator.SUBTRACT, "-": Operator.SUBTRACT,
    "multiply": Operator.MULTIPLY, "mul": Operator.MULTIPLY,
    "*": Operator.MULTIPLY, "x": Operator.MULTIPLY, "×": Operator.MULTIPLY,
    "divide": Operator.DIVIDE, "div": Operator.DIVIDE,
    "/": Operator.DIVIDE, "÷": Operator.DIVIDE,
}


def lookup_operator(token) -> Optional[Operator]:
    """
    Token, isim veya sembolden Operator bulur.

    Returns:
        Operator ya da tanınmayan girdi için None
    """
    if isinstance(token, Operator):
        return token
    if not isinstance(token, str):
        return None
    text = token.strip()
    try:
        return Operator(text)
    except ValueError:
        return _ALIASES.get(text.lower())


def dispatch(operator_token, a: float, b: float) -> Result:
    """
    İşlemi çalıştırır.

    Returns:
        Ok(float) | Err(CalculationError)
    """
    op = lookup_operator(operator_token)
    if op is None:
        logger.info("Geçersiz operatör: %r", operator_token)
        return Err(CalculationError(ErrorKind.INVALID_OPERATOR,
                                    f"Invalid operation: {operator_token!r}"))
    result = _OPERATIONS[op](a, b)
    if isinstance(result, Err):
        logger.info("%s %s %s reddedildi — %s", a, op.symbol, b, result.error.message)
    return result
