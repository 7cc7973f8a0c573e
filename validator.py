# -*- coding: utf-8 -*-
"""
CalcLog — Input Validator
İki ham metin girdisini ayrıştırır. Kurallar sırayla uygulanır ve ilk
ihlal raporlanır: boş alan → sonlu olmayan sayı → Ok.
"""

import logging
import math
from dataclasses import dataclass

from errors import ErrorKind, Field, ValidationError
from results import Err, Ok, Result

logger = logging.getLogger("calclog.validator")


@dataclass(frozen=True)
class Operands:
    a: float
    b: float


def _is_blank(raw) -> bool:
    return raw is None or not str(raw).strip()


def _parse_finite(raw):
    """Sonlu float döndürür, ayrıştırılamazsa veya ±inf/NaN ise None."""
    try:
        value = float(str(raw).strip())
    except (TypeError, ValueError):
        return None
    return value if math.isfinite(value) else None


def validate(raw_a, raw_b) -> Result:
    """
    Returns:
        Ok(Operands) | Err(ValidationError)
    """
    for raw, field in ((raw_a, Field.FIRST), (raw_b, Field.SECOND)):
        if _is_blank(raw):
            logger.debug("Boş alan: %s", field.value)
            return Err(ValidationError(ErrorKind.EMPTY_FIELD, field))

    values = []
    for raw, field in ((raw_a, Field.FIRST), (raw_b, Field.SECOND)):
        value = _parse_finite(raw)
        if value is None:
            logger.debug("Geçersiz sayı (%s): %r", field.value, raw)
            return Err(ValidationError(ErrorKind.NOT_FINITE_NUMBER, field))
        values.append(value)

    return Ok(Operands(*values))
