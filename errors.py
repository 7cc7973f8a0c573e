# -*- coding: utf-8 -*-
"""
CalcLog — Error Taxonomy v1.0
Doğrulama, hesaplama, kalıcılık ve iç hatalar; her hata türü açıkça
ErrorKind ile etiketlenir.
"""

from enum import Enum


class ErrorKind(Enum):
    EMPTY_FIELD = "empty_field"
    NOT_FINITE_NUMBER = "not_finite_number"
    DIVISION_BY_ZERO = "division_by_zero"
    INVALID_OPERATOR = "invalid_operator"
    LOAD_FAILED = "load_failed"
    SAVE_FAILED = "save_failed"
    MISSING_PRESENTATION_TARGET = "missing_presentation_target"


class Field(Enum):
    """Girdi alanları (id'ler sunum yüzeyindeki alan adlarıdır)."""

    FIRST = "val1"
    SECOND = "val2"

    @property
    def label(self) -> str:
        return "First value" if self is Field.FIRST else "Second value"


class CalcAppError(Exception):
    """
    Tüm uygulama hatalarının tabanı.

    Attributes:
        kind: Hatanın türü (ErrorKind)
        message: Kullanıcıya gösterilebilir açıklama
    """

    KINDS = frozenset()

    def __init__(self, kind: ErrorKind, message: str = ""):
        if kind not in self.KINDS:
            raise ValueError(f"{type(self).__name__} için geçersiz tür: {kind}")
        self.kind = kind
        self.message = message or kind.value
        super().__init__(self.message)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.kind == other.kind and self.message == other.message

    def __hash__(self):
        return hash((type(self), self.kind, self.message))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind.name}, {self.message!r})"


class ValidationError(CalcAppError):
    KINDS = frozenset({ErrorKind.EMPTY_FIELD, ErrorKind.NOT_FINITE_NUMBER})

    def __init__(self, kind: ErrorKind, field: Field, message: str = ""):
        self.field = field
        if not message:
            if kind is ErrorKind.EMPTY_FIELD:
                message = f"{field.label} is empty"
            else:
                message = f"{field.label} is not a valid number"
        super().__init__(kind, message)

    def __eq__(self, other):
        result = super().__eq__(other)
        if result is NotImplemented:
            return result
        return result and self.field == other.field

    def __hash__(self):
        return hash((type(self), self.kind, self.field))


class CalculationError(CalcAppError):
    KINDS = frozenset({ErrorKind.DIVISION_BY_ZERO, ErrorKind.INVALID_OPERATOR})

    def __init__(self, kind: ErrorKind, message: str = ""):
        if not message:
            message = ("Cannot divide by zero" if kind is ErrorKind.DIVISION_BY_ZERO
                       else "Invalid operation")
        super().__init__(kind, message)


class PersistenceError(CalcAppError):
    """
    Kalıcı depo hatası. `diagnosis` olası nedeni ve çözüm önerisini taşır.
    """

    KINDS = frozenset({ErrorKind.LOAD_FAILED, ErrorKind.SAVE_FAILED})

    def __init__(self, kind: ErrorKind, message: str = "", key: str = "", diagnosis: str = ""):
        self.key = key
        self.diagnosis = diagnosis
        super().__init__(kind, message)


class InternalError(CalcAppError):
    KINDS = frozenset({ErrorKind.MISSING_PRESENTATION_TARGET})
