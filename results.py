# -*- coding: utf-8 -*-
"""
CalcLog — Tagged Results
Başarı (Ok) ve hata (Err) değerleri; hata türü hiçbir zaman None ile
temsil edilmez.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from errors import CalcAppError


@dataclass(frozen=True)
class Ok:
    value: Any

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    error: CalcAppError

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def kind(self):
        return self.error.kind


Result = Union[Ok, Err]
