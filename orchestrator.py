# -*- coding: utf-8 -*-
"""
CalcLog — Interaction Orchestrator v1.0
Validator → Dispatcher → Log → sunum yüzeyi akışını yönetir.

İstek başına durum makinesi:
    IDLE → VALIDATING → DISPATCHING → (SUCCEEDED | REJECTED) → IDLE
İstekler arasında bağlam taşınmaz; her istek IDLE'dan başlar.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

import dispatcher
import validator
from calc_log import CalculationLog, LogEntry
from errors import ErrorKind, InternalError, PersistenceError, ValidationError
from results import Err, Ok

logger = logging.getLogger("calclog.orchestrator")


class RequestState(Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    DISPATCHING = "dispatching"
    SUCCEEDED = "succeeded"
    REJECTED = "rejected"


@dataclass(frozen=True)
class RequestOutcome:
    """Bir hesaplama isteğinin son durumu, sonucu ve (başarıdaysa) yeni kaydı."""

    state: RequestState
    result: object
    entry: Optional[LogEntry] = None

    @property
    def succeeded(self) -> bool:
        return self.state is RequestState.SUCCEEDED


class Orchestrator:
    """
    Log ve sunum yüzeyini sahiplenir; süreç boyunca bir kez kurulur.

    Sunum yüzeyi yoksa (veya bir metodu eksikse) hata fırlatılmaz:
    InternalError(MISSING_PRESENTATION_TARGET) loglanır ve kaydedilir.

    Log'da önceden tanımlı bir warning_handler varsa korunur; uyarılar
    önce ona, sonra sunum yüzeyine iletilir.
    """

    def __init__(self, log: CalculationLog, surface=None):
        self.log = log
        self.surface = surface
        self.state = RequestState.IDLE
        self._internal_errors: List[InternalError] = []
        self._previous_warning_handler = log.warning_handler
        self.log.warning_handler = self._on_persistence_warning

    @property
    def internal_errors(self) -> List[InternalError]:
        return list(self._internal_errors)

    # ═══════════════════════════════════════════════════════════════
    #  YAŞAM DÖNGÜSÜ
    # ═══════════════════════════════════════════════════════════════

    def start(self) -> List[LogEntry]:
        """Geçmişi yükler ve görünümü en yeni önce olacak şekilde doldurur."""
        entries = self.log.load()
        self._emit("clear_log_view")
        # render_log_entry başa ekler; eskiden yeniye gitmek en yeniyi üstte bırakır
        for entry in reversed(entries):
            self._emit("render_log_entry", entry)
        return entries

    # ═══════════════════════════════════════════════════════════════
    #  HESAPLAMA
    # ═══════════════════════════════════════════════════════════════

    def calculate(self, raw_a, raw_b, operator_token) -> RequestOutcome:
        self.state = RequestState.IDLE
        try:
            self._transition(RequestState.VALIDATING)
            checked = validator.validate(raw_a, raw_b)
            if isinstance(checked, Err):
                return self._reject(checked)

            operands = checked.value
            self._transition(RequestState.DISPATCHING)
            result = dispatcher.dispatch(operator_token, operands.a, operands.b)
            if isinstance(result, Err):
                return self._reject(result)

            self._transition(RequestState.SUCCEEDED)
            self._emit("render", result.value)
            op = dispatcher.lookup_operator(operator_token)
            entry = self.log.add(operands.a, operands.b, op.token, op.symbol, result.value)
            self._emit("render_log_entry", entry)
            logger.info("Hesaplandı: #%d %s", entry.id, entry)
            return RequestOutcome(RequestState.SUCCEEDED, result, entry)
        finally:
            self._transition(RequestState.IDLE)

    def _reject(self, err: Err) -> RequestOutcome:
        self._transition(RequestState.REJECTED)
        error = err.error
        logger.info("İstek reddedildi [%s] %s", error.kind.name, error.message)
        if isinstance(error, ValidationError):
            self._emit("mark_invalid_field", error.field)
        self._emit("render", error)
        return RequestOutcome(RequestState.REJECTED, err)

    # ═══════════════════════════════════════════════════════════════
    #  GEÇMİŞ ETKİLEŞİMLERİ
    # ═══════════════════════════════════════════════════════════════

    def load_entry(self, entry_id: int):
        """
        Kaydın operandlarını girdilere yazar ve yeniden hesaplar.
        Geçmiş değişmez. Bilinmeyen id için None döner.
        """
        entry = self.log.get(entry_id)
        if entry is None:
            logger.info("Yüklenecek kayıt yok: #%s", entry_id)
            return None
        self._emit("show_inputs", entry.a, entry.b)
        result = self.log.replay_for_calculation(entry)
        self._emit("render", result.value if isinstance(result, Ok) else result.error)
        return result

    def delete_entry(self, entry_id: int) -> bool:
        removed = self.log.delete(entry_id)
        if removed:
            self._emit("remove_log_entry_from_view", entry_id)
        return removed

    def clear_log(self) -> None:
        self.log.clear()
        self._emit("clear_log_view")

    # ═══════════════════════════════════════════════════════════════
    #  İÇ YARDIMCILAR
    # ═══════════════════════════════════════════════════════════════

    def _transition(self, state: RequestState) -> None:
        if state is not self.state:
            logger.debug("Durum: %s → %s", self.state.name, state.name)
        self.state = state

    def _on_persistence_warning(self, error: PersistenceError) -> None:
        if self._previous_warning_handler is not None:
            self._previous_warning_handler(error)
        self._emit("render_warning", error)

    def _emit(self, method: str, *args) -> None:
        target = getattr(self.surface, method, None) if self.surface is not None else None
        if target is None:
            error = InternalError(
                ErrorKind.MISSING_PRESENTATION_TARGET,
                f"Sunum hedefi yok: {method}",
            )
            self._internal_errors.append(error)
            logger.info("%s — değer: %s", error.message, ", ".join(repr(a) for a in args))
            return
        target(*args)
