# -*- coding: utf-8 -*-
"""
CalcLog — Calculation Log v1.0
Başarılı hesaplamaların sıralı, id anahtarlı geçmişi. Her değişiklikten
(add, delete, clear) sonra bellek ile kalıcı depo eşitlenir; kalıcılık
hatası bellekteki değişikliği geri almaz, uyarı olarak raporlanır.

Kullanım:
    log = CalculationLog(JsonFileStore(DATA_DIR))
    log.load()
    entry = log.add(6, 3, "3", "×", 18)
    log.delete(entry.id)
"""

from __future__ import annotations

import json
import logging
import math
import time
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional

import dispatcher
from config import STORAGE_KEY, TIME_FORMAT
from errors import ErrorKind, PersistenceError
from store import KeyValueStore

logger = logging.getLogger("calclog.log")

RECORD_FIELDS = ("id", "time", "a", "b", "op", "symbol", "result")


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class LogEntry:
    """Tek bir başarılı hesaplama kaydı. Oluşturulduktan sonra değişmez."""

    id: int
    time: str
    a: float
    b: float
    op: str
    symbol: str
    result: float

    def to_record(self) -> dict:
        return {
            "id": self.id,
            "time": self.time,
            "a": self.a,
            "b": self.b,
            "op": self.op,
            "symbol": self.symbol,
            "result": self.result,
        }

    @classmethod
    def from_record(cls, record) -> "LogEntry":
        """
        Kalıcı kayıttan LogEntry üretir.

        Raises:
            ValueError: Eksik alan, yanlış tip veya sonlu olmayan operand
            OverflowError: float'a sığmayan tamsayı
        """
        if not isinstance(record, dict):
            raise ValueError(f"Kayıt nesne değil: {type(record).__name__}")

        missing = [f for f in RECORD_FIELDS if f not in record]
        if missing:
            raise ValueError(f"Eksik alanlar: {', '.join(missing)}")

        entry_id = record["id"]
        if not isinstance(entry_id, int) or isinstance(entry_id, bool):
            raise ValueError(f"Geçersiz id: {entry_id!r}")

        for name in ("time", "op", "symbol"):
            if not isinstance(record[name], str) or not record[name]:
                raise ValueError(f"Geçersiz '{name}' alanı: {record[name]!r}")

        for name in ("a", "b", "result"):
            if not _is_number(record[name]):
                raise ValueError(f"'{name}' sayı değil: {record[name]!r}")

        if not (math.isfinite(record["a"]) and math.isfinite(record["b"])):
            raise ValueError("Operandlar sonlu olmalı")

        return cls(
            id=entry_id,
            time=record["time"],
            a=float(record["a"]),
            b=float(record["b"]),
            op=record["op"],
            symbol=record["symbol"],
            result=float(record["result"]),
        )

    def __str__(self) -> str:
        return f"{self.a:g} {self.symbol} {self.b:g} = {self.result:g}"


def decode_entries(blob: str) -> List[LogEntry]:
    """
    JSON dizisini LogEntry listesine çevirir. Herhangi bir kayıt bozuksa
    tamamı reddedilir.

    Raises:
        ValueError: Bozuk JSON, dizi olmayan kök, bozuk kayıt veya tekrar eden id
    """
    try:
        data = json.loads(blob)
    except RecursionError as exc:
        raise ValueError("JSON çok derin iç içe") from exc
    if not isinstance(data, list):
        raise ValueError(f"Kök dizi değil: {type(data).__name__}")

    entries = []
    seen = set()
    for index, record in enumerate(data):
        try:
            entry = LogEntry.from_record(record)
        except (ValueError, OverflowError) as exc:
            raise ValueError(f"Kayıt #{index}: {exc}") from exc
        if entry.id in seen:
            raise ValueError(f"Kayıt #{index}: tekrar eden id {entry.id}")
        seen.add(entry.id)
        entries.append(entry)
    return entries


def encode_entries(entries: List[LogEntry]) -> str:
    return json.dumps([e.to_record() for e in entries], ensure_ascii=False)


class CalculationLog:
    """
    Hesaplama geçmişinin tek sahibi ve kalıcı deponun tek yazarı.

    Attributes:
        entries: Kayıtlar, en yeni önce
        warnings: Bu oturumda oluşan PersistenceError'lar
    """

    def __init__(
        self,
        store: KeyValueStore,
        key: str = STORAGE_KEY,
        warning_handler: Optional[Callable[[PersistenceError], None]] = None,
    ):
        self._store = store
        self._key = key
        self._entries: List[LogEntry] = []   # kronolojik (eski → yeni)
        self._next_id = 1
        self._warnings: List[PersistenceError] = []
        self.warning_handler = warning_handler

    # --- Okuma -------------------------------------------------------------

    @property
    def entries(self) -> List[LogEntry]:
        return list(reversed(self._entries))

    @property
    def warnings(self) -> List[PersistenceError]:
        return list(self._warnings)

    @property
    def last_warning(self) -> Optional[PersistenceError]:
        return self._warnings[-1] if self._warnings else None

    def get(self, entry_id: int) -> Optional[LogEntry]:
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(self.entries)

    def __contains__(self, entry_id) -> bool:
        return self.get(entry_id) is not None

    # --- Değişiklikler -----------------------------------------------------

    def add(self, a: float, b: float, operator_token: str, symbol: str, result: float) -> LogEntry:
        """Yeni kayıt ekler ve kalıcı hale getirir. Oluşturulan kaydı döndürür."""
        entry = LogEntry(
            id=self._allocate_id(),
            time=time.strftime(TIME_FORMAT),
            a=float(a),
            b=float(b),
            op=str(operator_token),
            symbol=symbol,
            result=float(result),
        )
        self._entries.append(entry)
        logger.debug("Geçmişe eklendi: #%d %s", entry.id, entry)
        self._persist()
        return entry

    def delete(self, entry_id: int) -> bool:
        """Kaydı siler. Bilinmeyen id için False döner (hata değildir)."""
        for index, entry in enumerate(self._entries):
            if entry.id == entry_id:
                del self._entries[index]
                logger.debug("Geçmişten silindi: #%d", entry_id)
                self._persist()
                return True
        logger.debug("Silinecek kayıt yok: #%s", entry_id)
        return False

    def clear(self) -> None:
        """Belleği boşaltır ve kalıcı kaydı tamamen siler (boş dizi yazılmaz)."""
        self._entries.clear()
        try:
            self._store.remove(self._key)
            logger.info("Geçmiş temizlendi.")
        except PersistenceError as exc:
            self._warn(exc)

    def load(self) -> List[LogEntry]:
        """
        Geçmişi kalıcı depodan yeniden kurar. Bozuk veri tamamen reddedilir,
        geçmiş boş başlar ve LOAD_FAILED uyarısı üretilir.

        Returns:
            Kayıtlar, en yeni önce
        """
        self._entries = []
        try:
            blob = self._store.get(self._key)
        except PersistenceError as exc:
            self._warn(exc)
            return self.entries

        if blob is None:
            logger.info("Kayıtlı geçmiş yok (%s)", self._key)
            return self.entries

        try:
            entries = decode_entries(blob)
        except ValueError as exc:
            self._warn(PersistenceError(
                ErrorKind.LOAD_FAILED,
                f"Kayıtlı geçmiş okunamadı: {exc}",
                key=self._key,
                diagnosis="Bozuk veri yok sayıldı; geçmiş boş başlatıldı.",
            ))
            return self.entries

        self._entries = entries
        if entries:
            self._next_id = max(self._next_id, max(e.id for e in entries) + 1)
        logger.info("%d kayıt yüklendi (%s)", len(entries), self._key)
        return self.entries

    def replay_for_calculation(self, entry: LogEntry):
        """Kaydı Dispatcher üzerinden yeniden hesaplar; geçmişi değiştirmez."""
        return dispatcher.dispatch(entry.op, entry.a, entry.b)

    # --- İç yardımcılar ----------------------------------------------------

    def _allocate_id(self) -> int:
        live = {e.id for e in self._entries}
        candidate = self._next_id
        while candidate in live:
            candidate += 1
        self._next_id = candidate + 1
        return candidate

    def _persist(self) -> None:
        try:
            self._store.set(self._key, encode_entries(self._entries))
        except PersistenceError as exc:
            self._warn(exc)

    def _warn(self, exc: PersistenceError) -> None:
        self._warnings.append(exc)
        logger.warning("Kalıcılık hatası [%s] %s — %s",
                       exc.kind.name, exc.message, exc.diagnosis)
        if self.warning_handler is not None:
            self.warning_handler(exc)
