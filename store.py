# -*- coding: utf-8 -*-
"""
CalcLog — Durable Store v1.0
Anahtar/değer kalıcı depo soyutlaması. Disk I/O hatalarını (izin, eksik
dizin, disk dolu, path uzunluğu) teşhis edip PersistenceError olarak fırlatır.

Kullanım:
    store = JsonFileStore(DATA_DIR)
    store.set("calcLog", "[]")
    blob = store.get("calcLog")   # yoksa None
    store.remove("calcLog")
"""

import errno
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from typing import Dict, Optional

from config import MAX_PATH_LENGTH
from errors import ErrorKind, PersistenceError

logger = logging.getLogger("calclog.store")

ERRNO_MAP = {
    errno.EACCES: "İzin hatası (Permission Denied)",
    errno.ENOENT: "Dosya/dizin bulunamadı",
    errno.ENOSPC: "Disk alanı yetersiz",
    errno.ENAMETOOLONG: "Dosya adı çok uzun",
    errno.EROFS: "Salt okunur dosya sistemi",
}


def diagnose(exc: Exception, filepath: str = "") -> str:
    """Hatayı teşhis edip çözüm önerisi döndürür."""
    if filepath:
        abs_path = os.path.abspath(filepath)
        if len(abs_path) >= MAX_PATH_LENGTH:
            return (f"Dosya yolu {len(abs_path)} karakter — MAX_PATH ({MAX_PATH_LENGTH}) "
                    f"sınırını aşıyor. Daha kısa bir veri dizini kullanın.")

    if isinstance(exc, PermissionError):
        return "Dosya/dizin üzerinde yazma izni yok. İzinleri kontrol edin."

    if isinstance(exc, FileNotFoundError):
        return "Hedef dizin mevcut değil veya yol geçersiz."

    if isinstance(exc, OSError) and exc.errno in ERRNO_MAP:
        return ERRNO_MAP[exc.errno]

    if isinstance(exc, UnicodeError):
        return "Kayıt dosyası UTF-8 değil."

    return "Genel I/O hatası. Disk durumunu ve izinleri kontrol edin."


class KeyValueStore(ABC):
    """get/set/remove sunan kalıcı depo. Hatalar PersistenceError olarak fırlatılır."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        ...

    @abstractmethod
    def set(self, key: str, blob: str) -> None:
        ...

    @abstractmethod
    def remove(self, key: str) -> None:
        ...


class MemoryStore(KeyValueStore):
    """Süreç içi depo; testler ve `shell --memory` için."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, blob: str) -> None:
        self._data[key] = blob

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._data


class JsonFileStore(KeyValueStore):
    """
    Her anahtar için `<directory>/<key>.json` dosyası.
    Yazma atomiktir: aynı dizinde geçici dosya, ardından os.replace.
    """

    def __init__(self, directory: str, encoding: str = "utf-8"):
        self.directory = os.path.abspath(directory)
        self.encoding = encoding

    def path_for(self, key: str) -> str:
        return os.path.join(self.directory, f"{key}.json")

    def get(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        if not os.path.isfile(path):
            return None
        try:
            with open(path, "r", encoding=self.encoding) as f:
                return f.read()
        except (OSError, UnicodeError) as exc:
            raise self._failure(ErrorKind.LOAD_FAILED, key, path, exc) from exc

    def set(self, key: str, blob: str) -> None:
        path = self.path_for(key)

        if len(path) >= MAX_PATH_LENGTH:
            exc = OSError(f"Path uzunluğu ({len(path)}) MAX_PATH ({MAX_PATH_LENGTH}) sınırını aşıyor")
            raise self._failure(ErrorKind.SAVE_FAILED, key, path, exc)

        tmp_path = None
        try:
            os.makedirs(self.directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(prefix=f".{key}.", suffix=".tmp", dir=self.directory)
            with os.fdopen(fd, "w", encoding=self.encoding) as f:
                f.write(blob)
            os.replace(tmp_path, path)
            tmp_path = None
            logger.debug("Kaydedildi: %s (%d bayt)", path, len(blob))
        except OSError as exc:
            raise self._failure(ErrorKind.SAVE_FAILED, key, path, exc) from exc
        finally:
            if tmp_path and os.path.exists(tmp_path):
                try:
                    os.remove(tmp_path)
                except OSError as e:
                    logger.debug("Geçici dosya silinemedi: %s — %s", tmp_path, e)

    def remove(self, key: str) -> None:
        path = self.path_for(key)
        try:
            os.remove(path)
            logger.debug("Silindi: %s", path)
        except FileNotFoundError:
            return
        except OSError as exc:
            raise self._failure(ErrorKind.SAVE_FAILED, key, path, exc) from exc

    @staticmethod
    def _failure(kind: ErrorKind, key: str, path: str, exc: Exception) -> PersistenceError:
        return PersistenceError(
            kind,
            f"{type(exc).__name__}: {exc}",
            key=key,
            diagnosis=diagnose(exc, path),
        )
