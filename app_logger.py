# -*- coding: utf-8 -*-
"""
CalcLog — Logging & Export Module v1.0
Logları logs/ altına kaydeder ve geçmişi JSON rapor olarak dışa aktarır.
"""

import json
import logging
import os
import time

from config import APP_NAME, LOGS_DIR, VERSION

logger = logging.getLogger("calclog.logger")

_installed_handlers = []


def setup_logging(logs_dir: str = LOGS_DIR, verbose: bool = False) -> str:
    """
    Logging altyapısını kurar. Log dosyası yolunu döndürür.
    Tekrar çağrıldığında önceki handler'ları değiştirir.
    """
    os.makedirs(logs_dir, exist_ok=True)

    timestamp = time.strftime("%Y%m%d_%H%M%S")
    log_file = os.path.join(logs_dir, f"calclog_{timestamp}.log")

    # Root logger
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root.removeHandler(handler)
        handler.close()

    # Dosya handler
    fh = logging.FileHandler(log_file, encoding="utf-8")
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(logging.Formatter(
        "[%(asctime)s] %(levelname)-8s %(name)-22s │ %(message)s",
        datefmt="%H:%M:%S"
    ))
    root.addHandler(fh)

    # Console handler (varsayılan: sadece WARNING+)
    ch = logging.StreamHandler()
    ch.setLevel(logging.DEBUG if verbose else logging.WARNING)
    ch.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root.addHandler(ch)

    _installed_handlers.extend([fh, ch])
    logger.info("%s logging başlatıldı — %s", APP_NAME, log_file)
    return log_file


def export_history(entries, report_file: str) -> str:
    """
    Geçmişi JSON rapor olarak kaydeder (en yeni önce).

    Returns:
        Rapor dosyası yolu

    Raises:
        OSError: Dosya yazılamazsa
    """
    report = {
        "app": APP_NAME,
        "version": VERSION,
        "exported_at": time.strftime("%Y-%m-%d %H:%M:%S"),
        "total_entries": len(entries),
        "entries": [e.to_record() for e in entries],
    }

    directory = os.path.dirname(os.path.abspath(report_file))
    os.makedirs(directory, exist_ok=True)
    with open(report_file, "w", encoding="utf-8") as f:
        json.dump(report, f, indent=2, ensure_ascii=False)

    logger.info("Geçmiş dışa aktarıldı: %s (%d kayıt)", report_file, len(entries))
    return report_file
