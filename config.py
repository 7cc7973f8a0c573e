# -*- coding: utf-8 -*-
"""
CalcLog — Configuration v1.0
Tüm yollar, anahtarlar ve görüntüleme sabitleri.
"""

import os

# ─── META ────────────────────────────────────────────────────────
VERSION  = "1.0"
APP_NAME = "CalcLog"

# ─── BASE ────────────────────────────────────────────────────────
BASE_DIR = os.path.abspath(os.path.dirname(os.path.abspath(__file__)))

# ─── KALICI DEPO ─────────────────────────────────────────────────
DATA_DIR = os.path.abspath(
    os.environ.get("CALCLOG_DATA_DIR") or os.path.join(BASE_DIR, "data")
)
STORAGE_KEY = "calcLog"   # tüm geçmiş tek anahtar altında tutulur

# ─── LOGLAMA ─────────────────────────────────────────────────────
LOGS_DIR = os.path.abspath(
    os.environ.get("CALCLOG_LOGS_DIR") or os.path.join(BASE_DIR, "logs")
)

# ─── GÖRÜNTÜLEME ─────────────────────────────────────────────────
RESULT_PRECISION = 12     # sadece ekranda; kayıtlı değer yuvarlanmaz
TIME_FORMAT      = "%Y-%m-%d %H:%M:%S"

# ─── WINDOWS PATH SABİTİ ────────────────────────────────────────
MAX_PATH_LENGTH = 260
