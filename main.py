# -*- coding: utf-8 -*-
"""
CalcLog — Main CLI v1.0
Hesaplama, geçmiş görüntüleme/yükleme/silme/temizleme, dışa aktarma ve
etkileşimli kabuk komutlarını orkestre eder.
"""

import argparse
import logging
import sys

from rich.markup import escape
from rich.panel import Panel

from app_logger import export_history, setup_logging
from calc_log import CalculationLog
from config import APP_NAME, DATA_DIR, LOGS_DIR, STORAGE_KEY, VERSION
from dashboard import ConsoleSurface, console, print_banner
from orchestrator import Orchestrator
from results import Ok
from store import JsonFileStore, MemoryStore

logger = logging.getLogger("calclog.main")

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_REJECTED = 2


def build_app(data_dir: str, memory: bool = False, echo_log_changes: bool = True) -> Orchestrator:
    """Depo → Log → Yüzey → Orchestrator zincirini kurar ve geçmişi yükler."""
    store = MemoryStore() if memory else JsonFileStore(data_dir)
    log = CalculationLog(store, key=STORAGE_KEY)
    surface = ConsoleSurface(console, echo_log_changes=echo_log_changes)
    app = Orchestrator(log, surface)
    app.start()
    return app


# ═══════════════════════════════════════════════════════════════════
#  KOMUTLAR
# ═══════════════════════════════════════════════════════════════════

def cmd_calc(args) -> int:
    app = build_app(args.data_dir)
    outcome = app.calculate(args.val1, args.val2, args.op)
    if outcome.succeeded:
        console.print(f"  [dim]#{outcome.entry.id} geçmişe eklendi[/]")
        return EXIT_OK
    return EXIT_REJECTED


def cmd_history(args) -> int:
    app = build_app(args.data_dir)
    app.surface.print_history()
    return EXIT_OK


def cmd_load(args) -> int:
    app = build_app(args.data_dir)
    result = app.load_entry(args.id)
    if result is None:
        console.print(f"[bright_red]❌ Kayıt bulunamadı: #{args.id}[/]")
        return EXIT_FAILURE
    return EXIT_OK if isinstance(result, Ok) else EXIT_REJECTED


def cmd_delete(args) -> int:
    app = build_app(args.data_dir)
    if not app.delete_entry(args.id):
        console.print(f"[dim]Kayıt yok: #{args.id} — değişiklik yapılmadı[/]")
    return EXIT_OK


def cmd_clear(args) -> int:
    app = build_app(args.data_dir, echo_log_changes=False)
    app.clear_log()
    console.print("🗑️  Geçmiş temizlendi.")
    return EXIT_OK


def cmd_export(args) -> int:
    app = build_app(args.data_dir)
    path = export_history(app.log.entries, args.path)
    console.print(f"  📄 Dışa aktarıldı: [dim]{path}[/] ({len(app.log)} kayıt)")
    return EXIT_OK


# ═══════════════════════════════════════════════════════════════════
#  ETKİLEŞİMLİ KABUK
# ═══════════════════════════════════════════════════════════════════

SHELL_HELP = (
    "[bold]Komutlar:[/]\n"
    "  <a> <op> <b>   hesapla (op: + - × x * ÷ / veya 1-4)\n"
    "  history        geçmişi göster\n"
    "  load <id>      kaydı girdilere yükle ve yeniden hesapla\n"
    "  delete <id>    kaydı sil\n"
    "  clear          tüm geçmişi sil\n"
    "  help           bu yardım\n"
    "  quit           çıkış"
)


def _parse_id(text: str):
    try:
        return int(text)
    except ValueError:
        console.print(f"[bright_red]❌ Geçersiz id: {text!r}[/]")
        return None


def run_shell_line(app: Orchestrator, line: str) -> bool:
    """Tek bir kabuk satırını işler. Çıkış istenirse False döner."""
    parts = line.split()
    if not parts:
        return True

    command = parts[0].lower()
    if command in {"quit", "exit"}:
        return False
    if command == "help":
        console.print(Panel(SHELL_HELP, border_style="bright_blue"))
    elif command == "history":
        app.surface.print_history()
    elif command in {"load", "delete"} and len(parts) == 2:
        entry_id = _parse_id(parts[1])
        if entry_id is None:
            return True
        if command == "load":
            if app.load_entry(entry_id) is None:
                console.print(f"[bright_red]❌ Kayıt bulunamadı: #{entry_id}[/]")
        elif not app.delete_entry(entry_id):
            console.print(f"[dim]Kayıt yok: #{entry_id}[/]")
    elif command == "clear":
        app.clear_log()
    elif len(parts) == 3:
        app.calculate(parts[0], parts[2], parts[1])
    else:
        console.print("[bright_red]❌ Anlaşılmadı.[/] [dim]'help' yazın.[/]")
    return True


def cmd_shell(args) -> int:
    print_banner()
    app = build_app(args.data_dir, memory=args.memory)
    console.print(f"  [dim]{len(app.log)} kayıt yüklendi. 'help' ile komutları görün.[/]")

    while True:
        try:
            line = input(">> ")
        except (EOFError, KeyboardInterrupt):
            console.print("\n👋 Güle güle!")
            break
        if not run_shell_line(app, line):
            console.print("👋 Güle güle!")
            break
    return EXIT_OK


# ═══════════════════════════════════════════════════════════════════
#  CLI
# ═══════════════════════════════════════════════════════════════════

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="calclog",
        description=f"🧮 {APP_NAME} v{VERSION} — iki operandlı hesap makinesi ve kalıcı geçmiş",
    )
    parser.add_argument("--data-dir", default=DATA_DIR,
                        help=f"Geçmiş dizini (varsayılan: {DATA_DIR})")
    parser.add_argument("--logs-dir", default=LOGS_DIR,
                        help=f"Log dizini (varsayılan: {LOGS_DIR})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Konsola ayrıntılı log")
    sub = parser.add_subparsers(dest="command", help="Komutlar")

    p_calc = sub.add_parser("calc", help="Hesapla ve geçmişe ekle")
    p_calc.add_argument("val1", type=str, help="Birinci değer")
    p_calc.add_argument("val2", type=str, help="İkinci değer")
    p_calc.add_argument("op", type=str, help="Operatör: 1-4, add/subtract/multiply/divide veya sembol")
    p_calc.set_defaults(func=cmd_calc)

    p_hist = sub.add_parser("history", help="Geçmişi göster (en yeni önce)")
    p_hist.set_defaults(func=cmd_history)

    p_load = sub.add_parser("load", help="Kaydı yükle ve yeniden hesapla")
    p_load.add_argument("id", type=int, help="Kayıt id")
    p_load.set_defaults(func=cmd_load)

    p_del = sub.add_parser("delete", help="Kaydı sil")
    p_del.add_argument("id", type=int, help="Kayıt id")
    p_del.set_defaults(func=cmd_delete)

    p_clear = sub.add_parser("clear", help="Tüm geçmişi sil")
    p_clear.set_defaults(func=cmd_clear)

    p_exp = sub.add_parser("export", help="Geçmişi JSON rapor olarak kaydet")
    p_exp.add_argument("path", type=str, help="Rapor dosyası")
    p_exp.set_defaults(func=cmd_export)

    p_sh = sub.add_parser("shell", help="Etkileşimli kabuk")
    p_sh.add_argument("--memory", action="store_true", help="Diske yazma; geçmiş sadece bellekte")
    p_sh.set_defaults(func=cmd_shell)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return EXIT_FAILURE

    setup_logging(args.logs_dir, verbose=args.verbose)
    logger.info("%s v%s — komut: %s", APP_NAME, VERSION, args.command)

    try:
        return args.func(args)
    except Exception as e:
        console.print(Panel(
            f"[bold bright_red]⛔ Kritik hata: {escape(str(e))}[/]",
            title="[bold]Hata[/]", border_style="bright_red",
        ))
        logger.exception("Kritik hata")
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
