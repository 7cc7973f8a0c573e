# -*- coding: utf-8 -*-
"""
CalcLog Dashboard v1.0
Sunum yüzeyi: sonuç, uyarı ve geçmiş tablosu (rich).
"""

from __future__ import annotations

from typing import List, Optional, Protocol

from rich import box
from rich.align import Align
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from calc_log import LogEntry
from config import APP_NAME, RESULT_PRECISION, VERSION
from errors import CalcAppError, CalculationError, ErrorKind, Field, PersistenceError

console = Console()


class PresentationSurface(Protocol):
    """Orchestrator'ın yazdığı sunum yüzeyi."""

    def render(self, result) -> None:
        ...

    def render_log_entry(self, entry: LogEntry) -> None:
        ...

    def remove_log_entry_from_view(self, entry_id: int) -> None:
        ...

    def clear_log_view(self) -> None:
        ...

    def mark_invalid_field(self, field: Field) -> None:
        ...

    def show_inputs(self, a: float, b: float) -> None:
        ...

    def render_warning(self, error: PersistenceError) -> None:
        ...


def format_number(value: float) -> str:
    if value != value:
        return "NaN"
    if value in (float("inf"), float("-inf")):
        return "∞" if value > 0 else "-∞"
    return f"{value:.{RESULT_PRECISION}g}"


def _error_text(error: CalcAppError) -> Text:
    if isinstance(error, CalculationError) and error.kind is ErrorKind.DIVISION_BY_ZERO:
        return Text(f"❌ Error: {error.message}", style="bold bright_red")
    return Text(f"❌ Error: {error.message}", style="bright_red")


# ═══════════════════════════════════════════════════════════════════
#  GEÇMİŞ TABLOSU
# ═══════════════════════════════════════════════════════════════════

def build_log_table(entries: List[LogEntry]) -> Table:
    table = Table(
        title=f"📋 HESAPLAMA GEÇMİŞİ  •  {len(entries)} kayıt",
        box=box.ROUNDED, show_lines=False,
        title_style="bold bright_cyan",
        border_style="bright_blue",
        header_style="bold bright_white on dark_blue",
        padding=(0, 1),
    )
    table.add_column("#", justify="right", style="dim")
    table.add_column("🕒 ZAMAN", justify="center")
    table.add_column("🧮 İŞLEM", justify="right", style="bold")
    table.add_column("= SONUÇ", justify="left", style="bright_green")

    for entry in entries:
        table.add_row(
            str(entry.id),
            Text(entry.time, style="dim"),
            f"{format_number(entry.a)} {entry.symbol} {format_number(entry.b)}",
            format_number(entry.result),
        )
    return table


class ConsoleSurface(PresentationSurface):
    """
    Terminal sunum yüzeyi. Geçmişin yetkili kopyasını tutmaz; yalnızca
    Orchestrator olaylarıyla güncellenen en yeni önce bir görünüm tutar.
    """

    def __init__(self, out: Optional[Console] = None, echo_log_changes: bool = True):
        self.console = out or console
        self.echo_log_changes = echo_log_changes
        self.view: List[LogEntry] = []
        self.invalid_field: Optional[Field] = None
        self.inputs = ("", "")

    def render(self, result) -> None:
        if isinstance(result, CalcAppError):
            self.console.print(_error_text(result))
            return
        self.invalid_field = None
        self.console.print(Text(f"✅ Result: {format_number(result)}", style="bold bright_green"))

    def render_log_entry(self, entry: LogEntry) -> None:
        self.view.insert(0, entry)

    def remove_log_entry_from_view(self, entry_id: int) -> None:
        self.view = [e for e in self.view if e.id != entry_id]
        if self.echo_log_changes:
            self.console.print(f"🗑️  Kayıt #{entry_id} silindi.")

    def clear_log_view(self) -> None:
        had_entries = bool(self.view)
        self.view = []
        if self.echo_log_changes and had_entries:
            self.console.print("🗑️  Geçmiş temizlendi.")

    def mark_invalid_field(self, field: Field) -> None:
        self.invalid_field = field
        self.console.print(Text(f"⚠️  {field.label} ({field.value})", style="yellow"))

    def show_inputs(self, a: float, b: float) -> None:
        self.inputs = (format_number(a), format_number(b))
        self.console.print(f"↩️  val1 = {self.inputs[0]}, val2 = {self.inputs[1]}")

    def render_warning(self, error: PersistenceError) -> None:
        body = f"[bold bright_yellow]⚠️ {escape(error.message)}[/]"
        if error.diagnosis:
            body += f"\n[dim]{escape(error.diagnosis)}[/]"
        self.console.print(Panel(body, title="[bold]💾 Kalıcılık Uyarısı[/]", border_style="bright_yellow"))

    def print_history(self) -> None:
        if not self.view:
            self.console.print("[dim]📋 Geçmiş boş.[/]")
            return
        self.console.print(build_log_table(self.view))


# ═══════════════════════════════════════════════════════════════════
#  BANNER
# ═══════════════════════════════════════════════════════════════════

def print_banner(out: Optional[Console] = None):
    out = out or console
    out.print(Panel(
        Align.center(Text(f"🧮 {APP_NAME}  v{VERSION}", style="bold bright_cyan")),
        subtitle="[dim]iki operandlı hesap makinesi + kalıcı geçmiş[/]",
        border_style="bright_magenta", box=box.DOUBLE,
    ))
