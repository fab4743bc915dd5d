"""Non-blocking keyboard input from the terminal."""

from __future__ import annotations

import os
import select
import sys
from contextlib import contextmanager
from typing import IO, Any, Iterator

try:
    import termios
except ImportError:  # pragma: no cover - not available on Windows
    termios = None  # type: ignore[assignment]

try:
    import msvcrt
except ImportError:
    msvcrt = None  # type: ignore[assignment]

ESCAPE_WINDOWS = (0, 224)
ESCAPE_UNIX = 0x1B

if sys.platform == "win32":
    LINEFEED = 13
    BACKSPACE = 8
    FLECHA_ARRIBA = -72
    FLECHA_IZQUIERDA = -75
    FLECHA_DERECHA = -77
    FLECHA_ABAJO = -80
else:
    LINEFEED = 10
    BACKSPACE = 127
    FLECHA_ARRIBA = -ord("A")
    FLECHA_ABAJO = -ord("B")
    FLECHA_DERECHA = -ord("C")
    FLECHA_IZQUIERDA = -ord("D")


def _descriptor(flujo: IO[Any]) -> int | None:
    try:
        return flujo.fileno()
    except (AttributeError, OSError, ValueError):
        return None


def _hay_datos(fd: int) -> bool:
    try:
        listos, _, _ = select.select([fd], [], [], 0)
    except (OSError, ValueError):
        return True
    return bool(listos)


def _leer_byte(flujo: IO[Any], fd: int | None) -> int:
    """Next byte as an int, or -1 at end of input."""
    datos = os.read(fd, 1) if fd is not None else flujo.read(1)
    if not datos:
        return -1
    if isinstance(datos, (bytes, bytearray)):
        return datos[0]
    return ord(datos)


def _leer_consola_windows() -> int:
    if not msvcrt.kbhit():
        return 0
    caracter = msvcrt.getch()[0]
    if caracter in ESCAPE_WINDOWS:
        return -msvcrt.getch()[0]
    return caracter


def leer_caracter(flujo: IO[Any] | None = None) -> int:
    """Consume and return the next key, or 0 if none is waiting.

    Never blocks. Keys sent as escape sequences (arrows) come back negative.
    """
    if flujo is None:
        if msvcrt is not None:
            return _leer_consola_windows()
        flujo = sys.stdin

    fd = _descriptor(flujo)
    if fd is not None and not _hay_datos(fd):
        return 0

    caracter = _leer_byte(flujo, fd)
    if caracter < 0:
        return 0
    if caracter != ESCAPE_UNIX:
        return caracter

    _leer_byte(flujo, fd)  # skip '['
    codigo = _leer_byte(flujo, fd)
    return -codigo if codigo >= 0 else 0


@contextmanager
def terminal_sin_echo(flujo: IO[Any] | None = None) -> Iterator[IO[Any]]:
    """Turn off echo and line buffering of the terminal while inside the block."""
    if flujo is None:
        flujo = sys.stdin
    fd = _descriptor(flujo)

    original = None
    if termios is not None and fd is not None:
        try:
            original = termios.tcgetattr(fd)
        except termios.error:
            original = None

    if original is not None:
        nuevo = list(original)
        nuevo[3] = nuevo[3] & ~(termios.ICANON | termios.ECHO)
        termios.tcsetattr(fd, termios.TCSANOW, nuevo)

    try:
        yield flujo
    finally:
        if original is not None:
            termios.tcsetattr(fd, termios.TCSANOW, original)