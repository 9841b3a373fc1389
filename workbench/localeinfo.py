"""Shows locale settings, a translated greeting and the current time."""

from __future__ import annotations

import datetime
import gettext
import locale
import sys
import time
from typing import Optional, Union

LOCALEDIR = "locale/"
DOMAIN = "nbd"
GREETING = "hello world!"


def translated_greeting(localedir=LOCALEDIR, domain: str = DOMAIN) -> str:
    """The greeting translated through ``domain`` in ``localedir``, if available."""
    translation = gettext.translation(domain, localedir, fallback=True)
    return translation.gettext(GREETING)


def format_time(
    moment: Union[time.struct_time, datetime.datetime], timezone: int
) -> str:
    """Date and time as ``Y-M-D h:m:s`` without padding, then ``timezone``."""
    if isinstance(moment, datetime.datetime):
        moment = moment.timetuple()
    return (
        f"{moment.tm_year}-{moment.tm_mon}-{moment.tm_mday} "
        f"{moment.tm_hour}:{moment.tm_min}:{moment.tm_sec} {timezone}"
    )


def _current_locale() -> Optional[str]:
    return locale.setlocale(locale.LC_ALL, None)


def _signed_hex(byte: int) -> str:
    return f"{byte | 0xFFFFFF00 if byte > 127 else byte:x}"


def main(argv=None) -> int:
    out = sys.stdout
    out.write(f"current locale: {_current_locale()}\n")
    try:
        chosen: Optional[str] = locale.setlocale(locale.LC_ALL, "")
    except locale.Error:
        chosen = None
    greeting = translated_greeting(LOCALEDIR, DOMAIN)
    out.write(f"[{greeting}]\n")
    raw = greeting.encode("utf-8") + b"\x00\x00"
    out.write(f"{_signed_hex(raw[0])},{_signed_hex(raw[1])}\n")
    if chosen is not None:
        out.write(f"locale setting successful: {chosen}\n")
    else:
        out.write("locale setting failure!\n")
    out.write(f"current locale: {_current_locale()}\n")
    if hasattr(time, "tzset"):
        time.tzset()
    now = time.time()
    out.write(format_time(time.gmtime(now), time.timezone) + "\n")
    out.write(format_time(time.localtime(now), time.timezone) + "\n")
    return 0