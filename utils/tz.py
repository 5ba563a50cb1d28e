# utils/tz.py
from __future__ import annotations
from datetime import date, datetime, time
from typing import Optional, Tuple, Union

Dateish = Union[str, date, None]
Timeish = Union[str, time, None]


def now_local() -> datetime:
    """Tarayıcı yerine sunucunun yerel saati (naive)."""
    return datetime.now()


def default_query_inputs(now: Optional[datetime] = None) -> Tuple[date, time]:
    """Form açılışında: bugünün tarihi + dakikaya yuvarlanmış şu anki saat."""
    now = now or now_local()
    return now.date(), now.time().replace(second=0, microsecond=0)


def _date_part(d: Dateish) -> str:
    if isinstance(d, datetime):
        return d.date().isoformat()
    if isinstance(d, date):
        return d.isoformat()
    return str(d or "").strip()


def _time_part(t: Timeish) -> str:
    if isinstance(t, time):
        return t.strftime("%H:%M")
    return str(t or "").strip()[:5]


def is_blank(value: Union[Dateish, Timeish]) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def compose_datetime_str(d: Dateish, t: Timeish) -> str:
    """'YYYY-MM-DD' + 'HH:MM' → 'YYYY-MM-DDTHH:MM:00' (saniye daima 00)."""
    return f"{_date_part(d)}T{_time_part(t)}:00"


def fmt_local(dt: datetime, with_time: bool = True) -> str:
    if not isinstance(dt, datetime):
        return str(dt)
    return dt.strftime("%d/%m/%Y %H:%M:%S") if with_time else dt.strftime("%d/%m/%Y")
