"""Transient error notices that clear themselves after a delay.

A notice is identified by a token. Raising a new notice always issues a new
token, so a clear timer scheduled for an older notice finds no match when it
fires and leaves the current one in place.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Notice:
    message: str
    token: int


@dataclass(frozen=True)
class ScheduleNoticeClear:
    """Ask the runtime to deliver ``NoticeExpired(token)`` after ``delay`` seconds."""

    token: int
    delay: float


def raise_notice(message: str, delay: float, last_token: int) -> Tuple[Notice, ScheduleNoticeClear]:
    token = last_token + 1
    return Notice(message=message, token=token), ScheduleNoticeClear(token=token, delay=delay)


def clear_notice() -> Optional[Notice]:
    return None


def expire(current: Optional[Notice], token: int) -> Optional[Notice]:
    if current is not None and current.token == token:
        return None
    return current
