# dataio/errors.py
from __future__ import annotations

from typing import Optional


class PredictionError(Exception):
    """Kullanıcıya tek satır mesajla gösterilen, ölümcül olmayan hata."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class InputError(PredictionError):
    """Tarih/saat eksik; ağa hiç gidilmez."""


class TransportError(PredictionError):
    """Bağlantı reddi, zaman aşımı vb."""


class ResponseError(PredictionError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ParseError(PredictionError):
    """Gövde JSON değil ya da zorunlu alan eksik/hatalı."""
