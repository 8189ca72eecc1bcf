from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AsciiScanError(Exception):
    code: str
    message: str
    hint: str

    def __str__(self) -> str:
        return self.message


class ConfigError(AsciiScanError):
    """Invalid tab width or scan configuration."""


class DecodeError(AsciiScanError):
    """Diagram bytes could not be decoded as text."""
