from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Palette:
    header_fg: str
    offset_fg: str
    hex_fg: str
    ascii_fg: str
    punct_fg: str
    match_fg: str
    match_bg: str
    match_offset_fg: str
    summary_fg: str
    summary_none_fg: str
    error_fg: str


DEFAULT = Palette(
    header_fg="#5ea1ff",
    offset_fg="#8892a0",
    hex_fg="#d8dee9",
    ascii_fg="#d8dee9",
    punct_fg="#6b7280",
    match_fg="#ff5555",
    match_bg="#3b1f24",
    match_offset_fg="#ffa657",
    summary_fg="#a3be8c",
    summary_none_fg="#6b7280",
    error_fg="#ff6b6b",
)

PALETTE = DEFAULT
