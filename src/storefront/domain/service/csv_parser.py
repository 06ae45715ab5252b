"""Minimal CSV reader for published spreadsheet exports.

Spreadsheet "publish to web" exports are simple: one record per line,
double quotes around any cell that contains a comma. This reader handles
exactly that. A quote always toggles the quoted state; doubled quotes
are not treated as an escaped quote character.
"""

from __future__ import annotations


def parse_csv(text: str) -> list[list[str]]:
    """Split *text* into rows of trimmed fields, dropping blank lines."""
    return [parse_csv_line(line) for line in text.split("\n") if line.strip()]


def parse_csv_line(line: str) -> list[str]:
    values: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            values.append("".join(current).strip())
            current = []
        else:
            current.append(char)

    values.append("".join(current).strip())
    return values
