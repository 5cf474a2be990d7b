"""Episode 1, map 1 of the classic puzzle set."""

from __future__ import annotations

from shoko_rocket.io.ascii_map import parse_puzzle

E1M1_NAME = "Where to go?"
E1M1_AUTHOR = "Sega"

E1M1_ROWS = (
    "┌───────────────────────────────────────────────────────────┐",
    "│     R         R         R         R         R         R   │",
    "├────┼    ┼    ┼    ┼    ┼    ┼    ┼    ┼    ┼    ┼    ┼────┤",
    "│M>   M>   M>   M>   M>                                     │",
    "├────┼    ┼    ┼    ┼    ┼    ┼    ┼    ┼    ┼    ┼    ┼    │",
    "│                                                           │",
    "│    ┼    ┼    ┼    ┼    ┼    ┼    ┼    ┼    ┼    ┼    ┼────┤",
    "│M>   M>   M>   M>   M>                                     │",
    "├────┼    ┼    ┼    ┼    ┼    ┼    ┼    ┼    ┼    ┼    ┼    │",
    "│                                A^ M<   M<   M<   M<   M<  │",
    "│    ┼    ┼    ┼    ┼    ┼    ┼    ┼    ┼    ┼    ┼    ┼────┤",
    "│M>   M>   M>   M>   M>                                     │",
    "├────┼    ┼    ┼    ┼    ┼    ┼    ┼    ┼    ┼    ┼    ┼    │",
    "│                                   M<   M<   M<   M<   M<  │",
    "│    ┼    ┼    ┼    ┼    ┼    ┼    ┼    ┼    ┼    ┼    ┼────┤",
    "│M>   M>   M>   M>   M>                                     │",
    "├────┼    ┼    ┼    ┼    ┼    ┼    ┼    ┼    ┼    ┼    ┼    │",
    "│                                   M<   M<   M<   M<   M<  │",
    "└───────────────────────────────────────────────────────────┘",
)

E1M1: bytes = parse_puzzle(E1M1_NAME, E1M1_AUTHOR, E1M1_ROWS)
