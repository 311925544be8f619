"""Profile photo: a 5 x 5 grid of coloured symbols."""

from __future__ import annotations

from burbir.colors import blue, green, red

SIZE = 5
_ROW_STRIDE = 20
_CELL_STRIDE = 4
_SYMBOL_OFFSET = 2
_MIN_TEXT_LENGTH = (SIZE - 1) * _ROW_STRIDE + (SIZE - 1) * _CELL_STRIDE + _SYMBOL_OFFSET + 1

_PAINTERS = {"R": red, "G": green, "B": blue}


class ProfilePhoto:
    """A square grid of (colour, symbol) cells, red '*' everywhere by default."""

    def __init__(self) -> None:
        self.cells: list[list[tuple[str, str]]] = [
            [("R", "*")] * SIZE for _ in range(SIZE)
        ]

    def change(self, text: str) -> None:
        """Replace the grid from rows such as "R * G @ B * G @ R *", one per line."""
        if len(text) < _MIN_TEXT_LENGTH:
            raise ValueError(
                f"photo text needs at least {_MIN_TEXT_LENGTH} characters, got {len(text)}"
            )
        self.cells = [
            [
                (
                    text[row * _ROW_STRIDE + col * _CELL_STRIDE],
                    text[row * _ROW_STRIDE + col * _CELL_STRIDE + _SYMBOL_OFFSET],
                )
                for col in range(SIZE)
            ]
            for row in range(SIZE)
        ]

    def render(self) -> str:
        """The grid in terminal colours; cells of an unknown colour are left out."""
        return "".join(
            "".join(_PAINTERS[color](symbol) for color, symbol in row if color in _PAINTERS)
            + "\n"
            for row in self.cells
        )