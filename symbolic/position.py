# symbolic/position.py
from dataclasses import dataclass, field
from typing import Callable, Optional

# Returned by peek() once the cursor has reached the end of its text.
END_OF_TEXT = ""

CharPredicate = Callable[[str], bool]


@dataclass(frozen=True)
class Position:
    """
    Immutable cursor into the input text.

    `index` is absolute; `row` and `column` are 1-based. When `end` is given
    the cursor treats it as the end of the text, which lets a single line be
    scanned on its own while diagnostics still refer to the whole input.
    """
    text: str = field(repr=False)
    index: int = 0
    row: int = 1
    column: int = 1
    end: Optional[int] = field(default=None, repr=False)

    @property
    def limit(self) -> int:
        return len(self.text) if self.end is None else self.end

    def peek(self) -> str:
        return self.text[self.index] if self.index < self.limit else END_OF_TEXT

    def at_end(self) -> bool:
        return self.index >= self.limit

    def advance(self) -> "Position":
        char = self.peek()
        if char == END_OF_TEXT:
            return self
        if char == "\n":
            return Position(self.text, self.index + 1, self.row + 1, 1, self.end)
        return Position(self.text, self.index + 1, self.row, self.column + 1, self.end)

    def satisfies(self, predicate: CharPredicate) -> bool:
        return predicate(self.peek())

    def skip_while(self, predicate: CharPredicate) -> "Position":
        position = self
        while position.satisfies(predicate):
            position = position.advance()
        return position

    def substring(self, length: int) -> str:
        return self.text[self.index:min(self.index + length, self.limit)]

    def __str__(self) -> str:
        return f"row: {self.row}; column: {self.column}"
