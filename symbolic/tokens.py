# symbolic/tokens.py
"""
Lexer for formula declarations. A Token classifies the span
[start, follow) of the text; `next()` lexes the following token on demand.
"""
from enum import Enum
from typing import Iterator

from core.exceptions import FormulaSyntaxError
from symbolic.position import END_OF_TEXT, Position


class TokenTag(Enum):
    COMMA = ","
    END_OF_TEXT = "END OF TEXT"
    EQUAL_SIGN = "="
    IDENT = "IDENT"
    LEFT_BRACKET = "("
    MUL_SIGN = "* or /"
    NUMBER = "NUMBER"
    RIGHT_BRACKET = ")"
    SEMICOLON = ";"
    SUM_SIGN = "+ or -"

    def __str__(self) -> str:
        return self.value


_SINGLE_CHAR_TAGS = {
    ";": TokenTag.SEMICOLON,
    "(": TokenTag.LEFT_BRACKET,
    ")": TokenTag.RIGHT_BRACKET,
    "=": TokenTag.EQUAL_SIGN,
    "+": TokenTag.SUM_SIGN,
    "-": TokenTag.SUM_SIGN,
    "*": TokenTag.MUL_SIGN,
    "/": TokenTag.MUL_SIGN,
    ",": TokenTag.COMMA,
}


def is_whitespace(char: str) -> bool:
    return char.isspace()


def is_letter(char: str) -> bool:
    return char.isalpha()


def is_digit(char: str) -> bool:
    return char.isdecimal()


def is_letter_or_digit(char: str) -> bool:
    return char.isalpha() or char.isdecimal()


class Token:
    def __init__(self, position: Position):
        self.start = position.skip_while(is_whitespace)
        self.follow = self.start.advance()

        char = self.start.peek()
        if char == END_OF_TEXT:
            self.tag = TokenTag.END_OF_TEXT
        elif char in _SINGLE_CHAR_TAGS:
            self.tag = _SINGLE_CHAR_TAGS[char]
        elif is_letter(char):
            self.follow = self.follow.skip_while(is_letter_or_digit)
            self.tag = TokenTag.IDENT
        elif is_digit(char):
            self.follow = self.follow.skip_while(is_digit)
            if self.follow.satisfies(is_letter):
                raise self.error("letters after series of digits")
            self.tag = TokenTag.NUMBER
        else:
            raise self.error("unknown character")

    @classmethod
    def first(cls, text: str) -> "Token":
        return cls(Position(text))

    @property
    def text(self) -> str:
        return self.start.substring(self.follow.index - self.start.index)

    def matches(self, *tags: TokenTag) -> bool:
        return self.tag in tags

    def next(self) -> "Token":
        return Token(self.follow)

    def error(self, message: str) -> FormulaSyntaxError:
        return FormulaSyntaxError(self.follow, message)

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"<Token {self.tag.name} {self.text!r} at {self.start}>"


def iter_tokens(position: Position) -> Iterator[Token]:
    """
    Yield the tokens starting at `position`, ending with END_OF_TEXT.
    """
    token = Token(position)
    while not token.matches(TokenTag.END_OF_TEXT):
        yield token
        token = token.next()
    yield token
