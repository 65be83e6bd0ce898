# symbolic/parser.py
"""
Recursive-descent parser for formula declarations.

Grammar (one declaration per line):

    DeclLine := Names '=' Formulas END_OF_TEXT
    Names    := IDENT [ ',' Names ]
    Formulas := Sum [ ',' Formulas ]
    Sum      := Mul [ ('+'|'-') Sum ]
    Mul      := Var [ ('*'|'/') Mul ]
    Var      := NUMBER | IDENT | '(' Sum ')' | ('+'|'-') Var

Each line is lexed as its own token stream. Parsing builds a FormulaGraph
with one formula vertex per line and links formulas that call names
declared by other formulas.
"""
from typing import Dict, List, Optional

from core.exceptions import FormulaSyntaxError, SemanticError
from core.formula_graph import FormulaGraph
from symbolic.position import Position
from symbolic.tokens import Token, TokenTag
from utils.logging_config import get_logger

logger = get_logger(__name__)


class Parser:
    def __init__(self, graph: Optional[FormulaGraph] = None):
        self.graph = graph if graph is not None else FormulaGraph()
        # Ordered sets of names (dict keys keep insertion order)
        self._defined_names: Dict[str, None] = {}
        self._called_names: Dict[str, None] = {}
        self._current_token: Optional[Token] = None
        self._current_declarations: List[int] = []
        self._current_calls: List[List[int]] = []

    def parse(self, text: str) -> FormulaGraph:
        """
        Parse every declaration line of `text` into the graph.

        :raises FormulaSyntaxError: On malformed input, duplicate or undefined names.
        :raises SemanticError: When a line's formula calls a name declared on the same line.
        """
        if not text.endswith("\n"):
            text += "\n"

        line_start, row = 0, 1
        while line_start < len(text):
            line_end = text.index("\n", line_start) + 1
            self._current_token = Token(Position(text, line_start, row, 1, line_end))
            self._parse_declaration_line()
            line_start, row = line_end, row + 1

        undefined = [name for name in self._called_names if name not in self._defined_names]
        if undefined:
            raise FormulaSyntaxError(
                self._current_token.start,
                "Some of the formulas remained undefined: " + ", ".join(undefined),
            )

        self.graph.link_formulas()
        return self.graph

    def _expect(self, tag: TokenTag) -> None:
        if not self._current_token.matches(tag):
            raise self._current_token.error(f"Expected {tag}. Got {self._current_token.tag}")
        self._current_token = self._current_token.next()

    def _parse_declaration_line(self) -> None:
        start = self._current_token.start
        self._current_declarations = []
        self._current_calls = []

        self._parse_formula_names()
        self._expect(TokenTag.EQUAL_SIGN)
        self._parse_formulas()

        if len(self._current_declarations) != len(self._current_calls):
            raise FormulaSyntaxError(self._current_token.start, "Bad declaration")

        for declared, calls in zip(self._current_declarations, self._current_calls):
            for called in calls:
                self.graph.add_related(declared, called)
                if called in self._current_declarations:
                    raise SemanticError(
                        "Cycle declaration",
                        self.graph.labels([declared, called]),
                    )

        finish = self._current_token.start
        label = start.substring(finish.index - start.index).replace("\n", "")
        self.graph.add_formula(label, self._current_declarations, self._current_calls)
        logger.debug("Row %d: %r declares %s", start.row, label,
                     self.graph.labels(self._current_declarations))

        self._expect(TokenTag.END_OF_TEXT)

    def _parse_formula_names(self) -> None:
        while True:
            if self._current_token.matches(TokenTag.IDENT):
                name = self._current_token.text
                if name in self._defined_names:
                    raise FormulaSyntaxError(self._current_token.start,
                                             "Variable was already defined")
                self._defined_names[name] = None
                self._current_declarations.append(self.graph.register(name))
            self._expect(TokenTag.IDENT)

            if not self._current_token.matches(TokenTag.COMMA):
                return
            self._expect(TokenTag.COMMA)

    def _parse_formulas(self) -> None:
        while True:
            self._current_calls.append([])
            self._parse_sum()

            if not self._current_token.matches(TokenTag.COMMA):
                return
            self._expect(TokenTag.COMMA)

    def _parse_sum(self) -> None:
        self._parse_mul()
        while self._current_token.matches(TokenTag.SUM_SIGN):
            self._expect(TokenTag.SUM_SIGN)
            self._parse_mul()

    def _parse_mul(self) -> None:
        self._parse_var()
        while self._current_token.matches(TokenTag.MUL_SIGN):
            self._expect(TokenTag.MUL_SIGN)
            self._parse_var()

    def _parse_var(self) -> None:
        token = self._current_token
        if token.matches(TokenTag.NUMBER):
            self._expect(TokenTag.NUMBER)
        elif token.matches(TokenTag.IDENT):
            handle = self.graph.register(token.text)
            calls = self._current_calls[-1]
            if handle not in calls:
                calls.append(handle)
            self._called_names[token.text] = None
            self._expect(TokenTag.IDENT)
        elif token.matches(TokenTag.LEFT_BRACKET):
            self._expect(TokenTag.LEFT_BRACKET)
            self._parse_sum()
            self._expect(TokenTag.RIGHT_BRACKET)
        elif token.matches(TokenTag.SUM_SIGN):
            self._expect(TokenTag.SUM_SIGN)
            self._parse_var()
        else:
            raise FormulaSyntaxError(token.start, "UNKNOWN TOKEN")


def parse_formulas(text: str) -> FormulaGraph:
    """
    Parse formula declarations and return the linked FormulaGraph.
    """
    return Parser().parse(text)
