"""
Tokenizer and grammar for rendered color notations.

A color renderer hands back strings such as ``oklch(50.54% 0.1903 27.52)``,
``oklch(0.5 0.1 120 / 0.5)``, ``rgb(185 28 28)`` or ``rgba(185, 28, 28, 0.5)``.
This module reads them with a small grammar instead of pattern scraping:

    notation  := IDENT "(" component sep component sep component [alpha] ")"
    sep       := "," | <whitespace>
    alpha     := ("/" | ",") component
    component := NUMBER ["%" | "deg"] | "none"

Anything else raises ParseFailure with the offending position.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from .errors import make_parse_failure


class TokenType(Enum):
    """Token types in a color notation."""

    IDENTIFIER = "IDENTIFIER"
    NUMBER = "NUMBER"
    LPAREN = "("
    RPAREN = ")"
    COMMA = ","
    SLASH = "/"
    EOF = "EOF"


@dataclass
class Token:
    """
    A single token in a notation.

    Attributes:
        type: Type of token
        value: Raw text of the token (without unit)
        position: 0-based offset in the source text
        unit: Unit suffix for numbers ("%", "deg" or "")
    """

    type: TokenType
    value: str
    position: int
    unit: str = ""

    def __repr__(self) -> str:
        return f"Token({self.type.value}, {self.value!r}{self.unit}, @{self.position})"


_PUNCTUATION = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ",": TokenType.COMMA,
    "/": TokenType.SLASH,
}

_UNITS = ("%", "deg")


class Lexer:
    """Converts a notation string into tokens."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def current_char(self) -> str | None:
        """Get current character or None if at end."""
        if self.pos >= len(self.text):
            return None
        return self.text[self.pos]

    def peek_char(self, offset: int = 1) -> str | None:
        """Peek ahead at character."""
        pos = self.pos + offset
        if pos >= len(self.text):
            return None
        return self.text[pos]

    def advance(self) -> None:
        if self.pos < len(self.text):
            self.pos += 1

    def skip_whitespace(self) -> None:
        while self.current_char() in (" ", "\t", "\r", "\n"):
            self.advance()

    def _starts_number(self) -> bool:
        current = self.current_char()
        if current is None:
            return False
        if current.isdigit():
            return True
        nxt = self.peek_char()
        if current == "." and nxt is not None and nxt.isdigit():
            return True
        if current in "+-" and nxt is not None:
            if nxt.isdigit():
                return True
            after = self.peek_char(2)
            return nxt == "." and after is not None and after.isdigit()
        return False

    def read_number(self) -> tuple[str, str]:
        """
        Read a signed decimal number with optional exponent and unit.

        Returns:
            Tuple of (number text, unit)
        """
        chars = []
        if self.current_char() in ("+", "-"):
            chars.append(self.current_char())
            self.advance()

        current = self.current_char()
        while current and (current.isdigit() or current == "."):
            chars.append(current)
            self.advance()
            current = self.current_char()

        # Exponent (1e-05) only when digits follow
        if current in ("e", "E"):
            nxt = self.peek_char()
            after = self.peek_char(2)
            if (nxt is not None and nxt.isdigit()) or (
                nxt in ("+", "-") and after is not None and after.isdigit()
            ):
                chars.append(current)
                self.advance()
                if self.current_char() in ("+", "-"):
                    chars.append(self.current_char())
                    self.advance()
                current = self.current_char()
                while current and current.isdigit():
                    chars.append(current)
                    self.advance()
                    current = self.current_char()

        unit = ""
        for candidate in _UNITS:
            if self.text.startswith(candidate, self.pos):
                unit = candidate
                self.pos += len(candidate)
                break

        return "".join(chars), unit

    def read_identifier(self) -> str:
        chars = []
        current = self.current_char()
        while current and (current.isalnum() or current in "-_"):
            chars.append(current)
            self.advance()
            current = self.current_char()
        return "".join(chars)

    def tokenize(self) -> list[Token]:
        """Tokenize the whole notation, ending with an EOF token."""
        tokens: list[Token] = []
        while True:
            self.skip_whitespace()
            current = self.current_char()
            if current is None:
                tokens.append(Token(TokenType.EOF, "", self.pos))
                return tokens

            start = self.pos
            if self._starts_number():
                value, unit = self.read_number()
                tokens.append(Token(TokenType.NUMBER, value, start, unit))
            elif current.isalpha():
                tokens.append(Token(TokenType.IDENTIFIER, self.read_identifier().lower(), start))
            elif current in _PUNCTUATION:
                tokens.append(Token(_PUNCTUATION[current], current, start))
                self.advance()
            else:
                raise make_parse_failure(f"Unexpected character {current!r}", self.text, start)


# =============================================================================
# Grammar
# =============================================================================


@dataclass(frozen=True)
class Component:
    """One numeric argument of a notation; ``none`` reads as 0."""

    value: float
    unit: str = ""
    is_none: bool = False


@dataclass(frozen=True)
class Notation:
    """A parsed ``name(c1 c2 c3 [/ alpha])`` notation."""

    function: str
    components: tuple[Component, Component, Component]
    alpha: Component | None = None


class NotationParser:
    """Recursive-descent parser over the token stream."""

    def __init__(self, text: str):
        self.text = text
        self.tokens = Lexer(text).tokenize()
        self.index = 0

    def current(self) -> Token:
        return self.tokens[self.index]

    def advance(self) -> Token:
        token = self.tokens[self.index]
        if token.type is not TokenType.EOF:
            self.index += 1
        return token

    def expect(self, token_type: TokenType) -> Token:
        token = self.current()
        if token.type is not token_type:
            raise make_parse_failure(
                f"Expected {token_type.value!r}, found {token.value or 'end of input'!r}",
                self.text,
                token.position,
            )
        return self.advance()

    def parse_component(self) -> Component:
        token = self.current()
        if token.type is TokenType.NUMBER:
            self.advance()
            try:
                value = float(token.value)
            except ValueError:
                raise make_parse_failure(
                    f"Malformed number {token.value!r}", self.text, token.position
                ) from None
            return Component(value=value, unit=token.unit)
        if token.type is TokenType.IDENTIFIER and token.value == "none":
            self.advance()
            return Component(value=0.0, is_none=True)
        raise make_parse_failure(
            f"Expected a number, found {token.value or 'end of input'!r}",
            self.text,
            token.position,
        )

    def parse(self) -> Notation:
        function = self.expect(TokenType.IDENTIFIER).value
        self.expect(TokenType.LPAREN)

        components = [self.parse_component()]
        for _ in range(2):
            if self.current().type is TokenType.COMMA:
                self.advance()
            components.append(self.parse_component())

        alpha = None
        if self.current().type in (TokenType.SLASH, TokenType.COMMA):
            self.advance()
            alpha = self.parse_component()

        self.expect(TokenType.RPAREN)
        self.expect(TokenType.EOF)
        return Notation(
            function=function,
            components=(components[0], components[1], components[2]),
            alpha=alpha,
        )


def parse_notation(text: str) -> Notation:
    """Parse a rendered notation into its function name and components.

    Raises:
        ParseFailure: If the text does not follow the notation grammar.
    """
    return NotationParser(text.strip()).parse()


# =============================================================================
# Typed readers
# =============================================================================


@dataclass(frozen=True)
class OKLCHComponents:
    """Components of an oklch() notation; ``l`` is a 0-1 ratio."""

    l: float  # noqa: E741
    c: float
    h: float
    alpha: float = 1.0


@dataclass(frozen=True)
class RGBComponents:
    """Byte channels of an rgb()/rgba() notation."""

    r: int
    g: int
    b: int
    alpha: float = 1.0


def _alpha_value(alpha: Component | None) -> float:
    if alpha is None:
        return 1.0
    if alpha.unit == "%":
        return alpha.value / 100
    return alpha.value


def _round_half_up(value: float) -> int:
    # Math.round semantics: .5 always goes up
    return math.floor(value + 0.5)


def _byte(component: Component) -> int:
    value = component.value * 255 / 100 if component.unit == "%" else component.value
    return max(0, min(255, _round_half_up(value)))


def read_oklch(text: str) -> OKLCHComponents:
    """Read an oklch() notation.

    Lightness may be a percentage or a bare ratio; a bare value above 1
    (up to 100) is taken as a percentage. Chroma percentages are relative
    to 0.4, the CSS reference range.

    Raises:
        ParseFailure: If the text is not an oklch() notation.
    """
    notation = parse_notation(text)
    if notation.function != "oklch":
        raise make_parse_failure(
            f"Expected an oklch() notation, found {notation.function}()", text, 0
        )

    lightness, chroma, hue = notation.components
    if lightness.unit == "%" or 1 < lightness.value <= 100:
        l_ratio = lightness.value / 100
    else:
        l_ratio = lightness.value
    c_value = chroma.value * 0.4 / 100 if chroma.unit == "%" else chroma.value

    return OKLCHComponents(
        l=l_ratio,
        c=c_value,
        h=hue.value,
        alpha=_alpha_value(notation.alpha),
    )


def read_rgb(text: str) -> RGBComponents:
    """Read an rgb()/rgba() notation into byte channels.

    Raises:
        ParseFailure: If the text is not an rgb() or rgba() notation.
    """
    notation = parse_notation(text)
    if notation.function not in ("rgb", "rgba"):
        raise make_parse_failure(
            f"Expected an rgb() notation, found {notation.function}()", text, 0
        )

    red, green, blue = notation.components
    return RGBComponents(
        r=_byte(red),
        g=_byte(green),
        b=_byte(blue),
        alpha=_alpha_value(notation.alpha),
    )
