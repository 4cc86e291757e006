import enum
import re
from dataclasses import dataclass

from rpncalc.utils import PrintableEnum


@dataclass
class TokenizerError(Exception):
    errmsg: str
    code: str
    error_char_idx: int

    def __str__(self) -> str:
        print_start_idx = max(0, self.error_char_idx - 10)
        print_ellipsis_pre = print_start_idx > 0
        print_end_idx = min(len(self.code), self.error_char_idx + 10)
        print_ellipsis_post = print_end_idx < len(self.code)
        return "\n".join(
            [
                f"[Tokenizer error] {self.errmsg}",
                (
                    ("..." if print_ellipsis_pre else "")
                    + f"{self.code[print_start_idx:print_end_idx]}"
                    + ("..." if print_ellipsis_post else "")
                ),
                " " * (self.error_char_idx - print_start_idx + (3 if print_ellipsis_pre else 0)) + "^",
            ]
        )


@dataclass
class BadTokenError(TokenizerError):
    char: str


@dataclass
class ParensMismatchError(TokenizerError):
    pass


class Operator(PrintableEnum):
    ADD = enum.auto()
    SUB = enum.auto()
    MUL = enum.auto()
    DIV = enum.auto()


class Bracket(PrintableEnum):
    OPEN = enum.auto()
    CLOSE = enum.auto()


@dataclass(frozen=True)
class Number:
    value: int

    def __str__(self) -> str:
        return lexeme(self)


Token = Number | Operator | Bracket


DIGITS = "0123456789"

OPERATOR_CHARS = {
    "+": Operator.ADD,
    "-": Operator.SUB,
    "*": Operator.MUL,
    "/": Operator.DIV,
}

IGNORED_CHARS = " \n"


def tokenize(code: str) -> list[Token]:
    tokens: list[Token] = []
    open_bracket_idxs: list[int] = []
    for i, char in enumerate(code):
        if char in DIGITS:
            digit = DIGITS.index(char)
            last = tokens[-1] if tokens else None
            if isinstance(last, Number):
                tokens[-1] = Number(last.value * 10 + digit)
            else:
                tokens.append(Number(digit))
        elif char == "(":
            tokens.append(Bracket.OPEN)
            open_bracket_idxs.append(i)
        elif char == ")":
            tokens.append(Bracket.CLOSE)
            if not open_bracket_idxs:
                raise ParensMismatchError("Closing bracket without matching opening one", code=code, error_char_idx=i)
            open_bracket_idxs.pop()
        elif char in OPERATOR_CHARS:
            tokens.append(OPERATOR_CHARS[char])
        elif char in IGNORED_CHARS:
            pass
        else:
            raise BadTokenError(f"Unexpected character: {char!r}", code=code, error_char_idx=i, char=char)

    if open_bracket_idxs:
        raise ParensMismatchError("Unclosed bracket", code=code, error_char_idx=open_bracket_idxs[-1])

    return tokens


LEXEMES: dict[Operator | Bracket, str] = {
    **{op: char for char, op in OPERATOR_CHARS.items()},
    Bracket.OPEN: "(",
    Bracket.CLOSE: ")",
}


def lexeme(token: Token) -> str:
    if isinstance(token, Number):
        try:
            return str(token.value)
        except ValueError:
            # over the interpreter's int to str conversion digit limit
            return f"<{token.value.bit_length()}-bit number>"
    return LEXEMES[token]


def untokenize(tokens: list[Token]) -> str:
    result = " ".join(lexeme(t) for t in tokens)

    # ( 1 + 2 ) => (1 + 2)
    result = re.sub(r"\(\s+", "(", result)
    result = re.sub(r"\s+\)", ")", result)
    return result
