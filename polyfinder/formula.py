"""Human readable rendering of polynomial coefficients.

Terms are written highest power first, e.g. `f(x) = 3.5x^2 - 2x + 1`.

- coefficients with magnitude below `ZERO_TOLERANCE` are left out
- magnitudes above `SCIENTIFIC_THRESHOLD` use scientific notation (2 decimals),
  others are rounded to 3 significant digits
- a magnitude of 1 is not written, except for the constant term
"""

import re
from dataclasses import dataclass
from typing import Literal

ZERO_TOLERANCE = 1e-9
SCIENTIFIC_THRESHOLD = 1000

PREFIX = "f(x) ="
VARIABLE = "x"


@dataclass(frozen=True)
class Token:
    kind: Literal["sign", "coefficient", "variable", "exponent"]
    text: str


def _compact_exponent(s: str) -> str:
    # "1.23e+03" -> "1.23e+3"
    return re.sub(r"e([+-])0*(\d)", r"e\1\2", s)


def format_coefficient(value: float) -> str:
    """Format the magnitude of a coefficient."""
    value = abs(value)
    if value > SCIENTIFIC_THRESHOLD:
        return _compact_exponent(f"{value:.2e}")

    rounded = float(f"{value:.2e}")
    if rounded.is_integer():
        return str(int(rounded))
    if 1e-6 <= rounded < 1e-4:
        # positional down to 1e-6, e.g. 0.0000123
        return f"{rounded:.10f}".rstrip("0")
    return _compact_exponent(repr(rounded))


def formula_terms(coefficients) -> list[Token]:
    """Tokens of the right hand side, highest power first.

    ## parameters
    - coefficients: [a0, a1, ..., an], index is the power of x

    ## returns
    - tokens (list[Token]): empty when every coefficient is (near) zero
    """
    tokens: list[Token] = []
    for power in range(len(coefficients) - 1, -1, -1):
        coeff = coefficients[power]
        if abs(coeff) < ZERO_TOLERANCE:
            continue

        if tokens:
            tokens.append(Token("sign", "+" if coeff > 0 else "-"))
        elif coeff < 0:
            tokens.append(Token("sign", "-"))

        magnitude = abs(coeff)
        if power == 0 or abs(magnitude - 1) > ZERO_TOLERANCE:
            tokens.append(Token("coefficient", format_coefficient(magnitude)))

        if power >= 1:
            tokens.append(Token("variable", VARIABLE))
        if power >= 2:
            tokens.append(Token("exponent", str(power)))

    return tokens


def format_formula(coefficients) -> str:
    """Plain text formula, `f(x) = 0` if there are no terms."""
    tokens = formula_terms(coefficients)
    if not tokens:
        return f"{PREFIX} 0"

    parts = []
    for i, token in enumerate(tokens):
        if token.kind == "sign" and i > 0:
            parts.append(f" {token.text} ")
        elif token.kind == "exponent":
            parts.append(f"^{token.text}")
        else:
            parts.append(token.text)

    return f"{PREFIX} " + "".join(parts)
