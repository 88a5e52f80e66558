"""Free-text quantity parsing ("1 1/2 cups", "0.75 cup", "a pinch")."""

import re
from dataclasses import dataclass

# Unicode vulgar fractions rewritten to ASCII before matching
VULGAR_FRACTIONS = {
    "½": "1/2",
    "⅓": "1/3",
    "⅔": "2/3",
    "¼": "1/4",
    "¾": "3/4",
    "⅕": "1/5",
    "⅖": "2/5",
    "⅗": "3/5",
    "⅘": "4/5",
    "⅙": "1/6",
    "⅚": "5/6",
    "⅛": "1/8",
    "⅜": "3/8",
    "⅝": "5/8",
    "⅞": "7/8",
}

# "1/2", "1 1/2". The whole part must be separated by whitespace so "11/2" is 11/2.
FRACTION_PATTERN = re.compile(r"(?:(\d+)\s+)?(\d+)/(\d+)")

# First numeric literal. For ranges ("2-3 cups") only the lower bound is taken;
# the rest of the string ("-3 cups") stays in the unit text.
DECIMAL_PATTERN = re.compile(r"\d+(?:\.\d*)?|\.\d+")


@dataclass(frozen=True)
class FractionMatch:
    """A quantity written as a (mixed) fraction."""

    whole: int
    numerator: int
    denominator: int
    unit: str

    @property
    def amount(self) -> float:
        return self.whole + self.numerator / self.denominator


@dataclass(frozen=True)
class DecimalMatch:
    """A quantity written as an integer or decimal."""

    amount: float
    unit: str


@dataclass(frozen=True)
class Unparseable:
    """No usable number in the text; it must be passed through untouched."""

    raw: str | None


QuantityMatch = FractionMatch | DecimalMatch | Unparseable


@dataclass(frozen=True)
class Quantity:
    """A quantity string with its parsed amount and unit."""

    original: str | None
    amount: float | None
    unit: str

    @property
    def parsed(self) -> bool:
        return self.amount is not None

    @classmethod
    def from_text(cls, raw: str | None) -> "Quantity":
        parsed = parse_quantity(raw)
        if parsed is None:
            return cls(original=raw, amount=None, unit="")
        amount, unit = parsed
        return cls(original=raw, amount=amount, unit=unit)


def normalize_vulgar_fractions(text: str) -> str:
    """
    Rewrite unicode fractions as ASCII fractions.

    Examples:
        "½ cup" -> "1/2 cup"
        "1¼ cups" -> "1 1/4 cups"
    """
    for char, ascii_fraction in VULGAR_FRACTIONS.items():
        text = text.replace(char, f" {ascii_fraction}")
    return text.strip()


def _remaining_text(text: str, start: int, end: int) -> str:
    """Text around a matched number, with whitespace collapsed."""
    return " ".join(f"{text[:start]} {text[end:]}".split())


def _match_fraction(text: str) -> QuantityMatch | None:
    match = FRACTION_PATTERN.search(text)
    if not match:
        return None

    denominator = int(match.group(3))
    if denominator == 0:
        return Unparseable(text)

    return FractionMatch(
        whole=int(match.group(1) or 0),
        numerator=int(match.group(2)),
        denominator=denominator,
        unit=_remaining_text(text, match.start(), match.end()),
    )


def _match_decimal(text: str) -> QuantityMatch | None:
    match = DECIMAL_PATTERN.search(text)
    if not match:
        return None

    return DecimalMatch(
        amount=float(match.group(0)),
        unit=_remaining_text(text, match.start(), match.end()),
    )


# Tried in order, first match wins
_MATCHERS = (_match_fraction, _match_decimal)


def match_quantity(raw: str | None) -> QuantityMatch:
    """
    Classify a quantity string as a fraction, a decimal, or unparseable.

    Never raises.
    """
    if not raw or not raw.strip():
        return Unparseable(raw)

    text = normalize_vulgar_fractions(raw)
    for matcher in _MATCHERS:
        result = matcher(text)
        if result is not None:
            return result

    return Unparseable(raw)


def parse_quantity(raw: str | None) -> tuple[float, str] | None:
    """
    Parse a free-text quantity into an amount and unit.

    Examples:
        "1 1/2 cups" -> (1.5, "cups")
        "0.75 cup" -> (0.75, "cup")
        "2-3 cups" -> (2.0, "-3 cups")
        "a pinch" -> None

    Returns:
        Tuple of (amount, unit) or None if no number was found
    """
    result = match_quantity(raw)
    if isinstance(result, Unparseable):
        return None
    return result.amount, result.unit
