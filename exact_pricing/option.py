"""
Option parameters: the contract and market inputs for one European option.

The cost of carry b is what lets a single formula family cover every
underlying class:

    STOCK           b = r
    DIVIDEND_STOCK  b = r - q
    FUTURES         b = 0       (Black 1976)
    CURRENCY        b = r - Rf  (Garman-Kohlhagen)

b is derived on every read, never stored, so mutating r, q, Rf or the
underlying class can't leave it stale.

References:
    Haug, E.G. (2007). The Complete Guide to Option Pricing Formulas. 2nd ed.
    Hull, J.C. (2018). Options, Futures, and Other Derivatives. 10th ed.
"""

import math
from dataclasses import dataclass, asdict, replace as _replace
from enum import Enum

from .exceptions import ConfigurationError, DomainError


# ════════════════════════════════════════════════════════════════════════
#  ENUMERATIONS
# ════════════════════════════════════════════════════════════════════════

class OptionKind(str, Enum):
    CALL = "call"
    PUT = "put"


class UnderlyingClass(str, Enum):
    STOCK = "stock"
    DIVIDEND_STOCK = "dividend_stock"
    FUTURES = "futures"
    CURRENCY = "currency"


class MeshParameter(str, Enum):
    """Which input a mesh sweep overrides."""
    UNDERLYING = "underlying"
    STRIKE = "strike"
    TIME = "time"
    RATE = "rate"
    VOLATILITY = "volatility"
    CARRY = "carry"


# shorthands accepted on top of the enum values
_ALIASES = {
    OptionKind: {"c": "call", "p": "put"},
    UnderlyingClass: {"dividend": "dividend_stock", "future": "futures", "fx": "currency"},
    MeshParameter: {"spot": "underlying", "sigma": "volatility", "b": "carry"},
}


def coerce_enum(enum_cls, value):
    """
    Return value as a member of enum_cls.

    Accepts a member, its value or its name (case-insensitive), plus the
    shorthands in _ALIASES. Raises ConfigurationError for anything else.
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        key = value.strip().lower()
        key = _ALIASES.get(enum_cls, {}).get(key, key)
        for member in enum_cls:
            if key in (member.value, member.name.lower()):
                return member
    choices = ", ".join(m.value for m in enum_cls)
    raise ConfigurationError(
        f"Unknown {enum_cls.__name__}: {value!r}. Use one of: {choices}."
    )


# ════════════════════════════════════════════════════════════════════════
#  VALIDATION
# ════════════════════════════════════════════════════════════════════════

def check_finite(name: str, value: float) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise DomainError(f"{name} must be a real number, got {value!r}")
    if not math.isfinite(value):
        raise DomainError(f"{name} must be finite, got {value}")
    return value


def check_positive(name: str, value: float) -> float:
    value = check_finite(name, value)
    if value <= 0:
        raise DomainError(f"{name} must be positive, got {value}")
    return value


def check_non_negative(name: str, value: float) -> float:
    value = check_finite(name, value)
    if value < 0:
        raise DomainError(f"{name} must be non-negative, got {value}")
    return value


def carry_for(underlying_class, r: float, q: float = 0.0, rf: float = 0.0) -> float:
    """Cost of carry b for an underlying class."""
    underlying_class = coerce_enum(UnderlyingClass, underlying_class)
    if underlying_class is UnderlyingClass.STOCK:
        return r
    if underlying_class is UnderlyingClass.DIVIDEND_STOCK:
        return r - q
    if underlying_class is UnderlyingClass.FUTURES:
        return 0.0
    return r - rf


# ════════════════════════════════════════════════════════════════════════
#  OPTION PARAMETERS
# ════════════════════════════════════════════════════════════════════════

@dataclass
class OptionParameters:
    """
    One fully specified European contract at a pricing date.

    Parameters
    ----------
    underlying_price : spot S (> 0)
    strike_price : strike K (> 0)
    time_to_maturity : T in years (>= 0)
    risk_free_rate : r (annualized, continuous compounding)
    volatility : sigma (annualized, > 0)
    option_kind : OptionKind or "call" / "put"
    underlying_class : UnderlyingClass or its string value
    dividend_yield : q, only used for DIVIDEND_STOCK
    foreign_rate : Rf, only used for CURRENCY

    Fields may be reassigned in place so one object can be reused across
    pricings. The engine re-validates its inputs on every call, so an
    invalid assignment surfaces as a DomainError at pricing time.

    Raises
    ------
    DomainError : S, K or sigma not positive, T negative, or non-finite input
    ConfigurationError : unknown option kind or underlying class
    """
    underlying_price: float
    strike_price: float
    time_to_maturity: float
    risk_free_rate: float
    volatility: float
    option_kind: OptionKind = OptionKind.CALL
    underlying_class: UnderlyingClass = UnderlyingClass.STOCK
    dividend_yield: float = 0.0
    foreign_rate: float = 0.0

    def __post_init__(self):
        self.option_kind = coerce_enum(OptionKind, self.option_kind)
        self.underlying_class = coerce_enum(UnderlyingClass, self.underlying_class)
        self.underlying_price = check_positive("underlying_price", self.underlying_price)
        self.strike_price = check_positive("strike_price", self.strike_price)
        self.time_to_maturity = check_non_negative("time_to_maturity", self.time_to_maturity)
        self.risk_free_rate = check_finite("risk_free_rate", self.risk_free_rate)
        self.volatility = check_positive("volatility", self.volatility)
        self.dividend_yield = check_finite("dividend_yield", self.dividend_yield)
        self.foreign_rate = check_finite("foreign_rate", self.foreign_rate)

    @property
    def cost_of_carry(self) -> float:
        """b, derived from the underlying class and current rates."""
        return carry_for(self.underlying_class, self.risk_free_rate,
                         self.dividend_yield, self.foreign_rate)

    # short names used throughout the pricing formulas
    @property
    def S(self) -> float:
        return self.underlying_price

    @property
    def K(self) -> float:
        return self.strike_price

    @property
    def T(self) -> float:
        return self.time_to_maturity

    @property
    def r(self) -> float:
        return self.risk_free_rate

    @property
    def sigma(self) -> float:
        return self.volatility

    @property
    def b(self) -> float:
        return self.cost_of_carry

    @property
    def is_call(self) -> bool:
        return coerce_enum(OptionKind, self.option_kind) is OptionKind.CALL

    def replace(self, **changes) -> "OptionParameters":
        """Validated copy with the given fields changed."""
        return _replace(self, **changes)

    def flipped(self) -> "OptionParameters":
        """Same contract on the other side (call <-> put)."""
        kind = OptionKind.PUT if self.is_call else OptionKind.CALL
        return self.replace(option_kind=kind)

    def as_dict(self) -> dict:
        """Fields plus the derived cost of carry, enums as plain strings."""
        d = asdict(self)
        d["option_kind"] = coerce_enum(OptionKind, self.option_kind).value
        d["underlying_class"] = coerce_enum(UnderlyingClass, self.underlying_class).value
        d["cost_of_carry"] = self.cost_of_carry
        return d
