from math import gcd
import logging
import re

from .utils import lcm, sign


class InvalidArgument(ValueError):
    """Zero denominator, given directly or reached through an operation."""


class ParseError(ValueError):
    """Text is not an "n" or "n/d" integer fraction."""


_INT_RE = re.compile('-?[0-9]+')


class Rational:
    """
    Exact fraction numerator/denominator over python ints.

    Immutable and hashable.
    Always stored in lowest terms with positive denominator, so equal values
    have equal (numerator, denominator) pairs; zero is 0/1.
    """

    __slots__ = ('_numerator', '_denominator')

    def __init__(self, numerator, denominator=1):
        for x in (numerator, denominator):
            if isinstance(x, bool) or not isinstance(x, int):
                raise TypeError("Rational needs int arguments, got {!r}".format(x))
        if denominator == 0:
            raise InvalidArgument("Zero denominator: {}/0".format(numerator))

        # gcd(0, d) = |d|, so zero becomes 0/1
        g = gcd(numerator, denominator) * sign(denominator)
        self._numerator = numerator // g
        self._denominator = denominator // g

    @property
    def numerator(self):
        return self._numerator

    @property
    def denominator(self):
        return self._denominator

    @classmethod
    def convert(cls, x):
        if isinstance(x, cls):
            return x
        elif isinstance(x, int) and not isinstance(x, bool):
            return cls(x, 1)
        else:
            raise TypeError("Can't convert {!r} to Rational".format(x))

    @classmethod
    def _coerce(cls, x):
        # None for operands the numeric protocol should hand back to python
        try:
            return cls.convert(x)
        except TypeError:
            return None

    def _reciprocal(self):
        return Rational(self._denominator, self._numerator)

    def is_int(self):
        return self._denominator == 1

    def compare(self, other):
        """Return -1, 0 or 1 as self is less than, equal to or greater than other."""
        other = Rational.convert(other)
        # denominators are positive, cross-multiplying keeps the order
        lhs = self._numerator * other._denominator
        rhs = other._numerator * self._denominator
        return (lhs > rhs) - (lhs < rhs)

    def between(self, low, high):
        """Inclusive range check: low <= self <= high."""
        return self.compare(low) >= 0 and self.compare(high) <= 0

    def __gt__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._numerator * other._denominator > other._numerator * self._denominator

    def __ge__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._numerator * other._denominator >= other._numerator * self._denominator

    def __lt__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._numerator * other._denominator < other._numerator * self._denominator

    def __le__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._numerator * other._denominator <= other._numerator * self._denominator

    def __eq__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return (self._numerator, self._denominator) == (other._numerator, other._denominator)

    def __hash__(self):
        # integers hash like the equal int
        if self._denominator == 1:
            return hash(self._numerator)
        return hash((self._numerator, self._denominator))

    def __bool__(self):
        return self._numerator != 0

    def __neg__(self):
        return Rational(-self._numerator, self._denominator)

    def __pos__(self):
        return self

    def __abs__(self):
        return Rational(abs(self._numerator), self._denominator)

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        if other == ZERO:
            return self
        if self == ZERO:
            return other

        # both numerators are non-zero here, so f > 0
        f = gcd(self._numerator, other._numerator)
        g = gcd(self._denominator, other._denominator)
        assert f != 0

        n = f * (
            (self._numerator // f) * (other._denominator // g)
            + (other._numerator // f) * (self._denominator // g)
        )
        return Rational(n, lcm(self._denominator, other._denominator))

    def __radd__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other + self

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self + (-other)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other + (-self)

    def __mul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        # reduce p1/q2 and p2/q1 first, then multiply
        c = Rational(self._numerator, other._denominator)
        d = Rational(other._numerator, self._denominator)
        return Rational(c._numerator * d._numerator, c._denominator * d._denominator)

    def __rmul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other * self

    def __truediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self * other._reciprocal()

    def __rtruediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other * self._reciprocal()

    def __pow__(self, power):
        if isinstance(power, bool) or not isinstance(power, int):
            return NotImplemented
        if power < 0:
            return self._reciprocal() ** (-power)
        return Rational(self._numerator**power, self._denominator**power)

    def __str__(self):
        if self._denominator == 1:
            return str(self._numerator)
        return '{}/{}'.format(self._numerator, self._denominator)

    def __repr__(self):
        return 'Rational({}, {})'.format(self._numerator, self._denominator)


ZERO = Rational(0, 1)
ONE = Rational(1, 1)


def div_by(numerator, denominator):
    """Fraction numerator/denominator from two ints."""
    return Rational(numerator) / Rational(denominator)


def parse(text):
    """
    Read a Rational from "n" or "n/d" text.

    Each part is a decimal integer with optional leading minus, without spaces.
    The result is reduced, so "117/1098" gives 13/122.
    Raises ParseError for malformed text, InvalidArgument for zero denominator.
    """
    if not isinstance(text, str):
        raise TypeError("Can't parse {!r}: not a string".format(text))

    parts = text.split('/')
    if len(parts) > 2 or not all(_INT_RE.fullmatch(p) for p in parts):
        logging.debug('parse: rejected %r', text)
        raise ParseError("Bad rational: {!r}".format(text))

    result = Rational(*(int(p) for p in parts))
    logging.debug('parse: %r -> %s', text, result)
    return result
