"""
Copyright (c) 2020, The Decred developers
See LICENSE for details

Fixed-width 512-bit unsigned integers.

The curve arithmetic works on 224-bit field elements, and every intermediate
product of two reduced elements, plus a few small multiples, fits comfortably
in 512 bits. U512 holds its value in exactly that width. Every operation wraps
modulo 2^512, the same way a fixed array of eight 64-bit words would, so no
result can ever grow past the container.
"""

from p224 import P224Error


BIT_WIDTH = 512
WORD_BITS = 64
WORD_COUNT = BIT_WIDTH // WORD_BITS

# MAX_HEX_LEN is the longest hexadecimal string that fits in 512 bits.
MAX_HEX_LEN = BIT_WIDTH // 4

_mask = (1 << BIT_WIDTH) - 1
_wordMask = (1 << WORD_BITS) - 1
_hexDigits = frozenset("0123456789abcdefABCDEF")


class ParseError(P224Error):
    """
    A ParseError indicates a string that can not be decoded as a hexadecimal
    512-bit unsigned integer.
    """

    pass


class NotInvertibleError(P224Error):
    """
    A NotInvertibleError is raised when a modular inverse is requested for a
    value that shares a factor with the modulus. For the prime field modulus
    this only happens for values congruent to zero.
    """

    pass


def _val(v):
    """
    The raw int value of a U512 or a non-negative int operand.
    """
    if isinstance(v, U512):
        return v.n
    if isinstance(v, int):
        if v < 0:
            raise OverflowError(f"unsigned integer can't be created from {v}")
        return v & _mask
    return NotImplemented


class U512:
    """
    U512 is an immutable 512-bit unsigned integer. Arithmetic operators accept
    other U512 values or non-negative Python ints on either side and always
    return a U512. Addition, subtraction, multiplication and left shifts wrap
    modulo 2^512.
    """

    __slots__ = ("n",)

    def __init__(self, n=0):
        """
        Args:
            n (int or U512): The value. Ints are truncated to 512 bits.
        """
        v = _val(n)
        if v is NotImplemented:
            raise TypeError(f"cannot create U512 from {type(n).__name__}")
        object.__setattr__(self, "n", v)

    def __setattr__(self, k, v):
        raise AttributeError("U512 is immutable")

    @staticmethod
    def fromHex(hexString):
        """
        Decode the hexadecimal string. An optional 0x prefix is accepted, and
        digits may be of either case.

        Args:
            hexString (str): Up to 128 hexadecimal digits.

        Returns:
            U512: The decoded integer.

        Raises:
            ParseError: The string is empty, too long, or contains a character
                that is not a hexadecimal digit.
        """
        if not isinstance(hexString, str):
            raise ParseError(f"expected a str, got {type(hexString).__name__}")
        digits = hexString[2:] if hexString.startswith("0x") else hexString
        if not digits:
            raise ParseError("empty hex string")
        if len(digits) > MAX_HEX_LEN:
            raise ParseError(
                f"hex string of {len(digits)} digits exceeds {MAX_HEX_LEN}"
            )
        if not _hexDigits.issuperset(digits):
            raise ParseError(f"invalid hex string {hexString!r}")
        return U512(int(digits, 16))

    @staticmethod
    def fromWords(words):
        """
        Build the integer from little-endian 64-bit words.

        Args:
            words (list(int)): At most 8 words, least significant first.

        Returns:
            U512: The integer.
        """
        if len(words) > WORD_COUNT:
            raise ValueError(f"at most {WORD_COUNT} words allowed, got {len(words)}")
        n = 0
        for i, w in enumerate(words):
            if w < 0 or w > _wordMask:
                raise ValueError(f"word {i} out of range: {w:#x}")
            n |= w << (WORD_BITS * i)
        return U512(n)

    @property
    def words(self):
        """
        The eight little-endian 64-bit words of the integer.

        Returns:
            tuple(int): Least significant word first.
        """
        return tuple((self.n >> (WORD_BITS * i)) & _wordMask for i in range(WORD_COUNT))

    def isZero(self):
        return self.n == 0

    def isOdd(self):
        return self.n & 1 == 1

    def bits(self):
        """
        The number of bits needed to represent the value.
        """
        return self.n.bit_length()

    def asInt(self):
        return self.n

    def asSmallInt(self, bits=32):
        """
        The value as a native int, checked to fit in an unsigned integer of
        the given width.

        Args:
            bits (int): The width of the target integer.

        Returns:
            int: The value.

        Raises:
            OverflowError: The value needs more than bits bits.
        """
        if self.n.bit_length() > bits:
            raise OverflowError(f"integer overflow when casting to u{bits}")
        return self.n

    def hex(self):
        """
        The lowercase hexadecimal encoding, without leading zeros.
        """
        return format(self.n, "x")

    def invMod(self, m):
        return invMod(self, m)

    def __add__(self, other):
        b = _val(other)
        if b is NotImplemented:
            return b
        return U512((self.n + b) & _mask)

    __radd__ = __add__

    def __sub__(self, other):
        b = _val(other)
        if b is NotImplemented:
            return b
        return U512((self.n - b) & _mask)

    def __rsub__(self, other):
        a = _val(other)
        if a is NotImplemented:
            return a
        return U512((a - self.n) & _mask)

    def __mul__(self, other):
        b = _val(other)
        if b is NotImplemented:
            return b
        return U512((self.n * b) & _mask)

    __rmul__ = __mul__

    def __floordiv__(self, other):
        b = _val(other)
        if b is NotImplemented:
            return b
        return U512(self.n // b)

    def __rfloordiv__(self, other):
        a = _val(other)
        if a is NotImplemented:
            return a
        return U512(a // self.n)

    def __mod__(self, other):
        b = _val(other)
        if b is NotImplemented:
            return b
        return U512(self.n % b)

    def __rmod__(self, other):
        a = _val(other)
        if a is NotImplemented:
            return a
        return U512(a % self.n)

    def __divmod__(self, other):
        b = _val(other)
        if b is NotImplemented:
            return b
        q, r = divmod(self.n, b)
        return U512(q), U512(r)

    def __lshift__(self, shift):
        shift = int(shift)
        if shift >= BIT_WIDTH:
            return U512()
        return U512((self.n << shift) & _mask)

    def __rshift__(self, shift):
        return U512(self.n >> int(shift))

    def __and__(self, other):
        b = _val(other)
        if b is NotImplemented:
            return b
        return U512(self.n & b)

    __rand__ = __and__

    def __or__(self, other):
        b = _val(other)
        if b is NotImplemented:
            return b
        return U512(self.n | b)

    __ror__ = __or__

    def __xor__(self, other):
        b = _val(other)
        if b is NotImplemented:
            return b
        return U512(self.n ^ b)

    __rxor__ = __xor__

    def __invert__(self):
        return U512(~self.n & _mask)

    def _cmpVal(self, other):
        if isinstance(other, U512):
            return other.n
        if isinstance(other, int):
            return other
        return NotImplemented

    def __eq__(self, other):
        b = self._cmpVal(other)
        if b is NotImplemented:
            return b
        return self.n == b

    def __lt__(self, other):
        b = self._cmpVal(other)
        if b is NotImplemented:
            return b
        return self.n < b

    def __le__(self, other):
        b = self._cmpVal(other)
        if b is NotImplemented:
            return b
        return self.n <= b

    def __gt__(self, other):
        b = self._cmpVal(other)
        if b is NotImplemented:
            return b
        return self.n > b

    def __ge__(self, other):
        b = self._cmpVal(other)
        if b is NotImplemented:
            return b
        return self.n >= b

    def __hash__(self):
        return hash(self.n)

    def __bool__(self):
        return self.n != 0

    def __int__(self):
        return self.n

    def __index__(self):
        return self.n

    def __format__(self, spec):
        return format(self.n, spec)

    def __repr__(self):
        return f"U512(0x{self.n:x})"


ZERO = U512(0)
ONE = U512(1)


def invMod(a, m):
    """
    Modular inverse by the extended Euclidean algorithm. Every intermediate
    value is kept reduced modulo m, so the computation never leaves the
    unsigned 512-bit range.

    Args:
        a (U512): The value to invert.
        m (U512): The modulus.

    Returns:
        U512: t such that a * t = 1 (mod m).

    Raises:
        NotInvertibleError: a has no inverse modulo m.
    """
    a, m = U512(a), U512(m)
    r, newR = a % m, m
    if r.isZero():
        raise NotInvertibleError("a is not invertible")
    t, newT = ONE, ZERO
    while not newR.isZero():
        quotient = r // newR
        r, newR = newR, r - quotient * newR
        t, newT = newT, (t + (m - quotient % m) * newT) % m
    # r now holds gcd(a, m).
    if r != ONE:
        raise NotInvertibleError(f"a shares the factor {r.hex()} with the modulus")
    return t
