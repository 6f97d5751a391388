"""
Copyright (c) 2020, The Decred developers
See LICENSE for details

P-224 keys and elliptic-curve Diffie-Hellman.

Keys are exchanged as hexadecimal strings. A private key is the scalar in
lowercase hex, zero-padded to at least 64 characters. A public key is the
uncompressed SEC1 point 0x04 || x || y with 28-byte coordinates, written as a
single integer, which is always 113 hex characters long.
"""

from p224 import P224Error
from p224.util import helpers

from .curve import AffinePoint, curve
from .uint import ONE, ZERO, U512


log = helpers.getLogger("KEY")

KEY_SIZE = curve.BitSize

# The uncompressed format byte 0x04 sits just above the two coordinates.
PUBKEY_MARKER = ONE << (2 * KEY_SIZE + 2)
COORDINATE_MASK = (ONE << KEY_SIZE) - 1

PUBKEY_LEN = KEY_SIZE // 2 + 1
PUBKEY_COMPRESSED_LEN = KEY_SIZE // 4 + 1

# Minimum width of the hex encodings.
HEX_PAD = 64


class InvalidLengthError(P224Error):
    """
    A public key string is neither the uncompressed nor the compressed length.
    """

    pass


class UnsupportedFormatError(P224Error):
    """
    The public key string has the length of a compressed point. Compressed
    points can not be decoded.
    """

    pass


class CannotDeriveError(P224Error):
    """
    A shared secret was requested from two keys without a private scalar.
    """

    pass


class Key:
    """
    Key holds a private scalar and the matching public point. A private scalar
    of zero marks a public-only key. The private scalar is stored exactly as
    it was parsed, so it is not necessarily reduced modulo the group order.
    """

    __slots__ = ("private", "public")

    def __init__(self, private, public):
        """
        Args:
            private (U512): The private scalar, or zero.
            public (AffinePoint): The public point.
        """
        object.__setattr__(self, "private", U512(private))
        object.__setattr__(self, "public", public)

    def __setattr__(self, k, v):
        raise AttributeError("Key is immutable")

    @staticmethod
    def fromPrivateHex(s):
        """
        Create a key from a hex private scalar. The public point is computed
        from the generator.

        Args:
            s (str): The private key.

        Returns:
            Key: The key pair.

        Raises:
            ParseError: s is not valid hex.
        """
        k = U512.fromHex(s)
        log.debug("computing public key for a %d-bit scalar", k.bits())
        return Key(k, curve.G.mul(k))

    @staticmethod
    def fromPublicHex(s):
        """
        Create a public-only key from an uncompressed public key.

        Args:
            s (str): The 113-character public key.

        Returns:
            Key: The public key, with no private scalar.

        Raises:
            UnsupportedFormatError: s has the length of a compressed key.
            InvalidLengthError: s has any other unexpected length.
            ParseError: s is not valid hex.
        """
        if len(s) == PUBKEY_LEN:
            xy = U512.fromHex(s) ^ PUBKEY_MARKER
            x = xy >> KEY_SIZE
            y = xy & COORDINATE_MASK
            return Key(ZERO, AffinePoint(x, y))
        if len(s) == PUBKEY_COMPRESSED_LEN:
            raise UnsupportedFormatError("compressed keys not supported yet")
        raise InvalidLengthError(
            f"invalid public key length {len(s)}, expected {PUBKEY_LEN}"
        )

    def hasPrivate(self):
        return not self.private.isZero()

    def privateHex(self):
        """
        The private scalar as lowercase hex, at least 64 characters long.
        """
        return f"{self.private:0>{HEX_PAD}x}"

    def publicHex(self):
        """
        The public point as lowercase hex, at least 64 characters long. For
        any point with coordinates below 2^224 this is 113 characters.
        """
        pt = self.public
        encoded = PUBKEY_MARKER | (pt.x << KEY_SIZE) | pt.y
        return f"{encoded:0>{HEX_PAD}x}"

    def derive(self, other):
        """
        Compute the ECDH shared point. If this key has a private scalar, it
        multiplies the other key's public point. Otherwise the other key's
        private scalar multiplies this key's public point.

        Args:
            other (Key): The peer's key.

        Returns:
            Key: A public-only key holding the shared point.

        Raises:
            CannotDeriveError: Neither key has a private scalar.
        """
        if self.hasPrivate():
            log.debug("deriving with own private scalar")
            return Key(ZERO, other.public.mul(self.private))
        if other.hasPrivate():
            log.debug("deriving with peer private scalar")
            return Key(ZERO, self.public.mul(other.private))
        raise CannotDeriveError("Cannot derive from two public keys")

    def __eq__(self, other):
        if not isinstance(other, Key):
            return NotImplemented
        return self.private == other.private and self.public == other.public

    __hash__ = None

    def __repr__(self):
        kind = "private" if self.hasPrivate() else "public"
        return f"Key({kind}, public={self.publicHex()})"
