"""
Copyright (c) 2020, The Decred developers
See LICENSE for details
"""

import logging
import random

import pytest

from p224 import P224Error
from p224.crypto.curve import AffinePoint, curve
from p224.crypto.key import (
    CannotDeriveError,
    InvalidLengthError,
    Key,
    UnsupportedFormatError,
)
from p224.crypto.uint import ParseError


PRIV_A = "af0181e90420508e39e9d862f1680dc22f5f024fcfc11939d7c6fedb"
PUB_A = (
    "4bcf74addac6c83a587eeb6d2a724158cebaecfed0af82a90434268e03c82f21e137c7341a70c"
    "0044ed058d5fe6c7aa38eb16542fdf5ae111"
)
PRIV_B = "14447aec7d78c691d0c1c94da1a6a85d9eefeddf8b42f51aa227376c"
PUB_B = (
    "457e0910e4a34933c1ad3034ad92504c8324b8701e56c37716bf541967813d3ff1390e5c1d0c8"
    "33f1fce3ff8bc69b277a072c3c31b239aacf"
)
# The full shared point. Its x coordinate is the shared secret OpenSSL derives
# for the same pair.
SHARED = (
    "48a221e3c242e320ff881c7cbe81695bd90cf2ebc1bc3eb2aa4222803c69dfe61c268593ddd"
    "f25a11fb0c2c03d6c028c858a6d479759a7fe7"
)


def test_fromPrivateHex(prepareLogger):
    tests = [
        (PRIV_A, PUB_A),
        (PRIV_B, PUB_B),
        ("1", "4" + curve.Gx.hex() + curve.Gy.hex()),
        ("0x1", "4" + curve.Gx.hex() + curve.Gy.hex()),
    ]
    for priv, pub in tests:
        key = Key.fromPrivateHex(priv)
        assert key.hasPrivate()
        assert key.publicHex() == pub
        assert len(key.publicHex()) == 113
        assert curve.isOnCurve(key.public)

    key = Key.fromPrivateHex(PRIV_A)
    assert key.privateHex() == "00000000" + PRIV_A
    assert Key.fromPrivateHex(PRIV_A.upper()) == key


def test_privateHex_padding():
    assert Key.fromPrivateHex("1").privateHex() == "0" * 63 + "1"
    # Longer scalars are never truncated.
    key = Key.fromPrivateHex("f" * 80)
    assert key.privateHex() == "f" * 80
    assert curve.isOnCurve(key.public)


def test_unreducedPrivate():
    """
    The private scalar is kept as parsed. Scalars that differ by a multiple of
    the group order serialize differently but share a public key.
    """
    k = int(PRIV_A, 16) + curve.N.asInt()
    key = Key.fromPrivateHex(f"{k:x}")
    assert key.privateHex() == f"{k:064x}"
    assert key.privateHex() != Key.fromPrivateHex(PRIV_A).privateHex()
    assert key.publicHex() == PUB_A


def test_privateRoundTrip(randScalar):
    random.seed(0)
    for _ in range(3):
        key = Key.fromPrivateHex(f"{randScalar():x}")
        again = Key.fromPrivateHex(key.privateHex())
        assert again.public == key.public
        assert again == key


def test_identityPublic():
    # Multiples of the group order have the point at infinity as public key,
    # which encodes with zero coordinates.
    key = Key.fromPrivateHex(curve.N.hex())
    assert key.public == AffinePoint(0, 0)
    assert key.publicHex() == "4" + "0" * 112

    # Zero is not a private scalar at all.
    assert not Key.fromPrivateHex("0").hasPrivate()


def test_fromPublicHex():
    for priv, pub in ((PRIV_A, PUB_A), (PRIV_B, PUB_B)):
        key = Key.fromPublicHex(pub)
        assert not key.hasPrivate()
        assert key.privateHex() == "0" * 64
        assert key.publicHex() == pub
        assert key.public == Key.fromPrivateHex(priv).public

    key = Key.fromPublicHex(PUB_A.upper())
    assert key.publicHex() == PUB_A

    # Coordinates with leading zero bytes keep their width.
    pub = "4" + "0" * 55 + "1" + "0" * 55 + "2"
    key = Key.fromPublicHex(pub)
    assert key.public == AffinePoint(1, 2)
    assert key.publicHex() == pub


def test_publicRoundTrip(randScalar):
    random.seed(1)
    for _ in range(3):
        key = Key.fromPrivateHex(f"{randScalar():x}")
        pubKey = Key.fromPublicHex(key.publicHex())
        assert pubKey.public == key.public
        assert pubKey.publicHex() == key.publicHex()


def test_fromPublicHex_errors():
    with pytest.raises(UnsupportedFormatError):
        Key.fromPublicHex("2" + "ab" * 28)
    with pytest.raises(UnsupportedFormatError):
        Key.fromPublicHex("4" * 57)

    for n in (0, 1, 56, 64, 112, 114, 130):
        with pytest.raises(InvalidLengthError):
            Key.fromPublicHex("4" * n)

    with pytest.raises(ParseError):
        Key.fromPublicHex("z" * 113)
    with pytest.raises(ParseError):
        Key.fromPublicHex(PUB_A[:-1] + " ")

    # All of them are P224Errors.
    for s in ("4" * 57, "4" * 10, "z" * 113):
        with pytest.raises(P224Error):
            Key.fromPublicHex(s)


def test_fromPrivateHex_errors():
    for bad in ("", "xyz", "0x", PRIV_A + "g", " " + PRIV_A, "f" * 129):
        with pytest.raises(ParseError):
            Key.fromPrivateHex(bad)


def test_derive(prepareLogger):
    keyA = Key.fromPrivateHex(PRIV_A)
    keyB = Key.fromPrivateHex(PRIV_B)
    pubA = Key.fromPublicHex(PUB_A)
    pubB = Key.fromPublicHex(PUB_B)

    shared = keyA.derive(pubB)
    assert not shared.hasPrivate()
    assert shared.publicHex() == SHARED
    assert curve.isOnCurve(shared.public)

    assert keyB.derive(pubA).publicHex() == SHARED
    # A public-only key uses the peer's private scalar.
    assert pubB.derive(keyA).publicHex() == SHARED
    assert pubA.derive(keyB).publicHex() == SHARED
    # With two private keys, the receiver's scalar is used.
    assert keyA.derive(keyB).publicHex() == SHARED
    assert keyA.derive(keyB) == keyB.derive(keyA)


def test_derive_symmetry(randScalar):
    random.seed(2)
    for _ in range(2):
        a = Key.fromPrivateHex(f"{randScalar():x}")
        b = Key.fromPrivateHex(f"{randScalar():x}")
        abPub = a.derive(Key.fromPublicHex(b.publicHex()))
        baPub = b.derive(Key.fromPublicHex(a.publicHex()))
        assert abPub.publicHex() == baPub.publicHex()


def test_derive_publicOnly():
    pubA = Key.fromPublicHex(PUB_A)
    pubB = Key.fromPublicHex(PUB_B)
    with pytest.raises(CannotDeriveError):
        pubA.derive(pubB)
    with pytest.raises(CannotDeriveError):
        pubA.derive(pubA)
    shared = Key.fromPrivateHex(PRIV_A).derive(pubB)
    with pytest.raises(CannotDeriveError):
        shared.derive(pubA)


def test_keyValues():
    key = Key.fromPrivateHex(PRIV_A)
    assert PRIV_A not in repr(key)
    assert repr(key) == f"Key(private, public={PUB_A})"
    assert repr(Key.fromPublicHex(PUB_B)) == f"Key(public, public={PUB_B})"
    assert key != Key.fromPublicHex(PUB_A)
    assert (key == PUB_A) is False


def test_immutable():
    key = Key.fromPrivateHex("1")
    with pytest.raises(AttributeError):
        key.private = key.private + 5
    with pytest.raises(AttributeError):
        key.public = AffinePoint(0, 0)
    with pytest.raises(AttributeError):
        key.extra = 1
    assert key.privateHex() == "0" * 63 + "1"
    assert key.public == curve.G


def test_derive_logging(prepareLogger, caplog):
    keyA = Key.fromPrivateHex(PRIV_A)
    pubB = Key.fromPublicHex(PUB_B)
    with caplog.at_level(logging.DEBUG, logger="p224.KEY"):
        keyA.derive(pubB)
        pubB.derive(keyA)
    assert "deriving with own private scalar" in caplog.text
    assert "deriving with peer private scalar" in caplog.text
    # Private scalars never reach the log.
    assert PRIV_A not in caplog.text
