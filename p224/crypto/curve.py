"""
Copyright (c) 2020, The Decred developers
See LICENSE for details

Pure Python NIST P-224 curve implementation built on the fixed-width U512
integer.

References:
  [SEC2] Recommended Elliptic Curve Domain Parameters
    https://www.secg.org/sec2-v2.pdf

  [FIPS186] Digital Signature Standard, Appendix D.1.2.2 Curve P-224

  [GECC]: Guide to Elliptic Curve Cryptography (Hankerson, Menezes, Vanstone)

  [EFD] Explicit-Formulas Database, short Weierstrass curves in Jacobian
    coordinates
    https://hyperelliptic.org/EFD/g1p/auto-shortw-jacobian.html

All group operations are performed using Jacobian coordinates.  For a given
(x, y) position on the curve, the Jacobian coordinates are (x1, y1, z1)
where x = x1/z1^2 and y = y1/z1^3. The point at infinity is (0, 0, 1), and
any point with zero x and y coordinates is treated as infinity.
"""

from .uint import ONE, ZERO, U512, invMod


def fromHex(hx):
    return U512.fromHex(hx)


class Curve:
    """
    The fixed domain parameters of P-224, y^2 = x^3 + A*x + B over the prime
    field of order P.
    """

    def __init__(self):
        self.P = fromHex("ffffffffffffffffffffffffffffffff000000000000000000000001")
        # A = P - 3.
        self.A = fromHex("fffffffffffffffffffffffffffffffefffffffffffffffffffffffe")
        # B is only used to validate points. None of the group operations need
        # it.
        self.B = fromHex("b4050a850c04b3abf54132565044b0b7d7bfd8ba270b39432355ffb4")
        self.N = fromHex("ffffffffffffffffffffffffffff16a2e0b8f03e13dd29455c5c2a3d")
        self.Gx = fromHex("b70e0cbd6bb4bf7f321390b94a03c1d356c21122343280d6115c1d21")
        self.Gy = fromHex("bd376388b5f723fb4c22dfe6cd4375a05a07476444d5819985007e34")
        self.BitSize = 224
        # WindowSize is the width of the signed digits used by scalarMult.
        self.WindowSize = 5

    @property
    def G(self):
        return AffinePoint(self.Gx, self.Gy)

    def isOnCurve(self, point):
        """
        Check that the affine point satisfies the curve equation. The encoding
        of the point at infinity, (0, 0), is not on the curve.

        Args:
            point (AffinePoint): The point.

        Returns:
            bool: True if the point is on the curve.
        """
        P = self.P
        x, y = point.x, point.y
        if x >= P or y >= P:
            return False
        lhs = (y * y) % P
        rhs = ((((x * x) % P) * x) % P + (self.A * x) % P + self.B) % P
        return lhs == rhs

    def scalarBaseMult(self, k):
        """
        scalarBaseMult returns k*G, where G is the base point of the group.

        Args:
            k (U512 or int): The scalar.

        Returns:
            AffinePoint: The product.
        """
        return self.G.mul(k)


curve = Curve()


class AffinePoint:
    """
    AffinePoint is a curve point as plain (x, y) coordinates.
    """

    __slots__ = ("x", "y")

    def __init__(self, x, y):
        object.__setattr__(self, "x", U512(x))
        object.__setattr__(self, "y", U512(y))

    def __setattr__(self, k, v):
        raise AttributeError("AffinePoint is immutable")

    def toJacobian(self):
        P = curve.P
        return JacobianPoint(self.x % P, self.y % P, ONE)

    def mul(self, k):
        """
        mul returns k*(x, y) as an affine point.
        """
        return scalarMult(self.toJacobian(), k).toAffine()

    def __eq__(self, other):
        if not isinstance(other, AffinePoint):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"AffinePoint(x=0x{self.x:x}, y=0x{self.y:x})"


class JacobianPoint:
    """
    JacobianPoint is a curve point in Jacobian projective coordinates. All
    coordinate arithmetic is done modulo the field prime. Points are values:
    every operation returns a new point.
    """

    __slots__ = ("x", "y", "z")

    def __init__(self, x, y, z):
        object.__setattr__(self, "x", U512(x))
        object.__setattr__(self, "y", U512(y))
        object.__setattr__(self, "z", U512(z))

    def __setattr__(self, k, v):
        raise AttributeError("JacobianPoint is immutable")

    @staticmethod
    def identity():
        """
        The point at infinity.
        """
        return JacobianPoint(ZERO, ZERO, ONE)

    def isIdentity(self):
        return self.x.isZero() and self.y.isZero()

    def toAffine(self):
        """
        Convert to affine coordinates with a single modular inversion. The
        canonical identity (0, 0, 1) converts to (0, 0).

        Returns:
            AffinePoint: The affine point.

        Raises:
            NotInvertibleError: z is congruent to zero.
        """
        P = curve.P
        zInv = invMod(self.z, P)
        zInv2 = (zInv * zInv) % P
        zInv3 = (zInv2 * zInv) % P
        return AffinePoint((self.x * zInv2) % P, (self.y * zInv3) % P)

    def negate(self):
        """
        negate returns the point (x, -y, z). The identity negates to itself.
        """
        P = curve.P
        return JacobianPoint(self.x, (P - self.y) % P, self.z)

    def add(self, other):
        """
        add returns self + other. This is the "add-1998-cmo-2" formula from
        [EFD], with the cases of equal and opposite points handled before the
        general formula is applied.

        Args:
            other (JacobianPoint): The point to add.

        Returns:
            JacobianPoint: The sum.
        """
        if self.isIdentity():
            return other
        if other.isIdentity():
            return self

        P = curve.P
        z1z1 = (self.z * self.z) % P
        z2z2 = (other.z * other.z) % P
        u1 = (self.x * z2z2) % P
        u2 = (other.x * z1z1) % P
        s1 = (((self.y * other.z) % P) * z2z2) % P
        s2 = (((other.y * self.z) % P) * z1z1) % P
        if u1 == u2:
            if s1 == s2:
                # Same point.
                return self.double()
            # Opposite points.
            return JacobianPoint.identity()

        h = (u2 + (P - u1)) % P
        hh = (h * h) % P
        hhh = (hh * h) % P
        r = (s2 + (P - s1)) % P
        v = (u1 * hh) % P
        x3 = ((r * r) + (P - hhh) + (P - v) * 2) % P
        y3 = (r * (v + (P - x3)) + (P - s1) * hhh) % P
        z3 = (h * ((self.z * other.z) % P)) % P
        return JacobianPoint(x3, y3, z3)

    def double(self):
        """
        double returns 2*self using the "dbl-2007-bl" formula from [EFD],
        which works for any curve coefficient A.
        """
        if self.isIdentity():
            return JacobianPoint.identity()

        P, A = curve.P, curve.A
        xx = (self.x * self.x) % P
        yy = (self.y * self.y) % P
        yyyy = (yy * yy) % P
        zz = (self.z * self.z) % P
        xPlusYY = (self.x + yy) % P
        s = ((((xPlusYY * xPlusYY) % P) + (P - xx) + (P - yyyy)) * 2) % P
        m = (xx * 3 + A * ((zz * zz) % P)) % P
        t = ((m * m) + (P - s) * 2) % P
        x3 = t
        y3 = (m * (s + (P - t)) + (P - yyyy) * 8) % P
        yPlusZ = self.z + self.y
        z3 = ((yPlusZ * yPlusZ) + (P - yy) + (P - zz)) % P
        return JacobianPoint(x3, y3, z3)

    def mul(self, k):
        return scalarMult(self, k)

    def equals(self, other):
        """
        equals is true if both points represent the same curve point, whatever
        their z coordinates.
        """
        if self.isIdentity() or other.isIdentity():
            return self.isIdentity() and other.isIdentity()
        P = curve.P
        z1z1 = (self.z * self.z) % P
        z2z2 = (other.z * other.z) % P
        if (self.x * z2z2) % P != (other.x * z1z1) % P:
            return False
        z1z1z1 = (z1z1 * self.z) % P
        z2z2z2 = (z2z2 * other.z) % P
        return (self.y * z2z2z2) % P == (other.y * z1z1z1) % P

    def __eq__(self, other):
        if not isinstance(other, JacobianPoint):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __repr__(self):
        return f"JacobianPoint(x=0x{self.x:x}, y=0x{self.y:x}, z=0x{self.z:x})"


def signedWindowDigits(k, bitSize=None, windowSize=None):
    """
    Recode k into bitSize + 1 signed digits, least significant first. Every
    nonzero digit is odd with a magnitude below 2^(windowSize-1), and
    sum(d[i] * 2^i) == k. This is the width-w NAF of algorithm 3.35 in [GECC].

    Whenever the running value is odd, its low windowSize bits are taken as
    the digit, mapped into the signed range, and removed from the running
    value, which leaves windowSize - 1 zero bits behind it.

    Args:
        k (U512): The scalar, already reduced modulo the group order.
        bitSize (int): optional. Defaults to the curve's bit size.
        windowSize (int): optional. Defaults to the curve's window size.

    Returns:
        list(int): bitSize + 1 digits.
    """
    bitSize = bitSize if bitSize is not None else curve.BitSize
    w = windowSize if windowSize is not None else curve.WindowSize
    digits = [0] * (bitSize + 1)
    mask = (ONE << w) - 1
    half = 1 << (w - 1)
    k = U512(k)
    for i in range(len(digits)):
        if k.isOdd():
            d = (k & mask).asSmallInt()
            if d >= half:
                d -= 1 << w
                k = k + (-d)
            else:
                k = k - d
            digits[i] = d
        k >>= 1
        if k.isZero():
            break
    return digits


def scalarMult(point, k):
    """
    scalarMult returns k*point using a left-to-right double-and-add over the
    signed window digits of k modulo the group order.

    Args:
        point (JacobianPoint): The point to multiply.
        k (U512 or int): The scalar. It does not need to be reduced.

    Returns:
        JacobianPoint: The product. If k is a multiple of the group order, the
            point at infinity.
    """
    k = U512(k) % curve.N

    # Multiples 0*point through (2^(w-1) - 1)*point. Only the odd entries are
    # looked up.
    precomp = [JacobianPoint.identity()]
    for i in range(1, 1 << (curve.WindowSize - 1)):
        precomp.append(precomp[i - 1].add(point))

    digits = signedWindowDigits(k)

    result = JacobianPoint.identity()
    for d in reversed(digits):
        result = result.double()
        if d == 0:
            continue
        if d > 0:
            result = result.add(precomp[d])
        else:
            result = result.add(precomp[-d].negate())
    return result
