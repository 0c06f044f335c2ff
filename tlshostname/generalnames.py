# Authors:
#   Dave Baggett (Arcode Corporation)
#
# See the LICENSE file for legal information regarding use of this file.

"""Decoded identity values taken from a certificate."""

from .constants import GeneralNameType


class IdentityString(object):
    """An identity string as it was encoded in the certificate.

    @type data: bytes
    @ivar data: The raw content octets of the ASN.1 string.

    @type length: int
    @ivar length: The length declared by the ASN.1 encoding. A C
    implementation reading C{data} as a NUL-terminated string sees only
    the bytes before the first NUL, so a value whose declared length is
    larger than that was crafted to be read two different ways (e.g.
    C{"example.com\\0.evil.com"}).
    """
    __slots__ = ("data", "length")

    def __init__(self, data, length=None):
        self.data = bytes(data)
        self.length = len(self.data) if length is None else length

    def terminatedLength(self):
        "Return the length of the data up to (not including) the first NUL."
        nul = self.data.find(b"\0")
        if nul < 0:
            return len(self.data)
        return nul

    def isMalformed(self):
        "Return True if the declared and NUL-terminated lengths disagree."
        return self.length != self.terminatedLength()

    def matches(self, hostname):
        """Compare with a hostname, ignoring case of ASCII letters only.

        @type hostname: bytes
        """
        value = self.data[:self.terminatedLength()]
        return value.lower() == hostname.lower()

    def __eq__(self, other):
        if not isinstance(other, IdentityString):
            return NotImplemented
        return self.data == other.data and self.length == other.length

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((self.data, self.length))

    def __repr__(self):
        return "IdentityString(%r, %d)" % (self.data, self.length)


class GeneralName(object):
    """One entry of a subjectAltName (or issuerAltName) extension.

    C{kind} is one of the L{GeneralNameType} names. For the IA5String
    alternatives (rfc822Name, dNSName, uniformResourceIdentifier) C{value}
    is an L{IdentityString}; for iPAddress it is the raw address bytes; for
    registeredID an OID string; the structured alternatives keep their DER
    encoding as bytes.
    """
    __slots__ = ("kind", "value")

    def __init__(self, kind, value):
        self.kind = kind
        self.value = value

    def isDNSName(self):
        return self.kind == GeneralNameType.dNSName

    def __repr__(self):
        return "GeneralName(%s, %r)" % (self.kind, self.value)
