# Authors:
#   Trevor Perrin
#   Dave Baggett (Arcode Corporation) - cert validation code
#
# See the LICENSE file for legal information regarding use of this file.

"""Class representing an X.509 certificate chain."""

from .utils.pem import dePemList
from .x509 import X509


class X509CertChain(object):
    """This class represents a chain of X.509 certificates.

    @type x509List: list
    @ivar x509List: A list of L{tlshostname.x509.X509} instances,
    starting with the end-entity certificate and with every
    subsequent certificate certifying the previous.
    """

    def __init__(self, x509List=None):
        """Create a new X509CertChain.

        @type x509List: list
        @param x509List: A list of L{tlshostname.x509.X509} instances,
        starting with the end-entity certificate and with every
        subsequent certificate certifying the previous.
        """
        if x509List:
            self.x509List = x509List
        else:
            self.x509List = []

    def parsePemList(self, s):
        """Parse a string containing a sequence of PEM certs.

        Raise a SyntaxError if input is malformed.
        """
        x509List = []
        for b in dePemList(s, "CERTIFICATE"):
            x509 = X509()
            x509.parseBinary(b)
            x509List.append(x509)
        self.x509List = x509List
        return self

    def getNumCerts(self):
        """Get the number of certificates in this chain.

        @rtype: int
        """
        return len(self.x509List)

    def getEndEntity(self):
        """Get the end-entity certificate, the one whose identity is checked.

        @rtype: L{tlshostname.x509.X509}
        """
        if self.getNumCerts() == 0:
            raise AssertionError()
        return self.x509List[0]

    def getFingerprint(self, hashfn="sha1"):
        """Get the hex-encoded fingerprint of the end-entity certificate.

        @type hashfn: str
        @param hashfn: Name of hash function to use (e.g., "sha1")
        @rtype: str
        @return: A hex-encoded fingerprint.
        """
        return self.getEndEntity().getFingerprint(hashfn)
