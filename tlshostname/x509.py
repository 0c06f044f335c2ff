# Authors:
#   Trevor Perrin
#   Google - parsing subject field
#   Dave Baggett (Arcode Corporation) - refactor; OIDs; stuff for cert
#     verification
#
# See the LICENSE file for legal information regarding use of this file.

"""Class representing an X.509 certificate."""

import contextlib
import hashlib
import logging

from .oids import OIDS, OID_short_names
from .utils.pem import dePem
from . import x509pyasn1

logger = logging.getLogger(__name__)


class X509(object):
    """This class represents an X.509 certificate.

    The certificate is decoded once, when it is parsed; the accessors below
    only walk the decoded structure and never modify it, so one instance
    can be validated from several threads at once.

    @type cert_binary: L{bytearray} of unsigned bytes
    @ivar cert_binary: The DER-encoded ASN.1 certificate
    """
    def __init__(self, der=None, pem=True):
        self.x509 = x509pyasn1._X509()
        self.cert_binary = None

        # Parse the cert data
        if der:
            self.parse(der, pem=pem)

    def parse(self, s, pem=True):
        """
        Interpret the provided string as an X.509 certificate. If pem is True
        the data is assumed to be in PEM format; otherwise, the data is assumed
        to be in binary ASN.1 DER format.

        Raises SyntaxError if the data can't be parsed.
        """
        converted = dePem(s, name="CERTIFICATE") if pem else bytearray(s)
        #
        # save the raw DER-format binary data; we'll need it for
        # fingerprinting
        #
        self.x509.parseBinary(converted)
        self.cert_binary = converted
        return self

    def parseBinary(self, b):
        "Parse cert from binary ASN.1 DER data."
        return self.parse(b, pem=False)

    def __str__(self):
        "Return a human-readable string representation of the certificate."
        if self.cert_binary is None:
            return "<empty>"
        return "<X509 %s>" % self.getSubjectAsText()

    def getFingerprint(self, hash="sha1"):
        """
        Using the specified hash function, determine the fingerprint of the
        ASN.1 DER data of the certificate. Note that this applies to the entire
        Certificate type, not the tbsCertificate subtype.
        """
        hasher = hashlib.new(hash)
        hasher.update(self.cert_binary)
        return hasher.hexdigest()

    #
    # Extensions
    #
    def extensions(self):
        """
        Return a list of dicts for the extensions in this certificate, in
        certificate order. Each dict has 'name', 'oid', 'critical' and the
        undecoded 'extnValue'.
        """
        return self.x509.extensions()

    def getExtension(self, name):
        """Return the extension with the given name, or None if it is absent.
        An extension that occurs more than once is ambiguous, and is also
        reported as None."""
        matches = [
            extension
            for extension in self.extensions()
            if extension.get('name') == name
            ]
        if len(matches) == 1:
            return matches[0]
        if matches:
            logger.debug("extension %s occurs %d times", name, len(matches))
        return None

    @contextlib.contextmanager
    def subjectAltNames(self):
        """Decode the subjectAltName extension for the duration of a with
        block::

            with cert.subjectAltNames() as names:
                for name in names:
                    ...

        names is a list of L{tlshostname.generalnames.GeneralName} in
        certificate order, or None if the extension is absent, repeated or
        can't be decoded. The list is emptied when the block exits, however
        it exits.
        """
        names = None
        extension = self.getExtension('subjectAltName')
        if extension is not None:
            try:
                names = x509pyasn1.decodeGeneralNames(extension['extnValue'])
            except SyntaxError as e:
                logger.debug("ignoring undecodable subjectAltName: %s", e)
        try:
            yield names
        finally:
            if names is not None:
                del names[:]

    #
    # Subject and issuer names
    #
    def getSubjectEntries(self):
        """Return the subject's attributes as a list of (name, value) pairs in
        encoded order. Values are still ASN.1 encoded; see
        L{decodeAttributeValue}."""
        return [
            (OIDS.get(oidstr, oidstr), value)
            for oidstr, value in self.x509.getSubjectEntries()
            ]

    def getSubjectCommonName(self):
        """Return the first commonName value of the subject, still encoded, or
        None if the subject has no commonName."""
        for name, value in self.getSubjectEntries():
            if name == 'commonName':
                return value
        return None

    @staticmethod
    def decodeAttributeValue(value):
        """Decode an encoded attribute value into an
        L{tlshostname.generalnames.IdentityString}.

        Raises SyntaxError if the value isn't a directory string.
        """
        return x509pyasn1.decodeDirectoryString(value)[0]

    def getIssuer(self):
        "Returns a dict with information about the certificate issuer."
        return self.x509.getIssuer()

    def getIssuerAsText(self):
        "Returns a string with information about the certificate issuer."
        return self.nameAsText(self.x509.getIssuer())

    def getSubject(self):
        "Returns a dict with information about the certificate subject."
        return self.x509.getSubject()

    def getSubjectAsText(self):
        "Returns a string with information about the certificate subject."
        return self.nameAsText(self.x509.getSubject())

    @classmethod
    def ASN1str2unicode(C, n, encoding):
        "Convert a ASN.1 name string to Unicode, for display only."
        codec = {
            'x500-bmp': 'utf-16-be',
            'x500-universal': 'utf-32-be',
            'x500-teletex': 'latin-1',
            }.get(encoding, 'utf-8')
        return n.decode(codec, 'replace')

    @classmethod
    def nameAsText(C, n):
        """
        Convert a name dict to a single-line string, (somewhat) according to
        RFC 4514. Only meant for messages.
        """
        if not n:
            return ''
        components = [
            (k[0:-4], v)
            for k, v in n.items()
            if k.endswith(':oid')
            ]
        return u','.join([
                "%s=%s" % (
                    OID_short_names.get(v, k),
                    C.escape_dn_chars(
                        C.ASN1str2unicode(
                            n[k],
                            encoding=n.get(k + ":encoding")))
                    )
                for k, v in components
                if k in n
                ])

    #
    # This is taken from python-ldap-2.3.11, used here under a Python License.
    #
    @staticmethod
    def escape_dn_chars(s):
        """Escape all DN special characters found in s with a back-slash (see
        RFC 4514, section 2.4)"""
        if not s:
            return s
        s = s.replace('\\', '\\\\')
        s = s.replace(',', '\\,')
        s = s.replace('+', '\\+')
        s = s.replace('"', '\\"')
        s = s.replace('<', '\\<')
        s = s.replace('>', '\\>')
        s = s.replace(';', '\\;')
        s = s.replace('=', '\\=')
        s = s.replace('\000', '\\\000')
        if s[0] == '#' or s[0] == ' ':
            s = ''.join(('\\', s))
        if s[-1] == ' ':
            s = ''.join((s[:-1], '\\ '))
        return s
