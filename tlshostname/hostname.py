# Authors:
#   Dave Baggett (Arcode Corporation)
#
# See the LICENSE file for legal information regarding use of this file.

"""Hostname validation: does a certificate identify the host we meant to
reach?

As described in RFC 6125, the identities in the subjectAltName extension are
tried first. Only if the certificate has no such extension is the (legacy)
commonName of the subject consulted.

Names are compared exactly, ignoring the case of ASCII letters. There is no
wildcard matching, no IP address matching and no IDN processing.

Any identity string whose ASN.1 length disagrees with its length as a
NUL-terminated string makes the whole certificate unacceptable: that is the
shape of the C{"www.bank.com\\0.evil.com"} attack on C implementations.
"""

import logging

from .constants import HostnameValidationResult

logger = logging.getLogger(__name__)


def _hostnameBytes(hostname):
    if isinstance(hostname, (bytes, bytearray)):
        return bytes(hostname)
    return hostname.encode("utf-8")


class SubjectAlternativeNameMatcher(object):
    """Looks for the hostname among the dNSName entries of the certificate's
    subjectAltName extension."""

    def match(self, hostname, cert):
        """
        Returns MatchFound if a match was found.
        Returns MatchNotFound if no matches were found.
        Returns MalformedCertificate if any of the names had a NUL character
        embedded in it.
        Returns NoSubjectAltNamePresent if the extension is not present in the
        certificate, or can't be decoded.
        """
        hostname = _hostnameBytes(hostname)
        with cert.subjectAltNames() as names:
            if names is None:
                logger.debug("no subjectAltName extension")
                return HostnameValidationResult.NoSubjectAltNamePresent

            for name in names:
                if not name.isDNSName():
                    continue
                dnsName = name.value

                # Make sure there isn't an embedded NUL character in the name
                if dnsName.isMalformed():
                    logger.debug("malformed dNSName %r", dnsName)
                    return HostnameValidationResult.MalformedCertificate

                if dnsName.matches(hostname):
                    logger.debug("dNSName %r matches", dnsName)
                    return HostnameValidationResult.MatchFound

        return HostnameValidationResult.MatchNotFound


class CommonNameMatcher(object):
    """Compares the hostname with the first commonName of the certificate's
    subject."""

    def match(self, hostname, cert):
        """
        Returns MatchFound if a match was found.
        Returns MatchNotFound if no matches were found.
        Returns MalformedCertificate if the Common Name had a NUL character
        embedded in it.
        Returns Error if the Common Name could not be extracted.
        """
        hostname = _hostnameBytes(hostname)
        value = cert.getSubjectCommonName()
        if value is None:
            logger.debug("no commonName in subject")
            return HostnameValidationResult.Error

        try:
            commonName = cert.decodeAttributeValue(value)
        except SyntaxError as e:
            logger.debug("could not extract commonName: %s", e)
            return HostnameValidationResult.Error

        if commonName.isMalformed():
            logger.debug("malformed commonName %r", commonName)
            return HostnameValidationResult.MalformedCertificate

        if commonName.matches(hostname):
            return HostnameValidationResult.MatchFound
        return HostnameValidationResult.MatchNotFound


class IdentityValidator(object):
    """Validates a server's identity by looking for the expected hostname in
    its certificate.

    Instances hold no per-call state; one validator can be shared.
    """

    def __init__(self, subjectAltNameMatcher=None, commonNameMatcher=None):
        self.subjectAltNameMatcher = \
            subjectAltNameMatcher or SubjectAlternativeNameMatcher()
        self.commonNameMatcher = commonNameMatcher or CommonNameMatcher()

    def validate(self, hostname, cert):
        """
        Check hostname against cert.

        @type hostname: str or bytes
        @param hostname: The name the client connected to.

        @type cert: L{tlshostname.x509.X509}
        @param cert: The server's (end-entity) certificate.

        @rtype: int
        @return: One of MatchFound, MatchNotFound, MalformedCertificate or
        Error from L{HostnameValidationResult}. Only MatchFound means the
        certificate is acceptable.
        """
        if not hostname or cert is None:
            return HostnameValidationResult.Error

        try:
            hostname = _hostnameBytes(hostname)

            # First try the subjectAltName extension
            result = self.subjectAltNameMatcher.match(hostname, cert)
            if result == HostnameValidationResult.NoSubjectAltNamePresent:
                # Extension was not found: try the Common Name
                result = self.commonNameMatcher.match(hostname, cert)
        except Exception:
            logger.exception("unexpected error validating hostname %r",
                             hostname)
            return HostnameValidationResult.Error

        return result


_validator = IdentityValidator()

def validate_hostname(hostname, cert):
    """Validate hostname against cert with the default matchers. See
    L{IdentityValidator.validate}."""
    return _validator.validate(hostname, cert)
