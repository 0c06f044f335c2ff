# Authors:
#   Dave Baggett (Arcode Corporation)
#
# See the LICENSE file for legal information regarding use of this file.

"""Constants used in hostname validation."""


class HostnameValidationResult:
    """Outcome of matching a hostname against a certificate.

    Only MatchFound means the certificate may be accepted for the
    hostname; every other value must be treated as a rejection.
    NoSubjectAltNamePresent is used between the matchers and is never
    returned by L{tlshostname.hostname.validate_hostname}.
    """
    MatchFound = 0
    MatchNotFound = 1
    NoSubjectAltNamePresent = 2
    MalformedCertificate = 3
    Error = 4

    NAMES = {
        MatchFound: "MatchFound",
        MatchNotFound: "MatchNotFound",
        NoSubjectAltNamePresent: "NoSubjectAltNamePresent",
        MalformedCertificate: "MalformedCertificate",
        Error: "Error",
        }

    @classmethod
    def toStr(C, result):
        "Return the name of a result value."
        return C.NAMES.get(result, "unknown(%s)" % result)


class GeneralNameType:
    """Names of the GeneralName CHOICE alternatives (RFC 5280, 4.2.1.6)."""
    otherName = "otherName"
    rfc822Name = "rfc822Name"
    dNSName = "dNSName"
    x400Address = "x400Address"
    directoryName = "directoryName"
    ediPartyName = "ediPartyName"
    uniformResourceIdentifier = "uniformResourceIdentifier"
    iPAddress = "iPAddress"
    registeredID = "registeredID"

    # Alternatives whose value is an IA5String
    STRING_TYPES = frozenset([rfc822Name, dNSName, uniformResourceIdentifier])
