# Authors:
#   Dave Baggett (Arcode Corporation)
#
# See the LICENSE file for legal information regarding use of this file.
#
# OIDs relevant to locating identities in an X.509 certificate.
#
# See: http://www.alvestrand.no/cgi-bin/hta/oidwordsearch
#

def oid2str(oid):
    "Convert an OID tuple to an OID string."
    return "{ %s }" % ".".join([str(arc) for arc in oid])

OIDS = {
    # Subject/issuer name attributes:
    "{ 0.9.2342.19200300.100.1.25 }": "domainComponent", # RFC 4514
    "{ 0.9.2342.19200300.100.1.1 }": "userId", # RFC 4514
    "{ 1.2.840.113549.1.9.1 }": "emailAddress",
    "{ 2.5.4.3 }": "commonName",
    "{ 2.5.4.4 }": "surname",
    "{ 2.5.4.5 }": "serialNumber",
    "{ 2.5.4.6 }": "countryName",
    "{ 2.5.4.7 }": "localityName",
    "{ 2.5.4.8 }": "stateOrProvinceName",
    "{ 2.5.4.9 }": "streetAddress",
    "{ 2.5.4.10 }": "organizationName",
    "{ 2.5.4.11 }": "organizationalUnitName",
    "{ 2.5.4.42 }": "givenName",

    # Certificate extensions:
    "{ 2.5.29.14 }": "subjectKeyIdentifier",
    "{ 2.5.29.15 }": "keyUsage",
    "{ 2.5.29.17 }": "subjectAltName",
    "{ 2.5.29.18 }": "issuerAltName",
    "{ 2.5.29.19 }": "basicConstraints",
    "{ 2.5.29.30 }": "nameConstraints",
    "{ 2.5.29.31 }": "cRLDistributionPoints",
    "{ 2.5.29.32 }": "certificatePolicies",
    "{ 2.5.29.35 }": "authorityKeyIdentifier",
    "{ 2.5.29.37 }": "extKeyUsage",
    "{ 1.3.6.1.5.5.7.1.1 }": "authorityInfoAccess",

    # Signature and public key algorithms:
    "{ 1.2.840.113549.1.1.1 }": "rsaEncryption",
    "{ 1.2.840.113549.1.1.5 }": "sha1WithRSAEncryption",
    "{ 1.2.840.113549.1.1.11 }": "sha256WithRSAEncryption",
    "{ 1.2.840.113549.1.1.12 }": "sha384WithRSAEncryption",
    "{ 1.2.840.113549.1.1.13 }": "sha512WithRSAEncryption",
    "{ 1.2.840.10045.2.1 }": "id-ecPublicKey",
    "{ 1.2.840.10045.4.3.2 }": "ecdsa-with-SHA256",
    "{ 1.2.840.10045.4.3.3 }": "ecdsa-with-SHA384",
}

OID_short_names = {
    "{ 2.5.4.10 }": "O", # organizationName
    "{ 2.5.4.11 }": "OU", # organizationalUnitName
    "{ 2.5.4.3 }": "CN", # commonName
    "{ 2.5.4.4 }": "SN", # surname
    "{ 2.5.4.42 }": "GN", # givenName
    "{ 2.5.4.6 }": "C", # countryName
    "{ 2.5.4.7 }": "L", # localityName
    "{ 2.5.4.8 }": "ST", # stateOrProvinceName
    "{ 2.5.4.9 }": "STREET", # streetAddress
    "{ 0.9.2342.19200300.100.1.25 }": "DC", # domainComponent
    "{ 0.9.2342.19200300.100.1.1 }": "UID" # userId
}
