# Authors:
#   Dave Baggett (Arcode Corporation)
#
# See the LICENSE file for legal information regarding use of this file.

"""X.509 cert parsing, implemented using pyasn1."""
from pyasn1.type import tag, namedtype, namedval, univ, char, useful
from pyasn1.codec.der import decoder as der_decoder
from pyasn1.codec.der import encoder as der_encoder
from pyasn1 import error

from .constants import GeneralNameType
from . import generalnames
from .oids import OIDS, oid2str

#
# ASN.1 data structures for X509.
#
# See RFC 5280 for (a lot) more details. Size constraints are omitted: an
# empty string or list must still decode.
#

def _rawString(string_type):
    "An OCTET STRING carrying the tag of string_type."
    return univ.OctetString().subtype(
        implicitTag=tag.Tag(
            tag.tagClassUniversal,
            tag.tagFormatSimple,
            string_type.tagSet.baseTag.tagId))

#
# The string alternatives are declared as OCTET STRINGs carrying the universal
# tag of each string type, so the content octets reach us untouched instead of
# being decoded (and possibly rejected) as text.
#
class DirectoryString(univ.Choice):
    componentType = namedtype.NamedTypes(
        namedtype.NamedType('teletexString', _rawString(char.TeletexString)),
        namedtype.NamedType('printableString', _rawString(char.PrintableString)),
        namedtype.NamedType('universalString', _rawString(char.UniversalString)),
        namedtype.NamedType('utf8String', _rawString(char.UTF8String)),
        namedtype.NamedType('bmpString', _rawString(char.BMPString)),
        namedtype.NamedType('ia5String', _rawString(char.IA5String))
        )

    ENCODINGS = {
        'printableString': 'ascii',
        'ia5String': 'ascii',
        'utf8String': 'utf8',
        'teletexString': 'x500-teletex',
        'universalString': 'x500-universal',
        'bmpString': 'x500-bmp',
        }

    def getStringAndEncoding(self):
        """
        Return the raw content octets of the chosen string and a label for
        its encoding.

        The octets are exactly what the certificate carries: a BMPString is
        returned as UTF-16BE, a UniversalString as UTF-32BE. Nothing is
        normalized.
        """
        string_type = self.getName()
        return (self.getComponent().asOctets(),
                self.ENCODINGS.get(string_type, 'x500-unknown'))

class AttributeType(univ.ObjectIdentifier):
    pass

class AttributeValue(univ.Any):
    pass

class AttributeTypeAndValue(univ.Sequence):
    componentType = namedtype.NamedTypes(
        namedtype.NamedType('type', AttributeType()),
        namedtype.NamedType('value', AttributeValue())
        )

class RelativeDistinguishedName(univ.SetOf):
    componentType = AttributeTypeAndValue()

class RDNSequence(univ.SequenceOf):
    componentType = RelativeDistinguishedName()

class Name(univ.Choice):
    componentType = namedtype.NamedTypes(
        namedtype.NamedType('rdnSequence', RDNSequence())
        )

class AlgorithmIdentifier(univ.Sequence):
    #
    # The algorithm parameter is generally supposed to be NULL, but rather than
    # specify univ.Null here, we just allow Any, so a malformed cert will still
    # parse.
    #
    componentType = namedtype.NamedTypes(
        namedtype.NamedType('algorithm', univ.ObjectIdentifier()),
        namedtype.OptionalNamedType('parameters', univ.Any())
        )

class Extension(univ.Sequence):
    componentType = namedtype.NamedTypes(
        namedtype.NamedType('extnID', univ.ObjectIdentifier()),
        namedtype.DefaultedNamedType('critical', univ.Boolean(False)),
        namedtype.NamedType('extnValue', univ.OctetString())
        )

    def extnID(self):
        return self.getComponentByName('extnID')

    def isCritical(self):
        return bool(self.getComponentByName('critical'))

    def extnValue(self):
        return self.getComponentByName('extnValue').asOctets()

    def extnName(self):
        oidstr = oid2str(self.extnID())
        return OIDS.get(oidstr, oidstr)

class Extensions(univ.SequenceOf):
    componentType = Extension()

class SubjectPublicKeyInfo(univ.Sequence):
    componentType = namedtype.NamedTypes(
        namedtype.NamedType('algorithm', AlgorithmIdentifier()),
        namedtype.NamedType('subjectPublicKey', univ.BitString())
        )

class UniqueIdentifier(univ.BitString):
    pass

class Time(univ.Choice):
    componentType = namedtype.NamedTypes(
        namedtype.NamedType('utcTime', useful.UTCTime()),
        namedtype.NamedType('generalTime', useful.GeneralizedTime())
        )

class Validity(univ.Sequence):
    componentType = namedtype.NamedTypes(
        namedtype.NamedType('notBefore', Time()),
        namedtype.NamedType('notAfter', Time())
        )

class CertificateSerialNumber(univ.Integer):
    pass

class Version(univ.Integer):
    namedValues = namedval.NamedValues(
        ('v1', 0), ('v2', 1), ('v3', 2)
        )

class TBSCertificate(univ.Sequence):
    componentType = namedtype.NamedTypes(
        namedtype.DefaultedNamedType(
            'version',
            Version('v1',
                    tagSet=Version.tagSet.tagExplicitly(
                    tag.Tag(tag.tagClassContext,
                            tag.tagFormatSimple,
                            0)))),
        namedtype.NamedType('serialNumber', CertificateSerialNumber()),
        namedtype.NamedType('signature', AlgorithmIdentifier()),
        namedtype.NamedType('issuer', Name()),
        namedtype.NamedType('validity', Validity()),
        namedtype.NamedType('subject', Name()),
        namedtype.NamedType(
            'subjectPublicKeyInfo',
            SubjectPublicKeyInfo()),
        namedtype.OptionalNamedType(
            'issuerUniqueID',
            UniqueIdentifier().subtype(
                implicitTag=tag.Tag(
                    tag.tagClassContext,
                    tag.tagFormatSimple,
                    1))),
        namedtype.OptionalNamedType(
            'subjectUniqueID',
            UniqueIdentifier().subtype(
                implicitTag=tag.Tag(
                    tag.tagClassContext,
                    tag.tagFormatSimple, 2))),
        namedtype.OptionalNamedType(
            'extensions',
            Extensions().subtype(
                explicitTag=tag.Tag(
                    tag.tagClassContext,
                    tag.tagFormatSimple,
                    3)))
        )

class Certificate(univ.Sequence):
    componentType = namedtype.NamedTypes(
        namedtype.NamedType('tbsCertificate', TBSCertificate()),
        namedtype.NamedType('signatureAlgorithm', AlgorithmIdentifier()),
        namedtype.NamedType('signatureValue', univ.BitString())
        )

class AnotherName(univ.Sequence):
    componentType = namedtype.NamedTypes(
        namedtype.NamedType('type-id', univ.ObjectIdentifier()),
        namedtype.NamedType(
            'value',
            univ.Any().subtype(
                explicitTag=tag.Tag(
                    tag.tagClassContext,
                    tag.tagFormatSimple,
                    0)))
        )

#
# The IA5String alternatives are declared as OCTET STRINGs: the implicit tag
# is all that is on the wire, and this way the content octets reach us
# untouched, NULs and 8-bit bytes included.
#
class GeneralName(univ.Choice):
    componentType = namedtype.NamedTypes(
        namedtype.NamedType(
            'otherName',
            AnotherName().subtype(
                implicitTag=tag.Tag(
                    tag.tagClassContext,
                    tag.tagFormatConstructed,
                    0x0))),

        namedtype.NamedType(
            'rfc822Name',
            univ.OctetString().subtype(
                implicitTag=tag.Tag(
                    tag.tagClassContext,
                    tag.tagFormatSimple,
                    0x1))),

        namedtype.NamedType(
            'dNSName',
            univ.OctetString().subtype(
                implicitTag=tag.Tag(
                    tag.tagClassContext,
                    tag.tagFormatSimple,
                    0x2))),

        namedtype.NamedType(
            'x400Address',
            univ.Sequence().subtype(
                implicitTag=tag.Tag(
                    tag.tagClassContext,
                    tag.tagFormatConstructed,
                    0x3))),

        namedtype.NamedType(
            'directoryName',
            Name().subtype(
                explicitTag=tag.Tag(
                    tag.tagClassContext,
                    tag.tagFormatConstructed,
                    0x4))),

        namedtype.NamedType(
            'ediPartyName',
            univ.Sequence().subtype(
                implicitTag=tag.Tag(
                    tag.tagClassContext,
                    tag.tagFormatConstructed,
                    0x5))),

        namedtype.NamedType(
            'uniformResourceIdentifier',
            univ.OctetString().subtype(
                implicitTag=tag.Tag(
                    tag.tagClassContext,
                    tag.tagFormatSimple,
                    0x6))),

        namedtype.NamedType(
            'iPAddress',
            univ.OctetString().subtype(
                implicitTag=tag.Tag(
                    tag.tagClassContext,
                    tag.tagFormatSimple,
                    0x7))),

        namedtype.NamedType(
            'registeredID',
            univ.ObjectIdentifier().subtype(
                implicitTag=tag.Tag(
                    tag.tagClassContext,
                    tag.tagFormatSimple,
                    0x8))),
        )

class GeneralNames(univ.SequenceOf):
    componentType = GeneralName()

class SubjectAltName(GeneralNames):
    pass

# end of ASN.1 data structures

class _X509(object):
    """This class represents an X.509 certificate decoded with pyasn1.

    @type cert: L{Certificate}
    @ivar cert: The decoded ASN.1 certificate
    """
    def parseBinary(self, binary):
        "Parse the ASN.1 DER data for the cert."
        try:
            self.cert = der_decoder.decode(
                bytes(binary), asn1Spec=Certificate())[0]
        except error.PyAsn1Error as e:
            raise SyntaxError("could not decode certificate: %s" % e)

    def _tbs(self):
        return self.cert.getComponentByName('tbsCertificate')

    def extensions(self):
        """
        Return a list of dicts, one per extension, in certificate order. Each
        has 'name', 'oid', 'critical' and the undecoded 'extnValue' bytes.
        """
        E = []
        extensions = self._tbs().getComponentByName(
            'extensions', default=None, instantiate=False)
        if extensions is None:
            return E
        for ext in extensions:
            E.append({
                'name': ext.extnName(),
                'oid': oid2str(ext.extnID()),
                'critical': ext.isCritical(),
                'extnValue': ext.extnValue(),
                })
        return E

    def _getNameEntries(self, field):
        "Return a list of (oid string, AttributeValue) pairs in encoded order."
        name = self._tbs().getComponentByName(field)
        entries = []
        for rdn in name.getComponent():
            for atv in rdn:
                entries.append(
                    (oid2str(atv.getComponentByName('type')),
                     atv.getComponentByName('value')))
        return entries

    def getSubjectEntries(self):
        return self._getNameEntries('subject')

    def _getNameField(self, field):
        "Return a dict with information about the named field."
        D = {}
        for oidstr, value in self._getNameEntries(field):
            try:
                s, encoding = decodeDirectoryString(value)
            except SyntaxError:
                continue
            name = OIDS.get(oidstr, oidstr)
            D[name] = s.data
            D[name + ":encoding"] = encoding
            D[name + ":oid"] = oidstr
        return D

    def getIssuer(self):
        "Return a dict with information about the certificate issuer."
        return self._getNameField("issuer")

    def getSubject(self):
        "Return a dict with information about the certificate subject."
        return self._getNameField("subject")


def decodeDirectoryString(value):
    """Decode an attribute value into an L{IdentityString} and its encoding
    label.

    Raises SyntaxError if the value isn't one of the DirectoryString types.
    """
    try:
        ds, rest = der_decoder.decode(
            value.asOctets(), asn1Spec=DirectoryString())
    except error.PyAsn1Error as e:
        raise SyntaxError("attribute value is not a directory string: %s" % e)
    if rest:
        raise SyntaxError("trailing data after attribute value")
    data, encoding = ds.getStringAndEncoding()
    return generalnames.IdentityString(data), encoding


def decodeGeneralNames(data):
    """Decode the DER value of a subjectAltName/issuerAltName extension into
    a list of L{tlshostname.generalnames.GeneralName} in encoded order.

    Raises SyntaxError if the value can't be decoded.
    """
    try:
        names, rest = der_decoder.decode(bytes(data), asn1Spec=SubjectAltName())
    except error.PyAsn1Error as e:
        raise SyntaxError("could not decode GeneralNames: %s" % e)
    if rest:
        raise SyntaxError("trailing data after GeneralNames")

    result = []
    for gn in names:
        kind = gn.getName()
        component = gn.getComponent()
        if kind in GeneralNameType.STRING_TYPES:
            value = generalnames.IdentityString(component.asOctets())
        elif kind == GeneralNameType.iPAddress:
            value = component.asOctets()
        elif kind == GeneralNameType.registeredID:
            value = oid2str(component)
        elif kind == GeneralNameType.otherName:
            value = (oid2str(component.getComponentByName('type-id')),
                     component.getComponentByName('value').asOctets())
        else:
            # directoryName, x400Address, ediPartyName
            try:
                value = der_encoder.encode(component)
            except error.PyAsn1Error as e:
                raise SyntaxError("could not re-encode %s: %s" % (kind, e))
        result.append(generalnames.GeneralName(kind, value))
    return result
