# Author: Trevor Perrin
# See the LICENSE file for legal information regarding use of this file.

"""Functions for reading and writing PEM armor."""

import binascii


def _toText(s):
    if isinstance(s, (bytes, bytearray)):
        return bytes(s).decode("ascii")
    return s


def dePem(s, name):
    """Decode a PEM string into a bytearray of its payload.

    The input must contain an appropriate PEM prefix and postfix
    based on the input name string, e.g. for name="CERTIFICATE"::

      -----BEGIN CERTIFICATE-----
      MIIBXDCCAUSgAwIBAgIBADANBgkqhkiG9w0BAQUFADAPMQ0wCwYDVQQDEwRUQUNL
      ...
      KoZIhvcNAQEFBQADAwA5kw==
      -----END CERTIFICATE-----

    The first such PEM block in the input will be found, and its
    payload will be base64 decoded and returned.
    """
    s = _toText(s)
    prefix = "-----BEGIN %s-----" % name
    postfix = "-----END %s-----" % name
    start = s.find(prefix)
    if start == -1:
        raise SyntaxError("Missing PEM prefix")
    end = s.find(postfix, start + len(prefix))
    if end == -1:
        raise SyntaxError("Missing PEM postfix")
    s = s[start + len(prefix):end]
    try:
        return bytearray(binascii.a2b_base64(s))
    except binascii.Error as e:
        raise SyntaxError("Bad PEM payload: %s" % e)


def dePemList(s, name="CERTIFICATE"):
    """Decode a sequence of PEM blocks into a list of bytearrays.

    The input must contain any number of PEM blocks, each with the
    appropriate PEM prefix and postfix based on the input name string,
    e.g. for name="CERTIFICATE"; text outside the blocks (such as the
    comments in a CA bundle) is ignored.

    All such PEM blocks will be found, decoded, and return in an ordered
    list of bytearrays, which may have zero elements if no PEM blocks
    were found.
    """
    s = _toText(s)
    bList = []
    prefix = "-----BEGIN %s-----" % name
    postfix = "-----END %s-----" % name
    while 1:
        start = s.find(prefix)
        if start == -1:
            return bList
        end = s.find(postfix, start + len(prefix))
        if end == -1:
            raise SyntaxError("Missing PEM postfix")
        s2 = s[start + len(prefix):end]
        try:
            bList.append(bytearray(binascii.a2b_base64(s2)))
        except binascii.Error as e:
            raise SyntaxError("Bad PEM payload: %s" % e)
        s = s[end + len(postfix):]


def pem(b, name):
    """Encode a payload bytearray into a PEM string.

    The input will be base64 encoded, then wrapped in a PEM prefix/postfix
    based on the name string, e.g. for name="CERTIFICATE"::

      -----BEGIN CERTIFICATE-----
      MIIBXDCCAUSgAwIBAgIBADANBgkqhkiG9w0BAQUFADAPMQ0wCwYDVQQDEwRUQUNL
      ...
      KoZIhvcNAQEFBQADAwA5kw==
      -----END CERTIFICATE-----
    """
    s1 = binascii.b2a_base64(bytes(b), newline=False).decode("ascii")
    s2 = ""
    while s1:
        s2 += s1[:64] + "\n"
        s1 = s1[64:]
    return "-----BEGIN %s-----\n" % name + s2 + "-----END %s-----\n" % name

