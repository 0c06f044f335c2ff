import unittest

from tlshostname import X509, X509CertChain, Checker, HostnameValidationResult
from tlshostname.errors import TLSHostnameError, TLSNoAuthenticationError, \
    TLSAuthenticationTypeError, TLSAuthenticationError

import certfactory as cf


def makeChain(*dnsNames):
    der = cf.certificate(cf.name(cf.commonName("legacy.example.com")),
                         [cf.subjectAltName(*[cf.dnsName(n) for n in dnsNames])])
    return X509CertChain([X509(der, pem=False)])


class FakeSession(object):
    def __init__(self, serverCertChain=None, clientCertChain=None):
        self.serverCertChain = serverCertChain
        self.clientCertChain = clientCertChain


class FakeConnection(object):
    def __init__(self, session, client=True, resumed=False):
        self.session = session
        self._client = client
        self.resumed = resumed


class TestChecker(unittest.TestCase):
    def test_match(self):
        checker = Checker("www.example.com")
        info = checker.check(makeChain("www.example.com"))
        self.assertTrue(info["success"])
        self.assertEqual(info["result"], HostnameValidationResult.MatchFound)
        self.assertEqual(info["cert_subject"], "CN=legacy.example.com")
        self.assertIs(checker.getValidationInfo(), info)

    def test_single_certificate(self):
        chain = makeChain("www.example.com")
        info = Checker("www.example.com").check(chain.getEndEntity())
        self.assertTrue(info["success"])

    def test_mismatch_raises(self):
        checker = Checker("legacy.example.com")
        try:
            checker.check(makeChain("www.example.com"))
        except TLSHostnameError as e:
            self.assertFalse(e.info["success"])
            self.assertEqual(e.info["result_text"], "MatchNotFound")
            self.assertIsInstance(e, TLSAuthenticationError)
        else:
            self.fail("TLSHostnameError not raised")
        self.assertEqual(checker.getValidationInfo()["result"],
                         HostnameValidationResult.MatchNotFound)

    def test_malformed_raises(self):
        checker = Checker("www.example.com")
        self.assertRaises(TLSHostnameError, checker.check,
                          makeChain(b"www.example.com\0.evil.com"))

    def test_callback_can_accept(self):
        seen = []

        def callback(info):
            seen.append(dict(info))
            info["success"] = True
            return info

        checker = Checker("other.example.com", callback=callback,
                          callbackInfo={"tag": 1})
        info = checker.check(makeChain("www.example.com"))
        self.assertTrue(info["success"])
        self.assertEqual(seen[0]["callback_info"], {"tag": 1})
        self.assertFalse(seen[0]["success"])

    def test_callback_returning_none_keeps_failure(self):
        calls = []
        checker = Checker("other.example.com", callback=calls.append)
        self.assertRaises(TLSHostnameError, checker.check,
                          makeChain("www.example.com"))
        self.assertEqual(len(calls), 1)

    def test_callback_not_called_on_success(self):
        def callback(info):
            raise AssertionError("callback called")

        Checker("www.example.com", callback=callback).check(
            makeChain("www.example.com"))

    def test_skip_hostname_check(self):
        checker = Checker("other.example.com", skipHostnameCheck=True)
        info = checker.check(makeChain("www.example.com"))
        self.assertTrue(info["success"])
        self.assertEqual(info["result"], None)

    def test_missing_hostname_fails(self):
        self.assertRaises(TLSHostnameError, Checker().check,
                          makeChain("www.example.com"))

    def test_empty_chain(self):
        self.assertRaises(TLSNoAuthenticationError, Checker("a").check,
                          X509CertChain())

    def test_connection(self):
        connection = FakeConnection(
            FakeSession(serverCertChain=makeChain("www.example.com")))
        checker = Checker("www.example.com")
        checker(connection)
        self.assertTrue(checker.getValidationInfo()["success"])

    def test_connection_server_side_checks_client_chain(self):
        connection = FakeConnection(
            FakeSession(serverCertChain=makeChain("www.example.com"),
                        clientCertChain=makeChain("client.example.com")),
            client=False)
        Checker("client.example.com")(connection)
        self.assertRaises(TLSHostnameError,
                          Checker("www.example.com"), connection)

    def test_resumed_session_is_not_checked(self):
        connection = FakeConnection(
            FakeSession(serverCertChain=makeChain("www.example.com")),
            resumed=True)
        checker = Checker("other.example.com")
        checker(connection)
        self.assertEqual(checker.getValidationInfo(), None)

        checker = Checker("other.example.com", checkResumedSession=True)
        self.assertRaises(TLSHostnameError, checker, connection)

    def test_connection_without_chain(self):
        connection = FakeConnection(FakeSession())
        self.assertRaises(TLSNoAuthenticationError,
                          Checker("www.example.com"), connection)

    def test_connection_with_unsupported_chain(self):
        connection = FakeConnection(FakeSession(serverCertChain="openpgp"))
        self.assertRaises(TLSAuthenticationTypeError,
                          Checker("www.example.com"), connection)


if __name__ == "__main__":
    unittest.main()
