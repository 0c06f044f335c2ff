# Authors:
#   Trevor Perrin
#   Dave Baggett (Arcode Corporation)
#
# See the LICENSE file for legal information regarding use of this file.

"""Class for post-handshake hostname checking."""

import logging

from .constants import HostnameValidationResult
from .hostname import IdentityValidator
from .x509 import X509
from .x509certchain import X509CertChain
from .errors import *

logger = logging.getLogger(__name__)


class Checker:
    """This class is passed to a handshake function to check that the
    other party's certificate was issued for the expected hostname.

    If a handshake function completes successfully, but the Checker
    judges the other party's certificate chain to be missing or its
    identity not to match, a subclass of
    L{tlshostname.errors.TLSAuthenticationError} will be raised.

    The Checker does not verify the chain's signatures or dates; pair it
    with whatever does.
    """

    def __init__(self,
                 hostname=None,
                 checkResumedSession=False,
                 skipHostnameCheck=False,
                 callback=None,
                 callbackInfo=None,
                 validator=None):
        """Create a new Checker instance.

        @type hostname: str
        @param hostname: The name the client connected to, e.g.
        'www.amazon.com'. The end-entity certificate must carry this name.

        @type checkResumedSession: bool
        @param checkResumedSession: If resumed sessions should be
        checked.  This defaults to False, on the theory that if the
        session was checked once, we don't need to bother
        re-checking it.

        @type skipHostnameCheck: bool
        @param skipHostnameCheck: If the hostname check should be skipped.
        Normally it is performed, and the cert will fail unless it matches
        hostname.

        @type callback: callable
        @param callback: Callable to be called if validation fails. Will be
        called with a dictionary of information about the failure and must
        return that dictionary; setting its 'success' key to True allows the
        cert anyway.

        @type callbackInfo: dict
        @param callbackInfo: Extra dict of info to pass to the callback
        function, for application-specific purposes.

        @type validator: L{tlshostname.hostname.IdentityValidator}
        @param validator: Validator to use instead of the default one.
        """
        self.hostname = hostname
        self.checkResumedSession = checkResumedSession
        self.skipHostnameCheck = skipHostnameCheck
        self.callback = callback
        self.callbackInfo = callbackInfo
        self.validator = validator or IdentityValidator()
        self.validation_info = None

    def __call__(self, connection):
        """Check a TLSConnection.

        When a Checker is passed to a handshake function, this will
        be called at the end of the function.

        @param connection: The connection to examine. It must have the
        'resumed' and '_client' attributes and a 'session' with
        'serverCertChain' and 'clientCertChain'.

        @raise tlshostname.errors.TLSAuthenticationError: If the other
        party's certificate chain is missing or doesn't match.
        """
        assert connection

        if not self.checkResumedSession and connection.resumed:
            return

        # Get the cert chain to validate, depending on our role
        if connection._client:
            chain = connection.session.serverCertChain
        else:
            chain = connection.session.clientCertChain

        if isinstance(chain, (X509CertChain, X509)):
            self.check(chain)
        elif chain:
            raise TLSAuthenticationTypeError()
        else:
            raise TLSNoAuthenticationError()

    def check(self, chain):
        """Check a certificate or certificate chain against the hostname.

        @type chain: L{tlshostname.x509certchain.X509CertChain} or
        L{tlshostname.x509.X509}

        @rtype: dict
        @return: The validation info dict.

        @raise tlshostname.errors.TLSHostnameError: If the end-entity
        certificate doesn't match the hostname.
        """
        if isinstance(chain, X509CertChain):
            if chain.getNumCerts() == 0:
                raise TLSNoAuthenticationError()
            cert = chain.getEndEntity()
        else:
            cert = chain

        if self.skipHostnameCheck:
            self.validation_info = {
                "success": True,
                "result": None,
                "result_text": "hostname check skipped",
                "hostname": self.hostname,
                }
            return self.validation_info

        result = self.validator.validate(self.hostname, cert)

        # Only a match passes; anything else fails closed.
        info = {
            "success": result == HostnameValidationResult.MatchFound,
            "result": result,
            "result_text": HostnameValidationResult.toStr(result),
            "hostname": self.hostname,
            "cert_subject": cert.getSubjectAsText(),
            }

        if not info["success"] and self.callback:
            if self.callbackInfo:
                info["callback_info"] = self.callbackInfo
            returned = self.callback(info)
            if returned is not None:
                info = returned

        self.validation_info = info
        if not info.get("success"):
            logger.warning("hostname validation failed for %r: %s",
                           self.hostname, info.get("result_text"))
            raise TLSHostnameError(
                "X.509 hostname validation failure: %s" % info, info)
        return info

    def getValidationInfo(self):
        return self.validation_info
