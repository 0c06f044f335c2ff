# Authors:
#   Trevor Perrin
#   Dave Baggett (Arcode Corporation)
#
# See the LICENSE file for legal information regarding use of this file.

"""tlshostname: checks that a server certificate was issued for the
hostname the client meant to reach.

Typical use, with a certificate obtained from the handshake::

    from tlshostname import X509, HostnameValidationResult, validate_hostname

    cert = X509(pemData)
    if validate_hostname("www.example.com", cert) != \\
            HostnameValidationResult.MatchFound:
        abort_connection()

Or pass a L{Checker} to a handshake function that supports post-handshake
checkers; it raises L{TLSHostnameError} unless the names match.
"""

__version__ = "0.1.0"

__all__ = ["X509", "X509CertChain", "Checker",
           "HostnameValidationResult", "IdentityValidator",
           "SubjectAlternativeNameMatcher", "CommonNameMatcher",
           "validate_hostname", "errors"]

from .constants import HostnameValidationResult
from .hostname import IdentityValidator, SubjectAlternativeNameMatcher, \
    CommonNameMatcher, validate_hostname
from .x509 import X509
from .x509certchain import X509CertChain
from .checker import Checker
from .errors import *
from . import errors
