# Authors:
#   Trevor Perrin
#   Dave Baggett (Arcode Corporation)
#
# See the LICENSE file for legal information regarding use of this file.

"""Exception classes raised by the post-handshake checker.

The hostname validator itself never raises, and certificate parsing raises
SyntaxError; these come from L{tlshostname.checker.Checker}.
"""


class TLSError(Exception):
    """Base class for all exceptions raised by this package."""

    def __str__(self):
        return repr(self)


class TLSAuthenticationError(TLSError):
    """The handshake succeeded, but the other party's authentication
    was inadequate.

    This exception will only be raised when a
    L{tlshostname.checker.Checker} has been passed to a handshake function.
    The Checker will be invoked once the handshake completes, and if
    the Checker objects to how the other party authenticated, a
    subclass of this exception will be raised.
    """
    pass


class TLSNoAuthenticationError(TLSAuthenticationError):
    """The Checker was expecting the other party to authenticate with a
    certificate chain, but this did not occur."""
    pass


class TLSAuthenticationTypeError(TLSAuthenticationError):
    """The Checker was expecting the other party to authenticate with a
    different type of certificate chain."""
    pass


class TLSValidationError(TLSAuthenticationError):
    """The Checker has determined that the other party's certificate
    is not acceptable.

    @type info: dict
    @ivar info: The validation-info dict describing the failure.
    """

    def __init__(self, msg, info=None):
        TLSAuthenticationError.__init__(self, msg)
        self.msg = msg
        self.info = info

    def __str__(self):
        return self.msg


class TLSHostnameError(TLSValidationError):
    """The end-entity certificate does not carry the expected hostname,
    or its identity fields could not be trusted."""
    pass
