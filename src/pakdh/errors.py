class PAKDHError(Exception):
    pass

class ConfigurationError(PAKDHError):
    """The password is missing or empty, or no group is defined for the
    requested modulus size."""
class PreconditionError(PAKDHError):
    """A required argument was absent, empty, or of the wrong type. This is
    a bug in the caller, and retrying will not help."""

class ProtocolViolation(PAKDHError):
    """The peer sent something no honest peer can produce. Abort the
    exchange before deriving any keys."""
class InvalidExchangeValue(ProtocolViolation):
    """A received blinded value was zero, negative, or not valid hex."""

class InternalInvariantError(PAKDHError):
    """A primitive broke its output contract (wrong hash width, short
    entropy read). Never recoverable."""
class EntropyError(InternalInvariantError):
    pass

class SessionError(PAKDHError):
    pass
class OnlyCallStartOnce(SessionError):
    """start() may only be called once. Re-using a PAKDH session is likely
    to reveal the password or the derived key."""
class OnlyCallFinishOnce(SessionError):
    """finish() may only be called once. Re-using a PAKDH session is likely
    to reveal the password or the derived key."""
class OffSides(SessionError):
    """I received a message from someone on the same side that I'm on: I was
    expecting the opposite side."""
class ReflectionThwarted(SessionError):
    """Someone tried to reflect our message back to us."""
class BadConfirmation(SessionError):
    """The peer's confirmation value does not match ours: the passwords (or
    identities) differ, or the exchange was tampered with."""
class NotVerified(SessionError):
    """The session key is only available after verify() succeeds."""
class OnlyCallVerifyOnce(SessionError):
    """verify() may only be called once. Allowing retries would let the
    caller test guesses against our confirmation value."""
class CalledTooEarly(SessionError):
    """start(), finish() and verify() must be called in that order."""
class ExchangeFailed(SessionError):
    """An earlier step of this exchange was rejected. Start a new one."""
