import os, logging
from .errors import ConfigurationError, PreconditionError, InvalidExchangeValue
from .oracles import H3, H4, H5, BLINDING_ORACLES
from .params import lookup, DEFAULT_GROUP
from .util import number_to_hex

logger = logging.getLogger(__name__)

# RFC 5683, with Ra, Rb fresh 384-bit exponents:
#
# A: X = H1(A|B|PW) * g^Ra                        -> B
#  B: Xab = X / H1(A|B|PW)
#  B: Y = H2(A|B|PW) * g^Rb
#  B: AB = g^(Xab * g^Rb)
#  B: S1 = H3(A|B|PW|Xab|g^Rb|AB)                 -> A, together with Y
# A: Yba = Y / H2(A|B|PW)
# A: AB = g^(g^Ra * Yba)
# A: check S1, then S2 = H4(A|B|PW|g^Ra|Yba|AB)   -> B
#  B: check S2
# both: K = H5(PW|g^Ra|g^Rb|AB)
#
# The multiplications and divisions by H1/H2 are plain integer arithmetic,
# not arithmetic mod N. AB raises g to the product of the two *public*
# values, and K leaves the identities out while S1/S2 include them.
# Interoperating peers depend on all three.

def _to_text(value, name, exc):
    if isinstance(value, bytes):
        try:
            value = value.decode("utf-8")
        except UnicodeDecodeError:
            raise exc("%s must be valid UTF-8" % name)
    if not isinstance(value, str):
        raise exc("%s must be str or bytes, not %s"
                  % (name, type(value).__name__))
    if not value:
        raise exc("missing %s" % name)
    return value

def _check_number(value, name, signed=False):
    if value is None:
        raise PreconditionError("missing %s" % name)
    if isinstance(value, bool) or not isinstance(value, int):
        raise PreconditionError("%s must be an int, not %s"
                                % (name, type(value).__name__))
    if value < 0 and not signed:
        raise PreconditionError("%s must not be negative" % name)
    return value

def _check_oracle(oracle):
    if oracle not in BLINDING_ORACLES:
        raise PreconditionError("oracle must be H1 or H2, not %r" % (oracle,))
    return oracle


class Ephemeral:
    """One side's secret exponent R and public value g^R mod N.

    The owner keeps this for the lifetime of a single exchange and then
    calls erase(), or uses it as a context manager. R must never be
    stored or reused.
    """
    def __init__(self, exponent, public):
        self._exponent = exponent
        self.public = public

    @property
    def exponent(self):
        if self._exponent is None:
            raise ValueError("ephemeral secret has been erased")
        return self._exponent

    @property
    def erased(self):
        return self._exponent is None

    def erase(self):
        # drops our reference; Python ints cannot be zeroed in place
        self._exponent = None

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.erase()
        return False

    def __repr__(self):
        return "<Ephemeral%s>" % (" erased" if self.erased else "")


class PAKDH:
    "This class computes the values of one PAK-DH exchange."

    def __init__(self, password, group=DEFAULT_GROUP, entropy_f=os.urandom):
        if password is None:
            raise ConfigurationError("missing password")
        self.pw = _to_text(password, "password", ConfigurationError)
        self.group = lookup(group)
        if not callable(entropy_f):
            raise ConfigurationError("entropy_f must be callable")
        self.entropy_f = entropy_f

    def generate_ephemeral(self):
        g = self.group
        r = g.random_exponent(self.entropy_f)
        logger.debug("generated %d-bit ephemeral exponent", g.exponent_size_bits)
        return Ephemeral(r, g.modpow(r))

    def generate_ephemeral_public(self):
        with self.generate_ephemeral() as e:
            return e.public

    def _blinding_factor(self, self_id, peer_id, oracle):
        return oracle(self_id + peer_id + self.pw)

    def compute_blinded(self, self_id, peer_id, public_value, oracle):
        # X = H1(A|B|PW) * g^Ra, Y = H2(A|B|PW) * g^Rb
        self_id = _to_text(self_id, "self_id", PreconditionError)
        peer_id = _to_text(peer_id, "peer_id", PreconditionError)
        public_value = _check_number(public_value, "public_value")
        if public_value == 0:
            # RFC 5683 section 3: X and Y must never be 0 on the wire
            raise PreconditionError("public_value must not be 0")
        oracle = _check_oracle(oracle)
        factor = self._blinding_factor(self_id, peer_id, oracle)
        return self.group.multiply(factor, public_value)

    def recover_peer_public(self, self_id, peer_id, received, oracle):
        # Xab = X / H1(A|B|PW), Yba = Y / H2(A|B|PW)
        self_id = _to_text(self_id, "self_id", PreconditionError)
        peer_id = _to_text(peer_id, "peer_id", PreconditionError)
        received = _check_number(received, "received", signed=True)
        oracle = _check_oracle(oracle)
        if received <= 0:
            # RFC 5683 section 3: reject X (or Y) == 0
            logger.warning("rejecting non-positive blinded value from peer")
            raise InvalidExchangeValue("blinded value must be positive")
        factor = self._blinding_factor(self_id, peer_id, oracle)
        return self.group.divide(received, factor)

    def _check_transcript(self, a, b, gRa, gRb):
        a = _to_text(a, "A", PreconditionError)
        b = _to_text(b, "B", PreconditionError)
        gRa = _check_number(gRa, "gRa")
        gRb = _check_number(gRb, "gRb")
        return a, b, gRa, gRb

    def _transcript_tail(self, gRa, gRb):
        AB = self.group.modpow(self.group.multiply(gRa, gRb))
        return (self.pw + number_to_hex(gRa) + number_to_hex(gRb)
                + number_to_hex(AB))

    def compute_confirmation1(self, a, b, gRa, gRb):
        # S1 = H3(A|B|PW|g^Ra|g^Rb|AB)
        a, b, gRa, gRb = self._check_transcript(a, b, gRa, gRb)
        return H3(a + b + self._transcript_tail(gRa, gRb))

    def compute_confirmation2(self, a, b, gRa, gRb):
        # S2 = H4(A|B|PW|g^Ra|g^Rb|AB)
        a, b, gRa, gRb = self._check_transcript(a, b, gRa, gRb)
        return H4(a + b + self._transcript_tail(gRa, gRb))

    def compute_session_key(self, a, b, gRa, gRb):
        # K = H5(PW|g^Ra|g^Rb|AB), no identities
        a, b, gRa, gRb = self._check_transcript(a, b, gRa, gRb)
        return H5(self._transcript_tail(gRa, gRb))
