import os, logging, hmac, hashlib
from hkdf import Hkdf
from .errors import (InvalidExchangeValue, OnlyCallStartOnce,
                     OnlyCallFinishOnce, OnlyCallVerifyOnce, OffSides,
                     ReflectionThwarted, BadConfirmation, NotVerified,
                     CalledTooEarly, ExchangeFailed)
from .oracles import H1, H2, COMPACT_BYTES
from .pakdh import PAKDH
from .params import DEFAULT_GROUP
from .util import number_to_hex, hex_to_number, number_to_bytes

logger = logging.getLogger(__name__)

SideA = b"A"
SideB = b"B"

MAX_CONFIRMATION = 2**(8*COMPACT_BYTES) - 1

# A                                   B
# start()  -- A + hex(X) -->
#          <-- B + hex(Y) --          start()
#          <-- B + hex(S1) --         finish(A + hex(X))
# finish(B + hex(Y))
# verify(B + hex(S1))
#          -- A + hex(S2) -->         verify(A + hex(S2))
#
# Both sides return K from verify(). A must not send S2 until verify() has
# accepted S1.

def _split(inbound, my_side):
    if not isinstance(inbound, bytes):
        raise InvalidExchangeValue("inbound message must be bytes")
    other_side = inbound[0:1]
    body = inbound[1:]
    if other_side not in (SideA, SideB):
        raise OffSides("I don't know what side they're on")
    if other_side == my_side:
        if my_side == SideA:
            raise OffSides("I'm A, but I got a message from A (not B).")
        else:
            raise OffSides("I'm B, but I got a message from B (not A).")
    try:
        return hex_to_number(body)
    except ValueError as e:
        raise InvalidExchangeValue(str(e))

def _encode(side, number):
    return side + number_to_hex(number).encode("ascii")

def _confirmation_bytes(number):
    return number_to_bytes(number, MAX_CONFIRMATION)

class _PAKDH_Session:
    "This class manages one side of a PAK-DH exchange."

    side = None # set by the subclass

    def __init__(self, password, idA, idB,
                 group=DEFAULT_GROUP, entropy_f=os.urandom):
        self.pakdh = PAKDH(password, group=group, entropy_f=entropy_f)
        self.idA = idA
        self.idB = idB

        self._ephemeral = None
        self._started = False
        self._finished = False
        self._verified = False
        self._expected = None
        self._pending_key = None
        self._key = None

    def start(self):
        if self._started:
            raise OnlyCallStartOnce("start() can only be called once")
        ephemeral = self.pakdh.generate_ephemeral()
        outbound_value = self.pakdh.compute_blinded(
            self.idA, self.idB, ephemeral.public, self.my_oracle)
        # publish state only once it is complete
        self._ephemeral = ephemeral
        self.outbound_value = outbound_value
        self._started = True
        return _encode(self.side, self.outbound_value)

    def finish(self, inbound_side_and_message):
        if not self._started:
            raise CalledTooEarly("call .start() before .finish()")
        if self._finished:
            raise OnlyCallFinishOnce("finish() can only be called once")
        self._finished = True

        p = self.pakdh
        # the ephemeral is erased on the way out, even when we reject
        with self._ephemeral as e:
            inbound_value = _split(inbound_side_and_message, self.side)
            if inbound_value == self.outbound_value:
                logger.warning("%s: peer reflected our own message",
                               self.side.decode("ascii"))
                raise ReflectionThwarted
            peer_public = p.recover_peer_public(self.idA, self.idB,
                                                inbound_value,
                                                self.peer_oracle)
            gRa, gRb = self.order(e.public, peer_public)
            S1 = p.compute_confirmation1(self.idA, self.idB, gRa, gRb)
            S2 = p.compute_confirmation2(self.idA, self.idB, gRa, gRb)
            K = p.compute_session_key(self.idA, self.idB, gRa, gRb)
        self._pending_key = K
        self._expected, mine = self.confirmations(S1, S2)
        logger.debug("%s: exchange finished, awaiting confirmation",
                     self.side.decode("ascii"))
        return _encode(self.side, mine)

    def verify(self, inbound_confirmation):
        if not self._finished:
            raise CalledTooEarly("call .finish() before .verify()")
        if self._expected is None:
            raise ExchangeFailed("finish() was rejected, nothing to verify")
        if self._verified:
            raise OnlyCallVerifyOnce("verify() can only be called once")
        self._verified = True

        try:
            theirs = _confirmation_bytes(
                _split(inbound_confirmation, self.side))
        except (InvalidExchangeValue, OffSides, ValueError):
            raise BadConfirmation("malformed confirmation")
        if not hmac.compare_digest(theirs,
                                   _confirmation_bytes(self._expected)):
            logger.warning("%s: peer confirmation does not match",
                           self.side.decode("ascii"))
            raise BadConfirmation("peer confirmation does not match")
        self._key = _confirmation_bytes(self._pending_key)
        return self._key

    def derive_key(self, info, num_bytes):
        """Expand the verified session key K into num_bytes of key
        material for the application, using HKDF-SHA256 with the given
        info string. Different info values give independent keys."""
        if self._key is None:
            raise NotVerified("call .verify() before .derive_key()")
        if isinstance(info, str):
            info = info.encode("utf-8")
        h = Hkdf(salt=b"", input_key_material=self._key,
                 hash=hashlib.sha256)
        return h.expand(info, num_bytes)


# applications should use PAKDH_A and PAKDH_B, not raw _PAKDH_Session()

class PAKDH_A(_PAKDH_Session):
    side = SideA
    my_oracle = staticmethod(H1)
    peer_oracle = staticmethod(H2)
    def order(self, mine, theirs): return mine, theirs
    def confirmations(self, S1, S2): return S1, S2

class PAKDH_B(_PAKDH_Session):
    side = SideB
    my_oracle = staticmethod(H2)
    peer_oracle = staticmethod(H1)
    def order(self, mine, theirs): return theirs, mine
    def confirmations(self, S1, S2): return S2, S1
