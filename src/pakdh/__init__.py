
from .pakdh import PAKDH, Ephemeral
from .session import PAKDH_A, PAKDH_B
from .oracles import H1, H2, H3, H4, H5
from .errors import (PAKDHError, ConfigurationError, PreconditionError,
                     ProtocolViolation, InvalidExchangeValue,
                     InternalInvariantError, EntropyError, SessionError,
                     OnlyCallStartOnce, OnlyCallFinishOnce, OffSides,
                     ReflectionThwarted, BadConfirmation, NotVerified,
                     OnlyCallVerifyOnce, CalledTooEarly, ExchangeFailed)
PAKDH, Ephemeral, PAKDH_A, PAKDH_B, H1, H2, H3, H4, H5 # hush pyflakes

__version__ = "0.1.0"
