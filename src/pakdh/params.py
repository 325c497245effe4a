from types import MappingProxyType
from .errors import ConfigurationError
from .parameters.i1024 import I1024

# Groups are selected by modulus size. The table is read-only: adding a
# group means adding a module under parameters/ and listing it here.
GROUPS = MappingProxyType({
    1024: I1024,
    })

DEFAULT_GROUP = 1024

def lookup(bits=DEFAULT_GROUP):
    if isinstance(bits, bool) or not isinstance(bits, int):
        raise ConfigurationError("group selector must be an int, not %r"
                                 % (bits,))
    try:
        return GROUPS[bits]
    except KeyError:
        raise ConfigurationError("no %d-bit group is defined (have: %s)"
                                 % (bits, ", ".join(map(str, sorted(GROUPS)))))
