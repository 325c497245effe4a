from ..groups import IntegerGroup

# For the moment only a 1024-bit group is published for PAK-DH. This is the
# RFC 2409 "Second Oakley Group" safe prime, with the generator from TIA,
# "Over-the-Air Service Provisioning of Mobile Stations in Spread Spectrum
# Systems", TIA-683-D, 2006. A 2048-bit (or larger) prime would give better
# protection, but nothing else interoperates with one yet.
I1024 = IntegerGroup(
    N=0xFFFFFFFFFFFFFFFFC90FDAA22168C234C4C6628B80DC1CD129024E088A67CC74020BBEA63B139B22514A08798E3404DDEF9519B3CD3A431B302B0A6DF25F14374FE1356D6D51C245E485B576625E7EC6F44C42E9A637ED6B0BFF5CB6F406B7EDEE386BFB5A899FA5AE9F24117C4B1FE649286651ECE65381FFFFFFFFFFFFFFFF,
    g=0x13,
    )
