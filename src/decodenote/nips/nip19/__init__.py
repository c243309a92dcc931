"""NIP-19: bech32-encoded entities.

Attributes:
    decode_identifier: Bech32 text to a typed identifier.
        See [decode_identifier()][decodenote.nips.nip19.codec.decode_identifier].
    decode_bech32, encode_bech32: Extended-length bech32 framing.
        See [decodenote.nips.nip19.encoding][].
    parse_tlv, encode_tlv: TLV payload cursor loop.
        See [decodenote.nips.nip19.tlv][].
    encode_npub, encode_nsec, encode_note, encode_nprofile, encode_nevent,
    encode_naddr: Formatting of known values as identifiers.
"""

from .codec import (
    decode_identifier,
    encode_naddr,
    encode_nevent,
    encode_note,
    encode_nprofile,
    encode_npub,
    encode_nsec,
)
from .encoding import decode_bech32, encode_bech32
from .tlv import decode_uint_be, encode_tlv, iter_tlv, parse_tlv, tlv_type_name


__all__ = [
    "decode_bech32",
    "decode_identifier",
    "decode_uint_be",
    "encode_bech32",
    "encode_naddr",
    "encode_nevent",
    "encode_note",
    "encode_nprofile",
    "encode_npub",
    "encode_nsec",
    "encode_tlv",
    "iter_tlv",
    "parse_tlv",
    "tlv_type_name",
]
