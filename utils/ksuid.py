"""
KSUID - K-Sortable Unique Identifier.

Used to tag particle snapshots and errors so log lines can be correlated.
Layout: 4 bytes seconds since the KSUID epoch + 16 random bytes, base62 encoded to 27 chars.
"""

import os
import struct
import time

# KSUID epoch: 2014-05-13
KSUID_EPOCH = 1400000000
KSUID_LENGTH = 27
BASE62 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"


def _to_base62(n):
    chars = []
    while n > 0:
        n, remainder = divmod(n, 62)
        chars.append(BASE62[remainder])
    return "".join(reversed(chars)).rjust(KSUID_LENGTH, "0")


def generate_ksuid(now=None):
    """Generate a 27-character sortable unique ID.

    `now` is a Unix time in seconds; defaults to the current time.
    """
    seconds = int(time.time() if now is None else now) - KSUID_EPOCH
    raw = struct.pack(">I", seconds) + os.urandom(16)
    return _to_base62(int.from_bytes(raw, byteorder="big"))


def ksuid_seconds(ksuid):
    """Unix time (seconds) embedded in a KSUID."""
    n = 0
    for char in ksuid:
        n = n * 62 + BASE62.index(char)
    raw = n.to_bytes(20, byteorder="big")
    return struct.unpack(">I", raw[:4])[0] + KSUID_EPOCH
