# src/tordoc_kit/conversions.py

import base64
import binascii

MAX_PORT = 0xFFFF


def base64_to_hex(encoded: str) -> str:
    """Decode base64 text and return the hex encoding of the bytes.

    Directory documents strip base64 padding, so it is restored first. Line
    breaks of multi-line blocks are ignored.

    Raises:
        binascii.Error: The text is not valid base64.
    """
    encoded = encoded.replace("\r", "").replace("\n", "")
    rem = len(encoded) % 4
    if rem:
        encoded += "=" * (4 - rem)

    return binascii.hexlify(base64.b64decode(encoded, validate=True)).decode("ascii")


def string_to_port(port_str: str) -> int:
    """Convert a decimal string to a port number.

    Returns 0 if the string is not plain ASCII digits or does not fit in
    16 bits. Callers rely on the 0 sentinel; this never raises.
    """
    if not port_str.isascii() or not port_str.isdigit():
        return 0

    port = int(port_str)
    if port > MAX_PORT:
        return 0
    return port
