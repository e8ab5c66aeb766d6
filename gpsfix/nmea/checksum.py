"""NMEA checksum computation and validation.

NMEA 0183 sentences use a simple XOR checksum for data integrity verification.
The checksum is calculated over all characters between '$' and '*' (exclusive),
then represented as a two-digit uppercase hexadecimal number after the '*'.

Example sentence structure:
    $GPRMC,034056.000,A,3959.0498,N,10515.2269,W,0.10,106.02,190415,,,D*7D
    ^                       checksum content                           ^^
    start                                                   checksum (0x7D = 125)
"""

from gpsfix.exceptions import FieldFormatError

_HEX_DIGITS = frozenset("0123456789ABCDEFabcdef")


def fold_checksum(accumulator: int, byte: int) -> int:
    """XOR one body byte into a running checksum accumulator.

    Args:
        accumulator: Checksum of the bytes folded so far (0 for a new sentence)
        byte: Next body byte, 0-255

    Returns:
        Updated 8-bit checksum
    """
    return accumulator ^ byte


def calculate_checksum(content: str) -> int:
    """Calculate the XOR checksum of a sentence body.

    Args:
        content: The string between '$' and '*' (exclusive)

    Returns:
        Integer checksum value (0-255)

    Example:
        >>> calculate_checksum("GPGGA")  # 0x47 ^ 0x50 ^ 0x47 ^ 0x47 ^ 0x41
        86
    """
    result = 0
    for character in content:
        result = fold_checksum(result, ord(character))
    return result


def parse_checksum_digits(digits: str) -> int:
    """Decode the two hexadecimal digits that follow '*'.

    ``int(digits, 16)`` alone is too lenient: it accepts surrounding
    whitespace, a sign, and underscores. Only two hex digits are allowed here.

    Args:
        digits: The two characters read after the '*' delimiter

    Returns:
        Expected checksum value (0-255)

    Raises:
        FieldFormatError: If ``digits`` is not exactly two hex digits.
    """
    if len(digits) != 2 or not _HEX_DIGITS.issuperset(digits):
        raise FieldFormatError("checksum", digits)
    return int(digits, 16)


def validate_checksum(sentence: str) -> bool:
    """Validate the checksum of a complete textual NMEA sentence.

    Args:
        sentence: Complete NMEA sentence including '$', '*', and checksum.
                  May include trailing whitespace/newlines (will be stripped).

    Returns:
        True if the checksum is valid, False if:
        - Sentence is malformed (missing delimiters)
        - Checksum is truncated or non-hexadecimal
        - Calculated checksum doesn't match provided checksum

    Example:
        >>> validate_checksum("$GPRMC,034056.000,A,...*7D")
        True
    """
    sentence = sentence.strip()
    if not sentence.startswith("$") or "*" not in sentence:
        return False

    end = sentence.index("*")
    content = sentence[1:end]
    provided = sentence[end + 1 : end + 3]

    try:
        return calculate_checksum(content) == parse_checksum_digits(provided)
    except FieldFormatError:
        return False
