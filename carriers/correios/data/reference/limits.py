"""
Request Limits

Bounds accepted for a quote request. All bounds are inclusive.
"""

POSTAL_CODE_LENGTH = 8
POSTAL_CODE_PATTERN = r"^[0-9]{8}$"   # ASCII digits only, no "-" or spaces

WEIGHT_MIN_G = 1
WEIGHT_MAX_G = 30_000

# Length and width share the carrier minimum; height may be thinner (envelopes)
LENGTH_MIN_CM = 11
LENGTH_MAX_CM = 105
WIDTH_MIN_CM = 11
WIDTH_MAX_CM = 105
HEIGHT_MIN_CM = 2
HEIGHT_MAX_CM = 105
