"""
Origin Configuration

Default shipping origin and the reference package quoted when a caller only
supplies a destination CEP.
"""

ORIGIN_POSTAL_CODE = "78556100"

DEFAULT_WEIGHT_G = 500
DEFAULT_FORMAT = 1            # 1=box/package, 2=roll/prism, 3=envelope
DEFAULT_LENGTH_CM = 30
DEFAULT_HEIGHT_CM = 20
DEFAULT_WIDTH_CM = 20
