"""Fixed constants of the BlurHash format."""

BASE83_ALPHABET = (
    "0123456789"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "#$%*+,-.:;=?@[]^_{|}~"
)
BASE83_RADIX = len(BASE83_ALPHABET)

# Digit value of every alphabet character
BASE83_DIGITS = {char: index for index, char in enumerate(BASE83_ALPHABET)}

MIN_COMPONENTS = 1
MAX_COMPONENTS = 9

# Hash layout: size flag, max AC, DC, then AC pairs
SIZE_FLAG_DIGITS = 1
MAX_AC_DIGITS = 1
DC_DIGITS = 4
AC_DIGITS = 2
HEADER_LENGTH = SIZE_FLAG_DIGITS + MAX_AC_DIGITS + DC_DIGITS
MIN_HASH_LENGTH = HEADER_LENGTH

BYTES_PER_PIXEL = 4
OPAQUE_ALPHA = 255

# AC quantization: 19 levels per channel, centred on 9
AC_QUANT_LEVELS = 19
AC_QUANT_CENTER = 9
MAX_AC_SCALE = 166
MAX_AC_QUANT = 82

# sRGB transfer function
SRGB_LINEAR_THRESHOLD = 0.04045
LINEAR_SRGB_THRESHOLD = 0.0031308
SRGB_LINEAR_SLOPE = 12.92
SRGB_GAMMA = 2.4
SRGB_OFFSET = 0.055
