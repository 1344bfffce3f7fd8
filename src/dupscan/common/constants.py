"""Constants used throughout the application."""

# Bytes hashed by the partial pass
PARTIAL_READ_SIZE = 4096

# Read buffer for content hashing
CHUNK_SIZE = 8192

# Width of one fingerprint accumulator in hex digits
ACCUMULATOR_HEX_WIDTH = 16
ACCUMULATOR_MASK = (1 << 64) - 1

# Golden-ratio constant mixed into the shift-and-XOR accumulator
GOLDEN_RATIO = 0x9E3779B9

SIZE_UNITS = ["B", "KB", "MB", "GB", "TB"]

REPORT_FORMATS = ("csv", "json")
