# sentinel symbol appended to every text, smaller than any text byte
SENTINEL = 0
ALPHABET_SIZE = 256

# process exit codes
EXIT_OK = 0
EXIT_USAGE = -1
EXIT_ZERO_BYTE = -2
EXIT_BAD_INDEX = -3

# number of SA entries evaluated at once when scanning the BWT
BWT_BLOCK_SIZE = 1 << 20

# "stack" precomputes PSV/NSV for every SA position, "scan" walks the SA per factor
LZ77_STRATEGIES = ("stack", "scan")
LZ77_STRATEGY = "stack"

# digits after the decimal point for h0 and delta
FLOAT_PRECISION = 6

# cache keys, named after the files the succinct backend keeps in its cache
KEY_SA = "sa"
KEY_ISA = "isa"
KEY_LCP = "lcp"
