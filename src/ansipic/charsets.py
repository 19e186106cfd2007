# Ramps run from emptiest to fullest visual weight.
DEFAULT = " .:-=+*#%@"

SIMPLE = " .:#@"

DETAILED = " .'`^\",:;Il!i><~+_-?][}{1)(|\\/tfjrxnuvczXYUJCLQ0OZmwqpdbkhao*#MW&8%B@$"

# Shade blocks: U+2591-U+2593 plus the full block U+2588
BLOCKS = " " + "░▒▓█"

RAMPS = {
    "default": DEFAULT,
    "simple": SIMPLE,
    "detailed": DETAILED,
    "blocks": BLOCKS,
}
