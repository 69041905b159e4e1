import logging

# ANSI escape codes used by the renderer to colour node keys. Terminals that
# don't understand them will show the raw codes around each key.
ANSI_BLACK = "\u001b[30m"
ANSI_RED = "\u001b[31m"
ANSI_RESET = "\u001b[0m"

# Extra columns added to the widest key when indenting each depth level of a
# rendered tree. Leaves room for the "--" connectors on either side of a key.
RENDER_PADDING = 6

# Level passed to `logging.basicConfig` by the command line scripts. The tree
# itself only logs at DEBUG.
LOG_LEVEL = logging.INFO

# Parameters of the demo script. The first phase bulk adds this many random
# values in [0, 10) and the last phase builds a tree of as many random values
# in [DEMO_MIN, DEMO_MAX].
DEMO_RANDOM_COUNT = 10
DEMO_MIN = -25
DEMO_MAX = 80

# JSON lines file written by generate_example_dataset.py and read by
# simple_bench.py.
BENCH_DATASET = "example_keys.jl"
