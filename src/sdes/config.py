# config.py
import os


# ─── Input files ──────────────────────────────────────────────────────────────

# Permutation tables, one "NAME: v1 v2 ..." per line.
# Tables missing from the file fall back to the built-in constants.
PERMUTATIONS_FILE = os.getenv("SDES_PERMUTATIONS_FILE", "data/permutations.txt")

# "Key: <10 bits>" and "Plaintext: <8 bits>" lines
INPUT_FILE = os.getenv("SDES_INPUT_FILE", "data/input.txt")


# ─── Logging ──────────────────────────────────────────────────────────────────

LOG_LEVEL = os.getenv("SDES_LOG_LEVEL", "INFO")


# ─── Avalanche analysis ───────────────────────────────────────────────────────

# Numeric settings stay strings here; the CLI parses and validates them.
# How many random master keys to flip bits on (0 = all 1024 keys)
AVALANCHE_NUM_KEYS = os.getenv("SDES_AVALANCHE_NUM_KEYS", "0")

# If you want to fix numpy's RNG (for total determinism), set this to an int.
GLOBAL_RANDOM_SEED = os.getenv("SDES_RANDOM_SEED", "12345")

RESULTS_FILE = os.getenv("SDES_RESULTS_FILE", "results.json")
PLOT_FILE = os.getenv("SDES_PLOT_FILE", "avalanche.png")
