import logging
from typing import Iterable, Optional, Sequence

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
import numpy as np
from scipy.stats import binom
from tqdm import tqdm

from sdes.bits import int_to_bits
from sdes.cipher import encrypt
from sdes.keys import generate_keys
from sdes.tables import DEFAULT_TABLES, CipherTables
from sdes.utils import hamming_distance

logger = logging.getLogger(__name__)


def _flip(bits: Sequence[int], i: int):
    flipped = list(bits)
    flipped[i] ^= 1
    return tuple(flipped)


def all_vectors(n_bits: int):
    """Every n_bits-wide bit vector, in counting order."""
    return [int_to_bits(i, n_bits) for i in range(2**n_bits)]


def key_avalanche(
    keys: Optional[Iterable[Sequence[int]]] = None,
    tables: CipherTables = DEFAULT_TABLES,
    progress: bool = True
) -> np.ndarray:
    """
    Measure how far the subkeys move when one master-key bit is flipped.

    Args:
        keys: 10-bit master keys to test. Defaults to all 1024 keys.
        tables: cipher tables used for the key schedule.
        progress: show a tqdm progress bar.

    Returns:
        int array of shape (n_keys, 10); entry [k, i] is the Hamming
        distance between K1‖K2 of key k and of key k with bit i flipped.
    """
    keys = all_vectors(10) if keys is None else [tuple(k) for k in keys]
    distances = np.zeros((len(keys), 10), dtype=int)
    for k, key in enumerate(tqdm(keys, desc="Key avalanche", disable=not progress)):
        k1, k2 = generate_keys(key, tables)
        for i in range(10):
            f1, f2 = generate_keys(_flip(key, i), tables)
            distances[k, i] = hamming_distance(k1 + k2, f1 + f2)
    logger.info("Key avalanche over %d keys: mean distance %.3f",
                len(keys), distances.mean() if len(keys) else 0.0)
    return distances


def plaintext_avalanche(
    master_key: Sequence[int],
    plaintexts: Optional[Iterable[Sequence[int]]] = None,
    tables: CipherTables = DEFAULT_TABLES,
    progress: bool = True
) -> np.ndarray:
    """
    Same as key_avalanche, but flipping plaintext bits under a fixed key.
    Returns an int array of shape (n_plaintexts, 8).
    """
    plaintexts = all_vectors(8) if plaintexts is None else [tuple(p) for p in plaintexts]
    distances = np.zeros((len(plaintexts), 8), dtype=int)
    for p, plaintext in enumerate(tqdm(plaintexts, desc="Plaintext avalanche", disable=not progress)):
        ciphertext = encrypt(plaintext, master_key, tables)
        for i in range(8):
            flipped = encrypt(_flip(plaintext, i), master_key, tables)
            distances[p, i] = hamming_distance(ciphertext, flipped)
    return distances


def distance_histogram(distances: np.ndarray, n_bits: int) -> np.ndarray:
    """Counts of each Hamming distance 0..n_bits."""
    return np.bincount(np.asarray(distances).ravel(), minlength=n_bits + 1)


def binomial_reference(n_bits: int, total: int) -> np.ndarray:
    """
    Expected histogram if every output bit flipped independently with
    probability 1/2, i.e. Binomial(n_bits, 0.5) scaled to `total` samples.
    """
    return binom.pmf(np.arange(n_bits + 1), n_bits, 0.5) * total


def summarize(distances: np.ndarray, n_bits: int) -> dict:
    distances = np.asarray(distances)
    return {
        "samples": int(distances.size),
        "mean": float(distances.mean()),
        "min": int(distances.min()),
        "max": int(distances.max()),
        "unchanged_fraction": float(np.mean(distances == 0)),
        "histogram": distance_histogram(distances, n_bits).tolist(),
    }


def plot_avalanche(histogram, reference, path, title="Avalanche"):
    """
    Bar chart of the observed distance histogram against the binomial
    reference, saved to `path`.
    """
    x = np.arange(len(histogram))
    fig, ax = plt.subplots(figsize=(6, 4))
    ax.bar(x, histogram, label="observed")
    ax.plot(x, reference, "o--", color="tab:red", label="Binomial(n, 1/2)")
    ax.set_xlabel("Hamming distance")
    ax.set_ylabel("Count")
    ax.set_title(title)
    ax.legend()
    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)
    logger.info("Saved avalanche plot to %s", path)
