import numpy as np

ALPHABET_SIZE = 256
CHUNK_SIZE = 1 << 16

def new_table() -> np.ndarray:
    return np.zeros(ALPHABET_SIZE, dtype=np.int64)

def accumulate(freqs: np.ndarray, values) -> np.ndarray:
    """
    Add occurrence counts of 'values' (1D int array) into freqs.
    Values outside [0, 255] are ignored.
    """
    v = np.asarray(values, dtype=np.int64).ravel()
    v = v[(v >= 0) & (v < ALPHABET_SIZE)]
    freqs += np.bincount(v, minlength=ALPHABET_SIZE)
    return freqs

def count_frequencies(f, chunk_size: int = CHUNK_SIZE):
    """
    Read a binary stream once, end to end.
    Returns:
      freqs: int64 array of shape (256,)
      nbytes: number of bytes read
    """
    freqs = new_table()
    nbytes = 0
    while True:
        chunk = f.read(chunk_size)
        if not chunk:
            break
        nbytes += len(chunk)
        accumulate(freqs, np.frombuffer(chunk, dtype=np.uint8))
    return freqs, nbytes

def count_file(path, chunk_size: int = CHUNK_SIZE):
    with open(path, "rb") as f:
        return count_frequencies(f, chunk_size)
