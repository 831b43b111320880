import numpy as np

def entropy(freqs) -> float:
    """Shannon entropy of the symbol distribution, in bits/symbol."""
    f = np.asarray(freqs, dtype=np.float64)
    total = f.sum()
    if total == 0:
        return 0.0
    p = f[f > 0] / total
    return float(-(p * np.log2(p)).sum())

def mean_code_length(freqs, codes) -> float:
    f = np.asarray(freqs, dtype=np.float64)
    total = f.sum()
    if total == 0:
        return 0.0
    lengths = np.zeros(f.shape, dtype=np.float64)
    for sym, code in codes.items():
        lengths[sym] = len(code)
    return float((f * lengths).sum() / total)
