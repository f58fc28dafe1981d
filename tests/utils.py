import numpy as np
import array_api_compat as api

backends = [api.array_namespace(np.zeros(1))]

#import torch as tr
#tr.set_default_dtype(tr.float64)
#backends.append(api.array_namespace(tr.zeros(1)))

def rand_symmetric(n: int, seed: int = 0) -> np.ndarray:
    rng = np.random.default_rng(seed)
    mat = rng.standard_normal((n, n))
    return 0.5 * (mat + mat.T)

def with_spectrum(vals, seed: int = 0) -> np.ndarray:
    """Symmetric matrix with the given eigenvalues."""
    rng = np.random.default_rng(seed)
    n = len(vals)
    q, _ = np.linalg.qr(rng.standard_normal((n, n)))
    return q @ np.diag(vals) @ q.T

def scramble(mat: np.ndarray, keep: str, seed: int = 1) -> np.ndarray:
    """Overwrite the triangle opposite to keep ('U' or 'L') with noise."""
    rng = np.random.default_rng(seed)
    noise = rng.standard_normal(mat.shape) * 1e3
    res = mat.copy()
    if keep == "U":
        idx = np.tril_indices(mat.shape[0], -1)
    else:
        idx = np.triu_indices(mat.shape[0], 1)
    res[idx] = noise[idx]
    return res

def is_descending(vals) -> bool:
    vals = np.asarray(vals)
    return bool(np.all(vals[:-1] >= vals[1:]))
