import numpy as np

from . import dtmf
from .wavefile import read_wavefile


def goertzel(f, x, Fs):
    """Goertzel power of time series x at a target frequency.
    Works best when frequency is integer multiple of Fs/N.

    f -- Target frequency
    x -- Time series
    Fs -- Sampling rate of the time series

    Returns normalized power spectrum DFT term for the target frequency in the signal.
    Same value as running the Goertzel recurrence over all N samples.
    """
    x = np.asarray(x, dtype=np.float64)
    N = len(x)
    k = int(0.5 + N * f / Fs)  # select k based on target frequency
    w = 2 * np.pi * k / N
    X = np.dot(x, np.exp(-1j * w * np.arange(N)))
    return abs(X)**2 / N


def detect_symbol(block, samplerate, verbose=0):
    """Returns tone index of the strongest low and high group frequencies."""
    x = np.asarray(block, dtype=np.float64) / 32768
    powers = {f: goertzel(f, x, samplerate) for f in dtmf.LOW_FREQS + dtmf.HIGH_FREQS}
    if verbose > 1:
        for (f, p) in powers.items():
            print(f, f'{p:2.2f}')
    fl = max(dtmf.LOW_FREQS, key=lambda f: powers[f])
    fh = max(dtmf.HIGH_FREQS, key=lambda f: powers[f])
    return dtmf.TONES.index((fl, fh))


def verify(path, count, tone_length, pause_length, verbose=0):
    """Decodes count tone blocks from a written sequence file.

    Returns decoded tone indices in file order.
    """
    (data, samplerate) = read_wavefile(path)
    decoded = []
    for n in range(count):
        start = n * (tone_length + pause_length)
        block = data[start:start + tone_length]
        if len(block) < tone_length:
            break
        decoded.append(detect_symbol(block, samplerate, verbose))
    return decoded
