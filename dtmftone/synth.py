import numpy as np

SAMPLERATE = 44100
AMPLITUDE = np.iinfo(np.int16).max  # 32767
BLOCKSIZE = 1024  # samples per generated chunk


def quantize(x):
    """Scale [-1, 1] floats to int16 samples.

    Rounds to nearest (ties to even) instead of truncating toward zero, so the
    waveform has no bias towards zero. Results are clipped to the int16 range.
    """
    x = np.rint(np.asarray(x, dtype=np.float64) * AMPLITUDE)
    return np.clip(x, -32768, 32767).astype(np.int16)


def dual_tone(freqs, start, length, samplerate=SAMPLERATE):
    """Tone samples start .. start+length-1 of a dual-sinusoid as int16 array.

    freqs -- (low, high) frequency pair in Hz
    """
    (f1, f2) = freqs
    t = np.arange(start, start + length, dtype=np.float64) / samplerate
    # summing and halving keeps the signal in [-1, 1]
    x = (np.sin(2 * np.pi * f1 * t) + np.sin(2 * np.pi * f2 * t)) / 2
    return quantize(x)


def tone_chunks(freqs, length, samplerate=SAMPLERATE, blocksize=BLOCKSIZE):
    for start in range(0, length, blocksize):
        yield dual_tone(freqs, start, min(blocksize, length - start), samplerate)


def silence_chunks(length, blocksize=BLOCKSIZE):
    for start in range(0, length, blocksize):
        yield np.zeros(min(blocksize, length - start), dtype=np.int16)


def tone(freqs, length, samplerate=SAMPLERATE):
    """Generates length samples of the DTMF tone as ints."""
    for chunk in tone_chunks(freqs, length, samplerate):
        yield from chunk.tolist()


def silence(length):
    for _ in range(length):
        yield 0
