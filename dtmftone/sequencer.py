from enum import Enum

import numpy as np

from . import dtmf
from .synth import SAMPLERATE, BLOCKSIZE, tone_chunks, silence_chunks

Mode = Enum('Mode', 'KEYED DEMO')

TONE_MS = 100  # keyed tone duration
PAUSE_MS = 100  # keyed pause between tones
DEMO_TONE_TIME = 0.15  # demo sweep tone ends (s)
DEMO_STOP_TIME = 0.25  # demo sweep silence ends (s)


def samples(samplerate, ms):
    return samplerate * ms // 1000


def window_length(samplerate, seconds):
    """Number of sample positions within one second that fall before seconds.

    Counts t/samplerate < seconds the same way a loop over the time positions
    of one audio second does, float comparison included.
    """
    t = np.arange(samplerate, dtype=np.float64) / samplerate
    return int(np.count_nonzero(t < seconds))


def sequence(indices, tone_length, pause_length, samplerate=SAMPLERATE,
             blocksize=BLOCKSIZE, verbose=0):
    """Yields int16 chunks: each symbol's tone followed by its pause, in order."""
    for n in indices:
        freqs = dtmf.tone_pair(n)
        if verbose:
            (fl, fh) = freqs
            print(f'SYMBOL:"{dtmf.symbol_name(n)}"', f'({fl}Hz, {fh}Hz)')
        yield from tone_chunks(freqs, tone_length, samplerate, blocksize)
        yield from silence_chunks(pause_length, blocksize)


def keyed_layout(samplerate=SAMPLERATE, tone_ms=TONE_MS, pause_ms=PAUSE_MS):
    return (samples(samplerate, tone_ms), samples(samplerate, pause_ms))


def demo_layout(samplerate=SAMPLERATE, tone_time=DEMO_TONE_TIME, stop_time=DEMO_STOP_TIME):
    tone_length = window_length(samplerate, tone_time)
    return (tone_length, window_length(samplerate, stop_time) - tone_length)


def keyed(text, samplerate=SAMPLERATE, tone_ms=TONE_MS, pause_ms=PAUSE_MS, verbose=0):
    # parse first, generator body runs only on iteration
    indices = dtmf.parse_symbols(text)
    (tone_length, pause_length) = keyed_layout(samplerate, tone_ms, pause_ms)
    return sequence(indices, tone_length, pause_length, samplerate, verbose=verbose)


def demo(samplerate=SAMPLERATE, tone_time=DEMO_TONE_TIME, stop_time=DEMO_STOP_TIME, verbose=0):
    """Sweep through all 16 symbols in index order."""
    (tone_length, pause_length) = demo_layout(samplerate, tone_time, stop_time)
    return sequence(range(len(dtmf.TONES)), tone_length, pause_length,
                    samplerate, verbose=verbose)


def sequence_length(count, tone_length, pause_length):
    return count * (tone_length + pause_length)


def write_sequence(writer, chunks):
    """Writes all chunks to the writer. Returns number of samples written."""
    total = 0
    for chunk in chunks:
        writer.write(chunk)
        total += len(chunk)
    return total
