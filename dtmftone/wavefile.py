import os
import sys

import numpy as np
import soundfile as sf

from .synth import SAMPLERATE, BLOCKSIZE

# run soundfile.available_subtypes('WAV') for list of options
SUBTYPE = 'PCM_16'
PART_SUFFIX = '.part'
INT16_MIN = -32768
INT16_MAX = 32767


class WaveIOError(OSError):
    """Output file could not be created, written or finalized."""


def to_samples(block):
    """int16 array of block. Raises ValueError for values outside int16 range."""
    data = np.asarray(block)
    if data.dtype != np.int16:
        if data.size and (data.min() < INT16_MIN or data.max() > INT16_MAX):
            raise ValueError(
                f'Samples out of int16 range [{data.min()}, {data.max()}]')
        data = data.astype(np.int16)
    return data


class WaveWriter:
    """Mono PCM WAV writer.

    Samples go to a temporary file next to the target. close() finalizes the
    RIFF header and moves the file in place, abort() removes it, so the target
    is never left as a truncated container.
    """

    def __init__(self, path, samplerate=SAMPLERATE, channels=1, subtype=SUBTYPE, verbose=0):
        self.path = path
        self.partpath = path + PART_SUFFIX
        self.samplerate = samplerate
        self.channels = channels
        self.verbose = verbose
        self.frames = 0
        self.closed = False
        self.pending = []
        try:
            self.file = sf.SoundFile(self.partpath, mode='w', samplerate=samplerate,
                                     channels=channels, subtype=subtype, format='WAV')
        except (RuntimeError, OSError) as e:
            raise WaveIOError(f'Cannot create {path}: {e}') from e
        self.debug_print('Writing to', self.partpath)

    def debug_print(self, farg, *fargs):
        if self.verbose > 1:
            print(farg, *fargs, file=sys.stderr)

    def write_sample(self, value):
        if not INT16_MIN <= value <= INT16_MAX:
            raise ValueError(f'Sample {value} out of int16 range')
        self.pending.append(value)
        if len(self.pending) >= BLOCKSIZE:
            self.flush()

    def flush(self):
        if self.pending:
            block = self.pending
            self.pending = []
            self.write(block)

    def write(self, block):
        if self.closed:
            raise WaveIOError(f'{self.path} is already closed')
        data = to_samples(block)
        try:
            self.file.write(data)
        except (RuntimeError, OSError) as e:
            self.abort()
            raise WaveIOError(f'Write to {self.path} failed: {e}') from e
        self.frames += len(data)

    def close(self):
        """Finalize header and move the file to its final path. Runs once."""
        if self.closed:
            return
        try:
            self.flush()
            self.file.close()
            self.closed = True
            os.replace(self.partpath, self.path)
        except (RuntimeError, OSError) as e:
            self.abort()
            raise WaveIOError(f'Cannot finalize {self.path}: {e}') from e
        self.debug_print('Finalized', self.path, f'{self.frames} frames')

    def abort(self):
        """Drop everything written so far."""
        if not self.file.closed:
            self.file.close()
        self.closed = True
        self.pending = []
        if os.path.exists(self.partpath):
            os.remove(self.partpath)
            self.debug_print('Removed', self.partpath)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc_type is None:
            self.close()
        else:
            self.abort()
        return False


def open_wavefile(path, samplerate=SAMPLERATE, channels=1, subtype=SUBTYPE, verbose=0):
    return WaveWriter(path, samplerate, channels, subtype, verbose)


def read_wavefile(path):
    """Returns (int16 samples, samplerate)."""
    try:
        return sf.read(path, dtype='int16')
    except (RuntimeError, OSError) as e:
        raise WaveIOError(f'Cannot read {path}: {e}') from e


def wave_info(path):
    return sf.info(path)
