import math

import numpy as np
import pytest

from dtmftone import dtmf
from dtmftone.synth import tone, silence, tone_chunks, quantize, SAMPLERATE


@pytest.mark.parametrize('freqs', dtmf.TONES)
def test_tone_length_and_range(freqs):
    samples = list(tone(freqs, 4410))
    assert len(samples) == 4410
    assert all(-32768 <= s <= 32767 for s in samples)
    assert samples[0] == 0


def test_tone_matches_formula():
    (f1, f2) = (770, 1336)
    samples = list(tone((f1, f2), 200))
    for t in (1, 17, 123, 199):
        x = t / SAMPLERATE
        raw = (math.sin(2 * math.pi * f1 * x) + math.sin(2 * math.pi * f2 * x)) / 2
        assert samples[t] == round(raw * 32767)


def test_tone_empty():
    assert list(tone((697, 1209), 0)) == []


def test_tone_is_lazy_and_single_pass():
    gen = tone((697, 1209), 10)
    assert next(gen) == 0
    assert len(list(gen)) == 9
    assert list(gen) == []


def test_chunks_join_to_same_samples():
    chunks = list(tone_chunks((852, 1477), 2500, blocksize=1024))
    assert [len(c) for c in chunks] == [1024, 1024, 452]
    assert all(c.dtype == np.int16 for c in chunks)
    assert np.concatenate(chunks).tolist() == list(tone((852, 1477), 2500))


def test_silence():
    assert list(silence(4410)) == [0] * 4410
    assert list(silence(0)) == []


def test_quantize_rounds_and_clips():
    assert quantize([0.0, 1.0, -1.0, 2.0, -2.0]).tolist() == [0, 32767, -32767, 32767, -32768]
    # rounds to nearest, truncation would give 0
    assert quantize([0.9 / 32767, -0.9 / 32767]).tolist() == [1, -1]
