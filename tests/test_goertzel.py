import math

import numpy as np
import pytest

from dtmftone import dtmf, sequencer
from dtmftone.goertzel import goertzel, detect_symbol, verify
from dtmftone.synth import dual_tone
from dtmftone.wavefile import open_wavefile


def test_goertzel_peak():
    Fs = 8000
    x = [math.sin(2 * math.pi * 1000 * n / Fs) for n in range(400)]
    assert goertzel(1000, x, Fs) > 100 * goertzel(1500, x, Fs)


def test_goertzel_power_on_bin():
    Fs = 8000
    N = 200
    x = [0.5 * math.sin(2 * math.pi * 800 * n / Fs) for n in range(N)]
    # sine of amplitude A on an exact bin has power A**2 * N / 4
    assert goertzel(800, x, Fs) == pytest.approx(0.5**2 * N / 4)
    assert goertzel(800, np.zeros(N), Fs) == 0


@pytest.mark.parametrize('index', range(16))
def test_detect_symbol(index):
    block = dual_tone(dtmf.TONES[index], 0, 4410)
    assert detect_symbol(block, 44100) == index


def test_verify_keyed_file(tmp_path):
    path = str(tmp_path / 'tone.wav')
    text = '0696675356*#ABCD'
    with open_wavefile(path) as writer:
        sequencer.write_sequence(writer, sequencer.keyed(text))
    decoded = verify(path, len(text), 4410, 4410)
    assert decoded == dtmf.parse_symbols(text)


def test_verify_short_file(tmp_path):
    path = str(tmp_path / 'tone.wav')
    with open_wavefile(path) as writer:
        sequencer.write_sequence(writer, sequencer.keyed('1'))
    assert verify(path, 3, 4410, 4410) == [1]
