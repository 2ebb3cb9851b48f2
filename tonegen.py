#!python

import sys
import argparse

from dtmftone import dtmf, sequencer
from dtmftone.config import ToneConfig, ConfigError
from dtmftone.wavefile import open_wavefile, read_wavefile, WaveIOError
from dtmftone.goertzel import verify

# Writes a DTMF tone sequence to a WAV file
#
# $ python tonegen.py 0696675356
# $ python tonegen.py            # sweep through all 16 symbols
#
# Keyed tones are 100ms long with 100ms pause. Sweep tones are 150ms with 100ms pause.

verbosef = 0


def debug(n, *args, **kwargs):
    if verbosef >= n:
        print(*args, file=sys.stderr, **kwargs)


class PlaybackError(Exception):
    pass


def play_file(path):
    try:
        import sounddevice as sd
    except OSError as e:  # PortAudio library not found
        raise PlaybackError(f'No audio output: {e}') from e
    (data, samplerate) = read_wavefile(path)
    try:
        sd.play(data, samplerate)
        sd.wait()
    except sd.PortAudioError as e:
        raise PlaybackError(f'Playback failed: {e}') from e


def generate(symbols, conf, verbose=0):
    """Writes the sequence to conf.output. Returns (indices, tone_length, pause_length, frames)."""
    if symbols is None:
        mode = sequencer.Mode.DEMO
        indices = list(range(len(dtmf.TONES)))
        (tone_length, pause_length) = sequencer.demo_layout(
            conf.samplerate, conf.demo_tone_time, conf.demo_stop_time)
    else:
        mode = sequencer.Mode.KEYED
        indices = dtmf.parse_symbols(symbols)  # fails before the file is created
        (tone_length, pause_length) = sequencer.keyed_layout(
            conf.samplerate, conf.tone_ms, conf.pause_ms)

    total = sequencer.sequence_length(len(indices), tone_length, pause_length)
    debug(1, f'{mode.name} {len(indices)} symbols, tone {tone_length} pause {pause_length} samples, {total} total')

    chunks = sequencer.sequence(indices, tone_length, pause_length,
                                conf.samplerate, verbose=verbose)
    with open_wavefile(conf.output, conf.samplerate, verbose=verbose) as writer:
        frames = sequencer.write_sequence(writer, chunks)
    return (indices, tone_length, pause_length, frames)


def main(argv=None):
    parser = argparse.ArgumentParser(description='DTMF tone generator')
    parser.add_argument('-v', '--verbose', default=0,
                        action='count', help='verbose mode')
    parser.add_argument('-o', '--output', metavar='FILE',
                        help='Output file (default tone.wav)')
    parser.add_argument('-c', '--config', metavar='FILE',
                        help='Tone configuration file')
    parser.add_argument('-r', '--samplerate', metavar='RATE', type=int,
                        help='Sample rate (Hz)')
    parser.add_argument('--verify', action='store_true',
                        help='Decode the written file and compare to input')
    parser.add_argument('--play', action='store_true',
                        help='Play the written file')
    parser.add_argument('symbols', nargs='?', metavar='[0123456789ABCD*#]',
                        help='Symbols to dial. Sweeps all symbols if omitted.')
    args = parser.parse_args(argv)

    global verbosef
    verbosef = args.verbose

    try:
        conf = ToneConfig.from_file(args.config)
        conf.update({'output': args.output, 'samplerate': args.samplerate})
        (indices, tone_length, pause_length, frames) = generate(
            args.symbols, conf, verbosef)
    except (dtmf.InvalidSymbolError, ConfigError, WaveIOError) as e:
        print(f'ERROR: {e}', file=sys.stderr)
        return 1

    print(f'Wrote {conf.output} {frames} samples {frames/conf.samplerate:.2f}s')

    if args.verify:
        try:
            decoded = verify(conf.output, len(indices), tone_length, pause_length, verbosef)
        except WaveIOError as e:
            print(f'ERROR: {e}', file=sys.stderr)
            return 1
        expected = ''.join(dtmf.symbol_name(n) for n in indices)
        found = ''.join(dtmf.symbol_name(n) for n in decoded)
        if expected != found:
            print("ERROR expected symbols %s does not match decoded %s" %
                  (expected, found), file=sys.stderr)
            return 1
        debug(1, 'DECODED', found)

    if args.play:
        try:
            play_file(conf.output)
        except (PlaybackError, WaveIOError) as e:
            print(f'ERROR: {e}', file=sys.stderr)
            return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
