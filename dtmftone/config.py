import re

from . import dtmf
from .synth import SAMPLERATE
from .sequencer import TONE_MS, PAUSE_MS, DEMO_TONE_TIME, DEMO_STOP_TIME

OUTPUT = 'tone.wav'


class ConfigError(ValueError):
    pass


def load_config(path):
    """Reads key: value pairs from a tone configuration file."""
    config = {}
    # matches: key:val
    kvpre = re.compile(r'^\s*(\w+)\s*:\s*([ -~]+)')
    # matches: # comment
    commentre = re.compile(r'^\s*#.*$')
    with open(path, 'rt') as file:
        for line in file.readlines():
            line = line.strip()
            # skip empty lines and comments
            if line and not commentre.match(line):
                m = kvpre.match(line)
                if not m:
                    raise ConfigError(f'Invalid configuration {line}')
                config[m[1]] = m[2].strip()
    return config


class ToneConfig:
    # integer settings and their defaults
    INTEGERS = {
        'samplerate': SAMPLERATE,
        'tone_ms': TONE_MS,
        'pause_ms': PAUSE_MS,
        'demo_tone_ms': int(DEMO_TONE_TIME * 1000),
        'demo_stop_ms': int(DEMO_STOP_TIME * 1000),
    }

    def __init__(self, config=None):
        self.output = OUTPUT
        for (key, value) in self.INTEGERS.items():
            setattr(self, key, value)
        self.update(config or {})

    def update(self, config):
        for (key, value) in config.items():
            if value is None:
                continue
            if key == 'output':
                self.output = str(value)
            elif key in self.INTEGERS:
                setattr(self, key, self.to_int(key, value))
            else:
                raise ConfigError(f'Unknown configuration key "{key}"')
        self.check()

    @staticmethod
    def to_int(key, value):
        try:
            n = int(value)
        except (TypeError, ValueError):
            raise ConfigError(f'Invalid value for {key}: "{value}"') from None
        if n <= 0:
            raise ConfigError(f'{key} must be positive, got {n}')
        return n

    def check(self):
        # Sample rate must be at least 2 times the target frequency (Fs > 2 * f)
        if self.samplerate <= 2 * dtmf.FREQ_HIGH4:
            raise ConfigError(
                f'samplerate {self.samplerate}Hz too low for {dtmf.FREQ_HIGH4}Hz tone')
        if self.demo_stop_ms < self.demo_tone_ms:
            raise ConfigError('demo_stop_ms must not be less than demo_tone_ms')
        # demo blocks are laid out within one audio second
        if self.demo_stop_ms > 1000:
            raise ConfigError(f'demo_stop_ms must not exceed 1000, got {self.demo_stop_ms}')

    @property
    def demo_tone_time(self):
        return self.demo_tone_ms / 1000

    @property
    def demo_stop_time(self):
        return self.demo_stop_ms / 1000

    @classmethod
    def from_file(cls, path):
        if not path:
            return cls()
        try:
            return cls(load_config(path))
        except OSError as e:
            raise ConfigError(f'Cannot read configuration {path}: {e}') from e
