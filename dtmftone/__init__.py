from .dtmf import InvalidSymbolError
from .wavefile import WaveIOError
from .config import ConfigError
