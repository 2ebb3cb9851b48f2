# Dual Tone Multi Frequency (DTMF)
#
# https://en.wikipedia.org/wiki/Dual-tone_multi-frequency_signaling
#
#       | 1209hz | 1336hz | 1477hz | 1633hz |
# 697hz | 1      | 2      | 3      | A      |
# 770hz | 4      | 5      | 6      | B      |
# 852hz | 7      | 8      | 9      | C      |
# 941hz | *      | 0      | #      | D      |

# DTMF low and high frequencies (Hz)
FREQ_LOW1 = 697
FREQ_LOW2 = 770
FREQ_LOW3 = 852
FREQ_LOW4 = 941
FREQ_HIGH1 = 1209
FREQ_HIGH2 = 1336
FREQ_HIGH3 = 1477
FREQ_HIGH4 = 1633

LOW_FREQS = (FREQ_LOW1, FREQ_LOW2, FREQ_LOW3, FREQ_LOW4)
HIGH_FREQS = (FREQ_HIGH1, FREQ_HIGH2, FREQ_HIGH3, FREQ_HIGH4)

SYMBOLS = [  # keypad order
    ('1', (FREQ_LOW1, FREQ_HIGH1)),
    ('2', (FREQ_LOW1, FREQ_HIGH2)),
    ('3', (FREQ_LOW1, FREQ_HIGH3)),
    ('A', (FREQ_LOW1, FREQ_HIGH4)),
    ('4', (FREQ_LOW2, FREQ_HIGH1)),
    ('5', (FREQ_LOW2, FREQ_HIGH2)),
    ('6', (FREQ_LOW2, FREQ_HIGH3)),
    ('B', (FREQ_LOW2, FREQ_HIGH4)),
    ('7', (FREQ_LOW3, FREQ_HIGH1)),
    ('8', (FREQ_LOW3, FREQ_HIGH2)),
    ('9', (FREQ_LOW3, FREQ_HIGH3)),
    ('C', (FREQ_LOW3, FREQ_HIGH4)),
    ('*', (FREQ_LOW4, FREQ_HIGH1)),
    ('0', (FREQ_LOW4, FREQ_HIGH2)),
    ('#', (FREQ_LOW4, FREQ_HIGH3)),
    ('D', (FREQ_LOW4, FREQ_HIGH4))
]

# Symbols by tone index: 0, 1, ... 9, A, B, C, D, *, #
INDEX_SYMBOLS = '0123456789ABCD*#'

_PAIRS = dict(SYMBOLS)

# (low, high) frequency pair for each tone index
TONES = tuple(_PAIRS[s] for s in INDEX_SYMBOLS)

_INDEX = {s: n for (n, s) in enumerate(INDEX_SYMBOLS)}


class InvalidSymbolError(ValueError):
    """Character is not one of 0-9, A-D, * or #."""

    def __init__(self, symbol, position=None):
        self.symbol = symbol
        self.position = position
        where = f' at position {position}' if position is not None else ''
        super().__init__(f'Invalid DTMF symbol {symbol!r}{where}')


def tone_index(symbol, position=None):
    """Returns tone index 0-15 for a keypad symbol. Letters are case-insensitive."""
    if not isinstance(symbol, str) or len(symbol) != 1:
        raise InvalidSymbolError(symbol, position)
    n = _INDEX.get(symbol.upper())
    if n is None:
        raise InvalidSymbolError(symbol, position)
    return n


def parse_symbols(text):
    # resolve everything up front so bad input fails before any audio is written
    return [tone_index(c, n) for (n, c) in enumerate(text)]


def tone_pair(index):
    return TONES[index]


def symbol_name(index):
    return INDEX_SYMBOLS[index]
