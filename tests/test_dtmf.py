import pytest

from dtmftone import dtmf
from dtmftone.dtmf import InvalidSymbolError, tone_index, parse_symbols, tone_pair

EXPECTED = {
    '1': (697, 1209), '2': (697, 1336), '3': (697, 1477), 'A': (697, 1633),
    '4': (770, 1209), '5': (770, 1336), '6': (770, 1477), 'B': (770, 1633),
    '7': (852, 1209), '8': (852, 1336), '9': (852, 1477), 'C': (852, 1633),
    '*': (941, 1209), '0': (941, 1336), '#': (941, 1477), 'D': (941, 1633),
}


def test_index_order():
    for (n, s) in enumerate('0123456789'):
        assert tone_index(s) == n
    assert [tone_index(s) for s in 'ABCD*#'] == [10, 11, 12, 13, 14, 15]


@pytest.mark.parametrize('symbol', sorted(EXPECTED))
def test_table(symbol):
    assert tone_pair(tone_index(symbol)) == EXPECTED[symbol]


def test_lowercase_letters():
    assert [tone_index(s) for s in 'abcd'] == [10, 11, 12, 13]


def test_all_pairs_unique():
    assert len(set(dtmf.TONES)) == 16
    assert sorted(dtmf.TONES) == sorted(EXPECTED.values())


@pytest.mark.parametrize('symbol', ['X', 'e', ' ', '+', '', '12', None, '٣'])
def test_invalid_symbol(symbol):
    with pytest.raises(InvalidSymbolError):
        tone_index(symbol)


def test_parse_symbols_reports_position():
    with pytest.raises(InvalidSymbolError) as e:
        parse_symbols('5X')
    assert e.value.symbol == 'X'
    assert e.value.position == 1


def test_parse_symbols():
    assert parse_symbols('*#') == [14, 15]
    assert parse_symbols('') == []
