"""Tests for the comparison demo."""

from lamcps.examples import main, samples


def test_prints_every_sample(capsys):
    assert main() == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0].split() == ['term', 'naive', 'higher_order', 'hybrid']
    assert len(out) == 1 + len(samples)
    assert out[2].split() == ['call', '10', '/', '2', '7', '/', '0', '4', '/', '0']

def test_selected_strategies(capsys):
    assert main(['hybrid']) == 0
    assert capsys.readouterr().out.splitlines()[0].split() == ['term', 'hybrid']

def test_unknown_strategy(capsys):
    assert main(['naive', 'bogus']) == 1
    captured = capsys.readouterr()
    assert captured.out == ''
    assert captured.err.startswith('error: unknown strategy: bogus')
