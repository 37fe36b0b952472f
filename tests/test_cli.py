import pytest

import hatchtile.__main__ as cli


def test_main_prints_resolved_grid(capsys):
    cli.main(['--bounds', '10', '5', '--angle', '45', '--angle', '0'])

    out = capsys.readouterr().out
    assert 'Requested angle: 45.000000 deg' in out
    assert 'grid angle: 45.000000 deg' in out
    assert 'Requested angle: 0.000000 deg' in out
    assert 'span: 10.000000' in out
    assert out.strip().splitlines()[-1].startswith('Domain: Domain(')


def test_main_detail_scale_uses_diagonal(capsys):
    cli.main(['--bounds', '10', '5', '--angle', '45', '--detail'])

    out = capsys.readouterr().out
    assert 'grid angle: 26.565051 deg' in out


def test_main_rejects_zero_domain():
    with pytest.raises(SystemExit) as excinfo:
        cli.main(['--bounds', '0', '5', '--angle', '10'])
    assert excinfo.value.code == 1


def test_main_passes_flags_to_domain(monkeypatch, capsys):
    created = []
    real_domain = cli.Domain

    def _domain(*args, **kwargs):
        created.append(kwargs)
        return real_domain(*args, **kwargs)

    monkeypatch.setattr(cli, 'Domain', _domain)

    cli.main(['--bounds', '40', '30', '--angle', '10', '--expandable'])

    assert created == [{'model_pattern': True, 'expandable': True}]
    assert 'grid angle: 9.462322 deg' in capsys.readouterr().out
