import json

from strength_check import cli
from strength_check.scoring import COMMON_PASSWORD_MESSAGE, USERNAME_MESSAGE


def test_human_output(capsys):
    assert cli.main(['Aa1!Aa1!Aa1!']) == 0
    out = capsys.readouterr().out
    assert 'Strength: Strong (100/100)' in out
    assert 'Estimated crack time: centuries' in out
    assert 'Suggestions' not in out


def test_json_output_with_username(capsys):
    cli.main(['--json', '--username', 'alice@example.com', 'alice123'])
    report = json.loads(capsys.readouterr().out)
    assert report['score'] == 0
    assert report['suggestions'] == [USERNAME_MESSAGE]


def test_suggestions_are_listed(capsys):
    cli.main(['zebramango'])
    out = capsys.readouterr().out
    assert '  - Add uppercase letters.' in out
    assert '  - Include numbers.' in out


def test_prompts_when_no_password_given(monkeypatch, capsys):
    monkeypatch.setattr('getpass.getpass', lambda prompt='': 'Password')
    cli.main(['--json'])
    report = json.loads(capsys.readouterr().out)
    assert report['suggestions'] == [COMMON_PASSWORD_MESSAGE]


def test_generate(capsys):
    cli.main(['--generate', '--json'])
    report = json.loads(capsys.readouterr().out)
    assert report['password']
    assert report['score'] >= 70
