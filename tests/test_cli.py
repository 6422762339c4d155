'''
Command line tests
'''

from smartcalc import CLI

from pytest import raises


def run(capsys, *args):
    CLI().run(args=list(args))
    return capsys.readouterr()


def test_expressions(capsys):
    out, _ = run(capsys, '-e', 'a = 3', 'a ^ 2', '', 'b', '/exit', '5')
    assert out.splitlines() == ['9', 'Unknown variable', 'Bye!']


def test_no_goodbye_without_exit(capsys):
    out, _ = run(capsys, '-e', '1 + 1')
    assert out.splitlines() == ['2']


def test_dump(capsys):
    out, err = run(capsys, '-D', '-e', '-1+2')
    lines = out.splitlines()
    assert lines[0] == '[groups]\t<repr(lexeme)>'
    assert "number\t'0'" in lines
    assert 'postfix\t0\t1\t-\t2\t+' in lines
    assert not err


def test_dump_error(capsys):
    out, err = run(capsys, '-D', '-e', 'nope')
    assert err.strip() == 'Unknown variable'


def test_bad_arguments(capsys):
    with raises(SystemExit):
        run(capsys, '--bogus')


def test_big_values_keep_session_alive(capsys):
    out, _ = run(capsys, '-e', 'a = 2^20000', 'a + 1', '7')
    assert out.splitlines() == [str(2 ** 20000 + 1), '7']
