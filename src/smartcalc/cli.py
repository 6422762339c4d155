from os import isatty, path
from sys import stdin, stdout, stderr, exit
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory, InMemoryHistory

from .calculator import Calculator
from .lexer import normalize
from .util import CalcError, Exit


logger = logging.getLogger(__name__)


class InteractiveInput:
    def __init__(self, prompt, history=None):
        self.prompt = prompt
        self.history = history

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    history=self.history or InMemoryHistory(),
                                    enable_suspend=True,
                                    prompt_continuation=' ' * len(self.prompt),
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the calculator.
    '''

    DEFAULT_PROMPT = '> '
    HISTORY_FILE = '~/.smartcalc_history'
    GOODBYE = 'Bye!'

    def dumper(self):
        '''
        Dump the tokens and postfix sequence of every line.
        '''
        calculator = Calculator()
        print('[groups]\t<repr(lexeme)>')
        for line in self.args.expressions:
            try:
                for match in calculator.lexer.lex(normalize(line)):
                    groups = calculator.lexer.matchedgroups(match)
                    print(*groups.keys(),
                          repr(match.group(0)),
                          sep='\t')
                print('postfix', *calculator.postfix(line), sep='\t')
            # Abort entire rest of line
            except CalcError as e:
                print(e.message, file=stderr)

    def executor(self):
        '''
        Run the calculator, one line at a time.
        '''
        calculator = Calculator()
        for line in self.args.expressions:
            try:
                response = calculator.process(line)
            except Exit:
                print(self.GOODBYE)
                return
            if response is not None:
                print(response, flush=True)
        if self._interactive():
            print(self.GOODBYE)

    def _history(self):
        if self.args.no_history:
            return None
        return FileHistory(path.expanduser(self.HISTORY_FILE))

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(stdin.fileno()) and isatty(stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    history=self._history())
        else:
            return stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='Integer calculator with variables')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='log every step to stderr')
        self.argument_parser.add_argument('--no-history',
                                          action='store_true',
                                          help="don't save interactive "
                                               'history to ' +
                                               self.HISTORY_FILE)
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        self.argument_parser.add_argument('-D', '--dump',
                                          action='store_const',
                                          const=self.dumper,
                                          dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=stdin)

    def _interactive(self):
        return isinstance(self.args.expressions, InteractiveInput)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(stream=stderr,
                            level=(logging.DEBUG if self.args.verbose
                                   else logging.WARNING),
                            format='%(levelname)s %(name)s: %(message)s')
        logger.debug('arguments: %s', self.args)
        if self.args.expressions is stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)
