from os import isatty, path
import sys
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import FileHistory

from .util import FinCalcError
from .precision import Precision, ROUNDING_MODES
from .operations import CATEGORIES
from .session import Session


logger = logging.getLogger(__name__)


class InteractiveInput:
    def __init__(self, prompt, session, history_file):
        self.prompt = prompt
        self.session = session
        self.history_file = history_file

    def _rprompt(self):
        return '[{}]'.format(len(self.session.stack))

    def _bottom_toolbar(self):
        precision = self.session.precision
        rounding = {constant: name
                    for name, constant
                    in ROUNDING_MODES.items()}[precision.rounding]
        return 'places: {}  rounding: {}'.format(precision.places, rounding)

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    # Persistent
                                    history=FileHistory(
                                        path.expanduser(self.history_file)),
                                    completer=WordCompleter(
                                        sorted(self.session.registry),
                                        WORD=True),
                                    # Stack depth
                                    rprompt=self._rprompt,
                                    bottom_toolbar=self._bottom_toolbar,
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Debatable. Interferes with X11 selection.
                                    mouse_support=True,
                                    # Certainly not! But be explicit.
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
    HISTORY_FILE = '~/.fincalc_history'

    def dumper(self):
        '''
        Dump all lexemes matches, text, and arity.
        '''
        lexer = self.session.lexer
        print('[groups]\t<repr(text)>\t<arity>')
        for line in self.args.expressions:
            for match in lexer.lex(line):
                matched = match.group(0)  # the lexeme text itself
                groups = lexer.matchedgroups(match)
                if 'operator' in groups:
                    operation = lexer.registry.lookup(groups['operator'])
                    arity = operation.operand_count()
                else:
                    arity = 0
                print(*groups.keys(),
                      repr(matched),
                      arity,
                      sep='\t')

    def executor(self):
        '''
        Run calculator, printing the stack after every line.
        '''
        session = self.session
        for line in self.args.expressions:
            try:
                session.feed(line)
            # Abort entire rest of line, makes sense anyway
            except FinCalcError as e:
                logger.debug('Rejected %r', line, exc_info=True)
                print(e.args[0], file=sys.stderr)
                continue
            if session.stack:
                print(session.format_stack())

    def lister(self):
        '''
        Print every operation, by category.
        '''
        registry = self.session.registry
        registered = registry.operations()
        categorized = []
        for category, operations in CATEGORIES.items():
            categorized.extend(operations)
            print('[{}]'.format(category))
            for operation in operations:
                if operation in registered:
                    self._list(operation)
        others = [operation
                  for operation in registered
                  if operation not in categorized]
        if others:
            print('[Other]')
            for operation in others:
                self._list(operation)

    def _list(self, operation):
        print(' '.join(self.session.registry.aliases(operation)),
              operation.description(),
              sep='\t')

    def describer(self):
        '''
        Print help for one operation.
        '''
        print(self.session.describe(self.args.describe))

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        print(self.session.lexer.grammar)

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(sys.stdin.fileno()) and isatty(sys.stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    session=self.session,
                                    history_file=self.HISTORY_FILE)
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='RPN financial calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-k', '--precision',
                                          type=int,
                                          dest='places',
                                          metavar='PLACES',
                                          help='decimal places, {} to {}'
                                               .format(Precision.MIN_PLACES,
                                                       Precision.MAX_PLACES))
        self.argument_parser.add_argument('-r', '--rounding',
                                          choices=sorted(ROUNDING_MODES))
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-L', '--list', self.lister),
                                      ('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        main_groups.add_argument('-H', '--describe',
                                 metavar='SYMBOL')
        self.argument_parser.set_defaults(action=self.executor)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(
            level=logging.DEBUG if self.args.verbose else logging.WARNING,
            format='%(levelname)s:%(name)s: %(message)s')
        try:
            self.session = Session(precision=Precision(self.args.places,
                                                       self.args.rounding))
        except FinCalcError as e:
            self.argument_parser.error(e.args[0])
        if self.args.describe is not None:
            self.args.action = self.describer
        if self.args.expressions is None:
            # Only the executor and dumper read input.
            if self.args.action in (self.executor, self.dumper):
                self.args.expressions = self._prompting_input()
        else:
            # -e 3 4 + is one line
            self.args.expressions = [' '.join(self.args.expressions)]
        try:
            self.args.action()
        except FinCalcError as e:
            print(e.args[0], file=sys.stderr)
            sys.exit(1)
        except KeyboardInterrupt:
            sys.exit(1)


def main():
    CLI().run()
