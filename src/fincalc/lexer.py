from functools import reduce
import operator

import regex

from .items import Number
from .operations import REGISTRY
from .util import FinCalcError, wrap_user_errors
from .value import Value


class Lexer:
    '''
    Lexer for the calculator's *regular* grammar.

    Tokens are numbers, operation symbols and whitespace. Whitespace between
    tokens is optional where the longest match is unambiguous, so 3 4+ works
    like 3 4 +. A - directly before a digit is part of the number.
    '''
    # Integral part of a number
    INTEGRAL = r'''
                # DO NOT REPEAT ME! I REPEAT MYSELF INTERNALLY!
                (?:
                    # 1, 12, or the 1 in 1_200.
                    \d{1,3}
                    (?:
                        # The 4, 45, etc. in 1234, 12345, etc.
                        \d
                        |
                        # Support not just digits, but thousands separators
                        (?:
                            _\d{3}
                        )
                    )*
                )
                '''
    # Fractional part of a number
    FRACTIONAL = r'''
                  # DO NOT REPEAT ME! I REPEAT MYSELF INTERNALLY!
                  (?:
                      \d+
                      |
                      (?:
                          \d{3}
                          (?:
                              _\d{3}
                          )*
                          (?:
                              _\d{1,2}
                          )?
                      )*
                  )
                  '''
    # 1e6, 2.5E-3
    EXPONENT = r'''
                (?:
                    [eE]
                    [+-]?
                    \d+
                )
                '''
    # Number, of any kind supported by grammar.
    # String formatting and regex is a tricky business, because of the braces.
    # It works here. Be careful in general!
    NUMBER = r'''
              -?
              (?:
                  (?:
                      # 1, 12, 1_200, 1_200. (notice trailing dot), 1.3
                      {INTEGRAL}
                      (?:
                          \.
                          {FRACTIONAL}?
                      )?
                  )|(?:
                      # .2, 0.2, 0.200_200 but not 0.2_200
                      {INTEGRAL}?
                      \.
                      {FRACTIONAL}
                  )
              )
              {EXPONENT}?
              '''.format(INTEGRAL=INTEGRAL,
                         FRACTIONAL=FRACTIONAL,
                         EXPONENT=EXPONENT)
    SPACE = r'\s+'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.POSIX,
                    regex.DOTALL,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def __init__(self, registry=None):
        self.registry = REGISTRY if registry is None else registry
        # Longest first; e.g. SQRT must not lex as SQ RT.
        symbols = sorted(self.registry, key=len, reverse=True)
        if symbols:
            self.operators = r'(?:' + \
                             r'|'.join(map(regex.escape, symbols)) + \
                             r')'
        else:
            self.operators = r'(?!)'
        # All possible lexemes.
        self.grammar = r'(?<number>' + self.NUMBER + r')|' \
                       r'(?<operator>' + self.operators + r')|' \
                       r'(?<space>' + self.SPACE + r')'
        self.pattern = regex.compile(self.grammar, flags=self.FLAGS)

    def lex(self, line):
        '''
        Take a line and return all lexemes.

        Doesn't yield incomplete or incorrect lexemes, stopping on first bad.
        '''
        while line:
            match = self.pattern.match(line)
            if match is None or not match.group(0):
                break
            yield match
            line = line[len(match.group(0)):]
        if line:
            raise FinCalcError("Couldn't lex {0}".format(line.strip()))

    def isfeedable(self, match):
        '''
        Return True if lexeme is a stack item rather than a separator.
        '''
        return 'space' not in self.matchedgroups(match).keys()

    def matchedgroups(self, match):
        '''
        Return the named groups the lexeme matched.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value}

    def items(self, line):
        '''
        Yield the Numbers and Operations on line, in order.
        '''
        for match in self.lex(line):
            if not self.isfeedable(match):
                continue
            groups = self.matchedgroups(match)
            if 'number' in groups:
                yield self._number(groups['number'])
            else:
                yield self.registry.lookup(groups['operator'])

    @wrap_user_errors('Cannot convert {1}')
    def _number(self, text):
        return Number(Value(text))
