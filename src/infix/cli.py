from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging
import sys

from prompt_toolkit import PromptSession

from .equation import Equation
from .history import HistoryStack
from .util import (CalculatorError, EmptyHistoryError, InvalidPositionError,
                   NoUndoneEquationError)


logger = logging.getLogger(__name__)


class InteractiveInput:
    '''
    Menu answers read from a line editor, with history and vi bindings.
    '''

    def __init__(self, prompt):
        self.prompt = prompt
        self.session = PromptSession(message=prompt,
                                     vi_mode=True,
                                     enable_suspend=True,
                                     enable_open_in_editor=True,
                                     mouse_support=False,
                                     erase_when_done=False)

    def read(self, message=None, default=''):
        return self.session.prompt(message or self.prompt, default=default)


class StreamInput:
    '''
    Menu answers read line by line from a non-interactive stream.

    An empty line takes the default.
    '''

    def __init__(self, stream):
        self.lines = iter(stream)

    def read(self, message=None, default=''):
        line = next(self.lines, None)
        if line is None:
            raise EOFError
        return line.rstrip('\n') or default


class CLI:
    '''
    Command line interface to the infix calculator.
    '''

    DEFAULT_PROMPT = 'Select an option: '
    MENU = ('[A] Add new equation\n'
            '[F] Change equation from history\n'
            '[B] Print previous equation\n'
            '[P] Print full history\n'
            '[U] Undo\n'
            '[R] Redo\n'
            '[C] Clear history\n'
            '[Q] Quit\n')

    def __init__(self, stream=None):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.

        :param stream: Where menu answers come from; stdin by default.
        '''
        self.stream = stream if stream is not None else sys.stdin
        self.history = HistoryStack()
        self.done = False
        self.argument_parser = ArgumentParser(
            description='Infix calculator with history')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        self.argument_parser.set_defaults(expressions=None)

    def _record(self, equation):
        '''
        Push equation onto the history and report how it went.
        '''
        self.history.push(equation)
        if equation.balanced:
            print('The equation is balanced and the answer is '
                  '{:.3f}\n'.format(equation.answer))
        else:
            print(equation.fault.args[0], file=sys.stderr)
            print('The equation is not balanced but saved.\n')

    def add(self, reader):
        '''
        Read, solve and save a new equation.
        '''
        text = reader.read('Please enter an equation (in-fix notation): ')
        self._record(Equation(text))

    def change(self, reader):
        '''
        Edit an equation from history and save the result as a new one.
        '''
        answer = reader.read('Which equation would you like to change? ')
        try:
            position = int(answer)
        except ValueError:
            print('\nPlease enter a valid number.\n')
            return
        try:
            equation = self.history.get_equation(position)
        except InvalidPositionError:
            print('\nNo equation at this position.\n')
            return
        print('\nEquation at position {}: {}'.format(position, equation.text))
        text = reader.read('Equation: ', default=equation.text)
        self._record(Equation(text))

    def previous(self, reader):
        '''
        Print the most recent equation.
        '''
        if not self.history:
            print('Calculator History is empty.\n')
        else:
            print()
            print(self.history.format_top())

    def printhistory(self, reader):
        print()
        print(self.history)

    def undo(self, reader):
        try:
            equation = self.history.peek()
            self.history.undo()
        except EmptyHistoryError:
            print('\nNo equation to undo.\n')
        else:
            print("Equation '{}' undone.\n".format(equation.text))

    def redo(self, reader):
        try:
            self.history.redo()
        except NoUndoneEquationError:
            print('\nNo equation to redo.\n')
        else:
            print("Redoing equation '{}'.\n".format(self.history.peek().text))

    def clear(self, reader):
        self.history = HistoryStack()
        print('\nResetting calculator.\n')

    def quit(self, reader):
        print('\nProgram terminating normally...')
        self.done = True

    # Menu selections.
    COMMANDS = {
        'A': add,
        'F': change,
        'B': previous,
        'P': printhistory,
        'U': undo,
        'R': redo,
        'C': clear,
        'Q': quit,
    }

    def _prompting_input(self):
        '''
        Return a line editor if either:
        - prompt explicitly specified.
        - both stdin/out are a tty

        Otherwise read the stream as is.
        '''
        if self.args.prompt or \
           self.stream.isatty() and sys.stdout.isatty():
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT)
        else:
            return StreamInput(self.stream)

    def menu(self):
        '''
        Run the menu until quit or end of input.
        '''
        reader = self._prompting_input()
        print('Welcome to the infix calculator.\n')
        self.done = False
        while not self.done:
            print(self.MENU)
            try:
                selection = reader.read()
                command = self.COMMANDS.get(selection.strip().upper())
                if command is None:
                    print('\nPlease enter a selection from the menu.\n')
                    continue
                command(self, reader)
            except EOFError:
                break
            except CalculatorError as e:
                print(e.args[0], file=sys.stderr)

    def evaluator(self):
        '''
        Solve every expression given on the command line, then print them.
        '''
        for text in self.args.expressions:
            equation = Equation(text)
            self.history.push(equation)
            if not equation.balanced:
                print('{}: {}'.format(text, equation.fault.args[0]),
                      file=sys.stderr)
        print(self.history)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(level=logging.DEBUG if self.args.verbose
                            else logging.WARNING,
                            format='%(levelname)s: %(name)s: %(message)s')
        logger.debug('Arguments: %s', self.args)
        try:
            if self.args.expressions:
                self.evaluator()
            else:
                self.menu()
        except KeyboardInterrupt:
            sys.exit(1)
