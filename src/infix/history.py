from collections import deque
import logging

from .util import (EmptyHistoryError, InvalidPositionError,
                   NoUndoneEquationError, wrap_user_errors)


logger = logging.getLogger(__name__)


class HistoryStack:
    '''
    Every equation entered, most recent on top, with undo and redo.

    Positions count from the top: the newest equation is 1, the oldest is
    size.
    '''

    HEADER = '{:<4}{:<35}{:<35}{:<34}{:<18}{:<12}{:<12}'.format(
        '#', 'Equation', 'Pre-Fix', 'Post-Fix',
        'Answer', 'Binary', 'Hexadecimal')
    RULE = '-' * 155
    LABEL = '{:<4}'

    def __init__(self):
        self.entries = deque()
        self.undone = deque()
        # Kept in lockstep with len(entries).
        self.size = 0

    def push(self, equation):
        '''
        Push equation onto the top.

        Leaves previously undone equations available to redo.
        '''
        self.entries.append(equation)
        self.size += 1
        logger.debug('Pushed %r, size %d', equation, self.size)

    @wrap_user_errors('Calculator history is empty.', EmptyHistoryError)
    def pop(self):
        '''
        Remove and return the top equation.
        '''
        equation = self.entries.pop()
        self.size -= 1
        return equation

    @wrap_user_errors('Calculator history is empty.', EmptyHistoryError)
    def peek(self):
        return self.entries[-1]

    def undo(self):
        '''
        Move the top equation aside, so redo can bring it back.
        '''
        equation = self.pop()
        self.undone.append(equation)
        logger.debug('Undid %r', equation)

    def redo(self):
        '''
        Put the most recently undone equation back on top.
        '''
        if not self.undone:
            raise NoUndoneEquationError('No last undone Equation.')
        equation = self.undone.pop()
        self.entries.append(equation)
        self.size += 1
        logger.debug('Redid %r', equation)

    def get_equation(self, position):
        '''
        Return the equation at position, counted from the top starting at 1.

        Looks through a copy; the history itself is never touched.
        '''
        if not 1 <= position <= self.size:
            raise InvalidPositionError(
                'Position is out of range or otherwise invalid.')
        copy = self.entries.copy()
        for _ in range(position - 1):
            copy.pop()
        return copy[-1]

    def clear(self):
        self.entries.clear()
        self.undone.clear()
        self.size = 0

    def __len__(self):
        return self.size

    def __iter__(self):
        '''
        Iterate over equations, top first.
        '''
        return reversed(self.entries)

    def _table(self, rows):
        lines = [self.HEADER, self.RULE]
        lines.extend(self.LABEL.format(position) + equation.format_row()
                     for position, equation in rows)
        return '\n'.join(lines)

    def format_top(self):
        '''
        Render the table header and the top equation only.
        '''
        return self._table([(1, self.peek())])

    def __str__(self):
        return self._table(enumerate(self, start=1))
