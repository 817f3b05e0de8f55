from collections import deque

from .util import NotBalancedError


class TokenStack:
    '''
    LIFO stack of tokens used while converting and evaluating equations.
    '''

    def __init__(self):
        self.items = deque()

    def push(self, *new):
        '''
        Push all items onto stack, leftmost at the bottom.
        '''
        self.items.extend(new)

    def pop(self, n=1):
        '''
        Pop specified number of items from stack, topmost first.
        '''
        if len(self.items) < n:
            raise NotBalancedError('Not enough operands.')
        return [self.items.pop() for _ in range(n)]

    def peek(self):
        return self.items[-1]

    def is_empty(self):
        return not self.items

    def __len__(self):
        return len(self.items)
