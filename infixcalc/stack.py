from .errors import StackUnderflow


class Stack:
    '''
    A LIFO container that raises StackUnderflow instead of IndexError
    '''
    def __init__(self, items=()):
        self.items = list(items)

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __repr__(self):
        return 'Stack({!r})'.format(self.items)

    def push(self, item):
        self.items.append(item)

    def pop(self):
        if not self.items:
            raise StackUnderflow('pop from an empty stack')
        return self.items.pop()

    def peek(self):
        if not self.items:
            raise StackUnderflow('peek at an empty stack')
        return self.items[-1]

    def empty(self):
        return not self.items
