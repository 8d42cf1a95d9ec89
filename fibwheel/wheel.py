"""
Double linked circular lists ("wheels").

A wheel is kept as two persistent singly linked lists ``front`` and
``back``.  The pair ``([y1, ..., yn], [z1, ..., zm])`` stands for the
circular list ``y1, ..., yn, zm, ..., z1``: the element to the right of
``z1`` is ``y1`` and the element to the left of ``y1`` is ``z1``.  The head
is ``y1``, or ``zm`` when ``front`` is empty.

Linked lists are nested 2-tuples ``(value, rest)`` with ``None`` as the
empty list.  Cells are never mutated, so wheels share structure freely and
every operation returns a new wheel.
"""


class EmptyStructure(IndexError):
    """Raised when reading or extracting from an empty wheel or heap."""


def _items(lst):
    while lst is not None:
        yield lst[0]
        lst = lst[1]


def _reverse(lst, acc=None):
    """Return ``reverse(lst) ++ acc``."""
    while lst is not None:
        acc = (lst[0], acc)
        lst = lst[1]
    return acc


def _append(lst, tail):
    """Return ``lst ++ tail``."""
    return _reverse(_reverse(lst), tail)


def _from_items(items, tail=None):
    for x in reversed(items):
        tail = (x, tail)
    return tail


def _last(lst):
    while lst[1] is not None:
        lst = lst[1]
    return lst[0]


class Wheel():
    """
    Circular list with a distinguished head.

    Attributes:
        front: linked list read clockwise from the head
        back: linked list read anti-clockwise from the element left of
            the head

    Methods:
        head(): read the head element
        rotate_right(): move the head to the next element clockwise
        rotate_left(): move the head to the next element anti-clockwise
        insert(x): insert ``x`` left of the head and make it the head
        extract(): remove the head, the next element clockwise becomes head
        concat(other): splice ``other`` after the last element
    """

    __slots__ = ('_front', '_back', '_size')

    def __init__(self, front=None, back=None, size=0):
        self._front, self._back, self._size = front, back, size

    @classmethod
    def empty(cls):
        return cls()

    @classmethod
    def from_iterable(cls, items):
        items = list(items)
        return cls(_from_items(items), None, len(items))

    def is_empty(self):
        return self._size == 0

    def head(self):
        if self._front is not None:
            return self._front[0]
        if self._back is None:
            raise EmptyStructure("Empty Wheel")
        return _last(self._back)

    def rotate_right(self):
        if self._size <= 1:
            return self
        front, back = self._front, self._back
        if front is None:
            front, back = _reverse(back), None
        x, rest = front
        return Wheel(rest, (x, back), self._size)

    def rotate_left(self):
        if self._size <= 1:
            return self
        front, back = self._front, self._back
        if back is None:
            front, back = None, _reverse(front)
        y, rest = back
        return Wheel((y, front), rest, self._size)

    def insert(self, x):
        return Wheel((x, self._front), self._back, self._size + 1)

    def extract(self):
        if self._size == 0:
            raise EmptyStructure("Empty Wheel")
        front, back = self._front, self._back
        if front is None:
            front, back = _reverse(back), None
        x, rest = front
        return x, Wheel(rest, back, self._size - 1)

    def concat(self, other):
        """
        Concatenate two wheels.

        The result reads clockwise as ``self`` followed by ``other``; its
        head is the head of ``self`` if ``self`` is non-empty.  Costs
        O(len(self)), ``other`` is shared untouched.
        """
        if self._size == 0:
            return other
        if other._size == 0:
            return self
        front = _append(self._front, _reverse(self._back, other._front))
        return Wheel(front, other._back, self._size + other._size)

    def __add__(self, other):
        return self.concat(other)

    def __iter__(self):
        yield from _items(self._front)
        yield from reversed(list(_items(self._back)))

    def __len__(self):
        return self._size

    def __bool__(self):
        return self._size != 0

    def __eq__(self, other):
        if not isinstance(other, Wheel):
            return NotImplemented
        return self._size == other._size and list(self) == list(other)

    __hash__ = None

    def __repr__(self):
        return f'Wheel({list(self)!r})'
