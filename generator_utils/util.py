import collections.abc


def is_iterable(val):
    """
    Check if val is a collections.abc.Iterable. Strings count, since iterating one is well
    defined.

    >>> is_iterable([1, 2])
    True
    >>> is_iterable(iter([1, 2]))
    True
    >>> is_iterable(1)
    False

    :param val: value to check
    :return: True if iter() can be called on val
    """
    return isinstance(val, collections.abc.Iterable)


def prepend(head_and_tail):
    """
    Flattens a (head, tail) pair into one tuple with head in front of the tail's items

    >>> prepend((1, (2, 3)))
    (1, 2, 3)

    :param head_and_tail: pair of a value and a tuple
    :return: flat tuple
    """
    head, tail = head_and_tail
    return (head,) + tuple(tail)
