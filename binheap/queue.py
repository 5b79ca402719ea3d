# Copyright 2024, m3shware
#
# Permission is hereby granted, free of charge, to any person obtaining a
# copy of this software and associated documentation files (the "Software"),
# to deal in the Software without restriction, including without limitation
# the rights to use, copy, modify, merge, publish, distribute, sublicense,
# and/or sell copies of the Software, and to permit persons to whom the
# Software is furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING
# FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS
# IN THE SOFTWARE.

""" Priority queues.

Self-contained priority queues on top of :class:`~binheap.heap.BinHeap`.
Each queue owns its position map, hence no setup is required and
preconditions are checked: invalid requests raise exceptions instead of
corrupting the queue.
"""

import operator

from binheap.heap import BinHeap
from binheap.maps import DictMap
from binheap.states import IN_HEAP


class _Queue:
    """ Abstract priority queue base class.

    Parameters
    ----------
    comp : callable
        Priority comparator.
    items : iterable, optional
        A sequence of `(object, priority)` pairs.
    """

    def __init__(self, comp, items=None):
        """ Initialize queue attributes.
        """
        self._heap = BinHeap(DictMap(), comp)

        if items is not None:
            for item in items:
                self.push(*item)

    def __bool__(self):
        """ Implicit empty queue check.
        """
        return bool(self._heap)

    def __contains__(self, data):
        """ Containment check.
        """
        return self._heap.state(data) == IN_HEAP

    def __len__(self):
        """ Return number of queued items.
        """
        return len(self._heap)

    def __iter__(self):
        """ Item iterator.

        Iterates over all `(object, priority)` pairs in the order they
        are stored in the underlying array object, which is **not** the
        order of priority.
        """
        return iter(list(self._heap._data))

    @property
    def top(self):
        """ Access item of highest priority.

        :type: 2-tuple of `object` and `priority`.

        Raises
        ------
        IndexError
            When trying to access the top element of an empty queue.
        """
        if not self._heap:
            raise IndexError('top of empty queue')

        return self._heap.top(), self._heap.prio()

    def state(self, data):
        """ Queue state of a data object.

        Returns
        -------
        State
            Whether `data` is queued, has been queued before, or never was.
        """
        return self._heap.state(data)

    def pop(self):
        """ Remove item of highest priority.

        Returns
        -------
        data : object
            Object of highest priority.
        priority : object
            Object priority.

        Raises
        ------
        IndexError
            When trying to remove items from an empty queue.
        """
        top = self.top
        self._heap.pop()
        return top

    def push(self, data, priority):
        """ Add data object.

        Re-adding an already queued object will update the queued object's
        priority instead of adding a duplicate with a different priority,
        see :meth:`update`.

        Parameters
        ----------
        data : object
            Object to be added to the priority queue.
        priority : object
            Priority of the data object.

        Raises
        ------
        TypeError
            If `data` is not derived from a hashable data type.
        """
        self._heap.set(data, priority)

    def update(self, data, priority):
        """ Update priority of a data object.

        Parameters
        ----------
        data : object
            Object whose priority should be updated.
        priority : object
            New priority value.

        Raises
        ------
        KeyError
            If `data` is not an element of the queue.
        """
        if data not in self:
            raise KeyError(data)

        self._heap.set(data, priority)

    def remove(self, data):
        """ Remove data object from queue.

        Parameters
        ----------
        data : object
            The data object to be removed.

        Raises
        ------
        KeyError
            If `data` is not queued.

        Returns
        -------
        object
            Priority of the removed object.
        """
        if data not in self:
            raise KeyError(data)

        priority = self._heap.get(data)
        self._heap.erase(data)
        return priority


class MinHeap(_Queue):
    """ Priority queue.

    Smaller priority values signify higher priority. The :attr:`top` element of
    a priority queue is the object of highest priority.

    Parameters
    ----------
    items : iterable, optional
        A sequence of `(object, priority)` pairs. Generically, `priority` is
        a numeric data type.

    Note
    ----
    Only `hashable <https://docs.python.org/3/glossary.html#term-hashable>`_
    objects can be added to a heap. All user defined types are hashable.
    """

    def __init__(self, items=None):
        super().__init__(operator.lt, items)


class MaxHeap(_Queue):
    """ Priority queue.

    Larger priority values signify higher priority. The :attr:`top` element of
    a priority queue is the object of highest priority.

    Parameters
    ----------
    items : iterable, optional
        A sequence of `(object, priority)` pairs. Generically, `priority` is
        a numeric data type.

    Note
    ----
    Only `hashable <https://docs.python.org/3/glossary.html#term-hashable>`_
    objects can be added to a heap. All user defined types are hashable.
    """

    def __init__(self, items=None):
        super().__init__(operator.gt, items)
