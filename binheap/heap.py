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

""" Addressable binary heap.

A heap stores items with associated priorities such that finding the item
of minimum priority is efficient. In contrast to the :py:mod:`heapq`
module the priority of an item can be changed, and an item can be erased,
given the item itself rather than its position.

To do so the heap relies on a *position map* (see :mod:`binheap.maps`)
that is owned by the caller. The map stores the array index of every item
in the heap, or one of the negative values :data:`~binheap.states.PRE_HEAP`
and :data:`~binheap.states.POST_HEAP` for items not in the heap. Priorities
are compared by a user supplied comparator.

Note
----
Preconditions (non-empty heap, item in heap, etc.) are checked by
assertions only. Violating a precondition with assertions disabled via
the "-O" command line argument leaves the heap in an undefined state.
"""

import logging
import operator

from binheap.states import State, IN_HEAP, PRE_HEAP, POST_HEAP

logger = logging.getLogger(__name__)


class BinHeap:
    """ Binary min-heap with item addressing.

    Parameters
    ----------
    map : object
        Position map with methods ``get(item)`` and ``set(item, value)``.
        It must report :data:`~binheap.states.PRE_HEAP` for every item
        to be put into the heap.
    comp : callable, optional
        Comparator ``comp(a, b)`` that returns `True` iff priority `a` is
        strictly less than priority `b`. Has to be a strict weak order.
        Defaults to :func:`operator.lt`.

    Note
    ----
    The heap holds on to `map` for its whole lifetime. Entries of items
    currently in the heap must not be changed by anybody else. Entries of
    other items may be read and written freely.
    """

    def __init__(self, map, comp=operator.lt):
        """ Initialize an empty heap.
        """
        # Heap ordered list of (item, priority) tuples. The children of
        # index i are 2i+1 and 2i+2.
        self._data = []
        self._comp = comp
        self._iim = map

    def __len__(self):
        """ Return number of stored items.
        """
        return len(self._data)

    def __bool__(self):
        """ Implicit empty heap check.
        """
        return len(self._data) > 0

    def __getitem__(self, item):
        """ Priority of an item, see :meth:`get`.
        """
        return self.get(item)

    @property
    def map(self):
        """ The position map.
        """
        return self._iim

    @property
    def comp(self):
        """ The priority comparator.
        """
        return self._comp

    def size(self):
        """ Number of items stored in the heap.

        Returns
        -------
        int
        """
        return len(self._data)

    def empty(self):
        """ Check if the heap stores no items.

        Returns
        -------
        bool
        """
        return not self._data

    def clear(self):
        """ Remove all items.

        The position map is **not** changed. Entries of items that were in
        the heap keep their (now stale) non-negative values. Before reusing
        the heap either provide a fresh map or reset these entries to
        :data:`~binheap.states.PRE_HEAP`, e.g., via ``map.reset()``.
        """
        logger.debug('clearing heap, %d map entries left stale',
                     len(self._data))
        self._data.clear()

    def top(self):
        """ Item of minimum priority.

        Returns
        -------
        object
            The item with minimum priority relative to the comparator.
        """
        assert self._data, 'top of empty heap'
        return self._data[0][0]

    def prio(self):
        """ Minimum priority.

        Returns
        -------
        object
            Priority of the :meth:`top` item.
        """
        assert self._data, 'prio of empty heap'
        return self._data[0][1]

    def get(self, item):
        """ Priority of an item.

        Parameters
        ----------
        item : object
            An item stored in the heap.

        Returns
        -------
        object
            Priority of `item`.
        """
        idx = self._iim.get(item)
        assert 0 <= idx < len(self._data), 'item not in heap'
        return self._data[idx][1]

    def state(self, item):
        """ State of an item.

        Parameters
        ----------
        item : object
            The item.

        Returns
        -------
        State
            :data:`~binheap.states.IN_HEAP` if `item` is in the heap,
            :data:`~binheap.states.PRE_HEAP` if it has never been in the
            heap, and :data:`~binheap.states.POST_HEAP` otherwise. In the
            latter case `item` may get back into the heap again.
        """
        s = self._iim.get(item)
        if s >= 0:
            s = IN_HEAP
        return State(s)

    def set_state(self, item, st):
        """ Set the state of an item.

        An item in the heap is erased before its state is changed. This
        can be used to clear the heap and reset the position map at the
        same time.

        Parameters
        ----------
        item : object
            The item.
        st : State
            The new state, :data:`~binheap.states.IN_HEAP` is silently
            ignored. Items get into the heap via :meth:`push` or
            :meth:`set` only.
        """
        if st == PRE_HEAP or st == POST_HEAP:
            if self.state(item) == IN_HEAP:
                self.erase(item)
            self._iim.set(item, st)

    def push(self, item, priority):
        """ Insert an item.

        Parameters
        ----------
        item : object
            Item not currently stored in the heap. Use :meth:`set` for
            items that may already be present.
        priority : object
            Priority of the item.
        """
        assert self._iim.get(item) < 0, 'item already in heap'
        n = len(self._data)
        self._data.append(None)
        self._bubble_up(n, (item, priority))

    def pop(self):
        """ Remove the item of minimum priority.
        """
        assert self._data, 'pop from empty heap'
        n = len(self._data) - 1

        # Mark the item before the hole is filled, its slot must never
        # refer to a live index.
        self._iim.set(self._data[0][0], POST_HEAP)
        if n > 0:
            self._bubble_down(0, self._data[n], n)
        self._data.pop()

    def erase(self, item):
        """ Remove an item.

        Parameters
        ----------
        item : object
            Item stored in the heap.
        """
        h = self._iim.get(item)
        n = len(self._data) - 1
        assert 0 <= h <= n, 'item not in heap'

        self._iim.set(self._data[h][0], POST_HEAP)

        # The last item fills the hole. Its priority may be smaller or
        # larger than the one of the erased item.
        if h < n:
            last = self._data[n]
            if self._bubble_up(h, last) == h:
                self._bubble_down(h, last, n)
        self._data.pop()

    def set(self, item, priority):
        """ Set the priority of an item.

        Inserts `item` if it is not stored in the heap, otherwise its
        priority is changed to `priority` in either direction.

        Parameters
        ----------
        item : object
            The item.
        priority : object
            The new priority.
        """
        idx = self._iim.get(item)
        if idx < 0:
            self.push(item, priority)
        elif self._comp(priority, self._data[idx][1]):
            self._bubble_up(idx, (item, priority))
        else:
            self._bubble_down(idx, (item, priority), len(self._data))

    def decrease(self, item, priority):
        """ Decrease the priority of an item.

        Parameters
        ----------
        item : object
            Item stored in the heap.
        priority : object
            The new priority, not greater than the current one.
        """
        idx = self._iim.get(item)
        assert 0 <= idx < len(self._data), 'item not in heap'
        self._bubble_up(idx, (item, priority))

    def increase(self, item, priority):
        """ Increase the priority of an item.

        Parameters
        ----------
        item : object
            Item stored in the heap.
        priority : object
            The new priority, not less than the current one.
        """
        idx = self._iim.get(item)
        assert 0 <= idx < len(self._data), 'item not in heap'
        self._bubble_down(idx, (item, priority), len(self._data))

    def replace(self, old, new):
        """ Replace an item by another one.

        `new` takes the place of `old` with the same priority. The heap
        structure is not changed. `old` takes over the previous state of
        `new`, i.e., it becomes either
        :data:`~binheap.states.PRE_HEAP` or
        :data:`~binheap.states.POST_HEAP`.

        Parameters
        ----------
        old : object
            Item stored in the heap.
        new : object
            Item not stored in the heap.
        """
        idx = self._iim.get(old)
        assert 0 <= idx < len(self._data), 'item not in heap'
        assert self._iim.get(new) < 0, 'item already in heap'

        self._iim.set(old, self._iim.get(new))
        self._iim.set(new, idx)
        self._data[idx] = (new, self._data[idx][1])

    def _less(self, p, q):
        return self._comp(p[1], q[1])

    def _move(self, pair, i):
        """ Store a pair at an array position.

        The array and the position map are always updated together.
        """
        self._data[i] = pair
        self._iim.set(pair[0], i)

    def _bubble_up(self, hole, pair):
        """ Move a hole towards the root.

        Parents of larger priority than `pair` are moved into the hole
        until the position of `pair` is found.

        Parameters
        ----------
        hole : int
            Start position.
        pair : tuple
            The (item, priority) pair to place.

        Returns
        -------
        int
            Final position of `pair`.
        """
        par = (hole - 1) // 2
        while hole > 0 and self._less(pair, self._data[par]):
            self._move(self._data[par], hole)
            hole = par
            par = (hole - 1) // 2
        self._move(pair, hole)
        return hole

    def _bubble_down(self, hole, pair, length):
        """ Move a hole towards the leaves.

        Parameters
        ----------
        hole : int
            Start position.
        pair : tuple
            The (item, priority) pair to place.
        length : int
            Number of valid array entries.

        Returns
        -------
        int
            Final position of `pair`.
        """
        data = self._data

        # Iterate as long as both children exist, starting with the
        # index of the second child.
        child = 2 * hole + 2
        while child < length:
            if self._less(data[child - 1], data[child]):
                child -= 1
            if not self._less(data[child], pair):
                self._move(pair, hole)
                return hole
            self._move(data[child], hole)
            hole = child
            child = 2 * hole + 2

        # A last internal node may have a first child only.
        child -= 1
        if child < length and self._less(data[child], pair):
            self._move(data[child], hole)
            hole = child

        self._move(pair, hole)
        return hole
