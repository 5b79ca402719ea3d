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

""" Position maps.

A position map assigns an integer slot to each item. A heap uses it to
handle the cross references between items and their position in the
underlying array. Any object offering the two methods

    - ``get(item)``, returning the slot of `item` (:data:`PRE_HEAP`
      for items never seen), and
    - ``set(item, value)``, storing a new slot for `item`,

can serve as a position map. Two implementations are provided: a dense
map for integer items and an associative map for hashable items.
"""

import logging

import numpy as np

from binheap.states import IN_HEAP, PRE_HEAP

logger = logging.getLogger(__name__)


class ArrayMap:
    """ Dense position map.

    Items are integers in ``range(size)``, typically vertex indices of
    a graph. Slots are stored in a :class:`~numpy.ndarray` that is
    initialized to :data:`PRE_HEAP`.

    Parameters
    ----------
    size : int
        Number of items.
    dtype : data-type, optional
        Integer type of the slot array.

    Note
    ----
    Out of range items raise an :class:`IndexError`. Negative items are
    **not** rejected, NumPy interprets them relative to the end of the
    array.
    """

    def __init__(self, size, dtype=np.intp):
        """ Initialize all slots to PRE_HEAP.
        """
        self._slots = np.full(size, PRE_HEAP, dtype=dtype)

    def __len__(self):
        """ Number of items.
        """
        return len(self._slots)

    def __getitem__(self, item):
        return self.get(item)

    def __setitem__(self, item, value):
        self.set(item, value)

    def get(self, item):
        """ Slot of an item.

        Parameters
        ----------
        item : int
            Item index.

        Returns
        -------
        int
            Heap position of `item` or a negative state value.
        """
        return int(self._slots[item])

    def set(self, item, value):
        """ Store slot of an item.

        Parameters
        ----------
        item : int
            Item index.
        value : int
            Heap position or a negative state value.
        """
        self._slots[item] = value

    @property
    def array(self):
        """ Read-only view of the slot array.

        :type: ~numpy.ndarray
        """
        view = self._slots.view()
        view.flags.writeable = False
        return view

    def states(self):
        """ Item states.

        Returns
        -------
        ~numpy.ndarray
            The state of each item, non-negative slots are reported as
            :data:`IN_HEAP`.
        """
        return np.minimum(self._slots, IN_HEAP)

    def reset(self, items=None):
        """ Reset items to PRE_HEAP.

        Parameters
        ----------
        items : iterable of int, optional
            Items to reset. All items are reset if omitted.
        """
        if items is None:
            self._slots.fill(PRE_HEAP)
            logger.debug('reset all %d slots', len(self._slots))
        else:
            index = np.fromiter(items, dtype=np.intp)
            self._slots[index] = PRE_HEAP
            logger.debug('reset %d slots', len(index))


class DictMap:
    """ Associative position map.

    Works for any hashable item type. Items without an entry are reported
    as :data:`PRE_HEAP`, hence no initialization is required.

    Parameters
    ----------
    items : iterable, optional
        Items to register as :data:`PRE_HEAP` upfront.
    """

    def __init__(self, items=None):
        if items is None:
            self._slots = dict()
        else:
            self._slots = dict.fromkeys(items, PRE_HEAP)

    def __len__(self):
        """ Number of items with an entry.
        """
        return len(self._slots)

    def __getitem__(self, item):
        return self.get(item)

    def __setitem__(self, item, value):
        self.set(item, value)

    def get(self, item):
        """ Slot of an item.

        Returns
        -------
        int
            Heap position of `item` or a negative state value.
        """
        return self._slots.get(item, PRE_HEAP)

    def set(self, item, value):
        """ Store slot of an item.
        """
        self._slots[item] = value

    def reset(self, items=None):
        """ Reset items to PRE_HEAP.

        Parameters
        ----------
        items : iterable, optional
            Items to reset. All entries are dropped if omitted.
        """
        if items is None:
            logger.debug('dropped %d entries', len(self._slots))
            self._slots.clear()
        else:
            count = 0
            for item in items:
                self._slots[item] = PRE_HEAP
                count += 1
            logger.debug('reset %d entries', count)
