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

""" Heap item states.

Each item has a state associated to it. It may be "in heap", "pre heap"
or "post heap". The latter two are indifferent from the heap's point of
view, but may be useful to the user.

Note
----
The integer values are part of the contract with a position map. A map
must report :data:`PRE_HEAP` for every item that will ever be put into
a heap.
"""

from enum import IntEnum


class State(IntEnum):
    """ Item state enumeration.
    """

    IN_HEAP = 0
    """ Item is currently stored in the heap.

    A position map stores the array index of the item, any non-negative
    value is reported as this state."""

    PRE_HEAP = -1
    """ Item has never been in the heap (or was reset). """

    POST_HEAP = -2
    """ Item has been in the heap and was removed since. """


IN_HEAP = State.IN_HEAP
PRE_HEAP = State.PRE_HEAP
POST_HEAP = State.POST_HEAP
