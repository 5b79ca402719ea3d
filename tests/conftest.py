import pytest


def _check_heap(heap):
    """ Verify heap order and agreement with the position map.
    """
    data = heap._data
    less = heap.comp

    for i in range(1, len(data)):
        assert not less(data[i][1], data[(i - 1) // 2][1]), \
            f'heap order violated at index {i}'

    for i, (item, _) in enumerate(data):
        assert heap.map.get(item) == i, f'map disagrees at index {i}'

    assert len({item for item, _ in data}) == len(data)


@pytest.fixture
def check():
    return _check_heap
