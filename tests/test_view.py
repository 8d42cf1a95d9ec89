from fibwheel import FibHeap, heap_view


def test_heap_view():
    h = FibHeap.from_iterable([5, 3, 9, 3, 7]).extract_min()[1]
    text = heap_view(h)
    lines = text.strip().splitlines()
    assert lines[0] == 'root'
    assert len(lines) == len(h) + 1
    for key in ['3', '5', '7', '9']:
        assert key in text


def test_empty_heap_view():
    assert heap_view(FibHeap()).strip() == 'root'
