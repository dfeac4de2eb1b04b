import threading

import pytest

from fastfss.config import get_grid_dim, set_grid_dim


@pytest.fixture(autouse=True)
def restore_grid_dim():
    saved = get_grid_dim()
    yield
    set_grid_dim(saved)


def test_default_grid_dim():
    assert get_grid_dim() == 32


def test_set_then_get():
    set_grid_dim(7)
    assert get_grid_dim() == 7
    set_grid_dim(1)
    assert get_grid_dim() == 1


@pytest.mark.parametrize("dim", [0, -1, -32])
def test_non_positive_rejected_and_value_kept(dim):
    set_grid_dim(12)
    with pytest.raises(ValueError):
        set_grid_dim(dim)
    assert get_grid_dim() == 12


def test_concurrent_sets_leave_one_of_the_values():
    values = list(range(1, 17))
    threads = [threading.Thread(target=set_grid_dim, args=(v,)) for v in values]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert get_grid_dim() in values