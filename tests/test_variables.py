import pytest

from subaruu.variables import VariableStore


def test_all_letters_start_at_zero():
    store = VariableStore()
    assert len(store) == 26
    assert all(value == 0 for value in store.values())
    assert store.read('Q') == 0


def test_assign_is_case_insensitive():
    store = VariableStore()
    store.assign('K', 9)
    assert store.read('k') == 9
    assert store['k'] == 9


def test_keys_are_fixed():
    store = VariableStore()
    with pytest.raises(TypeError):
        store['ab'] = 1
    with pytest.raises(TypeError):
        del store['a']
    with pytest.raises(TypeError):
        store.pop('a')
    with pytest.raises(TypeError):
        store.clear()
    assert len(store) == 26


def test_reset():
    store = VariableStore()
    store.assign('x', 3)
    store.reset()
    assert store.read('x') == 0
    assert len(store) == 26


def test_merge_cannot_add_keys():
    store = VariableStore()
    with pytest.raises(TypeError):
        store |= {'ab': 1}
    assert len(store) == 26
