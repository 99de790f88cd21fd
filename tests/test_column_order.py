import pytest

from pqformat.metadata.column_order import ColumnOrder, SortOrder


def test_undefined_sorts_signed():
    assert ColumnOrder.undefined().sort_order() is SortOrder.SIGNED


@pytest.mark.parametrize("order", list(SortOrder))
def test_type_defined_keeps_order(order):
    assert ColumnOrder.type_defined(order).sort_order() is order


def test_undefined_differs_from_type_defined_signed():
    undefined = ColumnOrder.undefined()
    signed = ColumnOrder.type_defined(SortOrder.SIGNED)
    assert undefined.sort_order() == signed.sort_order()
    assert not undefined == signed
    assert undefined.is_undefined
    assert not signed.is_undefined


def test_equality_of_same_order():
    first = ColumnOrder.type_defined(SortOrder.UNSIGNED)
    second = ColumnOrder.type_defined(SortOrder.UNSIGNED)
    assert first == second
    assert first.sort_order() is SortOrder.UNSIGNED
    assert hash(first) == hash(second)
    undefined_a = ColumnOrder.undefined()
    undefined_b = ColumnOrder.undefined()
    assert undefined_a == undefined_b
    assert undefined_a.is_undefined


def test_type_defined_rejects_non_sort_order():
    with pytest.raises(TypeError):
        ColumnOrder.type_defined("signed")


def test_constructor_rejects_non_sort_order():
    with pytest.raises(TypeError):
        ColumnOrder(3)


def test_hashable_in_set():
    orders = {
        ColumnOrder.undefined(),
        ColumnOrder.undefined(),
        ColumnOrder.type_defined(SortOrder.UNDEFINED),
    }
    assert len(orders) == 2