"""
Tests for all_keys
"""
import collections

import pytest
import enhanced_access as ea


def test_get_mapping():
    d = {'a': {'b': 1}, 'c': {'b': 2}}
    assert ea.get_in(d, [ea.all_keys(), 'b']) == [1, 2]
    assert ea.get_in(d, [ea.all_keys()]) == [{'b': 1}, {'b': 2}]


def test_get_keyword():
    kw = [('a', {'b': 1}), ('c', {'b': 2})]
    assert ea.get_in(kw, [ea.all_keys()]) == [{'b': 1}, {'b': 2}]


def test_get_deeper_with_optional():
    d = {'a': {'b': {'c': 1}}, 'd': {'b': {'c': 2}}, 'e': {'b': 1}}
    r = ea.get_in(d, [ea.all_keys(), 'b', ea.optional_key('c')])
    assert r == [1, 2, None]


def test_get_length_and_order():
    d = {'z': 1, 'y': 2, 'x': 3}
    assert ea.get_in(d, [ea.all_keys()]) == [1, 2, 3]


def test_get_duplicate_keys_in_keyword():
    kw = [('a', 1), ('a', 2), ('b', 3)]
    assert ea.get_in(kw, [ea.all_keys()]) == [1, 2, 3]


def test_update_mapping():
    d = {'a': {'b': 1}, 'c': {'b': 2}}
    r = ea.update_in(d, [ea.all_keys(), 'b'], lambda v: v + 1)
    assert r == {'a': {'b': 2}, 'c': {'b': 3}}
    # input untouched
    assert d == {'a': {'b': 1}, 'c': {'b': 2}}


def test_update_keyword_of_mappings():
    kw = [('a', {'b': 1}), ('c', {'b': 2})]
    r = ea.update_in(kw, [ea.all_keys(), 'b'], lambda v: v + 1)
    assert r == [('a', {'b': 2}), ('c', {'b': 3})]


def test_update_keyword_of_keywords():
    kw = [('a', [('b', 1)]), ('c', [('b', 2)])]
    r = ea.update_in(kw, [ea.all_keys(), 'b'], lambda v: v + 1)
    assert r == [('a', [('b', 2)]), ('c', [('b', 3)])]


def test_get_and_update():
    d = {'a': {'b': 1}, 'c': {'b': 2}}
    r = ea.get_and_update_in(d, [ea.all_keys(), 'b'], lambda v: (v, v + 1))
    assert r == ([1, 2], {'a': {'b': 2}, 'c': {'b': 3}})


def test_get_and_update_identity_round_trip():
    d = {'a': 1, 'b': [('x', 2)], 'c': None}
    got, new = ea.get_and_update_in(d, [ea.all_keys()], lambda v: (v, v))
    assert got == [1, [('x', 2)], None]
    assert new == d


def test_update_identity_twice_unchanged():
    kw = [('a', 1), ('b', 2)]
    once = ea.update_in(kw, [ea.all_keys()], lambda v: v)
    twice = ea.update_in(once, [ea.all_keys()], lambda v: v)
    assert twice == kw


def test_pop_nested():
    d = {'a': {'b': 1}, 'c': {'b': 2}}
    assert ea.pop_in(d, [ea.all_keys(), 'b']) == ([1, 2], {'a': {}, 'c': {}})


@pytest.mark.parametrize('container,empty', [
    ({'a': 1, 'b': 2}, {}),
    ([('a', 1), ('b', 2)], []),
    ((('a', 1), ('b', 2)), ()),
])
def test_pop_every_entry(container, empty):
    got, new = ea.get_and_update_in(container, [ea.all_keys()], lambda _: ea.POP)
    assert got == [1, 2]
    assert new == empty
    assert type(new) is type(container)


def test_pop_surfaces_original_value():
    d = {'a': 1, 'b': 2, 'c': 3}

    def fn(v):
        return ea.POP if v == 2 else (v * 10, v)

    assert ea.get_and_update_in(d, [ea.all_keys()], fn) == ([10, 2, 30], {'a': 1, 'c': 3})


def test_empty_container():
    assert ea.get_in({}, [ea.all_keys()]) == []
    assert ea.get_and_update_in({}, [ea.all_keys()], lambda v: (v, v)) == ([], {})
    assert ea.get_and_update_in([], [ea.all_keys()], lambda v: (v, v)) == ([], [])


def test_keeps_kind():
    d = collections.OrderedDict([('b', 1), ('a', 2)])
    r = ea.update_in(d, [ea.all_keys()], lambda v: v + 1)
    assert isinstance(r, collections.OrderedDict)
    assert list(r.items()) == [('b', 2), ('a', 3)]

    dd = collections.defaultdict(list, {'a': [1]})
    r = ea.update_in(dd, [ea.all_keys()], lambda v: v + [2])
    assert isinstance(r, collections.defaultdict)
    assert r.default_factory is list
    assert r == {'a': [1, 2]}


def test_keeps_order_after_removal():
    kw = [('a', 1), ('b', 2), ('c', 3), ('d', 4)]
    _, r = ea.get_and_update_in(kw, [ea.all_keys()], lambda v: ea.POP if v % 2 else (v, -v))
    assert r == [('b', -2), ('d', -4)]


def test_duplicates_pass_through_update():
    kw = [('a', 1), ('a', 2)]
    assert ea.update_in(kw, [ea.all_keys()], lambda v: v + 1) == [('a', 2), ('a', 3)]


def test_direct_protocol_call():
    acc = ea.all_keys()
    assert acc(ea.GET, {'a': 1, 'b': 2}, lambda v: v * 2) == [2, 4]
    assert acc('get', {'a': 1}, str) == ['1']
    r = acc(ea.GET_AND_UPDATE, [('a', 1)], lambda v: (v, v + 1))
    assert r == ([1], [('a', 2)])


def test_unknown_mode():
    with pytest.raises(ValueError):
        ea.all_keys()('put', {'a': 1}, lambda v: v)


def test_not_a_container():
    with pytest.raises(TypeError):
        ea.get_in(7, [ea.all_keys()])
    with pytest.raises(TypeError):
        ea.get_in([1, 2], [ea.all_keys()])


def test_bad_continuation_result():
    with pytest.raises(ValueError, match='two-element tuple or POP'):
        ea.get_and_update_in({'a': 1}, [ea.all_keys()], lambda v: v)


def test_continuation_errors_propagate():
    def boom(*args):
        raise KeyError('boom')

    with pytest.raises(KeyError):
        ea.get_in({'a': 1}, [ea.all_keys(), boom])
    with pytest.raises(KeyError):
        ea.update_in({'a': 1}, [ea.all_keys()], boom)


def test_value_semantics():
    assert ea.all_keys() == ea.all_keys()
    assert hash(ea.all_keys()) == hash(ea.all_keys())
    assert ea.all_keys() != ea.skip_keys([])
