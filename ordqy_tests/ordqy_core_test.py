import suite
from ordqy import Store, alias, from_range, InvalidArgument

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


# map() and filter() tests

@test("map rewrites values in place")
def test_map():
    store = Store([[2, 2], [3, 3]])
    store.map(lambda value: sum(value))
    assert_that(store.get(0) == 4 and store.get(1) == 6, f"got {store.to.pairs()}")


@test("map callbacks may ask for the key and the store")
def test_map_arity():
    keyed = Store({'a': 1}).map(lambda value, key: f"{key}={value}")
    assert_that(keyed['a'] == 'a=1', f"got {keyed['a']}")
    counted = Store([10, 20]).map(lambda value, key, store: store.count())
    assert_that(counted.to.list() == [2, 2], f"got {counted.to.list()}")


@test("map accepts builtins")
def test_map_builtin():
    store = Store([1, 2]).map(str)
    assert_that(store.to.list() == ['1', '2'], f"got {store.to.list()}")


@test("filter drops rejected entries and keeps keys")
def test_filter():
    backing = {0: 1, 1: 2, 2: 3, 3: 4, 4: 5}
    store = alias(backing)
    store.filter(lambda value: value > 3)
    assert_that(store.count() == 2, "two entries survive")
    assert_that(list(backing) == [3, 4], f"keys kept and visible to the owner: {list(backing)}")


# concat() tests

@test("concat of a list overwrites positional keys")
def test_concat_list():
    store = alias({0: 1, 1: 2, 2: 3})
    store.concat([4, 5, 6])
    assert_that(store.count() == 3, "no new keys")
    assert_that(store.get(0) == 4, "first key overwritten")


@test("concat can keep existing keys")
def test_concat_no_overwrite():
    store = Store([1, 2, 3]).concat(Store([4, 5, 6, 7]), overwrite_keys=False)
    assert_that(store.to.list() == [1, 2, 3, 7], f"got {store.to.list()}")


@test("concat of a dict appends new keys")
def test_concat_dict():
    store = Store({'a': 1}).concat({'b': 2})
    assert_that(store.to.keys() == ['a', 'b'], f"got {store.to.keys()}")


# reordering tests

@test("reverse re-indexes integer keys")
def test_reverse():
    store = Store([1, 2, 3, 4, 5]).reverse()
    assert_that(store.to.list() == [5, 4, 3, 2, 1], f"got {store.to.list()}")
    assert_that(store.to.keys() == [0, 1, 2, 3, 4], "keys start from 0 again")

    mixed = Store({'x': 1, 0: 'a', 1: 'b'}).reverse()
    assert_that(mixed.to.pairs() == [(0, 'b'), (1, 'a'), ('x', 1)], f"got {mixed.to.pairs()}")


@test("flip swaps keys and values")
def test_flip():
    store = Store(['A', 'B', 'C', 'D', 'F']).flip()
    assert_that(store.to.list() == [0, 1, 2, 3, 4], f"got {store.to.list()}")
    assert_that(store.to.keys() == ['A', 'B', 'C', 'D', 'F'], f"got {store.to.keys()}")


@test("flipping twice gives the original back")
def test_flip_twice():
    store = Store(['A', 'B', 'C'])
    assert_that(store.flip().flip() == Store(['A', 'B', 'C']), f"got {store.to.pairs()}")


@test("flip rejects values that cannot be keys")
def test_flip_invalid():
    assert_raises(InvalidArgument, lambda: Store([1.5]).flip())


# accessor tests

@test("first and last leave the cursor alone")
def test_first_last():
    store = Store([1, 2, 3])
    store.rewind()
    store.next()
    assert_that(store.first() == 1 and store.last() == 3, "first 1, last 3")
    assert_that(store.current() == 2, "cursor should not move")
    assert_that(Store().first() is None and Store().last() is None, "None when empty")


@test("join uses a comma by default")
def test_join():
    store = Store(['abc', 'defg', 'abc'])
    assert_that(store.join() == 'abc,defg,abc', f"got {store.join()}")
    assert_that(store.join('SEPARATOR') == 'abcSEPARATORdefgSEPARATORabc', "custom separator")


@test("get_keys and get_values return new positional stores")
def test_keys_values():
    keys = Store(['test', 'abc']).get_keys()
    assert_that(keys.to.list() == [0, 1], f"got {keys.to.list()}")
    values = Store({'a': 'test', 'b': 'abc'}).get_values()
    assert_that(values.to.pairs() == [(0, 'test'), (1, 'abc')], f"got {values.to.pairs()}")


# nth() and with_nth() tests

@test("nth takes every step-th entry")
def test_nth():
    store = Store([1, 2, 3, 4, 5, 6, 7, 8])
    result = store.nth(2)
    assert_that(result.count() == 4, "four entries")
    assert_that(result.to.pairs() == [(0, 1), (1, 3), (2, 5), (3, 7)], f"got {result.to.pairs()}")
    kept = store.nth(2, keep_keys=True)
    assert_that(kept.to.keys() == [0, 2, 4, 6], f"got {kept.to.keys()}")


@test("with_nth passes the position to the closure")
def test_with_nth():
    seen = []
    Store(['a', 'b', 'c', 'd', 'e']).with_nth(2, lambda value, key, position: seen.append((value, position)))
    assert_that(seen == [('a', 0), ('c', 2), ('e', 4)], f"got {seen}")


@test("step must be positive")
def test_nth_invalid_step():
    assert_raises(InvalidArgument, lambda: Store([1, 2]).nth(0))
    assert_raises(InvalidArgument, lambda: Store([1, 2]).with_nth(-1, lambda value: value))


# slice() tests

@test("slice returns a window and leaves the source intact")
def test_slice():
    store = from_range(1, 20)
    assert_that(store.slice().count() == 20, "no arguments: everything")

    head = store.slice(5)
    assert_that(head.to.pairs() == [(0, 1), (1, 2), (2, 3), (3, 4), (4, 5)], f"got {head.to.pairs()}")

    tail = store.slice(None, 15)
    assert_that(tail.to.list() == [16, 17, 18, 19, 20], f"got {tail.to.list()}")
    assert_that(tail.get(0) == 16, "re-indexed from 0")

    window = store.slice(5, 5)
    assert_that(window.to.list() == [6, 7, 8, 9, 10], f"got {window.to.list()}")
    assert_that(store.count() == 20, "source untouched")


@test("slice supports negative offsets and limits")
def test_slice_negative():
    store = from_range(1, 20)
    assert_that(store.slice(2, -3).to.list() == [18, 19], f"got {store.slice(2, -3).to.list()}")
    assert_that(store.slice(-2).to.list() == list(range(1, 19)), "negative limit stops before the end")


# extract() and only() tests

@test("extract moves keys into a new store")
def test_extract():
    store = Store({'a': 'one', 'b': 'two', 'c': 'three'})
    extracted = store.extract(['a', 'b'])
    assert_that(extracted.count() == 2, "two extracted")
    assert_that(extracted.get('a') == 'one', "value moved")
    assert_that(not extracted.key_exists('c'), "c was not requested")
    assert_that(store.to.keys() == ['c'], f"source lost a and b: {store.to.keys()}")


@test("extract fills missing keys with None")
def test_extract_missing():
    extracted = Store({'a': 1}).extract(['zzz'])
    assert_that(extracted.key_exists('zzz'), "missing key shows up")
    assert_that(extracted.get('zzz') is None, "with None")


@test("only copies existing keys and keeps the source")
def test_only():
    store = Store({'a': 1, 'b': 2, 'c': 3})
    picked = store.only(['c', 'a', 'missing'])
    assert_that(picked.to.pairs() == [('c', 3), ('a', 1)], f"got {picked.to.pairs()}")
    assert_that(store.count() == 3, "source untouched")


@test("copy is independent and keeps the key counter")
def test_copy_counter():
    store = Store([1, 2])
    copied = store.copy()
    store.push(3)
    assert_that(copied.count() == 2, "copy unaffected by later pushes")
    copied.push('x')
    assert_that(copied.to.keys() == [0, 1, 2], f"got {copied.to.keys()}")


if __name__ == "__main__":
    suite.main(title="ordqy core operations test suite")
