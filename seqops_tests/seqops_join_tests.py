import suite
from seqops import P, join, empty, InvalidArgumentError

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

# --- helper data ---
people_data = [
    {'id': 1, 'name': 'alice', 'dept': 'eng'},
    {'id': 2, 'name': 'bob', 'dept': 'sales'},
    {'id': 3, 'name': 'charlie', 'dept': 'eng'}
]

orders_data = [
    {'id': 101, 'customer_id': 1, 'amount': 250},
    {'id': 102, 'customer_id': 2, 'amount': 150},
    {'id': 103, 'customer_id': 1, 'amount': 500},
    {'id': 104, 'customer_id': 4, 'amount': 300}  # no matching person
]


@test("join drops unmatched outer elements")
def test_join_inner_semantics():
    result = join([{'id': 1}, {'id': 2}], [{'id': 2, 'v': 9}], lambda x: x['id'], lambda y: y['id'], lambda a, b: b['v'])
    assert_that(result == [9], "only id=2 matches")


@test("join emits rows outer-major, inner-minor")
def test_join_order():
    result = join(people_data, orders_data, lambda p: p['id'], lambda o: o['customer_id'],
                  lambda p, o: (p['name'], o['id']))
    assert_that(result == [('alice', 101), ('alice', 103), ('bob', 102)], "outer order, then inner order")


@test("join handles empty sides and no matches")
def test_join_empty():
    key = lambda x: x
    assert_that(join([], [1, 2], key, key, lambda a, b: a) == [], "empty outer")
    assert_that(join([1, 2], [], key, key, lambda a, b: a) == [], "empty inner")
    assert_that(join([1], [2], key, key, lambda a, b: a) == [], "no matches")


@test("join pairs every duplicate key")
def test_join_duplicates():
    result = join(['a1', 'a2'], ['x', 'y'], lambda s: 0, lambda s: 0, lambda a, b: a + b)
    assert_that(result == ['a1x', 'a1y', 'a2x', 'a2y'], "cartesian product within a key")


@test("join matches unhashable keys by identity")
def test_join_unhashable_keys():
    shared = ['k']
    outer = [{'key': shared}, {'key': ['k']}]
    inner = [{'key': shared, 'v': 1}]
    result = join(outer, inner, lambda o: o['key'], lambda i: i['key'], lambda o, i: i['v'])
    assert_that(result == [1], "only the identical list matches")


@test("fluent join is lazy and validates eagerly")
def test_join_fluent():
    query = P(people_data).join.join(orders_data, lambda p: p['id'], lambda o: o['customer_id'],
                                     lambda p, o: o['amount'])
    assert_that(query.to.sum() == 900, "alice and bob amounts")
    assert_that(empty().join.join([1], lambda x: x, lambda x: x, lambda a, b: a).to.list() == [], "empty outer")
    with assert_raises(InvalidArgumentError):
        P([1]).join.join(None, lambda x: x, lambda x: x, lambda a, b: a)
    with assert_raises(InvalidArgumentError):
        join([1], [1], lambda x: x, lambda x: x, None)


# --- run the suite ---
if __name__ == "__main__":
    suite.run(title="seqops join test suite")
