import suite
from seqop import S, from_range, empty
from dgen import from_schema

test = suite.test
assert_that = suite.assert_that

person_schema = {
    'name': 'word',
    'department': {'_qen_provider': 'choice', 'from': ['eng', 'sales', 'hr']},
    'badge': {'_qen_provider': 'ref', 'key': 'department', 'format': '{}-badge'},
}


def is_even(i: int) -> bool:
    return i % 2 == 0


@test("group_by splits 1..10 by parity")
def test_group_by_parity():
    groups = from_range(1, 10).group_by(is_even)
    assert_that(groups == {True: [2, 4, 6, 8, 10], False: [1, 3, 5, 7, 9]}, "should bucket by parity")


@test("group_by keeps first-seen key order")
def test_group_by_key_order():
    groups = from_range(1, 10).group_by(is_even)
    assert_that(list(groups.keys()) == [False, True], "1 is seen before 2")
    words = S(['pear', 'apple', 'plum', 'avocado', 'kiwi'])
    assert_that(list(words.group_by(lambda w: w[0]).keys()) == ['p', 'a', 'k'], "keys in order of appearance")


@test("group_by keeps order within a group")
def test_group_by_within_order():
    words = S(['pear', 'apple', 'plum', 'avocado', 'peach'])
    groups = words.group_by(lambda w: w[0])
    assert_that(groups['p'] == ['pear', 'plum', 'peach'], "p words in input order")
    assert_that(groups['a'] == ['apple', 'avocado'], "a words in input order")


@test("group_by on empty sequence")
def test_group_by_empty():
    assert_that(empty().group_by(lambda x: x) == {}, "no elements, no groups")


@test("group_by covers every element exactly once")
def test_group_by_partition():
    data = list(range(50))
    groups = S(data).group_by(lambda x: x % 7)
    flattened = sorted(x for bucket in groups.values() for x in bucket)
    assert_that(flattened == data, "groups should partition the input")


@test("group_by over records")
def test_group_by_records():
    people = from_schema(person_schema, seed=21).take(40)
    groups = people.group_by(lambda p: p['department'])
    assert_that(set(groups) <= {'eng', 'sales', 'hr'}, "only known departments")
    for dept, members in groups.items():
        assert_that(all(m['badge'] == f"{dept}-badge" for m in members), "badge should reference department")


if __name__ == "__main__":
    suite.run(title="seqop grouping test suite")
