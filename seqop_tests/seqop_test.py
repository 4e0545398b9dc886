import time
import suite
from dgen import from_schema
from seqop import S, from_range, ContractViolation

test = suite.test
assert_that = suite.assert_that

order_schema = {
    'order_id': 'uuid4',
    'customer': 'name',
    'amount': ('pyint', {'min_value': 1, 'max_value': 500}),
    'region': {'_qen_provider': 'choice', 'from': ['north', 'south', 'east', 'west']},
}


def total(acc: int, order: dict) -> int:
    return acc + order['amount']


def _plain_inject(items, seed, step):
    for item in items:
        seed = step(seed, item)
    return seed


@test("region report pipeline")
def test_region_report():
    orders = from_schema(order_schema, seed=99).take(200)
    big = orders.select(lambda o: o['amount'] >= 100)
    by_region = big.group_by(lambda o: o['region'])

    report = (S(list(by_region.items()))
              .map(lambda item: (item[0], S(item[1]).inject(0, total)))
              .stable_sort(lambda a, b: a[1] > b[1])
              .to.list())

    assert_that(len(report) == len(by_region), "one line per region")
    assert_that(all(a[1] >= b[1] for a, b in zip(report, report[1:])), "largest region first")
    grand_total = sum(amount for _, amount in report)
    assert_that(grand_total == big.inject(0, total), "regions should add up to the filtered total")
    assert_that(orders.all(lambda o: 1 <= o['amount'] <= 500), "generator should respect bounds")


@test("sampling pipeline keeps the source intact")
def test_sample_pipeline():
    orders = from_schema(order_schema, seed=5).take(50)
    snapshot = list(orders.data)
    top = orders.copy().shuffle(11).sort(lambda a, b: a['amount'] > b['amount']).to.list()[:5]
    assert_that(orders.to.list() == snapshot, "source order should be untouched")
    amounts = sorted((o['amount'] for o in snapshot), reverse=True)[:5]
    assert_that([o['amount'] for o in top] == amounts, "top five by amount")


@test("contract violation stops the pipeline before work is done")
def test_pipeline_contract_violation():
    touched = []

    def bad_less(a: str, b: str) -> bool:
        touched.append((a, b))
        return a < b

    numbers = from_range(1, 20).copy()
    with suite.raises(ContractViolation, "str comparator over ints"):
        numbers.shuffle(1).sort(bad_less)
    assert_that(touched == [], "comparator should never run")


@test("raises helper fails when nothing is raised")
def test_raises_helper():
    with suite.raises(AssertionError, "a silent block should fail the check") as outer:
        with suite.raises(KeyError, "nothing raised here"):
            pass
    assert_that("KeyError not raised" in str(outer['error']), "message should name the missing error")
    with suite.raises(KeyError) as inner:
        {}['missing']
    assert_that(isinstance(inner['error'], KeyError), "the caught error should be handed back")


@test("performance: inject against a hand-written loop")
def test_inject_performance():
    sizes = [1_000, 10_000, 100_000]
    print(f"\n    {'size':>10} | {'inject':>10} | {'loop':>10}")
    for size in sizes:
        numbers = from_range(1, size)
        step = lambda a, b: a + b

        start = time.perf_counter()
        via_inject = numbers.inject(0, step)
        inject_ms = (time.perf_counter() - start) * 1000

        start = time.perf_counter()
        via_loop = _plain_inject(numbers.data, 0, step)
        loop_ms = (time.perf_counter() - start) * 1000

        assert_that(via_inject == via_loop == size * (size + 1) // 2, "both folds should agree")
        print(f"    {size:>10,} | {inject_ms:>8.2f}ms | {loop_ms:>8.2f}ms")


# --- run the suite ---
if __name__ == "__main__":
    suite.run(title="seqop test")
