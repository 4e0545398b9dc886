"""
minimal runner for the seqop test modules.

each module registers its cases with @test("description") and ends with
`suite.run(title)` under a main guard. pytest collects the same functions.
"""
import time
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, List, Tuple, Type

_registered: List[Tuple[str, Callable[[], None]]] = []


class CheckFailed(AssertionError):
    pass


def test(description: str) -> Callable:
    """register a case under a readable description"""
    def register(func: Callable[[], None]) -> Callable[[], None]:
        _registered.append((description, func))
        return func
    return register


def assert_that(condition: Any, message: str = "check failed") -> None:
    if not condition:
        raise CheckFailed(message)


@contextmanager
def raises(error_type: Type[BaseException], message: str = "expected an error") -> Iterator[Dict[str, Any]]:
    """the block must raise error_type; the error ends up under 'error' in the yielded dict"""
    caught: Dict[str, Any] = {}
    try:
        yield caught
    except error_type as e:
        caught['error'] = e
        return
    raise CheckFailed(f"{message}: {error_type.__name__} not raised")


def run(title: str = "seqop") -> int:
    """run every registered case once, print one line per case, return the failure count"""
    print(f"\n== {title} ==")
    started = time.perf_counter()
    failures = 0

    for description, func in _registered:
        try:
            func()
        except CheckFailed as e:
            failures += 1
            print(f"  FAIL  {description}\n        {e}")
        except Exception as e:
            failures += 1
            print(f"  ERROR {description}\n        {type(e).__name__}: {e}")
        else:
            print(f"  ok    {description}")

    elapsed = (time.perf_counter() - started) * 1000
    print(f"-- {len(_registered)} run, {failures} failed, {elapsed:.1f}ms")
    _registered.clear()
    return failures
