"""
minimal test harness for ordqy.

modules register cases with @test("description") and check them with
assert_that / assert_raises. a module runs its own cases through main();
pytest collects the same functions directly.
"""
import sys
import time
import traceback
from functools import wraps
from typing import List, Dict, Any, Callable, Type

_registry: List[Dict[str, Any]] = []


class TestAssertionError(AssertionError):
    """a failed check, as opposed to an unexpected error inside the case"""
    __test__ = False


def test(description: str) -> Callable:
    """register a case. the function stays callable, so pytest can collect it too."""

    def decorator(func: Callable) -> Callable:
        _registry.append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise TestAssertionError(message)


def assert_raises(error_type: Type[BaseException], action: Callable[[], Any], message: str = "") -> BaseException:
    """runs action and checks it raises error_type. returns the raised error for further checks."""
    try:
        action()
    except error_type as e:
        return e
    except Exception as e:
        raise TestAssertionError(f"expected {error_type.__name__}, got {type(e).__name__}: {e} {message}".rstrip())
    raise TestAssertionError(f"expected {error_type.__name__}, nothing was raised {message}".rstrip())


def _run_case(func: Callable, verbose_errors: bool) -> str:
    """empty string on success, otherwise the failure text"""
    try:
        func()
    except TestAssertionError as e:
        return f"assertion failed: {e}"
    except Exception as e:
        if verbose_errors:
            traceback.print_exc()
        return f"{type(e).__name__}: {e}"
    return ""


def run(title: str = "test run", verbose_errors: bool = False) -> bool:
    """run every registered case, print one line per case and return whether all passed"""
    print(f"\n[{title}]")
    started = time.perf_counter()
    failures = 0

    for case in _registry:
        error = _run_case(case['func'], verbose_errors)
        if error:
            failures += 1
            print(f"  FAIL  {case['description']}\n        {error}")
        else:
            print(f"  ok    {case['description']}")

    elapsed = (time.perf_counter() - started) * 1000
    total = len(_registry)
    print(f"\n{total - failures}/{total} passed, {failures} failed ({elapsed:.1f} ms)\n")

    # registered cases are consumed so a script can run several suites in turn
    _registry.clear()
    return failures == 0


def main(title: str) -> None:
    """script entry point for a test module: run and exit non-zero on failures."""
    sys.exit(0 if run(title=title, verbose_errors='-v' in sys.argv) else 1)
