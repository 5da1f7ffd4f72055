from typing import Any, Sequence

from adjgraph import ErrorKind, GraphError


def expect_raises(exc_types, fn, *args, **kwargs) -> None:
    try:
        fn(*args, **kwargs)
    except exc_types:
        return
    except Exception as ex:
        raise AssertionError(f"Expected {exc_types}, but got {type(ex).__name__}: {ex}") from ex
    else:
        raise AssertionError(f"Expected {exc_types}, but no exception was raised")


def expect_graph_error(kind: ErrorKind, fn, *args, **kwargs) -> GraphError:
    try:
        fn(*args, **kwargs)
    except GraphError as ex:
        if ex.kind is not kind:
            raise AssertionError(f"Expected {kind.name}, but got {ex.kind.name}: {ex}") from ex
        return ex
    except Exception as ex:
        raise AssertionError(f"Expected GraphError({kind.name}), but got {type(ex).__name__}: {ex}") from ex
    raise AssertionError(f"Expected GraphError({kind.name}), but no exception was raised")


def neighbor_keys(g: Any, key: Any) -> list:
    return [n.key for n in g.neighbors(key)]


def assert_valid_walk(g: Any, path: Sequence[Any], start: Any, end: Any) -> None:
    assert path, "expected a non-empty path"
    assert path[0] == start, f"path starts at {path[0]!r}, not {start!r}"
    assert path[-1] == end, f"path ends at {path[-1]!r}, not {end!r}"
    for u, v in zip(path, path[1:]):
        assert v in neighbor_keys(g, u), f"no edge {u!r} -> {v!r} on path {list(path)!r}"


def count_entries(g: Any) -> int:
    return sum(len(g.neighbors(k)) for k in g.nodes())
