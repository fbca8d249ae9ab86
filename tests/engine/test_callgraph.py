from bigo_cli.engine.callgraph import build_call_graph, extract_calls, resolve_names
from bigo_cli.engine.segmenter import segment


def test_extract_calls_drops_builtins():
    lines = [
        "    total = len(arr) + helper(arr)",
        "    result.append(other(x))",
        "    return helper(arr)",
    ]
    assert extract_calls(lines) == ["helper", "other"]


def test_calls_restricted_to_known_functions():
    source = (
        "def a(x):\n"
        "    return b(x) + unknown(x) + a(x - 1)\n"
        "\n"
        "def b(x):\n"
        "    return x\n"
    )
    graph, edges = build_call_graph(segment(source))
    assert graph == {"a": ["b"], "b": []}
    assert edges == [[1], []]


def test_nested_definitions_are_edges():
    source = (
        "def outer():\n"
        "    def inner():\n"
        "        return 1\n"
        "    return 2\n"
    )
    graph, edges = build_call_graph(segment(source))
    assert graph == {"outer": ["inner"], "inner": []}
    assert edges == [[1], []]


def test_mutual_recursion_edges():
    source = (
        "def ping(n):\n"
        "    return pong(n - 1)\n"
        "\n"
        "def pong(n):\n"
        "    return ping(n - 1)\n"
    )
    graph, _ = build_call_graph(segment(source))
    assert graph == {"ping": ["pong"], "pong": ["ping"]}


def test_duplicate_names():
    source = (
        "def f():\n"
        "    return 1\n"
        "\n"
        "def f():\n"
        "    return 2\n"
        "\n"
        "def g():\n"
        "    return f()\n"
    )
    units = segment(source)
    assert resolve_names(units) == {"f": 0, "g": 2}
    assert resolve_names(units, "last") == {"f": 1, "g": 2}

    graph, edges = build_call_graph(units)
    assert graph == {"f": [], "g": ["f"]}
    assert edges[2] == [0]

    _, edges = build_call_graph(units, "last")
    assert edges[2] == [1]
