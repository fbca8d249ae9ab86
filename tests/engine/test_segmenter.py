from bigo_cli.engine.segmenter import segment


def test_empty_source():
    assert segment("") == []
    assert segment("x = 1\nprint(x)\n") == []


def test_sibling_functions():
    source = (
        "def a():\n"
        "    return 1\n"
        "\n"
        "\n"
        "def b(x):\n"
        "    y = x + 1\n"
        "    return y\n"
    )
    units = segment(source)
    assert [u.name for u in units] == ["a", "b"]
    assert (units[0].line_start, units[0].line_end) == (0, 1)
    assert (units[1].line_start, units[1].line_end) == (4, 6)
    assert units[1].body_lines == ["    y = x + 1", "    return y"]
    assert units[0].parent is None and units[1].parent is None


def test_nested_function_owns_its_lines():
    source = (
        "def outer(items):\n"
        "    def inner(x):\n"
        "        return x * 2\n"
        "    return [inner(i) for i in items]\n"
    )
    outer, inner = segment(source)
    assert inner.parent == 0
    assert (outer.line_start, outer.line_end) == (0, 3)
    assert (inner.line_start, inner.line_end) == (1, 2)
    assert outer.body_lines == ["    return [inner(i) for i in items]"]
    assert inner.body_lines == ["        return x * 2"]


def test_multiline_signature():
    source = "def f(a,\n      b):\n    return a + b\n"
    (unit,) = segment(source)
    assert (unit.line_start, unit.line_end) == (0, 2)
    assert unit.body_lines == ["    return a + b"]


def test_one_line_body():
    (unit,) = segment("def f(x): return x\n")
    assert unit.line_start == unit.line_end == 0
    assert unit.body_lines == ["    return x"]


def test_docstrings_and_comments_are_not_code():
    source = (
        "def f():\n"
        '    """Doc\n'
        "    more.\n"
        '    """\n'
        "    x = 1  # note\n"
        "# column zero comment\n"
        "    return x\n"
    )
    (unit,) = segment(source)
    assert unit.body_lines == ["    x = 1", "    return x"]
    assert unit.line_end == 6


def test_truncated_signature_keeps_following_lines_as_body():
    (unit,) = segment("def f(a,\n    b")
    assert (unit.line_start, unit.line_end) == (0, 1)
    assert unit.body_lines == ["    b"]


def test_unbalanced_signature_does_not_swallow_later_functions():
    source = (
        "def broken(a, b\n"
        "    for x in a:\n"
        "        print(x)\n"
        "\n"
        "def ok(items):\n"
        "    for i in items:\n"
        "        print(i)\n"
    )
    broken, ok = segment(source)
    assert broken.name == "broken" and ok.name == "ok"
    assert (broken.line_start, broken.line_end) == (0, 2)
    assert broken.body_lines == ["    for x in a:", "        print(x)"]
    assert (ok.line_start, ok.line_end) == (4, 6)
    assert ok.parent is None


def test_closing_bracket_at_def_indentation_continues_signature():
    source = "def f(\n    a,\n    b,\n):\n    return a + b\n"
    (unit,) = segment(source)
    assert unit.line_end == 4
    assert unit.body_lines == ["    return a + b"]


def test_methods_and_async():
    source = (
        "class Solution:\n"
        "    def two_sum(self, nums):\n"
        "        return nums\n"
        "\n"
        "async def fetch(url):\n"
        "    return url\n"
    )
    units = segment(source)
    assert [u.name for u in units] == ["two_sum", "fetch"]
    assert units[0].indent == 4
    assert units[0].parent is None
