import io

import pytest

from mcutools.xmlwriter import XMLWriter


def make():
    buf = io.StringIO()
    return buf, XMLWriter(buf)


def test_header():
    buf, w = make()
    w.header()
    assert buf.getvalue() == '<?xml version="1.0" encoding="UTF-8"?>\n'


def test_nested_tags_and_node():
    buf, w = make()
    w.tag_open("root")
    w.write_node("a", "x")
    w.tag_close()
    assert buf.getvalue() == "<root>\n  <a>x</a>\n</root>\n"


def test_tag_open_with_name():
    buf, w = make()
    w.tag_open("item", "first")
    w.tag_close()
    assert buf.getvalue() == '<item name="first">\n</item>\n'


def test_indent_size():
    buf, w = make()
    w.set_indent_size(4)
    w.tag_open("r")
    w.write_node("b", "y")
    w.tag_close()
    lines = buf.getvalue().splitlines()
    assert lines[1] == "    <b>y</b>"


def test_escape():
    buf, w = make()
    w.escape("<a&\"b'>")
    assert buf.getvalue() == "&lt;a&amp;&quot;b&apos;&gt;"


def test_write_node_escapes_text():
    buf, w = make()
    w.write_node("t", "a<b")
    assert buf.getvalue() == "<t>a&lt;b</t>\n"


def test_tag_field_types():
    buf, w = make()
    w.tag_start("v")
    w.tag_field("h", 255, base=16)
    w.tag_field("b", True)
    w.tag_field("f", 3.14159)
    w.tag_end()
    assert buf.getvalue() == '<v h="FF" b="true" f="3.14"/>\n'


def test_write_node_bool_and_int():
    buf, w = make()
    w.write_node("ok", False)
    w.write_node("n", -42)
    assert buf.getvalue() == "<ok>false</ok>\n<n>-42</n>\n"


def test_float_decimals_zero():
    buf, w = make()
    w.write_node("x", 2.0, decimals=0)
    assert buf.getvalue() == "<x>2</x>\n"


def test_comment_single_line():
    buf, w = make()
    w.comment("hi")
    assert buf.getvalue() == "\n<!-- hi -->\n"


def test_comment_multiline():
    buf, w = make()
    w.tag_open("r")
    w.comment("text", multiline=True)
    assert buf.getvalue().endswith("\n<!-- \ntext\n -->\n")


def test_long_tag_truncated_on_close():
    buf, w = make()
    tag = "abcdefghijklmnopqrst"
    w.tag_open(tag, newline=False)
    w.tag_close(indent=False)
    assert buf.getvalue() == f"<{tag}></{tag[:15]}>\n"


def test_nesting_limit():
    _, w = make()
    for i in range(5):
        w.tag_open(f"t{i}")
    with pytest.raises(OverflowError):
        w.tag_open("deep")


def test_close_without_open():
    _, w = make()
    with pytest.raises(IndexError):
        w.tag_close()


def test_reset_clears_stack():
    _, w = make()
    w.tag_open("a")
    w.reset()
    with pytest.raises(IndexError):
        w.tag_close()


def test_bad_base():
    _, w = make()
    with pytest.raises(ValueError):
        w.tag_field("x", 5, base=1)


def test_unsupported_type():
    _, w = make()
    with pytest.raises(TypeError):
        w.write_node("x", [1, 2])