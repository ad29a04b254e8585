
import pytest
from docfn.signature import ParsedSignature, UnparsedSignature, parse_signature

@pytest.mark.parametrize("src", [
    "baz",
    "baz(y)",
    "Foo.bar(x: number): string",
    "Math.max(...values: number[]): number",
    "now(): Date",
    "Array.from(items: Iterable<T>, map: (x) => U): U[]",
    "length: number",
])
def test_parse_ok(src):
    assert isinstance(parse_signature(src), ParsedSignature)

@pytest.mark.parametrize("src", [
    "",
    "(x)",
    ": string",
    "hello world",
    "foo(x",
    "foo(x) trailing",
    "foo(x): two words",
    "foo():",
])
def test_parse_fails_quietly(src):
    assert parse_signature(src) == UnparsedSignature(src)

def test_method_signature():
    sig = parse_signature("Foo.bar(x: number): string")
    assert sig.name == "bar"
    assert sig.is_method and sig.method_of == "Foo"
    assert sig.raw_args == "x: number"
    assert sig.return_type == "string"
    assert sig.identifier == "Foo.bar"

def test_plain_function():
    sig = parse_signature("baz(y)")
    assert sig.identifier == "baz"
    assert not sig.is_method
    assert sig.method_of is None
    assert sig.return_type is None

def test_no_parentheses():
    sig = parse_signature("baz")
    assert sig.raw_args is None
    assert parse_signature("baz()").raw_args == ""

def test_return_type_without_parentheses():
    sig = parse_signature("Array.length: number")
    assert sig.identifier == "Array.length"
    assert sig.raw_args is None
    assert sig.return_type == "number"

def test_only_first_dot_splits_receiver():
    sig = parse_signature("a.b.c()")
    assert sig.method_of == "a"
    assert sig.name == "b.c"

def test_leading_dot_is_method_without_receiver():
    sig = parse_signature(".foo()")
    assert sig.is_method and sig.method_of is None
    assert sig.identifier == ".foo"

def test_trailing_dot_stays_in_name():
    sig = parse_signature("Foo.")
    assert sig.name == "Foo." and not sig.is_method

def test_nested_parentheses_in_arguments():
    sig = parse_signature("on(event: string, cb: (e) => void): void")
    assert sig.raw_args == "event: string, cb: (e) => void"
    assert sig.return_type == "void"

def test_non_string_signature():
    with pytest.raises(TypeError):
        parse_signature(None)

def test_colons_before_parenthesis_stay_in_name():
    sig = parse_signature("std::move(x)")
    assert sig.name == "std::move"
    assert sig.raw_args == "x"
    assert sig.return_type is None
    assert sig.identifier == "std::move"

def test_method_name_with_colon():
    sig = parse_signature("Foo.a:b(x): T")
    assert sig.method_of == "Foo"
    assert sig.name == "a:b"
    assert sig.raw_args == "x"
    assert sig.return_type == "T"
