
import pytest
from docfn.helper import DocHelper
from docfn.registry import FunctionRegistry

@pytest.fixture
def helper():
    return DocHelper()

def test_identifier_derivation(helper):
    fn = helper.describe("Foo.bar(x: number): string")
    assert fn.id == fn.label == "Foo.bar"
    assert fn.is_method and fn.method_of == "Foo"
    assert fn.return_type == "string"
    assert [a.name for a in fn.args] == ["x"]

def test_no_receiver(helper):
    fn = helper.describe("baz(y)")
    assert fn.id == fn.label == "baz"
    assert not fn.is_method and fn.method_of is None

def test_first_occurrence_wins(helper):
    first = helper.describe("baz(y)", "first")
    second = helper.describe("baz(y, z)", "second")
    registry = helper.registry
    assert registry.register(first) == "baz"
    assert registry.register(second) is None
    assert len(registry) == 1
    assert registry["baz"] is first
    assert registry["baz"].description == "first"

def test_unknown_id(helper):
    with pytest.raises(KeyError):
        helper.registry.get_fn("nope")
    assert helper.registry.get("nope") is None
    assert "nope" not in helper.registry

def test_list_functions_sorted(helper):
    helper.fn("zeta()")
    helper.fn("Foo.alpha(...xs: number[]): number", "sum", ["values"])
    listing = helper.registry.list_functions()
    assert [f["id"] for f in listing] == ["Foo.alpha", "zeta"]
    assert listing[0]["isMethod"] and listing[0]["methodOf"] == "Foo"
    assert listing[0]["args"] == [{"name": "xs", "type": "number[]", "collect": True, "description": "values"}]

def test_shared_registry():
    registry = FunctionRegistry()
    DocHelper(registry).fn("baz(y)")
    out = DocHelper(registry).fn("baz(y)")
    assert "id=" not in out
    assert list(registry) == ["baz"]
