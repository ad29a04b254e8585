
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from typing import Dict, List, Optional, Union

from docfn.config import DocConfig
from docfn.helper import DocHelper
from docfn.registry import function_to_dict
from docfn.serialize import function_to_pretty

app = FastAPI(title="docfn function declarations")

# one registry per running app, i.e. per documentation session
helper = DocHelper(config=DocConfig.from_env())


class SignatureBody(BaseModel):
    signature: str


class DeclareBody(BaseModel):
    signature: str
    description: Optional[str] = None
    parameter_descriptions: Union[List[str], Dict[str, str]] = []


@app.post("/fn")
def declare(body: DeclareBody):
    markup, fn_id = helper.declare(body.signature, body.description, body.parameter_descriptions)
    return {"markup": markup, "id": fn_id}


@app.post("/parse")
def parse(body: SignatureBody):
    fn = helper.describe(body.signature)
    if fn is None:
        raise HTTPException(status_code=400, detail=f"Unparseable signature '{body.signature}'")
    return {"ok": True, "function": function_to_dict(fn)}


@app.post("/signature")
def signature_view(body: SignatureBody):
    fn = helper.describe(body.signature)
    if fn is None:
        raise HTTPException(status_code=400, detail=f"Unparseable signature '{body.signature}'")
    return {
        "ok": True,
        "pretty": function_to_pretty(fn),
        "tree": function_to_dict(fn),
    }


@app.get("/functions")
def functions():
    return {"functions": helper.registry.list_functions()}


@app.get("/functions/{fn_id}")
def function(fn_id: str):
    try:
        return function_to_dict(helper.registry.get_fn(fn_id))
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e.args[0]))
