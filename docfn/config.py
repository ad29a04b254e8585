
import os

from pydantic import BaseModel, ConfigDict

ENV_PREFIX = "DOCFN_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _env_flag(key: str, default: bool) -> bool:
    raw = os.environ.get(ENV_PREFIX + key)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{ENV_PREFIX}{key} must be a boolean, got '{raw}'")


class DocConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    tag: str = "icode"
    anchor_prefix: str = "doc-fn-"
    balanced_split: bool = True   # False: split argument lists on every comma
    escape_title: bool = True

    @classmethod
    def from_env(cls) -> "DocConfig":
        defaults = cls()
        return cls(
            tag=os.environ.get(ENV_PREFIX + "TAG", defaults.tag),
            anchor_prefix=os.environ.get(ENV_PREFIX + "ANCHOR_PREFIX", defaults.anchor_prefix),
            balanced_split=_env_flag("BALANCED_SPLIT", defaults.balanced_split),
            escape_title=_env_flag("ESCAPE_TITLE", defaults.escape_title),
        )
