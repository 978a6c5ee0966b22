from typing import Any, Callable, Dict

REGISTRY: Dict[str, Callable[[Dict[str, Any]], Any]] = {}  # name -> factory(params: dict)


def register(name: str):
    def deco(fn):
        REGISTRY[name] = fn
        return fn
    return deco


def build(name: str, params: dict) -> Any:
    if name not in REGISTRY:
        raise KeyError(f"Transport model '{name}' not registered")
    return REGISTRY[name](params)
