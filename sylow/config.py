import copy
import json
from pathlib import Path
from typing import Any, Union

DEFAULTS = {
    'check_invariants': True,
    'log_level': 'WARNING',
    'cauchy': {
        # stream the whole tuple space to cross-check its fixed points
        # only up to this many tuples
        'census_limit': 1_000_000,
    },
}

_config = copy.deepcopy(DEFAULTS)


def queryKey(q, dct, prefix=None):
    if prefix is None:
        prefix = []

    keys = q.split('.', maxsplit=1)

    if not isinstance(dct, dict):
        k = '.'.join(prefix)
        raise KeyError(
            f"Query {k}.{q} error, type '{k}' is {type(dct)}, not dict.")
    try:
        sub = dct[keys[0]]
    except KeyError:
        k = '.'.join([*prefix, keys[0]])
        raise KeyError(
            f"Query {'.'.join([*prefix, q])} error, key '{k}' not found.")

    if len(keys) == 1:
        return sub

    else:
        return queryKey(keys[1], sub, [*prefix, keys[0]])


def setKey(q, value, dct, prefix=None):
    if prefix is None:
        prefix = []

    keys = q.split('.', maxsplit=1)

    if len(keys) == 1:
        if keys[0] in dct and isinstance(dct[keys[0]],
                                         dict) and not isinstance(value, dict):
            k = '.'.join([*prefix, keys[0]])
            raise ValueError(f'try to set a dict {k} to {type(value)}')
        else:
            dct[keys[0]] = value
    else:
        if keys[0] in dct and isinstance(dct[keys[0]], dict):
            sub = dct[keys[0]]
        elif keys[0] in dct and not isinstance(dct[keys[0]], dict):
            k = '.'.join([*prefix, keys[0]])
            raise ValueError(f'try to set a dict {k} to {type(value)}')
        else:
            sub = {}
            dct[keys[0]] = sub
        setKey(keys[1], value, sub, [*prefix, keys[0]])


def update_tree(root: dict, diff: dict) -> dict:
    for k, v in diff.items():
        if isinstance(v, dict) and isinstance(root.get(k), dict):
            update_tree(root[k], v)
        else:
            root[k] = v
    return root


def get(key: str) -> Any:
    return queryKey(key, _config)


def set(key: str, value: Any) -> None:
    setKey(key, value, _config)


def load_config(path: Union[str, Path]) -> dict:
    """Merge a JSON file into the active configuration."""
    with open(path, 'r') as f:
        diff = json.load(f)
    if not isinstance(diff, dict):
        raise TypeError(f'config file {path} must contain a JSON object')
    update_tree(_config, diff)
    return _config


def reset() -> None:
    global _config
    _config = copy.deepcopy(DEFAULTS)


def check_invariants() -> bool:
    return bool(_config['check_invariants'])
