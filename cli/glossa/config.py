import difflib
import os

import yaml
from jsonschema import Draft202012Validator

CONFIG_FILE = ".glossa.yml"

SCHEMA = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "source": {"type": "string"},
        "recursive": {"type": "boolean"},
        "exclude": {"type": "array", "items": {"type": "string"}},
        "marker": {"type": "string", "pattern": r"^[A-Za-z_]\w*$"},
        "order": {"enum": ["term", "source"]},
        "layout": {"enum": ["text", "markdown"]},
        "output": {"type": ["string", "null"]},
        "strict": {"type": "boolean"},
    },
    "additionalProperties": False,
}

DEFAULTS = {
    "source": ".",
    "recursive": True,
    "exclude": [],
    "marker": "GlossaryTerm",
    "order": "term",
    "layout": "text",
    "output": None,
    "strict": False,
}


def load_config(path: str = CONFIG_FILE) -> dict:
    cfg = dict(DEFAULTS, exclude=[])
    if not os.path.exists(path):
        return cfg
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError:
        # fall back to defaults if YAML is malformed
        return cfg
    if isinstance(data, dict):
        cfg.update({k: v for k, v in data.items() if k in DEFAULTS})
    return cfg


def read_config_dict(path: str = CONFIG_FILE) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return {} if data is None else data


def validate_config_dict(data) -> list:
    validator = Draft202012Validator(SCHEMA)
    errors = []
    valid_keys = set(SCHEMA["properties"].keys())
    for err in validator.iter_errors(data):
        msg = err.message
        if err.validator == "additionalProperties":
            bad_keys = sorted(err.instance.keys() - valid_keys)
            if bad_keys:
                suggestion = difflib.get_close_matches(bad_keys[0], list(valid_keys), n=1)
                if suggestion:
                    msg += f" (did you mean '{suggestion[0]}'?)"
        elif err.path:
            msg = f"{'.'.join(str(p) for p in err.path)}: {msg}"
        errors.append(msg)
    return errors
