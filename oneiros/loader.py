import json

from oneiros.utils import log


class RulePairs(list):
    """(rule name, alternatives) pairs of one JSON object, duplicates included."""
    pass

def _keep_pairs(pairs):
    # NOTE: a plain dict would silently drop all but the last duplicate rule
    return RulePairs(pairs)

def check_rule_shape(name, alternatives):
    if not isinstance(alternatives, list) or isinstance(alternatives, RulePairs):
        raise ValueError(f"Rule {name!r} must map to a list of alternatives, got {type(alternatives).__name__}")
    for alternative in alternatives:
        if not isinstance(alternative, list) or isinstance(alternative, RulePairs):
            raise ValueError(f"Alternative of rule {name!r} must be a list of symbols, got {type(alternative).__name__}")
        for symbol in alternative:
            if not isinstance(symbol, str):
                raise ValueError(f"Symbol in rule {name!r} must be a string, got {symbol!r}")

def load_grammar_string(text):
    """
    Parse a JSON grammar into a list of (rule name, alternatives) pairs.

    Duplicate rule names are preserved so the compiler can reject them.
    """
    raw = json.loads(text, object_pairs_hook=_keep_pairs)
    if not isinstance(raw, RulePairs):
        raise ValueError("Grammar must be a JSON object mapping rule names to alternatives")
    for name, alternatives in raw:
        check_rule_shape(name, alternatives)
    log.debug(f"Parsed {len(raw)} rules from JSON")
    return list(raw)

def load_grammar_file(filepath):
    log.debug(f"Loading grammar from filepath {filepath}")
    with open(filepath, "rb") as f:
        return load_grammar_string(f.read())
