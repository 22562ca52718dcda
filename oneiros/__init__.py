from oneiros.derivation import DerivationContext, generate
from oneiros.errors import GrammarException, CompileError, DuplicateRuleError, MissingStartRuleError
from oneiros.fragment import Fragment, NonTerminal, Expression, Terminal
from oneiros.grammar import Grammar
from oneiros.rng import Xorshift64

__all__ = [
    "DerivationContext",
    "generate",
    "GrammarException",
    "CompileError",
    "DuplicateRuleError",
    "MissingStartRuleError",
    "Fragment",
    "NonTerminal",
    "Expression",
    "Terminal",
    "Grammar",
    "Xorshift64",
]
