import networkx as nx

from collections.abc import Mapping

from oneiros.config import START_RULE, MAX_OUTPUT_SIZE
from oneiros.derivation import generate
from oneiros.errors import DuplicateRuleError, MissingStartRuleError
from oneiros.fragment import NonTerminal, Expression, Terminal, NONTERMINAL, EXPRESSION, TERMINAL
from oneiros.loader import load_grammar_file, load_grammar_string
from oneiros.rng import Xorshift64
from oneiros.utils import exception_wrapper, log


class Grammar:
    def __init__(self, start_name=START_RULE):
        # NOTE: fragment ids are list indices, never reorder or remove fragments
        self.fragments = []
        self.name_to_fragment = dict()
        self.start_name = start_name
        self.start = None

        self.rng = Xorshift64()
        self.graph = nx.DiGraph()

    @classmethod
    def compile(cls, raw, start=START_RULE):
        """
        Compile a parsed grammar into a flat fragment arena.

        `raw` maps rule names to lists of alternatives (lists of symbols). An
        iterable of (name, alternatives) pairs is accepted as well, so that
        duplicate names coming from a file are still detected.
        """
        rules = list(raw.items()) if isinstance(raw, Mapping) else list(raw)
        grammar = cls(start)

        # First pass: allocate one placeholder per rule so that forward references resolve
        for non_term, _ in rules:
            if non_term in grammar.name_to_fragment:
                raise DuplicateRuleError(non_term)
            fragment_id = grammar.allocate_fragment(NonTerminal([]))
            grammar.name_to_fragment[non_term] = fragment_id
            grammar.graph.add_node(non_term)

        # Second pass: fill in every rule with one expression per alternative
        for non_term, alternatives in rules:
            fragment_id = grammar.name_to_fragment[non_term]
            expressions = []
            for alternative in alternatives:
                options = []
                for symbol in alternative:
                    rule_id = grammar.name_to_fragment.get(symbol) if isinstance(symbol, str) else None
                    if rule_id is not None:
                        options.append(grammar.allocate_fragment(NonTerminal([rule_id])))
                        grammar.graph.add_edge(non_term, symbol)
                    else:
                        options.append(grammar.allocate_fragment(Terminal(symbol)))
                expressions.append(grammar.allocate_fragment(Expression(options)))

            # overwrite the placeholder in place, its id is already referenced
            grammar.fragments[fragment_id] = NonTerminal(expressions)
            log.debug(f"Compiled rule {non_term} ({fragment_id}) with {len(expressions)} alternatives")

        if start not in grammar.name_to_fragment:
            raise MissingStartRuleError(start)
        grammar.start = grammar.name_to_fragment[start]

        unreachable = set(grammar.name_to_fragment) - grammar.reachable_rules()
        if unreachable:
            log.debug(f"Rules unreachable from {start}: {sorted(unreachable)}")
        log.debug(f"Compiled grammar with {len(grammar.name_to_fragment)} rules into {len(grammar.fragments)} fragments")
        return grammar

    @classmethod
    @exception_wrapper(exception_types=(OSError, ValueError))
    def from_file(cls, filepath, start=START_RULE):
        return cls.compile(load_grammar_file(filepath), start=start)

    @classmethod
    @exception_wrapper(exception_types=(ValueError,))
    def from_string(cls, source, start=START_RULE):
        return cls.compile(load_grammar_string(source), start=start)

    def allocate_fragment(self, fragment):
        fragment_id = len(self.fragments)
        self.fragments.append(fragment)
        return fragment_id

    def lookup_fragment(self, fragment_id):
        return self.fragments[fragment_id]

    def lookup_fragment_nonterm(self, fragment_id):
        fragment = self.fragments[fragment_id]
        assert fragment.kind == NONTERMINAL, f"Fragment {fragment_id} is not a non-terminal: {fragment}"
        return fragment.children

    def lookup_rule(self, name):
        return self.fragments[self.name_to_fragment[name]]

    def seed(self, value):
        self.rng.seed(value)

    def rand(self):
        return self.rng.next()

    def generate(self, stack, buf, rng=None, max_size=MAX_OUTPUT_SIZE):
        return generate(self, stack, buf, rng=rng, max_size=max_size)

    def seed_iterator(self, n=None, rng=None, max_size=MAX_OUTPUT_SIZE):
        stack = []
        buf = bytearray()
        count = 0
        while n is None or count < n:
            buf.clear()
            generate(self, stack, buf, rng=rng, max_size=max_size)
            count += 1
            yield bytes(buf)

    def reachable_rules(self):
        return {self.start_name} | nx.descendants(self.graph, self.start_name)

    def recursive_rules(self):
        recursive = set()
        for component in nx.strongly_connected_components(self.graph):
            if len(component) > 1:
                recursive.update(component)
        recursive.update(nt for nt, _ in nx.selfloop_edges(self.graph))
        return recursive

    def stats(self):
        kinds = {NONTERMINAL: 0, EXPRESSION: 0, TERMINAL: 0}
        for fragment in self.fragments:
            kinds[fragment.kind] += 1
        return {
            "rules": len(self.name_to_fragment),
            "reachable_rules": len(self.reachable_rules()),
            "recursive_rules": len(self.recursive_rules()),
            "fragments": len(self.fragments),
            "nonterminals": kinds[NONTERMINAL],
            "expressions": kinds[EXPRESSION],
            "terminals": kinds[TERMINAL],
        }

    def __len__(self):
        return len(self.fragments)

    def __repr__(self):
        return f"Grammar({len(self.name_to_fragment)} rules, {len(self.fragments)} fragments, start={self.start_name})"
