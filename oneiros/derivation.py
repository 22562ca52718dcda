from oneiros.config import MAX_OUTPUT_SIZE
from oneiros.fragment import NONTERMINAL, EXPRESSION
from oneiros.rng import Xorshift64


def generate(grammar, stack, buf, rng=None, max_size=MAX_OUTPUT_SIZE):
    """
    Expand the start rule of `grammar` into `buf`.

    `stack` and `buf` are caller-owned scratch storage: the stack is cleared
    here, the buffer is only appended to. `rng` defaults to the grammar's own
    generator; concurrent workers must each pass their own.

    The derivation stops when the stack runs empty or as soon as `buf` grows
    past `max_size`, so the result may overshoot by at most one terminal.
    """
    if rng is None:
        rng = grammar.rng
    fragments = grammar.fragments
    rand = rng.next

    stack.clear()
    stack.append(grammar.start)

    while stack:
        fragment = fragments[stack.pop()]
        kind = fragment.kind

        if kind == NONTERMINAL:
            options = fragment.children
            assert options, "Empty non-terminal reached the derivation engine"
            stack.append(options[rand() % len(options)])
        elif kind == EXPRESSION:
            # LIFO: push reversed so children pop left to right
            stack.extend(reversed(fragment.children))
        else:
            buf += fragment.value
            if len(buf) > max_size:
                break

    return buf


class DerivationContext:
    """Per-worker RNG and scratch storage over a shared, read-only grammar."""

    def __init__(self, grammar, seed=None, max_size=MAX_OUTPUT_SIZE):
        self.grammar = grammar
        self.rng = Xorshift64.from_entropy() if seed is None else Xorshift64(seed)
        self.max_size = max_size
        self.stack = []
        self.buf = bytearray()

    def generate(self) -> bytes:
        self.buf.clear()
        generate(self.grammar, self.stack, self.buf, rng=self.rng, max_size=self.max_size)
        return bytes(self.buf)

    def __iter__(self):
        while True:
            yield self.generate()

    def __repr__(self):
        return f"DerivationContext({self.grammar!r}, rng={self.rng!r})"
