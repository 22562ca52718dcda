NONTERMINAL = 0
EXPRESSION = 1
TERMINAL = 2

# index into Grammar.fragments
FragmentId = int


class Fragment:
    # optimize memory usage by avoiding one __dict__ for each instance
    __slots__ = ()
    kind = None

    def __eq__(self, other):
        return type(self) is type(other) and self._key() == other._key()

    def __hash__(self):
        return hash((self.kind, self._key()))

    def _key(self):
        raise NotImplementedError


class NonTerminal(Fragment):
    """Random choice point: exactly one child is expanded."""
    __slots__ = ("children",)
    kind = NONTERMINAL

    def __init__(self, children):
        self.children = list(children)

    def _key(self):
        return tuple(self.children)

    def __repr__(self):
        return f"NonTerminal({self.children})"


class Expression(Fragment):
    """Ordered concatenation: every child is expanded, left to right."""
    __slots__ = ("children",)
    kind = EXPRESSION

    def __init__(self, children):
        self.children = list(children)

    def _key(self):
        return tuple(self.children)

    def __repr__(self):
        return f"Expression({self.children})"


class Terminal(Fragment):
    __slots__ = ("value",)
    kind = TERMINAL

    def __init__(self, value):
        if isinstance(value, str):
            value = value.encode("utf-8")
        elif not isinstance(value, (bytes, bytearray)):
            # bytes(3) would silently become b"\x00\x00\x00"
            raise TypeError(f"Terminal value must be str or bytes, got {value!r}")
        self.value = bytes(value)

    def _key(self):
        return self.value

    def __repr__(self):
        return f"Terminal({self.value!r})"
