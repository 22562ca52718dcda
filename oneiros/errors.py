class GrammarException(Exception):
    pass

class CompileError(GrammarException):
    pass

class DuplicateRuleError(CompileError):
    def __init__(self, name):
        super().__init__(f"Duplicate non-terminal definition: {name!r}")
        self.name = name

class MissingStartRuleError(CompileError):
    def __init__(self, name):
        super().__init__(f"Start rule {name!r} is not defined")
        self.name = name
