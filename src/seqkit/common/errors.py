class SeqkitError(Exception):
    pass


class TypeMismatch(SeqkitError):
    pass


class LiteralError(SeqkitError):
    pass


class ConfigError(SeqkitError):
    pass
