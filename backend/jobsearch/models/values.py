class ValueEquality:
    """Equality over the attributes listed in ``_value_fields``.

    Instances stay unhashable: they are mutable and the session tracks them
    by identity anyway.
    """

    _value_fields = ()

    def _values(self) -> tuple:
        return tuple(getattr(self, name) for name in self._value_fields)

    def __eq__(self, other):
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return self._values() == other._values()

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={getattr(self, name)!r}" for name in self._value_fields)
        return f"{type(self).__name__}({fields})"
