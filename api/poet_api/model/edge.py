class Edge:
    def __init__(self, source: str, target: str, weight: int):
        self._source = source
        self._target = target
        self._weight = weight

    @property
    def source(self) -> str:
        return self._source

    @property
    def target(self) -> str:
        return self._target

    @property
    def weight(self) -> int:
        return self._weight

    def to_dict(self) -> dict:
        return {
            "source": self._source,
            "target": self._target,
            "weight": self._weight,
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return (self._source, self._target, self._weight) == (other._source, other._target, other._weight)

    def __hash__(self) -> int:
        return hash((self._source, self._target, self._weight))

    def __repr__(self) -> str:
        return f"Edge({self._source} -> {self._target}, weight={self._weight})"
