"""Exception hierarchy for Pathsketch."""


class PathsketchError(Exception):
    """Base exception for all Pathsketch errors."""

    pass


class GeometryError(PathsketchError):
    """Errors in shape structure or geometric operations."""

    pass


class VertexNotFoundError(GeometryError):
    """Referenced vertex is not a member of the path."""

    def __init__(self, position: object) -> None:
        self.position = position
        super().__init__(f"Vertex at {position} is not on the path")


class EdgeNotFoundError(GeometryError):
    """Referenced edge is not a member of the path."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"{kind} edge is not on the path")


class InvalidEdgeArityError(GeometryError):
    """Curved edge constructed with the wrong number of control points."""

    def __init__(self, kind: str, expected: int, actual: int) -> None:
        self.kind = kind
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{kind} edge needs exactly {expected} control point(s), got {actual}"
        )


class EdgeKindError(GeometryError):
    """Operation is not supported by this kind of edge."""

    def __init__(self, kind: str, operation: str) -> None:
        self.kind = kind
        self.operation = operation
        super().__init__(f"{kind} edge does not support '{operation}'")


class SerializationError(PathsketchError):
    """Malformed or unknown serialized entity."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class SketchError(PathsketchError):
    """Errors related to sketch documents."""

    pass


class SketchLoadError(SketchError):
    """Error loading a sketch document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load sketch '{path}': {reason}")


class SketchSaveError(SketchError):
    """Error saving a sketch document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save sketch '{path}': {reason}")
