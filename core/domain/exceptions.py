"""Domain exceptions."""


class EntityNotFoundError(Exception):
    """Raised when an id-based lookup matches no row."""

    def __init__(self, entity: str, entity_id: int) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")
