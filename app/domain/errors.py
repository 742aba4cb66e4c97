"""Typed failures raised by the domain services."""


class EntityNotFoundError(Exception):
    """A referenced id has no corresponding record in the store."""

    def __init__(self, entity: str, entity_id: int) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"Can't find a {entity} with id '{entity_id}'")
