"""
Client-input errors raised by the entry and blog services.

Every error is a werkzeug `HTTPException`, so the JSON error handler
registered by the application factory renders it like any other HTTP error.
The `error_key` of a `BadRequestAlertException` is a stable string that API
clients can rely on.
"""
from werkzeug.exceptions import BadRequest, NotFound


class BadRequestAlertException(BadRequest):
    """400 error that carries the entity name and a stable error key."""

    def __init__(self, description: str, entity_name: str, error_key: str):
        super().__init__(description)
        self.entity_name = entity_name
        self.error_key = error_key


class IdExistsError(BadRequestAlertException):
    def __init__(self, entity_name: str = 'entry'):
        super().__init__(f'A new {entity_name} cannot already have an ID', entity_name, 'idexists')


class IdMissingError(BadRequestAlertException):
    def __init__(self, entity_name: str = 'entry'):
        super().__init__('Invalid id', entity_name, 'idnull')


class InvalidEmojiError(BadRequestAlertException):
    def __init__(self, entity_name: str = 'entry'):
        super().__init__('Invalid Emoji', entity_name, 'invalidEmoji')


class InvalidContentError(BadRequestAlertException):
    def __init__(self, marker: str = None, entity_name: str = 'entry'):
        super().__init__('Invalid Content', entity_name, 'invalidContent')
        # Marker word that triggered the rejection (logged, not sent to the client)
        self.marker = marker


class EntityNotFoundError(NotFound):
    def __init__(self, entity_name: str, index: int):
        super().__init__(f'No {entity_name} found with id {index}')
        self.entity_name = entity_name
        self.index = index
