class RoomError(Exception):
    """Base class for join failures reported back to the requesting socket."""

    message = 'Room error'

    def __init__(self, message=None):
        if message:
            self.message = message
        super().__init__(self.message)

    def to_payload(self):
        return {'message': self.message}


class RoomNotFound(RoomError):
    message = 'Room does not exist'


class GameInProgress(RoomError):
    message = 'Game already in progress'


class RoomFull(RoomError):
    message = 'Room is full'
