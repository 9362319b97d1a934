class SocketIOBroadcaster:
    """Connection layer on top of a Flask-SocketIO server.

    Channels are Socket.IO rooms named after the room code. Works inside and
    outside a request context, so background tasks can broadcast too.
    """

    def __init__(self, socketio, namespace='/'):
        self._socketio = socketio
        self.namespace = namespace

    def subscribe(self, sid, channel):
        self._socketio.server.enter_room(sid, channel, namespace=self.namespace)

    def unsubscribe(self, sid, channel):
        self._socketio.server.leave_room(sid, channel, namespace=self.namespace)

    def send_to(self, sid, event, payload):
        self._socketio.emit(event, payload, to=sid, namespace=self.namespace)

    def broadcast(self, channel, event, payload):
        self._socketio.emit(event, payload, to=channel, namespace=self.namespace)

    def broadcast_except(self, channel, exclude_sid, event, payload):
        self._socketio.emit(event, payload, to=channel, skip_sid=exclude_sid, namespace=self.namespace)
