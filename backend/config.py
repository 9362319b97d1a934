import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Listening socket used by run.py
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '3001'))
    # Comma-separated origins; '*' allows any origin
    CORS_ALLOWED_ORIGINS = os.environ.get('CORS_ALLOWED_ORIGINS', '*')
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    # Room rules
    ROOM_CODE_LENGTH = int(os.environ.get('ROOM_CODE_LENGTH', '4'))
    MAX_PLAYERS = int(os.environ.get('MAX_PLAYERS', '4'))
    MIN_PLAYERS = int(os.environ.get('MIN_PLAYERS', '2'))
    # Hold time between roundComplete and newRound (seconds)
    NEW_ROUND_DELAY_SEC = float(os.environ.get('NEW_ROUND_DELAY_SEC', '5'))
