"""
Flask Extensions
Centralized extension initialization
"""
from flask_cors import CORS
from flask_sqlalchemy import SQLAlchemy
from flask_socketio import SocketIO

# Initialize extensions (without app binding)
db = SQLAlchemy()
socketio = SocketIO()
cors = CORS()

# Socket.IO room that receives live submission notifications
TEACHERS_ROOM = 'teachers'
