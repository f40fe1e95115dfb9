"""
Socket.IO Event Handlers
Live submission feed for the teacher dashboard
"""
import logging

from flask_socketio import emit, join_room, leave_room

from edu_portal.extensions import socketio, TEACHERS_ROOM

logger = logging.getLogger(__name__)


def register_socket_events():
    """Register all Socket.IO event handlers"""

    @socketio.on('join_teacher_dashboard')
    def join_teacher_dashboard(data=None):
        """Teacher dashboard subscribes to live submissions"""
        join_room(TEACHERS_ROOM)
        emit('joined', {'room': TEACHERS_ROOM})
        logger.debug('Client joined %s room', TEACHERS_ROOM)

    @socketio.on('leave_teacher_dashboard')
    def leave_teacher_dashboard(data=None):
        leave_room(TEACHERS_ROOM)


def notify_attempt_submitted(payload):
    """
    Push a committed attempt to connected teachers.
    Best-effort: the submission is already stored, so failures are only logged.
    """
    try:
        socketio.emit('attempt_submitted', payload, to=TEACHERS_ROOM)
    except Exception:
        logger.error('Could not notify teachers of attempt %s', payload.get('attempt_id'), exc_info=True)
