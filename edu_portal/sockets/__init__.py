"""
Sockets Package
"""
from edu_portal.sockets.teacher_events import register_socket_events, notify_attempt_submitted

__all__ = ['register_socket_events', 'notify_attempt_submitted']
