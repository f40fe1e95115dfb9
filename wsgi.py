"""
Production WSGI Entry Point
Used by gunicorn and other WSGI servers
"""
import os
from edu_portal import create_app
from edu_portal.extensions import socketio

# Create Flask app
app = create_app()

# For development server
if __name__ == '__main__':
    # In production, use: gunicorn -w 1 --threads 8 wsgi:app
    port = int(os.getenv('PORT', 3000))

    socketio.run(
        app,
        host='0.0.0.0',
        port=port,
        debug=app.config.get('DEBUG', False),
        use_reloader=False,
        # Local runs only; Flask-SocketIO refuses werkzeug outside debug without it
        allow_unsafe_werkzeug=True
    )
