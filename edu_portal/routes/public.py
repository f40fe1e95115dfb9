from flask import Blueprint, current_app, send_from_directory

public_bp = Blueprint('public', __name__)


@public_bp.route('/uploads/<path:filename>')
def uploaded_file(filename):
    """Serve an uploaded answer file by its stored name"""
    storage = current_app.extensions['file_storage']
    return send_from_directory(storage.directory, filename)
