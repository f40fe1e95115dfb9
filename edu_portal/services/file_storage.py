"""
File Storage
Flat upload directory served back under a public URL prefix
"""
import logging
import os

from werkzeug.utils import secure_filename

from edu_portal.utils.helpers import now_millis

logger = logging.getLogger(__name__)


class LocalFileStorage:
    """Stores uploads as <epoch-ms>-<sanitized original name>"""

    def __init__(self, directory, url_prefix='/uploads'):
        self.directory = directory
        self.url_prefix = url_prefix.rstrip('/')

    def init_directory(self):
        if not os.path.isdir(self.directory):
            os.makedirs(self.directory, exist_ok=True)
            logger.info("Created upload directory %s", self.directory)

    def generate_name(self, original_name):
        safe_name = secure_filename(original_name or '') or 'upload'
        return f"{now_millis()}-{safe_name}"

    def save(self, file):
        """
        Store a werkzeug FileStorage

        Returns:
            str: public URL of the stored file
        """
        self.init_directory()
        name = self.generate_name(file.filename)
        # Same name within the same millisecond
        while os.path.exists(os.path.join(self.directory, name)):
            name = self.generate_name(f"{os.urandom(2).hex()}-{file.filename}")
        file.save(os.path.join(self.directory, name))
        logger.debug("Stored upload %s", name)
        return f"{self.url_prefix}/{name}"

    def path_for(self, url):
        name = url.rsplit('/', 1)[-1]
        return os.path.join(self.directory, name)

    def delete(self, url):
        """Remove a stored file; already-missing files are ignored"""
        try:
            os.remove(self.path_for(url))
        except FileNotFoundError:
            pass
