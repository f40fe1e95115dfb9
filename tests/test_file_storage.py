import io
import os

from werkzeug.datastructures import FileStorage

from edu_portal.services.file_storage import LocalFileStorage


def upload(content, filename):
    return FileStorage(stream=io.BytesIO(content), filename=filename)


def test_save_uses_timestamp_and_sanitized_name(tmp_path):
    storage = LocalFileStorage(str(tmp_path / 'files'), '/uploads/')

    url = storage.save(upload(b'data', '../../etc/my report.pdf'))

    name = url.rsplit('/', 1)[-1]
    timestamp, _, original = name.partition('-')
    assert url == f'/uploads/{name}'
    assert timestamp.isdigit()
    assert original == 'etc_my_report.pdf'
    assert (tmp_path / 'files' / name).read_bytes() == b'data'


def test_unusable_names_fall_back(tmp_path):
    storage = LocalFileStorage(str(tmp_path))

    url = storage.save(upload(b'x', 'واجب.pdf'))

    assert url.endswith('-pdf') or url.endswith('-upload')


def test_same_name_twice_does_not_overwrite(tmp_path):
    storage = LocalFileStorage(str(tmp_path))

    first = storage.save(upload(b'one', 'a.txt'))
    second = storage.save(upload(b'two', 'a.txt'))

    assert first != second
    assert len(os.listdir(tmp_path)) == 2


def test_delete(tmp_path):
    storage = LocalFileStorage(str(tmp_path))
    url = storage.save(upload(b'x', 'a.txt'))

    storage.delete(url)
    storage.delete(url)

    assert os.listdir(tmp_path) == []
