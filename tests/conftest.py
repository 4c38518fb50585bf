# Shared pytest fixtures for Snap VCS tests

import pytest
import os
import sys
import shutil
import tempfile

# Add snap-project to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'snap-project'))

from commands import add, commit
from utils import repository


@pytest.fixture
def temp_dir():
    # Creates a temporary directory that is cleaned up after the test
    # Also saves/restores cwd to prevent issues when tests change directories
    original_dir = os.getcwd()
    tmp = os.path.realpath(tempfile.mkdtemp())
    yield tmp
    os.chdir(original_dir)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def temp_repo(temp_dir):
    # Creates an initialized Snap repository in a temporary directory
    original_dir = os.getcwd()
    os.chdir(temp_dir)

    repository.init_repository(temp_dir)

    yield temp_dir

    os.chdir(original_dir)


def write_file(repo_root, rel_path, content):
    # Writes a working-tree file (bytes or str) and returns its absolute path
    file_path = os.path.join(repo_root, rel_path)
    os.makedirs(os.path.dirname(file_path), exist_ok=True)
    mode = 'wb' if isinstance(content, bytes) else 'w'
    with open(file_path, mode) as f:
        f.write(content)
    return file_path


@pytest.fixture
def repo_with_file(temp_repo):
    # Creates a repo with a single file (not staged)
    write_file(temp_repo, 'test.txt', 'Hello, World!')
    return temp_repo


@pytest.fixture
def repo_with_commit(temp_repo):
    # Creates a repo with one committed file
    file_path = write_file(temp_repo, 'README.md', '# Test Project\n')
    add.stage_file(temp_repo, file_path)
    commit_hash = commit.create_commit(temp_repo, 'Initial commit', timestamp='2024-01-01 12:00:00')
    return temp_repo, commit_hash


# Mock args object for command functions
class MockArgs:
    def __init__(self, **kwargs):
        for key, value in kwargs.items():
            setattr(self, key, value)
