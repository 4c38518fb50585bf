# Unit tests for utils/index.py

import pytest
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'snap-project'))

from utils import index as index_utils, config
from utils.errors import MalformedIndex

HASH_A = 'a' * 40
HASH_B = 'b' * 40
HASH_C = 'c' * 40


def _index_path(repo_root):
    return os.path.join(repo_root, '.store-root', 'index')


class TestReadIndex:
    """Tests for index_utils.read_index()"""

    def test_read_empty_index(self, temp_repo):
        """Should return empty dict for a freshly initialized repository."""
        assert index_utils.read_index(temp_repo) == {}

    def test_missing_index_file_is_empty(self, temp_repo):
        """An absent index file is a valid empty index."""
        os.remove(_index_path(temp_repo))
        assert index_utils.read_index(temp_repo) == {}

    def test_read_entries_in_file_order(self, temp_repo):
        """Should parse `hash path` lines and keep their order."""
        with open(_index_path(temp_repo), 'w') as f:
            f.write(f"{HASH_B} z_last.txt\n")
            f.write(f"{HASH_A} a_first.txt\n")

        result = index_utils.read_index(temp_repo)

        assert list(result.items()) == [('z_last.txt', HASH_B), ('a_first.txt', HASH_A)]

    def test_paths_with_spaces(self, temp_repo):
        """Only the first space separates hash and path."""
        with open(_index_path(temp_repo), 'w') as f:
            f.write(f"{HASH_A} my documents/notes v2.txt\n")

        assert index_utils.read_index(temp_repo) == {'my documents/notes v2.txt': HASH_A}

    def test_malformed_lines_skipped_with_warning(self, temp_repo, capsys):
        """Lines without a hash and a path are dropped, and each one is reported."""
        with open(_index_path(temp_repo), 'w') as f:
            f.write("garbage\n")
            f.write(f"{HASH_A} good.txt\n")
            f.write(f"{HASH_B}\n")

        result = index_utils.read_index(temp_repo)

        assert result == {'good.txt': HASH_A}
        err = capsys.readouterr().err
        assert "warning: skipping malformed index line 1" in err
        assert "warning: skipping malformed index line 3" in err

    def test_malformed_lines_rejected_when_strict(self, temp_repo):
        """With core.strict the first malformed line raises."""
        config.write_config(temp_repo, 'core.strict', 'true')
        with open(_index_path(temp_repo), 'w') as f:
            f.write(f"{HASH_A} good.txt\n")
            f.write("garbage\n")

        with pytest.raises(MalformedIndex) as excinfo:
            index_utils.read_index(temp_repo)
        assert excinfo.value.line_number == 2


class TestWriteIndex:
    """Tests for index_utils.write_index()"""

    def test_write_keeps_insertion_order(self, temp_repo):
        """Should write entries in the dict's order, not sorted."""
        index = {
            'z_last.txt': HASH_C,
            'a_first.txt': HASH_A,
            'm_middle.txt': HASH_B,
        }

        index_utils.write_index(temp_repo, index)

        with open(_index_path(temp_repo), 'r') as f:
            lines = f.readlines()

        assert lines == [
            f"{HASH_C} z_last.txt\n",
            f"{HASH_A} a_first.txt\n",
            f"{HASH_B} m_middle.txt\n",
        ]

    def test_write_replaces_previous_content(self, temp_repo):
        index_utils.write_index(temp_repo, {'one.txt': HASH_A, 'two.txt': HASH_B})
        index_utils.write_index(temp_repo, {'two.txt': HASH_B})

        assert index_utils.read_index(temp_repo) == {'two.txt': HASH_B}

    def test_no_temporary_file_left_behind(self, temp_repo):
        index_utils.write_index(temp_repo, {'one.txt': HASH_A})
        assert not os.path.exists(_index_path(temp_repo) + '.tmp')


class TestStage:
    """Tests for index_utils.stage()"""

    def test_appends_new_paths(self, temp_repo):
        index_utils.stage(temp_repo, 'b.txt', HASH_B)
        index_utils.stage(temp_repo, 'a.txt', HASH_A)

        assert list(index_utils.read_index(temp_repo)) == ['b.txt', 'a.txt']

    def test_restaging_updates_in_place(self, temp_repo):
        """Re-staging keeps one entry per path, at its original position."""
        index_utils.stage(temp_repo, 'a.txt', HASH_A)
        index_utils.stage(temp_repo, 'b.txt', HASH_B)
        index_utils.stage(temp_repo, 'a.txt', HASH_C)

        result = index_utils.read_index(temp_repo)

        assert list(result.items()) == [('a.txt', HASH_C), ('b.txt', HASH_B)]

    @pytest.mark.parametrize('path', ['', 'two\nlines.txt'])
    def test_rejects_unrepresentable_paths(self, temp_repo, path):
        with pytest.raises(ValueError):
            index_utils.stage(temp_repo, path, HASH_A)


class TestUndecodableBytes:
    """Index lines that are not valid UTF-8"""

    def test_undecodable_line_skipped_with_warning(self, temp_repo, capsys):
        """A line of raw garbage bytes is malformed, not fatal."""
        with open(_index_path(temp_repo), 'wb') as f:
            f.write(b'\xff\xfe garbage\n' + HASH_A.encode() + b' good.txt\n')

        result = index_utils.read_index(temp_repo)

        assert result == {'good.txt': HASH_A}
        assert "warning: skipping malformed index line 1" in capsys.readouterr().err

    def test_undecodable_line_rejected_when_strict(self, temp_repo):
        config.write_config(temp_repo, 'core.strict', 'true')
        with open(_index_path(temp_repo), 'wb') as f:
            f.write(b'\xff\xfe garbage\n')

        with pytest.raises(MalformedIndex):
            index_utils.read_index(temp_repo)

    def test_non_utf8_path_round_trips(self, temp_repo):
        """Path bytes are written back exactly as they were read."""
        path = b'caf\xe9.txt'.decode('utf-8', 'surrogateescape')

        index_utils.stage(temp_repo, path, HASH_A)

        with open(_index_path(temp_repo), 'rb') as f:
            assert f.read() == HASH_A.encode() + b' caf\xe9.txt\n'
        assert index_utils.read_index(temp_repo) == {path: HASH_A}
