import itertools
import os
import tempfile

import pytest

from hmm.editor import EditorBridge
from hmm.errors import DecodeError, EditorLaunchError, TempFileCreateError
from hmm.process import ProcessResult


def scratch_files():
    return [f for f in os.listdir(tempfile.gettempdir()) if f.startswith('hmm-')]


def test_edit(fs, runner):
    runner.edit = lambda text: text + 'edited\n'
    editor = EditorBridge(['vi'], runner)
    assert editor.edit('# ls') == '# ls\nedited\n'
    assert runner.seen_by_editor == ['# ls\n']
    args, input = runner.calls[0]
    assert args[0] == 'vi'
    assert os.path.dirname(args[1]) == tempfile.gettempdir()
    assert input is None
    assert scratch_files() == []


def test_edit_keeps_trailing_newline(fs, runner):
    runner.edit = lambda text: text
    editor = EditorBridge(['vi'], runner)
    assert editor.edit('# ls\n') == '# ls\n'


def test_edit_command_args(fs, runner):
    runner.edit = lambda text: text
    editor = EditorBridge(['code', '--wait'], runner, scratch_dir='/scratch')
    fs.create_dir('/scratch')
    editor.edit('hi')
    args, _ = runner.calls[0]
    assert args[:2] == ['code', '--wait']
    assert args[2].startswith('/scratch/hmm-')
    assert os.listdir('/scratch') == []


def test_scratch_names_unique(fs, runner, mocker):
    mocker.patch('shortuuid.uuid', side_effect=(f'uuid{i}' for i in itertools.count(1)))
    runner.edit = lambda text: text
    fs.create_dir('/scratch')
    editor = EditorBridge(['vi'], runner, scratch_dir='/scratch')
    editor.edit('one')
    editor.edit('two')
    assert [args[1] for args, _ in runner.calls] == ['/scratch/hmm-uuid1.md', '/scratch/hmm-uuid2.md']


def test_edit_nonzero_exit(fs, runner):
    runner.exit_codes['vi'] = 1
    editor = EditorBridge(['vi'], runner)
    with pytest.raises(EditorLaunchError, match='exit status 1'):
        editor.edit('# ls')
    assert scratch_files() == []


def test_edit_missing_editor(fs, runner):
    runner.missing.add('nano')
    editor = EditorBridge(['nano'], runner)
    with pytest.raises(EditorLaunchError, match='nano'):
        editor.edit('# ls')
    assert scratch_files() == []


def test_scratch_dir_missing(fs, runner):
    editor = EditorBridge(['vi'], runner, scratch_dir='/does/not/exist')
    with pytest.raises(TempFileCreateError):
        editor.edit('# ls')
    assert runner.calls == []


def test_empty_command(runner):
    with pytest.raises(ValueError):
        EditorBridge([], runner)


def test_edit_saved_not_utf8(fs, runner, mocker):
    def save_latin1(args, input=None):
        with open(args[-1], 'wb') as file:
            file.write(b'caf\xe9\n')
        return ProcessResult(0)

    mocker.patch.object(runner, 'run', side_effect=save_latin1)
    fs.create_dir('/scratch')
    editor = EditorBridge(['vi'], runner, scratch_dir='/scratch')
    with pytest.raises(DecodeError) as excinfo:
        editor.edit('# ls')
    # the scratch file is kept so the edit is not lost
    assert os.listdir('/scratch') == [os.path.basename(excinfo.value.path)]
    with open(excinfo.value.path, 'rb') as file:
        assert file.read() == b'caf\xe9\n'
