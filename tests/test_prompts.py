import pytest

from hmm.errors import PromptCancelled
from hmm.prompts import TerminalPrompter


def test_confirm(mocker):
    prompt = mocker.patch('hmm.prompts.prompt', side_effect=['', 'n', 'YES', 'maybe', 'no'])
    prompter = TerminalPrompter()
    assert prompter.confirm('Create one?')
    assert not prompter.confirm('Create one?')
    assert prompter.confirm('Create one?', default=False)
    # unrecognized answers ask again
    assert not prompter.confirm('Create one?')
    assert prompt.call_args_list[0] == mocker.call('Create one? [Y/n] ')
    assert prompt.call_args_list[2] == mocker.call('Create one? [y/N] ')
    assert prompt.call_count == 5


def test_confirm_empty_answer_uses_default(mocker):
    mocker.patch('hmm.prompts.prompt', return_value='  ')
    assert not TerminalPrompter().confirm('Create one?', default=False)


def test_confirm_cancelled(mocker):
    mocker.patch('hmm.prompts.prompt', side_effect=KeyboardInterrupt)
    with pytest.raises(PromptCancelled):
        TerminalPrompter().confirm('Create one?')


def test_select(mocker):
    dialog = mocker.patch('hmm.prompts.radiolist_dialog')
    dialog.return_value.run.return_value = 'ls'
    assert TerminalPrompter().select('Which Command', ['grep', 'ls']) == 'ls'
    dialog.assert_called_once_with(title='hmm', text='Which Command', values=[('grep', 'grep'), ('ls', 'ls')])


def test_select_cancelled(mocker):
    dialog = mocker.patch('hmm.prompts.radiolist_dialog')
    dialog.return_value.run.return_value = None
    assert TerminalPrompter().select('Which Command', ['grep', 'ls']) is None
