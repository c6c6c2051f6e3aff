import pytest

from tunekit.input_block import InputBlock, InputState


class Item:
    def __init__(self, hover=True, touch=True, buttons=7):
        self.accept_hover_events = hover
        self.accept_touch_events = touch
        self.accepted_mouse_buttons = buttons

    def state(self):
        return (self.accept_hover_events, self.accept_touch_events, self.accepted_mouse_buttons)


def test_state_save_restore_round_trip():
    source = Item(True, False, 3)
    dest = Item(False, True, 0)
    state = InputState()
    state.save(source)
    state.restore(dest)
    assert dest.state() == source.state()


def test_when_blocks_and_unblocks_target():
    item = Item()
    block = InputBlock()
    block.target = item
    block.when = True
    assert item.state() == (False, False, 0)
    block.when = False
    assert item.state() == (True, True, 7)


def test_changing_target_restores_previous_one():
    first, second = Item(True, True, 1), Item(True, False, 2)
    block = InputBlock()
    block.target = first
    block.when = True
    block.target = second
    assert first.state() == (True, True, 1)
    assert second.state() == (False, False, 0)


def test_signal_listeners_called():
    block = InputBlock()
    calls = []
    block.connect("when_changed", lambda: calls.append(block.when))
    block.when = True
    block.when = True
    block.when = False
    assert calls == [True, False]


def test_requested_change_signal_needs_previous_value():
    block = InputBlock()
    calls = []
    block.connect("accept_hover_events_changed", lambda: calls.append(block.accept_hover))
    block.accept_hover = True
    assert calls == []
    block.accept_hover = False
    assert calls == [False]


def test_requested_state_applied_when_blocking():
    item = Item(False, False, 0)
    block = InputBlock()
    block.target = item
    block.accept_touch = True
    block.accept_mouse_buttons = 4
    block.when = True
    assert item.state() == (False, True, 4)


def test_unknown_signal_raises():
    block = InputBlock()
    with pytest.raises(ValueError):
        block.connect("clicked", lambda: None)